"""Runtime configuration for the journalmetrics service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed configuration model."""

    model_config = SettingsConfigDict(env_prefix="journalmetrics_", env_file=".env", case_sensitive=False)

    environment: Literal["dev", "test", "prod"] = "dev"

    # Journal source
    journal_dir: Path = Path("~/ruby/exo/daily")
    file_extension: str = ".md"
    encoding: str = "utf-8"

    # Adds workTime and weightVolume to every record
    include_extended_metrics: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    # CORS
    cors_allow_origins: tuple[str, ...] = ()  # e.g., ("*") to allow all
    cors_allow_credentials: bool = False
    cors_allow_methods: tuple[str, ...] = ("GET", "HEAD", "OPTIONS")
    cors_allow_headers: tuple[str, ...] = ("*",)

    @property
    def resolved_journal_dir(self) -> Path:
        return self.journal_dir.expanduser()


@lru_cache(maxsize=1)
def _cached_settings() -> Settings:
    return Settings()


def get_settings(override: Optional[dict[str, object]] = None) -> Settings:
    """Return settings, optionally overriding values without mutating cache."""

    if override:
        return Settings(**override)
    return _cached_settings()
