"""Journal directory loading for journalmetrics."""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Protocol

from journalmetrics.metrics.observability import PipelineMetrics, get_logger


class JournalError(RuntimeError):
    """Base error for journal loading and reporting."""


class JournalLoadError(JournalError):
    """Raised when the journal directory or one of its files cannot be read."""


@dataclass(frozen=True)
class LoaderConfig:
    """Configuration for journal directory loading."""

    file_extension: str = ".md"
    encoding: str = "utf-8"
    date_separator: str = "-"
    template_marker: str = "{{"


class JournalLoader(Protocol):
    """Protocol for journal sources."""

    def load(self) -> Mapping[str, str]:
        """Return raw journal text keyed by date."""


def date_key(file_name: str, separator: str = "-") -> str | None:
    """Return the date key of a journal file name, or None when it has none.

    The key is everything before the first separator, so ``20240105-daily.md``
    maps to ``20240105``.
    """

    parts = file_name.split(separator)
    if len(parts) < 2:
        return None
    return parts[0]


class DirectoryJournalLoader:
    """Read every journal file of a single, non-recursive directory."""

    _logger = get_logger("ingestion")

    def __init__(self, directory: Path, config: LoaderConfig | None = None) -> None:
        self._directory = Path(directory)
        self._config = config or LoaderConfig()

    @property
    def directory(self) -> Path:
        return self._directory

    def load(self) -> Mapping[str, str]:
        start = time.perf_counter()
        try:
            entries = sorted(self._directory.iterdir(), key=lambda entry: entry.name)
        except OSError as exc:
            raise JournalLoadError(f"Failed to read directory {self._directory}: {exc}") from exc

        documents: Dict[str, str] = {}
        for entry in entries:
            key = self._accept(entry)
            if key is None:
                continue
            try:
                text = entry.read_text(encoding=self._config.encoding)
            except (OSError, UnicodeDecodeError) as exc:
                raise JournalLoadError(f"Failed to read file {entry.name}: {exc}") from exc
            if key in documents:
                self._logger.warning("journal.duplicate_date", date=key, path=str(entry))
            documents[key] = text

        duration = time.perf_counter() - start
        PipelineMetrics.observe_load(duration)
        self._logger.info(
            "journal.loaded",
            directory=str(self._directory),
            document_count=len(documents),
            duration_seconds=duration,
        )
        return documents

    def _accept(self, entry: Path) -> str | None:
        name = entry.name
        if entry.is_symlink() or not entry.is_file() or not name.endswith(self._config.file_extension):
            return None
        if self._config.template_marker and self._config.template_marker in name:
            PipelineMetrics.record_skip("template")
            self._logger.debug("journal.skipped", path=str(entry), reason="template")
            return None
        key = date_key(name, self._config.date_separator)
        if key is None:
            PipelineMetrics.record_skip("name")
            self._logger.debug("journal.skipped", path=str(entry), reason="name")
        return key


def load_directory(directory: Path, *, config: LoaderConfig | None = None) -> Mapping[str, str]:
    """Convenience helper for tests and ad-hoc reports."""

    return DirectoryJournalLoader(directory, config=config).load()
