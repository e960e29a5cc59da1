"""Journal directory loading."""

from .service import (
    DirectoryJournalLoader,
    JournalError,
    JournalLoadError,
    JournalLoader,
    LoaderConfig,
    load_directory,
)

__all__ = [
    "DirectoryJournalLoader",
    "JournalError",
    "JournalLoadError",
    "JournalLoader",
    "LoaderConfig",
    "load_directory",
]
