"""Filesystem-related exceptions."""

from __future__ import annotations

from pathlib import Path

from cachetop.exceptions.base import CachetopError


class CacheHomeError(CachetopError, FileNotFoundError):
    """Raised when the cache home directory does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Error, no cache home directory '{path}' found.")
        self.path = path


class UnrecoverableFilesystemError(CachetopError, OSError):
    """Raised when metadata of a path that still exists cannot be read.

    A consistently unreadable entry means the cache is in a state the walker
    cannot account for, so the run is aborted instead of reporting a partial
    total.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Failed to get metadata of '{path}': {cause}")
        self.path = path
        self.cause = cause
