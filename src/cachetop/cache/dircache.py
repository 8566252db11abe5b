"""Lazy, memoized size and listing of a single cache root."""

from __future__ import annotations

import logging
from pathlib import Path

from cachetop.exceptions import UnrecoverableFilesystemError
from cachetop.scanner.walker import directory_size

logger = logging.getLogger(__name__)


class DirCache:
    """Computes the total size and entry listing of *path* at most once.

    Values stay cached until :meth:`invalidate` is called. The object is
    owned by whoever builds the report; nothing is shared between instances.
    """

    def __init__(self, path: Path, *, workers: int | None = None) -> None:
        self.path = Path(path)
        self._workers = workers
        self._total_size: int | None = None
        self._entries: tuple[Path, ...] | None = None
        self._entries_sorted: tuple[Path, ...] | None = None

    def exists(self) -> bool:
        """Return True when the cache root is an existing directory."""
        return self.path.is_dir()

    def invalidate(self) -> None:
        """Drop memoized values so the next read walks the disk again."""
        self._total_size = None
        self._entries = None
        self._entries_sorted = None

    def total_size(self) -> int:
        """Recursive byte size of the cache root."""
        if self._total_size is None:
            logger.debug("Computing total size of %s", self.path)
            self._total_size = directory_size(self.path, workers=self._workers)
        return self._total_size

    def entries_natural_order(self) -> tuple[Path, ...]:
        """Immediate children of the root in filesystem enumeration order."""
        if self._entries is None:
            self._entries = self._list_entries()
        return self._entries

    def entries(self) -> tuple[Path, ...]:
        """Immediate children of the root sorted by path."""
        if self._entries_sorted is None:
            self._entries_sorted = tuple(sorted(self.entries_natural_order()))
        return self._entries_sorted

    def _list_entries(self) -> tuple[Path, ...]:
        try:
            return tuple(self.path.iterdir())
        except FileNotFoundError:
            return ()
        except OSError as exc:
            raise UnrecoverableFilesystemError(self.path, exc) from exc
