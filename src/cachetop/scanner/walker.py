"""Recursive byte accounting for directory subtrees."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from cachetop.exceptions import UnrecoverableFilesystemError

logger = logging.getLogger(__name__)


def resolve_workers(workers: int | None) -> int:
    """Return the worker bound for metadata reads."""
    if workers is None:
        return os.cpu_count() or 1
    if workers < 1:
        raise ValueError(f"workers must be a positive integer, got {workers}")
    return workers


def directory_size(root: Path, *, workers: int | None = None) -> int:
    """Sum the sizes of all regular files below *root*.

    Entries deleted while the walk is in progress are skipped. Any other
    metadata failure raises :class:`UnrecoverableFilesystemError`. A missing
    root counts as empty and a root that is a regular file counts as itself.
    """
    root = Path(root)
    try:
        root_stat = root.stat()
    except FileNotFoundError:
        return 0
    except OSError as exc:
        raise UnrecoverableFilesystemError(root, exc) from exc

    if not stat.S_ISDIR(root_stat.st_mode):
        return root_stat.st_size if stat.S_ISREG(root_stat.st_mode) else 0

    files = list(iter_files(root))
    if not files:
        return 0

    with ThreadPoolExecutor(max_workers=resolve_workers(workers)) as pool:
        return sum(pool.map(file_size, files))


def iter_files(root: Path) -> Iterator[Path]:
    """Yield every non-directory entry below *root* without following symlinks."""
    for dirpath, _dirnames, filenames in root.walk(on_error=_raise_unless_vanished):
        for filename in filenames:
            yield dirpath / filename


def file_size(path: Path) -> int:
    """Return the byte length of *path*, or 0 when it is gone or not a regular file."""
    try:
        path_stat = path.stat()
    except FileNotFoundError:
        logger.debug("Skipping vanished entry: %s", path)
        return 0
    except OSError as exc:
        raise UnrecoverableFilesystemError(path, exc) from exc

    if not stat.S_ISREG(path_stat.st_mode):
        return 0
    return path_stat.st_size


def _raise_unless_vanished(exc: OSError) -> None:
    if isinstance(exc, FileNotFoundError):
        logger.debug("Skipping vanished directory: %s", exc.filename)
        return
    raise UnrecoverableFilesystemError(Path(exc.filename or ""), exc) from exc
