"""Build name/size descriptors for top-level cache entries."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from cachetop.exceptions import UnrecoverableFilesystemError
from cachetop.model import Descriptor
from cachetop.scanner.identity import decode_name
from cachetop.scanner.walker import directory_size

logger = logging.getLogger(__name__)


def describe_entry(path: Path, *, workers: int | None = None) -> Descriptor:
    """Decode the logical name of *path* and measure its subtree."""
    name = decode_name(path.name)
    if not name:
        logger.warning("No disambiguator in %s; counting it under an empty name", path)
    return Descriptor(name=name, size=directory_size(path, workers=workers), path=path)


def flat_descriptors(entries: Iterable[Path], *, workers: int | None = None) -> list[Descriptor]:
    """One descriptor per entry, in the order the entries are given."""
    return [describe_entry(path, workers=workers) for path in entries]


def list_nested_entries(index_dirs: Iterable[Path]) -> list[Path]:
    """Collect the children of every index directory, sorted by path.

    Registry layouts keep one directory per package index
    (``registry/src/<index>-<hash>/<crate>-<version>``); the packages are
    the children of those index directories.
    """
    collected: list[Path] = []
    for index_dir in index_dirs:
        if not index_dir.is_dir():
            continue
        try:
            collected.extend(index_dir.iterdir())
        except FileNotFoundError:
            logger.debug("Skipping vanished index directory: %s", index_dir)
        except OSError as exc:
            raise UnrecoverableFilesystemError(index_dir, exc) from exc
    return sorted(collected)


def nested_descriptors(index_dirs: Iterable[Path], *, workers: int | None = None) -> list[Descriptor]:
    """One descriptor per package found under the given index directories."""
    return flat_descriptors(list_nested_entries(index_dirs), workers=workers)
