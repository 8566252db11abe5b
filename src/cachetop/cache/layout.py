"""Cache categories inside a package-manager cache home."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from cachetop.cache.dircache import DirCache
from cachetop.constants.config import CACHE_HOME_ENV_VAR, DEFAULT_CACHE_HOME_DIRNAME
from cachetop.constants.layout import (
    CATEGORY_RELATIVE_PATHS,
    GIT_CHECKOUTS_CATEGORY,
    GIT_DB_CATEGORY,
    REGISTRY_CACHE_CATEGORY,
    REGISTRY_SRC_CATEGORY,
)
from cachetop.exceptions import CacheHomeError


@dataclass(frozen=True)
class CacheCategory:
    """How one cache category is laid out and reported.

    ``nested`` categories hold index directories whose children are the
    packages; flat categories hold the packages directly. ``header_total``
    adds the memoized root size to the report header.
    """

    name: str
    relative_path: tuple[str, ...]
    nested: bool
    header_total: bool

    def root_in(self, home: Path) -> Path:
        return home.joinpath(*self.relative_path)


CATEGORIES: dict[str, CacheCategory] = {
    GIT_DB_CATEGORY: CacheCategory(
        name=GIT_DB_CATEGORY,
        relative_path=CATEGORY_RELATIVE_PATHS[GIT_DB_CATEGORY],
        nested=False,
        header_total=True,
    ),
    GIT_CHECKOUTS_CATEGORY: CacheCategory(
        name=GIT_CHECKOUTS_CATEGORY,
        relative_path=CATEGORY_RELATIVE_PATHS[GIT_CHECKOUTS_CATEGORY],
        nested=False,
        header_total=True,
    ),
    REGISTRY_SRC_CATEGORY: CacheCategory(
        name=REGISTRY_SRC_CATEGORY,
        relative_path=CATEGORY_RELATIVE_PATHS[REGISTRY_SRC_CATEGORY],
        nested=True,
        header_total=False,
    ),
    REGISTRY_CACHE_CATEGORY: CacheCategory(
        name=REGISTRY_CACHE_CATEGORY,
        relative_path=CATEGORY_RELATIVE_PATHS[REGISTRY_CACHE_CATEGORY],
        nested=True,
        header_total=False,
    ),
}


@dataclass
class CacheHome:
    """A cache home directory with one lazy cache per category."""

    path: Path
    workers: int | None = None
    _caches: dict[str, DirCache] = field(default_factory=dict, init=False, repr=False)

    def root_for(self, category: CacheCategory) -> Path:
        return category.root_in(self.path)

    def cache_for(self, category: CacheCategory) -> DirCache:
        """Return the memoized cache for *category*, creating it on first use."""
        cache = self._caches.get(category.name)
        if cache is None:
            cache = DirCache(self.root_for(category), workers=self.workers)
            self._caches[category.name] = cache
        return cache

    def invalidate(self) -> None:
        for cache in self._caches.values():
            cache.invalidate()


def resolve_cache_home(explicit: Path | None = None, configured: Path | None = None) -> Path:
    """Pick the cache home from flag, config, environment or the default.

    Raises :class:`CacheHomeError` when the chosen directory does not exist.
    """
    if explicit is not None:
        home = explicit
    elif configured is not None:
        home = configured
    elif os.environ.get(CACHE_HOME_ENV_VAR):
        home = Path(os.environ[CACHE_HOME_ENV_VAR])
    else:
        home = Path.home() / DEFAULT_CACHE_HOME_DIRNAME

    home = home.expanduser()
    if not home.is_dir():
        raise CacheHomeError(home.resolve())
    return home.resolve()
