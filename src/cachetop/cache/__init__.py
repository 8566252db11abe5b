"""Memoized views over cache directories."""

from .dircache import DirCache
from .layout import CATEGORIES, CacheCategory, CacheHome, resolve_cache_home

__all__ = ["CATEGORIES", "CacheCategory", "CacheHome", "DirCache", "resolve_cache_home"]
