"""Shared exception hierarchy for cachetop."""

from __future__ import annotations

from .base import CachetopError
from .config import ConfigError
from .filesystem import CacheHomeError, UnrecoverableFilesystemError

__all__ = [
    "CacheHomeError",
    "CachetopError",
    "ConfigError",
    "UnrecoverableFilesystemError",
]
