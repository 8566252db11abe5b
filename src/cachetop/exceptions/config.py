"""Configuration-related exceptions."""

from __future__ import annotations

from cachetop.exceptions.base import CachetopError


class ConfigError(CachetopError, ValueError):
    """Raised when cachetop configuration is invalid."""
