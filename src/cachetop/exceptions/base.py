"""Base exception for cachetop."""

from __future__ import annotations


class CachetopError(Exception):
    """Base class for all cachetop errors."""
