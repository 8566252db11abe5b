"""Shared type aliases for cachetop."""

from .common import GroupingStrategy

__all__ = ["GroupingStrategy"]
