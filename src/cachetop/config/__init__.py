"""Configuration loading and validation for cachetop."""

from __future__ import annotations

from cachetop.config.loader import load_config
from cachetop.config.model import CachetopConfig

__all__ = [
    "CachetopConfig",
    "load_config",
]
