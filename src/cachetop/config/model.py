"""Config data model for cachetop."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from cachetop.cache.layout import CATEGORIES, CacheCategory
from cachetop.constants.config import DEFAULT_LIMIT
from cachetop.constants.layout import DEFAULT_CATEGORIES
from cachetop.types import GroupingStrategy


@dataclass(frozen=True)
class CachetopConfig:
    """Resolved report config."""

    cache_home: Path | None = None
    limit: int = DEFAULT_LIMIT
    categories: tuple[str, ...] = DEFAULT_CATEGORIES
    grouping: GroupingStrategy = "group"
    workers: int | None = None

    @property
    def selected_categories(self) -> tuple[CacheCategory, ...]:
        """Category definitions in report order."""
        return tuple(CATEGORIES[name] for name in self.categories)
