"""Per-category summaries of a cache home."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Protocol

from cachetop.cache.layout import CATEGORIES, CacheCategory, CacheHome
from cachetop.constants.layout import GIT_DB_CATEGORY
from cachetop.constants.reporting import SUMMARY_PREFIX
from cachetop.model import Descriptor
from cachetop.reporting.sizes import format_size
from cachetop.reporting.stdout import display_text, render_top_items
from cachetop.scanner import aggregate, flat_descriptors, nested_descriptors
from cachetop.types import GroupingStrategy

logger = logging.getLogger(__name__)


class LazyCache(Protocol):
    """Read-only view of a cache root consumed by :func:`summarize`."""

    def total_size(self) -> int: ...

    def entries(self) -> tuple[Path, ...]: ...

    def entries_natural_order(self) -> tuple[Path, ...]: ...


def summarize(
    root: Path,
    limit: int,
    cache: LazyCache,
    *,
    category: CacheCategory = CATEGORIES[GIT_DB_CATEGORY],
    strategy: GroupingStrategy = "group",
    workers: int | None = None,
) -> str:
    """Render the top *limit* packages of one cache root.

    A missing root, a root without entries or a non-positive *limit* yields
    ``""``. For a missing root or a non-positive limit, *cache* is never
    consulted.
    """
    if limit <= 0:
        return ""
    if not root.is_dir():
        logger.debug("Skipping missing %s root: %s", category.name, root)
        return ""

    descriptors = _collect_descriptors(category, cache, workers=workers)
    if not descriptors:
        return ""

    if strategy == "adjacent":
        # Folding needs equal names next to each other.
        descriptors.sort(key=lambda descriptor: descriptor.name)
    logger.debug(
        "Aggregating %d %s entries with %s strategy", len(descriptors), category.name, strategy
    )
    records = aggregate(descriptors, strategy)

    header = f"\n{SUMMARY_PREFIX} {display_text(str(root))}"
    if category.header_total:
        header += f" ({format_size(cache.total_size())} total)"
    return f"{header}\n" + render_top_items(records, limit)


def summarize_cache_home(
    home: CacheHome,
    categories: Iterable[CacheCategory],
    limit: int,
    *,
    strategy: GroupingStrategy = "group",
) -> str:
    """Concatenate the summaries of *categories* inside *home*."""
    return "".join(
        summarize(
            home.root_for(category),
            limit,
            home.cache_for(category),
            category=category,
            strategy=strategy,
            workers=home.workers,
        )
        for category in categories
    )


def _collect_descriptors(
    category: CacheCategory, cache: LazyCache, *, workers: int | None
) -> list[Descriptor]:
    if category.nested:
        return nested_descriptors(cache.entries(), workers=workers)
    return flat_descriptors(cache.entries_natural_order(), workers=workers)
