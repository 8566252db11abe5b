"""On-disk layout of a package-manager cache home."""

from __future__ import annotations

GIT_DB_CATEGORY: str = "git-db"
GIT_CHECKOUTS_CATEGORY: str = "git-checkouts"
REGISTRY_SRC_CATEGORY: str = "registry-src"
REGISTRY_CACHE_CATEGORY: str = "registry-cache"

CATEGORY_RELATIVE_PATHS: dict[str, tuple[str, ...]] = {
    GIT_DB_CATEGORY: ("git", "db"),
    GIT_CHECKOUTS_CATEGORY: ("git", "checkouts"),
    REGISTRY_SRC_CATEGORY: ("registry", "src"),
    REGISTRY_CACHE_CATEGORY: ("registry", "cache"),
}

# Report order when no explicit category selection is given.
DEFAULT_CATEGORIES: tuple[str, ...] = (
    GIT_CHECKOUTS_CATEGORY,
    GIT_DB_CATEGORY,
    REGISTRY_SRC_CATEGORY,
    REGISTRY_CACHE_CATEGORY,
)

NAME_SEPARATOR: str = "-"
