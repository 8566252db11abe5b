"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "cachetop.yaml"
CACHE_HOME_ENV_VAR: str = "CARGO_HOME"
DEFAULT_CACHE_HOME_DIRNAME: str = ".cargo"

DEFAULT_LIMIT: int = 20
DEFAULT_GROUPING: str = "group"
VALID_GROUPINGS: frozenset[str] = frozenset({"group", "adjacent"})

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "cache_home",
        "categories",
        "grouping",
        "limit",
        "workers",
    }
)
