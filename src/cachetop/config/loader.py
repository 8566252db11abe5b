"""Config loading and normalization for cachetop."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from cachetop.config.model import CachetopConfig
from cachetop.constants.config import (
    ALLOWED_CONFIG_KEYS,
    CONFIG_FILENAME,
    DEFAULT_GROUPING,
    DEFAULT_LIMIT,
    VALID_GROUPINGS,
)
from cachetop.constants.layout import CATEGORY_RELATIVE_PATHS, DEFAULT_CATEGORIES
from cachetop.exceptions import ConfigError


def load_config(root: Path, config_path: Path | None = None) -> CachetopConfig:
    """Load and validate config from ``cachetop.yaml`` in *root* or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return CachetopConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    for key in sorted(raw, key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            hint = _suggest_key(str(key), ALLOWED_CONFIG_KEYS)
            raise ConfigError(f"Unknown config key `{key}`" + (f" ({hint})" if hint else ""))

    return CachetopConfig(
        cache_home=_optional_path(raw.get("cache_home"), "cache_home", base=path.parent),
        limit=ensure_positive_int(raw.get("limit", DEFAULT_LIMIT), "limit"),
        categories=normalize_categories(_ensure_string_list(raw.get("categories"), "categories")),
        grouping=_validate_grouping(raw.get("grouping", DEFAULT_GROUPING)),
        workers=_optional_positive_int(raw.get("workers"), "workers"),
    )


def ensure_positive_int(value: Any, key_name: str) -> int:
    """Return *value* when it is a positive integer, raise ConfigError otherwise."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ConfigError(f"{key_name} must be a positive integer")
    return value


def normalize_categories(names: list[str] | None) -> tuple[str, ...]:
    """Validate category names, keeping the default report order."""
    if not names:
        return DEFAULT_CATEGORIES
    unknown = sorted(set(names) - set(CATEGORY_RELATIVE_PATHS))
    if unknown:
        raise ConfigError(
            f"Unknown categor{'y' if len(unknown) == 1 else 'ies'}: {', '.join(unknown)}. "
            f"Valid categories: {', '.join(DEFAULT_CATEGORIES)}"
        )
    selected = set(names)
    return tuple(name for name in DEFAULT_CATEGORIES if name in selected)


def _optional_positive_int(value: Any, key_name: str) -> int | None:
    if value is None:
        return None
    return ensure_positive_int(value, key_name)


def _optional_path(value: Any, key_name: str, *, base: Path) -> Path | None:
    """Resolve a configured path relative to the config file's directory."""
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    path = Path(value).expanduser()
    return path if path.is_absolute() else base / path


def _validate_grouping(value: Any) -> Any:
    if not isinstance(value, str) or value not in VALID_GROUPINGS:
        raise ConfigError(f"grouping must be one of {sorted(VALID_GROUPINGS)}, got {value!r}")
    return value


def _ensure_string_list(value: Any, key_name: str) -> list[str] | None:
    """Coerce a value to a list of strings, raising ConfigError on type mismatch."""
    if value is None:
        return None
    if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{key_name} must be a list of strings")
    return list(value)


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
