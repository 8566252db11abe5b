"""Filesystem scanning and aggregation for cache directories."""

from __future__ import annotations

from .aggregate import aggregate, fold_adjacent, group_by_name
from .descriptors import describe_entry, flat_descriptors, list_nested_entries, nested_descriptors
from .identity import decode_name
from .walker import directory_size

__all__ = [
    "aggregate",
    "decode_name",
    "describe_entry",
    "directory_size",
    "flat_descriptors",
    "fold_adjacent",
    "group_by_name",
    "list_nested_entries",
    "nested_descriptors",
]
