"""Rank summary records and render the fixed-width top-items table."""

from __future__ import annotations

import os
from collections.abc import Iterable

from cachetop.constants.reporting import (
    AVERAGE_COLUMN_WIDTH,
    AVERAGE_TOKEN,
    AVERAGE_VALUE_WIDTH,
    COUNT_TOKEN,
    COUNT_WIDTH,
    TOP_ITEMS_SPACING,
    TOTAL_TOKEN,
)
from cachetop.model import SummaryRecord
from cachetop.reporting.sizes import format_size


def display_text(text: str) -> str:
    """Escape bytes a path name could not decode, e.g. ``caf\\xe9``."""
    return os.fsencode(text).decode("utf-8", "backslashreplace")


def rank_records(records: Iterable[SummaryRecord], limit: int) -> list[SummaryRecord]:
    """Largest totals first, ties by name, at most *limit* records."""
    ranked = sorted(records, key=lambda record: (-record.total_size, record.name))
    return ranked[: max(limit, 0)]


def render_record(record: SummaryRecord, width: int) -> str:
    """Render one report line, including its trailing newline."""
    name = display_text(record.name)
    average = f"{AVERAGE_TOKEN} {format_size(record.average_size):>{AVERAGE_VALUE_WIDTH}}"
    return (
        f"{name:<{width}} {COUNT_TOKEN} {record.member_count:<{COUNT_WIDTH}} "
        f"{average:<{AVERAGE_COLUMN_WIDTH}} {TOTAL_TOKEN} {format_size(record.total_size)}\n"
    )


def render_top_items(records: Iterable[SummaryRecord], limit: int) -> str:
    """Render the top *limit* records; empty input renders as ``""``.

    The name column is as wide as the longest rendered name plus a fixed
    spacing, so names cut off by *limit* do not widen the table.
    """
    ranked = rank_records(records, limit)
    if not ranked:
        return ""
    width = max(len(display_text(record.name)) for record in ranked) + TOP_ITEMS_SPACING
    return "".join(render_record(record, width) for record in ranked)
