"""Ranked text reports for cache categories."""

from .sizes import format_size
from .stdout import display_text, rank_records, render_record, render_top_items
from .summary import summarize, summarize_cache_home

__all__ = [
    "display_text",
    "format_size",
    "rank_records",
    "render_record",
    "render_top_items",
    "summarize",
    "summarize_cache_home",
]
