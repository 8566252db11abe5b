"""Constants for the fixed-width top-items report."""

from __future__ import annotations

# Extra columns added after the widest rendered name.
TOP_ITEMS_SPACING: int = 3

COUNT_TOKEN: str = "src ckt:"
AVERAGE_TOKEN: str = "src avg:"
TOTAL_TOKEN: str = "total:"

COUNT_WIDTH: int = 3
AVERAGE_VALUE_WIDTH: int = 9
AVERAGE_COLUMN_WIDTH: int = 20

SUMMARY_PREFIX: str = "Summary of:"

# SI decimal units, as produced for every human-readable size.
SIZE_DIVIDER: int = 1000
SIZE_UNITS: tuple[str, ...] = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
SIZE_DECIMAL_PLACES: int = 2
