"""Human-readable byte sizes using SI decimal prefixes."""

from __future__ import annotations

from cachetop.constants.reporting import SIZE_DECIMAL_PLACES, SIZE_DIVIDER, SIZE_UNITS


def format_size(num_bytes: int) -> str:
    """Format *num_bytes* as ``"1 B"``, ``"1.50 kB"``, ``"2 MB"`` and so on."""
    if num_bytes < 0:
        raise ValueError(f"size must be non-negative, got {num_bytes}")

    size = float(num_bytes)
    unit_index = 0
    while size >= SIZE_DIVIDER and unit_index < len(SIZE_UNITS) - 1:
        size /= SIZE_DIVIDER
        unit_index += 1

    places = 0 if size.is_integer() else SIZE_DECIMAL_PLACES
    return f"{size:.{places}f} {SIZE_UNITS[unit_index]}"
