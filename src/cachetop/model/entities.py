"""Value types flowing through the aggregation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Descriptor:
    """One top-level cache entry reduced to its logical name and byte size."""

    name: str
    size: int
    path: Path | None = None


@dataclass(frozen=True, order=True)
class SummaryRecord:
    """Aggregated report row for one logical package name.

    Comparison looks at ``total_size`` only: two records with different names
    but equal totals compare equal and keep distinct rows in the report.
    """

    name: str = field(compare=False)
    member_count: int = field(compare=False)
    total_size: int

    def __post_init__(self) -> None:
        if self.member_count < 1:
            raise ValueError(f"member_count must be >= 1, got {self.member_count}")

    @property
    def average_size(self) -> int:
        """Truncating average size per member."""
        return self.total_size // self.member_count
