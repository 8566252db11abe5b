"""Group descriptors by logical name into summary records."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from cachetop.model import Descriptor, SummaryRecord
from cachetop.types import GroupingStrategy


@dataclass
class _Accumulator:
    """Open group while folding adjacent descriptors."""

    name: str
    member_count: int
    total_size: int

    @classmethod
    def start(cls, descriptor: Descriptor) -> _Accumulator:
        return cls(name=descriptor.name, member_count=1, total_size=descriptor.size)

    def add(self, descriptor: Descriptor) -> None:
        self.member_count += 1
        self.total_size += descriptor.size

    def close(self) -> SummaryRecord:
        return SummaryRecord(name=self.name, member_count=self.member_count, total_size=self.total_size)


def fold_adjacent(descriptors: Iterable[Descriptor]) -> list[SummaryRecord]:
    """Fold runs of equal names into one record each.

    Input must be sorted by name: a name that appears in two separate runs
    produces two records.
    """
    records: list[SummaryRecord] = []
    current: _Accumulator | None = None
    for descriptor in descriptors:
        if current is None:
            current = _Accumulator.start(descriptor)
        elif descriptor.name == current.name:
            current.add(descriptor)
        else:
            records.append(current.close())
            current = _Accumulator.start(descriptor)
    if current is not None:
        records.append(current.close())
    return records


def group_by_name(descriptors: Iterable[Descriptor]) -> list[SummaryRecord]:
    """One record per distinct name regardless of input order.

    Records come out in order of first appearance.
    """
    groups: dict[str, _Accumulator] = {}
    for descriptor in descriptors:
        group = groups.get(descriptor.name)
        if group is None:
            groups[descriptor.name] = _Accumulator.start(descriptor)
        else:
            group.add(descriptor)
    return [group.close() for group in groups.values()]


def aggregate(descriptors: Iterable[Descriptor], strategy: GroupingStrategy = "group") -> list[SummaryRecord]:
    """Aggregate descriptors with the selected grouping strategy."""
    if strategy == "group":
        return group_by_name(descriptors)
    if strategy == "adjacent":
        return fold_adjacent(descriptors)
    raise ValueError(f"Unknown grouping strategy: {strategy!r}")
