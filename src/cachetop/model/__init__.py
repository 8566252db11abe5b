"""Core data models for cachetop."""

from .entities import Descriptor, SummaryRecord

__all__ = [
    "Descriptor",
    "SummaryRecord",
]
