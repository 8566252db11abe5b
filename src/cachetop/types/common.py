"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal

type GroupingStrategy = Literal["group", "adjacent"]
