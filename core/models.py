"""Shared data model definitions for SpendChart."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping, TypedDict

AggregationMode = Literal["category", "month", "week"]

AGGREGATION_MODES: tuple[str, ...] = ("category", "month", "week")


class ChartData(TypedDict):
    labels: list[str]
    data: list[float]
    total: float


@dataclass(frozen=True, slots=True)
class ExpenseRecord:
    """A single expense as supplied by the caller.

    ``date`` is kept in whatever form it arrived in and is only parsed when a
    month or week label is needed. ``description`` is carried for display and
    never used when aggregating.
    """

    date: Any
    amount: float
    category: Any = None
    description: str = ""

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "ExpenseRecord":
        return cls(
            date=raw.get("date"),
            amount=raw.get("amount"),
            category=raw.get("category"),
            description=raw.get("description") or "",
        )


@dataclass(frozen=True)
class ChartSeries:
    labels: list[str] = field(default_factory=list)
    data: list[float] = field(default_factory=list)
    total: float = 0

    def __len__(self) -> int:
        return len(self.labels)

    def as_dict(self) -> ChartData:
        return {
            "labels": list(self.labels),
            "data": list(self.data),
            "total": self.total,
        }


__all__ = [
    "AGGREGATION_MODES",
    "AggregationMode",
    "ChartData",
    "ChartSeries",
    "ExpenseRecord",
]
