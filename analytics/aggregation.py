"""Expense aggregation into chart-ready label/amount series."""

from __future__ import annotations

import logging
import math
import operator
from dataclasses import asdict
from functools import reduce
from typing import Any, Callable, Iterable, Mapping, Optional, Union

import pandas as pd

from config import get_settings
from core.dates import month_label, week_label
from core.models import AGGREGATION_MODES, ChartSeries, ExpenseRecord

__all__ = [
    "OTHER_CATEGORY",
    "UnknownAggregationMode",
    "category_label",
    "expenses_frame",
    "aggregate_by_category",
    "aggregate_by_month",
    "aggregate_by_week",
    "aggregate",
    "sort_by_amount",
    "to_chart_format",
    "prepare_chart_data",
]

logger = logging.getLogger(__name__)

OTHER_CATEGORY = "Other"

_COLUMNS = ["date", "amount", "category", "description"]

ExpenseInput = Union[pd.DataFrame, Iterable[Union[ExpenseRecord, Mapping[str, Any]]]]
Bucket = dict[str, Any]


class UnknownAggregationMode(ValueError):
    """Raised when an aggregation type other than category/month/week is requested."""

    def __init__(self, mode: Any) -> None:
        self.mode = mode
        super().__init__(f"Unknown aggregation type: {mode}")


def category_label(value: Any) -> str:
    """Return the bucket label for a raw category value.

    Every falsy value (``None``, ``""``, ``0``, ``False``) and missing values
    such as ``NaN`` fall back to ``"Other"``. Other values are
    rendered the way a string key would spell them: ``True`` as ``"true"``
    and integral floats without a fraction, so ``1.0`` becomes ``"1"``.
    """

    if pd.api.types.is_scalar(value) and pd.isna(value):
        return OTHER_CATEGORY
    if not value:
        return OTHER_CATEGORY
    if pd.api.types.is_bool(value):
        return "true"
    if pd.api.types.is_float(value):
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if float(value).is_integer():
            return str(int(value))
    return str(value)


def expenses_frame(expenses: ExpenseInput) -> pd.DataFrame:
    """Normalise records, mappings or a dataframe into the four expense columns."""

    if isinstance(expenses, pd.DataFrame):
        return expenses.reindex(columns=_COLUMNS)

    rows: list[dict[str, Any]] = []
    for expense in expenses:
        if isinstance(expense, ExpenseRecord):
            rows.append(asdict(expense))
        else:
            rows.append(asdict(ExpenseRecord.from_mapping(expense)))
    return pd.DataFrame(rows, columns=_COLUMNS)


def _as_native(value: Any) -> Any:
    return value.item() if hasattr(value, "item") else value


def _fold(amounts: pd.Series) -> Any:
    return reduce(operator.add, amounts, 0)


def _aggregate_with(expenses: ExpenseInput, column: str, labeler: Callable[[Any], str]) -> Bucket:
    frame = expenses_frame(expenses)
    if frame.empty:
        return {}

    keys = frame[column].map(labeler).astype(str)
    # Left-to-right fold per bucket; pandas' own sum is compensated.
    totals = frame["amount"].groupby(keys, sort=False, dropna=False).agg(_fold)
    return {str(label): _as_native(total) for label, total in totals.items()}


def aggregate_by_category(expenses: ExpenseInput) -> Bucket:
    return _aggregate_with(expenses, "category", category_label)


def aggregate_by_month(expenses: ExpenseInput) -> Bucket:
    """Sum amounts per calendar month, labelled like ``"Jan 2024"``."""

    return _aggregate_with(expenses, "date", month_label)


def aggregate_by_week(expenses: ExpenseInput) -> Bucket:
    """Sum amounts per Sunday-started week, labelled like ``"Mar 3"``."""

    return _aggregate_with(expenses, "date", week_label)


_AGGREGATORS: dict[str, Callable[[ExpenseInput], Bucket]] = {
    "category": aggregate_by_category,
    "month": aggregate_by_month,
    "week": aggregate_by_week,
}


def aggregate(expenses: ExpenseInput, mode: str) -> Bucket:
    if mode not in AGGREGATION_MODES:
        raise UnknownAggregationMode(mode)
    return _AGGREGATORS[mode](expenses)


def sort_by_amount(aggregated: Mapping[str, Any]) -> Bucket:
    """Return a copy of ``aggregated`` ordered by descending amount.

    Equal amounts keep their original relative order.
    """

    return dict(sorted(aggregated.items(), key=lambda item: item[1], reverse=True))


def to_chart_format(aggregated: Mapping[str, Any]) -> ChartSeries:
    labels = list(aggregated.keys())
    data = list(aggregated.values())
    return ChartSeries(labels=labels, data=data, total=sum(data))


def prepare_chart_data(
    expenses: ExpenseInput,
    aggregation_type: Optional[str] = None,
    sort_by_value: Optional[bool] = None,
) -> ChartSeries:
    """Aggregate ``expenses`` and project them into a :class:`ChartSeries`.

    ``aggregation_type`` is one of ``"category"``, ``"month"`` or ``"week"``.
    Sorting by value only applies to category aggregation; month and week
    series keep the order in which their labels first appear.
    """

    settings = get_settings()
    mode = settings.aggregation_type if aggregation_type is None else aggregation_type
    sort = settings.sort_by_value if sort_by_value is None else sort_by_value

    aggregated = aggregate(expenses, mode)
    if sort and mode == "category":
        aggregated = sort_by_amount(aggregated)

    series = to_chart_format(aggregated)
    logger.debug(
        "Aggregated expenses by %s into %d buckets (sorted=%s)",
        mode,
        len(series),
        bool(sort and mode == "category"),
    )
    return series
