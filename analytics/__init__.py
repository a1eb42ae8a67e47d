"""Aggregation helpers that turn expenses into chart series."""

from analytics.aggregation import (
    OTHER_CATEGORY,
    UnknownAggregationMode,
    aggregate,
    aggregate_by_category,
    aggregate_by_month,
    aggregate_by_week,
    category_label,
    expenses_frame,
    prepare_chart_data,
    sort_by_amount,
    to_chart_format,
)

__all__ = [
    "OTHER_CATEGORY",
    "UnknownAggregationMode",
    "aggregate",
    "aggregate_by_category",
    "aggregate_by_month",
    "aggregate_by_week",
    "category_label",
    "expenses_frame",
    "prepare_chart_data",
    "sort_by_amount",
    "to_chart_format",
]
