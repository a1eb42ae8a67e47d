"""Core domain package for SpendChart."""

from .dates import INVALID_DATE_LABEL, day_label, month_label, parse_expense_date, week_label, week_start
from .formatting import calculate_percentage_change, format_change_label, format_currency, format_date_range
from .models import AGGREGATION_MODES, AggregationMode, ChartData, ChartSeries, ExpenseRecord

__all__ = [
    "AGGREGATION_MODES",
    "AggregationMode",
    "ChartData",
    "ChartSeries",
    "ExpenseRecord",
    "INVALID_DATE_LABEL",
    "day_label",
    "month_label",
    "parse_expense_date",
    "week_label",
    "week_start",
    "calculate_percentage_change",
    "format_change_label",
    "format_currency",
    "format_date_range",
]
