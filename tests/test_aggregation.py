"""Unit tests for expense aggregation and chart series projection."""

from __future__ import annotations

import math

import pandas as pd
import pytest

from analytics.aggregation import (
    OTHER_CATEGORY,
    UnknownAggregationMode,
    aggregate,
    aggregate_by_category,
    aggregate_by_month,
    aggregate_by_week,
    category_label,
    prepare_chart_data,
    sort_by_amount,
    to_chart_format,
)
from core.models import ChartSeries, ExpenseRecord


def _expense(category, amount, date="2024-01-01"):
    return {"date": date, "amount": amount, "category": category, "description": ""}


def test_category_totals_follow_first_occurrence(sample_expenses):
    totals = aggregate_by_category(sample_expenses)

    assert list(totals) == ["Groceries", "Dining", "Other"]
    assert totals["Groceries"] == pytest.approx(105.5)
    assert totals["Dining"] == pytest.approx(92.25)
    assert totals["Other"] == pytest.approx(15.0)


@pytest.mark.parametrize("value", [None, "", 0, False, float("nan")])
def test_falsy_categories_fall_back_to_other(value):
    assert category_label(value) == OTHER_CATEGORY


def test_missing_category_key_is_other():
    totals = aggregate_by_category([{"date": "2024-01-01", "amount": 7}])

    assert totals == {"Other": 7}


def test_truthy_categories_are_kept():
    assert category_label("Rent") == "Rent"
    assert category_label(42) == "42"


def test_month_buckets_collapse_days():
    expenses = [_expense("A", 10, "2024-01-05"), _expense("B", 15, "2024-01-28")]

    assert aggregate_by_month(expenses) == {"Jan 2024": 25}


def test_month_buckets_keep_years_apart():
    expenses = [_expense("A", 10, "2023-01-15"), _expense("A", 5, "2024-01-15")]

    assert aggregate_by_month(expenses) == {"Jan 2023": 10, "Jan 2024": 5}


def test_week_buckets_start_on_sunday():
    expenses = [_expense("A", 10, "2024-03-03"), _expense("B", 5, "2024-03-06")]

    assert aggregate_by_week(expenses) == {"Mar 3": 15}


def test_week_bucket_can_start_in_previous_year():
    assert aggregate_by_week([_expense("A", 4, "2024-01-02")]) == {"Dec 31": 4}


def test_week_labels_collapse_across_years():
    expenses = [_expense("A", 10, "2024-03-03"), _expense("A", 5, "2019-03-05")]

    assert aggregate_by_week(expenses) == {"Mar 3": 15}


def test_week_buckets_for_sample(sample_expenses):
    totals = aggregate_by_week(sample_expenses)

    assert list(totals) == ["Dec 31", "Jan 28", "Feb 11", "Mar 3"]
    assert totals["Jan 28"] == pytest.approx(72.0)


def test_unparseable_dates_are_labelled_invalid():
    totals = aggregate_by_month([_expense("A", 3, "not a date"), _expense("A", 4, "2024-05-01")])

    assert totals == {"Invalid Date": 3, "May 2024": 4}


def test_records_and_dataframe_inputs_match(sample_expenses, sample_records):
    from_dicts = aggregate(sample_expenses, "category")
    from_records = aggregate(sample_records, "category")
    from_frame = aggregate(pd.DataFrame(sample_expenses), "category")

    assert from_dicts == from_records == from_frame


def test_sort_by_amount_descending_and_stable():
    ordered = sort_by_amount({"A": 10, "B": 50, "C": 30, "D": 30})

    assert list(ordered.items()) == [("B", 50), ("C", 30), ("D", 30), ("A", 10)]


def test_to_chart_format_preserves_order():
    series = to_chart_format({"x": 1.5, "y": 2.5})

    assert series == ChartSeries(labels=["x", "y"], data=[1.5, 2.5], total=4.0)


def test_prepare_chart_data_sorts_categories():
    expenses = [_expense("A", 10), _expense("B", 50), _expense("C", 30)]

    series = prepare_chart_data(expenses, "category", True)

    assert series.labels == ["B", "C", "A"]
    assert series.data == [50, 30, 10]
    assert series.total == 90


def test_prepare_chart_data_without_sorting_keeps_insertion_order():
    expenses = [_expense("A", 10), _expense("B", 50), _expense("C", 30)]

    series = prepare_chart_data(expenses, "category", sort_by_value=False)

    assert series.labels == ["A", "B", "C"]


def test_sorting_is_ignored_outside_category_mode():
    expenses = [
        _expense("A", 10, "2024-01-10"),
        _expense("A", 50, "2024-02-10"),
        _expense("A", 30, "2024-03-10"),
    ]

    series = prepare_chart_data(expenses, "month", sort_by_value=True)

    assert series.labels == ["Jan 2024", "Feb 2024", "Mar 2024"]
    assert series.data == [10, 50, 30]


def test_prepare_chart_data_defaults_to_sorted_categories(sample_expenses):
    series = prepare_chart_data(sample_expenses)

    assert series.labels == ["Groceries", "Dining", "Other"]


def test_default_mode_comes_from_settings(monkeypatch, sample_expenses):
    from config import get_settings

    monkeypatch.setenv("SPENDCHART_AGGREGATION_TYPE", "month")
    get_settings.cache_clear()

    series = prepare_chart_data(sample_expenses)

    assert series.labels == ["Jan 2024", "Feb 2024", "Mar 2024"]


@pytest.mark.parametrize("mode", ["category", "month", "week"])
def test_series_invariants(mode, sample_expenses):
    expenses = sample_expenses + [
        _expense("Travel", 0.1, "2024-04-01"),
        _expense("Travel", 0.2, "2024-04-02"),
        _expense("Books", 0.3, "2024-04-03"),
    ]

    series = prepare_chart_data(expenses, mode)

    assert sum(series.data) == series.total
    assert len(series.labels) == len(series.data) == len(set(series.labels))
    assert math.isclose(series.total, sum(e["amount"] for e in expenses))


def test_empty_input_gives_empty_series():
    series = prepare_chart_data([], "week")

    assert series.labels == []
    assert series.data == []
    assert series.total == 0
    assert series.as_dict() == {"labels": [], "data": [], "total": 0}


def test_unknown_mode_raises():
    with pytest.raises(UnknownAggregationMode) as excinfo:
        prepare_chart_data([_expense("A", 1)], "year")

    assert excinfo.value.mode == "year"
    assert "year" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)


def test_expense_record_from_mapping_defaults():
    record = ExpenseRecord.from_mapping({"date": "2024-01-01", "amount": 3})

    assert record.category is None
    assert record.description == ""


def test_bucket_totals_add_in_input_order():
    expenses = [_expense("A", 0.1), _expense("A", 0.2), _expense("A", 0.3)]

    running = 0
    for expense in expenses:
        running += expense["amount"]

    assert aggregate_by_category(expenses)["A"] == running == 0.6000000000000001
    assert aggregate_by_month(expenses)["Jan 2024"] == running


@pytest.mark.parametrize(
    ("value", "expected"),
    [(1.0, "1"), (2.5, "2.5"), (True, "true"), (7, "7"), (float("inf"), "Infinity")],
)
def test_non_string_categories_render_as_keys(value, expected):
    assert category_label(value) == expected


def test_numeric_and_boolean_categories_bucket_by_key():
    totals = aggregate_by_category([_expense(1.0, 1), _expense(True, 2), _expense(1, 3)])

    assert totals == {"1": 4, "true": 2}
