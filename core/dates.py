"""Date parsing and label helpers.

Labels are always rendered with Babel's ``en_US`` patterns so that bucket
keys are identical on every machine, regardless of the host locale.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from numbers import Real
from typing import Any

import pandas as pd
from babel.dates import format_date

from config import DEFAULT_LOCALE

__all__ = [
    "INVALID_DATE_LABEL",
    "parse_expense_date",
    "week_start",
    "month_label",
    "week_label",
    "day_label",
]

logger = logging.getLogger(__name__)

INVALID_DATE_LABEL = "Invalid Date"

_MONTH_PATTERN = "MMM yyyy"
_WEEK_PATTERN = "MMM d"
_DAY_PATTERN = "medium"


def parse_expense_date(value: Any) -> pd.Timestamp:
    """Return ``value`` as a timestamp, or ``NaT`` when it cannot be parsed.

    Strings, ``date``/``datetime`` objects and timestamps go through
    :func:`pandas.to_datetime`. Bare numbers are read as epoch milliseconds.
    Nothing is raised for bad input; the ``NaT`` flows through to the label
    helpers, which render it as ``"Invalid Date"``.
    """

    if value is None or isinstance(value, bool):
        parsed = pd.NaT
    elif isinstance(value, Real):
        parsed = pd.to_datetime(value, unit="ms", errors="coerce")
    else:
        parsed = pd.to_datetime(value, errors="coerce")

    if pd.isna(parsed):
        logger.warning("Could not parse expense date %r", value)
        return pd.NaT
    return parsed


def _as_date(value: Any) -> date | None:
    parsed = parse_expense_date(value)
    if pd.isna(parsed):
        return None
    return parsed.date()


def week_start(value: Any) -> date | None:
    """Return the Sunday that opens the week containing ``value``."""

    day = _as_date(value)
    if day is None:
        return None
    # Python weekdays start on Monday; shift so that Sunday is day 0.
    return day - timedelta(days=(day.weekday() + 1) % 7)


def month_label(value: Any) -> str:
    day = _as_date(value)
    if day is None:
        return INVALID_DATE_LABEL
    return format_date(day, _MONTH_PATTERN, locale=DEFAULT_LOCALE)


def week_label(value: Any) -> str:
    """Label the week of ``value`` by its Sunday start, e.g. ``"Mar 3"``.

    The label carries no year, so the same start day in two different years
    yields the same label.
    """

    start = week_start(value)
    if start is None:
        return INVALID_DATE_LABEL
    return format_date(start, _WEEK_PATTERN, locale=DEFAULT_LOCALE)


def day_label(value: Any) -> str:
    day = _as_date(value)
    if day is None:
        return INVALID_DATE_LABEL
    return format_date(day, _DAY_PATTERN, locale=DEFAULT_LOCALE)
