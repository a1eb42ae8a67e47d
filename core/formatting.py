"""Formatting helpers for SpendChart labels and summaries."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Optional

from babel import numbers

from config import DEFAULT_LOCALE, get_settings
from core.dates import day_label

__all__ = [
    "format_currency",
    "calculate_percentage_change",
    "format_change_label",
    "format_date_range",
]

DATE_RANGE_SEPARATOR = " - "


def _number_pattern(decimals: int) -> str:
    if decimals == 0:
        return "#,##0"
    return "#,##0." + "0" * decimals


def format_currency(
    amount: float,
    currency: Optional[str] = None,
    decimals: Optional[int] = None,
) -> str:
    """Format ``amount`` as ``<symbol><grouped amount>``.

    The amount is rounded half away from zero on its exact binary value, so
    ``1.005`` becomes ``1.00`` just like fixed-point formatting of the float
    would. Commas only group the integer digits.

    >>> format_currency(1234.5, "$", 2)
    '$1,234.50'
    """

    settings = get_settings()
    symbol = settings.currency_symbol if currency is None else currency
    places = settings.decimals if decimals is None else decimals
    if places < 0:
        raise ValueError(f"decimals must be zero or positive, got {places}")

    if not isinstance(amount, (int, float, Decimal)):
        amount = float(amount)
    if isinstance(amount, float):
        if math.isnan(amount):
            return f"{symbol}NaN"
        if math.isinf(amount):
            return f"{symbol}{'-' if amount < 0 else ''}Infinity"
    if amount == 0:
        amount = 0

    exact = Decimal(amount)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + places + 2)
        value = exact.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)
        grouped = numbers.format_decimal(
            value,
            format=_number_pattern(places),
            locale=DEFAULT_LOCALE,
            decimal_quantization=False,
        )
    return f"{symbol}{grouped}"


def calculate_percentage_change(current: float, previous: float) -> float:
    """Return the change from ``previous`` to ``current`` in percent.

    A zero baseline counts as a full 100% increase when there is any current
    value, and as no change otherwise.
    """

    if previous == 0:
        return 100 if current > 0 else 0
    return (current - previous) / previous * 100


def format_change_label(current: float, previous: float) -> str:
    change = calculate_percentage_change(current, previous)
    sign = "+" if change >= 0 else ""
    return f"{sign}{change:.1f}%"


def format_date_range(start_date: Any, end_date: Any) -> str:
    return f"{day_label(start_date)}{DATE_RANGE_SEPARATOR}{day_label(end_date)}"
