"""Visualization utilities for SpendChart series."""

from .charts import (
    CHART_KINDS,
    build_bar_chart,
    build_line_chart,
    build_pie_chart,
    series_chart,
)
from .theme import theme_tokens

__all__ = [
    "CHART_KINDS",
    "build_bar_chart",
    "build_line_chart",
    "build_pie_chart",
    "series_chart",
    "theme_tokens",
]
