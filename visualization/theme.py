"""Shared Plotly theme tokens for SpendChart visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#475569"
    label_font: str = "Inter"
    label_size: int = 12
    title_size: int = 16
    spending_color: str = "rgba(59, 130, 246, 1)"
    spending_bar: str = "rgba(59, 130, 246, 0.8)"
    spending_fill: str = "rgba(59, 130, 246, 0.1)"
    budget_color: str = "rgba(239, 68, 68, 1)"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "rgba(255, 255, 255, 1)"
    grid_color: str = "rgba(148, 163, 184, 0.25)"
    category_palette: tuple[str, ...] = (
        "rgba(59, 130, 246, 0.8)",
        "rgba(16, 185, 129, 0.8)",
        "rgba(251, 146, 60, 0.8)",
        "rgba(139, 92, 246, 0.8)",
        "rgba(236, 72, 153, 0.8)",
        "rgba(245, 158, 11, 0.8)",
        "rgba(20, 184, 166, 0.8)",
        "rgba(239, 68, 68, 0.8)",
    )


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens.

    The tokens are frozen to keep styling consistent between the bar, line
    and pie charts.
    """

    return _TOKENS
