"""Plotly chart builders for aggregated spending series."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import plotly.graph_objects as go

from config import get_settings
from core.models import ChartSeries

from .theme import theme_tokens

TOKENS = theme_tokens()

__all__ = [
    "CHART_KINDS",
    "build_bar_chart",
    "build_line_chart",
    "build_pie_chart",
    "series_chart",
]

logger = logging.getLogger(__name__)

CHART_KINDS: tuple[str, ...] = ("bar", "line", "pie")


def _resolve_currency(currency: Optional[str]) -> str:
    if currency is None:
        return get_settings().currency_symbol
    return currency


def _check_series(labels: Sequence[str], data: Sequence[float]) -> None:
    if len(labels) != len(data):
        raise ValueError(
            f"labels and data must have the same length, got {len(labels)} and {len(data)}"
        )


def _title(text: str) -> dict:
    return dict(
        text=text,
        font=dict(size=TOKENS.title_size, weight="bold", family=TOKENS.label_font),
    )


def _empty_plotly_figure(title: str, message: str) -> go.Figure:
    fig = go.Figure()
    fig.update_layout(
        title=_title(title),
        annotations=[
            dict(
                text=message,
                x=0.5,
                y=0.5,
                xref="paper",
                yref="paper",
                showarrow=False,
                font=dict(color=TOKENS.neutral_grey, size=14, family=TOKENS.label_font),
            )
        ],
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def _currency_axis(currency: str) -> dict:
    return dict(
        rangemode="tozero",
        tickprefix=currency,
        tickformat=".0f",
        showgrid=True,
        gridcolor=TOKENS.grid_color,
        zeroline=False,
    )


def build_bar_chart(
    *,
    title: str,
    labels: Sequence[str],
    data: Sequence[float],
    currency: Optional[str] = None,
) -> go.Figure:
    """Render categorical spending as a single-series bar chart."""

    _check_series(labels, data)
    if not labels:
        return _empty_plotly_figure(title, "No spending data to display.")

    symbol = _resolve_currency(currency)
    fig = go.Figure(
        go.Bar(
            x=list(labels),
            y=list(data),
            name="Spending",
            marker=dict(color=TOKENS.spending_bar, line=dict(color=TOKENS.spending_color, width=1)),
            hovertemplate=f"%{{x}}<br>{symbol}%{{y:.2f}}<extra></extra>",
        )
    )
    fig.update_layout(
        title=_title(title),
        showlegend=False,
        yaxis=_currency_axis(symbol),
        xaxis=dict(showgrid=False),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_line_chart(
    *,
    title: str,
    labels: Sequence[str],
    data: Sequence[float],
    currency: Optional[str] = None,
    budget_line: Optional[Sequence[float]] = None,
) -> go.Figure:
    """Render spending over time, optionally against a dashed budget line.

    The legend is only shown when a budget line is present, since a lone
    spending series needs no key.
    """

    _check_series(labels, data)
    if not labels:
        return _empty_plotly_figure(title, "No spending data to display.")

    symbol = _resolve_currency(currency)
    hover_template = f"%{{fullData.name}}: {symbol}%{{y:.2f}}<extra></extra>"

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=list(labels),
            y=list(data),
            mode="lines+markers",
            name="Spending",
            line=dict(color=TOKENS.spending_color, width=3, shape="spline", smoothing=0.3),
            fill="tozeroy",
            fillcolor=TOKENS.spending_fill,
            hovertemplate=hover_template,
        )
    )

    if budget_line is not None:
        fig.add_trace(
            go.Scatter(
                x=list(labels),
                y=list(budget_line),
                mode="lines",
                name="Budget",
                line=dict(color=TOKENS.budget_color, width=2, dash="dash", shape="linear"),
                hovertemplate=hover_template,
            )
        )

    fig.update_layout(
        title=_title(title),
        showlegend=budget_line is not None,
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1.0),
        hovermode="x unified",
        yaxis=_currency_axis(symbol),
        xaxis=dict(showgrid=False),
        plot_bgcolor="rgba(0,0,0,0)",
        paper_bgcolor="rgba(0,0,0,0)",
    )
    return fig


def build_pie_chart(
    *,
    title: str,
    labels: Sequence[str],
    data: Sequence[float],
    currency: Optional[str] = None,
) -> go.Figure:
    """Render the spending distribution across labels as a pie chart."""

    _check_series(labels, data)
    if not labels:
        return _empty_plotly_figure(title, "No spending data to display.")

    symbol = _resolve_currency(currency)
    palette = list(TOKENS.category_palette)
    if len(labels) > len(palette):
        repeats = (len(labels) // len(palette)) + 1
        color_sequence = (palette * repeats)[: len(labels)]
    else:
        color_sequence = palette[: len(labels)]

    fig = go.Figure(
        go.Pie(
            labels=list(labels),
            values=list(data),
            sort=False,
            marker=dict(colors=color_sequence, line=dict(color=TOKENS.neutral_white, width=2)),
            hovertemplate=f"%{{label}}: {symbol}%{{value:.2f}} (%{{percent:.1%}})<extra></extra>",
        )
    )
    fig.update_layout(
        title=_title(title),
        showlegend=True,
        legend=dict(
            orientation="v",
            yanchor="middle",
            y=0.5,
            xanchor="left",
            x=1.05,
            font=dict(color=TOKENS.label_color, family=TOKENS.label_font, size=TOKENS.label_size),
        ),
    )
    return fig


def series_chart(
    series: ChartSeries,
    kind: str = "bar",
    *,
    title: str = "",
    currency: Optional[str] = None,
    budget_line: Optional[Sequence[float]] = None,
) -> go.Figure:
    """Build a chart of ``kind`` straight from an aggregated series."""

    if kind not in CHART_KINDS:
        raise ValueError(f"Unknown chart kind: {kind}")

    logger.debug("Building %s chart with %d points", kind, len(series))
    if kind == "bar":
        return build_bar_chart(title=title, labels=series.labels, data=series.data, currency=currency)
    if kind == "line":
        return build_line_chart(
            title=title,
            labels=series.labels,
            data=series.data,
            currency=currency,
            budget_line=budget_line,
        )
    return build_pie_chart(title=title, labels=series.labels, data=series.data, currency=currency)
