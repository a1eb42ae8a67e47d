"""Centralised configuration handling for SpendChart."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Mapping

import streamlit as st
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CURRENCY_SYMBOL = "$"
DEFAULT_DECIMALS = 2
DEFAULT_LOCALE = "en_US"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail outside streamlit
        return None
    return None


class Settings(BaseSettings):
    """Chart defaults sourced from env vars and Streamlit secrets."""

    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    decimals: int = Field(default=DEFAULT_DECIMALS, ge=0)
    aggregation_type: Literal["category", "month", "week"] = "category"
    sort_by_value: bool = True

    model_config = SettingsConfigDict(env_prefix="SPENDCHART_", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section("charts")
    if secrets_section:
        overrides = {
            "currency_symbol": secrets_section.get("currency")
            or secrets_section.get("currency_symbol"),
            "decimals": secrets_section.get("decimals"),
            "aggregation_type": secrets_section.get("aggregation"),
            "sort_by_value": secrets_section.get("sort_by_value"),
        }

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
