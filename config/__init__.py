"""Application configuration utilities."""

from .settings import DEFAULT_CURRENCY_SYMBOL, DEFAULT_DECIMALS, DEFAULT_LOCALE, Settings, get_settings

__all__ = [
    "DEFAULT_CURRENCY_SYMBOL",
    "DEFAULT_DECIMALS",
    "DEFAULT_LOCALE",
    "Settings",
    "get_settings",
]
