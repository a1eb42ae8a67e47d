"""Shared fixtures for the SpendChart test-suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
import streamlit as st

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import get_settings
from core.models import ExpenseRecord


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    for name in ("CURRENCY_SYMBOL", "DECIMALS", "AGGREGATION_TYPE", "SORT_BY_VALUE"):
        monkeypatch.delenv(f"SPENDCHART_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def sample_expenses() -> list[dict]:
    return [
        {"date": "2024-01-05", "amount": 45.5, "category": "Groceries", "description": "Market"},
        {"date": "2024-01-28", "amount": 12.0, "category": "Dining", "description": "Cafe"},
        {"date": "2024-02-03", "amount": 60.0, "category": "Groceries", "description": "Market"},
        {"date": "2024-02-14", "amount": 80.25, "category": "Dining", "description": "Dinner"},
        {"date": "2024-03-03", "amount": 20.0, "category": None, "description": "Parking"},
        {"date": "2024-03-06", "amount": -5.0, "category": "", "description": "Refund"},
    ]


@pytest.fixture()
def sample_records(sample_expenses) -> list[ExpenseRecord]:
    return [ExpenseRecord.from_mapping(expense) for expense in sample_expenses]
