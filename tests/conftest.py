"""Shared fixtures for the Personal Ledger tests."""

from datetime import date
from decimal import Decimal

import pytest

from src.config import get_settings
from src.models.transaction import Transaction, TransactionKind


LEDGER_ENV_VARS = (
    "LEDGER_STORAGE_DEFAULT_FILE",
    "LEDGER_STORAGE_ENCODING",
    "LEDGER_LOG_LEVEL",
    "LEDGER_LOG_RENDERER",
    "DEBUG_MODE",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Each test starts from default settings."""
    for name in LEDGER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def july_lines() -> list[str]:
    """Two July entries and one August entry."""
    return [
        "2024-07-15,INCOME,Salary,5000.00,x",
        "2024-07-20,EXPENSE,Food,42.50,y",
        "2024-08-01,EXPENSE,Rent,900.00,z",
    ]


@pytest.fixture
def make_transaction():
    """Factory for transactions with July salary defaults."""
    def _make(**overrides) -> Transaction:
        fields = {
            "date": date(2024, 7, 15),
            "kind": TransactionKind.INCOME,
            "category": "Salary",
            "amount": Decimal("5000.00"),
            "note": "July salary",
        }
        fields.update(overrides)
        return Transaction(**fields)
    return _make
