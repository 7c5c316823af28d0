"""Shared fixtures for TripSplit tests."""

from datetime import datetime
from decimal import Decimal

import pytest

from tripsplit.models import (
    Expense,
    ExpenseCategory,
    Traveller,
    Trip,
    TripSnapshot,
)


@pytest.fixture
def sample_travellers():
    """Three trip members and one traveller who stayed home."""
    return [
        Traveller(id="c", name="Charlie"),
        Traveller(id="a", name="Alice", email="alice@example.com"),
        Traveller(id="b", name="Bob"),
        Traveller(id="d", name="Dana"),
    ]


@pytest.fixture
def sample_trip():
    """A trip where Alice and Bob paid for shared costs."""
    return Trip(
        id="trip-1",
        name="Alps Weekend",
        start_date=datetime(2025, 2, 7),
        end_date=datetime(2025, 2, 9),
        location="Chamonix",
        traveller_ids=["a", "b", "c"],
        expenses=[
            Expense(
                id="e1",
                title="Chalet",
                amount=Decimal("150"),
                currency="EUR",
                category=ExpenseCategory.ACCOMMODATION,
                date=datetime(2025, 2, 7),
                paid_by="Alice",
                shared_by={"a", "b", "c"},
            ),
            Expense(
                id="e2",
                title="Fondue",
                amount=Decimal("60"),
                currency="EUR",
                category=ExpenseCategory.FOOD,
                date=datetime(2025, 2, 8),
                paid_by="Bob",
                shared_by={"b", "c"},
            ),
        ],
    )


@pytest.fixture
def sample_snapshot(sample_trip, sample_travellers):
    return TripSnapshot(trip=sample_trip, travellers=sample_travellers)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Keep settings independent of the developer's environment and .env."""
    monkeypatch.chdir(tmp_path)
    for key in (
        "TRIPSPLIT_DEFAULT_CURRENCY",
        "TRIPSPLIT_PAYER_MATCH",
        "TRIPSPLIT_MONEY_PLACES",
    ):
        monkeypatch.delenv(key, raising=False)
