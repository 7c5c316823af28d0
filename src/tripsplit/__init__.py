"""TripSplit - Split shared trip expenses and settle who owes whom."""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .models import (
    Expense,
    ExpenseCategory,
    ExpenseShare,
    PayerMatch,
    Traveller,
    Trip,
    TripReport,
    TripSnapshot,
)
from .service import TripService
from .shares import compute_shares, total_expenses

__all__ = [
    "Settings",
    "load_settings",
    "Expense",
    "ExpenseCategory",
    "ExpenseShare",
    "PayerMatch",
    "Traveller",
    "Trip",
    "TripReport",
    "TripSnapshot",
    "TripService",
    "compute_shares",
    "total_expenses",
]
