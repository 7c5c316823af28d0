"""Trip-level aggregates, statistics and search over in-memory trips."""

from collections import defaultdict
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from .exceptions import TravellerNotFoundError
from .models import (
    Expense,
    ExpenseCategory,
    Traveller,
    Trip,
    TripStatistics,
    as_aware,
    local_now,
)


def trip_duration(trip: Trip) -> int:
    """
    Number of days the trip covers: whole elapsed days plus the first day.

    A trip that ends before it starts still counts as one day.
    """
    days = (trip.end_date - trip.start_date).days
    return max(days + 1, 1)


def trip_statistics(trip: Trip) -> TripStatistics:
    """Build the headline statistics for a trip."""
    return TripStatistics(
        total_days=trip_duration(trip),
        total_members=len(trip.traveller_ids),
        total_itinerary_items=len(trip.itinerary_items),
        completed_itinerary_items=sum(
            1 for item in trip.itinerary_items if item.is_completed
        ),
        total_expenses=trip.total_expenses,
        expense_count=len(trip.expenses),
    )


def expenses_by_category(expenses: Sequence[Expense]) -> dict[ExpenseCategory, Decimal]:
    """Total expense amount per category, for categories that have expenses."""
    result: dict[ExpenseCategory, Decimal] = defaultdict(Decimal)
    for expense in expenses:
        result[expense.category] += expense.amount
    return dict(result)


def expenses_by_currency(expenses: Sequence[Expense]) -> dict[str, list[Expense]]:
    """Group expenses by currency code, keeping input order within a group."""
    result: dict[str, list[Expense]] = defaultdict(list)
    for expense in expenses:
        result[expense.currency].append(expense)
    return dict(result)


def sorted_expenses(expenses: Sequence[Expense]) -> list[Expense]:
    """Expenses newest first."""
    return sorted(expenses, key=lambda e: e.date, reverse=True)


# ============================================================================
# Trip queries
# ============================================================================


def _newest_first(trips: Sequence[Trip]) -> list[Trip]:
    return sorted(trips, key=lambda t: t.start_date, reverse=True)


def upcoming_trips(trips: Sequence[Trip], now: datetime | None = None) -> list[Trip]:
    """Trips that have not started yet."""
    now = local_now() if now is None else as_aware(now)
    return [trip for trip in _newest_first(trips) if trip.start_date >= now]


def current_trips(trips: Sequence[Trip], now: datetime | None = None) -> list[Trip]:
    """Trips in progress at ``now``."""
    now = local_now() if now is None else as_aware(now)
    return [
        trip
        for trip in _newest_first(trips)
        if trip.start_date <= now and trip.end_date >= now
    ]


def past_trips(trips: Sequence[Trip], now: datetime | None = None) -> list[Trip]:
    """Trips that have already ended."""
    now = local_now() if now is None else as_aware(now)
    return [trip for trip in _newest_first(trips) if trip.end_date < now]


def search_trips(trips: Sequence[Trip], query: str) -> list[Trip]:
    """
    Case-insensitive substring search over trip name, location and notes.

    Args:
        trips: Trips to search
        query: Search text; empty returns every trip

    Returns:
        Matching trips, newest start date first
    """
    all_trips = _newest_first(trips)
    if not query:
        return all_trips

    needle = query.lower()
    return [
        trip
        for trip in all_trips
        if needle in trip.name.lower()
        or needle in trip.location.lower()
        or needle in trip.notes.lower()
    ]


# ============================================================================
# Traveller queries
# ============================================================================


def search_travellers(travellers: Sequence[Traveller], query: str) -> list[Traveller]:
    """Case-insensitive substring search over name and email, sorted by name."""
    all_travellers = sorted(travellers, key=lambda t: t.name)
    if not query:
        return all_travellers

    needle = query.lower()
    return [
        traveller
        for traveller in all_travellers
        if needle in traveller.name.lower() or needle in traveller.email.lower()
    ]


def find_traveller_by_name(
    travellers: Sequence[Traveller], name: str
) -> Traveller | None:
    """First traveller whose name matches ``name`` ignoring case."""
    wanted = name.lower()
    for traveller in travellers:
        if traveller.name.lower() == wanted:
            return traveller
    return None


def get_traveller(travellers: Sequence[Traveller], traveller_id: str) -> Traveller:
    """
    Look up a traveller by id.

    Raises:
        TravellerNotFoundError: If no traveller has this id
    """
    for traveller in travellers:
        if traveller.id == traveller_id:
            return traveller
    raise TravellerNotFoundError(traveller_id)


def trip_roster(trip: Trip, travellers: Sequence[Traveller]) -> list[Traveller]:
    """Travellers who are on this trip, in roster order."""
    member_ids = set(trip.traveller_ids)
    return [traveller for traveller in travellers if traveller.id in member_ids]
