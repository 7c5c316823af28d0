"""Service layer that composes settlement and trip aggregate operations.

This module provides a higher-level API over the pure calculators, applying
the configured settings and producing complete trip reports.
"""

import logging
from collections.abc import Sequence

from .config import Settings
from .models import (
    ExpenseShare,
    Traveller,
    Trip,
    TripReport,
    TripSnapshot,
)
from .shares import compute_shares, find_unmatched_payers
from .trips import (
    expenses_by_category,
    get_traveller,
    trip_roster,
    trip_statistics,
)

logger = logging.getLogger(__name__)


class TripService:
    """Service for computing settlements and reports for trips."""

    def __init__(self, settings: Settings):
        """Initialize the trip service."""
        self.settings = settings

    def compute_shares(
        self, trip: Trip, travellers: Sequence[Traveller]
    ) -> list[ExpenseShare]:
        """
        Compute shares for the travellers on this trip.

        Travellers not listed in ``trip.traveller_ids`` are ignored.

        Args:
            trip: The trip whose expenses are split
            travellers: All known travellers

        Returns:
            One ExpenseShare per trip member, sorted by name
        """
        roster = trip_roster(trip, travellers)
        return compute_shares(roster, trip.expenses, self.settings.payer_match)

    def get_traveller_share(
        self, trip: Trip, travellers: Sequence[Traveller], traveller_id: str
    ) -> ExpenseShare:
        """
        Compute the share of a single trip member.

        Raises:
            TravellerNotFoundError: If the traveller is not on the trip
        """
        roster = trip_roster(trip, travellers)
        traveller = get_traveller(roster, traveller_id)
        return compute_shares([traveller], trip.expenses, self.settings.payer_match)[0]

    def report_currency(self, trip: Trip) -> str:
        """Currency of the trip's first expense, or the configured default."""
        if trip.expenses:
            return trip.expenses[0].currency
        return self.settings.default_currency

    def build_report(self, snapshot: TripSnapshot) -> TripReport:
        """
        Build a full report for a trip snapshot.

        Args:
            snapshot: The trip and traveller roster

        Returns:
            Statistics, shares, per-category totals and unmatched payers
        """
        trip = snapshot.trip
        roster = trip_roster(trip, snapshot.travellers)

        shares = compute_shares(roster, trip.expenses, self.settings.payer_match)
        unmatched = find_unmatched_payers(
            roster, trip.expenses, self.settings.payer_match
        )

        report = TripReport(
            trip_id=trip.id,
            trip_name=trip.name,
            currency=self.report_currency(trip),
            statistics=trip_statistics(trip),
            shares=shares,
            expenses_by_category=expenses_by_category(trip.expenses),
            unmatched_payers=unmatched,
        )

        logger.info(
            f"Built report for '{trip.name}': {len(shares)} travellers, "
            f"{len(trip.expenses)} expenses, total {report.statistics.total_expenses}"
        )

        return report
