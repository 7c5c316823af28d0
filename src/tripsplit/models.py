"""Pydantic domain models for TripSplit."""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated
from uuid import uuid4

from pydantic import AfterValidator, BaseModel, Field


def _new_id() -> str:
    return str(uuid4())


def as_aware(value: datetime) -> datetime:
    """Attach the local timezone to naive datetimes; aware ones pass through."""
    if value.tzinfo is None:
        return value.astimezone()
    return value


def local_now() -> datetime:
    """Current time as an aware datetime in the local timezone."""
    return datetime.now().astimezone()


# Naive values are read as local time
LocalDatetime = Annotated[datetime, AfterValidator(as_aware)]


# ============================================================================
# Enums
# ============================================================================


class TravellerType(str, Enum):
    """Whether a traveller is an adult or a child."""

    ADULT = "Adult"
    CHILD = "Child"


class ExpenseCategory(str, Enum):
    """Category an expense is filed under."""

    ACCOMMODATION = "Accommodation"
    TRANSPORTATION = "Transportation"
    FOOD = "Food & Dining"
    ACTIVITIES = "Activities"
    SHOPPING = "Shopping"
    OTHER = "Other"


class PayerMatch(str, Enum):
    """How an expense's payer identifier is joined to a traveller.

    NAME compares against the traveller's display name, which is how stored
    expenses have always recorded the payer. ID compares against the
    traveller's stable id instead.
    """

    NAME = "name"
    ID = "id"


# ============================================================================
# Trip Models
# ============================================================================


class Traveller(BaseModel):
    """A person who can join one or more trips."""

    id: str = Field(default_factory=_new_id)
    name: str
    email: str = ""
    phone_number: str = ""
    traveller_type: TravellerType = TravellerType.ADULT


class Expense(BaseModel):
    """A monetary cost tied to a trip."""

    id: str = Field(default_factory=_new_id)
    title: str = ""
    amount: Decimal
    currency: str = "USD"
    category: ExpenseCategory = ExpenseCategory.OTHER
    date: LocalDatetime = Field(default_factory=local_now)
    notes: str = ""
    paid_by: str = ""  # payer's display name (or id, see PayerMatch)
    shared_by: frozenset[str] = frozenset()  # traveller ids splitting this cost


class ItineraryItem(BaseModel):
    """A single planned activity within a trip."""

    id: str = Field(default_factory=_new_id)
    title: str
    description: str = ""
    date: LocalDatetime
    start_time: LocalDatetime | None = None
    end_time: LocalDatetime | None = None
    location: str = ""
    latitude: float | None = None
    longitude: float | None = None
    notes: str = ""
    is_completed: bool = False

    @property
    def time_range(self) -> str | None:
        """Start/end time as display text, or None without a start time."""
        if self.start_time is None:
            return None
        if self.end_time is None:
            return self.start_time.strftime("%H:%M")
        return f"{self.start_time:%H:%M} - {self.end_time:%H:%M}"


class Trip(BaseModel):
    """A planned journey with its roster, itinerary and expenses."""

    id: str = Field(default_factory=_new_id)
    name: str
    start_date: LocalDatetime
    end_date: LocalDatetime
    location: str
    latitude: float | None = None
    longitude: float | None = None
    notes: str = ""
    traveller_ids: list[str] = Field(default_factory=list)
    itinerary_items: list[ItineraryItem] = Field(default_factory=list)
    expenses: list[Expense] = Field(default_factory=list)

    @property
    def total_expenses(self) -> Decimal:
        """Sum of every expense amount, split or not."""
        return sum((expense.amount for expense in self.expenses), Decimal("0"))


class TripSnapshot(BaseModel):
    """A trip together with the traveller roster it refers to.

    This is the unit the snapshot loader reads and writes, and what the
    service layer builds reports from.
    """

    trip: Trip
    travellers: list[Traveller] = Field(default_factory=list)


# ============================================================================
# Computed Models
# ============================================================================


class ExpenseShare(BaseModel):
    """A traveller's settlement position for a trip.

    Created fresh on every calculation and never stored.
    """

    traveller_id: str
    traveller_name: str
    share: Decimal  # what they should pay
    paid: Decimal  # what they actually paid
    balance: Decimal  # positive = owed to them, negative = they owe


class TripStatistics(BaseModel):
    """Headline numbers for a trip."""

    total_days: int
    total_members: int
    total_itinerary_items: int
    completed_itinerary_items: int
    total_expenses: Decimal
    expense_count: int

    @property
    def itinerary_completion_percentage(self) -> float:
        if self.total_itinerary_items == 0:
            return 0.0
        return self.completed_itinerary_items / self.total_itinerary_items * 100

    @property
    def average_expense_per_day(self) -> Decimal:
        if self.total_days <= 0:
            return Decimal("0")
        return self.total_expenses / self.total_days

    @property
    def average_expense_per_member(self) -> Decimal:
        if self.total_members <= 0:
            return Decimal("0")
        return self.total_expenses / self.total_members


class TripReport(BaseModel):
    """Everything the report views need for one trip."""

    trip_id: str
    trip_name: str
    currency: str
    statistics: TripStatistics
    shares: list[ExpenseShare]
    expenses_by_category: dict[ExpenseCategory, Decimal]
    unmatched_payers: list[Expense] = Field(default_factory=list)
