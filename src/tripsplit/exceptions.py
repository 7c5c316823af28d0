"""Custom exceptions for TripSplit."""


class TripSplitError(Exception):
    """Base exception for all TripSplit errors."""

    pass


class ConfigurationError(TripSplitError):
    """Raised when configuration is invalid or missing."""

    pass


class SnapshotError(TripSplitError):
    """Raised when a trip snapshot file cannot be read or parsed."""

    def __init__(self, path: str, message: str | None = None):
        self.path = path
        super().__init__(message or f"Could not load trip snapshot from {path}")


class TravellerNotFoundError(TripSplitError):
    """Raised when a traveller lookup by id finds nothing in the roster."""

    def __init__(self, traveller_id: str):
        self.traveller_id = traveller_id
        super().__init__(f"Traveller {traveller_id} is not in the roster")
