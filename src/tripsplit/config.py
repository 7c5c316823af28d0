"""Configuration management for TripSplit."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError
from .models import PayerMatch


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TRIPSPLIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Currency shown when a trip has no expenses to take one from
    default_currency: str = "USD"

    # Settlement settings
    payer_match: PayerMatch = PayerMatch.NAME  # join Expense.paid_by on name or id

    # Display settings (computation is never rounded)
    money_places: int = 2


def load_settings() -> Settings:
    """Load application settings from environment variables."""
    try:
        return Settings()
    except Exception as e:
        raise ConfigurationError(
            f"Failed to load settings. Check the TRIPSPLIT_* variables in your "
            f"environment or .env file.\n"
            f"Error: {e}"
        ) from e
