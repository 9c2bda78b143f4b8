"""Configuration management for the checkout demo.

Loads logging settings from environment variables with sensible defaults.
The demo amount and menu options are fixed and not configurable.
"""

import os
from decimal import Decimal

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Central configuration for the checkout demo."""

    # Checkout
    DEMO_AMOUNT: Decimal = Decimal("50.00")
    CURRENCY_SYMBOL: str = "$"

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    LOG_FORMAT: str = os.getenv("LOG_FORMAT", "console")

    @classmethod
    def use_json_logs(cls) -> bool:
        """Whether log records should be rendered as JSON."""
        return cls.LOG_FORMAT.lower() == "json"

    @classmethod
    def get_summary(cls) -> dict:
        """Return a summary of current configuration for logging."""
        return {
            "demo_amount": str(cls.DEMO_AMOUNT),
            "log_level": cls.LOG_LEVEL,
            "log_format": cls.LOG_FORMAT,
        }
