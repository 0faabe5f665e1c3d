"""
Application configuration.

All configuration is loaded from environment variables.
Never hardcode connection strings in code.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv

# Load .env file into environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "Payment Ledger"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Database (only used by the "database" record store)
    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        "sqlite:///./payment_ledger.db"
    )

    # Transaction record store: "memory" or "database"
    RECORD_STORE: str = os.getenv("RECORD_STORE", "memory").lower()

    # How long deposit/withdrawal records stay disputable. 0 keeps them forever.
    RECORD_RETENTION_DAYS: int = int(os.getenv("RECORD_RETENTION_DAYS", "0"))

    # Number of independent ledger engines clients are routed across
    SHARD_COUNT: int = int(os.getenv("SHARD_COUNT", "1"))


@lru_cache()
def get_settings() -> Settings:
    """
    Return cached settings instance.

    The Settings object is created once and reused for all
    subsequent calls, so environment variables are read once.
    """
    return Settings()
