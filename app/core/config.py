# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "roster-service")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8010"))

    # Rotation display thresholds (days)
    DEPARTURE_ALERT_DAYS: int = int(os.getenv("DEPARTURE_ALERT_DAYS", "3"))
    LONG_STAY_DAYS: int = int(os.getenv("LONG_STAY_DAYS", "14"))
    CERT_EXPIRING_DAYS: int = int(os.getenv("CERT_EXPIRING_DAYS", "90"))

    DEFAULT_HISTORY_LIMIT: int = int(os.getenv("DEFAULT_HISTORY_LIMIT", "100"))
    MAX_HISTORY_SIZE: int = int(os.getenv("MAX_HISTORY_SIZE", "10000"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    SEED_DEFAULT_ROSTER: bool = (
        os.getenv("SEED_DEFAULT_ROSTER", "true").lower() == "true"
    )


settings = Settings()
