"""
Configuration for the MRZ verifier and its HTTP service
"""

from __future__ import annotations

from datetime import timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mrz_verifier.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Settings read from the environment and an optional .env file"""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # API configuration
    PROJECT_NAME: str = "MRZ Verification API"
    PROJECT_DESCRIPTION: str = """
    Verifies the data line of a TD3 passport MRZ: per-field check digits,
    the composite check digit and the expiry date.
    """
    VERSION: str = "0.1.0"

    # Server configuration
    HOST: str = "localhost"
    PORT: int = 8080

    # Environment configuration
    ENVIRONMENT: str = "development"

    # Security configuration
    USE_API_KEY: bool = False
    API_KEY: str = ""

    # CORS configuration
    CORS_ORIGINS: list[str] = ["*"]

    # Logging configuration (LOG_FORMAT is "json", "text" or a logging format string)
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"

    # Verification behaviour
    MRZ_STRICT_LENGTH: bool = True
    MRZ_TIMEZONE: str = "UTC"
    MRZ_CENTURY_PIVOT: int = Field(default=50, ge=0, le=100)
    MRZ_REJECT_IMPOSSIBLE_DATES: bool = False

    @property
    def DEBUG(self) -> bool:  # noqa: N802
        return self.ENVIRONMENT == "development"

    def expiry_timezone(self) -> tzinfo:
        """Time zone in which 'today' is determined for expiry checks."""
        if self.MRZ_TIMEZONE.upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(self.MRZ_TIMEZONE)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"Unknown MRZ_TIMEZONE: {self.MRZ_TIMEZONE!r}"
            raise ConfigurationError(msg) from exc


settings = Settings()
