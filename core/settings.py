"""Environment-driven defaults using Pydantic Settings."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .schema import MAX_HORIZON_MONTHS


class Settings(BaseSettings):
    """Projection defaults loaded from ``WEALTH_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WEALTH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Market assumptions
    return_rate: float = 0.07  # annual
    inflation_rate: float = 0.03  # annual
    credit_interest_rate: float = 0.025  # monthly, applied to negative wealth

    # Horizons
    window_months: int = Field(default=6, ge=1)
    horizon_months: int = Field(default=60, ge=1)
    max_horizon_months: int = Field(default=MAX_HORIZON_MONTHS, ge=1)

    # Service
    service_name: str = "wealth-projection"
    log_level: str = "INFO"


def get_settings() -> Settings:
    return Settings()
