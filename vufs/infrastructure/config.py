"""Engine configuration.

Loads settings from environment variables (prefixed ``VUFS_``) with
sensible defaults. The consignment defaults defined here seed
``ConsignmentSettings.from_engine_settings``.
"""

from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from vufs.domain.value_objects import DEFAULT_CURRENCY


class EngineSettings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="VUFS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Currency
    currency: str = DEFAULT_CURRENCY

    # Consignment defaults
    default_commission_rate: Decimal = Field(default=Decimal("0.30"), ge=0, le=1)
    payment_terms: int = Field(default=7, ge=0)
    minimum_payout: Decimal = Field(default=Decimal("50.00"), ge=0)
    auto_repass_threshold: Decimal = Field(default=Decimal("1000.00"), ge=0)


def get_settings() -> EngineSettings:
    """Load a fresh settings snapshot from the environment.

    Returns:
        EngineSettings instance.
    """
    return EngineSettings()
