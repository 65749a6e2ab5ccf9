"""Application configuration via pydantic-settings.

Values are loaded from environment variables (or a .env file) with the
FINMEX_ prefix. Settings are organized into logical groups and composed
into a single Settings object.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AssumptionSettings(BaseSettings):
    """Mexican tax, inflation and card-issuer assumptions."""

    model_config = SettingsConfigDict(env_prefix="FINMEX_", env_file=".env", extra="ignore")

    isr_rate: Decimal = Field(
        default=Decimal("0.20"),
        description="ISR withheld on investment yield (fraction)",
    )
    annual_inflation_rate: Decimal = Field(
        default=Decimal("0.042"),
        description="Assumed annual inflation (fraction)",
    )
    minimum_payment_rate: Decimal = Field(
        default=Decimal("0.05"),
        description="Credit card minimum monthly payment as a fraction of the debt",
    )
    max_months: int = Field(default=1000, gt=0, description="Amortization iteration ceiling")


class CatalogSettings(BaseSettings):
    """Where the product catalog lives on disk."""

    model_config = SettingsConfigDict(env_prefix="FINMEX_", env_file=".env", extra="ignore")

    catalog_path: Path = Field(
        default=Path("tarjetas.json"),
        description="JSON file holding debit and credit products",
    )


class Settings(BaseSettings):
    """Root settings composing all sub-settings.

    Usage:
        settings = Settings()
        settings.assumptions.isr_rate
        settings.catalog.catalog_path
    """

    model_config = SettingsConfigDict(env_prefix="FINMEX_", env_file=".env", extra="ignore")

    environment: str = Field(default="development")
    log_level: str = Field(default="WARNING")

    assumptions: AssumptionSettings = Field(default_factory=AssumptionSettings)
    catalog: CatalogSettings = Field(default_factory=CatalogSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


# Module-level singleton, import this wherever settings are needed.
settings = Settings()
