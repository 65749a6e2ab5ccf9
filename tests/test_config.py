"""Tests for settings and the assumptions built from them."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from finmex.config import AssumptionSettings, CatalogSettings, Settings
from finmex.schemas.calculators import DEFAULT_ASSUMPTIONS, FinanceAssumptions


class TestSettings:
    def test_log_level_normalized(self) -> None:
        assert Settings(log_level="info").log_level == "INFO"

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            Settings(log_level="verbose")

    def test_env_overrides_assumptions(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FINMEX_ANNUAL_INFLATION_RATE", "0.05")
        monkeypatch.setenv("FINMEX_MAX_MONTHS", "360")
        a = AssumptionSettings()
        assert a.annual_inflation_rate == Decimal("0.05")
        assert a.max_months == 360

    def test_env_overrides_catalog_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FINMEX_CATALOG_PATH", "/tmp/mis_tarjetas.json")
        assert str(CatalogSettings().catalog_path) == "/tmp/mis_tarjetas.json"


class TestFinanceAssumptions:
    def test_defaults(self) -> None:
        assert DEFAULT_ASSUMPTIONS.isr_rate == Decimal("0.20")
        assert DEFAULT_ASSUMPTIONS.annual_inflation_rate == Decimal("0.042")
        assert DEFAULT_ASSUMPTIONS.minimum_payment_rate == Decimal("0.05")
        assert DEFAULT_ASSUMPTIONS.max_months == 1000

    def test_from_settings(self) -> None:
        s = Settings(assumptions=AssumptionSettings(isr_rate=Decimal("0.10"), max_months=120))
        a = FinanceAssumptions.from_settings(s)
        assert a.isr_rate == Decimal("0.10")
        assert a.max_months == 120
        assert a.annual_inflation_rate == s.assumptions.annual_inflation_rate

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            DEFAULT_ASSUMPTIONS.isr_rate = Decimal("0.5")  # type: ignore[misc]

    def test_ceiling_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            FinanceAssumptions(max_months=0)
