"""Pydantic schemas for calculator inputs and results.

Pure data classes, no business logic. Used as the configuration object
passed into the calculators and as their return types.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from finmex.schemas.products import CreditProduct, DebitProduct

if TYPE_CHECKING:
    from finmex.config import Settings


# ---------------------------------------------------------------------------
# Assumptions
# ---------------------------------------------------------------------------


class FinanceAssumptions(BaseModel):
    """Tax, inflation and issuer rules the calculators work under."""

    model_config = ConfigDict(frozen=True)

    isr_rate: Decimal = Decimal("0.20")
    annual_inflation_rate: Decimal = Decimal("0.042")
    minimum_payment_rate: Decimal = Decimal("0.05")
    max_months: int = Field(default=1000, gt=0)
    dust_threshold: Decimal = Decimal("0.01")

    @classmethod
    def from_settings(cls, settings: Settings) -> FinanceAssumptions:
        """Build assumptions from the FINMEX_* environment settings."""
        a = settings.assumptions
        return cls(
            isr_rate=a.isr_rate,
            annual_inflation_rate=a.annual_inflation_rate,
            minimum_payment_rate=a.minimum_payment_rate,
            max_months=a.max_months,
        )


DEFAULT_ASSUMPTIONS = FinanceAssumptions()


# ---------------------------------------------------------------------------
# Real yield
# ---------------------------------------------------------------------------


class RealYieldResult(BaseModel):
    """One-year yield of a debit product after ISR, inflation and fees."""

    model_config = ConfigDict(frozen=True)

    balance: Decimal
    earns_yield: bool  # False when balance is below the product minimum
    gross_yield: Decimal
    tax_withheld: Decimal
    net_yield: Decimal
    inflation_loss: Decimal
    annual_fee: Decimal
    real_yield_amount: Decimal
    real_yield_percent: Decimal
    projected_balance: Decimal

    @property
    def gains_value(self) -> bool:
        """True when the money grows in real terms."""
        return self.real_yield_amount > 0

    def as_tuple(self) -> tuple[Decimal, Decimal, Decimal]:
        """(real_yield_amount, real_yield_percent, projected_balance)."""
        return self.real_yield_amount, self.real_yield_percent, self.projected_balance


# ---------------------------------------------------------------------------
# Credit cost
# ---------------------------------------------------------------------------


class PayoffStatus(str, Enum):
    """How an amortization simulation ended."""

    PAID_OFF = "paid_off"
    NOT_PAID_OFF = "not_paid_off"  # ceiling reached with debt outstanding


class CreditCostResult(BaseModel):
    """Total cost of carrying a debt on a credit card until it is repaid."""

    model_config = ConfigDict(frozen=True)

    status: PayoffStatus
    debt: Decimal
    requested_monthly_payment: Decimal
    minimum_payment: Decimal
    effective_monthly_payment: Decimal
    months: int  # months simulated; equals months to payoff when PAID_OFF
    remaining_balance: Decimal
    total_interest: Decimal
    fee_for_period: Decimal
    total_cost: Decimal
    cashback_benefit: Decimal
    net_cost: Decimal
    cost_percent: Decimal

    @property
    def paid_off(self) -> bool:
        return self.status is PayoffStatus.PAID_OFF

    @property
    def months_to_payoff(self) -> int | None:
        """Months needed to retire the debt, None if it never was."""
        return self.months if self.paid_off else None

    @property
    def payment_was_raised(self) -> bool:
        """True when the requested payment was lifted to the minimum."""
        return self.effective_monthly_payment > self.requested_monthly_payment

    @property
    def total_paid(self) -> Decimal:
        """Principal plus net cost."""
        return self.debt + self.net_cost

    def as_tuple(self) -> tuple[Decimal, int, Decimal]:
        """(net_cost, months, cost_percent)."""
        return self.net_cost, self.months, self.cost_percent


# ---------------------------------------------------------------------------
# Comparisons
# ---------------------------------------------------------------------------


class DebitComparisonRow(BaseModel):
    """One debit product evaluated at a shared balance."""

    model_config = ConfigDict(frozen=True)

    product: DebitProduct
    result: RealYieldResult

    @property
    def verdict(self) -> str:
        return "GANA" if self.result.gains_value else "PIERDE"


class CreditComparisonRow(BaseModel):
    """One credit product evaluated at a shared debt and payment."""

    model_config = ConfigDict(frozen=True)

    product: CreditProduct
    result: CreditCostResult
