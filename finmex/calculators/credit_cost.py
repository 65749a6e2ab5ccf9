"""Credit card cost simulator.

Pure Python, Decimal arithmetic. Implements:
- Minimum payment floor (debt × minimum_payment_rate), applied before simulating
- Month-by-month amortization at annual_rate / 12 until the debt is retired
- Annual fee pro-rated by months elapsed
- Cashback on the original purchase, netted out of the cost

The simulation stops at ``max_months``. A payment that never outgrows the
monthly interest ends there with debt outstanding and is reported as
NOT_PAID_OFF rather than as a payoff.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from finmex.exceptions import InvalidAmountError
from finmex.schemas.calculators import (
    DEFAULT_ASSUMPTIONS,
    CreditCostResult,
    FinanceAssumptions,
    PayoffStatus,
)
from finmex.schemas.products import CreditProduct

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


def minimum_payment_for(debt: Decimal, assumptions: FinanceAssumptions = DEFAULT_ASSUMPTIONS) -> Decimal:
    """Smallest monthly payment an issuer accepts for ``debt``."""
    return debt * assumptions.minimum_payment_rate


def _amortize(
    debt: Decimal,
    monthly_rate: Decimal,
    payment: Decimal,
    assumptions: FinanceAssumptions,
) -> tuple[int, Decimal, Decimal]:
    """Run the monthly loop. Returns (months, total_interest, remaining)."""
    remaining = debt
    months = 0
    total_interest = _ZERO

    while remaining > 0 and months < assumptions.max_months:
        interest = remaining * monthly_rate
        total_interest += interest

        # Never pay more than what is owed
        applied = min(payment, remaining + interest)
        remaining = remaining + interest - applied
        months += 1

        if remaining < assumptions.dust_threshold:
            remaining = _ZERO

    return months, total_interest, remaining


def simulate_credit_cost(
    product: CreditProduct,
    debt: Decimal,
    monthly_payment: Decimal,
    assumptions: FinanceAssumptions = DEFAULT_ASSUMPTIONS,
) -> CreditCostResult:
    """Simulate repaying ``debt`` on a card and total what it costs.

    Args:
        product: Credit product carrying the debt.
        debt: Purchase or outstanding amount.
        monthly_payment: Payment the user plans to make every month.
            Raised to the minimum payment when below it.
        assumptions: Minimum payment rate and simulation ceiling.

    Returns:
        CreditCostResult with net cost, months and cost as % of the debt.

    Raises:
        InvalidAmountError: If the debt is zero or negative.
    """
    if debt <= _ZERO:
        raise InvalidAmountError(f"La deuda debe ser mayor a cero: {debt}")

    minimum = minimum_payment_for(debt, assumptions)
    payment = max(monthly_payment, minimum)
    if payment != monthly_payment:
        logger.debug("Payment %s raised to minimum %s", monthly_payment, minimum)

    monthly_rate = product.annual_interest_rate / 12
    months, total_interest, remaining = _amortize(debt, monthly_rate, payment, assumptions)

    if remaining > _ZERO:
        status = PayoffStatus.NOT_PAID_OFF
        logger.warning(
            "%s: debt %s not repaid after %d months at %s/month (%s outstanding)",
            product.name,
            debt,
            months,
            payment,
            remaining,
        )
    else:
        status = PayoffStatus.PAID_OFF

    fee_for_period = product.annual_fee * months / 12
    total_cost = total_interest + fee_for_period
    cashback = debt * product.cashback_rate
    net_cost = total_cost - cashback

    return CreditCostResult(
        status=status,
        debt=debt,
        requested_monthly_payment=monthly_payment,
        minimum_payment=minimum,
        effective_monthly_payment=payment,
        months=months,
        remaining_balance=remaining,
        total_interest=total_interest,
        fee_for_period=fee_for_period,
        total_cost=total_cost,
        cashback_benefit=cashback,
        net_cost=net_cost,
        cost_percent=net_cost / debt * 100,
    )
