"""Real yield calculator for debit products.

Pure Python, Decimal arithmetic. Nets ISR, inflation and the annual fee
out of the nominal yield over a one-year horizon:

  gross       = balance × nominal_rate
  tax         = gross × ISR
  net         = gross − tax
  inflation   = balance × annual_inflation
  real        = net − inflation − annual_fee
  projected   = balance + real

Below the product's minimum balance no yield accrues, but the annual fee
is still charged.
"""

from __future__ import annotations

import logging
from decimal import Decimal

from finmex.exceptions import InvalidAmountError
from finmex.schemas.calculators import DEFAULT_ASSUMPTIONS, FinanceAssumptions, RealYieldResult
from finmex.schemas.products import DebitProduct

logger = logging.getLogger(__name__)

_ZERO = Decimal("0")


def compute_real_yield(
    product: DebitProduct,
    balance: Decimal,
    assumptions: FinanceAssumptions = DEFAULT_ASSUMPTIONS,
) -> RealYieldResult:
    """Calculate the after-tax, after-inflation annual yield of a balance.

    Args:
        product: Debit product holding the balance.
        balance: Average balance kept in the account.
        assumptions: ISR and inflation rates to apply.

    Returns:
        RealYieldResult with amount, percent and projected balance.

    Raises:
        InvalidAmountError: If the balance is negative.
    """
    if balance < _ZERO:
        raise InvalidAmountError(f"El saldo no puede ser negativo: {balance}")

    if balance < product.minimum_balance:
        logger.debug(
            "Balance %s below minimum %s for %s, no yield",
            balance,
            product.minimum_balance,
            product.name,
        )
        return RealYieldResult(
            balance=balance,
            earns_yield=False,
            gross_yield=_ZERO,
            tax_withheld=_ZERO,
            net_yield=_ZERO,
            inflation_loss=_ZERO,
            annual_fee=product.annual_fee,
            real_yield_amount=_ZERO,
            real_yield_percent=_ZERO,
            projected_balance=balance - product.annual_fee,
        )

    gross = balance * product.nominal_rate
    tax = gross * assumptions.isr_rate
    net = gross - tax
    inflation = balance * assumptions.annual_inflation_rate
    real = net - inflation - product.annual_fee

    # A zero balance that meets a zero minimum has no meaningful percentage
    percent = real / balance * 100 if balance else _ZERO

    return RealYieldResult(
        balance=balance,
        earns_yield=True,
        gross_yield=gross,
        tax_withheld=tax,
        net_yield=net,
        inflation_loss=inflation,
        annual_fee=product.annual_fee,
        real_yield_amount=real,
        real_yield_percent=percent,
        projected_balance=balance + real,
    )
