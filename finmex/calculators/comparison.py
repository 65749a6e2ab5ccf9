"""Side-by-side evaluation of every catalog product of one kind.

Pure Python orchestrator over the two calculators. The CLI loads the
catalog and renders the rows.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

from finmex.calculators.credit_cost import simulate_credit_cost
from finmex.calculators.real_yield import compute_real_yield
from finmex.exceptions import ComparisonError
from finmex.schemas.calculators import (
    DEFAULT_ASSUMPTIONS,
    CreditComparisonRow,
    DebitComparisonRow,
    FinanceAssumptions,
)
from finmex.schemas.products import CreditProduct, DebitProduct

MIN_PRODUCTS = 2


def compare_debit(
    products: Sequence[DebitProduct],
    balance: Decimal,
    assumptions: FinanceAssumptions = DEFAULT_ASSUMPTIONS,
) -> list[DebitComparisonRow]:
    """Evaluate the real yield of each debit product at the same balance."""
    if len(products) < MIN_PRODUCTS:
        raise ComparisonError("Se necesitan al menos 2 tarjetas de débito para comparar")
    return [
        DebitComparisonRow(product=p, result=compute_real_yield(p, balance, assumptions))
        for p in products
    ]


def compare_credit(
    products: Sequence[CreditProduct],
    debt: Decimal,
    monthly_payment: Decimal,
    assumptions: FinanceAssumptions = DEFAULT_ASSUMPTIONS,
) -> list[CreditComparisonRow]:
    """Evaluate the cost of each credit product for the same debt and payment."""
    if len(products) < MIN_PRODUCTS:
        raise ComparisonError("Se necesitan al menos 2 tarjetas de crédito para comparar")
    return [
        CreditComparisonRow(
            product=p,
            result=simulate_credit_cost(p, debt, monthly_payment, assumptions),
        )
        for p in products
    ]


def best_debit(rows: Sequence[DebitComparisonRow]) -> DebitComparisonRow | None:
    """Row with the highest real yield; the first one wins ties."""
    best: DebitComparisonRow | None = None
    for row in rows:
        if best is None or row.result.real_yield_amount > best.result.real_yield_amount:
            best = row
    return best


def cheapest_credit(rows: Sequence[CreditComparisonRow]) -> CreditComparisonRow | None:
    """Row with the lowest net cost among products that repay the debt.

    Products that never pay off within the horizon are only picked when
    none does. The first one wins ties.
    """
    paid = [r for r in rows if r.result.paid_off]
    candidates = paid or list(rows)
    best: CreditComparisonRow | None = None
    for row in candidates:
        if best is None or row.result.net_cost < best.result.net_cost:
            best = row
    return best
