"""Financial calculators — real yield, credit cost, comparisons."""

from finmex.calculators.comparison import best_debit, cheapest_credit, compare_credit, compare_debit
from finmex.calculators.credit_cost import minimum_payment_for, simulate_credit_cost
from finmex.calculators.real_yield import compute_real_yield

__all__ = [
    "compute_real_yield",
    "simulate_credit_cost",
    "minimum_payment_for",
    "compare_debit",
    "compare_credit",
    "best_debit",
    "cheapest_credit",
]
