"""Formatting helpers for pesos, rates and durations.

Mexican conventions: "$1,234.50", "36.00%".
"""

from __future__ import annotations

from decimal import Decimal


def format_currency(value: Decimal | float | int | None) -> str:
    """Format as pesos: 1234.5 -> "$1,234.50", -200 -> "-$200.00"."""
    if value is None:
        return "-"
    d = Decimal(str(value))
    sign = "-" if d < 0 else ""
    return f"{sign}${abs(d):,.2f}"


def format_rate(value: Decimal | float | None, places: int = 2) -> str:
    """Format a fraction as a percentage: 0.36 -> "36.00%"."""
    if value is None:
        return "-"
    pct = Decimal(str(value)) * 100
    return f"{pct:.{places}f}%"


def format_percentage(value: Decimal | float | None) -> str:
    """Format a value that is already a percentage: -0.2 -> "-0.20%"."""
    if value is None:
        return "-"
    return f"{Decimal(str(value)):.2f}%"


def format_months(months: int) -> str:
    """Format a month count with its length in years: 18 -> "18 meses (1.5 años)"."""
    return f"{months} meses ({months / 12:.1f} años)"


def format_yes_no(value: bool) -> str:
    return "Sí" if value else "No"
