"""rich renderables for catalog listings, analyses and comparisons.

Builders only return renderables; the CLI decides where to print them.
"""

from __future__ import annotations

from collections.abc import Sequence

from rich import box
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from finmex.display.formatters import (
    format_currency,
    format_months,
    format_percentage,
    format_rate,
    format_yes_no,
)
from finmex.schemas.calculators import (
    CreditComparisonRow,
    CreditCostResult,
    DebitComparisonRow,
    FinanceAssumptions,
    RealYieldResult,
)
from finmex.schemas.products import CreditProduct, DebitProduct

# ── Listings ─────────────────────────────────────────────────────────


def debit_list_table(products: Sequence[DebitProduct]) -> Table:
    t = Table(box=box.SIMPLE_HEAD)
    t.add_column("Nombre", style="cyan")
    t.add_column("Banco")
    t.add_column("Rendimiento", justify="right")
    t.add_column("Saldo Mínimo", justify="right")
    t.add_column("Comisión Anual", justify="right")
    for p in products:
        t.add_row(
            p.name,
            p.institution,
            format_rate(p.nominal_rate),
            format_currency(p.minimum_balance),
            format_currency(p.annual_fee),
        )
    return t


def credit_list_table(products: Sequence[CreditProduct]) -> Table:
    t = Table(box=box.SIMPLE_HEAD)
    t.add_column("Nombre", style="cyan")
    t.add_column("Banco")
    t.add_column("Interés", justify="right")
    t.add_column("CAT", justify="right")
    t.add_column("Comisión Anual", justify="right")
    t.add_column("Límite", justify="right")
    t.add_column("Cashback", justify="right")
    t.add_column("MSI")
    for p in products:
        t.add_row(
            p.name,
            p.institution,
            format_rate(p.annual_interest_rate),
            format_rate(p.cat),
            format_currency(p.annual_fee),
            format_currency(p.credit_limit),
            format_rate(p.cashback_rate),
            format_yes_no(p.interest_free_installments),
        )
    return t


def selection_menu(products: Sequence[DebitProduct] | Sequence[CreditProduct]) -> Text:
    """Numbered "1. Name (Bank)" list used before prompting for a choice."""
    lines = [f"{i}. {p.name} ({p.institution})" for i, p in enumerate(products, start=1)]
    return Text("\n".join(lines))


# ── Single-product analyses ──────────────────────────────────────────


def _detail_table() -> Table:
    t = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    t.add_column("Concepto", style="cyan")
    t.add_column("Valor", justify="right")
    return t


def real_yield_panel(
    product: DebitProduct,
    result: RealYieldResult,
    assumptions: FinanceAssumptions,
) -> Panel:
    t = _detail_table()
    t.add_row("Tarjeta", f"{product.name} ({product.institution})")
    t.add_row("Tasa nominal", format_rate(product.nominal_rate))
    t.add_row("Saldo inicial", format_currency(result.balance))
    if result.earns_yield:
        t.add_row("Rendimiento bruto anual", format_currency(result.gross_yield))
        t.add_row(f"Impuestos (ISR {format_rate(assumptions.isr_rate, 0)})", format_currency(result.tax_withheld))
        t.add_row(
            f"Pérdida por inflación ({format_rate(assumptions.annual_inflation_rate, 1)})",
            format_currency(result.inflation_loss),
        )
    else:
        t.add_row("Rendimiento", f"Saldo menor al mínimo ({format_currency(product.minimum_balance)})")
    t.add_row("Comisión anual", format_currency(result.annual_fee))
    t.add_row(
        "Rendimiento real anual",
        f"{format_currency(result.real_yield_amount)} ({format_percentage(result.real_yield_percent)})",
    )

    if result.gains_value:
        verdict = Text(
            f"Tu dinero GANA valor real ({format_currency(result.projected_balance)} después de un año)",
            style="bold green",
        )
    else:
        verdict = Text(
            f"Tu dinero PIERDE valor real ({format_currency(result.projected_balance)} después de un año)",
            style="bold red",
        )
    return Panel(Group(t, verdict), title="Análisis de Rendimiento", expand=False)


def credit_cost_panel(product: CreditProduct, result: CreditCostResult) -> Panel:
    t = _detail_table()
    t.add_row("Tarjeta", f"{product.name} ({product.institution})")
    t.add_row("Deuda/Compra", format_currency(result.debt))
    t.add_row("Tasa de interés anual", format_rate(product.annual_interest_rate))
    t.add_row("CAT", format_rate(product.cat))
    t.add_row("Pago mensual", format_currency(result.effective_monthly_payment))
    if result.paid_off:
        t.add_row("Tiempo para liquidar", format_months(result.months))
    else:
        t.add_row(
            "Tiempo para liquidar",
            f"No se liquida en {format_months(result.months)}; quedan {format_currency(result.remaining_balance)}",
        )
    if product.cashback_rate > 0:
        t.add_row(
            f"Beneficio por cashback ({format_rate(product.cashback_rate, 1)})",
            format_currency(result.cashback_benefit),
        )
    t.add_row(
        "Costo total del crédito",
        f"{format_currency(result.net_cost)} ({format_percentage(result.cost_percent)} del monto original)",
    )
    t.add_row("Monto total pagado", format_currency(result.total_paid))
    return Panel(t, title="Análisis de Crédito", expand=False)


# ── Comparisons ──────────────────────────────────────────────────────


def debit_comparison_table(rows: Sequence[DebitComparisonRow]) -> Table:
    t = Table(box=box.SIMPLE_HEAD)
    t.add_column("Nombre", style="cyan")
    t.add_column("Banco")
    t.add_column("Rend. Nominal", justify="right")
    t.add_column("Rend. Real", justify="right")
    t.add_column("Saldo Final", justify="right")
    t.add_column("Resultado")
    for row in rows:
        t.add_row(
            row.product.name,
            row.product.institution,
            format_rate(row.product.nominal_rate),
            format_percentage(row.result.real_yield_percent),
            format_currency(row.result.projected_balance),
            Text(row.verdict, style="green" if row.result.gains_value else "red"),
        )
    return t


def credit_comparison_table(rows: Sequence[CreditComparisonRow]) -> Table:
    t = Table(box=box.SIMPLE_HEAD)
    t.add_column("Nombre", style="cyan")
    t.add_column("Banco")
    t.add_column("CAT", justify="right")
    t.add_column("Costo Total", justify="right")
    t.add_column("Meses", justify="right")
    t.add_column("Cashback", justify="right")
    t.add_column("MSI")
    for row in rows:
        months = str(row.result.months) if row.result.paid_off else f"{row.result.months}+"
        t.add_row(
            row.product.name,
            row.product.institution,
            format_rate(row.product.cat),
            format_currency(row.result.net_cost),
            months,
            format_rate(row.product.cashback_rate),
            format_yes_no(row.product.interest_free_installments),
        )
    return t
