"""Command-line entry point: click command groups wired to the calculators.

Usage:
    finmex debito agregar | analizar | listar
    finmex credito agregar | analizar | listar
    finmex comparar debito | credito

    python -m finmex.main --help
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

import click
import structlog
from rich.console import Console

from finmex import __version__
from finmex.calculators import (
    best_debit,
    cheapest_credit,
    compare_credit,
    compare_debit,
    compute_real_yield,
    simulate_credit_cost,
)
from finmex.calculators.comparison import MIN_PRODUCTS
from finmex.catalog.store import CatalogStore
from finmex.config import settings
from finmex.display.formatters import format_currency
from finmex.display.tables import (
    credit_comparison_table,
    credit_cost_panel,
    credit_list_table,
    debit_comparison_table,
    debit_list_table,
    real_yield_panel,
    selection_menu,
)
from finmex.exceptions import FinmexError
from finmex.schemas.calculators import FinanceAssumptions
from finmex.schemas.products import Catalog, CreditProduct, DebitProduct

log = structlog.get_logger(__name__)

# ── Logging setup ────────────────────────────────────────────────────


def configure_logging(level: str) -> None:
    """Route stdlib and structlog output to stderr at ``level``."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)-8s %(name)s — %(message)s",
        stream=sys.stderr,
    )
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


# ── Shared state and input helpers ───────────────────────────────────


@dataclass
class AppContext:
    """Per-invocation objects shared by every subcommand."""

    store: CatalogStore
    assumptions: FinanceAssumptions
    console: Console


class DecimalType(click.ParamType):
    """Parse command-line and prompt input straight into Decimal."""

    name = "decimal"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Decimal:
        if isinstance(value, Decimal):
            return value
        try:
            d = Decimal(str(value).strip())
        except InvalidOperation:
            self.fail(f"{value!r} no es un número válido", param, ctx)
        # NaN and Infinity parse but cannot be compared or summed
        if not d.is_finite():
            self.fail(f"{value!r} no es un número válido", param, ctx)
        return d


DECIMAL = DecimalType()

pass_app = click.make_pass_decorator(AppContext)


def _load(app: AppContext) -> Catalog:
    try:
        return app.store.load()
    except FinmexError as exc:
        raise click.ClickException(f"Error al cargar tarjetas: {exc}") from exc


def _select(app: AppContext, products: list[Any], kind: str, card: int | None) -> Any:
    """Let the user pick one product by its 1-based position."""
    app.console.print(f"Tarjetas de {kind} disponibles:")
    app.console.print(selection_menu(products))
    if card is None:
        card = click.prompt("Selecciona una tarjeta (número)", type=int)
    if card < 1 or card > len(products):
        raise click.ClickException("Selección inválida")
    return products[card - 1]


# ── Root group ───────────────────────────────────────────────────────


@click.group()
@click.version_option(__version__, prog_name="finmex")
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Archivo JSON de tarjetas (por defecto FINMEX_CATALOG_PATH o tarjetas.json).",
)
@click.pass_context
def cli(ctx: click.Context, catalog_path: Path | None) -> None:
    """Calculadora financiera para productos financieros mexicanos."""
    configure_logging(settings.log_level)
    path = catalog_path or settings.catalog.catalog_path
    ctx.obj = AppContext(
        store=CatalogStore(path),
        assumptions=FinanceAssumptions.from_settings(settings),
        console=Console(highlight=False),
    )
    log.debug("cli_start", catalog=str(path), command=ctx.invoked_subcommand)


# ── Débito ───────────────────────────────────────────────────────────


@cli.group()
def debito() -> None:
    """Operaciones con tarjetas de débito."""


@debito.command("agregar")
@pass_app
def debito_agregar(app: AppContext) -> None:
    """Agregar una nueva tarjeta de débito."""
    _load(app)
    product = DebitProduct(
        name=click.prompt("Nombre de la tarjeta"),
        institution=click.prompt("Banco emisor"),
        nominal_rate=click.prompt("Tasa de rendimiento anual (decimal, ej: 0.05 para 5%)", type=DECIMAL),
        minimum_balance=click.prompt("Saldo mínimo requerido", type=DECIMAL),
        annual_fee=click.prompt("Comisión anual", type=DECIMAL),
        inactivity_fee=click.prompt("Comisión por inactividad (mensual)", type=DECIMAL),
    )
    try:
        app.store.add_debit(product)
    except FinmexError as exc:
        raise click.ClickException(f"Error al guardar tarjeta: {exc}") from exc
    app.console.print(f"Tarjeta de débito '{product.name}' agregada exitosamente")


@debito.command("analizar")
@click.option("--card", type=int, default=None, help="Número de la tarjeta en la lista.")
@click.option("--balance", type=DECIMAL, default=None, help="Saldo promedio a mantener.")
@pass_app
def debito_analizar(app: AppContext, card: int | None, balance: Decimal | None) -> None:
    """Analizar rendimiento de una tarjeta de débito."""
    catalog = _load(app)
    if not catalog.debito:
        raise click.ClickException("No hay tarjetas de débito registradas")

    product = _select(app, catalog.debito, "débito", card)
    if balance is None:
        balance = click.prompt("Ingresa el saldo promedio a mantener", type=DECIMAL)

    try:
        result = compute_real_yield(product, balance, app.assumptions)
    except FinmexError as exc:
        raise click.ClickException(str(exc)) from exc
    app.console.print(real_yield_panel(product, result, app.assumptions))


@debito.command("listar")
@pass_app
def debito_listar(app: AppContext) -> None:
    """Listar tarjetas de débito registradas."""
    catalog = _load(app)
    if not catalog.debito:
        app.console.print("No hay tarjetas de débito registradas")
        return
    app.console.print(debit_list_table(catalog.debito))


# ── Crédito ──────────────────────────────────────────────────────────


@cli.group()
def credito() -> None:
    """Operaciones con tarjetas de crédito."""


@credito.command("agregar")
@pass_app
def credito_agregar(app: AppContext) -> None:
    """Agregar una nueva tarjeta de crédito."""
    _load(app)
    product = CreditProduct(
        name=click.prompt("Nombre de la tarjeta"),
        institution=click.prompt("Banco emisor"),
        annual_interest_rate=click.prompt("Tasa de interés anual (decimal, ej: 0.36 para 36%)", type=DECIMAL),
        cat=click.prompt("CAT (decimal, ej: 0.45 para 45%)", type=DECIMAL),
        annual_fee=click.prompt("Comisión anual", type=DECIMAL),
        credit_limit=click.prompt("Límite de crédito", type=DECIMAL),
        cashback_rate=click.prompt("Porcentaje de cashback (decimal, ej: 0.02 para 2%)", type=DECIMAL),
        interest_free_installments=click.prompt("¿Ofrece meses sin intereses? (s/n)").strip().lower() == "s",
    )
    try:
        app.store.add_credit(product)
    except FinmexError as exc:
        raise click.ClickException(f"Error al guardar tarjeta: {exc}") from exc
    app.console.print(f"Tarjeta de crédito '{product.name}' agregada exitosamente")


@credito.command("analizar")
@click.option("--card", type=int, default=None, help="Número de la tarjeta en la lista.")
@click.option("--debt", type=DECIMAL, default=None, help="Monto de la deuda/compra.")
@click.option("--payment", type=DECIMAL, default=None, help="Pago mensual planeado.")
@pass_app
def credito_analizar(
    app: AppContext,
    card: int | None,
    debt: Decimal | None,
    payment: Decimal | None,
) -> None:
    """Analizar costo de una tarjeta de crédito."""
    catalog = _load(app)
    if not catalog.credito:
        raise click.ClickException("No hay tarjetas de crédito registradas")

    product = _select(app, catalog.credito, "crédito", card)
    if debt is None:
        debt = click.prompt("Ingresa el monto de la deuda/compra", type=DECIMAL)
    if payment is None:
        payment = click.prompt("Ingresa el pago mensual que planeas hacer", type=DECIMAL)

    try:
        result = simulate_credit_cost(product, debt, payment, app.assumptions)
    except FinmexError as exc:
        raise click.ClickException(str(exc)) from exc

    if result.payment_was_raised:
        app.console.print(
            "AVISO: El pago ingresado es menor al pago mínimo. "
            f"Se ajustará a {format_currency(result.effective_monthly_payment)}"
        )
    app.console.print(credit_cost_panel(product, result))


@credito.command("listar")
@pass_app
def credito_listar(app: AppContext) -> None:
    """Listar tarjetas de crédito registradas."""
    catalog = _load(app)
    if not catalog.credito:
        app.console.print("No hay tarjetas de crédito registradas")
        return
    app.console.print(credit_list_table(catalog.credito))


# ── Comparar ─────────────────────────────────────────────────────────


@cli.group()
def comparar() -> None:
    """Comparar tarjetas registradas."""


@comparar.command("debito")
@click.option("--balance", type=DECIMAL, default=None, help="Saldo promedio para la comparación.")
@pass_app
def comparar_debito(app: AppContext, balance: Decimal | None) -> None:
    """Comparar tarjetas de débito."""
    catalog = _load(app)
    if len(catalog.debito) < MIN_PRODUCTS:
        raise click.ClickException("Se necesitan al menos 2 tarjetas de débito para comparar")
    if balance is None:
        balance = click.prompt("Ingresa el saldo promedio a mantener para la comparación", type=DECIMAL)

    try:
        rows = compare_debit(catalog.debito, balance, app.assumptions)
    except FinmexError as exc:
        raise click.ClickException(str(exc)) from exc

    app.console.print("\n=== Comparación de Tarjetas de Débito ===")
    app.console.print(f"Saldo a comparar: {format_currency(balance)}\n")
    app.console.print(debit_comparison_table(rows))
    best = best_debit(rows)
    if best is not None:
        app.console.print(f"Mejor rendimiento real: {best.product.name} ({best.product.institution})")


@comparar.command("credito")
@click.option("--debt", type=DECIMAL, default=None, help="Monto de la deuda/compra para la comparación.")
@click.option("--payment", type=DECIMAL, default=None, help="Pago mensual planeado.")
@pass_app
def comparar_credito(app: AppContext, debt: Decimal | None, payment: Decimal | None) -> None:
    """Comparar tarjetas de crédito."""
    catalog = _load(app)
    if len(catalog.credito) < MIN_PRODUCTS:
        raise click.ClickException("Se necesitan al menos 2 tarjetas de crédito para comparar")
    if debt is None:
        debt = click.prompt("Ingresa el monto de la deuda/compra para la comparación", type=DECIMAL)
    if payment is None:
        payment = click.prompt("Ingresa el pago mensual que planeas hacer", type=DECIMAL)

    try:
        rows = compare_credit(catalog.credito, debt, payment, app.assumptions)
    except FinmexError as exc:
        raise click.ClickException(str(exc)) from exc

    app.console.print("\n=== Comparación de Tarjetas de Crédito ===")
    app.console.print(f"Deuda a comparar: {format_currency(debt)}")
    app.console.print(f"Pago mensual: {format_currency(payment)}\n")
    app.console.print(credit_comparison_table(rows))
    cheapest = cheapest_credit(rows)
    if cheapest is not None:
        app.console.print(f"Menor costo neto: {cheapest.product.name} ({cheapest.product.institution})")


# ── Entry point ──────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
