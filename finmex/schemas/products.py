"""Pydantic schemas for the products kept in the catalog.

Pure data classes, no business logic. Rates are fractions (0.05 = 5%) and
amounts are pesos. No range validation is applied: negative or absurd
values are stored as entered.

Catalogs written by the original Spanish-keyed tool (``nombre``, ``banco``,
``tasa_rendimiento``...) are accepted on load; dumps always use the field
names declared here.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, PlainSerializer


def _amount_to_json(value: Decimal) -> float | str:
    """JSON number when a float holds the value exactly, decimal string otherwise."""
    as_float = float(value)
    if Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


# Decimal in memory; on disk a plain number unless that would drop digits
Amount = Annotated[Decimal, PlainSerializer(_amount_to_json, return_type=float | str, when_used="json")]


class DebitProduct(BaseModel):
    """A debit account / card that pays a nominal yield on its balance."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(validation_alias=AliasChoices("name", "nombre"))
    institution: str = Field(validation_alias=AliasChoices("institution", "banco"))
    nominal_rate: Amount = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("nominal_rate", "tasa_rendimiento"),
    )
    minimum_balance: Amount = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("minimum_balance", "saldo_minimo"),
    )
    annual_fee: Amount = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("annual_fee", "comision_anual"),
    )
    # Monthly; recorded but not used by the yield calculation
    inactivity_fee: Amount = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("inactivity_fee", "comision_inactividad"),
    )


class CreditProduct(BaseModel):
    """A credit card with its interest, fees and benefits."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(validation_alias=AliasChoices("name", "nombre"))
    institution: str = Field(validation_alias=AliasChoices("institution", "banco"))
    annual_interest_rate: Amount = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("annual_interest_rate", "tasa_interes"),
    )
    cat: Amount = Field(default=Decimal("0"))  # Costo Anual Total, display only
    annual_fee: Amount = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("annual_fee", "comision_anual"),
    )
    credit_limit: Amount = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("credit_limit", "limite_credito"),
    )
    cashback_rate: Amount = Field(
        default=Decimal("0"),
        validation_alias=AliasChoices("cashback_rate", "beneficios_cashback"),
    )
    interest_free_installments: bool = Field(
        default=False,
        validation_alias=AliasChoices("interest_free_installments", "meses_sin_intereses"),
    )


class Catalog(BaseModel):
    """Every saved product, in insertion order. Names are not unique."""

    model_config = ConfigDict(frozen=True)

    debito: list[DebitProduct] = Field(default_factory=list)
    credito: list[CreditProduct] = Field(default_factory=list)

    def with_debit(self, product: DebitProduct) -> Catalog:
        """Return a new catalog with ``product`` appended to the debit list."""
        return self.model_copy(update={"debito": [*self.debito, product]})

    def with_credit(self, product: CreditProduct) -> Catalog:
        """Return a new catalog with ``product`` appended to the credit list."""
        return self.model_copy(update={"credito": [*self.credito, product]})
