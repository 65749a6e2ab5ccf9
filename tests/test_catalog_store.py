"""Tests for the JSON catalog store.

Tests cover:
- First use creates an empty catalog file
- Appending keeps insertion order and allows duplicates
- Catalogs with the original Spanish keys load
- Corrupt or mis-shaped files raise CatalogError
"""

from __future__ import annotations

import json
from decimal import Decimal
from pathlib import Path

import pytest

from finmex.catalog.store import CatalogStore
from finmex.exceptions import CatalogError
from finmex.schemas.products import CreditProduct, DebitProduct


def _store(tmp_path: Path) -> CatalogStore:
    return CatalogStore(tmp_path / "tarjetas.json")


class TestLoad:
    def test_missing_file_created_empty(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        catalog = store.load()
        assert catalog.debito == []
        assert catalog.credito == []
        assert json.loads(store.path.read_text(encoding="utf-8")) == {"debito": [], "credito": []}

    def test_legacy_spanish_keys(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        store.path.write_text(
            json.dumps(
                {
                    "debito": [
                        {
                            "nombre": "Nu",
                            "banco": "Nu México",
                            "tasa_rendimiento": 0.1475,
                            "saldo_minimo": 0,
                            "comision_anual": 0,
                            "comision_inactividad": 0,
                        }
                    ],
                    "credito": [
                        {
                            "nombre": "Oro",
                            "banco": "Banorte",
                            "tasa_interes": 0.45,
                            "cat": 0.62,
                            "comision_anual": 900,
                            "limite_credito": 30000,
                            "beneficios_cashback": 0.01,
                            "meses_sin_intereses": True,
                        }
                    ],
                }
            ),
            encoding="utf-8",
        )
        catalog = store.load()
        debit = catalog.debito[0]
        assert debit.name == "Nu"
        assert debit.institution == "Nu México"
        assert debit.nominal_rate == Decimal("0.1475")
        credit = catalog.credito[0]
        assert credit.annual_interest_rate == Decimal("0.45")
        assert credit.cat == Decimal("0.62")
        assert credit.cashback_rate == Decimal("0.01")
        assert credit.interest_free_installments is True

    def test_corrupt_json(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        store.path.write_text("{not json", encoding="utf-8")
        with pytest.raises(CatalogError) as exc_info:
            store.load()
        assert exc_info.value.path == str(store.path)

    def test_wrong_structure(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        store.path.write_text(json.dumps({"debito": "none", "credito": []}), encoding="utf-8")
        with pytest.raises(CatalogError):
            store.load()


class TestAppend:
    def test_add_debit_persists(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        store.add_debit(DebitProduct(name="Básica", institution="BBVA", nominal_rate=Decimal("0.01")))
        reloaded = _store(tmp_path).load()
        assert [p.name for p in reloaded.debito] == ["Básica"]
        assert reloaded.debito[0].nominal_rate == Decimal("0.01")

    def test_insertion_order_and_duplicates(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        for name in ("Oro", "Azul", "Oro"):
            store.add_credit(CreditProduct(name=name, institution="Banco"))
        assert [p.name for p in store.load().credito] == ["Oro", "Azul", "Oro"]

    def test_kinds_kept_apart(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        store.add_debit(DebitProduct(name="D", institution="B"))
        catalog = store.add_credit(CreditProduct(name="C", institution="B"))
        assert len(catalog.debito) == 1
        assert len(catalog.credito) == 1

    def test_written_with_numeric_fields(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        store.add_credit(
            CreditProduct(
                name="Oro",
                institution="Banorte",
                annual_interest_rate=Decimal("0.45"),
                interest_free_installments=True,
            )
        )
        raw = json.loads(store.path.read_text(encoding="utf-8"))
        record = raw["credito"][0]
        assert record["annual_interest_rate"] == 0.45
        assert record["interest_free_installments"] is True
        assert record["name"] == "Oro"

    def test_precision_beyond_float_survives_reload(self, tmp_path: Path) -> None:
        store = _store(tmp_path)
        store.add_debit(
            DebitProduct(name="D", institution="B", nominal_rate=Decimal("0.12345678901234567890"))
        )
        reloaded = _store(tmp_path).load()
        assert reloaded.debito[0].nominal_rate == Decimal("0.12345678901234567890")
        raw = json.loads(store.path.read_text(encoding="utf-8"))
        assert raw["debito"][0]["nominal_rate"] == "0.12345678901234567890"

    def test_catalog_is_immutable(self, tmp_path: Path) -> None:
        catalog = _store(tmp_path).load()
        updated = catalog.with_debit(DebitProduct(name="D", institution="B"))
        assert catalog.debito == []
        assert len(updated.debito) == 1
