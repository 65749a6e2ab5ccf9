"""JSON-file storage for the product catalog.

The file holds two top-level lists, ``debito`` and ``credito``. A missing
file is created empty on first load. Every add rewrites the whole file;
there is no partial-write recovery, versioning or locking.
"""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from finmex.exceptions import CatalogError
from finmex.schemas.products import Catalog, CreditProduct, DebitProduct

logger = logging.getLogger(__name__)


class CatalogStore:
    """Loads, saves and appends to a catalog file."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> Catalog:
        """Read the catalog, creating an empty one if the file is absent.

        Raises:
            CatalogError: If the file cannot be read or does not hold a valid catalog.
        """
        if not self.path.exists():
            catalog = Catalog()
            self.save(catalog)
            logger.info("Created empty catalog at %s", self.path)
            return catalog

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f, parse_float=Decimal)
        except json.JSONDecodeError as exc:
            raise CatalogError(f"Archivo de tarjetas inválido: {exc}", path=str(self.path)) from exc
        except OSError as exc:
            raise CatalogError(f"No se pudo leer {self.path}: {exc}", path=str(self.path)) from exc

        try:
            return Catalog.model_validate(data)
        except ValidationError as exc:
            raise CatalogError(
                f"Estructura de tarjetas inválida: {exc}",
                path=str(self.path),
            ) from exc

    def save(self, catalog: Catalog) -> None:
        """Write the whole catalog as indented JSON."""
        payload = json.dumps(catalog.model_dump(mode="json"), indent=2, ensure_ascii=False)
        try:
            self.path.write_text(payload + "\n", encoding="utf-8")
        except OSError as exc:
            raise CatalogError(f"No se pudo guardar {self.path}: {exc}", path=str(self.path)) from exc
        logger.debug(
            "Saved catalog to %s (%d debit, %d credit)",
            self.path,
            len(catalog.debito),
            len(catalog.credito),
        )

    def add_debit(self, product: DebitProduct) -> Catalog:
        """Append a debit product and persist the catalog."""
        catalog = self.load().with_debit(product)
        self.save(catalog)
        logger.info("Added debit product %r (%s)", product.name, product.institution)
        return catalog

    def add_credit(self, product: CreditProduct) -> Catalog:
        """Append a credit product and persist the catalog."""
        catalog = self.load().with_credit(product)
        self.save(catalog)
        logger.info("Added credit product %r (%s)", product.name, product.institution)
        return catalog
