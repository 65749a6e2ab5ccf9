"""Domain-specific exceptions."""

from __future__ import annotations


class FinmexError(Exception):
    """Base exception for the calculator, catalog and comparison layers."""


class InvalidAmountError(FinmexError, ValueError):
    """A balance or debt amount falls outside what a calculator accepts."""


class CatalogError(FinmexError):
    """The catalog file could not be read, decoded or written."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ComparisonError(FinmexError):
    """Not enough products of one kind to build a comparison."""
