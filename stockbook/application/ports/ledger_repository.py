"""Port for reading invoicing backend snapshots."""

from collections.abc import Mapping
from typing import Any, Protocol

RawRecord = Mapping[str, Any]


class LedgerRepositoryPort(Protocol):
    """Port exposing point-in-time snapshots of ledger collections.

    Records are returned in the invoicing API's raw JSON shape; use cases
    normalize them before aggregation.
    """

    def fetch_transactions(self) -> list[RawRecord]:
        """Return all ledger transactions."""

    def fetch_sales_invoices(self) -> list[RawRecord]:
        """Return sales invoices with populated customers."""

    def fetch_purchase_invoices(self) -> list[RawRecord]:
        """Return purchase invoices with populated suppliers."""

    def fetch_products(self) -> list[RawRecord]:
        """Return active products with stock levels."""


__all__ = ["LedgerRepositoryPort", "RawRecord"]
