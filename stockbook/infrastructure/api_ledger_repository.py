"""REST-backed repository for invoicing backend snapshots."""

from stockbook.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RawRecord,
)
from stockbook.infrastructure.api_client import LedgerApiClient


class ApiLedgerRepository(LedgerRepositoryPort):
    """Repository reading collections from the invoicing REST API."""

    def __init__(self, client: LedgerApiClient) -> None:
        """Initialize the repository.

        Args:
            client: Configured API client.
        """
        self._client = client

    def fetch_transactions(self) -> list[RawRecord]:
        return self._client.fetch_collection("/transactions", "transactions")

    def fetch_sales_invoices(self) -> list[RawRecord]:
        return self._client.fetch_collection("/invoices/sales", "invoices")

    def fetch_purchase_invoices(self) -> list[RawRecord]:
        return self._client.fetch_collection("/invoices/purchases", "invoices")

    def fetch_products(self) -> list[RawRecord]:
        return self._client.fetch_collection("/products", "products")


__all__ = ["ApiLedgerRepository"]
