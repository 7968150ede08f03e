"""SQLAlchemy-backed repository reading a SQL mirror of the ledger.

Rows are reshaped into the invoicing API's JSON layout so that both
repositories feed the same normalization step.
"""

from typing import Any

from sqlalchemy import text

from stockbook.application.ports.database import DatabaseEnginePort
from stockbook.application.ports.ledger_repository import (
    LedgerRepositoryPort,
    RawRecord,
)


def _party(row, prefix: str) -> dict[str, Any] | None:
    """Rebuild a populated party document from joined columns."""
    party_id = getattr(row, f"{prefix}_id")
    name = getattr(row, f"{prefix}_name")
    if party_id is None and name is None:
        return None
    return {
        "_id": str(party_id) if party_id is not None else None,
        "name": name,
    }


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by the ledger mirror database."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def fetch_transactions(self) -> list[RawRecord]:
        query = text(
            """
            SELECT t.type, t.category, t.amount, t.account, t.date, t.due,
                   c.id AS customer_id, c.name AS customer_name,
                   s.id AS supplier_id, s.name AS supplier_name
            FROM transactions t
            LEFT JOIN customers c ON c.id = t.customer_id
            LEFT JOIN suppliers s ON s.id = t.supplier_id
            ORDER BY t.date DESC
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            {
                "type": row.type,
                "category": row.category,
                "amount": row.amount,
                "account": row.account,
                "date": row.date,
                "due": row.due,
                "customer": _party(row, "customer"),
                "supplier": _party(row, "supplier"),
            }
            for row in rows
        ]

    def fetch_sales_invoices(self) -> list[RawRecord]:
        return self._fetch_invoices("sale")

    def fetch_purchase_invoices(self) -> list[RawRecord]:
        return self._fetch_invoices("purchase")

    def fetch_products(self) -> list[RawRecord]:
        query = text(
            """
            SELECT name, sku, cost_price, stock_current,
                   reorder_threshold, min_stock
            FROM products
            WHERE is_active AND NOT is_archived
            ORDER BY name
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query).all()
        return [
            {
                "name": row.name,
                "sku": row.sku,
                "costPrice": row.cost_price,
                "stock": {
                    "current": row.stock_current,
                    "reorderThreshold": row.reorder_threshold,
                    "minStock": row.min_stock,
                },
            }
            for row in rows
        ]

    def _fetch_invoices(self, invoice_type: str) -> list[RawRecord]:
        query = text(
            """
            SELECT i.invoice_number, i.type, i.date, i.due_date,
                   i.total, i.amount_paid, i.amount_due,
                   c.id AS customer_id, c.name AS customer_name,
                   s.id AS supplier_id, s.name AS supplier_name
            FROM invoices i
            LEFT JOIN customers c ON c.id = i.customer_id
            LEFT JOIN suppliers s ON s.id = i.supplier_id
            WHERE i.type = :invoice_type
            ORDER BY i.date DESC
            """
        )
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            rows = conn.execute(query, {"invoice_type": invoice_type}).all()
        return [
            {
                "invoiceNumber": row.invoice_number,
                "type": row.type,
                "date": row.date,
                "dueDate": row.due_date,
                "total": row.total,
                "amountPaid": row.amount_paid,
                "amountDue": row.amount_due,
                "customer": _party(row, "customer"),
                "supplier": _party(row, "supplier"),
            }
            for row in rows
        ]


__all__ = ["SqlAlchemyLedgerRepository"]
