"""Tests for the API and SQL ledger repositories."""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

from stockbook.domain.services.finance import (
    calculate_customer_dues,
    get_low_stock_products,
)
from stockbook.infrastructure.api_ledger_repository import ApiLedgerRepository
from stockbook.infrastructure.sql_ledger_repository import (
    SqlAlchemyLedgerRepository,
)


class _FakeResult:
    def __init__(self, rows):
        self._rows = rows

    def all(self):
        return self._rows


def _build_db_port(*results):
    conn = MagicMock()
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]
    engine = MagicMock()
    engine.connect.return_value.__enter__.return_value = conn
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    return db_port, conn


def test_api_repository_uses_collection_endpoints() -> None:
    """Each fetch should map to its endpoint and collection key."""
    client = MagicMock()
    client.fetch_collection.side_effect = lambda path, key: [(path, key)]
    repository = ApiLedgerRepository(client)

    assert repository.fetch_transactions() == [("/transactions", "transactions")]
    assert repository.fetch_sales_invoices() == [("/invoices/sales", "invoices")]
    assert repository.fetch_purchase_invoices() == [
        ("/invoices/purchases", "invoices")
    ]
    assert repository.fetch_products() == [("/products", "products")]


def test_sql_repository_reshapes_invoices() -> None:
    """Invoice rows should come back in the API's raw shape."""
    row = SimpleNamespace(
        invoice_number="SAL000001",
        type="sale",
        date=datetime(2024, 1, 5),
        due_date=None,
        total=Decimal("500"),
        amount_paid=Decimal("200"),
        amount_due=Decimal("300"),
        customer_id=7,
        customer_name="Alice",
        supplier_id=None,
        supplier_name=None,
    )
    db_port, conn = _build_db_port([row])
    repository = SqlAlchemyLedgerRepository(db_port)

    invoices = repository.fetch_sales_invoices()

    assert invoices == [
        {
            "invoiceNumber": "SAL000001",
            "type": "sale",
            "date": datetime(2024, 1, 5),
            "dueDate": None,
            "total": Decimal("500"),
            "amountPaid": Decimal("200"),
            "amountDue": Decimal("300"),
            "customer": {"_id": "7", "name": "Alice"},
            "supplier": None,
        }
    ]
    assert conn.execute.call_args.args[1] == {"invoice_type": "sale"}
    assert calculate_customer_dues(invoices, "Alice") == Decimal("300")


def test_sql_repository_filters_purchase_invoices() -> None:
    db_port, conn = _build_db_port([])
    repository = SqlAlchemyLedgerRepository(db_port)

    assert repository.fetch_purchase_invoices() == []
    assert conn.execute.call_args.args[1] == {"invoice_type": "purchase"}


def test_sql_repository_reshapes_transactions_and_products() -> None:
    """Transactions and products should use nested API field names."""
    transaction = SimpleNamespace(
        type="purchase",
        category="expense",
        amount=Decimal("120"),
        account="cash",
        date=datetime(2024, 2, 1),
        due=Decimal("0"),
        customer_id=None,
        customer_name=None,
        supplier_id=3,
        supplier_name="Acme",
    )
    product = SimpleNamespace(
        name="Rice 5kg",
        sku="RICE5",
        cost_price=Decimal("320"),
        stock_current=4,
        reorder_threshold=10,
        min_stock=5,
    )
    db_port, _ = _build_db_port([transaction], [product])
    repository = SqlAlchemyLedgerRepository(db_port)

    transactions = repository.fetch_transactions()
    products = repository.fetch_products()

    assert transactions[0]["customer"] is None
    assert transactions[0]["supplier"] == {"_id": "3", "name": "Acme"}
    assert transactions[0]["amount"] == Decimal("120")
    assert products == [
        {
            "name": "Rice 5kg",
            "sku": "RICE5",
            "costPrice": Decimal("320"),
            "stock": {"current": 4, "reorderThreshold": 10, "minStock": 5},
        }
    ]
    assert get_low_stock_products(products) == 1
