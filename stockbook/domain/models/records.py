"""Canonical ledger records normalized from invoicing API payloads."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class PartyRef:
    """Customer or supplier reference attached to a record.

    Attributes:
        name: Display name used for ledger matching (exact, case-sensitive).
        id: Stable backend identifier when the payload carries one.
    """

    name: str | None
    id: str | None = None


@dataclass(frozen=True)
class TransactionRecord:
    """Ledger transaction snapshot."""

    type: str | None
    category: str | None
    amount: Decimal
    account: str | None
    date: datetime | None
    customer: PartyRef | None
    supplier: PartyRef | None
    due: Decimal


@dataclass(frozen=True)
class InvoiceRecord:
    """Sales, purchase or quick invoice snapshot.

    Attributes:
        total: Invoice total.
        amount_paid: Sum of payments, resolved from legacy aliases.
        amount_due: Outstanding balance; derived when the payload omits it.
        due_date: Payment deadline, if any.
    """

    total: Decimal
    amount_paid: Decimal
    amount_due: Decimal
    customer: PartyRef | None
    supplier: PartyRef | None
    invoice_number: str | None = None
    invoice_type: str | None = None
    date: datetime | None = None
    due_date: datetime | None = None


@dataclass(frozen=True)
class ProductRecord:
    """Product stock snapshot."""

    name: str | None
    sku: str | None
    stock_current: Decimal
    reorder_threshold: Decimal
    min_stock: Decimal
    cost_price: Decimal


__all__ = [
    "PartyRef",
    "TransactionRecord",
    "InvoiceRecord",
    "ProductRecord",
]
