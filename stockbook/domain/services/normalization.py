"""Domain normalization helpers.

Raw payloads from the invoicing API carry legacy aliases (``paid`` for
``amountPaid``, flat ``stock``/``reorderThreshold`` fields, unpopulated party
ids). All of those fallbacks are resolved here, once per fetch, so the
aggregation services only ever see canonical records.
"""

from collections.abc import Callable, Mapping, Sequence
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, TypeVar

from stockbook.domain.constants import (
    DEFAULT_MIN_STOCK,
    DEFAULT_REORDER_THRESHOLD,
)
from stockbook.domain.models.records import (
    InvoiceRecord,
    PartyRef,
    ProductRecord,
    TransactionRecord,
)
from stockbook.utils.decimal_utils import coerce_decimal

RecordT = TypeVar("RecordT")

_EMPTY: Mapping[str, Any] = {}


def _as_mapping(raw) -> Mapping[str, Any]:
    return raw if isinstance(raw, Mapping) else _EMPTY


def _first_present(raw: Mapping[str, Any], *keys: str):
    """Return the first value that is not None, in key order."""
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _optional_str(value) -> str | None:
    if isinstance(value, str):
        return value
    return None


def _optional_key(value) -> str | None:
    """Return a grouping key, keeping numeric keys from loose SQL rows."""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        return str(value)
    return None


def is_record_collection(items) -> bool:
    """Return True when items can be iterated as a list of records.

    Args:
        items: Candidate collection received from a caller.

    Returns:
        bool: False for None, mappings, strings and scalars.
    """
    return isinstance(items, Sequence) and not isinstance(
        items, (str, bytes, bytearray)
    )


def as_records(
    items,
    normalizer: Callable[[Any], RecordT],
) -> list[RecordT]:
    """Normalize a collection of raw records.

    Args:
        items: Raw collection; anything that is not a sequence yields [].
        normalizer: Function mapping one raw item to a canonical record.

    Returns:
        list: One canonical record per input item, in input order.
    """
    if not is_record_collection(items):
        return []
    return [normalizer(item) for item in items]


def parse_timestamp(value) -> datetime | None:
    """Parse ISO-8601 strings, dates and datetimes.

    Args:
        value: Raw date value from a payload or SQL row.

    Returns:
        datetime | None: Parsed timestamp, or None when absent or invalid.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if not isinstance(value, str):
        return None
    cleaned = value.strip()
    if not cleaned:
        return None
    if cleaned.endswith("Z"):
        cleaned = cleaned[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(cleaned)
    except ValueError:
        return None


def normalize_party(raw) -> PartyRef | None:
    """Normalize a populated party document or a bare id.

    Args:
        raw: ``{"name": ..., "_id": ...}`` mapping, an id string, or None.

    Returns:
        PartyRef | None: Party reference, or None when absent.
    """
    if isinstance(raw, PartyRef):
        return raw
    if isinstance(raw, str):
        return PartyRef(name=None, id=raw) if raw else None
    if not isinstance(raw, Mapping):
        return None
    identifier = _first_present(raw, "_id", "id")
    return PartyRef(
        name=_optional_str(raw.get("name")),
        id=str(identifier) if identifier is not None else None,
    )


def normalize_transaction(raw) -> TransactionRecord:
    """Coerce a raw transaction payload to a TransactionRecord."""
    if isinstance(raw, TransactionRecord):
        return raw
    data = _as_mapping(raw)
    return TransactionRecord(
        type=_optional_str(data.get("type")),
        category=_optional_str(data.get("category")),
        amount=coerce_decimal(data.get("amount")),
        account=_optional_key(data.get("account")),
        date=parse_timestamp(data.get("date")),
        customer=normalize_party(data.get("customer")),
        supplier=normalize_party(data.get("supplier")),
        due=coerce_decimal(data.get("due")),
    )


def normalize_invoice(raw) -> InvoiceRecord:
    """Coerce a raw invoice payload to an InvoiceRecord.

    ``amountPaid`` wins over the legacy ``paid`` alias. When ``amountDue`` is
    absent it is derived as ``max(0, total - amount_paid)``.
    """
    if isinstance(raw, InvoiceRecord):
        return raw
    data = _as_mapping(raw)
    total = coerce_decimal(data.get("total"))
    amount_paid = coerce_decimal(_first_present(data, "amountPaid", "paid"))
    raw_due = data.get("amountDue")
    if raw_due is None:
        amount_due = max(Decimal("0"), total - amount_paid)
    else:
        amount_due = coerce_decimal(raw_due)
    return InvoiceRecord(
        total=total,
        amount_paid=amount_paid,
        amount_due=amount_due,
        customer=normalize_party(data.get("customer")),
        supplier=normalize_party(data.get("supplier")),
        invoice_number=_optional_str(data.get("invoiceNumber")),
        invoice_type=_optional_str(data.get("type")),
        date=parse_timestamp(data.get("date")),
        due_date=parse_timestamp(data.get("dueDate")),
    )


def normalize_product(raw) -> ProductRecord:
    """Coerce a raw product payload to a ProductRecord.

    Nested ``stock.current``/``stock.reorderThreshold`` take precedence; the
    legacy flat ``stock``/``reorderThreshold`` fields are used otherwise.
    """
    if isinstance(raw, ProductRecord):
        return raw
    data = _as_mapping(raw)
    stock = data.get("stock")
    if isinstance(stock, Mapping):
        current = stock.get("current")
        threshold = stock.get("reorderThreshold")
        min_stock = stock.get("minStock")
    else:
        current = stock
        threshold = None
        min_stock = None
    if threshold is None:
        threshold = data.get("reorderThreshold")
    if min_stock is None:
        min_stock = data.get("minStock")
    return ProductRecord(
        name=_optional_str(data.get("name")),
        sku=_optional_str(data.get("sku")),
        stock_current=coerce_decimal(current),
        reorder_threshold=(
            coerce_decimal(threshold)
            if threshold is not None
            else Decimal(DEFAULT_REORDER_THRESHOLD)
        ),
        min_stock=(
            coerce_decimal(min_stock)
            if min_stock is not None
            else Decimal(DEFAULT_MIN_STOCK)
        ),
        cost_price=coerce_decimal(data.get("costPrice")),
    )


def normalize_transactions(items) -> list[TransactionRecord]:
    """Normalize a transactions snapshot."""
    return as_records(items, normalize_transaction)


def normalize_invoices(items) -> list[InvoiceRecord]:
    """Normalize an invoices snapshot."""
    return as_records(items, normalize_invoice)


def normalize_products(items) -> list[ProductRecord]:
    """Normalize a products snapshot."""
    return as_records(items, normalize_product)


__all__ = [
    "as_records",
    "is_record_collection",
    "parse_timestamp",
    "normalize_party",
    "normalize_transaction",
    "normalize_invoice",
    "normalize_product",
    "normalize_transactions",
    "normalize_invoices",
    "normalize_products",
]
