"""Domain constants for inventory and invoicing aggregates."""

TRANSACTION_TYPE_SALE = "sale"
TRANSACTION_TYPE_PURCHASE = "purchase"

CATEGORY_INCOME = "income"
CATEGORY_EXPENSE = "expense"

CASH_ACCOUNT = "cash"
UNKNOWN_ACCOUNT = "unknown"

PAYMENT_STATUS_FULLY_PAID = "fully_paid"
PAYMENT_STATUS_PARTIALLY_PAID = "partially_paid"
PAYMENT_STATUS_UNPAID = "unpaid"

DEFAULT_REORDER_THRESHOLD = 10
DEFAULT_MIN_STOCK = 5

PARTY_CUSTOMER = "customer"
PARTY_SUPPLIER = "supplier"
PARTY_KINDS = (PARTY_CUSTOMER, PARTY_SUPPLIER)

MATCH_BY_NAME = "name"
MATCH_BY_ID = "id"
MATCH_MODES = (MATCH_BY_NAME, MATCH_BY_ID)

CASH_FLOW_PERIODS = ("daily", "weekly", "monthly")


__all__ = [
    "TRANSACTION_TYPE_SALE",
    "TRANSACTION_TYPE_PURCHASE",
    "CATEGORY_INCOME",
    "CATEGORY_EXPENSE",
    "CASH_ACCOUNT",
    "UNKNOWN_ACCOUNT",
    "PAYMENT_STATUS_FULLY_PAID",
    "PAYMENT_STATUS_PARTIALLY_PAID",
    "PAYMENT_STATUS_UNPAID",
    "DEFAULT_REORDER_THRESHOLD",
    "DEFAULT_MIN_STOCK",
    "PARTY_CUSTOMER",
    "PARTY_SUPPLIER",
    "PARTY_KINDS",
    "MATCH_BY_NAME",
    "MATCH_BY_ID",
    "MATCH_MODES",
    "CASH_FLOW_PERIODS",
]
