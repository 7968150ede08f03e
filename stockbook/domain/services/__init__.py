"""Domain services package."""

from .finance import (
    calculate_customer_dues,
    calculate_days_overdue,
    calculate_payment_status,
    calculate_supplier_payables,
    compute_cash_flow,
    compute_inventory_value,
    compute_profit_loss,
    get_account_balances,
    get_critical_stock_products,
    get_financial_summary,
    get_low_stock_products,
    get_overdue_invoices,
    group_party_dues,
)
from .normalization import (
    normalize_invoice,
    normalize_invoices,
    normalize_product,
    normalize_products,
    normalize_transaction,
    normalize_transactions,
)
from .validation import validate_invoice_amounts, validate_transaction_amounts

__all__ = [
    "calculate_customer_dues",
    "calculate_days_overdue",
    "calculate_payment_status",
    "calculate_supplier_payables",
    "compute_cash_flow",
    "compute_inventory_value",
    "compute_profit_loss",
    "get_account_balances",
    "get_critical_stock_products",
    "get_financial_summary",
    "get_low_stock_products",
    "get_overdue_invoices",
    "group_party_dues",
    "normalize_invoice",
    "normalize_invoices",
    "normalize_product",
    "normalize_products",
    "normalize_transaction",
    "normalize_transactions",
    "validate_invoice_amounts",
    "validate_transaction_amounts",
]
