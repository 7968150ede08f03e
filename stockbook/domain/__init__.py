"""Domain package for business rules and core models."""

from .constants import (
    PAYMENT_STATUS_FULLY_PAID,
    PAYMENT_STATUS_PARTIALLY_PAID,
    PAYMENT_STATUS_UNPAID,
)
from .models import (
    AccountBalance,
    CashFlowPoint,
    DashboardOverview,
    FinancialSummary,
    InvoiceRecord,
    OverdueReport,
    PartyBalance,
    PartyRef,
    ProductRecord,
    TransactionRecord,
)
from .services import (
    calculate_customer_dues,
    calculate_payment_status,
    calculate_supplier_payables,
    get_account_balances,
    get_financial_summary,
    get_low_stock_products,
)

__all__ = [
    "PAYMENT_STATUS_FULLY_PAID",
    "PAYMENT_STATUS_PARTIALLY_PAID",
    "PAYMENT_STATUS_UNPAID",
    "AccountBalance",
    "CashFlowPoint",
    "DashboardOverview",
    "FinancialSummary",
    "InvoiceRecord",
    "OverdueReport",
    "PartyBalance",
    "PartyRef",
    "ProductRecord",
    "TransactionRecord",
    "calculate_customer_dues",
    "calculate_payment_status",
    "calculate_supplier_payables",
    "get_account_balances",
    "get_financial_summary",
    "get_low_stock_products",
]
