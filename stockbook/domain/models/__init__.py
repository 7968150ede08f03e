"""Domain models package."""

from .finance import (
    AccountBalance,
    CashFlowPoint,
    DashboardOverview,
    FinancialSummary,
    OverdueInvoice,
    OverdueReport,
    PartyBalance,
    ProfitLossStatement,
)
from .records import InvoiceRecord, PartyRef, ProductRecord, TransactionRecord

__all__ = [
    "AccountBalance",
    "CashFlowPoint",
    "DashboardOverview",
    "FinancialSummary",
    "OverdueInvoice",
    "OverdueReport",
    "PartyBalance",
    "ProfitLossStatement",
    "InvoiceRecord",
    "PartyRef",
    "ProductRecord",
    "TransactionRecord",
]
