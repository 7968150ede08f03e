"""Application use cases package."""

from .get_account_balances import AccountBalance, GetAccountBalancesUseCase
from .get_cash_flow import CashFlowPoint, GetCashFlowUseCase
from .get_dashboard_overview import (
    DashboardOverview,
    GetDashboardOverviewUseCase,
)
from .get_financial_summary import (
    FinancialSummary,
    GetFinancialSummaryUseCase,
)
from .get_party_balances import GetPartyBalancesUseCase, PartyBalance
from .get_profit_loss import GetProfitLossUseCase, ProfitLossStatement

__all__ = [
    "AccountBalance",
    "GetAccountBalancesUseCase",
    "CashFlowPoint",
    "GetCashFlowUseCase",
    "DashboardOverview",
    "GetDashboardOverviewUseCase",
    "FinancialSummary",
    "GetFinancialSummaryUseCase",
    "GetPartyBalancesUseCase",
    "PartyBalance",
    "GetProfitLossUseCase",
    "ProfitLossStatement",
]
