"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from stockbook.domain.models.records import InvoiceRecord


@dataclass(frozen=True)
class FinancialSummary:
    """Totals derived from a transactions snapshot.

    Attributes:
        total_sales: Sum of sale amounts.
        total_purchases: Sum of purchase amounts.
        income_total: Sum of income-category amounts.
        expense_total: Sum of expense-category amounts.
        cash_balance: Income booked to the cash account.
        receivables: Outstanding dues on sale transactions.
        net_balance: Income minus expenses.
    """

    total_sales: Decimal = Decimal("0")
    total_purchases: Decimal = Decimal("0")
    income_total: Decimal = Decimal("0")
    expense_total: Decimal = Decimal("0")
    cash_balance: Decimal = Decimal("0")
    receivables: Decimal = Decimal("0")
    net_balance: Decimal = Decimal("0")
    sales_count: int = 0
    purchase_count: int = 0
    transaction_count: int = 0


@dataclass(frozen=True)
class AccountBalance:
    """Income minus expense for a single ledger account."""

    account: str
    balance: Decimal


@dataclass(frozen=True)
class PartyBalance:
    """Outstanding amount for a customer or supplier."""

    party: str
    key: str
    amount: Decimal


@dataclass(frozen=True)
class OverdueInvoice:
    """Invoice past its due date with an outstanding balance."""

    invoice: InvoiceRecord
    days_overdue: int


@dataclass(frozen=True)
class OverdueReport:
    """Overdue invoices and their combined outstanding amount."""

    invoices: list[OverdueInvoice] = field(default_factory=list)
    total_amount: Decimal = Decimal("0")

    @property
    def count(self) -> int:
        """Return the number of overdue invoices."""
        return len(self.invoices)


@dataclass(frozen=True)
class CashFlowPoint:
    """Income and expense totals for one calendar bucket."""

    period_start: date
    income: Decimal
    expense: Decimal

    @property
    def net(self) -> Decimal:
        """Return income minus expense."""
        return self.income - self.expense


@dataclass(frozen=True)
class ProfitLossStatement:
    """Revenue, expenses and margins over a date range.

    Attributes:
        total_revenue: Sum of income-category amounts.
        total_expenses: Sum of expense-category amounts.
        sales_revenue: Income booked by sale transactions.
        purchase_costs: Expenses booked by purchase transactions.
        other_revenue: Income from any other transaction type.
        other_expenses: Expenses from any other transaction type.
        start_date: Inclusive lower bound, or None when unbounded.
        end_date: Inclusive upper bound, or None when unbounded.
    """

    total_revenue: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    sales_revenue: Decimal = Decimal("0")
    purchase_costs: Decimal = Decimal("0")
    other_revenue: Decimal = Decimal("0")
    other_expenses: Decimal = Decimal("0")
    start_date: date | None = None
    end_date: date | None = None

    @property
    def gross_profit(self) -> Decimal:
        """Return sales revenue minus purchase costs."""
        return self.sales_revenue - self.purchase_costs

    @property
    def net_profit(self) -> Decimal:
        """Return total revenue minus total expenses."""
        return self.total_revenue - self.total_expenses

    @property
    def gross_margin(self) -> Decimal:
        """Return gross profit as a percentage of sales revenue, or 0."""
        if self.sales_revenue <= 0:
            return Decimal("0")
        return self.gross_profit / self.sales_revenue * 100

    @property
    def net_margin(self) -> Decimal:
        """Return net profit as a percentage of total revenue, or 0."""
        if self.total_revenue <= 0:
            return Decimal("0")
        return self.net_profit / self.total_revenue * 100


@dataclass(frozen=True)
class DashboardOverview:
    """Everything the dashboard renders in one snapshot."""

    summary: FinancialSummary
    account_balances: list[AccountBalance]
    low_stock_count: int
    critical_stock_count: int
    inventory_value: Decimal
    total_customer_dues: Decimal
    total_supplier_payables: Decimal
    overdue: OverdueReport
    product_count: int = 0


__all__ = [
    "FinancialSummary",
    "AccountBalance",
    "PartyBalance",
    "OverdueInvoice",
    "OverdueReport",
    "CashFlowPoint",
    "ProfitLossStatement",
    "DashboardOverview",
]
