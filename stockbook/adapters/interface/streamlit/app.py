"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

import streamlit as st
import altair as alt

from stockbook.application.use_cases.get_cash_flow import (
    CashFlowPoint,
    GetCashFlowUseCase,
)
from stockbook.application.use_cases.get_dashboard_overview import (
    DashboardOverview,
    GetDashboardOverviewUseCase,
)
from stockbook.application.use_cases.get_party_balances import PartyBalance
from stockbook.application.use_cases.get_profit_loss import (
    GetProfitLossUseCase,
    ProfitLossStatement,
)
from stockbook.domain.constants import PARTY_CUSTOMER, PARTY_SUPPLIER
from stockbook.domain.models import AccountBalance
from stockbook.infrastructure.container import (
    build_ledger_repository,
    build_party_balances_use_case,
)
from stockbook.infrastructure.logging.logger import get_usage_logger

CURRENCY_SYMBOL = "৳"


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy and pandas are importable enough for Altair."""
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Altair dependencies unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (missing ndarray)."
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (missing Timestamp)."
    return True, None


def _fetch_overview() -> DashboardOverview:
    """Fetch the dashboard overview from the configured backend."""
    use_case = GetDashboardOverviewUseCase(
        ledger_repository=build_ledger_repository()
    )
    return use_case.execute()


@st.cache_data(show_spinner=False, ttl=30)
def _load_overview() -> DashboardOverview:
    """Cached wrapper around _fetch_overview for Streamlit sessions."""
    return _fetch_overview()


def _fetch_party_balances(party: str) -> list[PartyBalance]:
    """Fetch outstanding amounts for customers or suppliers."""
    return build_party_balances_use_case().execute(party=party)


@st.cache_data(show_spinner=False, ttl=30)
def _load_party_balances(party: str) -> list[PartyBalance]:
    """Cached wrapper around _fetch_party_balances."""
    return _fetch_party_balances(party)


def _fetch_cash_flow(
    period: str,
    start_date: date | None,
    end_date: date | None,
) -> list[CashFlowPoint]:
    """Fetch cash flow buckets for the selected range."""
    use_case = GetCashFlowUseCase(ledger_repository=build_ledger_repository())
    return use_case.execute(
        period=period,
        start_date=start_date,
        end_date=end_date,
    )


@st.cache_data(show_spinner=False, ttl=30)
def _load_cash_flow(
    period: str,
    start_date: date | None,
    end_date: date | None,
) -> list[CashFlowPoint]:
    """Cached wrapper around _fetch_cash_flow."""
    return _fetch_cash_flow(period, start_date, end_date)


def _fetch_profit_loss(
    start_date: date | None,
    end_date: date | None,
) -> ProfitLossStatement:
    """Fetch the profit and loss statement for the selected range."""
    use_case = GetProfitLossUseCase(ledger_repository=build_ledger_repository())
    return use_case.execute(start_date=start_date, end_date=end_date)


@st.cache_data(show_spinner=False, ttl=30)
def _load_profit_loss(
    start_date: date | None,
    end_date: date | None,
) -> ProfitLossStatement:
    """Cached wrapper around _fetch_profit_loss."""
    return _fetch_profit_loss(start_date, end_date)


def _format_currency(value: Decimal) -> str:
    """Format amounts the way the invoicing frontend shows them."""
    return f"{CURRENCY_SYMBOL}{value:,.0f}"


def _get_range_start(label: str, today: date) -> date | None:
    """Return the start date for the selected cash flow range."""
    days = {"7 days": 7, "30 days": 30, "90 days": 90, "1 year": 365}
    if label not in days:
        return None
    return today - timedelta(days=days[label])


def _account_balance_rows(
    balances: Sequence[AccountBalance],
) -> list[dict[str, str | float]]:
    return [
        {
            "account": item.account,
            "balance": float(item.balance),
            "balance_label": _format_currency(item.balance),
        }
        for item in balances
    ]


def _cash_flow_rows(
    points: Sequence[CashFlowPoint],
) -> list[dict[str, str | float]]:
    rows: list[dict[str, str | float]] = []
    for point in points:
        period = point.period_start.isoformat()
        rows.append(
            {"period": period, "kind": "Income", "amount": float(point.income)}
        )
        rows.append(
            {"period": period, "kind": "Expense", "amount": float(point.expense)}
        )
    return rows


def _render_overview(overview: DashboardOverview) -> None:
    """Render headline metrics and account balances."""
    summary = overview.summary
    sales_col, purchases_col, net_col = st.columns(3)
    sales_col.metric(
        "Total Sales",
        _format_currency(summary.total_sales),
        f"{summary.sales_count} transactions",
        delta_color="off",
    )
    purchases_col.metric(
        "Total Purchases",
        _format_currency(summary.total_purchases),
        f"{summary.purchase_count} transactions",
        delta_color="off",
    )
    net_col.metric("Net Balance", _format_currency(summary.net_balance))

    dues_col, payables_col, stock_col, overdue_col = st.columns(4)
    dues_col.metric(
        "Customer Dues",
        _format_currency(overview.total_customer_dues),
    )
    payables_col.metric(
        "Supplier Payables",
        _format_currency(overview.total_supplier_payables),
    )
    stock_col.metric(
        "Low Stock Products",
        f"{overview.low_stock_count} / {overview.product_count}",
        f"{overview.critical_stock_count} critical",
        delta_color="off",
    )
    overdue_col.metric(
        "Overdue Invoices",
        str(overview.overdue.count),
        _format_currency(overview.overdue.total_amount),
        delta_color="off",
    )
    st.caption(
        f"Cash balance {_format_currency(summary.cash_balance)} · "
        f"receivables {_format_currency(summary.receivables)} · "
        f"inventory value {_format_currency(overview.inventory_value)}"
    )
    _render_account_balances(overview.account_balances)


def _render_account_balances(balances: Sequence[AccountBalance]) -> None:
    """Render a bar chart of account balances."""
    st.subheader("Account Balances")
    if not balances:
        st.info("No transactions recorded yet.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        st.dataframe(
            _account_balance_rows(balances),
            width="stretch",
            hide_index=True,
        )
        return
    chart = alt.Chart(
        alt.Data(values=_account_balance_rows(balances))
    ).mark_bar(cornerRadius=4).encode(
        x=alt.X("account:N", sort=None, title=None),
        y=alt.Y("balance:Q", title="Balance"),
        color=alt.condition(
            alt.datum.balance >= 0,
            alt.value("#2e7d32"),
            alt.value("#e76f51"),
        ),
        tooltip=[
            alt.Tooltip("account:N"),
            alt.Tooltip("balance_label:N"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_party_balances(
    balances: Sequence[PartyBalance],
    title: str,
) -> None:
    """Render outstanding amounts per customer or supplier."""
    st.subheader(title)
    query = st.text_input("Search by name", placeholder="Type to filter")
    show_settled = st.checkbox("Show settled", value=False)
    query_lower = query.strip().lower()
    rows = [
        {"Name": item.key, "Outstanding": _format_currency(item.amount)}
        for item in balances
        if (show_settled or item.amount > 0)
        and (not query_lower or query_lower in item.key.lower())
    ]
    st.caption(f"{len(rows)} shown")
    st.dataframe(rows, width="stretch", hide_index=True, height=420)


def _render_cash_flow(points: Sequence[CashFlowPoint]) -> None:
    """Render grouped income/expense bars per bucket."""
    if not points:
        st.info("No dated transactions in the selected range.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        st.dataframe(_cash_flow_rows(points), width="stretch", hide_index=True)
        return
    chart = alt.Chart(alt.Data(values=_cash_flow_rows(points))).mark_bar().encode(
        x=alt.X("period:O", title=None),
        xOffset="kind:N",
        y=alt.Y("amount:Q", title="Amount"),
        color=alt.Color(
            "kind:N",
            scale=alt.Scale(
                domain=["Income", "Expense"],
                range=["#2e7d32", "#e76f51"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=["period:O", "kind:N", "amount:Q"],
    )
    st.altair_chart(chart, width="stretch")
    net_total = sum((point.net for point in points), start=Decimal("0"))
    st.caption(f"Net over range: {_format_currency(net_total)}")


def _render_profit_loss(statement: ProfitLossStatement) -> None:
    """Render revenue, expense, profit and margin metrics."""
    revenue_col, expense_col, net_col = st.columns(3)
    revenue_col.metric(
        "Total Revenue",
        _format_currency(statement.total_revenue),
        f"{_format_currency(statement.other_revenue)} other",
        delta_color="off",
    )
    expense_col.metric(
        "Total Expenses",
        _format_currency(statement.total_expenses),
        f"{_format_currency(statement.other_expenses)} other",
        delta_color="off",
    )
    net_col.metric(
        "Net Profit",
        _format_currency(statement.net_profit),
        f"{statement.net_margin:.1f}% margin",
        delta_color="off",
    )

    sales_col, purchases_col, gross_col = st.columns(3)
    sales_col.metric("Sales Revenue", _format_currency(statement.sales_revenue))
    purchases_col.metric(
        "Purchase Costs",
        _format_currency(statement.purchase_costs),
    )
    gross_col.metric(
        "Gross Profit",
        _format_currency(statement.gross_profit),
        f"{statement.gross_margin:.1f}% margin",
        delta_color="off",
    )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Stockbook Dashboard", layout="wide")
    st.title("Stockbook Dashboard")

    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Customers", "Suppliers", "Cash Flow", "Profit & Loss"],
    )
    get_usage_logger().info(f"Page viewed: {page}")

    if page == "Dashboard":
        _render_overview(_load_overview())
    elif page == "Customers":
        balances = _load_party_balances(PARTY_CUSTOMER)
        if not balances:
            st.warning("No sales invoices found.")
            return
        _render_party_balances(balances, "Customer Dues")
    elif page == "Suppliers":
        balances = _load_party_balances(PARTY_SUPPLIER)
        if not balances:
            st.warning("No purchase invoices found.")
            return
        _render_party_balances(balances, "Supplier Payables")
    elif page == "Profit & Loss":
        range_label = st.sidebar.selectbox(
            "Range",
            ["30 days", "7 days", "90 days", "1 year", "All Time"],
        )
        today = date.today()
        start_date = _get_range_start(range_label, today)
        st.subheader("Profit & Loss")
        _render_profit_loss(_load_profit_loss(start_date, today))
    else:
        period = st.sidebar.selectbox("Group by", ["daily", "weekly", "monthly"])
        range_label = st.sidebar.selectbox(
            "Range",
            ["30 days", "7 days", "90 days", "1 year", "All Time"],
        )
        today = date.today()
        start_date = _get_range_start(range_label, today)
        st.subheader("Cash Flow")
        _render_cash_flow(_load_cash_flow(period, start_date, today))


if __name__ == "__main__":  # pragma: no cover
    main()
