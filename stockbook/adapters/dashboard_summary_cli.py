"""CLI adapter printing the dashboard overview.

This module wires the GetDashboardOverviewUseCase to the configured ledger
repository and prints the headline figures.
"""

from stockbook.application.use_cases.get_dashboard_overview import (
    GetDashboardOverviewUseCase,
)
from stockbook.infrastructure.container import build_ledger_repository
from stockbook.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the dashboard overview use case and print the result."""
    logger = get_app_logger()
    try:
        repository = build_ledger_repository()
        overview = GetDashboardOverviewUseCase(
            ledger_repository=repository,
            logger=logger,
        ).execute()
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    summary = overview.summary
    print(
        f"Sales: {summary.total_sales} ({summary.sales_count} transactions), "
        f"purchases: {summary.total_purchases} "
        f"({summary.purchase_count} transactions)"
    )
    print(
        f"Income: {summary.income_total}, expenses: {summary.expense_total}, "
        f"net: {summary.net_balance}, cash: {summary.cash_balance}, "
        f"receivables: {summary.receivables}"
    )
    print(
        f"Customer dues: {overview.total_customer_dues}, "
        f"supplier payables: {overview.total_supplier_payables}"
    )
    print(
        f"Products: {overview.product_count}, "
        f"low stock: {overview.low_stock_count}, "
        f"critical: {overview.critical_stock_count}, "
        f"inventory value: {overview.inventory_value}"
    )
    print(
        f"Overdue invoices: {overview.overdue.count} "
        f"totalling {overview.overdue.total_amount}"
    )
    for balance in overview.account_balances:
        print(f"  {balance.account}: {balance.balance}")


if __name__ == "__main__":  # pragma: no cover
    main()
