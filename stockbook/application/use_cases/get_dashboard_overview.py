"""Use case to assemble the dashboard overview."""

from datetime import date
from decimal import Decimal

from stockbook.application.ports.ledger_repository import LedgerRepositoryPort
from stockbook.domain.models import DashboardOverview
from stockbook.domain.services.finance import (
    compute_inventory_value,
    get_account_balances,
    get_critical_stock_products,
    get_financial_summary,
    get_low_stock_products,
    get_overdue_invoices,
)
from stockbook.domain.services.normalization import (
    normalize_invoices,
    normalize_products,
    normalize_transactions,
)
from stockbook.domain.services.validation import (
    validate_invoice_amounts,
    validate_transaction_amounts,
)
from stockbook.infrastructure.logging.logger import get_app_logger


class GetDashboardOverviewUseCase:
    """Compute every figure shown on the dashboard from one snapshot."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def execute(self, today: date | None = None) -> DashboardOverview:
        """Return the dashboard overview.

        Args:
            today: Reference date for overdue detection; defaults to today.

        Returns:
            DashboardOverview: Summary, balances, stock and receivable figures.
        """
        reference_date = today or date.today()
        transactions = normalize_transactions(
            self._ledger_repository.fetch_transactions()
        )
        sales_invoices = normalize_invoices(
            self._ledger_repository.fetch_sales_invoices()
        )
        purchase_invoices = normalize_invoices(
            self._ledger_repository.fetch_purchase_invoices()
        )
        products = normalize_products(self._ledger_repository.fetch_products())
        self._logger.info(
            f"Fetched {len(transactions)} transactions, "
            f"{len(sales_invoices)} sales invoices, "
            f"{len(purchase_invoices)} purchase invoices, "
            f"{len(products)} products"
        )
        validate_transaction_amounts(transactions, self._logger)
        validate_invoice_amounts(sales_invoices, self._logger)
        validate_invoice_amounts(purchase_invoices, self._logger)

        total_customer_dues = sum(
            (record.amount_due for record in sales_invoices if record.customer),
            Decimal("0"),
        )
        total_supplier_payables = sum(
            (
                record.amount_due
                for record in purchase_invoices
                if record.supplier
            ),
            Decimal("0"),
        )
        overview = DashboardOverview(
            summary=get_financial_summary(transactions),
            account_balances=get_account_balances(transactions),
            low_stock_count=get_low_stock_products(products),
            critical_stock_count=get_critical_stock_products(products),
            inventory_value=compute_inventory_value(products),
            total_customer_dues=total_customer_dues,
            total_supplier_payables=total_supplier_payables,
            overdue=get_overdue_invoices(
                sales_invoices + purchase_invoices,
                reference_date,
            ),
            product_count=len(products),
        )
        self._logger.info(
            f"Dashboard overview computed: net={overview.summary.net_balance}, "
            f"dues={total_customer_dues}, payables={total_supplier_payables}, "
            f"low_stock={overview.low_stock_count}, "
            f"overdue={overview.overdue.count}"
        )
        return overview


__all__ = ["GetDashboardOverviewUseCase", "DashboardOverview"]
