"""Use case to compute the financial summary of the transactions ledger."""

from stockbook.application.ports.ledger_repository import LedgerRepositoryPort
from stockbook.domain.models import FinancialSummary
from stockbook.domain.services.finance import get_financial_summary
from stockbook.domain.services.normalization import normalize_transactions
from stockbook.domain.services.validation import validate_transaction_amounts
from stockbook.infrastructure.logging.logger import get_app_logger


class GetFinancialSummaryUseCase:
    """Compute sales, purchase and income/expense totals."""

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

    def execute(self) -> FinancialSummary:
        """Return the financial summary for the current snapshot.

        Returns:
            FinancialSummary: Totals and counts over all transactions.
        """
        records = normalize_transactions(
            self._ledger_repository.fetch_transactions()
        )
        self._logger.info(f"Fetched {len(records)} transactions")
        validate_transaction_amounts(records, self._logger)

        summary = get_financial_summary(records)
        self._logger.info(
            f"Financial summary computed: sales={summary.total_sales}, "
            f"purchases={summary.total_purchases}, "
            f"net={summary.net_balance}"
        )
        return summary


__all__ = ["GetFinancialSummaryUseCase", "FinancialSummary"]
