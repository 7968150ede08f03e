"""Use case to compute cash flow buckets for a period."""

from datetime import date

from stockbook.application.ports.ledger_repository import LedgerRepositoryPort
from stockbook.domain.models import CashFlowPoint
from stockbook.domain.services.finance import compute_cash_flow
from stockbook.domain.services.normalization import normalize_transactions
from stockbook.domain.services.validation import validate_transaction_amounts
from stockbook.infrastructure.logging.logger import get_app_logger


class GetCashFlowUseCase:
    """Bucket income and expenses by day, week or month."""

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

    def execute(
        self,
        period: str = "daily",
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> list[CashFlowPoint]:
        """Return cash flow buckets for the period.

        Args:
            period: ``daily``, ``weekly`` or ``monthly``.
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.

        Returns:
            list[CashFlowPoint]: Buckets sorted by start date.
        """
        records = normalize_transactions(
            self._ledger_repository.fetch_transactions()
        )
        validate_transaction_amounts(records, self._logger)
        points = compute_cash_flow(
            records,
            period=period,
            start_date=start_date,
            end_date=end_date,
        )
        self._logger.info(
            f"Cash flow computed: {len(points)} {period} buckets "
            f"from {len(records)} transactions"
        )
        return points


__all__ = ["GetCashFlowUseCase", "CashFlowPoint"]
