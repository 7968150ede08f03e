"""Use case to compute the profit and loss statement."""

from datetime import date

from stockbook.application.ports.ledger_repository import LedgerRepositoryPort
from stockbook.domain.models import ProfitLossStatement
from stockbook.domain.services.finance import compute_profit_loss
from stockbook.domain.services.normalization import normalize_transactions
from stockbook.domain.services.validation import validate_transaction_amounts
from stockbook.infrastructure.logging.logger import get_app_logger


class GetProfitLossUseCase:
    """Report revenue, expenses, profit and margins for a date range."""

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
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> ProfitLossStatement:
        """Return the profit and loss statement.

        Args:
            start_date: Optional inclusive lower bound.
            end_date: Optional inclusive upper bound.

        Returns:
            ProfitLossStatement: Totals and margins for the range.
        """
        records = normalize_transactions(
            self._ledger_repository.fetch_transactions()
        )
        validate_transaction_amounts(records, self._logger)
        statement = compute_profit_loss(
            records,
            start_date=start_date,
            end_date=end_date,
        )
        self._logger.info(
            f"Profit and loss computed ({start_date} to {end_date}): "
            f"revenue={statement.total_revenue}, "
            f"expenses={statement.total_expenses}, "
            f"net={statement.net_profit}"
        )
        return statement


__all__ = ["GetProfitLossUseCase", "ProfitLossStatement"]
