"""Use case to compute per-account ledger balances."""

from stockbook.application.ports.ledger_repository import LedgerRepositoryPort
from stockbook.domain.models import AccountBalance
from stockbook.domain.services.finance import get_account_balances
from stockbook.domain.services.normalization import normalize_transactions
from stockbook.domain.services.validation import validate_transaction_amounts
from stockbook.infrastructure.logging.logger import get_app_logger


class GetAccountBalancesUseCase:
    """Compute income minus expense for every ledger account."""

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

    def execute(self) -> list[AccountBalance]:
        """Return account balances in first-seen account order.

        Returns:
            list[AccountBalance]: One balance per ledger account.
        """
        records = normalize_transactions(
            self._ledger_repository.fetch_transactions()
        )
        validate_transaction_amounts(records, self._logger)
        balances = get_account_balances(records)
        self._logger.info(
            f"Computed {len(balances)} account balances "
            f"from {len(records)} transactions"
        )
        return balances


__all__ = ["GetAccountBalancesUseCase", "AccountBalance"]
