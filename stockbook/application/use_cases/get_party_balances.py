"""Use case to compute customer dues and supplier payables in bulk."""

from collections.abc import Iterable
from decimal import Decimal

from stockbook.application.ports.ledger_repository import LedgerRepositoryPort
from stockbook.domain.constants import (
    MATCH_BY_NAME,
    PARTY_CUSTOMER,
    PARTY_SUPPLIER,
)
from stockbook.domain.models import PartyBalance
from stockbook.domain.services.finance import group_party_dues
from stockbook.domain.services.normalization import normalize_invoices
from stockbook.domain.services.validation import validate_invoice_amounts
from stockbook.infrastructure.logging.logger import get_app_logger


class GetPartyBalancesUseCase:
    """Compute outstanding amounts per customer or supplier.

    Invoices are grouped once per call, so rendering a table of N parties
    costs a single pass over the invoices instead of N.
    """

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        match_by: str = MATCH_BY_NAME,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger snapshots.
            logger: Optional logger compatible with logging.Logger-like API.
            match_by: ``name`` (exact name equality) or ``id``.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._match_by = match_by

    def execute(
        self,
        party: str = PARTY_CUSTOMER,
        names: Iterable[str] | None = None,
    ) -> list[PartyBalance]:
        """Return outstanding amounts per party.

        Args:
            party: ``customer`` (sales invoices) or ``supplier`` (purchases).
            names: Optional party keys to report, in the given order. Keys
                without invoices are reported with a zero amount.

        Returns:
            list[PartyBalance]: Balances sorted by key unless names is given.

        Raises:
            ValueError: If the party kind is not recognized.
        """
        if party == PARTY_CUSTOMER:
            raw = self._ledger_repository.fetch_sales_invoices()
        elif party == PARTY_SUPPLIER:
            raw = self._ledger_repository.fetch_purchase_invoices()
        else:
            raise ValueError(f"Unsupported party kind: {party}")

        records = normalize_invoices(raw)
        self._logger.info(f"Fetched {len(records)} {party} invoices")
        validate_invoice_amounts(records, self._logger)

        totals = group_party_dues(records, party=party, match_by=self._match_by)
        if names is None:
            keys = sorted(totals, key=lambda key: (key.lower(), key))
        else:
            keys = list(names)
        balances = [
            PartyBalance(
                party=party,
                key=key,
                amount=totals.get(key, Decimal("0")),
            )
            for key in keys
        ]
        self._logger.info(
            f"Computed {len(balances)} {party} balances "
            f"matched by {self._match_by}"
        )
        return balances


__all__ = ["GetPartyBalancesUseCase", "PartyBalance"]
