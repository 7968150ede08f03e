"""Domain validation helpers."""

from collections.abc import Iterable
from logging import Logger

from stockbook.domain.models import InvoiceRecord, TransactionRecord


def validate_transaction_amounts(
    records: Iterable[TransactionRecord],
    logger: Logger,
) -> None:
    """Warn when transaction amounts violate sign conventions.

    Args:
        records: Normalized transactions.
        logger: Logger used for warnings.
    """
    for record in records:
        if record.amount < 0:
            logger.warning(
                f"Negative amount on {record.type} transaction "
                f"for account={record.account}: {record.amount}"
            )
        if record.due < 0:
            logger.warning(
                f"Negative due on {record.type} transaction: {record.due}"
            )


def validate_invoice_amounts(
    records: Iterable[InvoiceRecord],
    logger: Logger,
) -> None:
    """Warn when invoice payments or dues look inconsistent.

    Args:
        records: Normalized invoices.
        logger: Logger used for warnings.
    """
    for record in records:
        label = record.invoice_number or "<unnumbered>"
        if record.amount_paid > record.total:
            logger.warning(
                f"Invoice {label} is overpaid: "
                f"paid={record.amount_paid}, total={record.total}"
            )
        if record.amount_due < 0:
            logger.warning(
                f"Invoice {label} has a negative amount due: {record.amount_due}"
            )


__all__ = ["validate_transaction_amounts", "validate_invoice_amounts"]
