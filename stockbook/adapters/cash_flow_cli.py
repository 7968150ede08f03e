"""CLI adapter printing cash flow buckets."""

from datetime import date
import os

from stockbook.application.use_cases.get_cash_flow import GetCashFlowUseCase
from stockbook.infrastructure.container import build_ledger_repository
from stockbook.infrastructure.logging.logger import get_app_logger


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def main() -> None:
    """Print income, expense and net per period bucket."""
    logger = get_app_logger()
    period = os.getenv("CASH_FLOW_PERIOD", "daily").strip().lower()
    start_date = _parse_date(os.getenv("CASH_FLOW_START"), logger)
    end_date = _parse_date(os.getenv("CASH_FLOW_END"), logger)

    try:
        use_case = GetCashFlowUseCase(
            ledger_repository=build_ledger_repository(),
            logger=logger,
        )
        points = use_case.execute(
            period=period,
            start_date=start_date,
            end_date=end_date,
        )
    except (RuntimeError, ValueError) as exc:
        logger.error(str(exc))
        return

    print(f"Cash flow (period={period}, start={start_date}, end={end_date})")
    for point in points:
        print(
            f"{point.period_start.isoformat()}: income={point.income}, "
            f"expense={point.expense}, net={point.net}"
        )


if __name__ == "__main__":  # pragma: no cover
    main()
