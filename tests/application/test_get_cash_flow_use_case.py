"""Tests for the GetCashFlowUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from stockbook.application.use_cases.get_cash_flow import GetCashFlowUseCase


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        {"category": "income", "amount": 100, "date": "2024-01-02"},
        {"category": "expense", "amount": 40, "date": "2024-01-20"},
        {"category": "income", "amount": 60, "date": "2024-02-01"},
        {"category": "income", "amount": 999},
    ]
    return repository


def test_execute_groups_by_month_within_range() -> None:
    """Use case should bucket dated transactions inside the range."""
    logger = MagicMock()

    points = GetCashFlowUseCase(_repository(), logger=logger).execute(
        period="monthly",
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
    )

    assert len(points) == 1
    assert points[0].period_start == date(2024, 1, 1)
    assert points[0].income == Decimal("100")
    assert points[0].expense == Decimal("40")
    assert points[0].net == Decimal("60")
    logger.info.assert_called_once_with(
        "Cash flow computed: 1 monthly buckets from 4 transactions"
    )


def test_execute_rejects_unknown_period() -> None:
    """Unknown periods should surface as ValueError."""
    use_case = GetCashFlowUseCase(_repository(), logger=MagicMock())

    with pytest.raises(ValueError, match="Unsupported cash flow period"):
        use_case.execute(period="yearly")
