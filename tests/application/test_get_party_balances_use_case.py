"""Tests for the GetPartyBalancesUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from stockbook.application.use_cases.get_party_balances import (
    GetPartyBalancesUseCase,
)


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_sales_invoices.return_value = [
        {"customer": {"name": "bob", "_id": "c2"}, "total": 50},
        {"customer": {"name": "Alice", "_id": "c1"}, "total": 500,
         "amountPaid": 200},
        {"customer": {"name": "Alice", "_id": "c3"}, "total": 10},
    ]
    repository.fetch_purchase_invoices.return_value = [
        {"supplier": {"name": "Acme", "_id": "s1"}, "total": 80, "paid": 20},
    ]
    return repository


def test_execute_customers_sorted_case_insensitively() -> None:
    """Customer balances should be grouped by name and sorted."""
    repository = _repository()

    balances = GetPartyBalancesUseCase(
        repository, logger=MagicMock()
    ).execute(party="customer")

    assert [(item.key, item.amount) for item in balances] == [
        ("Alice", Decimal("310")),
        ("bob", Decimal("50")),
    ]
    assert {item.party for item in balances} == {"customer"}
    repository.fetch_purchase_invoices.assert_not_called()


def test_execute_suppliers_reads_purchase_invoices() -> None:
    """Supplier balances come from purchase invoices."""
    repository = _repository()

    balances = GetPartyBalancesUseCase(
        repository, logger=MagicMock()
    ).execute(party="supplier")

    assert [(item.key, item.amount) for item in balances] == [
        ("Acme", Decimal("60")),
    ]
    repository.fetch_sales_invoices.assert_not_called()


def test_execute_with_names_keeps_order_and_zero_fills() -> None:
    """Requested names are reported in order, missing ones as zero."""
    balances = GetPartyBalancesUseCase(
        _repository(), logger=MagicMock()
    ).execute(party="customer", names=["Carol", "Alice"])

    assert [(item.key, item.amount) for item in balances] == [
        ("Carol", Decimal("0")),
        ("Alice", Decimal("310")),
    ]


def test_execute_matches_by_id_when_configured() -> None:
    """Id matching keeps same-named customers apart."""
    balances = GetPartyBalancesUseCase(
        _repository(), logger=MagicMock(), match_by="id"
    ).execute(party="customer")

    assert [(item.key, item.amount) for item in balances] == [
        ("c1", Decimal("300")),
        ("c2", Decimal("50")),
        ("c3", Decimal("10")),
    ]


def test_execute_rejects_unknown_party() -> None:
    """Unknown party kinds should raise before fetching."""
    repository = _repository()

    with pytest.raises(ValueError, match="Unsupported party kind"):
        GetPartyBalancesUseCase(repository, logger=MagicMock()).execute(
            party="employee"
        )
    repository.fetch_sales_invoices.assert_not_called()
