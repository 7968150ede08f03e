"""Tests for the ledger, invoice and stock aggregation services."""

import copy
from datetime import date
from decimal import Decimal

import pytest

from stockbook.domain.models import FinancialSummary
from stockbook.domain.services.finance import (
    calculate_customer_dues,
    calculate_days_overdue,
    calculate_payment_status,
    calculate_supplier_payables,
    compute_cash_flow,
    compute_inventory_value,
    compute_profit_loss,
    get_account_balances,
    get_critical_stock_products,
    get_financial_summary,
    get_low_stock_products,
    get_overdue_invoices,
    group_party_dues,
)
from stockbook.domain.services.normalization import normalize_invoices


def _transactions() -> list[dict]:
    return [
        {
            "type": "sale",
            "category": "income",
            "amount": 500,
            "account": "cash",
            "due": 120,
            "date": "2024-03-01T10:00:00.000Z",
        },
        {
            "type": "sale",
            "category": "income",
            "amount": 250.5,
            "account": "bank_account",
            "due": 0,
            "date": "2024-03-02T09:00:00.000Z",
        },
        {
            "type": "purchase",
            "category": "expense",
            "amount": 300,
            "account": "cash",
            "date": "2024-03-02T15:00:00.000Z",
        },
        {
            "type": "payment_received",
            "category": "income",
            "amount": 80,
            "account": "cash",
            "date": "2024-03-11T12:00:00.000Z",
        },
        {
            "type": "payment_made",
            "category": "expense",
            "amount": 40,
            "account": "mobile_money",
            "date": "2024-04-05",
        },
        {"type": "adjustment", "category": "asset", "amount": 999},
    ]


def _invoices() -> list[dict]:
    return [
        {"customer": {"name": "Alice"}, "total": 500, "amountPaid": 200},
        {"customer": {"name": "Bob"}, "total": 300, "amountPaid": 300},
    ]


def test_financial_summary_totals() -> None:
    """Summary should partition by type and category in one pass."""
    summary = get_financial_summary(_transactions())

    assert summary.total_sales == Decimal("750.5")
    assert summary.total_purchases == Decimal("300")
    assert summary.income_total == Decimal("830.5")
    assert summary.expense_total == Decimal("340")
    assert summary.cash_balance == Decimal("580")
    assert summary.receivables == Decimal("120")
    assert summary.net_balance == Decimal("490.5")
    assert summary.sales_count == 2
    assert summary.purchase_count == 1
    assert summary.transaction_count == 6


@pytest.mark.parametrize("transactions", [[], None, "sale", {"a": 1}, 42])
def test_financial_summary_is_zero_for_empty_or_invalid_input(
    transactions,
) -> None:
    """Empty or non-list input should degrade to an all-zero summary."""
    summary = get_financial_summary(transactions)

    assert summary == FinancialSummary()
    assert summary.total_sales == 0
    assert summary.transaction_count == 0


def test_financial_summary_net_balance_matches_income_minus_expense() -> None:
    """net_balance should always equal income_total - expense_total."""
    for subset_end in range(len(_transactions()) + 1):
        summary = get_financial_summary(_transactions()[:subset_end])
        assert summary.net_balance == (
            summary.income_total - summary.expense_total
        )


def test_financial_summary_treats_missing_and_invalid_amounts_as_zero() -> None:
    """Missing, NaN or non-numeric amounts should not poison the totals."""
    transactions = [
        {"type": "sale", "category": "income"},
        {"type": "sale", "category": "income", "amount": "NaN"},
        {"type": "sale", "category": "income", "amount": "n/a"},
        {"type": "sale", "category": "income", "amount": "12.5"},
    ]

    summary = get_financial_summary(transactions)

    assert summary.total_sales == Decimal("12.5")
    assert summary.income_total == Decimal("12.5")
    assert summary.sales_count == 4


def test_summary_does_not_mutate_input() -> None:
    """Aggregation should leave the input collection untouched."""
    transactions = _transactions()
    snapshot = copy.deepcopy(transactions)

    get_financial_summary(transactions)
    get_account_balances(transactions)

    assert transactions == snapshot


def test_customer_dues_scenario() -> None:
    """Dues should be summed for exact name matches only."""
    invoices = _invoices()

    assert calculate_customer_dues(invoices, "Alice") == 300
    assert calculate_customer_dues(invoices, "Bob") == 0
    assert calculate_customer_dues(invoices, "Carol") == 0


def test_customer_dues_match_is_exact() -> None:
    """Name matching should be case-sensitive and untrimmed."""
    invoices = _invoices()

    assert calculate_customer_dues(invoices, "alice") == 0
    assert calculate_customer_dues(invoices, "Alice ") == 0


def test_customer_dues_guard_clauses() -> None:
    """Invalid collections or empty names should yield zero."""
    assert calculate_customer_dues(None, "Alice") == 0
    assert calculate_customer_dues({"customer": "x"}, "Alice") == 0
    assert calculate_customer_dues(_invoices(), "") == 0
    assert calculate_customer_dues(_invoices(), None) == 0


def test_customer_dues_is_order_invariant() -> None:
    """Reordering invoices should not change the sum."""
    invoices = _invoices() + [
        {"customer": {"name": "Alice"}, "total": 80, "paid": 30},
        {"customer": {"name": "Alice"}, "total": 40, "amountDue": 15},
    ]

    forward = calculate_customer_dues(invoices, "Alice")
    backward = calculate_customer_dues(list(reversed(invoices)), "Alice")

    assert forward == backward == Decimal("365")


def test_customer_dues_prefers_explicit_amount_due() -> None:
    """An explicit amountDue should be used as-is, including zero."""
    invoices = [
        {
            "customer": {"name": "Alice"},
            "total": 500,
            "amountPaid": 100,
            "amountDue": 0,
        }
    ]

    assert calculate_customer_dues(invoices, "Alice") == 0


def test_customer_dues_skips_invoices_without_customer() -> None:
    """Invoices without a populated customer never match a name."""
    invoices = [
        {"total": 500},
        {"customer": "64f1c0ffee", "total": 100},
        {"customer": {"name": "Alice"}, "total": 10},
    ]

    assert calculate_customer_dues(invoices, "Alice") == 10


def test_supplier_payables_match_supplier_name() -> None:
    """Payables should match on the supplier, not the customer."""
    invoices = [
        {"supplier": {"name": "Acme"}, "total": 1000, "amountPaid": 250},
        {"supplier": {"name": "Acme"}, "total": 200, "paid": 50},
        {"customer": {"name": "Acme"}, "total": 999},
    ]

    assert calculate_supplier_payables(invoices, "Acme") == Decimal("900")
    assert calculate_supplier_payables(invoices, "Other") == 0
    assert calculate_supplier_payables("bad", "Acme") == 0


def test_group_party_dues_matches_per_name_calls() -> None:
    """Batch grouping by name should equal the naive per-call result."""
    invoices = _invoices() + [
        {"customer": {"name": "Alice"}, "total": 70, "paid": 20},
        {"customer": {"name": "Dan"}, "total": 10},
        {"customer": {"name": ""}, "total": 10},
        {"total": 5},
    ]

    grouped = group_party_dues(invoices)

    assert list(grouped) == ["Alice", "Bob", "Dan"]
    for name, amount in grouped.items():
        assert amount == calculate_customer_dues(invoices, name)


def test_group_party_dues_by_id_separates_duplicate_names() -> None:
    """Id matching should keep same-named parties apart."""
    invoices = [
        {"supplier": {"_id": "s1", "name": "Acme"}, "total": 100},
        {"supplier": {"_id": "s2", "name": "Acme"}, "total": 40},
        {"supplier": "s1", "total": 10},
    ]

    by_id = group_party_dues(invoices, party="supplier", match_by="id")
    by_name = group_party_dues(invoices, party="supplier")

    assert by_id == {"s1": Decimal("110"), "s2": Decimal("40")}
    assert by_name == {"Acme": Decimal("140")}


def test_group_party_dues_rejects_unknown_arguments() -> None:
    """Unknown party kinds or match modes are programming errors."""
    with pytest.raises(ValueError):
        group_party_dues([], party="employee")
    with pytest.raises(ValueError):
        group_party_dues([], match_by="email")


def test_account_balances_keep_first_seen_order() -> None:
    """One entry per account, ordered by first appearance."""
    balances = get_account_balances(_transactions())

    assert [item.account for item in balances] == [
        "cash",
        "bank_account",
        "mobile_money",
        "unknown",
    ]
    assert [item.balance for item in balances] == [
        Decimal("280"),
        Decimal("250.5"),
        Decimal("-40"),
        Decimal("0"),
    ]


def test_account_balances_sum_to_net_balance() -> None:
    """The sum of balances should equal the summary net balance."""
    transactions = _transactions()

    balances = get_account_balances(transactions)
    summary = get_financial_summary(transactions)

    total = sum((item.balance for item in balances), Decimal("0"))
    assert total == summary.net_balance


def test_account_balances_invalid_input() -> None:
    """Non-list input should produce no balances."""
    assert get_account_balances(None) == []
    assert get_account_balances("cash") == []


def test_low_stock_count_example() -> None:
    """Products at or below the reorder threshold are counted."""
    products = [
        {"stock": {"current": 5, "reorderThreshold": 10}},
        {"stock": {"current": 20, "reorderThreshold": 10}},
    ]

    assert get_low_stock_products(products) == 1


def test_low_stock_count_handles_legacy_and_defaults() -> None:
    """Flat legacy fields and defaults should be honoured."""
    products = [
        {"stock": 3, "reorderThreshold": 2},
        {"stock": 10},
        {"stock": 11},
        {},
        {"stock": {"current": 10, "reorderThreshold": 10}},
    ]

    assert get_low_stock_products(products) == 3
    assert get_low_stock_products(None) == 0


def test_critical_stock_and_inventory_value() -> None:
    """Critical stock uses minStock; value is current times cost."""
    products = [
        {"stock": {"current": 4, "minStock": 5}, "costPrice": 10},
        {"stock": {"current": 6, "minStock": 5}, "costPrice": "2.5"},
        {"stock": {"current": 0}, "costPrice": 99},
    ]

    assert get_critical_stock_products(products) == 2
    assert compute_inventory_value(products) == Decimal("55.0")
    assert compute_inventory_value([]) == 0


@pytest.mark.parametrize(
    ("invoice", "expected"),
    [
        ({"total": 1000, "amountPaid": 1000}, "fully_paid"),
        ({"total": 1000, "amountPaid": 400}, "partially_paid"),
        ({"total": 1000, "amountPaid": 0}, "unpaid"),
        ({"total": 1000, "paid": 400}, "partially_paid"),
        ({"total": 1000, "amountPaid": 1200}, "fully_paid"),
        ({"total": 1000, "amountPaid": 400, "amountDue": 0}, "fully_paid"),
        ({"total": 0, "amountPaid": 0}, "fully_paid"),
        (None, "fully_paid"),
    ],
)
def test_payment_status(invoice, expected) -> None:
    """Payment status should follow the due/paid rules."""
    assert calculate_payment_status(invoice) == expected


def test_days_overdue() -> None:
    """Days overdue are counted only for unpaid invoices past due."""
    today = date(2024, 5, 10)

    assert calculate_days_overdue(
        {"total": 100, "dueDate": "2024-05-01T00:00:00.000Z"}, today
    ) == 9
    assert calculate_days_overdue(
        {"total": 100, "amountPaid": 100, "dueDate": "2024-05-01"}, today
    ) == 0
    assert calculate_days_overdue({"total": 100}, today) == 0
    assert calculate_days_overdue(
        {"total": 100, "dueDate": "2024-06-01"}, today
    ) == 0


def test_overdue_report_sorted_by_due_date() -> None:
    """Overdue invoices are sorted by due date with their total due."""
    invoices = [
        {"invoiceNumber": "INV2", "total": 100, "amountPaid": 40,
         "dueDate": "2024-04-20"},
        {"invoiceNumber": "INV1", "total": 50, "dueDate": "2024-04-01"},
        {"invoiceNumber": "INV3", "total": 70, "amountPaid": 70,
         "dueDate": "2024-03-01"},
        {"invoiceNumber": "INV4", "total": 70, "dueDate": "2024-06-01"},
    ]

    report = get_overdue_invoices(invoices, date(2024, 5, 1))

    assert [item.invoice.invoice_number for item in report.invoices] == [
        "INV1",
        "INV2",
    ]
    assert [item.days_overdue for item in report.invoices] == [30, 11]
    assert report.total_amount == Decimal("110")
    assert report.count == 2


def test_cash_flow_daily_buckets() -> None:
    """Daily buckets sum income and expense per calendar day."""
    points = compute_cash_flow(_transactions())

    assert [point.period_start for point in points] == [
        date(2024, 3, 1),
        date(2024, 3, 2),
        date(2024, 3, 11),
        date(2024, 4, 5),
    ]
    assert points[1].income == Decimal("250.5")
    assert points[1].expense == Decimal("300")
    assert points[1].net == Decimal("-49.5")


def test_cash_flow_weekly_and_monthly_buckets() -> None:
    """Weekly buckets start on Monday, monthly on the first."""
    weekly = compute_cash_flow(_transactions(), period="weekly")
    monthly = compute_cash_flow(_transactions(), period="monthly")

    assert [point.period_start for point in weekly] == [
        date(2024, 2, 26),
        date(2024, 3, 11),
        date(2024, 4, 1),
    ]
    assert [point.period_start for point in monthly] == [
        date(2024, 3, 1),
        date(2024, 4, 1),
    ]
    assert monthly[0].income == Decimal("830.5")
    assert monthly[0].expense == Decimal("300")


def test_cash_flow_date_range_and_invalid_period() -> None:
    """Date bounds are inclusive; unknown periods raise."""
    points = compute_cash_flow(
        _transactions(),
        start_date=date(2024, 3, 2),
        end_date=date(2024, 3, 11),
    )

    assert [point.period_start for point in points] == [
        date(2024, 3, 2),
        date(2024, 3, 11),
    ]
    with pytest.raises(ValueError):
        compute_cash_flow(_transactions(), period="hourly")


def test_services_accept_normalized_records() -> None:
    """Canonical records should pass through unchanged."""
    records = normalize_invoices(_invoices())

    assert calculate_customer_dues(records, "Alice") == 300
    assert calculate_payment_status(records[1]) == "fully_paid"


def test_account_balances_group_numeric_accounts() -> None:
    """Numeric account codes get their own balance entries."""
    balances = get_account_balances(
        [
            {"category": "income", "amount": 50, "account": 1010},
            {"category": "expense", "amount": 20, "account": 1010},
            {"category": "income", "amount": 5},
        ]
    )

    assert [(item.account, item.balance) for item in balances] == [
        ("1010", Decimal("30")),
        ("unknown", Decimal("5")),
    ]


def test_profit_loss_breakdown_and_margins() -> None:
    """Revenue and expenses split into sale, purchase and other parts."""
    statement = compute_profit_loss(
        [
            {"type": "sale", "category": "income", "amount": 200},
            {"type": "payment_received", "category": "income", "amount": 50},
            {"type": "purchase", "category": "expense", "amount": 50},
            {"type": "payment_made", "category": "expense", "amount": 25},
            {"type": "adjustment", "category": "asset", "amount": 999},
        ]
    )

    assert statement.total_revenue == Decimal("250")
    assert statement.total_expenses == Decimal("75")
    assert statement.sales_revenue == Decimal("200")
    assert statement.purchase_costs == Decimal("50")
    assert statement.other_revenue == Decimal("50")
    assert statement.other_expenses == Decimal("25")
    assert statement.gross_profit == Decimal("150")
    assert statement.net_profit == Decimal("175")
    assert statement.gross_margin == Decimal("75")
    assert statement.net_margin == Decimal("70")


@pytest.mark.parametrize(
    "transactions",
    [
        [],
        None,
        [{"type": "purchase", "category": "expense", "amount": 40}],
        [{"type": "sale", "category": "income", "amount": 0}],
    ],
)
def test_profit_loss_margins_are_zero_without_revenue(transactions) -> None:
    """Margins fall back to 0 when their divisor is 0."""
    statement = compute_profit_loss(transactions)

    assert statement.gross_margin == 0
    assert statement.net_margin == 0
    assert statement.net_profit == -statement.total_expenses


def test_profit_loss_other_revenue_keeps_gross_margin_zero() -> None:
    """Only sales revenue feeds the gross margin."""
    statement = compute_profit_loss(
        [{"type": "payment_received", "category": "income", "amount": 100}]
    )

    assert statement.gross_margin == 0
    assert statement.net_margin == Decimal("100")


def test_profit_loss_date_range_is_inclusive_and_skips_undated() -> None:
    """Bounds are inclusive; undated rows only count when unbounded."""
    transactions = _transactions() + [
        {"type": "payment_received", "category": "income", "amount": 7},
    ]

    bounded = compute_profit_loss(
        transactions,
        start_date=date(2024, 3, 2),
        end_date=date(2024, 3, 11),
    )
    unbounded = compute_profit_loss(transactions)

    assert bounded.total_revenue == Decimal("330.5")
    assert bounded.sales_revenue == Decimal("250.5")
    assert bounded.purchase_costs == Decimal("300")
    assert bounded.total_expenses == Decimal("300")
    assert bounded.gross_profit == Decimal("-49.5")
    assert bounded.start_date == date(2024, 3, 2)
    assert bounded.end_date == date(2024, 3, 11)
    assert unbounded.total_revenue == Decimal("837.5")
    assert unbounded.net_profit == Decimal("497.5")


def test_profit_loss_open_ended_range() -> None:
    """A single bound filters only on that side."""
    statement = compute_profit_loss(
        _transactions(),
        start_date=date(2024, 3, 11),
    )

    assert statement.total_revenue == Decimal("80")
    assert statement.total_expenses == Decimal("40")
