"""Domain services for ledger, invoice and stock aggregates.

Every function is pure: inputs are read once, never mutated, and malformed
collections degrade to zero or empty results instead of raising. Inputs may be
raw API payloads or records already passed through normalization.

Customers and suppliers are associated with invoices by exact, case-sensitive
name equality. Duplicate names collide and renamed parties lose their history;
``group_party_dues`` offers id matching for callers that can rely on ids.
"""

from datetime import date, timedelta
from decimal import Decimal

from stockbook.domain.constants import (
    CASH_ACCOUNT,
    CASH_FLOW_PERIODS,
    CATEGORY_EXPENSE,
    CATEGORY_INCOME,
    MATCH_BY_ID,
    MATCH_BY_NAME,
    MATCH_MODES,
    PARTY_CUSTOMER,
    PARTY_KINDS,
    PARTY_SUPPLIER,
    PAYMENT_STATUS_FULLY_PAID,
    PAYMENT_STATUS_PARTIALLY_PAID,
    PAYMENT_STATUS_UNPAID,
    TRANSACTION_TYPE_PURCHASE,
    TRANSACTION_TYPE_SALE,
    UNKNOWN_ACCOUNT,
)
from stockbook.domain.models import (
    AccountBalance,
    CashFlowPoint,
    FinancialSummary,
    InvoiceRecord,
    OverdueInvoice,
    OverdueReport,
    PartyRef,
    ProfitLossStatement,
)
from stockbook.domain.services.normalization import (
    is_record_collection,
    normalize_invoice,
    normalize_invoices,
    normalize_products,
    normalize_transactions,
)

_ZERO = Decimal("0")


def get_financial_summary(transactions) -> FinancialSummary:
    """Compute sales, purchase, income and expense totals.

    Args:
        transactions: Transactions snapshot.

    Returns:
        FinancialSummary: Totals and counts; all zero for empty or invalid input.
    """
    if not is_record_collection(transactions):
        return FinancialSummary()

    total_sales = _ZERO
    total_purchases = _ZERO
    income_total = _ZERO
    expense_total = _ZERO
    cash_balance = _ZERO
    receivables = _ZERO
    sales_count = 0
    purchase_count = 0
    records = normalize_transactions(transactions)

    for record in records:
        if record.type == TRANSACTION_TYPE_SALE:
            total_sales += record.amount
            sales_count += 1
            if record.due > 0:
                receivables += record.due
        elif record.type == TRANSACTION_TYPE_PURCHASE:
            total_purchases += record.amount
            purchase_count += 1
        if record.category == CATEGORY_INCOME:
            income_total += record.amount
            if record.account == CASH_ACCOUNT:
                cash_balance += record.amount
        elif record.category == CATEGORY_EXPENSE:
            expense_total += record.amount

    return FinancialSummary(
        total_sales=total_sales,
        total_purchases=total_purchases,
        income_total=income_total,
        expense_total=expense_total,
        cash_balance=cash_balance,
        receivables=receivables,
        net_balance=income_total - expense_total,
        sales_count=sales_count,
        purchase_count=purchase_count,
        transaction_count=len(records),
    )


def _party_of(record: InvoiceRecord, party: str) -> PartyRef | None:
    return record.customer if party == PARTY_CUSTOMER else record.supplier


def _sum_dues_for_name(invoices, party: str, name) -> Decimal:
    if not is_record_collection(invoices) or not name:
        return _ZERO
    total = _ZERO
    for record in normalize_invoices(invoices):
        ref = _party_of(record, party)
        if ref is not None and ref.name == name:
            total += record.amount_due
    return total


def calculate_customer_dues(invoices, customer_name) -> Decimal:
    """Sum outstanding dues on invoices issued to a customer.

    Args:
        invoices: Sales invoices snapshot.
        customer_name: Exact customer name to match.

    Returns:
        Decimal: Total amount due; 0 for invalid input or an empty name.
    """
    return _sum_dues_for_name(invoices, PARTY_CUSTOMER, customer_name)


def calculate_supplier_payables(invoices, supplier_name) -> Decimal:
    """Sum outstanding payables on invoices received from a supplier.

    Args:
        invoices: Purchase invoices snapshot.
        supplier_name: Exact supplier name to match.

    Returns:
        Decimal: Total amount payable; 0 for invalid input or an empty name.
    """
    return _sum_dues_for_name(invoices, PARTY_SUPPLIER, supplier_name)


def group_party_dues(
    invoices,
    party: str = PARTY_CUSTOMER,
    match_by: str = MATCH_BY_NAME,
) -> dict[str, Decimal]:
    """Group outstanding amounts by party in a single pass.

    With ``match_by="name"`` each value equals what
    ``calculate_customer_dues``/``calculate_supplier_payables`` return for
    that name.

    Args:
        invoices: Invoices snapshot.
        party: ``customer`` or ``supplier``.
        match_by: ``name`` or ``id``.

    Returns:
        dict[str, Decimal]: Amount due per party key, in first-seen order.

    Raises:
        ValueError: If party or match_by is not recognized.
    """
    if party not in PARTY_KINDS:
        raise ValueError(f"Unsupported party kind: {party}")
    if match_by not in MATCH_MODES:
        raise ValueError(f"Unsupported match mode: {match_by}")
    totals: dict[str, Decimal] = {}
    for record in normalize_invoices(invoices):
        ref = _party_of(record, party)
        if ref is None:
            continue
        key = ref.id if match_by == MATCH_BY_ID else ref.name
        if not key:
            continue
        totals[key] = totals.get(key, _ZERO) + record.amount_due
    return totals


def get_account_balances(transactions) -> list[AccountBalance]:
    """Compute income minus expense per ledger account.

    Args:
        transactions: Transactions snapshot.

    Returns:
        list[AccountBalance]: One entry per account in first-seen order.
    """
    totals: dict[str, list[Decimal]] = {}
    for record in normalize_transactions(transactions):
        account = record.account or UNKNOWN_ACCOUNT
        income_expense = totals.setdefault(account, [_ZERO, _ZERO])
        if record.category == CATEGORY_INCOME:
            income_expense[0] += record.amount
        elif record.category == CATEGORY_EXPENSE:
            income_expense[1] += record.amount
    return [
        AccountBalance(account=account, balance=income - expense)
        for account, (income, expense) in totals.items()
    ]


def get_low_stock_products(products) -> int:
    """Count products at or below their reorder threshold."""
    return sum(
        1
        for product in normalize_products(products)
        if product.stock_current <= product.reorder_threshold
    )


def get_critical_stock_products(products) -> int:
    """Count products at or below their minimum stock level."""
    return sum(
        1
        for product in normalize_products(products)
        if product.stock_current <= product.min_stock
    )


def compute_inventory_value(products) -> Decimal:
    """Return the cost value of stock on hand."""
    return sum(
        (
            product.stock_current * product.cost_price
            for product in normalize_products(products)
        ),
        _ZERO,
    )


def calculate_payment_status(invoice) -> str:
    """Classify an invoice as fully paid, partially paid or unpaid.

    A zero-total invoice with nothing paid has no outstanding balance and is
    reported as fully paid.

    Args:
        invoice: Raw invoice payload or InvoiceRecord; None counts as empty.

    Returns:
        str: ``fully_paid``, ``partially_paid`` or ``unpaid``.
    """
    record = normalize_invoice(invoice)
    if record.amount_due <= 0:
        return PAYMENT_STATUS_FULLY_PAID
    if record.amount_paid > 0:
        return PAYMENT_STATUS_PARTIALLY_PAID
    return PAYMENT_STATUS_UNPAID


def calculate_days_overdue(invoice, today: date) -> int:
    """Return whole days an unpaid invoice is past its due date.

    Args:
        invoice: Raw invoice payload or InvoiceRecord.
        today: Reference date.

    Returns:
        int: 0 when fully paid, undated, or not yet due.
    """
    record = normalize_invoice(invoice)
    if record.due_date is None:
        return 0
    if calculate_payment_status(record) == PAYMENT_STATUS_FULLY_PAID:
        return 0
    return max(0, (today - record.due_date.date()).days)


def get_overdue_invoices(invoices, today: date) -> OverdueReport:
    """Collect invoices with an outstanding balance past their due date.

    Args:
        invoices: Invoices snapshot.
        today: Reference date.

    Returns:
        OverdueReport: Overdue invoices sorted by due date and their total due.
    """
    overdue = []
    for record in normalize_invoices(invoices):
        days = calculate_days_overdue(record, today)
        if days > 0:
            overdue.append(OverdueInvoice(invoice=record, days_overdue=days))
    overdue.sort(key=lambda item: item.invoice.due_date.date())
    total = sum((item.invoice.amount_due for item in overdue), _ZERO)
    return OverdueReport(invoices=overdue, total_amount=total)


def _bucket_start(day: date, period: str) -> date:
    if period == "weekly":
        return day - timedelta(days=day.weekday())
    if period == "monthly":
        return day.replace(day=1)
    return day


def compute_cash_flow(
    transactions,
    period: str = "daily",
    start_date: date | None = None,
    end_date: date | None = None,
) -> list[CashFlowPoint]:
    """Bucket income and expense amounts by calendar period.

    Args:
        transactions: Transactions snapshot.
        period: ``daily``, ``weekly`` (ISO weeks starting Monday) or ``monthly``.
        start_date: Optional inclusive lower bound.
        end_date: Optional inclusive upper bound.

    Returns:
        list[CashFlowPoint]: Buckets sorted by start date.

    Raises:
        ValueError: If the period is not recognized.
    """
    if period not in CASH_FLOW_PERIODS:
        raise ValueError(
            f"Unsupported cash flow period: {period}. "
            f"Expected one of {', '.join(CASH_FLOW_PERIODS)}."
        )
    buckets: dict[date, list[Decimal]] = {}
    for record in normalize_transactions(transactions):
        if record.date is None:
            continue
        day = record.date.date()
        if start_date and day < start_date:
            continue
        if end_date and day > end_date:
            continue
        bucket = buckets.setdefault(_bucket_start(day, period), [_ZERO, _ZERO])
        if record.category == CATEGORY_INCOME:
            bucket[0] += record.amount
        elif record.category == CATEGORY_EXPENSE:
            bucket[1] += record.amount
    return [
        CashFlowPoint(period_start=key, income=income, expense=expense)
        for key, (income, expense) in sorted(buckets.items())
    ]



def compute_profit_loss(
    transactions,
    start_date: date | None = None,
    end_date: date | None = None,
) -> ProfitLossStatement:
    """Compute the profit and loss statement for a date range.

    Sale income counts as sales revenue and purchase expenses as purchase
    costs; every other income or expense is reported separately. When a
    bound is given, undated transactions are left out.

    Args:
        transactions: Transactions snapshot.
        start_date: Optional inclusive lower bound.
        end_date: Optional inclusive upper bound.

    Returns:
        ProfitLossStatement: Totals for the range; margins are derived from them.
    """
    total_revenue = _ZERO
    total_expenses = _ZERO
    sales_revenue = _ZERO
    purchase_costs = _ZERO
    bounded = start_date is not None or end_date is not None
    for record in normalize_transactions(transactions):
        if bounded:
            if record.date is None:
                continue
            day = record.date.date()
            if start_date and day < start_date:
                continue
            if end_date and day > end_date:
                continue
        if record.category == CATEGORY_INCOME:
            total_revenue += record.amount
            if record.type == TRANSACTION_TYPE_SALE:
                sales_revenue += record.amount
        elif record.category == CATEGORY_EXPENSE:
            total_expenses += record.amount
            if record.type == TRANSACTION_TYPE_PURCHASE:
                purchase_costs += record.amount
    return ProfitLossStatement(
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        sales_revenue=sales_revenue,
        purchase_costs=purchase_costs,
        other_revenue=total_revenue - sales_revenue,
        other_expenses=total_expenses - purchase_costs,
        start_date=start_date,
        end_date=end_date,
    )

__all__ = [
    "get_financial_summary",
    "calculate_customer_dues",
    "calculate_supplier_payables",
    "group_party_dues",
    "get_account_balances",
    "get_low_stock_products",
    "get_critical_stock_products",
    "compute_inventory_value",
    "calculate_payment_status",
    "calculate_days_overdue",
    "get_overdue_invoices",
    "compute_cash_flow",
    "compute_profit_loss",
]
