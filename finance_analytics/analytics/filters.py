"""
Transaction filters.

Every filter returns a new list and keeps input order.
"""

from typing import Iterable, Optional

from finance_analytics.models.records import (
    DateRange,
    PaymentStatus,
    Transaction,
    TransactionType,
)


def in_date_range(
    transactions: Iterable[Transaction],
    date_range: Optional[DateRange] = None,
) -> list[Transaction]:
    """Transactions dated inside the inclusive window (all of them if None)."""
    if date_range is None:
        return list(transactions)
    return [t for t in transactions if date_range.contains(t.transaction_date)]


def filter_transactions(
    transactions: Iterable[Transaction],
    *,
    payment_status: Optional[PaymentStatus] = None,
    category: Optional[str] = None,
    transaction_type: Optional[TransactionType] = None,
    tag: Optional[str] = None,
) -> list[Transaction]:
    """
    Filter transactions on any combination of criteria.

    Criteria left as None are not applied; the rest must all match.
    """
    def matches(t: Transaction) -> bool:
        if payment_status is not None and t.payment_status != payment_status:
            return False
        if category is not None and t.category != category:
            return False
        if transaction_type is not None and t.type != transaction_type:
            return False
        if tag and tag not in t.tags:
            return False
        return True

    return [t for t in transactions if matches(t)]


def resolve_category_name(category_id: str, category_names: dict[str, str]) -> str:
    """Display name of a category, or the raw id if it no longer exists."""
    return category_names.get(category_id) or category_id


def in_category(
    transaction: Transaction,
    category: str,
    category_names: dict[str, str],
) -> bool:
    """Match a transaction against a category given by id or display name."""
    if transaction.category == category:
        return True
    return category_names.get(transaction.category) == category
