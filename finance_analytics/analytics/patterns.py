"""
Pattern Detector

Recurrence detection: identical (description, amount) pairs seen at least
three times are treated as a recurring pattern. Three occurrences is the
minimum evidence that does not need any declared period.

Unusual expense detection: an expense is unusual when it exceeds a multiple
of the mean amount of its category over the whole input set.
"""

from collections import Counter
from decimal import Decimal
from typing import Iterable

from finance_analytics.models.records import Transaction


ZERO = Decimal("0")


def detect_recurring(
    transactions: Iterable[Transaction],
    min_occurrences: int = 3,
) -> list[Transaction]:
    """
    Return transactions that look recurring but are not marked as such.

    Matching is exact: same description string and same amount. Every
    member of a large enough group is returned, in input order.
    """
    transactions = list(transactions)
    counts = Counter((t.description, t.amount) for t in transactions)

    return [
        t for t in transactions
        if counts[(t.description, t.amount)] >= min_occurrences and not t.is_recurring
    ]


def category_means(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Mean expense amount per category id."""
    totals: dict[str, Decimal] = {}
    counts: Counter = Counter()

    for t in transactions:
        if not t.is_expense:
            continue
        totals[t.category] = totals.get(t.category, ZERO) + t.amount
        counts[t.category] += 1

    return {category: total / counts[category] for category, total in totals.items()}


def detect_unusual(
    transactions: Iterable[Transaction],
    multiplier: Decimal = Decimal("3"),
) -> list[Transaction]:
    """
    Return expenses larger than `multiplier` times their category mean.

    The mean includes the transaction itself, so a category with a single
    expense never flags it.
    """
    transactions = list(transactions)
    means = category_means(transactions)

    return [
        t for t in transactions
        if t.is_expense and t.amount > multiplier * means.get(t.category, ZERO)
    ]
