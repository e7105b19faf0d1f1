"""
Streak Calculator

A streak is the number of consecutive calendar days, ending at the most
recent transaction date, with at least one transaction each.

The streak is anchored at the data's most recent date, not at today:
months without activity still show the last streak length.
"""

from datetime import timedelta
from typing import Iterable

from finance_analytics.models.records import Transaction


ONE_DAY = timedelta(days=1)


def calculate_streak(transactions: Iterable[Transaction]) -> int:
    """Length of the run of consecutive days ending at the latest date."""
    days = sorted({t.transaction_date for t in transactions}, reverse=True)
    if not days:
        return 0

    streak = 1
    current = days[0]
    for day in days[1:]:
        if current - day != ONE_DAY:
            break
        streak += 1
        current = day

    return streak
