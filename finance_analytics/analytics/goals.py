"""
Goal Progress Evaluator

Progress is derived live: the income transactions linked to a goal inside
the caller's date window, as a percentage of the goal's target.
"""

from decimal import Decimal
from typing import Iterable, Optional

from finance_analytics.analytics.filters import in_date_range
from finance_analytics.models.records import DateRange, Goal, Transaction
from finance_analytics.models.results import GoalProgress


ZERO = Decimal("0")
HUNDRED = Decimal("100")


def goal_contributions(
    goal: Goal,
    transactions: Iterable[Transaction],
    date_range: Optional[DateRange] = None,
) -> Decimal:
    """Sum of income transactions linked to the goal inside the window."""
    return sum(
        (
            t.amount for t in in_date_range(transactions, date_range)
            if t.goal_id == goal.id and t.is_income
        ),
        ZERO,
    )


def _percent(contributed: Decimal, target: Decimal) -> Decimal:
    # A zero target has no meaningful progress; report 0
    if target <= 0:
        return ZERO
    return min(HUNDRED, max(ZERO, contributed / target * HUNDRED))


def goal_progress(
    goal: Goal,
    transactions: Iterable[Transaction],
    date_range: Optional[DateRange] = None,
) -> Decimal:
    """
    Completion percentage of a goal, clamped to [0, 100].

    Returns 0 for a goal whose target is 0 instead of dividing by zero.
    """
    return _percent(goal_contributions(goal, transactions, date_range), goal.target_amount)


def evaluate_goals(
    goals: Iterable[Goal],
    transactions: Iterable[Transaction],
    date_range: Optional[DateRange] = None,
) -> list[GoalProgress]:
    """Progress of every goal, in goal order."""
    selected = in_date_range(transactions, date_range)
    results = []

    for goal in goals:
        contributed = goal_contributions(goal, selected)
        results.append(GoalProgress(
            goal_id=goal.id,
            name=goal.name,
            target_amount=goal.target_amount,
            contributed=contributed,
            percent=_percent(contributed, goal.target_amount),
            deadline=goal.deadline,
        ))

    return results
