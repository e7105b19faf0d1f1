"""
Trend Forecaster

First-difference linear extrapolation of monthly income and expenses.

Only the last two months are used: the slope is the change between them,
and each projected month adds that slope once more to the last actual
value. It deliberately reacts to the most recent trend only; it is not a
regression over the whole history.
"""

from datetime import date
from decimal import Decimal
from typing import Sequence

from finance_analytics.models.results import ForecastPoint, MonthlyBucket


ZERO = Decimal("0")
DEFAULT_HORIZON = 3
# Last month a YYYY-MM label can name
LAST_MONTH_INDEX = date.max.year * 12 + 11


class InvalidHorizonError(ValueError):
    """Forecast horizon must be zero or positive."""
    pass


def month_index(period: str) -> int:
    """Months since year 0 of a YYYY-MM label."""
    year, month = (int(part) for part in period.split("-"))
    return year * 12 + (month - 1)


def shift_month(period: str, steps: int) -> str:
    """
    Move a YYYY-MM label by a number of months.

    Raises ValueError when the result falls outside years 1 to 9999.
    """
    index = month_index(period) + steps
    if not date.min.year * 12 <= index <= LAST_MONTH_INDEX:
        raise ValueError(f"Month out of range: {period} shifted by {steps}")
    return f"{index // 12:04d}-{index % 12 + 1:02d}"


def forecast(
    monthly: Sequence[MonthlyBucket],
    horizon: int = DEFAULT_HORIZON,
) -> list[ForecastPoint]:
    """
    Return the historical months followed by `horizon` projected months.

    With fewer than two months of history there is no trend to follow and
    only the history is returned. Projections stop at 9999-12.
    """
    if horizon < 0:
        raise InvalidHorizonError(f"Forecast horizon cannot be negative: {horizon}")

    history = sorted(monthly, key=lambda bucket: bucket.month)
    points = [
        ForecastPoint(
            period=bucket.month,
            income=bucket.income,
            expense=bucket.expense,
        )
        for bucket in history
    ]

    if len(history) < 2:
        return points

    previous, last = history[-2], history[-1]
    income_slope = last.income - previous.income
    expense_slope = last.expense - previous.expense

    steps = min(horizon, LAST_MONTH_INDEX - month_index(last.month))
    for step in range(1, steps + 1):
        points.append(ForecastPoint(
            period=shift_month(last.month, step),
            income=max(ZERO, last.income + income_slope * step),
            expense=max(ZERO, last.expense + expense_slope * step),
            is_forecast=True,
        ))

    return points
