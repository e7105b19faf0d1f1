"""
Aggregator

Groups transactions by time bucket (day, month) and by category and
derives totals, distributions and per-day ratios.

All sums are Decimal and start from Decimal("0"); amounts are never
converted to float, so repeated summation does not drift and totals can be
compared for equality.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from finance_analytics.analytics.filters import in_date_range, resolve_category_name
from finance_analytics.models.records import (
    Category,
    DateRange,
    Transaction,
    category_name_map,
)
from finance_analytics.models.results import (
    AggregationReport,
    CategoryTotal,
    DailyCashFlow,
    DailyRate,
    FixedVariableSplit,
    MonthlyBucket,
    PeriodTotals,
    WeekdayTotal,
)


ZERO = Decimal("0")
HUNDRED = Decimal("100")
WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def month_key(day: date) -> str:
    """Month label (YYYY-MM) of a calendar date."""
    return f"{day.year:04d}-{day.month:02d}"


# =============================================================================
# TOTALS AND DISTRIBUTIONS
# =============================================================================

def period_totals(transactions: Iterable[Transaction]) -> PeriodTotals:
    """Sum income and expense amounts."""
    income = ZERO
    expenses = ZERO
    for t in transactions:
        if t.is_income:
            income += t.amount
        else:
            expenses += t.amount
    return PeriodTotals(total_income=income, total_expenses=expenses)


def category_distribution(
    transactions: Iterable[Transaction],
    categories: Optional[Iterable[Category]] = None,
) -> list[CategoryTotal]:
    """
    Summed expenses per category display name, in first-seen order.

    Transactions whose category was deleted are grouped under the raw id.
    """
    names = category_name_map(categories)
    totals: dict[str, Decimal] = {}

    for t in transactions:
        if not t.is_expense:
            continue
        name = resolve_category_name(t.category, names)
        totals[name] = totals.get(name, ZERO) + t.amount

    return [CategoryTotal(name=name, amount=amount) for name, amount in totals.items()]


def top_categories(distribution: list[CategoryTotal], count: int = 3) -> list[CategoryTotal]:
    """Largest spending categories, descending. Ties keep first-seen order."""
    ranked = sorted(distribution, key=lambda entry: entry.amount, reverse=True)
    return [entry.model_copy() for entry in ranked[:max(0, count)]]


def fixed_vs_variable(
    transactions: Iterable[Transaction],
    categories: Optional[Iterable[Category]] = None,
    fixed_categories: Iterable[str] = (),
) -> FixedVariableSplit:
    """
    Split expenses into fixed costs and the rest.

    Only a resolved category name can mark an expense as fixed; an expense
    whose category no longer exists is always variable.
    """
    names = category_name_map(categories)
    fixed_names = set(fixed_categories)
    total = ZERO
    fixed = ZERO

    for t in transactions:
        if not t.is_expense:
            continue
        total += t.amount
        if names.get(t.category) in fixed_names:
            fixed += t.amount

    return FixedVariableSplit(fixed=fixed, variable=total - fixed)


def expense_by_weekday(transactions: Iterable[Transaction]) -> list[WeekdayTotal]:
    """
    Summed expenses per day of the week, Monday first.

    All seven days are always present so the result can be drawn as a
    heatmap row without gaps. Dates carry no time of day, so the weekday
    is the finest bucket available.
    """
    totals = [ZERO] * 7
    for t in transactions:
        if t.is_expense:
            totals[t.transaction_date.weekday()] += t.amount

    return [
        WeekdayTotal(weekday=index, name=WEEKDAY_NAMES[index], amount=amount)
        for index, amount in enumerate(totals)
    ]


# =============================================================================
# TIME SERIES
# =============================================================================

def daily_series(transactions: Iterable[Transaction]) -> list[DailyCashFlow]:
    """Income and expense per calendar day, ascending by date."""
    buckets: dict[date, list[Decimal]] = defaultdict(lambda: [ZERO, ZERO])

    for t in transactions:
        bucket = buckets[t.transaction_date]
        if t.is_income:
            bucket[0] += t.amount
        else:
            bucket[1] += t.amount

    return [
        DailyCashFlow(day=day, income=income, expense=expense)
        for day, (income, expense) in sorted(buckets.items())
    ]


def monthly_series(transactions: Iterable[Transaction]) -> list[MonthlyBucket]:
    """Income and expense per calendar month, ascending."""
    buckets: dict[str, list[Decimal]] = defaultdict(lambda: [ZERO, ZERO])

    for t in transactions:
        bucket = buckets[month_key(t.transaction_date)]
        if t.is_income:
            bucket[0] += t.amount
        else:
            bucket[1] += t.amount

    return [
        MonthlyBucket(month=month, income=income, expense=expense)
        for month, (income, expense) in sorted(buckets.items())
    ]


def savings_rate(series: Iterable[DailyCashFlow]) -> list[DailyRate]:
    """(income - expense) / income * 100 per day; 0 on days without income."""
    rates = []
    for day in series:
        if day.income > 0:
            value = (day.income - day.expense) / day.income * HUNDRED
        else:
            value = ZERO
        rates.append(DailyRate(day=day.day, value=value))
    return rates


def expense_to_income_ratio(series: Iterable[DailyCashFlow]) -> list[DailyRate]:
    """expense / income * 100 per day; 0 on days without income."""
    ratios = []
    for day in series:
        if day.income > 0:
            value = day.expense / day.income * HUNDRED
        else:
            value = ZERO
        ratios.append(DailyRate(day=day.day, value=value))
    return ratios


# =============================================================================
# ENTRY POINT
# =============================================================================

def aggregate(
    transactions: Iterable[Transaction],
    date_range: Optional[DateRange] = None,
    categories: Optional[Iterable[Category]] = None,
    fixed_categories: Iterable[str] = (),
    top_n: int = 3,
) -> AggregationReport:
    """
    Run every aggregation over the transactions inside `date_range`.

    Args:
        transactions: Snapshot transactions, any order.
        date_range: Inclusive window; None means everything.
        categories: Known categories, used to resolve display names.
        fixed_categories: Category names that count as fixed costs.
        top_n: How many top spending categories to report.
    """
    selected = in_date_range(transactions, date_range)
    categories = tuple(categories or ())

    distribution = category_distribution(selected, categories)
    series = daily_series(selected)

    return AggregationReport(
        totals=period_totals(selected),
        category_distribution=distribution,
        top_categories=top_categories(distribution, top_n),
        daily_series=series,
        monthly_series=monthly_series(selected),
        fixed_vs_variable=fixed_vs_variable(selected, categories, fixed_categories),
        expense_by_weekday=expense_by_weekday(selected),
        savings_rate=savings_rate(series),
        expense_to_income_ratio=expense_to_income_ratio(series),
    )
