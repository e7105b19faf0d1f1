"""Analytics package: pure functions over a transaction snapshot."""

from finance_analytics.analytics.aggregator import (
    aggregate,
    category_distribution,
    daily_series,
    expense_by_weekday,
    expense_to_income_ratio,
    fixed_vs_variable,
    monthly_series,
    period_totals,
    savings_rate,
    top_categories,
)
from finance_analytics.analytics.assets import analyze_asset_class
from finance_analytics.analytics.filters import filter_transactions, in_date_range
from finance_analytics.analytics.flow import build_flow_graph, parse_transfer_description
from finance_analytics.analytics.forecast import InvalidHorizonError, forecast
from finance_analytics.analytics.goals import evaluate_goals, goal_progress
from finance_analytics.analytics.patterns import detect_recurring, detect_unusual
from finance_analytics.analytics.streak import calculate_streak

__all__ = [
    # Aggregation
    "aggregate",
    "category_distribution",
    "daily_series",
    "expense_by_weekday",
    "expense_to_income_ratio",
    "fixed_vs_variable",
    "monthly_series",
    "period_totals",
    "savings_rate",
    "top_categories",
    # Filters
    "filter_transactions",
    "in_date_range",
    # Patterns
    "detect_recurring",
    "detect_unusual",
    # Forecast
    "InvalidHorizonError",
    "forecast",
    # Streak
    "calculate_streak",
    # Goals
    "evaluate_goals",
    "goal_progress",
    # Flow graph
    "build_flow_graph",
    "parse_transfer_description",
    # Asset class
    "analyze_asset_class",
]
