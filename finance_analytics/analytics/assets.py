"""
Asset class analysis.

Performance of one asset class inside the investment category, identified
by a marker substring in the description. Purchases are recorded as
expenses and the current value as income.
"""

from decimal import Decimal
from typing import Iterable, Optional

from finance_analytics.analytics.filters import in_category
from finance_analytics.models.records import Category, Transaction, category_name_map
from finance_analytics.models.results import AssetClassPerformance


ZERO = Decimal("0")
DEFAULT_INVESTMENT_CATEGORY = "Investimentos"
DEFAULT_ASSET_MARKER = "criptomoedas"


def asset_class_transactions(
    transactions: Iterable[Transaction],
    categories: Optional[Iterable[Category]] = None,
    investment_category: str = DEFAULT_INVESTMENT_CATEGORY,
    asset_marker: str = DEFAULT_ASSET_MARKER,
) -> list[Transaction]:
    """Investment transactions whose description mentions the asset marker."""
    names = category_name_map(categories)
    return [
        t for t in transactions
        if in_category(t, investment_category, names) and asset_marker in t.description
    ]


def analyze_asset_class(
    transactions: Iterable[Transaction],
    categories: Optional[Iterable[Category]] = None,
    investment_category: str = DEFAULT_INVESTMENT_CATEGORY,
    asset_marker: str = DEFAULT_ASSET_MARKER,
) -> AssetClassPerformance:
    """
    Invested amount, current value, performance and average cost.

    Average cost is invested divided by the number of matching
    transactions, or None when nothing matched.
    """
    matching = asset_class_transactions(
        transactions, categories, investment_category, asset_marker
    )

    invested = sum((t.amount for t in matching if t.is_expense), ZERO)
    value = sum((t.amount for t in matching if t.is_income), ZERO)

    return AssetClassPerformance(
        invested=invested,
        value=value,
        performance=value - invested,
        average_cost=invested / len(matching) if matching else None,
        transaction_count=len(matching),
    )
