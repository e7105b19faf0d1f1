"""Shared factories for analytics tests."""

from datetime import date
from decimal import Decimal
from itertools import count

import pytest

from finance_analytics.models.records import Category, Goal, Transaction


_ids = count(1)


def make_transaction(
    amount="10",
    type="expense",
    category="food",
    on=date(2024, 1, 1),
    description="Test",
    **extra,
) -> Transaction:
    """Build a transaction with sensible defaults."""
    return Transaction(
        id=extra.pop("id", f"t{next(_ids)}"),
        description=description,
        amount=Decimal(str(amount)),
        type=type,
        category=category,
        transaction_date=on,
        **extra,
    )


@pytest.fixture
def tx():
    return make_transaction


@pytest.fixture
def categories():
    return (
        Category(id="food", name="Food", type="expense"),
        Category(id="rent", name="Rent", type="expense"),
        Category(id="utilities", name="Utilities", type="expense"),
        Category(id="salary", name="Salary", type="income"),
        Category(id="transfers", name="Transferências", type="expense"),
        Category(id="invest", name="Investimentos", type="expense"),
    )


@pytest.fixture
def goal():
    return Goal(
        id="g1",
        name="Emergency fund",
        target_amount=Decimal("1000"),
        deadline=date(2024, 12, 31),
    )
