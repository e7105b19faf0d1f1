"""
Record Models for the Analytics Engine

These models describe the read-only snapshot the analytics engine works on.
They are owned by whatever persistence layer feeds the engine; the engine
only borrows them for the duration of one computation.

DESIGN DECISION: All records are frozen pydantic models.
A caller can never mutate a transaction through a derived result,
so repeated analytics passes over the same snapshot always agree.

DESIGN DECISION: Dates are calendar dates, never instants.
Date-time inputs are collapsed to their date part once, here at the
boundary, instead of in every analytics operation.
"""

from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Iterable, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)


# =============================================================================
# ENUMS
# =============================================================================

class TransactionType(str, Enum):
    """
    Direction of a transaction.

    Amounts are always stored as positive magnitudes; the direction
    lives here and nowhere else.
    """
    INCOME = "income"
    EXPENSE = "expense"


class PaymentStatus(str, Enum):
    """Payment status of a transaction."""
    PAID = "paid"
    PENDING = "pending"
    OVERDUE = "overdue"


class RecurrenceInterval(str, Enum):
    """Declared recurrence interval. Advisory only."""
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


def _to_calendar_date(value):
    """Collapse datetimes and ISO date-time strings to a calendar date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        text = value.strip()
        # Keep the written date; no timezone shifting
        for separator in ("T", " "):
            if separator in text:
                return text.split(separator, 1)[0]
        return text
    return value


# =============================================================================
# CORE RECORDS
# =============================================================================

class RecurrenceInfo(BaseModel):
    """
    Recurrence metadata attached to a transaction by the user.

    The engine never expands this into future instances.
    """
    model_config = ConfigDict(frozen=True)

    interval: RecurrenceInterval
    end_date: Optional[date] = None

    @field_validator("end_date", mode="before")
    @classmethod
    def collapse_to_date(cls, v):
        return _to_calendar_date(v)


class Category(BaseModel):
    """
    A transaction category.

    A transaction's type should match its category's type, but categories
    can be deleted or re-typed later, so the transaction type always wins.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Category identifier"
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Display name"
    )
    type: TransactionType = Field(
        ...,
        description="Whether this category collects income or expenses"
    )


class Transaction(BaseModel):
    """
    A single dated financial transaction.

    CRITICAL: `amount` is a non-negative magnitude. Whether money came in
    or went out is decided by `type` alone.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Unique transaction identifier"
    )
    description: str = Field(
        default="",
        max_length=500,
        description="Free-text description"
    )
    amount: Decimal = Field(
        ...,
        ge=0,
        description="Positive magnitude of the transaction"
    )
    type: TransactionType = Field(
        ...,
        description="Income or expense"
    )
    category: str = Field(
        ...,
        description="Category id (may reference a deleted category)"
    )
    transaction_date: date = Field(
        ...,
        description="Calendar date of the transaction"
    )

    payment_status: PaymentStatus = Field(
        default=PaymentStatus.PAID,
        description="Payment status"
    )
    tags: frozenset[str] = Field(
        default_factory=frozenset,
        description="Free-form tags"
    )
    goal_id: Optional[str] = Field(
        default=None,
        description="Goal this transaction contributes to"
    )
    source: Optional[str] = Field(
        default=None,
        max_length=200,
        description="Where the transaction came from (e.g. an import)"
    )

    # Recurrence
    is_recurring: bool = Field(
        default=False,
        description="Already marked as recurring by the user"
    )
    recurrence: Optional[RecurrenceInfo] = None

    @field_validator("transaction_date", mode="before")
    @classmethod
    def collapse_to_date(cls, v):
        """Accept date-time input once and keep only the calendar date."""
        return _to_calendar_date(v)

    @property
    def is_income(self) -> bool:
        return self.type == TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type == TransactionType.EXPENSE


class Goal(BaseModel):
    """
    A savings goal.

    Progress is never stored here. It is always derived from the income
    transactions that reference this goal.
    """
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    id: str = Field(
        ...,
        min_length=1,
        description="Goal identifier"
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=200,
        description="Goal name"
    )
    target_amount: Decimal = Field(
        ...,
        ge=0,
        description="Amount to save (a zero target yields zero progress)"
    )
    deadline: date = Field(
        ...,
        description="Target date"
    )

    @field_validator("deadline", mode="before")
    @classmethod
    def collapse_to_date(cls, v):
        return _to_calendar_date(v)


# =============================================================================
# ANALYSIS INPUTS
# =============================================================================

def category_name_map(categories: Optional[Iterable[Category]]) -> dict[str, str]:
    """Fresh mapping of category id to display name."""
    return {category.id: category.name for category in categories or ()}


class DateRange(BaseModel):
    """
    Inclusive calendar date window.

    Either bound may be omitted to leave that side open.
    """
    model_config = ConfigDict(frozen=True)

    start: Optional[date] = None
    end: Optional[date] = None

    @model_validator(mode="after")
    def validate_bounds(self) -> "DateRange":
        if self.start and self.end and self.end < self.start:
            raise ValueError("Date range end cannot be before start")
        return self

    def contains(self, day: date) -> bool:
        """Check whether a calendar date falls inside the window."""
        if self.start and day < self.start:
            return False
        if self.end and day > self.end:
            return False
        return True


class LedgerSnapshot(BaseModel):
    """
    Read-only snapshot of everything one analytics pass needs.

    Passed explicitly into every computation; there is no global store.
    """
    model_config = ConfigDict(frozen=True)

    transactions: tuple[Transaction, ...] = ()
    categories: tuple[Category, ...] = ()
    goals: tuple[Goal, ...] = ()

    def category_names(self) -> dict[str, str]:
        """Fresh mapping of category id to display name."""
        return category_name_map(self.categories)
