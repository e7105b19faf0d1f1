"""
Result Models for the Analytics Engine

Everything the engine hands back to the presentation layer.

DESIGN DECISION: Results are fresh pydantic models built on every call.
They never alias the input snapshot, so a caller that edits a result
cannot corrupt the next computation.
"""

from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

from finance_analytics.models.events import AnalysisEvent
from finance_analytics.models.records import Transaction


ZERO = Decimal("0")
HUNDRED = Decimal("100")


# =============================================================================
# AGGREGATION
# =============================================================================

class PeriodTotals(BaseModel):
    """Income and expense totals for a period."""

    total_income: Decimal = ZERO
    total_expenses: Decimal = ZERO

    @property
    def net(self) -> Decimal:
        """Income minus expenses (what was saved over the period)."""
        return self.total_income - self.total_expenses

    @property
    def spent_percentage(self) -> Decimal:
        """Expenses as a percentage of income; 0 when there was no income."""
        if self.total_income <= 0:
            return ZERO
        return self.total_expenses / self.total_income * HUNDRED


class CategoryTotal(BaseModel):
    """Summed expenses for one category display name."""

    name: str
    amount: Decimal


class DailyCashFlow(BaseModel):
    """Income and expense sums for one calendar day."""

    day: date
    income: Decimal = ZERO
    expense: Decimal = ZERO


class DailyRate(BaseModel):
    """A percentage computed for one calendar day."""

    day: date
    value: Decimal = Field(
        ...,
        description="Percentage; 0 on days without income"
    )


class FixedVariableSplit(BaseModel):
    """Expenses split into fixed costs and everything else."""

    fixed: Decimal = ZERO
    variable: Decimal = ZERO


class MonthlyBucket(BaseModel):
    """Income and expense sums for one calendar month."""

    month: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}$",
        description="Month label, YYYY-MM"
    )
    income: Decimal = ZERO
    expense: Decimal = ZERO


class WeekdayTotal(BaseModel):
    """Summed expenses for one day of the week."""

    weekday: int = Field(
        ...,
        ge=0,
        le=6,
        description="0 is Monday, 6 is Sunday"
    )
    name: str
    amount: Decimal = ZERO


class AggregationReport(BaseModel):
    """
    Everything the aggregator derives from one date window.
    """

    totals: PeriodTotals
    category_distribution: list[CategoryTotal] = Field(default_factory=list)
    top_categories: list[CategoryTotal] = Field(default_factory=list)
    daily_series: list[DailyCashFlow] = Field(default_factory=list)
    monthly_series: list[MonthlyBucket] = Field(default_factory=list)
    fixed_vs_variable: FixedVariableSplit
    expense_by_weekday: list[WeekdayTotal] = Field(default_factory=list)
    savings_rate: list[DailyRate] = Field(default_factory=list)
    expense_to_income_ratio: list[DailyRate] = Field(default_factory=list)

    def distribution_as_dict(self) -> dict[str, Decimal]:
        """Category distribution as a name -> amount mapping."""
        return {entry.name: entry.amount for entry in self.category_distribution}


# =============================================================================
# FORECAST
# =============================================================================

class ForecastPoint(BaseModel):
    """A historical or projected month."""

    period: str = Field(
        ...,
        pattern=r"^\d{4}-\d{2}$",
        description="Month label, YYYY-MM"
    )
    income: Decimal = ZERO
    expense: Decimal = ZERO
    is_forecast: bool = Field(
        default=False,
        description="True for projected months"
    )


# =============================================================================
# GOALS
# =============================================================================

class GoalProgress(BaseModel):
    """Derived progress of one goal."""

    goal_id: str
    name: str
    target_amount: Decimal
    contributed: Decimal = ZERO
    percent: Decimal = Field(
        default=ZERO,
        ge=0,
        le=100,
        description="Completion percentage, clamped to [0, 100]"
    )
    deadline: date

    @property
    def is_complete(self) -> bool:
        return self.percent >= 100


# =============================================================================
# FLOW GRAPH
# =============================================================================

class FlowLink(BaseModel):
    """One directed, weighted edge of the transfer flow graph."""

    source: str
    target: str
    amount: Decimal


class FlowGraph(BaseModel):
    """Directed weighted graph of money moved between accounts."""

    nodes: list[str] = Field(default_factory=list)
    links: list[FlowLink] = Field(default_factory=list)
    skipped: int = Field(
        default=0,
        ge=0,
        description="Transfer records whose description could not be parsed"
    )

    @property
    def is_empty(self) -> bool:
        return not self.nodes or not self.links


# =============================================================================
# ASSET CLASS
# =============================================================================

class AssetClassPerformance(BaseModel):
    """
    Performance of one investment asset class.

    `average_cost` is None when no transaction matched: an average over
    zero records is not available, not zero.
    """

    invested: Decimal = ZERO
    value: Decimal = ZERO
    performance: Decimal = ZERO
    average_cost: Optional[Decimal] = None
    transaction_count: int = Field(default=0, ge=0)


# =============================================================================
# FULL REPORT
# =============================================================================

class AnalyticsReport(BaseModel):
    """
    Result of one full analytics pass over a snapshot.
    """

    report_id: UUID = Field(default_factory=uuid4)
    correlation_id: Optional[UUID] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None

    aggregation: AggregationReport
    forecast: list[ForecastPoint] = Field(default_factory=list)
    streak_days: int = Field(default=0, ge=0)
    goals: list[GoalProgress] = Field(default_factory=list)
    recurring: list[Transaction] = Field(default_factory=list)
    unusual: list[Transaction] = Field(default_factory=list)
    flow_graph: FlowGraph = Field(default_factory=FlowGraph)
    asset_class: AssetClassPerformance = Field(default_factory=AssetClassPerformance)

    events: list[AnalysisEvent] = Field(
        default_factory=list,
        description="Events logged during this pass, in order"
    )
