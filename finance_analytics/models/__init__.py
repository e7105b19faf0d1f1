"""
Data Models Package

This package contains all Pydantic models used by the analytics engine.
Input records are frozen; results are freshly built on every call.
"""

from finance_analytics.models.records import (
    Category,
    DateRange,
    Goal,
    LedgerSnapshot,
    PaymentStatus,
    RecurrenceInfo,
    RecurrenceInterval,
    Transaction,
    TransactionType,
    category_name_map,
)
from finance_analytics.models.results import (
    AggregationReport,
    AnalyticsReport,
    AssetClassPerformance,
    CategoryTotal,
    DailyCashFlow,
    DailyRate,
    FixedVariableSplit,
    FlowGraph,
    FlowLink,
    ForecastPoint,
    GoalProgress,
    MonthlyBucket,
    PeriodTotals,
    WeekdayTotal,
)
from finance_analytics.models.events import (
    AnalysisEvent,
    AnalysisEventBuilder,
    AnalysisEventType,
    EventSeverity,
)

__all__ = [
    # Records
    "Category",
    "DateRange",
    "Goal",
    "LedgerSnapshot",
    "PaymentStatus",
    "RecurrenceInfo",
    "RecurrenceInterval",
    "Transaction",
    "TransactionType",
    "category_name_map",
    # Results
    "AggregationReport",
    "AnalyticsReport",
    "AssetClassPerformance",
    "CategoryTotal",
    "DailyCashFlow",
    "DailyRate",
    "FixedVariableSplit",
    "FlowGraph",
    "FlowLink",
    "ForecastPoint",
    "GoalProgress",
    "MonthlyBucket",
    "PeriodTotals",
    "WeekdayTotal",
    # Events
    "AnalysisEvent",
    "AnalysisEventBuilder",
    "AnalysisEventType",
    "EventSeverity",
]
