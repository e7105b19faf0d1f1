"""
Analysis Event Models

Every analytics pass emits a handful of events so that a pass can be
traced after the fact: when it started, which degenerate cases it hit
(no history to forecast from, a goal with a zero target, transfer
descriptions that could not be parsed) and what it produced.

DESIGN DECISION: Events are only logged, never persisted.
The engine holds no state between calls.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class AnalysisEventType(str, Enum):
    """Types of events an analytics pass emits."""
    # Pass lifecycle
    ANALYSIS_STARTED = "analysis_started"
    ANALYSIS_COMPLETED = "analysis_completed"

    # Sections
    AGGREGATION_COMPLETED = "aggregation_completed"
    PATTERNS_DETECTED = "patterns_detected"
    FORECAST_COMPLETED = "forecast_completed"
    FORECAST_SKIPPED = "forecast_skipped"
    GOAL_TARGET_ZERO = "goal_target_zero"
    FLOW_RECORDS_SKIPPED = "flow_records_skipped"
    ASSET_CLASS_EMPTY = "asset_class_empty"


class EventSeverity(str, Enum):
    """Severity level for analysis events."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AnalysisEvent(BaseModel):
    """A single analysis event."""

    event_id: UUID = Field(
        default_factory=uuid4,
        description="Unique event identifier"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="When the event occurred (UTC)"
    )

    event_type: AnalysisEventType = Field(
        ...,
        description="Type of event"
    )
    severity: EventSeverity = Field(
        default=EventSeverity.INFO,
        description="Event severity"
    )

    # Correlation - all events of one analytics pass share this
    correlation_id: Optional[UUID] = Field(
        default=None,
        description="ID of the analytics pass this event belongs to"
    )

    description: str = Field(
        ...,
        max_length=500,
        description="Human-readable description of what happened"
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional event-specific data"
    )

    def to_log_dict(self) -> dict:
        """
        Convert to a dictionary suitable for structured logging.
        """
        return {
            "event_id": str(self.event_id),
            "timestamp": self.timestamp.isoformat(),
            "event_type": self.event_type.value,
            "severity": self.severity.value,
            "correlation_id": str(self.correlation_id) if self.correlation_id else None,
            "description": self.description,
            "details": self.details,
        }


class AnalysisEventBuilder:
    """
    Helper class to build analysis events with common patterns.

    Usage:
        event = AnalysisEventBuilder.analysis_started(correlation_id, 120)
        event = AnalysisEventBuilder.forecast_skipped(correlation_id, 1)
    """

    @staticmethod
    def analysis_started(
        correlation_id: UUID,
        transaction_count: int,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None,
    ) -> AnalysisEvent:
        return AnalysisEvent(
            event_type=AnalysisEventType.ANALYSIS_STARTED,
            correlation_id=correlation_id,
            description=f"Analysis started over {transaction_count} transactions",
            details={
                "transaction_count": transaction_count,
                "date_from": date_from,
                "date_to": date_to,
            },
        )

    @staticmethod
    def aggregation_completed(
        correlation_id: UUID,
        total_income: str,
        total_expenses: str,
        day_count: int,
    ) -> AnalysisEvent:
        return AnalysisEvent(
            event_type=AnalysisEventType.AGGREGATION_COMPLETED,
            severity=EventSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Aggregated {day_count} days",
            details={
                "total_income": total_income,
                "total_expenses": total_expenses,
                "day_count": day_count,
            },
        )

    @staticmethod
    def patterns_detected(
        correlation_id: UUID,
        recurring_count: int,
        unusual_count: int,
    ) -> AnalysisEvent:
        return AnalysisEvent(
            event_type=AnalysisEventType.PATTERNS_DETECTED,
            severity=EventSeverity.DEBUG,
            correlation_id=correlation_id,
            description=(
                f"Found {recurring_count} recurring and "
                f"{unusual_count} unusual transactions"
            ),
            details={
                "recurring_count": recurring_count,
                "unusual_count": unusual_count,
            },
        )

    @staticmethod
    def forecast_completed(
        correlation_id: UUID,
        history_months: int,
        horizon: int,
    ) -> AnalysisEvent:
        return AnalysisEvent(
            event_type=AnalysisEventType.FORECAST_COMPLETED,
            severity=EventSeverity.DEBUG,
            correlation_id=correlation_id,
            description=f"Projected {horizon} months from {history_months} months of history",
            details={
                "history_months": history_months,
                "horizon": horizon,
            },
        )

    @staticmethod
    def forecast_skipped(
        correlation_id: UUID,
        history_months: int,
    ) -> AnalysisEvent:
        return AnalysisEvent(
            event_type=AnalysisEventType.FORECAST_SKIPPED,
            correlation_id=correlation_id,
            description="Not enough monthly history to forecast",
            details={
                "history_months": history_months,
            },
        )

    @staticmethod
    def goal_target_zero(
        correlation_id: UUID,
        goal_id: str,
        goal_name: str,
    ) -> AnalysisEvent:
        return AnalysisEvent(
            event_type=AnalysisEventType.GOAL_TARGET_ZERO,
            severity=EventSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Goal '{goal_name}' has a zero target; progress reported as 0",
            details={
                "goal_id": goal_id,
            },
        )

    @staticmethod
    def flow_records_skipped(
        correlation_id: UUID,
        skipped: int,
    ) -> AnalysisEvent:
        return AnalysisEvent(
            event_type=AnalysisEventType.FLOW_RECORDS_SKIPPED,
            severity=EventSeverity.WARNING,
            correlation_id=correlation_id,
            description=f"Skipped {skipped} transfer records with unparseable descriptions",
            details={
                "skipped": skipped,
            },
        )

    @staticmethod
    def asset_class_empty(
        correlation_id: UUID,
        category: str,
        marker: str,
    ) -> AnalysisEvent:
        return AnalysisEvent(
            event_type=AnalysisEventType.ASSET_CLASS_EMPTY,
            correlation_id=correlation_id,
            description="No transactions for asset class; average cost not available",
            details={
                "category": category,
                "marker": marker,
            },
        )

    @staticmethod
    def analysis_completed(
        correlation_id: UUID,
        report_id: UUID,
        streak_days: int,
        goal_count: int,
    ) -> AnalysisEvent:
        return AnalysisEvent(
            event_type=AnalysisEventType.ANALYSIS_COMPLETED,
            correlation_id=correlation_id,
            description=f"Analysis completed: report {report_id}",
            details={
                "report_id": str(report_id),
                "streak_days": streak_days,
                "goal_count": goal_count,
            },
        )
