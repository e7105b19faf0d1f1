"""
Analytics Engine

This module ties together all the analytics components and runs one full
pass over a ledger snapshot: the data behind a reports screen.

DESIGN DECISION: The engine is stateless between calls.
The snapshot is passed in explicitly, every section is recomputed from it,
and the report is a freshly built object. Settings are read once when the
engine is created.

Range-scoped sections (aggregation, forecast, streak, goals) only see the
transactions inside the requested window. Pattern detection, the transfer
flow graph and the asset class analysis look at the whole snapshot, since
a category mean or a transfer history is only meaningful over all data.
"""

from functools import partial
from typing import Optional
from uuid import uuid4

from finance_analytics.analytics import (
    aggregate,
    analyze_asset_class,
    build_flow_graph,
    calculate_streak,
    detect_recurring,
    detect_unusual,
    evaluate_goals,
    forecast,
    in_date_range,
    parse_transfer_description,
)
from finance_analytics.audit import AnalysisLogger, create_correlation_id
from finance_analytics.config import AnalyticsSettings, get_settings
from finance_analytics.models.events import AnalysisEvent, AnalysisEventBuilder
from finance_analytics.models.records import DateRange, LedgerSnapshot
from finance_analytics.models.results import AnalyticsReport


class AnalyticsEngine:
    """
    Runs every analytics component over a snapshot.

    GUARANTEES:
    - Never mutates the snapshot
    - Degenerate inputs (no transactions, no history, zero targets,
      malformed transfer descriptions) produce well-defined results
    - Every pass is traceable through its correlation ID, and the events
      of a pass travel with its report rather than with the logger
    """

    def __init__(
        self,
        settings: Optional[AnalyticsSettings] = None,
        logger: Optional[AnalysisLogger] = None,
    ):
        app_settings = get_settings()
        self._settings = settings or app_settings.analytics
        self._logger = logger or AnalysisLogger(level=app_settings.app.effective_log_level)

    @property
    def settings(self) -> AnalyticsSettings:
        return self._settings

    def _emit(self, events: list[AnalysisEvent], event: AnalysisEvent) -> None:
        """Log an event and keep it for the report of the current pass."""
        self._logger.log(event)
        events.append(event)

    def build_report(
        self,
        snapshot: LedgerSnapshot,
        date_range: Optional[DateRange] = None,
    ) -> AnalyticsReport:
        """
        Run a full analytics pass.

        Args:
            snapshot: Transactions, categories and goals to analyse.
            date_range: Inclusive window for the range-scoped sections.
        """
        settings = self._settings
        correlation_id = create_correlation_id()
        date_from = date_range.start if date_range else None
        date_to = date_range.end if date_range else None
        report_id = uuid4()
        events: list[AnalysisEvent] = []

        self._emit(events, AnalysisEventBuilder.analysis_started(
            correlation_id=correlation_id,
            transaction_count=len(snapshot.transactions),
            date_from=date_from.isoformat() if date_from else None,
            date_to=date_to.isoformat() if date_to else None,
        ))

        selected = in_date_range(snapshot.transactions, date_range)

        # Aggregation
        aggregation = aggregate(
            selected,
            categories=snapshot.categories,
            fixed_categories=settings.fixed_cost_set,
            top_n=settings.top_category_count,
        )
        self._emit(events, AnalysisEventBuilder.aggregation_completed(
            correlation_id=correlation_id,
            total_income=str(aggregation.totals.total_income),
            total_expenses=str(aggregation.totals.total_expenses),
            day_count=len(aggregation.daily_series),
        ))

        # Forecast
        history_months = len(aggregation.monthly_series)
        projection = forecast(aggregation.monthly_series, settings.forecast_horizon)
        if history_months < 2:
            self._emit(events, AnalysisEventBuilder.forecast_skipped(
                correlation_id=correlation_id,
                history_months=history_months,
            ))
        else:
            self._emit(events, AnalysisEventBuilder.forecast_completed(
                correlation_id=correlation_id,
                history_months=history_months,
                horizon=settings.forecast_horizon,
            ))

        # Streak and goals
        streak_days = calculate_streak(selected)
        goals = evaluate_goals(snapshot.goals, selected)
        for goal in snapshot.goals:
            if goal.target_amount == 0:
                self._emit(events, AnalysisEventBuilder.goal_target_zero(
                    correlation_id=correlation_id,
                    goal_id=goal.id,
                    goal_name=goal.name,
                ))

        # Patterns over the whole snapshot
        recurring = detect_recurring(
            snapshot.transactions, settings.recurring_min_occurrences
        )
        unusual = detect_unusual(snapshot.transactions, settings.unusual_multiplier)
        self._emit(events, AnalysisEventBuilder.patterns_detected(
            correlation_id=correlation_id,
            recurring_count=len(recurring),
            unusual_count=len(unusual),
        ))

        # Transfer flow graph
        flow_graph = build_flow_graph(
            snapshot.transactions,
            categories=snapshot.categories,
            transfer_category=settings.transfer_category,
            parser=partial(parse_transfer_description, delimiter=settings.flow_delimiter),
        )
        if flow_graph.skipped:
            self._emit(events, AnalysisEventBuilder.flow_records_skipped(
                correlation_id=correlation_id,
                skipped=flow_graph.skipped,
            ))

        # Asset class
        asset_class = analyze_asset_class(
            snapshot.transactions,
            categories=snapshot.categories,
            investment_category=settings.investment_category,
            asset_marker=settings.asset_marker,
        )
        if asset_class.average_cost is None:
            self._emit(events, AnalysisEventBuilder.asset_class_empty(
                correlation_id=correlation_id,
                category=settings.investment_category,
                marker=settings.asset_marker,
            ))

        self._emit(events, AnalysisEventBuilder.analysis_completed(
            correlation_id=correlation_id,
            report_id=report_id,
            streak_days=streak_days,
            goal_count=len(goals),
        ))

        return AnalyticsReport(
            report_id=report_id,
            correlation_id=correlation_id,
            date_from=date_from,
            date_to=date_to,
            aggregation=aggregation,
            forecast=projection,
            streak_days=streak_days,
            goals=goals,
            recurring=recurring,
            unusual=unusual,
            flow_graph=flow_graph,
            asset_class=asset_class,
            events=events,
        )
