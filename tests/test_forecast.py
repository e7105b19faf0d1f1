"""Tests for the trend forecaster."""

import pytest
from decimal import Decimal

from finance_analytics.analytics.forecast import (
    InvalidHorizonError,
    forecast,
    shift_month,
)
from finance_analytics.models.results import MonthlyBucket


def bucket(month, income="0", expense="0"):
    return MonthlyBucket(month=month, income=Decimal(income), expense=Decimal(expense))


class TestForecast:
    """Tests for first-difference extrapolation."""

    def test_two_months_horizon_one(self):
        points = forecast([bucket("2024-01", "100"), bucket("2024-02", "150")], horizon=1)
        assert len(points) == 3
        assert points[-1].period == "2024-03"
        assert points[-1].income == Decimal("200")
        assert points[-1].is_forecast is True
        assert not any(p.is_forecast for p in points[:2])

    def test_default_horizon_is_three(self):
        points = forecast([bucket("2024-01", "100", "50"), bucket("2024-02", "150", "60")])
        projected = [p for p in points if p.is_forecast]
        assert [p.period for p in projected] == ["2024-03", "2024-04", "2024-05"]
        assert [p.income for p in projected] == [Decimal("200"), Decimal("250"), Decimal("300")]
        assert [p.expense for p in projected] == [Decimal("70"), Decimal("80"), Decimal("90")]

    def test_uses_last_two_months_only(self):
        history = [
            bucket("2024-01", "1000"),
            bucket("2024-02", "100"),
            bucket("2024-03", "110"),
        ]
        assert forecast(history, horizon=1)[-1].income == Decimal("120")

    def test_unsorted_history_is_ordered(self):
        history = [bucket("2024-02", "150"), bucket("2024-01", "100")]
        points = forecast(history, horizon=1)
        assert [p.period for p in points] == ["2024-01", "2024-02", "2024-03"]
        assert points[-1].income == Decimal("200")

    def test_floored_at_zero(self):
        points = forecast([bucket("2024-01", expense="300"), bucket("2024-02", expense="100")], horizon=3)
        assert [p.expense for p in points if p.is_forecast] == [Decimal("0"), Decimal("0"), Decimal("0")]

    def test_year_rollover(self):
        points = forecast([bucket("2024-11", "1"), bucket("2024-12", "1")], horizon=2)
        assert [p.period for p in points[-2:]] == ["2025-01", "2025-02"]

    @pytest.mark.parametrize("history", [[], [bucket("2024-01", "100")]])
    def test_not_enough_history_returns_history(self, history):
        points = forecast(history, horizon=3)
        assert [p.period for p in points] == [b.month for b in history]
        assert not any(p.is_forecast for p in points)

    def test_zero_horizon(self):
        points = forecast([bucket("2024-01"), bucket("2024-02")], horizon=0)
        assert len(points) == 2

    def test_horizon_stops_at_last_representable_month(self):
        """No projected label may go past 9999-12."""
        points = forecast([bucket("9999-11", "10"), bucket("9999-12", "20")], horizon=1)
        assert [p.period for p in points] == ["9999-11", "9999-12"]
        assert not any(p.is_forecast for p in points)

    def test_horizon_truncated_near_year_9999(self):
        points = forecast([bucket("9999-10", "10"), bucket("9999-11", "20")], horizon=3)
        projected = [p for p in points if p.is_forecast]
        assert [p.period for p in projected] == ["9999-12"]
        assert projected[0].income == Decimal("30")

    def test_negative_horizon_rejected(self):
        with pytest.raises(InvalidHorizonError):
            forecast([bucket("2024-01"), bucket("2024-02")], horizon=-1)


class TestShiftMonth:
    """Tests for month label arithmetic."""

    def test_shift_within_year(self):
        assert shift_month("2024-03", 2) == "2024-05"

    def test_shift_across_years(self):
        assert shift_month("2024-12", 1) == "2025-01"
        assert shift_month("2024-10", 15) == "2026-01"

    def test_shift_past_year_9999_rejected(self):
        with pytest.raises(ValueError, match="out of range"):
            shift_month("9999-12", 1)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
