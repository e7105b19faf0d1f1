"""Analysis logging package."""

from finance_analytics.audit.logger import AnalysisLogger, create_correlation_id

__all__ = ["AnalysisLogger", "create_correlation_id"]
