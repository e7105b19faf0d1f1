"""
Analysis Logger

Every analytics pass is traced through structured log events.
This provides:
1. Traceability of which snapshot produced which report
2. Visibility into degenerate inputs (no history, zero targets,
   unparseable transfer descriptions) that silently shape results

The logger:
- Is synchronous, like the engine it serves
- Never raises; a logging failure must not abort an analytics pass
- Supports correlation IDs to tie together the events of one pass
"""

import logging
from uuid import UUID, uuid4

import structlog

from finance_analytics.models.events import AnalysisEvent, EventSeverity


# Configure structlog for local logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)


class AnalysisLogger:
    """
    Central logging service for analytics passes.

    Events are routed to the structured log by severity. The logger keeps
    no history; the engine attaches each pass's events to its report.
    """

    def __init__(self, name: str = "finance_analytics", level: str = "INFO"):
        """
        Initialize analysis logger.

        Args:
            name: Logger name in the stdlib logging hierarchy.
            level: Minimum level for the underlying stdlib logger.
        """
        logging.getLogger(name).setLevel(level)
        self._logger = structlog.get_logger(name)

    def log(self, event: AnalysisEvent) -> bool:
        """
        Log an analysis event.

        Returns True if the event was written to the structured log.
        """
        log_dict = event.to_log_dict()

        try:
            if event.severity == EventSeverity.ERROR:
                self._logger.error("analysis_event", **log_dict)
            elif event.severity == EventSeverity.WARNING:
                self._logger.warning("analysis_event", **log_dict)
            elif event.severity == EventSeverity.DEBUG:
                self._logger.debug("analysis_event", **log_dict)
            else:
                self._logger.info("analysis_event", **log_dict)
        except (TypeError, ValueError, OSError) as e:
            # Rendering or handler failure; keep the pass going
            logging.getLogger(__name__).warning(
                "analysis event could not be logged: %s", e
            )
            return False

        return True


def create_correlation_id() -> UUID:
    """
    Create a new correlation ID for tracking the events of one pass.
    """
    return uuid4()
