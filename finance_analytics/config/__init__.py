"""Configuration package."""

from finance_analytics.config.settings import (
    AnalyticsSettings,
    AppSettings,
    Settings,
    get_settings,
    validate_all_settings,
)

__all__ = [
    "AnalyticsSettings",
    "AppSettings",
    "Settings",
    "get_settings",
    "validate_all_settings",
]
