"""
Configuration Management for the Analytics Engine

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Every tunable of the analytics (which categories count as
fixed costs, which category holds transfers, the unusual-expense multiplier,
the forecast horizon) lives here rather than as literals in the algorithms.
The algorithms take plain arguments; the engine feeds them from settings.
"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalyticsSettings(BaseSettings):
    """Analytics tunables."""

    model_config = SettingsConfigDict(
        env_prefix="ANALYTICS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Aggregation
    fixed_cost_categories: str = Field(
        default="Rent,Utilities,Insurance",
        description="Comma-separated category names that count as fixed costs"
    )
    top_category_count: int = Field(
        default=3,
        ge=1,
        le=50,
        description="How many categories to report as top spenders"
    )

    # Pattern detection
    recurring_min_occurrences: int = Field(
        default=3,
        ge=2,
        description="Occurrences of the same description and amount that make a pattern"
    )
    unusual_multiplier: Decimal = Field(
        default=Decimal("3"),
        gt=0,
        description="An expense above this multiple of its category mean is unusual"
    )

    # Forecast
    forecast_horizon: int = Field(
        default=3,
        ge=0,
        le=24,
        description="Number of months to project"
    )

    # Transfer flow graph
    transfer_category: str = Field(
        default="Transferências",
        description="Category holding transfers between accounts"
    )
    flow_delimiter: str = Field(
        default=" - ",
        min_length=1,
        description="Separator in transfer descriptions: '<label> - <source> - <target>'"
    )

    # Asset class analysis
    investment_category: str = Field(
        default="Investimentos",
        description="Category holding investment transactions"
    )
    asset_marker: str = Field(
        default="criptomoedas",
        min_length=1,
        description="Substring in the description that identifies the asset class"
    )

    @field_validator("transfer_category", "investment_category")
    @classmethod
    def validate_category_name(cls, v: str) -> str:
        """Category names must not be blank."""
        if not v.strip():
            raise ValueError("Category name cannot be blank")
        return v.strip()

    @property
    def fixed_cost_set(self) -> frozenset[str]:
        """Get fixed cost category names as a set."""
        return frozenset(
            name.strip()
            for name in self.fixed_cost_categories.split(",")
            if name.strip()
        )


class AppSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    debug_mode: bool = Field(
        default=False,
        description="Log every analysis event, debug events included"
    )
    log_level: str = Field(
        default="INFO",
        pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
        description="Minimum level for analysis event logging"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @property
    def effective_log_level(self) -> str:
        """Log level the engine should use; debug mode forces DEBUG."""
        return "DEBUG" if self.debug_mode else self.log_level


class Settings(BaseSettings):
    """
    Root settings container.

    Aggregates all sub-settings for easy access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def analytics(self) -> AnalyticsSettings:
        return AnalyticsSettings()

    @property
    def app(self) -> AppSettings:
        return AppSettings()


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()


def validate_all_settings() -> dict[str, bool]:
    """
    Validate all settings are properly configured.

    Returns a dict of {setting_name: is_valid}.
    Useful for startup checks.
    """
    results = {}

    settings = get_settings()

    try:
        _ = settings.analytics
        results["analytics"] = True
    except ValueError as e:
        results["analytics"] = False
        results["analytics_error"] = str(e)

    try:
        _ = settings.app
        results["app"] = True
    except ValueError as e:
        results["app"] = False
        results["app_error"] = str(e)

    return results
