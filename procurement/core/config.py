from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass(frozen=True)
class ForecastSettings:
    """Tunable constants of the material forecast and stocking decision."""

    lookback_months: int = 12
    """Length of the trailing purchase-history window."""

    window_tolerance_days: int = 1
    """Grace period applied to the window start for boundary dates."""

    min_history_events: int = 2
    """Events always kept, even when they predate the window."""

    default_lead_time_days: float = 30.0
    """Lead time assumed when no record carries a positive lead time."""

    default_months_of_data: float = 12.0
    """Consumption-rate denominator when the history spans no time."""

    min_purchases: int = 3
    min_consistency: float = 0.5
    frequent_interval_days: float = 60.0
    long_lead_time_days: float = 30.0
    high_consumption_per_month: float = 10.0


@dataclass(frozen=True)
class Settings:
    database_url: str = "sqlite:///./procurement.db"
    log_level: str = "INFO"
    forecast: ForecastSettings = field(default_factory=ForecastSettings)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_settings() -> Settings:
    """Build settings from environment variables, falling back to defaults."""
    defaults = ForecastSettings()
    forecast = ForecastSettings(
        lookback_months=_env_int("FORECAST_LOOKBACK_MONTHS", defaults.lookback_months),
        min_purchases=_env_int("FORECAST_MIN_PURCHASES", defaults.min_purchases),
        min_consistency=_env_float("FORECAST_MIN_CONSISTENCY", defaults.min_consistency),
        frequent_interval_days=_env_float(
            "FORECAST_FREQUENT_INTERVAL_DAYS", defaults.frequent_interval_days
        ),
        long_lead_time_days=_env_float("FORECAST_LONG_LEAD_TIME_DAYS", defaults.long_lead_time_days),
        high_consumption_per_month=_env_float(
            "FORECAST_HIGH_CONSUMPTION_PER_MONTH", defaults.high_consumption_per_month
        ),
        default_lead_time_days=_env_float(
            "FORECAST_DEFAULT_LEAD_TIME_DAYS", defaults.default_lead_time_days
        ),
    )
    return Settings(
        database_url=os.getenv("DATABASE_URL", Settings.database_url),
        log_level=os.getenv("LOG_LEVEL", Settings.log_level).upper(),
        forecast=forecast,
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
