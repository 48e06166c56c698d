from __future__ import annotations

import os

import pytest

from procurement.core.config import ForecastSettings, load_settings


def test_defaults(monkeypatch):
    for name in list(os.environ):
        if name.startswith("FORECAST_") or name in ("DATABASE_URL", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.database_url == "sqlite:///./procurement.db"
    assert settings.log_level == "INFO"
    assert settings.forecast == ForecastSettings()


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://u:p@db/procurement")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("FORECAST_MIN_PURCHASES", "4")
    monkeypatch.setenv("FORECAST_MIN_CONSISTENCY", "0.65")

    settings = load_settings()

    assert settings.database_url == "postgresql://u:p@db/procurement"
    assert settings.log_level == "DEBUG"
    assert settings.forecast.min_purchases == 4
    assert settings.forecast.min_consistency == pytest.approx(0.65)


def test_invalid_number_is_rejected(monkeypatch):
    monkeypatch.setenv("FORECAST_LOOKBACK_MONTHS", "twelve")

    with pytest.raises(ValueError, match="FORECAST_LOOKBACK_MONTHS"):
        load_settings()
