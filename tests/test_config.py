"""Tests for settings."""

from measurements import MeasurementSystem, current_measurement_system, get_settings
from measurements.config import Settings


def test_default_settings():
    settings = Settings()
    assert settings.measurement_system == MeasurementSystem.METRIC
    assert settings.log_level == "INFO"


def test_measurement_system_from_environment(monkeypatch):
    monkeypatch.setenv("MEASUREMENTS_MEASUREMENT_SYSTEM", "imperial")
    assert Settings().measurement_system == MeasurementSystem.IMPERIAL


def test_environment_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("measurements_log_level", "DEBUG")
    assert Settings().log_level == "DEBUG"


def test_get_settings_is_cached(monkeypatch):
    """Test settings are loaded once until reset."""
    first = get_settings()
    monkeypatch.setenv("MEASUREMENTS_MEASUREMENT_SYSTEM", "imperial")
    assert get_settings() is first
    assert current_measurement_system() == MeasurementSystem.METRIC


def test_current_measurement_system(use_imperial):
    assert current_measurement_system() == MeasurementSystem.IMPERIAL
