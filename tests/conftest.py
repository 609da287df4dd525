"""
Pytest configuration and shared fixtures.
"""

import pytest

from measurements import MeasurementSystem, reset_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Load settings fresh in every test, ignoring the caller's environment."""
    monkeypatch.delenv("MEASUREMENTS_MEASUREMENT_SYSTEM", raising=False)
    monkeypatch.delenv("MEASUREMENTS_LOG_LEVEL", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def metric() -> MeasurementSystem:
    return MeasurementSystem.METRIC


@pytest.fixture
def imperial() -> MeasurementSystem:
    return MeasurementSystem.IMPERIAL


@pytest.fixture
def use_imperial(monkeypatch):
    """Make imperial the configured measurement system."""
    monkeypatch.setenv("MEASUREMENTS_MEASUREMENT_SYSTEM", "imperial")
    reset_settings()
