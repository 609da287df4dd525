"""Tests for linear, pace and rate converters."""

import math

import pytest
from pydantic import TypeAdapter, ValidationError

from measurements import (
    Converter,
    LinearConverter,
    MeasurementSystem,
    PaceConverter,
    RateConverter,
)


def test_linear_converter_scales():
    converter = LinearConverter(coefficient=1000.0)
    assert converter.to_base(5.0) == 5000.0
    assert converter.from_base(5000.0) == 5.0


def test_linear_converter_with_offset():
    """Test Fahrenheit-style conversion needs the offset, not just the scale."""
    fahrenheit = LinearConverter(coefficient=5 / 9, constant=-32 * 5 / 9)
    assert fahrenheit.to_base(32.0) == pytest.approx(0.0, abs=1e-12)
    assert fahrenheit.to_base(212.0) == pytest.approx(100.0)
    assert fahrenheit.from_base(-40.0) == pytest.approx(-40.0)


def test_linear_converter_rejects_zero_coefficient():
    with pytest.raises(ValidationError):
        LinearConverter(coefficient=0.0)


def test_pace_converter_metric():
    """Test 5:00 min/km is 1000 m in 300 s."""
    converter = PaceConverter(system=MeasurementSystem.METRIC)
    assert converter.to_base(5.0) == pytest.approx(1000 / 300)
    assert converter.from_base(1000 / 300) == pytest.approx(5.0)


def test_pace_converter_imperial_uses_mile():
    converter = PaceConverter(system=MeasurementSystem.IMPERIAL)
    assert converter.reference_distance == pytest.approx(1609.344)
    # 8:00 min/mile
    assert converter.to_base(8.0) == pytest.approx(1609.344 / 480)


def test_pace_converter_adjustment_factor():
    """Test a 0.5 factor on metric measures per 500m."""
    converter = PaceConverter(system=MeasurementSystem.METRIC, adjustment_factor=0.5)
    # 2:00 per 500m
    assert converter.to_base(2.0) == pytest.approx(500 / 120)
    assert converter.from_base(500 / 120) == pytest.approx(2.0)


def test_pace_converter_zero_and_infinity():
    converter = PaceConverter(system=MeasurementSystem.METRIC)
    assert converter.to_base(0.0) == math.inf
    assert converter.from_base(0.0) == math.inf
    assert converter.to_base(math.inf) == 0.0
    assert converter.from_base(math.inf) == 0.0


def test_rate_converter_per_hour():
    """Test meters per hour from meters per second."""
    converter = RateConverter(distance_meters=1.0, per_base=3600.0)
    assert converter.from_base(0.25) == pytest.approx(900.0)
    assert converter.to_base(900.0) == pytest.approx(0.25)


def test_rate_converter_per_ten_km():
    converter = RateConverter(distance_meters=1.0, per_base=10_000.0)
    assert converter.coefficient == pytest.approx(1e-4)
    # 1% grade is 100 m per 10 km
    assert converter.from_base(0.01) == pytest.approx(100.0)


def test_rate_converter_rejects_non_positive():
    with pytest.raises(ValidationError):
        RateConverter(distance_meters=1.0, per_base=0.0)


def test_converters_are_immutable():
    converter = LinearConverter(coefficient=2.0)
    with pytest.raises(ValidationError):
        converter.coefficient = 3.0


@pytest.mark.parametrize(
    "data,expected_type",
    [
        ({"kind": "linear", "coefficient": 2.0}, LinearConverter),
        ({"kind": "pace", "system": "imperial"}, PaceConverter),
        ({"kind": "rate", "distance_meters": 1.0, "per_base": 3600.0}, RateConverter),
    ],
)
def test_converter_union_is_discriminated_by_kind(data, expected_type):
    converter = TypeAdapter(Converter).validate_python(data)
    assert isinstance(converter, expected_type)
