"""Tests for number, pace, degree and duration layouts."""

import math

import pytest

from measurements import DisplayStyle
from measurements.formatters import (
    decimal_string,
    degree_string,
    duration_string,
    fixed_fraction,
    measurement_string,
    pace_string,
)
from measurements.units import KILOMETERS


def test_fixed_fraction():
    assert fixed_fraction(12.3456, 2) == "12.35"
    assert fixed_fraction(12.3456, 0) == "12"
    assert fixed_fraction(1234567.0, 1) == "1234567.0"


def test_fixed_fraction_negative_digits():
    with pytest.raises(ValueError):
        fixed_fraction(1.0, -1)


def test_decimal_string_trims_trailing_zeros():
    assert decimal_string(5.0, 2) == "5"
    assert decimal_string(21.0975, 2) == "21.1"
    assert decimal_string(1.234, 2) == "1.23"
    assert decimal_string(0.5, 1) == "0.5"
    assert decimal_string(850.4, 0) == "850"


def test_decimal_string_has_no_grouping():
    assert decimal_string(1234567.891, 2) == "1234567.89"


def test_decimal_string_negative_zero():
    assert decimal_string(-0.001, 0) == "0"
    assert decimal_string(-0.001, 2) == "0"


def test_measurement_string():
    assert measurement_string(5.24, KILOMETERS, 2) == "5.24 km"


@pytest.mark.parametrize(
    "minutes,expected",
    [
        (5.0, "5:00"),
        (4.5, "4:30"),
        (7.5333333, "7:32"),
        (0.75, "0:45"),
        (12.0, "12:00"),
        # 4.9999 min rounds up to 5:00.0
        (4.9999, "5:00"),
        # 5:00.9 keeps 5:00, the tenths digit is dropped
        (5.0158, "5:00"),
        # 5:59.96 rounds to 6:00.0
        (5.99994, "6:00"),
    ],
)
def test_pace_string(minutes, expected):
    assert pace_string(minutes) == expected


def test_pace_string_non_finite():
    assert pace_string(math.inf) == ""
    assert pace_string(math.nan) == ""


def test_pace_string_negative():
    assert pace_string(-4.5) == "-4:30"


@pytest.mark.parametrize(
    "degrees,expected",
    [
        (-33.865, "-33º 51.90"),
        (151.2094, "151º 12.56"),
        (51.5, "51º 30.00"),
        (0.0, "0º 0.00"),
        (-0.5, "-0º 30.00"),
    ],
)
def test_degree_string(degrees, expected):
    """Test the sign stays on the degrees and minutes are unsigned."""
    assert degree_string(degrees) == expected


@pytest.mark.parametrize("degrees", [math.nan, math.inf, -math.inf])
def test_degree_string_non_finite(degrees):
    assert degree_string(degrees) == ""


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "0sec"),
        (45, "45sec"),
        (60, "1min"),
        (83, "1min 23sec"),
        (83.9, "1min 23sec"),
        (3599, "59min 59sec"),
        (3600, "1hr"),
        (3725, "1hr 2min"),
        (86400 * 7 - 1, "167hr 59min"),
        (86400 * 7, "7d"),
        (86400 * 7 + 3 * 3600, "7d 3hr"),
        (86400 * 30 + 1800, "30d"),
    ],
)
def test_duration_string_normal(seconds, expected):
    assert duration_string(seconds) == expected


@pytest.mark.parametrize(
    "seconds,expected",
    [
        (0, "0:00"),
        (5, "0:05"),
        (83, "1:23"),
        (3599, "59:59"),
        (3600, "1:00"),
        (3725, "1:02"),
        (86400 * 7 + 3 * 3600, "7:03"),
    ],
)
def test_duration_string_compact(seconds, expected):
    assert duration_string(seconds, DisplayStyle.COMPACT) == expected


@pytest.mark.parametrize("seconds", [math.nan, math.inf, -math.inf, -1, -0.5])
def test_duration_string_invalid(seconds):
    assert duration_string(seconds) == ""
    assert duration_string(seconds, DisplayStyle.COMPACT) == ""
