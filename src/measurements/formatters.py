"""String layouts for numbers, paces, coordinates and durations."""

import math

from .conversions import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE, SECONDS_PER_WEEK
from .enums import DisplayStyle
from .units import Unit

_MINUTE = int(SECONDS_PER_MINUTE)
_HOUR = int(SECONDS_PER_HOUR)
_DAY = int(SECONDS_PER_DAY)
_WEEK = int(SECONDS_PER_WEEK)

# Tenths of a second in one minute
_TENTHS_PER_MINUTE = 600


def _check_digits(digits: int) -> None:
    if digits < 0:
        raise ValueError(f"fraction digits must be >= 0, got {digits}")


def fixed_fraction(value: float, digits: int = 0) -> str:
    """Format with exactly `digits` decimals, e.g. fixed_fraction(12.3456, 2) == "12.35"."""
    _check_digits(digits)
    return f"{value:.{digits}f}"


def decimal_string(value: float, max_fraction_digits: int = 0) -> str:
    """
    Format a number with at most `max_fraction_digits` decimals.

    Trailing zeros are dropped, there is no thousands grouping and the
    decimal point is always ".".

    Args:
        value: Number to format
        max_fraction_digits: Maximum digits after the decimal point

    Returns:
        Formatted number (e.g., "5", "1.23", "0.5")
    """
    text = fixed_fraction(value, max_fraction_digits)
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def measurement_string(value: float, unit: Unit, fraction_digits: int = 0) -> str:
    """Format a value already converted to `unit`, e.g. "5.24 mi"."""
    return f"{decimal_string(value, fraction_digits)} {unit.symbol}"


def pace_string(minutes: float) -> str:
    """
    Format fractional minutes as M:SS.

    The value is rounded to tenths of a second first and the tenths digit is
    then dropped, so 4.9999 min shows as "5:00" and 5.0158 min (5:00.9) shows
    as "5:00".

    Args:
        minutes: Pace in minutes per reference distance

    Returns:
        Formatted pace (e.g., "5:00", "7:32"), or "" for a non-finite pace
    """
    if not math.isfinite(minutes):
        return ""
    tenths = round(minutes * _TENTHS_PER_MINUTE)
    sign = "-" if tenths < 0 else ""
    mins, remainder = divmod(abs(tenths), _TENTHS_PER_MINUTE)
    return f"{sign}{mins}:{remainder // 10:02d}"


def degree_string(decimal_degrees: float) -> str:
    """
    Format a latitude or longitude as whole degrees and decimal minutes.

    The sign stays on the degree part, minutes are always shown unsigned:
    -33.865 becomes "-33º 51.90". Non-finite input gives "".
    """
    if not math.isfinite(decimal_degrees):
        return ""
    fraction, degree = math.modf(decimal_degrees)
    minutes = fraction * 60.0
    return f"{fixed_fraction(degree, 0)}º {fixed_fraction(abs(minutes), 2)}"


def duration_string(seconds: float, style: DisplayStyle = DisplayStyle.NORMAL) -> str:
    """
    Format a duration, choosing the two units that matter at its size.

    Under an hour shows minutes and seconds, under a week hours and minutes,
    anything longer days and hours. Smaller remainders are truncated.

    NORMAL style spells out units and drops zero parts ("1hr 5min", "45sec").
    COMPACT style is positional ("1:05", "0:45").

    Args:
        seconds: Duration in seconds
        style: Verbosity of the output

    Returns:
        Formatted duration, or "" for NaN, infinite or negative input
    """
    if math.isnan(seconds) or not math.isfinite(seconds) or seconds < 0:
        return ""

    total = int(seconds)
    if seconds < _HOUR:
        parts = [(total // _MINUTE, "min"), (total % _MINUTE, "sec")]
    elif seconds < _WEEK:
        parts = [(total // _HOUR, "hr"), (total % _HOUR // _MINUTE, "min")]
    else:
        parts = [(total // _DAY, "d"), (total % _DAY // _HOUR, "hr")]

    (major, _), (minor, minor_label) = parts
    if style == DisplayStyle.COMPACT:
        return f"{major}:{minor:02d}"

    spelled = [f"{amount}{label}" for amount, label in parts if amount]
    if not spelled:
        return f"0{minor_label}"
    return " ".join(spelled)
