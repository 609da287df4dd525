"""
Display strings for values stored in base units.

Every function takes the stored value and an optional measurement system.
When no system is given the current one is read once at entry and used for
the whole call.
"""

import logging

from pydantic import BaseModel, Field

from .config import current_measurement_system
from .conversions import METERS_PER_KM, METERS_PER_MILE
from .enums import DisplayContext, DisplayStyle, MeasurementSystem, SpeedDisplayKind
from .formatters import (
    degree_string,
    duration_string,
    fixed_fraction,
    measurement_string,
    pace_string,
)
from .policy import distance_abbreviation, resolve_unit

logger = logging.getLogger(__name__)

# Distances below this many meters are shown in cm or inches
VERY_SHORT_DISTANCE_LIMIT = 10.0


class DisplayIntent(BaseModel):
    """How a speed should be shown: as a plain speed or as a pace."""

    kind: SpeedDisplayKind = SpeedDisplayKind.NATURAL
    fraction_digits: int = Field(default=1, ge=0, description="Decimals for NATURAL speeds")

    model_config = {"frozen": True}

    @classmethod
    def natural(cls, digits: int = 1) -> "DisplayIntent":
        return cls(kind=SpeedDisplayKind.NATURAL, fraction_digits=digits)

    @classmethod
    def running(cls) -> "DisplayIntent":
        return cls(kind=SpeedDisplayKind.RUNNING)

    @classmethod
    def rowing(cls) -> "DisplayIntent":
        return cls(kind=SpeedDisplayKind.ROWING)


def _resolve_system(system: MeasurementSystem | None) -> MeasurementSystem:
    return system if system is not None else current_measurement_system()


def _display(
    value: float,
    context: DisplayContext,
    system: MeasurementSystem,
    fraction_digits: int,
) -> str:
    unit = resolve_unit(context, system)
    return measurement_string(unit.from_base(value), unit, fraction_digits)


def _short_distance_limit(system: MeasurementSystem) -> float:
    if system == MeasurementSystem.IMPERIAL:
        return METERS_PER_MILE / 4
    return METERS_PER_KM


def _long_distance_limit(system: MeasurementSystem) -> float:
    if system == MeasurementSystem.IMPERIAL:
        return METERS_PER_MILE * 1000
    return METERS_PER_KM * 1000


def distance_display_string(meters: float, system: MeasurementSystem | None = None) -> str:
    """
    Format a distance with a unit and precision suited to its size.

    - 0: "0km" or "0mi"
    - under 10 m: cm or inches, 1 decimal
    - under 1 km (metric) or a quarter mile (imperial): m or yards, no decimals
    - over 1000 km or 1000 mi: km or miles, no decimals
    - otherwise: km or miles, 2 decimals

    Args:
        meters: Distance in meters
        system: Measurement system, defaults to the current one

    Returns:
        Formatted distance (e.g., "850 m", "5.24 mi")
    """
    system = _resolve_system(system)

    if meters == 0:
        return f"0{distance_abbreviation(system)}"
    if meters < VERY_SHORT_DISTANCE_LIMIT:
        return _display(meters, DisplayContext.VERY_SHORT_DISTANCE, system, 1)
    if meters < _short_distance_limit(system):
        return _display(meters, DisplayContext.SHORT_DISTANCE, system, 0)
    if meters > _long_distance_limit(system):
        return long_distance_display_string(meters, system)
    return _display(meters, DisplayContext.LONG_DISTANCE, system, 2)


def long_distance_display_string(meters: float, system: MeasurementSystem | None = None) -> str:
    """Format a distance in km or miles with no decimals."""
    return _display(meters, DisplayContext.LONG_DISTANCE, _resolve_system(system), 0)


def height_display_string(meters: float, system: MeasurementSystem | None = None) -> str:
    """Format a height in meters or feet with no decimals."""
    return _display(meters, DisplayContext.HEIGHT, _resolve_system(system), 0)


def speed_display_string(
    meters_per_second: float,
    intent: DisplayIntent | None = None,
    system: MeasurementSystem | None = None,
) -> str:
    """
    Format a speed as a plain speed or as a pace.

    Args:
        meters_per_second: Speed in meters per second
        intent: NATURAL (default, 1 decimal), RUNNING (per km/mi) or ROWING (per 500m)
        system: Measurement system, defaults to the current one

    Returns:
        Formatted speed (e.g., "12.5 km/h") or pace (e.g., "5:00"). A pace at
        zero speed is undefined and gives "".
    """
    intent = intent if intent is not None else DisplayIntent.natural()
    system = _resolve_system(system)

    if intent.kind == SpeedDisplayKind.NATURAL:
        return _display(meters_per_second, DisplayContext.SPEED, system, intent.fraction_digits)

    if meters_per_second == 0:
        logger.debug(f"No {intent.kind.value} pace at zero speed")
        return ""

    if intent.kind == SpeedDisplayKind.ROWING:
        context = DisplayContext.ROWING_SPEED
    else:
        context = DisplayContext.INVERSE_SPEED
    unit = resolve_unit(context, system)
    return pace_string(unit.from_base(meters_per_second))


def duration_display_string(seconds: float, style: DisplayStyle = DisplayStyle.NORMAL) -> str:
    """Format a duration with spelled units, e.g. "1hr 5min"."""
    return duration_string(seconds, style)


def abbreviated_duration_display_string(seconds: float) -> str:
    """Format a duration positionally, e.g. "1:05"."""
    return duration_string(seconds, DisplayStyle.COMPACT)


def power_display_string(
    watts: float,
    with_unit: bool = True,
    system: MeasurementSystem | None = None,
) -> str:
    """Format power in watts with no decimals, optionally without the unit."""
    system = _resolve_system(system)
    if with_unit:
        return _display(watts, DisplayContext.POWER, system, 0)
    unit = resolve_unit(DisplayContext.POWER, system)
    return fixed_fraction(unit.from_base(watts), 0)


def mass_display_string(kilograms: float, system: MeasurementSystem | None = None) -> str:
    """Format a mass in kg or lb with no decimals."""
    return _display(kilograms, DisplayContext.MASS, _resolve_system(system), 0)


def force_display_string(newtons: float, system: MeasurementSystem | None = None) -> str:
    """Format a force in N or lbf to 1 decimal."""
    return _display(newtons, DisplayContext.FORCE, _resolve_system(system), 1)


def energy_display_string(kilojoules: float, system: MeasurementSystem | None = None) -> str:
    """Format energy in kJ with no decimals."""
    return _display(kilojoules, DisplayContext.ENERGY, _resolve_system(system), 0)


def temperature_display_string(celsius: float, system: MeasurementSystem | None = None) -> str:
    """Format a temperature in °C or °F with no decimals."""
    return _display(celsius, DisplayContext.TEMPERATURE, _resolve_system(system), 0)


def pressure_display_string(hectopascals: float, system: MeasurementSystem | None = None) -> str:
    """Format pressure: whole hPa, or inHg to 2 decimals."""
    system = _resolve_system(system)
    digits = 2 if system == MeasurementSystem.IMPERIAL else 0
    return _display(hectopascals, DisplayContext.PRESSURE, system, digits)


def density_display_string(kg_per_cubic_meter: float, system: MeasurementSystem | None = None) -> str:
    """Format a density in kg/m³ or lb/ft³ to 3 decimals."""
    return _display(kg_per_cubic_meter, DisplayContext.DENSITY, _resolve_system(system), 3)


def elevation_time_display_string(
    meters_per_second: float,
    system: MeasurementSystem | None = None,
) -> str:
    """Format a climb rate given in meters per second as m/hr or ft/hr."""
    return _display(meters_per_second, DisplayContext.CLIMB_BY_TIME, _resolve_system(system), 0)


def elevation_distance_display_string(
    meters_per_meter: float,
    system: MeasurementSystem | None = None,
) -> str:
    """Format meters climbed per meter travelled as m/10km or ft/10mi."""
    return _display(meters_per_meter, DisplayContext.CLIMB_BY_DISTANCE, _resolve_system(system), 0)


def lat_long_display_string(decimal_degrees: float) -> str:
    """Format a coordinate as degrees and minutes, e.g. "-33º 51.90"."""
    return degree_string(decimal_degrees)


def percent_display_string(fraction: float, with_fraction: bool = True) -> str:
    """Format a fraction as a percentage: 0.12345 gives "12.35%" or "12%"."""
    return fixed_fraction(fraction * 100, 2 if with_fraction else 0) + "%"


def heart_rate_display_string(bpm: int, with_unit: bool = True) -> str:
    """Format a heart rate, e.g. "145 bpm"."""
    return f"{bpm}" + (" bpm" if with_unit else "")
