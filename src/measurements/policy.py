"""Choose the display unit for a value from the active measurement system."""

from .enums import Dimension, DisplayContext, MeasurementSystem
from .units import (
    CELSIUS,
    CENTIMETERS,
    FAHRENHEIT,
    FEET,
    FEET_PER_10MI,
    FEET_PER_HOUR,
    HECTOPASCALS,
    HOURS,
    INCHES,
    INCHES_OF_MERCURY,
    KILOGRAMS,
    KILOGRAMS_PER_CUBIC_METER,
    KILOJOULES,
    KILOMETERS,
    KILOMETERS_PER_HOUR,
    METERS,
    METERS_PER_10KM,
    METERS_PER_HOUR,
    MILES,
    MILES_PER_HOUR,
    MINUTES_PER_500M,
    MINUTES_PER_KM,
    MINUTES_PER_MILE,
    NEWTONS,
    POUNDS,
    POUNDS_FORCE,
    POUNDS_PER_CUBIC_FOOT,
    WATTS,
    YARDS,
    Unit,
)

# (metric, imperial) display unit per context
_DISPLAY_UNITS: dict[DisplayContext, tuple[Unit, Unit]] = {
    DisplayContext.LONG_DISTANCE: (KILOMETERS, MILES),
    DisplayContext.SHORT_DISTANCE: (METERS, YARDS),
    DisplayContext.VERY_SHORT_DISTANCE: (CENTIMETERS, INCHES),
    DisplayContext.HEIGHT: (METERS, FEET),
    DisplayContext.MASS: (KILOGRAMS, POUNDS),
    DisplayContext.FORCE: (NEWTONS, POUNDS_FORCE),
    DisplayContext.PRESSURE: (HECTOPASCALS, INCHES_OF_MERCURY),
    DisplayContext.DENSITY: (KILOGRAMS_PER_CUBIC_METER, POUNDS_PER_CUBIC_FOOT),
    DisplayContext.TEMPERATURE: (CELSIUS, FAHRENHEIT),
    DisplayContext.SPEED: (KILOMETERS_PER_HOUR, MILES_PER_HOUR),
    DisplayContext.INVERSE_SPEED: (MINUTES_PER_KM, MINUTES_PER_MILE),
    DisplayContext.ROWING_SPEED: (MINUTES_PER_500M, MINUTES_PER_500M),
    DisplayContext.CLIMB_BY_TIME: (METERS_PER_HOUR, FEET_PER_HOUR),
    DisplayContext.CLIMB_BY_DISTANCE: (METERS_PER_10KM, FEET_PER_10MI),
    DisplayContext.DURATION: (HOURS, HOURS),
    DisplayContext.POWER: (WATTS, WATTS),
    DisplayContext.ENERGY: (KILOJOULES, KILOJOULES),
}

# Context used when only a dimension is given
DEFAULT_CONTEXTS: dict[Dimension, DisplayContext] = {
    Dimension.LENGTH: DisplayContext.LONG_DISTANCE,
    Dimension.DURATION: DisplayContext.DURATION,
    Dimension.SPEED: DisplayContext.SPEED,
    Dimension.MASS: DisplayContext.MASS,
    Dimension.FORCE: DisplayContext.FORCE,
    Dimension.PRESSURE: DisplayContext.PRESSURE,
    Dimension.DENSITY: DisplayContext.DENSITY,
    Dimension.TEMPERATURE: DisplayContext.TEMPERATURE,
    Dimension.POWER: DisplayContext.POWER,
    Dimension.ENERGY: DisplayContext.ENERGY,
}


def resolve_unit(context: DisplayContext | Dimension, system: MeasurementSystem) -> Unit:
    """
    Get the unit a value should be displayed in.

    Args:
        context: What the value is displayed as, or a dimension for its default context
        system: Measurement system to display in

    Returns:
        Display unit for the context under the given system
    """
    if isinstance(context, Dimension):
        context = DEFAULT_CONTEXTS[context]
    metric, imperial = _DISPLAY_UNITS[context]
    return imperial if system == MeasurementSystem.IMPERIAL else metric


def is_system_invariant(context: DisplayContext) -> bool:
    """True when the context displays the same unit in every system."""
    metric, imperial = _DISPLAY_UNITS[context]
    return metric == imperial


def unit_abbreviation(context: DisplayContext | Dimension, system: MeasurementSystem) -> str:
    """Unit symbol for labels shown without a value, e.g. "km" or "mph"."""
    return resolve_unit(context, system).symbol


def distance_abbreviation(system: MeasurementSystem) -> str:
    """Long distance symbol: "km" or "mi"."""
    return unit_abbreviation(DisplayContext.LONG_DISTANCE, system)


def speed_abbreviation(system: MeasurementSystem) -> str:
    """Plain speed symbol: "km/h" or "mph"."""
    return unit_abbreviation(DisplayContext.SPEED, system)
