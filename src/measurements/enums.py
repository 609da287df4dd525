"""Enumeration types for measurements and display."""

from enum import Enum


class MeasurementSystem(str, Enum):
    """Measurement system selected by the user."""

    METRIC = "metric"  # kilometers, kilograms, Celsius
    IMPERIAL = "imperial"  # miles, pounds, Fahrenheit

    @property
    def display_name(self) -> str:
        """Human readable name of the system."""
        return self.value.capitalize()


class Dimension(str, Enum):
    """Kind of physical quantity. Each has exactly one base unit."""

    LENGTH = "length"  # meters
    DURATION = "duration"  # seconds
    SPEED = "speed"  # meters per second
    MASS = "mass"  # kilograms
    FORCE = "force"  # newtons
    PRESSURE = "pressure"  # hectopascals
    DENSITY = "density"  # kilograms per cubic meter
    TEMPERATURE = "temperature"  # Celsius
    POWER = "power"  # watts
    ENERGY = "energy"  # kilojoules


class DisplayContext(str, Enum):
    """What a value is being displayed as, which decides its display unit."""

    LONG_DISTANCE = "long_distance"
    SHORT_DISTANCE = "short_distance"
    VERY_SHORT_DISTANCE = "very_short_distance"
    HEIGHT = "height"
    MASS = "mass"
    FORCE = "force"
    PRESSURE = "pressure"
    DENSITY = "density"
    TEMPERATURE = "temperature"
    SPEED = "speed"
    INVERSE_SPEED = "inverse_speed"
    ROWING_SPEED = "rowing_speed"
    CLIMB_BY_TIME = "climb_by_time"
    CLIMB_BY_DISTANCE = "climb_by_distance"
    DURATION = "duration"
    POWER = "power"
    ENERGY = "energy"

    @property
    def dimension(self) -> Dimension:
        """Dimension of the units this context resolves to."""
        return _CONTEXT_DIMENSIONS[self]


_CONTEXT_DIMENSIONS: dict[DisplayContext, Dimension] = {
    DisplayContext.LONG_DISTANCE: Dimension.LENGTH,
    DisplayContext.SHORT_DISTANCE: Dimension.LENGTH,
    DisplayContext.VERY_SHORT_DISTANCE: Dimension.LENGTH,
    DisplayContext.HEIGHT: Dimension.LENGTH,
    DisplayContext.MASS: Dimension.MASS,
    DisplayContext.FORCE: Dimension.FORCE,
    DisplayContext.PRESSURE: Dimension.PRESSURE,
    DisplayContext.DENSITY: Dimension.DENSITY,
    DisplayContext.TEMPERATURE: Dimension.TEMPERATURE,
    DisplayContext.SPEED: Dimension.SPEED,
    DisplayContext.INVERSE_SPEED: Dimension.SPEED,
    DisplayContext.ROWING_SPEED: Dimension.SPEED,
    DisplayContext.CLIMB_BY_TIME: Dimension.SPEED,
    # Meters climbed per meter travelled is stored as a plain length
    DisplayContext.CLIMB_BY_DISTANCE: Dimension.LENGTH,
    DisplayContext.DURATION: Dimension.DURATION,
    DisplayContext.POWER: Dimension.POWER,
    DisplayContext.ENERGY: Dimension.ENERGY,
}


class SpeedDisplayKind(str, Enum):
    """How a speed value should be rendered."""

    NATURAL = "natural"  # km/h or mph
    RUNNING = "running"  # pace per km or mile
    ROWING = "rowing"  # pace per 500m


class DisplayStyle(str, Enum):
    """Verbosity of a display string."""

    NORMAL = "normal"
    COMPACT = "compact"
