"""Registry of dimensions and the units each can be displayed in."""

from pydantic import BaseModel, Field

from .conversions import (
    HECTOPASCALS_PER_INCH_OF_MERCURY,
    KILOGRAMS_PER_POUND,
    METERS_PER_CENTIMETER,
    METERS_PER_FOOT,
    METERS_PER_INCH,
    METERS_PER_KM,
    METERS_PER_MILE,
    METERS_PER_YARD,
    POUNDS_FORCE_PER_NEWTON,
    POUNDS_PER_CUBIC_FOOT_PER_KG_PER_CUBIC_METER,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from .converters import Converter, LinearConverter, PaceConverter, RateConverter
from .enums import Dimension, MeasurementSystem


class Unit(BaseModel):
    """A named unit of one dimension and how it converts to the base unit."""

    name: str = Field(description="Registry name, unique within the dimension")
    symbol: str = Field(min_length=1, description="Symbol shown after a value")
    dimension: Dimension
    converter: Converter

    model_config = {"frozen": True}

    def to_base(self, value: float) -> float:
        """Convert a value in this unit to the dimension's base unit."""
        return self.converter.to_base(value)

    def from_base(self, value: float) -> float:
        """Convert a value in the dimension's base unit to this unit."""
        return self.converter.from_base(value)

    def convert(self, value: float, to: "Unit") -> float:
        """
        Convert a value in this unit to another unit of the same dimension.

        Raises:
            ValueError: If the units belong to different dimensions
        """
        if to.dimension != self.dimension:
            raise ValueError(
                f"Cannot convert {self.dimension.value} ({self.symbol}) "
                f"to {to.dimension.value} ({to.symbol})"
            )
        if to == self:
            return value
        return to.from_base(self.to_base(value))

    def __str__(self) -> str:
        return self.symbol


def _linear(name: str, symbol: str, dimension: Dimension, coefficient: float, constant: float = 0.0) -> Unit:
    converter = LinearConverter(coefficient=coefficient, constant=constant)
    return Unit(name=name, symbol=symbol, dimension=dimension, converter=converter)


# Length (base: meters)
METERS = _linear("meters", "m", Dimension.LENGTH, 1.0)
KILOMETERS = _linear("kilometers", "km", Dimension.LENGTH, METERS_PER_KM)
MILES = _linear("miles", "mi", Dimension.LENGTH, METERS_PER_MILE)
YARDS = _linear("yards", "yd", Dimension.LENGTH, METERS_PER_YARD)
FEET = _linear("feet", "ft", Dimension.LENGTH, METERS_PER_FOOT)
INCHES = _linear("inches", "in", Dimension.LENGTH, METERS_PER_INCH)
CENTIMETERS = _linear("centimeters", "cm", Dimension.LENGTH, METERS_PER_CENTIMETER)
METERS_PER_10KM = Unit(
    name="meters_per_10km",
    symbol="m/10km",
    dimension=Dimension.LENGTH,
    converter=RateConverter(distance_meters=1.0, per_base=10 * METERS_PER_KM),
)
FEET_PER_10MI = Unit(
    name="feet_per_10mi",
    symbol="ft/10mi",
    dimension=Dimension.LENGTH,
    converter=RateConverter(distance_meters=METERS_PER_FOOT, per_base=10 * METERS_PER_MILE),
)

# Duration (base: seconds)
SECONDS = _linear("seconds", "s", Dimension.DURATION, 1.0)
MINUTES = _linear("minutes", "min", Dimension.DURATION, SECONDS_PER_MINUTE)
HOURS = _linear("hours", "hr", Dimension.DURATION, SECONDS_PER_HOUR)

# Speed (base: meters per second)
METERS_PER_SECOND = _linear("meters_per_second", "m/s", Dimension.SPEED, 1.0)
KILOMETERS_PER_HOUR = _linear(
    "kilometers_per_hour", "km/h", Dimension.SPEED, METERS_PER_KM / SECONDS_PER_HOUR
)
MILES_PER_HOUR = _linear("miles_per_hour", "mph", Dimension.SPEED, METERS_PER_MILE / SECONDS_PER_HOUR)
MINUTES_PER_KM = Unit(
    name="minutes_per_km",
    symbol="/km",
    dimension=Dimension.SPEED,
    converter=PaceConverter(system=MeasurementSystem.METRIC),
)
MINUTES_PER_MILE = Unit(
    name="minutes_per_mile",
    symbol="/mi",
    dimension=Dimension.SPEED,
    converter=PaceConverter(system=MeasurementSystem.IMPERIAL),
)
MINUTES_PER_500M = Unit(
    name="minutes_per_500m",
    symbol="/500m",
    dimension=Dimension.SPEED,
    converter=PaceConverter(system=MeasurementSystem.METRIC, adjustment_factor=0.5),
)
METERS_PER_HOUR = Unit(
    name="meters_per_hour",
    symbol="m/hr",
    dimension=Dimension.SPEED,
    converter=RateConverter(distance_meters=1.0, per_base=SECONDS_PER_HOUR),
)
FEET_PER_HOUR = Unit(
    name="feet_per_hour",
    symbol="ft/hr",
    dimension=Dimension.SPEED,
    converter=RateConverter(distance_meters=METERS_PER_FOOT, per_base=SECONDS_PER_HOUR),
)

# Mass (base: kilograms)
KILOGRAMS = _linear("kilograms", "kg", Dimension.MASS, 1.0)
POUNDS = _linear("pounds", "lb", Dimension.MASS, KILOGRAMS_PER_POUND)

# Force (base: newtons)
NEWTONS = _linear("newtons", "N", Dimension.FORCE, 1.0)
POUNDS_FORCE = _linear("pounds_force", "lbf", Dimension.FORCE, 1.0 / POUNDS_FORCE_PER_NEWTON)

# Pressure (base: hectopascals)
HECTOPASCALS = _linear("hectopascals", "hPa", Dimension.PRESSURE, 1.0)
INCHES_OF_MERCURY = _linear(
    "inches_of_mercury", "inHg", Dimension.PRESSURE, HECTOPASCALS_PER_INCH_OF_MERCURY
)

# Density (base: kilograms per cubic meter)
KILOGRAMS_PER_CUBIC_METER = _linear("kilograms_per_cubic_meter", "kg/m³", Dimension.DENSITY, 1.0)
POUNDS_PER_CUBIC_FOOT = _linear(
    "pounds_per_cubic_foot",
    "lb/ft³",
    Dimension.DENSITY,
    1.0 / POUNDS_PER_CUBIC_FOOT_PER_KG_PER_CUBIC_METER,
)

# Temperature (base: Celsius). Fahrenheit needs an offset as well as a scale.
CELSIUS = _linear("celsius", "°C", Dimension.TEMPERATURE, 1.0)
FAHRENHEIT = _linear("fahrenheit", "°F", Dimension.TEMPERATURE, 5.0 / 9.0, -32.0 * 5.0 / 9.0)

# Power (base: watts), energy (base: kilojoules)
WATTS = _linear("watts", "W", Dimension.POWER, 1.0)
KILOJOULES = _linear("kilojoules", "kJ", Dimension.ENERGY, 1.0)


class DimensionSpec(BaseModel):
    """Base unit and selectable display units of one dimension."""

    base_unit: Unit
    units: tuple[Unit, ...]

    model_config = {"frozen": True}


REGISTRY: dict[Dimension, DimensionSpec] = {
    Dimension.LENGTH: DimensionSpec(
        base_unit=METERS,
        units=(
            METERS,
            KILOMETERS,
            MILES,
            YARDS,
            FEET,
            INCHES,
            CENTIMETERS,
            METERS_PER_10KM,
            FEET_PER_10MI,
        ),
    ),
    Dimension.DURATION: DimensionSpec(base_unit=SECONDS, units=(SECONDS, MINUTES, HOURS)),
    Dimension.SPEED: DimensionSpec(
        base_unit=METERS_PER_SECOND,
        units=(
            METERS_PER_SECOND,
            KILOMETERS_PER_HOUR,
            MILES_PER_HOUR,
            MINUTES_PER_KM,
            MINUTES_PER_MILE,
            MINUTES_PER_500M,
            METERS_PER_HOUR,
            FEET_PER_HOUR,
        ),
    ),
    Dimension.MASS: DimensionSpec(base_unit=KILOGRAMS, units=(KILOGRAMS, POUNDS)),
    Dimension.FORCE: DimensionSpec(base_unit=NEWTONS, units=(NEWTONS, POUNDS_FORCE)),
    Dimension.PRESSURE: DimensionSpec(base_unit=HECTOPASCALS, units=(HECTOPASCALS, INCHES_OF_MERCURY)),
    Dimension.DENSITY: DimensionSpec(
        base_unit=KILOGRAMS_PER_CUBIC_METER,
        units=(KILOGRAMS_PER_CUBIC_METER, POUNDS_PER_CUBIC_FOOT),
    ),
    Dimension.TEMPERATURE: DimensionSpec(base_unit=CELSIUS, units=(CELSIUS, FAHRENHEIT)),
    Dimension.POWER: DimensionSpec(base_unit=WATTS, units=(WATTS,)),
    Dimension.ENERGY: DimensionSpec(base_unit=KILOJOULES, units=(KILOJOULES,)),
}


def base_unit(dimension: Dimension) -> Unit:
    """Unit in which values of this dimension are stored."""
    return REGISTRY[dimension].base_unit


def units_for(dimension: Dimension) -> tuple[Unit, ...]:
    """All units a value of this dimension can be displayed in."""
    return REGISTRY[dimension].units


def all_units() -> list[Unit]:
    """Every registered unit, grouped by dimension."""
    return [unit for spec in REGISTRY.values() for unit in spec.units]


def get_unit(dimension: Dimension, name: str) -> Unit:
    """
    Look up a registered unit by its registry name.

    Args:
        dimension: Dimension the unit belongs to
        name: Registry name, e.g. "kilometers"

    Returns:
        The registered unit

    Raises:
        ValueError: If the dimension has no unit with that name
    """
    for unit in units_for(dimension):
        if unit.name == name:
            return unit
    known = ", ".join(unit.name for unit in units_for(dimension))
    raise ValueError(f"Unknown {dimension.value} unit '{name}' (expected one of: {known})")


class Measurement(BaseModel):
    """A value paired with the unit it is expressed in."""

    value: float
    unit: Unit

    model_config = {"frozen": True}

    @classmethod
    def in_base_units(cls, value: float, dimension: Dimension) -> "Measurement":
        """Wrap a stored value, which is always in the base unit."""
        return cls(value=value, unit=base_unit(dimension))

    @property
    def base_value(self) -> float:
        """Value in the base unit of its dimension."""
        return self.unit.to_base(self.value)

    def converted(self, to: Unit) -> "Measurement":
        """
        Return the same quantity expressed in another unit.

        Raises:
            ValueError: If the unit belongs to a different dimension
        """
        return Measurement(value=self.unit.convert(self.value, to), unit=to)


def speed_between(distance_meters: float, duration_seconds: float) -> float:
    """
    Average speed in meters per second over a distance and duration.

    Args:
        distance_meters: Distance covered
        duration_seconds: Time taken

    Returns:
        Speed in meters per second, 0.0 when no time has elapsed
    """
    if duration_seconds == 0:
        return 0.0
    return distance_meters / duration_seconds
