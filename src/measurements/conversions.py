"""Conversion constants between base units.

Ratios are taken from a shared pint registry so related constants
(feet/meter, meters/mile, miles/km) cannot drift apart.
"""

import pint

# Shared unit registry for every derived constant
ureg = pint.UnitRegistry()

# Shorthand for creating quantities
Q_ = ureg.Quantity


def _ratio(from_unit: str, to_unit: str) -> float:
    """Magnitude of one `from_unit` expressed in `to_unit`."""
    return float(Q_(1.0, from_unit).to(to_unit).magnitude)


# Length
FEET_PER_METER = _ratio("meter", "foot")
METERS_PER_FOOT = _ratio("foot", "meter")
METERS_PER_INCH = _ratio("inch", "meter")
METERS_PER_CENTIMETER = _ratio("centimeter", "meter")
METERS_PER_YARD = _ratio("yard", "meter")
METERS_PER_MILE = _ratio("mile", "meter")
METERS_PER_KM = _ratio("kilometer", "meter")

# Time
SECONDS_PER_MINUTE = _ratio("minute", "second")
SECONDS_PER_HOUR = _ratio("hour", "second")
SECONDS_PER_DAY = _ratio("day", "second")
SECONDS_PER_WEEK = _ratio("week", "second")

MILES_PER_KM = METERS_PER_KM / METERS_PER_MILE

# Race distances
METERS_PER_MARATHON = 42195.0
METERS_PER_HALF_MARATHON = METERS_PER_MARATHON / 2

# Mass, pressure
KILOGRAMS_PER_POUND = _ratio("pound", "kilogram")
HECTOPASCALS_PER_INCH_OF_MERCURY = _ratio("inch_Hg", "hectopascal")

# Fixed coefficients used by the application for force and density
POUNDS_FORCE_PER_NEWTON = 0.224808923
POUNDS_PER_CUBIC_FOOT_PER_KG_PER_CUBIC_METER = 0.062427962033561
