"""Unit conversion and display formatting for fitness data."""

from .config import Settings, current_measurement_system, get_settings, reset_settings
from .converters import Converter, LinearConverter, PaceConverter, RateConverter
from .display import (
    DisplayIntent,
    abbreviated_duration_display_string,
    density_display_string,
    distance_display_string,
    duration_display_string,
    elevation_distance_display_string,
    elevation_time_display_string,
    energy_display_string,
    force_display_string,
    heart_rate_display_string,
    height_display_string,
    lat_long_display_string,
    long_distance_display_string,
    mass_display_string,
    percent_display_string,
    power_display_string,
    pressure_display_string,
    speed_display_string,
    temperature_display_string,
)
from .enums import (
    Dimension,
    DisplayContext,
    DisplayStyle,
    MeasurementSystem,
    SpeedDisplayKind,
)
from .policy import (
    distance_abbreviation,
    resolve_unit,
    speed_abbreviation,
    unit_abbreviation,
)
from .units import (
    REGISTRY,
    DimensionSpec,
    Measurement,
    Unit,
    base_unit,
    get_unit,
    speed_between,
    units_for,
)

__version__ = "0.1.0"

__all__ = [
    # Settings
    "Settings",
    "get_settings",
    "reset_settings",
    "current_measurement_system",
    # Enums
    "Dimension",
    "DisplayContext",
    "DisplayStyle",
    "MeasurementSystem",
    "SpeedDisplayKind",
    # Converters
    "Converter",
    "LinearConverter",
    "PaceConverter",
    "RateConverter",
    # Registry
    "REGISTRY",
    "DimensionSpec",
    "Measurement",
    "Unit",
    "base_unit",
    "get_unit",
    "units_for",
    "speed_between",
    # Policy
    "resolve_unit",
    "unit_abbreviation",
    "distance_abbreviation",
    "speed_abbreviation",
    # Display
    "DisplayIntent",
    "distance_display_string",
    "long_distance_display_string",
    "height_display_string",
    "speed_display_string",
    "duration_display_string",
    "abbreviated_duration_display_string",
    "power_display_string",
    "mass_display_string",
    "force_display_string",
    "energy_display_string",
    "temperature_display_string",
    "pressure_display_string",
    "density_display_string",
    "elevation_time_display_string",
    "elevation_distance_display_string",
    "lat_long_display_string",
    "percent_display_string",
    "heart_rate_display_string",
]
