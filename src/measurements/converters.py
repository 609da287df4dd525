"""Converters between a unit and the base unit of its dimension.

Three kinds exist and they form a closed, discriminated union:

- ``LinearConverter``: scale factor with an optional offset (Fahrenheit).
- ``PaceConverter``: time per distance, the inverse of a speed.
- ``RateConverter``: climb rates, a distance per some base amount.
"""

import math
from typing import Annotated, Literal

from pydantic import BaseModel, Field, field_validator

from .conversions import METERS_PER_KM, METERS_PER_MILE, SECONDS_PER_MINUTE
from .enums import MeasurementSystem


class LinearConverter(BaseModel):
    """
    Converts with ``base = value * coefficient + constant``.

    A zero constant gives a pure scale factor.
    """

    kind: Literal["linear"] = "linear"
    coefficient: float = Field(description="Base units per unit")
    constant: float = Field(default=0.0, description="Offset added after scaling")

    model_config = {"frozen": True}

    @field_validator("coefficient")
    @classmethod
    def validate_coefficient(cls, v: float) -> float:
        """A zero coefficient cannot be inverted."""
        if v == 0 or not math.isfinite(v):
            raise ValueError(f"coefficient must be finite and non-zero, got {v}")
        return v

    def to_base(self, value: float) -> float:
        return value * self.coefficient + self.constant

    def from_base(self, value: float) -> float:
        return (value - self.constant) / self.coefficient


class PaceConverter(BaseModel):
    """
    Converts minutes per reference distance to and from meters per second.

    The reference distance is 1 km or 1 mile depending on ``system``, which is
    fixed when the unit is defined and never follows the active setting. The
    adjustment factor scales the reference, so 0.5 on metric means per 500m.

    ``pace = (reference * adjustment / 60) / speed`` and the same formula gives
    the speed back from a pace. Zero maps to infinity and infinity to zero;
    callers that display a pace must handle zero speed themselves.
    """

    kind: Literal["pace"] = "pace"
    system: MeasurementSystem
    adjustment_factor: float = Field(default=1.0, gt=0)

    model_config = {"frozen": True}

    @property
    def reference_distance(self) -> float:
        """Reference distance in meters."""
        if self.system == MeasurementSystem.IMPERIAL:
            return METERS_PER_MILE
        return METERS_PER_KM

    def _invert(self, value: float) -> float:
        if value == 0:
            return math.inf
        return (self.reference_distance * self.adjustment_factor / SECONDS_PER_MINUTE) / value

    def to_base(self, value: float) -> float:
        return self._invert(value)

    def from_base(self, value: float) -> float:
        return self._invert(value)


class RateConverter(BaseModel):
    """
    Converts a climb rate: meters (or feet) gained per base amount.

    ``distance_meters`` is the climb of one unit in meters and ``per_base`` is
    how much of the base unit it is measured against, e.g. 1 m per 3600 s for
    meters per hour, or 1 m per 10,000 m for meters per 10 km.
    """

    kind: Literal["rate"] = "rate"
    distance_meters: float = Field(gt=0)
    per_base: float = Field(gt=0)

    model_config = {"frozen": True}

    @property
    def coefficient(self) -> float:
        return self.distance_meters / self.per_base

    def to_base(self, value: float) -> float:
        return value * self.coefficient

    def from_base(self, value: float) -> float:
        return value / self.coefficient


Converter = Annotated[
    LinearConverter | PaceConverter | RateConverter,
    Field(discriminator="kind"),
]
