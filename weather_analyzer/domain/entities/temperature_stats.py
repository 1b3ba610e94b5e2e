"""Temperature statistics value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TemperatureStats:
    """Count, range and mean of a set of temperatures."""

    count: int
    minimum: float
    maximum: float
    mean: float
