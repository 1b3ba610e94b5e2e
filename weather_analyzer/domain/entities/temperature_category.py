"""Temperature category enumeration."""

from enum import Enum


class TemperatureCategory(str, Enum):
    """Fixed temperature buckets, 20°F wide."""

    FREEZING = "Freezing"
    VERY_COLD = "Very Cold"
    COLD = "Cold"
    MILD = "Mild"
    WARM = "Warm"
    HOT = "Hot"

    @classmethod
    def from_bucket(cls, bucket: int) -> "TemperatureCategory":
        """Map floor(temperature / 20) to a category."""
        if bucket < 0:
            return cls.FREEZING
        mapping = {
            0: cls.VERY_COLD,
            1: cls.COLD,
            2: cls.MILD,
            3: cls.MILD,
            4: cls.WARM,
        }
        return mapping.get(bucket, cls.HOT)

    def __str__(self) -> str:
        return self.value
