"""
broadside Core Enumerations

Shared enumeration base and the measurement-unit tag carried by every
record.
"""

from enum import Enum

from broadside.core.unit_converter import UnitConverter


class LegacyTextEnum(str, Enum):
    """
    String enum whose values are the labels used by the legacy design program.

    Values double as the persisted representation.
    """

    @classmethod
    def parse(cls, text: str) -> "LegacyTextEnum":
        """Look up a member by value or name, ignoring case and padding."""
        key = text.strip().lower()
        for member in cls:
            if member.value.lower() == key or member.name.lower() == key:
                return member
        raise ValueError(f"{text.strip()!r} is not a valid {cls.__name__}")


class Units(LegacyTextEnum):
    """
    Measurement system a record is displayed in.
    """
    IMPERIAL = "Imperial"
    METRIC = "Metric"

    def length(self, feet: float) -> float:
        return feet if self is Units.IMPERIAL else UnitConverter.to_metric(feet, "ft")

    def thickness(self, inches: float) -> float:
        return inches if self is Units.IMPERIAL else UnitConverter.to_metric(inches, "in")

    def weight(self, tons: float) -> float:
        return tons if self is Units.IMPERIAL else UnitConverter.to_metric(tons, "t")

    def area(self, square_feet: float) -> float:
        return square_feet if self is Units.IMPERIAL else UnitConverter.to_metric(square_feet, "ft2")

    def power(self, hp: float) -> float:
        return hp if self is Units.IMPERIAL else UnitConverter.to_metric(hp, "hp")

    def length_unit(self) -> str:
        return "ft" if self is Units.IMPERIAL else UnitConverter.metric_unit("ft")

    def thickness_unit(self) -> str:
        return "in" if self is Units.IMPERIAL else UnitConverter.metric_unit("in")

    def weight_unit(self) -> str:
        return "t" if self is Units.IMPERIAL else UnitConverter.metric_unit("t")
