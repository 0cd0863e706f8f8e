"""
broadside Unit Converter

The models compute in imperial units: feet, inches, long tons, square feet
and horsepower. Metric figures are shown alongside them in reports and are
never fed back into a formula.
"""

from typing import Optional, Tuple

from broadside.errors.taxonomy import BroadsideError, ErrorCategory


class UnitConversionError(BroadsideError):
    """Raised for a figure in a unit the models do not compute in."""

    code = "BRD_400"
    category = ErrorCategory.UNITS


# Imperial unit -> (metric display unit, multiplier)
IMPERIAL_TO_METRIC = {
    "ft": ("m", 0.3048),
    "in": ("mm", 25.4),
    "t": ("mt", 1.01605),  # long ton to metric ton
    "ft2": ("m2", 0.092903),
    "hp": ("kW", 0.7457),
}


class UnitConverter:
    """Imperial model figures to their metric display values."""

    @staticmethod
    def _lookup(unit: str) -> Tuple[str, float]:
        try:
            return IMPERIAL_TO_METRIC[unit.strip()]
        except KeyError:
            raise UnitConversionError(
                f"No metric display for {unit!r}",
                recovery_hint=f"Figures are computed in {', '.join(IMPERIAL_TO_METRIC)}",
            ) from None

    @classmethod
    def to_metric(cls, value: float, unit: str) -> float:
        """Convert an imperial figure for metric display."""
        return value * cls._lookup(unit)[1]

    @classmethod
    def metric_unit(cls, unit: str) -> str:
        return cls._lookup(unit)[0]


def clamp_to_bounds(
    value: float,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> Tuple[float, bool]:
    """Clamp a value to optional bounds; also report whether it moved."""
    if min_value is not None and value < min_value:
        return min_value, True
    if max_value is not None and value > max_value:
        return max_value, True
    return value, False
