"""
broadside Core Module

Contains the foundation layer:
- constants shared by every model
- IEEE-style numeric helpers
- enumerations and the unit converter
"""

from broadside.core.enums import LegacyTextEnum, Units
from broadside.core.unit_converter import UnitConverter, UnitConversionError

__all__ = [
    "LegacyTextEnum",
    "Units",
    "UnitConverter",
    "UnitConversionError",
]
