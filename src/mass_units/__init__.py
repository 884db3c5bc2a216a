"""
mass_units — строго типизированные физические единицы

Kilogram, Tonne, Liter, CubicMetre, Density, Percentage: immutable обёртки над
float-магнитудой с конверсиями, операторами, разбором и сериализацией.
"""

from mass_units.core.contracts import JsonCodecConfig, from_json, to_json
from mass_units.core.domain import (
    UNIT_TYPES,
    CubicMetre,
    Density,
    Kilogram,
    Liter,
    Percentage,
    ScalarUnit,
    Tonne,
)
from mass_units.core.errors import FormatError, ParseError, UnitsError, UnsupportedConversionError

__version__ = "0.1.0"

__all__ = [
    # Unit types
    "ScalarUnit",
    "Kilogram",
    "Tonne",
    "Liter",
    "CubicMetre",
    "Density",
    "Percentage",
    "UNIT_TYPES",
    # JSON
    "JsonCodecConfig",
    "to_json",
    "from_json",
    # Errors
    "UnitsError",
    "ParseError",
    "FormatError",
    "UnsupportedConversionError",
]
