"""
External-format bridge: str/float/int ⇄ unit values for non-JSON boundaries.
"""

from mass_units.bridge.type_converter import UnitTypeConverter, get_converter

__all__ = [
    "UnitTypeConverter",
    "get_converter",
]
