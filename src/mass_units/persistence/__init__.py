"""
Persistence adapters: unit value ⇄ raw double for storage.
"""

from mass_units.persistence.sqlalchemy_types import UnitColumnType
from mass_units.persistence.value_converters import (
    CUBIC_METRE_CONVERTER,
    CUBIC_METRE_NULLABLE_CONVERTER,
    DENSITY_CONVERTER,
    DENSITY_NULLABLE_CONVERTER,
    KILOGRAM_CONVERTER,
    KILOGRAM_NULLABLE_CONVERTER,
    LITER_CONVERTER,
    LITER_NULLABLE_CONVERTER,
    PERCENTAGE_CONVERTER,
    PERCENTAGE_NULLABLE_CONVERTER,
    TONNE_CONVERTER,
    TONNE_NULLABLE_CONVERTER,
    NullableValueConverter,
    ValueConverter,
)

__all__ = [
    # Classes
    "ValueConverter",
    "NullableValueConverter",
    "UnitColumnType",
    # Instances
    "KILOGRAM_CONVERTER",
    "KILOGRAM_NULLABLE_CONVERTER",
    "TONNE_CONVERTER",
    "TONNE_NULLABLE_CONVERTER",
    "LITER_CONVERTER",
    "LITER_NULLABLE_CONVERTER",
    "CUBIC_METRE_CONVERTER",
    "CUBIC_METRE_NULLABLE_CONVERTER",
    "DENSITY_CONVERTER",
    "DENSITY_NULLABLE_CONVERTER",
    "PERCENTAGE_CONVERTER",
    "PERCENTAGE_NULLABLE_CONVERTER",
]
