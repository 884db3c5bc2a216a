"""
Domain models and value objects.

Contains the unit value types (Kilogram, Tonne, Liter, CubicMetre, Density,
Percentage) and the central conversion formula module.
"""

from mass_units.core.domain.mass import CubicMetre, Density, Kilogram, Liter, Tonne
from mass_units.core.domain.percentage import Percentage
from mass_units.core.domain.scalar import ScalarUnit
from mass_units.core.domain.units import (
    KILOGRAMS_PER_TONNE,
    LITERS_PER_CUBIC_METRE,
    PERCENT_SCALE,
    WATER_DENSITY_KG_PER_M3,
    cubic_metre_to_liter,
    density_from_mass_and_volume,
    kilogram_to_liter,
    kilogram_to_tonne,
    liter_to_cubic_metre,
    liter_to_kilogram,
    percentage_fraction,
    percentage_from_ratio,
    percentage_of,
    percentage_remainder,
    percentage_total,
    tonne_to_kilogram,
)

# Все конкретные классы единиц
UNIT_TYPES: tuple[type[ScalarUnit], ...] = (
    Kilogram,
    Tonne,
    Liter,
    CubicMetre,
    Density,
    Percentage,
)

__all__ = [
    # Units module — Constants
    "KILOGRAMS_PER_TONNE",
    "LITERS_PER_CUBIC_METRE",
    "PERCENT_SCALE",
    "WATER_DENSITY_KG_PER_M3",
    # Units module — Formulas
    "cubic_metre_to_liter",
    "density_from_mass_and_volume",
    "kilogram_to_liter",
    "kilogram_to_tonne",
    "liter_to_cubic_metre",
    "liter_to_kilogram",
    "percentage_fraction",
    "percentage_from_ratio",
    "percentage_of",
    "percentage_remainder",
    "percentage_total",
    "tonne_to_kilogram",
    # Unit types
    "ScalarUnit",
    "Kilogram",
    "Tonne",
    "Liter",
    "CubicMetre",
    "Density",
    "Percentage",
    "UNIT_TYPES",
]
