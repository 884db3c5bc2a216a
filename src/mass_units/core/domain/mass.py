"""
Mass & Volume — Единицы массы, объёма и плотности

- Kilogram: SI единица массы (kg)
- Tonne: метрическая тонна (t), 1 t = 1000 kg
- Liter: внесистемная единица объёма (L), 1 L = 10^-3 m3
- CubicMetre: SI единица объёма (m3)
- Density: масса на единицу объёма (kg/m3)

Формулы конверсий находятся в core.domain.units; здесь только типизированные
обёртки над ними.
"""

from typing import ClassVar

from mass_units.core.domain.scalar import ScalarUnit
from mass_units.core.domain.units import (
    WATER_DENSITY_KG_PER_M3,
    cubic_metre_to_liter,
    density_from_mass_and_volume,
    kilogram_to_liter,
    kilogram_to_tonne,
    liter_to_cubic_metre,
    liter_to_kilogram,
    tonne_to_kilogram,
)


def _require(value: object, expected: type, name: str) -> None:
    if type(value) is not expected:
        raise TypeError(f"{name} must be {expected.__name__}, got {type(value).__name__}")


# =============================================================================
# МАССА
# =============================================================================


class Kilogram(ScalarUnit):
    """
    Килограмм — SI единица массы.

    SI unit: kg
    Symbol: kg
    """

    symbol: ClassVar[str] = "kg"

    def to_tonne(self) -> "Tonne":
        """Конверсия: kg → t (kg / 1000)"""
        return Tonne(kilogram_to_tonne(self.value))

    def to_liter(self, density: "Density") -> "Liter":
        """
        Конверсия: kg → L через плотность.

        Args:
            density: Плотность вещества (kg/m3)

        Returns:
            Объём; Liter(0) при нулевой плотности

        Raises:
            TypeError: Если density не Density
        """
        _require(density, Density, "density")
        return Liter(kilogram_to_liter(self.value, density.value))


class Tonne(ScalarUnit):
    """
    Метрическая тонна.

    SI base unit: 10^3 kg
    Symbol: t
    """

    symbol: ClassVar[str] = "t"

    def to_kilogram(self) -> Kilogram:
        """Конверсия: t → kg (t × 1000)"""
        return Kilogram(tonne_to_kilogram(self.value))


# =============================================================================
# ОБЪЁМ
# =============================================================================


class Liter(ScalarUnit):
    """
    Литр — внесистемная единица объёма.

    SI base unit: 10^-3 m3
    Symbol: L
    """

    symbol: ClassVar[str] = "L"

    def to_cubic_metre(self) -> "CubicMetre":
        """Конверсия: L → m3 (L / 1000)"""
        return CubicMetre(liter_to_cubic_metre(self.value))

    def to_kilogram(self, density: "Density") -> Kilogram:
        """
        Конверсия: L → kg через плотность (L × density / 1000).

        Raises:
            TypeError: Если density не Density
        """
        _require(density, Density, "density")
        return Kilogram(liter_to_kilogram(self.value, density.value))


class CubicMetre(ScalarUnit):
    """
    Кубический метр — SI единица объёма.

    Symbol: m3
    """

    symbol: ClassVar[str] = "m3"

    def to_liter(self) -> Liter:
        """Конверсия: m3 → L (m3 × 1000)"""
        return Liter(cubic_metre_to_liter(self.value))


# =============================================================================
# ПЛОТНОСТЬ
# =============================================================================


class Density(ScalarUnit):
    """
    Плотность — масса вещества на единицу объёма.

    SI unit: kg/m3
    Symbol: kg/m3
    """

    symbol: ClassVar[str] = "kg/m3"

    # Плотность воды, задаётся после объявления класса
    WATER: ClassVar["Density"]

    @classmethod
    def from_mass_and_volume(cls, kilogram: Kilogram, liter: Liter) -> "Density":
        """
        Плотность из массы и объёма.

        density = liter == 0 ? 0 : kg / L × 1000

        Raises:
            TypeError: Если аргументы не Kilogram/Liter
        """
        _require(kilogram, Kilogram, "kilogram")
        _require(liter, Liter, "liter")
        return cls(density_from_mass_and_volume(kilogram.value, liter.value))


Density.WATER = Density(WATER_DENSITY_KG_PER_M3)
