"""
Value Converters — отображение значений единиц на колонку хранилища (double)

Чистая делегация к магнитуде: to_storage(unit) = unit.value,
from_storage(x) = unit_cls(x). Nullable-варианты сохраняют None без изменений.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from mass_units.core.domain import CubicMetre, Density, Kilogram, Liter, Percentage, ScalarUnit, Tonne

U = TypeVar("U", bound=ScalarUnit)


@dataclass(frozen=True)
class ValueConverter(Generic[U]):
    """Двусторонняя конверсия unit ⇄ double."""

    unit_cls: type[U]

    def to_storage(self, value: U) -> float:
        if type(value) is not self.unit_cls:
            raise TypeError(f"Expected {self.unit_cls.__name__}, got {type(value).__name__}")
        return value.value

    def from_storage(self, value: float) -> U:
        return self.unit_cls(value)


@dataclass(frozen=True)
class NullableValueConverter(Generic[U]):
    """Двусторонняя конверсия unit | None ⇄ double | None."""

    unit_cls: type[U]

    def to_storage(self, value: U | None) -> float | None:
        if value is None:
            return None
        return ValueConverter(self.unit_cls).to_storage(value)

    def from_storage(self, value: float | None) -> U | None:
        if value is None:
            return None
        return self.unit_cls(value)


# =============================================================================
# ЭКЗЕМПЛЯРЫ
# =============================================================================

KILOGRAM_CONVERTER = ValueConverter(Kilogram)
KILOGRAM_NULLABLE_CONVERTER = NullableValueConverter(Kilogram)

TONNE_CONVERTER = ValueConverter(Tonne)
TONNE_NULLABLE_CONVERTER = NullableValueConverter(Tonne)

LITER_CONVERTER = ValueConverter(Liter)
LITER_NULLABLE_CONVERTER = NullableValueConverter(Liter)

CUBIC_METRE_CONVERTER = ValueConverter(CubicMetre)
CUBIC_METRE_NULLABLE_CONVERTER = NullableValueConverter(CubicMetre)

DENSITY_CONVERTER = ValueConverter(Density)
DENSITY_NULLABLE_CONVERTER = NullableValueConverter(Density)

PERCENTAGE_CONVERTER = ValueConverter(Percentage)
PERCENTAGE_NULLABLE_CONVERTER = NullableValueConverter(Percentage)
