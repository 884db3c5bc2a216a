"""
Percentage — число или отношение, выраженное как доля от 100

Магнитуда хранится в процентах (ratio × 100): Percentage(10) — это 10 %.

of / total / remainder принимают как сырые числа (возвращают float), так и
значения единиц (возвращают значение того же класса через round-trip
магнитуды).
"""

from typing import ClassVar, TypeVar, overload

from mass_units.core.domain.scalar import ScalarUnit
from mass_units.core.domain.units import (
    percentage_fraction,
    percentage_from_ratio,
    percentage_of,
    percentage_remainder,
    percentage_total,
)
from mass_units.core.math.numerical_safeguards import as_magnitude

U = TypeVar("U", bound=ScalarUnit)


class Percentage(ScalarUnit):
    """
    Процент.

    Symbol: %
    """

    symbol: ClassVar[str] = "%"

    @classmethod
    def from_ratio(cls, amount: float, total: float) -> "Percentage":
        """
        Процент amount от total.

        percent = total == 0 ? 0 : amount / total × 100

        Examples:
            >>> Percentage.from_ratio(10, 100)
            Percentage(10.0)
            >>> Percentage.from_ratio(10, 0)
            Percentage(0.0)
        """
        return cls(
            percentage_from_ratio(as_magnitude(amount, "amount"), as_magnitude(total, "total"))
        )

    @property
    def fraction(self) -> float:
        """Доля: percent / 100 (Percentage(50).fraction == 0.5)"""
        return percentage_fraction(self.value)

    @overload
    def of(self, value: U) -> U: ...

    @overload
    def of(self, value: float) -> float: ...

    def of(self, value):
        """Часть от value: value × fraction"""
        return self._apply(percentage_of, value)

    @overload
    def total(self, value: U) -> U: ...

    @overload
    def total(self, value: float) -> float: ...

    def total(self, value):
        """
        Полное количество, для которого value составляет данный процент.

        value / fraction, без защиты от нуля: Percentage(0).total(x) даёт
        ±inf (nan при x == 0).
        """
        return self._apply(percentage_total, value)

    @overload
    def remainder(self, value: U) -> U: ...

    @overload
    def remainder(self, value: float) -> float: ...

    def remainder(self, value):
        """Остаток: total(value) − value"""
        return self._apply(percentage_remainder, value)

    def _apply(self, formula, value):
        if isinstance(value, ScalarUnit):
            return type(value)(formula(self.value, value.value))
        return formula(self.value, as_magnitude(value))
