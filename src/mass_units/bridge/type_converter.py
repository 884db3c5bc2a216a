"""
Type Converter — мост между значениями единиц и внешними форматами

Используется на не-JSON границах (конфигурация, текстовые поля UI).
Диспетчеризация — закрытая таблица по ТОЧНОМУ Python типу:

    источник → единица:   str (invariant parse), float, int (вне диапазона double → ±inf)
    единица → приёмник:   str (invariant текст магнитуды), float, int (усечение к нулю)

bool и любые другие типы → UnsupportedConversionError.
Текст, который выдаёт convert_to(..., str), принимается convert_from обратно.
"""

import logging
from typing import Any, Callable, Final, Generic, TypeVar

from mass_units.core.domain import UNIT_TYPES, ScalarUnit
from mass_units.core.errors import UnsupportedConversionError
from mass_units.core.math.invariant_float import format_float, parse_float
from mass_units.core.math.numerical_safeguards import as_magnitude, truncate_to_int

logger = logging.getLogger(__name__)

U = TypeVar("U", bound=ScalarUnit)


# =============================================================================
# ТАБЛИЦЫ КОНВЕРСИЙ
# =============================================================================

# Источник → магнитуда
_FROM_SOURCE: Final[dict[type, Callable[[Any], float]]] = {
    str: parse_float,
    float: as_magnitude,
    int: as_magnitude,
}

# Магнитуда → приёмник
_TO_DESTINATION: Final[dict[type, Callable[[float], Any]]] = {
    str: format_float,
    float: float,
    int: truncate_to_int,
}


# =============================================================================
# CONVERTER
# =============================================================================


class UnitTypeConverter(Generic[U]):
    """
    Конвертер для одного класса единиц.

    Аналог type-descriptor конвертера, но без рефлексии: набор поддерживаемых
    пар фиксирован таблицами _FROM_SOURCE / _TO_DESTINATION.
    """

    def __init__(self, unit_cls: type[U]):
        self.unit_cls = unit_cls

    def can_convert_from(self, source_type: type) -> bool:
        """Поддерживается ли конверсия source_type → единица."""
        return source_type in _FROM_SOURCE

    def convert_from(self, value: Any) -> U:
        """
        Конверсия внешнего значения в значение единицы.

        Args:
            value: str, float или int

        Returns:
            Значение unit_cls

        Raises:
            ParseError: Если value — строка, не являющаяся float литералом
            UnsupportedConversionError: Если тип value не поддерживается
        """
        converter = _FROM_SOURCE.get(type(value))
        if converter is None:
            logger.debug("Rejected %s -> %s", type(value).__name__, self.unit_cls.__name__)
            raise UnsupportedConversionError(
                f"Cannot convert {type(value).__name__} to {self.unit_cls.__name__}"
            )
        return self.unit_cls(converter(value))

    def can_convert_to(self, destination_type: type) -> bool:
        """Поддерживается ли конверсия единица → destination_type."""
        return destination_type in _TO_DESTINATION

    def convert_to(self, value: U, destination_type: type) -> Any:
        """
        Конверсия значения единицы во внешний тип.

        Args:
            value: Экземпляр unit_cls
            destination_type: str, float или int

        Returns:
            Значение destination_type (int — усечение к нулю)

        Raises:
            UnsupportedConversionError: Если value не unit_cls, destination_type
                не поддерживается или магнитуда нефинитна при сужении к int
        """
        if type(value) is not self.unit_cls:
            raise UnsupportedConversionError(
                f"Expected {self.unit_cls.__name__}, got {type(value).__name__}"
            )

        converter = _TO_DESTINATION.get(destination_type)
        if converter is None:
            destination_name = getattr(destination_type, "__name__", repr(destination_type))
            logger.debug("Rejected %s -> %s", self.unit_cls.__name__, destination_name)
            raise UnsupportedConversionError(
                f"Cannot convert {self.unit_cls.__name__} to {destination_name}"
            )
        return converter(value.value)

    def __repr__(self) -> str:
        return f"UnitTypeConverter({self.unit_cls.__name__})"


# =============================================================================
# РЕЕСТР
# =============================================================================

_CONVERTERS: Final[dict[type[ScalarUnit], UnitTypeConverter]] = {
    unit_cls: UnitTypeConverter(unit_cls) for unit_cls in UNIT_TYPES
}


def get_converter(unit_cls: type[U]) -> UnitTypeConverter[U]:
    """
    Конвертер, зарегистрированный для класса единиц.

    Raises:
        UnsupportedConversionError: Если unit_cls не является известной единицей
    """
    try:
        return _CONVERTERS[unit_cls]
    except (KeyError, TypeError) as exc:
        raise UnsupportedConversionError(f"No converter registered for {unit_cls!r}") from exc
