"""
Исключения библиотеки единиц измерения

Иерархия:
- UnitsError — базовый класс всех ошибок библиотеки
- ParseError — текст не является валидным float литералом
- FormatError — некорректный JSON токен при декодировании/кодировании
- UnsupportedConversionError — неподдерживаемая пара типов в bridge

ParseError и FormatError наследуют ValueError, UnsupportedConversionError
наследует TypeError: вызывающий код, ловящий стандартные исключения,
продолжает работать.
"""


class UnitsError(Exception):
    """Базовое исключение для всех ошибок mass_units."""

    pass


class ParseError(UnitsError, ValueError):
    """
    Текст не может быть разобран как float (invariant grammar).

    Пробрасывается вызывающему коду из parse(); try_parse() никогда
    его не выбрасывает.
    """

    pass


class FormatError(UnitsError, ValueError):
    """
    Некорректный JSON токен при декодировании значения единицы.

    Также выбрасывается при кодировании NaN/Inf, если режим
    named float literals выключен.
    """

    pass


class UnsupportedConversionError(UnitsError, TypeError):
    """Bridge получил неподдерживаемую пару (source, destination)."""

    pass
