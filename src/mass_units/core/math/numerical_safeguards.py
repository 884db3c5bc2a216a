"""
Numerical Safeguards — Safe Math Primitives

Модуль задаёт две разные политики деления, которые используются в библиотеке:
- safe_divide: доменная политика "нулевой знаменатель → 0" (Density, Percentage
  конструкторы из отношения, Kilogram → Liter через плотность)
- ieee_divide: сырая IEEE-754 арифметика для операторов (x / 0 → ±inf, 0 / 0 → nan)

Python float деление выбрасывает ZeroDivisionError, поэтому операторы единиц
обязаны идти через ieee_divide.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. safe_divide никогда не выбрасывает исключение и возвращает fallback ровно
   при denominator == 0.0
2. ieee_divide никогда не выбрасывает исключение и сохраняет семантику IEEE-754,
   включая знак нуля в знаменателе
3. NaN/Inf на входе не санитизируются — они распространяются как в double
"""

import math
from typing import Final

from mass_units.core.errors import UnsupportedConversionError

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Значение, возвращаемое safe_divide при нулевом знаменателе
SAFE_DIVIDE_FALLBACK: Final[float] = 0.0


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = SAFE_DIVIDE_FALLBACK,
) -> float:
    """
    Деление с доменной политикой "нулевой знаменатель → fallback".

    В отличие от EPS-защит здесь нет порога: малые ненулевые знаменатели
    делятся как есть. NaN в знаменателе не равен нулю, поэтому результат
    будет NaN.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        fallback: Значение при denominator == 0 (default: 0.0)

    Returns:
        numerator / denominator или fallback

    Examples:
        >>> safe_divide(10.0, 2.0)
        5.0
        >>> safe_divide(10.0, 0.0)
        0.0
        >>> safe_divide(10.0, -0.0)
        0.0
    """
    if denominator == 0.0:
        return fallback

    return numerator / denominator


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754 double.

    Examples:
        >>> ieee_divide(10.0, 4.0)
        2.5
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    # x / ±0 → ±inf, знак = sign(x) * sign(0)
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


# =============================================================================
# ПРОВЕРКИ И ПРЕОБРАЗОВАНИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def as_magnitude(value: float | int, name: str = "value") -> float:
    """
    Приведение числа к float-магнитуде.

    bool отклоняется явно: в Python это подкласс int, но как магнитуда
    единицы он бессмыслен.

    Args:
        value: int или float
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        float(value); int вне диапазона double округляется до ±inf (IEEE-754)

    Raises:
        TypeError: Если value не int/float или является bool

    Examples:
        >>> as_magnitude(10)
        10.0
        >>> as_magnitude(-10**400)
        -inf
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be int or float, got {type(value).__name__}")

    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def truncate_to_int(value: float) -> int:
    """
    Сужение double → int с отбрасыванием дробной части (к нулю).

    Examples:
        >>> truncate_to_int(10.9)
        10
        >>> truncate_to_int(-10.9)
        -10

    Raises:
        UnsupportedConversionError: Если value равен NaN или ±Inf
    """
    if not is_valid_float(value):
        raise UnsupportedConversionError(f"Cannot narrow non-finite magnitude {value!r} to int")

    return math.trunc(value)
