"""
Invariant Float — разбор и форматирование double независимо от локали

Грамматика parse_float (invariant culture):
- опциональные пробельные символы в начале и конце
- опциональный знак (+/-)
- десятичная точка '.', без разделителей тысяч
- опциональная экспонента (e/E, опциональный знак, цифры)
- специальные литералы NaN, Infinity, ∞ (регистр не важен, с опциональным знаком)

Встроенный float() шире этой грамматики (принимает '1_000', 'inf',
юникод-цифры), поэтому текст сначала проверяется регулярным выражением.
"""

import logging
import math
import re
from typing import Final

from mass_units.core.errors import ParseError

logger = logging.getLogger(__name__)

# =============================================================================
# ГРАММАТИКА
# =============================================================================

# Пробельные символы, допустимые вокруг числа (0x09-0x0D, 0x20)
_WHITESPACE: Final[str] = " \t\n\v\f\r"

_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
)

_SPECIAL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"(?P<sign>[+-]?)(?P<name>nan|infinity|∞)",
    re.IGNORECASE,
)

# Текстовые представления нефинитных значений
NAN_LITERAL: Final[str] = "NaN"
POSITIVE_INFINITY_LITERAL: Final[str] = "Infinity"
NEGATIVE_INFINITY_LITERAL: Final[str] = "-Infinity"


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_float(text: str) -> float:
    """
    Разбор текста как invariant float литерала.

    Args:
        text: Исходный текст (например, '10.5', '-1e3', 'NaN')

    Returns:
        Разобранное значение double

    Raises:
        ParseError: Если text не str или не соответствует грамматике

    Examples:
        >>> parse_float("10.5")
        10.5
        >>> parse_float(" -1.5E+2 ")
        -150.0
        >>> parse_float("1e400")
        inf
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected str, got {type(text).__name__}")

    stripped = text.strip(_WHITESPACE)

    if _DECIMAL_PATTERN.fullmatch(stripped):
        # Переполнение экспоненты даёт ±inf, как в double.Parse
        return float(stripped)

    special = _SPECIAL_PATTERN.fullmatch(stripped)
    if special is not None:
        if special.group("name").lower() == "nan":
            return math.nan
        return -math.inf if special.group("sign") == "-" else math.inf

    raise ParseError(f"Invalid float literal: {text!r}")


def try_parse_float(text: str) -> tuple[bool, float]:
    """
    Разбор без исключений.

    При ошибке возвращает (False, 0.0): нулевая магнитуда с флагом неудачи,
    а не None.

    Returns:
        (success, value)

    Examples:
        >>> try_parse_float("10.5")
        (True, 10.5)
        >>> try_parse_float("not-a-number")
        (False, 0.0)
    """
    try:
        return True, parse_float(text)
    except ParseError as exc:
        logger.debug("try_parse_float failed: %s", exc)
        return False, 0.0


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_float(value: float) -> str:
    """
    Invariant текстовое представление double.

    Целые конечные значения выводятся без '.0', остальные — кратчайшим
    round-trip представлением. Нефинитные: NaN, Infinity, -Infinity.

    Examples:
        >>> format_float(10.0)
        '10'
        >>> format_float(10.5)
        '10.5'
        >>> format_float(float("-inf"))
        '-Infinity'
    """
    if math.isnan(value):
        return NAN_LITERAL
    if math.isinf(value):
        return POSITIVE_INFINITY_LITERAL if value > 0 else NEGATIVE_INFINITY_LITERAL

    text = repr(value)
    if text.endswith(".0"):
        return text[:-2]
    return text
