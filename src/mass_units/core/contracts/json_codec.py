"""
JSON Codec — кодирование значений единиц в JSON

Контракт:
- конечная магнитуда кодируется как bare JSON number
- нефинитная магнитуда кодируется строками "NaN", "Infinity", "-Infinity"
  (named float literals mode)
- при выключенном режиме кодирование NaN/Inf — FormatError, невалидный JSON
  не выпускается никогда
- декодирование принимает bare number или один из трёх литералов;
  любой другой токен — FormatError

Модуль работает с магнитудами (float), а не с классами единиц, поэтому не
зависит от core.domain во время выполнения.
"""

import json
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, TypeVar

from jsonschema import ValidationError

from mass_units.core.contracts.validators import UnitValueValidator
from mass_units.core.errors import FormatError
from mass_units.core.math.invariant_float import (
    NAN_LITERAL,
    NEGATIVE_INFINITY_LITERAL,
    POSITIVE_INFINITY_LITERAL,
    format_float,
)

if TYPE_CHECKING:
    from mass_units.core.domain.scalar import ScalarUnit

U = TypeVar("U", bound="ScalarUnit")


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

NAMED_FLOAT_LITERALS: Final[dict[str, float]] = {
    NAN_LITERAL: math.nan,
    POSITIVE_INFINITY_LITERAL: math.inf,
    NEGATIVE_INFINITY_LITERAL: -math.inf,
}


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class JsonCodecConfig:
    """Конфигурация JSON codec.

    allow_named_float_literals: разрешить строки NaN/Infinity/-Infinity
    для нефинитных магнитуд (и при кодировании, и при декодировании).
    """

    allow_named_float_literals: bool = True


DEFAULT_JSON_CODEC_CONFIG: Final[JsonCodecConfig] = JsonCodecConfig()

_VALIDATORS: Final[dict[bool, UnitValueValidator]] = {
    True: UnitValueValidator(strict=False),
    False: UnitValueValidator(strict=True),
}


# =============================================================================
# МАГНИТУДЫ
# =============================================================================


def encode_magnitude(value: float, config: JsonCodecConfig | None = None) -> float | str:
    """
    Кодирование магнитуды в JSON-совместимое Python значение.

    Args:
        value: Магнитуда
        config: Конфигурация (default: DEFAULT_JSON_CODEC_CONFIG)

    Returns:
        float для конечных значений, иначе один из named float literals

    Raises:
        FormatError: Если value нефинитна и режим named literals выключен
    """
    config = config or DEFAULT_JSON_CODEC_CONFIG

    if math.isfinite(value):
        return float(value)

    if not config.allow_named_float_literals:
        raise FormatError(
            f"Cannot encode non-finite magnitude {value!r}: named float literals are disabled"
        )

    if math.isnan(value):
        return NAN_LITERAL
    return POSITIVE_INFINITY_LITERAL if value > 0 else NEGATIVE_INFINITY_LITERAL


def decode_magnitude(data: Any, config: JsonCodecConfig | None = None) -> float:
    """
    Декодирование JSON-значения (результат json.loads) в магнитуду.

    Args:
        data: int/float или named float literal
        config: Конфигурация (default: DEFAULT_JSON_CODEC_CONFIG)

    Returns:
        Магнитуда double. "NaN" даёт NaN (проверять через math.isnan)

    Raises:
        FormatError: Для bool, None, прочих строк, объектов, массивов
            и чисел вне диапазона double
    """
    config = config or DEFAULT_JSON_CODEC_CONFIG

    if isinstance(data, bool):
        raise FormatError(f"Expected a JSON number, got boolean {data!r}")

    if isinstance(data, (int, float)):
        try:
            return float(data)
        except OverflowError as exc:
            raise FormatError(f"JSON number out of double range: {data!r}") from exc

    if isinstance(data, str):
        if config.allow_named_float_literals and data in NAMED_FLOAT_LITERALS:
            return NAMED_FLOAT_LITERALS[data]
        raise FormatError(f"Unexpected JSON string for a unit value: {data!r}")

    raise FormatError(f"Expected a JSON number, got {type(data).__name__}")


# =============================================================================
# ДОКУМЕНТЫ
# =============================================================================


def _reject_constant(token: str) -> float:
    # json.loads по умолчанию принимает bare NaN/Infinity, это не JSON
    raise FormatError(f"Invalid JSON token: {token}")


def _parse_finite_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        raise FormatError(f"JSON number out of double range: {token}")
    return value


def dumps_magnitude(value: float, config: JsonCodecConfig | None = None) -> str:
    """
    Кодирование магнитуды в JSON документ.

    Конечные значения выводятся в invariant форме ('10', '10.5', '1e+16').

    Examples:
        >>> dumps_magnitude(10.0)
        '10'
        >>> dumps_magnitude(float("nan"))
        '"NaN"'
    """
    encoded = encode_magnitude(value, config)
    if isinstance(encoded, str):
        return json.dumps(encoded)
    return format_float(encoded)


def loads_magnitude(text: str | bytes, config: JsonCodecConfig | None = None) -> float:
    """
    Декодирование JSON документа в магнитуду.

    Документ проверяется JSON Schema контрактом unit_value
    (unit_value_strict при выключенных named literals).

    Raises:
        FormatError: Если документ не является валидным JSON или не
            соответствует контракту
    """
    config = config or DEFAULT_JSON_CODEC_CONFIG

    try:
        data = json.loads(
            text,
            parse_float=_parse_finite_float,
            parse_constant=_reject_constant,
        )
    except FormatError:
        raise
    except json.JSONDecodeError as exc:
        raise FormatError(f"Malformed JSON: {exc.msg} at position {exc.pos}") from exc
    # ValueError: в т.ч. UnicodeDecodeError и лимит длины int литерала
    except (TypeError, ValueError, RecursionError) as exc:
        raise FormatError(f"Cannot read JSON document: {exc}") from exc

    try:
        _VALIDATORS[bool(config.allow_named_float_literals)].validate(data)
    except ValidationError as exc:
        raise FormatError(f"JSON value does not match unit value contract: {exc.message}") from exc

    return decode_magnitude(data, config)


def to_json(unit: "ScalarUnit", config: JsonCodecConfig | None = None) -> str:
    """
    Кодирование значения единицы в JSON документ.

    Examples:
        >>> from mass_units import Kilogram
        >>> to_json(Kilogram(10.5))
        '10.5'
    """
    return dumps_magnitude(unit.value, config)


def from_json(unit_cls: type[U], text: str | bytes, config: JsonCodecConfig | None = None) -> U:
    """
    Декодирование JSON документа в значение единицы unit_cls.

    Raises:
        FormatError: Некорректный токен или документ
    """
    return unit_cls(loads_magnitude(text, config))
