"""
ScalarUnit — общий шаблон значения физической единицы

Каждая единица (Kilogram, Tonne, Liter, CubicMetre, Density, Percentage) —
immutable обёртка над одной float-магнитудой в своей reference unit.
Общий контракт реализован здесь один раз, подклассы задают только suffix
(symbol) и собственные формулы конверсии.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Операторы + - * / и сравнения работают только между значениями ОДНОГО
   класса; смешивание единиц даёт TypeError
2. Арифметика — сырая IEEE-754: деление на нулевую магнитуду даёт ±inf/nan,
   а не исключение
3. Равенство и порядок делегируются float: NaN != NaN, NaN не упорядочен
4. Конструктор не валидирует значение: NaN/±Inf допустимы
5. EMPTY — нулевая магнитуда
"""

from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from mass_units.core.contracts.json_codec import (
    NAMED_FLOAT_LITERALS,
    decode_magnitude,
    encode_magnitude,
)
from mass_units.core.contracts.validators import load_schema
from mass_units.core.math.invariant_float import format_float, parse_float, try_parse_float
from mass_units.core.math.numerical_safeguards import as_magnitude, ieee_divide, truncate_to_int

U = TypeVar("U", bound="ScalarUnit")


@dataclass(frozen=True, eq=False, repr=False)
class ScalarUnit:
    """
    Базовый класс значения единицы.

    Immutable (frozen=True): операторы всегда создают новый экземпляр.
    Магнитуда доступна явно через .value (или float(unit)).
    """

    value: float = 0.0

    # Suffix для текстового представления ("kg", "m3", "%")
    symbol: ClassVar[str] = ""

    # Нулевое значение, задаётся для каждого подкласса в __init_subclass__
    EMPTY: ClassVar["ScalarUnit"]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.EMPTY = cls(0.0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", as_magnitude(self.value, type(self).__name__))

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def from_number(cls: type[U], value: float | int) -> U:
        """Явное сужение float/int → значение единицы."""
        return cls(value)

    @classmethod
    def parse(cls: type[U], text: str) -> U:
        """
        Разбор текста (invariant float grammar).

        Raises:
            ParseError: Если text не является валидным float литералом
        """
        return cls(parse_float(text))

    @classmethod
    def try_parse(cls: type[U], text: str) -> tuple[bool, U]:
        """
        Разбор без исключений.

        Returns:
            (True, значение) или (False, нулевое значение)
        """
        parsed, value = try_parse_float(text)
        return parsed, cls(value)

    # =========================================================================
    # АРИФМЕТИКА
    # =========================================================================

    def __add__(self: U, other: Any) -> U:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __sub__(self: U, other: Any) -> U:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value - other.value)

    def __mul__(self: U, other: Any) -> U:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value * other.value)

    def __truediv__(self: U, other: Any) -> U:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(ieee_divide(self.value, other.value))

    def __neg__(self: U) -> U:
        return type(self)(-self.value)

    def __pos__(self: U) -> U:
        return self

    def __abs__(self: U) -> U:
        return type(self)(abs(self.value))

    # =========================================================================
    # СРАВНЕНИЕ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value == other.value  # type: ignore[attr-defined]

    def __lt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value < other.value

    def __le__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value <= other.value

    def __gt__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value > other.value

    def __ge__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.value >= other.value

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    # =========================================================================
    # ПРЕОБРАЗОВАНИЯ
    # =========================================================================

    def __float__(self) -> float:
        return self.value

    def __int__(self) -> int:
        return truncate_to_int(self.value)

    def __bool__(self) -> bool:
        return self.value != 0.0

    def __str__(self) -> str:
        return f"{format_float(self.value)} {self.symbol}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    # =========================================================================
    # PYDANTIC
    # =========================================================================

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        # JSON: только JSON number или named literal, bare NaN/Infinity не JSON
        json_input = core_schema.no_info_after_validator_function(
            cls._from_json_value,
            core_schema.union_schema(
                [
                    core_schema.float_schema(allow_inf_nan=False, strict=True),
                    core_schema.literal_schema(list(NAMED_FLOAT_LITERALS)),
                ]
            ),
        )
        return core_schema.json_or_python_schema(
            json_schema=json_input,
            python_schema=core_schema.no_info_plain_validator_function(cls._validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls._serialize, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        contract = load_schema("unit_value")
        json_schema = {key: value for key, value in contract.items() if not key.startswith("$")}
        json_schema["title"] = cls.__name__
        return json_schema

    @classmethod
    def _validate(cls: type[U], value: Any) -> U:
        if isinstance(value, cls):
            return value
        if isinstance(value, ScalarUnit):
            raise ValueError(f"Expected {cls.__name__}, got {type(value).__name__}")
        # FormatError — подкласс ValueError, pydantic оборачивает его в ValidationError
        return cls(decode_magnitude(value))

    @classmethod
    def _from_json_value(cls: type[U], value: float | str) -> U:
        return cls(decode_magnitude(value))

    @staticmethod
    def _serialize(unit: "ScalarUnit") -> float | str:
        return encode_magnitude(unit.value)
