"""
JSON Schema Contract Validators

Модуль для валидации закодированных значений единиц согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema.

Схемы:
- unit_value.json (number или NaN/Infinity/-Infinity)
- unit_value_strict.json (только number, named float literals выключены)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются как package data в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'unit_value')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-валидацию
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


def load_schema(schema_name: str) -> Dict[str, Any]:
    """Загрузка схемы через глобальный загрузчик."""
    return _SCHEMA_LOADER.load_schema(schema_name)


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class UnitValueValidator(ContractValidator):
    """
    Валидатор закодированного значения единицы.

    strict=True — только JSON number (named float literals выключены).
    """

    def __init__(self, strict: bool = False):
        super().__init__("unit_value_strict" if strict else "unit_value")
        self.strict = strict


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_unit_value(data: Any, strict: bool = False) -> None:
    """
    Валидация закодированного значения единицы.

    Args:
        data: Разобранный JSON (результат json.loads)
        strict: Запретить named float literals

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    UnitValueValidator(strict=strict).validate(data)
