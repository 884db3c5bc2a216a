"""
Contract Validation & JSON Codec

Модуль для кодирования значений единиц в JSON и валидации закодированных
значений JSON Schema контрактами.
"""

from .json_codec import (
    DEFAULT_JSON_CODEC_CONFIG,
    NAMED_FLOAT_LITERALS,
    JsonCodecConfig,
    decode_magnitude,
    dumps_magnitude,
    encode_magnitude,
    from_json,
    loads_magnitude,
    to_json,
)
from .validators import (
    ContractValidator,
    SchemaLoader,
    UnitValueValidator,
    load_schema,
    validate_unit_value,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "UnitValueValidator",
    "JsonCodecConfig",
    # Constants
    "DEFAULT_JSON_CODEC_CONFIG",
    "NAMED_FLOAT_LITERALS",
    # Functions
    "load_schema",
    "validate_unit_value",
    "encode_magnitude",
    "decode_magnitude",
    "dumps_magnitude",
    "loads_magnitude",
    "to_json",
    "from_json",
]
