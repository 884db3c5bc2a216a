"""
Core math modules для mass_units

Численные примитивы: политики деления и invariant разбор float.
"""

# Numerical Safeguards
from mass_units.core.math.numerical_safeguards import (
    SAFE_DIVIDE_FALLBACK,
    as_magnitude,
    ieee_divide,
    is_valid_float,
    safe_divide,
    truncate_to_int,
)

# Invariant Float
from mass_units.core.math.invariant_float import (
    NAN_LITERAL,
    NEGATIVE_INFINITY_LITERAL,
    POSITIVE_INFINITY_LITERAL,
    format_float,
    parse_float,
    try_parse_float,
)

__all__ = [
    # Numerical Safeguards — Constants
    "SAFE_DIVIDE_FALLBACK",
    # Numerical Safeguards — Division
    "ieee_divide",
    "safe_divide",
    # Numerical Safeguards — Validation
    "as_magnitude",
    "is_valid_float",
    "truncate_to_int",
    # Invariant Float — Literals
    "NAN_LITERAL",
    "NEGATIVE_INFINITY_LITERAL",
    "POSITIVE_INFINITY_LITERAL",
    # Invariant Float — Functions
    "format_float",
    "parse_float",
    "try_parse_float",
]
