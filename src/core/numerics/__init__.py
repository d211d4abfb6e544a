"""
Core numerics для radix-digits

Беззнаковое целое произвольной точности, целочисленный квадратный корень,
исключения и валидация аргументов.
"""

# Errors
from src.core.numerics.errors import (
    ArgumentNullError,
    ArgumentRangeError,
    DigitOverflowError,
    NegativeCastError,
    NegativeParseError,
    NumericsError,
    SplitOrderError,
    ZeroDenominatorError,
)

# Guards
from src.core.numerics.guards import (
    MIN_BASE,
    as_integer,
    validate_base,
    validate_non_negative,
    validate_not_none,
)

# BigUnsignedInteger
from src.core.numerics.big_unsigned import (
    BIT_LENGTH_PROBE_WIDTHS,
    BigUnsignedInteger,
    probe_bit_length,
)

# Integer Sqrt
from src.core.numerics.integer_sqrt import integer_sqrt, integer_sqrt_unsigned

__all__ = [
    # Errors
    "NumericsError",
    "ArgumentNullError",
    "ArgumentRangeError",
    "DigitOverflowError",
    "SplitOrderError",
    "NegativeCastError",
    "NegativeParseError",
    "ZeroDenominatorError",
    # Guards
    "MIN_BASE",
    "as_integer",
    "validate_base",
    "validate_non_negative",
    "validate_not_none",
    # BigUnsignedInteger
    "BIT_LENGTH_PROBE_WIDTHS",
    "BigUnsignedInteger",
    "probe_bit_length",
    # Integer Sqrt
    "integer_sqrt",
    "integer_sqrt_unsigned",
]
