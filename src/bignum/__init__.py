"""
bignum: целые числа произвольной точности

Беззнаковая величина в base 2^32 (BigUInt) и знаковая обёртка
sign-magnitude (BigInt) с Karatsuba умножением, длинным делением
и десятичным текстовым кодеком.

Examples:
    >>> from bignum import BigUInt, BigInt
    >>> str(BigUInt("4294967295") + 1)
    '4294967296'
    >>> str(BigInt(-100) + 100)
    '0'
"""

from bignum.core.config import (
    DEFAULT_CONTEXT,
    KARATSUBA_MAX_DEPTH_DEFAULT,
    KARATSUBA_THRESHOLD_DEFAULT,
    ArithmeticContext,
)
from bignum.core.domain import BigInt, BigUInt, Sign
from bignum.core.errors import (
    BigNumError,
    DecrementUnderflow,
    DivisionByZero,
    InvalidFormat,
    InvariantViolation,
    MagnitudeUnderflow,
)

__version__ = "0.1.0"

__all__ = [
    # Value types
    "BigInt",
    "BigUInt",
    "Sign",
    # Configuration
    "ArithmeticContext",
    "DEFAULT_CONTEXT",
    "KARATSUBA_MAX_DEPTH_DEFAULT",
    "KARATSUBA_THRESHOLD_DEFAULT",
    # Errors
    "BigNumError",
    "DecrementUnderflow",
    "DivisionByZero",
    "InvalidFormat",
    "InvariantViolation",
    "MagnitudeUnderflow",
]
