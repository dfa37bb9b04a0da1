"""
Value types для bignum

BigUInt - беззнаковая величина, BigInt - знаковое значение (sign-magnitude).
"""

from bignum.core.domain.magnitude import BigUInt
from bignum.core.domain.signed import BigInt, Sign

__all__ = [
    "BigInt",
    "BigUInt",
    "Sign",
]
