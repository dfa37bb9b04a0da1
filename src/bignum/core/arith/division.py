"""
Division Engine: деление и остаток

Алгоритмы:
- divmod_limb: делитель из одного лимба, long division от старшего лимба
  с double-width running remainder
- divmod_magnitude: многолимбовый делитель, restoring binary long division
  (побитовое сканирование делимого от старшего бита)

BINARY LONG DIVISION:
    Q = 0, R = 0
    для каждого бита b делимого от старшего:
        R = 2R + b
        если R >= divisor: Q = 2Q + 1, R = R - divisor
        иначе:             Q = 2Q

    O(bits) итераций, каждая использует уже проверенные comparator и
    subtractor; подбор цифры частного шириной в лимб не нужен.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нулевой делитель → DivisionByZero до любых вычислений
2. dividend == quotient * divisor + remainder, 0 <= remainder < divisor
3. Остаток всегда берётся из деления, отдельно не вычисляется
"""

import logging

from bignum.core.arith.addsub import sub_inplace
from bignum.core.arith.comparison import compare, compare_limb
from bignum.core.arith.limbs import (
    LIMB_BITS,
    LIMB_MASK,
    bit_length,
    is_one,
    is_zero,
    iter_bits_msb,
    trim,
    validate_limb,
)
from bignum.core.errors import DivisionByZero

logger = logging.getLogger(__name__)

# =============================================================================
# ДЕЛЕНИЕ НА ЛИМБ
# =============================================================================


def divmod_limb(a: list[int], d: int) -> tuple[list[int], int]:
    """
    Деление величины на один лимб.

    Сканирует лимбы делимого от старшего, поддерживая running remainder
    шириной в два лимба: на каждом шаге (remainder << W) | limb делится
    на d, давая один лимб частного и новый остаток.

    Args:
        a: Каноническая величина (делимое)
        d: Делитель, 0 < d < B

    Returns:
        (quotient, remainder): каноническое частное и остаток как native int

    Raises:
        DivisionByZero: Если d == 0
        ValueError: Если d не помещается в один лимб

    Examples:
        >>> divmod_limb([0, 1], 2)
        ([2147483648], 0)
        >>> divmod_limb([7], 10)
        ([0], 7)
    """
    if d == 0:
        raise DivisionByZero("division by zero")
    validate_limb(d, "divisor")

    if compare_limb(a, d) < 0:
        return [0], a[0]

    quotient = [0] * len(a)
    remainder = 0
    for index in range(len(a) - 1, -1, -1):
        current = (remainder << LIMB_BITS) | a[index]
        quotient[index] = current // d
        remainder = current % d
    return trim(quotient), remainder


# =============================================================================
# ДЕЛЕНИЕ НА ВЕЛИЧИНУ
# =============================================================================


def _shift_in_bit(r: list[int], bit: int) -> None:
    """R = 2R + bit (in place), перенос старшего бита в новый лимб."""
    carry = bit
    for index, limb in enumerate(r):
        r[index] = ((limb << 1) | carry) & LIMB_MASK
        carry = limb >> (LIMB_BITS - 1)
    if carry:
        r.append(carry)
    trim(r)


def _binary_long_division(a: list[int], b: list[int]) -> tuple[list[int], list[int]]:
    total_bits = bit_length(a)
    quotient = [0] * len(a)
    remainder = [0]

    for offset, bit in enumerate(iter_bits_msb(a)):
        _shift_in_bit(remainder, bit)
        if compare(remainder, b) >= 0:
            sub_inplace(remainder, b)
            position = total_bits - 1 - offset
            quotient[position // LIMB_BITS] |= 1 << (position % LIMB_BITS)

    return trim(quotient), remainder


def divmod_magnitude(a: list[int], b: list[int]) -> tuple[list[int], list[int]]:
    """
    Деление величины на величину с остатком.

    Специальные случаи:
    - divisor == 0 → DivisionByZero
    - dividend < divisor → (0, dividend)
    - divisor == 1 → (dividend, 0)
    - однолимбовый divisor → divmod_limb
    Общий случай: restoring binary long division.

    Returns:
        (quotient, remainder): новые канонические величины

    Raises:
        DivisionByZero: Если b == 0
    """
    if is_zero(b):
        raise DivisionByZero("division by zero")
    if compare(a, b) < 0:
        return [0], list(a)
    if is_one(b):
        return list(a), [0]

    if len(b) == 1:
        logger.debug("divmod path=limb dividend_limbs=%d", len(a))
        quotient, remainder = divmod_limb(a, b[0])
        return quotient, [remainder]

    logger.debug(
        "divmod path=binary dividend_limbs=%d divisor_limbs=%d", len(a), len(b)
    )
    return _binary_long_division(a, b)


def divide(a: list[int], b: list[int]) -> list[int]:
    """Частное a // b (проекция divmod_magnitude)."""
    return divmod_magnitude(a, b)[0]


def modulo(a: list[int], b: list[int]) -> list[int]:
    """Остаток a % b (проекция divmod_magnitude)."""
    return divmod_magnitude(a, b)[1]
