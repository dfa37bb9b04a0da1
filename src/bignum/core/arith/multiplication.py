"""
Multiplication Engine: schoolbook, Karatsuba и dispatcher

Алгоритмы:
- multiply_limb: умножение на один лимб с double-width accumulator
- schoolbook_multiply: shift-and-accumulate, O(n*m)
- karatsuba_multiply: рекурсивное умножение, O(n^log2(3))
- multiply: dispatcher по max(len(a), len(b)) и порогу из ArithmeticContext

ФОРМУЛА KARATSUBA:
    a = a1 * B^k + a0,  b = b1 * B^k + b0,  k = max(len(a), len(b)) // 2
    p0 = a0 * b0
    p1 = a1 * b1
    pm = (a0 + a1) * (b0 + b1)
    a * b = p1 * B^(2k) + (pm - p1 - p0) * B^k + p0

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Schoolbook и Karatsuba дают идентичный результат на любых входах
2. Подпроизведения Karatsuba проходят через dispatcher с тем же контекстом
3. Глубина рекурсии ограничена context.karatsuba_max_depth
"""

import logging

from bignum.core.arith.addsub import add, add_shifted_inplace, sub_inplace
from bignum.core.arith.limbs import LIMB_BITS, LIMB_MASK, is_one, is_zero, trim, validate_limb
from bignum.core.config import DEFAULT_CONTEXT, ArithmeticContext

logger = logging.getLogger(__name__)

# =============================================================================
# УМНОЖЕНИЕ НА ЛИМБ
# =============================================================================


def multiply_limb_inplace(acc: list[int], d: int) -> None:
    """
    Умножение накопителя на один лимб (in place).

    Каждый лимб умножается на d в double-width accumulator с бегущим
    переносом; ненулевой финальный перенос добавляется новым лимбом.

    Raises:
        ValueError: Если d не помещается в один лимб
    """
    validate_limb(d, "multiplier")
    if d == 0 or is_zero(acc):
        acc[:] = [0]
        return

    carry = 0
    for index, limb in enumerate(acc):
        t = limb * d + carry
        acc[index] = t & LIMB_MASK
        carry = t >> LIMB_BITS
    if carry:
        acc.append(carry)


def multiply_limb(a: list[int], d: int) -> list[int]:
    """Чистое умножение на лимб: новая величина a * d."""
    result = list(a)
    multiply_limb_inplace(result, d)
    return result


# =============================================================================
# SCHOOLBOOK
# =============================================================================


def schoolbook_multiply(a: list[int], b: list[int]) -> list[int]:
    """
    Schoolbook умножение (shift-and-accumulate).

    Для каждого лимба s короткого операнда длинный операнд умножается
    на этот лимб и прибавляется к накопителю со сдвигом на s лимбов.

    Examples:
        >>> schoolbook_multiply([4294967295, 4294967295], [4294967295, 4294967295])
        [1, 0, 4294967294, 4294967295]
    """
    if is_zero(a) or is_zero(b):
        return [0]
    if is_one(a):
        return list(b)
    if is_one(b):
        return list(a)

    outer, inner = (a, b) if len(a) <= len(b) else (b, a)

    acc = [0]
    for shift, limb in enumerate(outer):
        if limb:
            add_shifted_inplace(acc, multiply_limb(inner, limb), shift)
    return trim(acc)


# =============================================================================
# KARATSUBA
# =============================================================================


def _split(limbs: list[int], k: int) -> tuple[list[int], list[int]]:
    """Разбиение величины на (low, high): value = high * B^k + low."""
    low = trim(limbs[:k])
    high = trim(limbs[k:])
    return low, high


def _dispatch(
    a: list[int],
    b: list[int],
    context: ArithmeticContext,
    depth: int,
) -> list[int]:
    if context.uses_karatsuba(max(len(a), len(b)), depth):
        return _karatsuba(a, b, context, depth)
    return schoolbook_multiply(a, b)


def _karatsuba(
    a: list[int],
    b: list[int],
    context: ArithmeticContext,
    depth: int,
) -> list[int]:
    if len(a) == 1:
        return multiply_limb(b, a[0])
    if len(b) == 1:
        return multiply_limb(a, b[0])

    k = max(len(a), len(b)) // 2
    a0, a1 = _split(a, k)
    b0, b1 = _split(b, k)

    if depth + 1 == context.karatsuba_max_depth:
        logger.debug("karatsuba depth guard engaged at depth=%d, k=%d", depth + 1, k)

    p0 = _dispatch(a0, b0, context, depth + 1)
    p1 = _dispatch(a1, b1, context, depth + 1)
    pm = _dispatch(add(a0, a1), add(b0, b1), context, depth + 1)

    # pm - p1 - p0 = a0*b1 + a1*b0 >= 0
    sub_inplace(pm, p1)
    sub_inplace(pm, p0)

    result = list(p0)
    add_shifted_inplace(result, pm, k)
    add_shifted_inplace(result, p1, 2 * k)
    return trim(result)


def karatsuba_multiply(
    a: list[int],
    b: list[int],
    context: ArithmeticContext = DEFAULT_CONTEXT,
) -> list[int]:
    """
    Karatsuba умножение.

    Верхний уровень всегда выполняет разбиение Karatsuba (если ни один
    операнд не однолимбовый); подпроизведения выбирают алгоритм через
    dispatcher по порогу контекста. Рекурсия заканчивается на
    однолимбовом операнде или на context.karatsuba_max_depth.

    Args:
        a: Каноническая величина
        b: Каноническая величина
        context: Контекст с порогом и ограничением глубины

    Returns:
        Каноническая величина a * b
    """
    return _karatsuba(a, b, context, 0)


# =============================================================================
# DISPATCHER
# =============================================================================


def multiply(
    a: list[int],
    b: list[int],
    context: ArithmeticContext = DEFAULT_CONTEXT,
) -> list[int]:
    """
    Умножение с выбором алгоритма по длине операндов.

    max(len(a), len(b)) < context.karatsuba_threshold → schoolbook,
    иначе → Karatsuba.

    Returns:
        Новая каноническая величина a * b (операнды не изменяются)
    """
    width = max(len(a), len(b))
    logger.debug(
        "multiply dispatch: width=%d threshold=%d algorithm=%s",
        width,
        context.karatsuba_threshold,
        "karatsuba" if context.uses_karatsuba(width) else "schoolbook",
    )
    return _dispatch(a, b, context, 0)
