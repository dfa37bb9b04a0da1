"""
Add/Subtract Engine: сложение и вычитание с распространением переноса

Все *_inplace функции мутируют первый аргумент (накопитель) и
возвращают None. Чистые функции add/subtract копируют и мутируют копию.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Перенос за старший лимб добавляет новый лимб со значением 1
2. Вычитание требует minuend >= subtrahend; нарушение → MagnitudeUnderflow
   ДО изменения накопителя
3. После вычитания лишние старшие нулевые лимбы удаляются
4. Сложение не требует trim (старший лимб не может стать нулём)
"""

from bignum.core.arith.comparison import compare, compare_limb
from bignum.core.arith.limbs import LIMB_BITS, LIMB_MASK, is_zero, trim, validate_limb
from bignum.core.errors import DecrementUnderflow, MagnitudeUnderflow

# =============================================================================
# СЛОЖЕНИЕ
# =============================================================================


def add_shifted_inplace(acc: list[int], x: list[int], shift: int) -> None:
    """
    Прибавление x * B^shift к накопителю.

    Общий примитив для сложения, schoolbook и Karatsuba. Если накопитель
    короче shift, он дополняется нулевыми лимбами. Перенос распространяется
    за конец x по лимбам накопителя.

    Args:
        acc: Накопитель (изменяется на месте)
        x: Прибавляемая каноническая величина
        shift: Сдвиг в лимбах (>= 0)
    """
    if is_zero(x):
        return

    needed = shift + len(x)
    if len(acc) < needed:
        acc.extend([0] * (needed - len(acc)))

    carry = 0
    for index, limb in enumerate(x):
        position = shift + index
        t = acc[position] + limb + carry
        acc[position] = t & LIMB_MASK
        carry = t >> LIMB_BITS

    position = needed
    while carry:
        if position == len(acc):
            acc.append(1)
            return
        t = acc[position] + carry
        acc[position] = t & LIMB_MASK
        carry = t >> LIMB_BITS
        position += 1


def add_inplace(acc: list[int], x: list[int]) -> None:
    """Сложение a += x с переносом (каноническая форма сохраняется)."""
    add_shifted_inplace(acc, x, 0)


def add_limb_inplace(acc: list[int], d: int) -> None:
    """
    Сложение с одним лимбом: fast path, O(1) амортизированно.

    Перенос распространяется только пока лимбы переполняются.

    Raises:
        ValueError: Если d не помещается в один лимб
    """
    validate_limb(d, "addend")
    carry = d
    position = 0
    while carry:
        if position == len(acc):
            acc.append(carry)
            return
        t = acc[position] + carry
        acc[position] = t & LIMB_MASK
        carry = t >> LIMB_BITS
        position += 1


def increment_inplace(acc: list[int]) -> None:
    add_limb_inplace(acc, 1)


def add(a: list[int], b: list[int]) -> list[int]:
    """Чистое сложение: новая каноническая величина a + b."""
    if len(a) >= len(b):
        result = list(a)
        add_inplace(result, b)
    else:
        result = list(b)
        add_inplace(result, a)
    return result


# =============================================================================
# ВЫЧИТАНИЕ
# =============================================================================


def sub_inplace(acc: list[int], x: list[int]) -> None:
    """
    Вычитание acc -= x с распространением заёма.

    Raises:
        MagnitudeUnderflow: Если acc < x (накопитель не изменяется)
    """
    if compare(acc, x) < 0:
        raise MagnitudeUnderflow(
            f"unsigned subtraction underflow: minuend has {len(acc)} limb(s), "
            f"subtrahend is larger"
        )

    borrow = 0
    for index, limb in enumerate(x):
        t = acc[index] - limb - borrow
        borrow = 1 if t < 0 else 0
        acc[index] = t & LIMB_MASK

    position = len(x)
    while borrow:
        # acc >= x гарантирует, что заём погасится до конца накопителя
        t = acc[position] - borrow
        borrow = 1 if t < 0 else 0
        acc[position] = t & LIMB_MASK
        position += 1

    trim(acc)


def sub_limb_inplace(acc: list[int], d: int) -> None:
    """
    Вычитание одного лимба: fast path с тем же правилом заёма и trim.

    Raises:
        ValueError: Если d не помещается в один лимб
        MagnitudeUnderflow: Если acc < d (накопитель не изменяется)
    """
    validate_limb(d, "subtrahend")
    if compare_limb(acc, d) < 0:
        raise MagnitudeUnderflow(
            f"unsigned subtraction underflow: {acc[0]} - {d}"
        )

    borrow = d
    position = 0
    while borrow:
        t = acc[position] - borrow
        borrow = 1 if t < 0 else 0
        acc[position] = t & LIMB_MASK
        position += 1

    trim(acc)


def decrement_inplace(acc: list[int]) -> None:
    """
    Декремент величины на 1.

    Raises:
        DecrementUnderflow: Если величина равна нулю
    """
    if is_zero(acc):
        raise DecrementUnderflow("cannot decrement unsigned zero")
    sub_limb_inplace(acc, 1)


def subtract(a: list[int], b: list[int]) -> list[int]:
    """
    Чистое вычитание: новая каноническая величина a - b.

    Raises:
        MagnitudeUnderflow: Если a < b
    """
    result = list(a)
    sub_inplace(result, b)
    return result
