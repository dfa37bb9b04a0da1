"""
Comparator: полный порядок на канонических последовательностях лимбов

Каноническая форма гарантирует единственное представление каждого
значения, поэтому нормализация при сравнении не нужна:
- Более короткая последовательность строго меньше
- При равной длине сравнение лексикографическое от старшего лимба
- Равенство: структурное равенство списков

Сравнения с native значениями шириной в один или два лимба выполняются
без аллокации величины.
"""

from bignum.core.arith.limbs import (
    DOUBLE_LIMB_BASE,
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    limbs_from_int,
)


def _sign_of(diff: int) -> int:
    if diff < 0:
        return -1
    elif diff > 0:
        return 1
    return 0


def compare(a: list[int], b: list[int]) -> int:
    """
    Сравнение двух канонических величин.

    Returns:
        -1 если a < b
         0 если a == b
        +1 если a > b

    Examples:
        >>> compare([5], [0, 1])
        -1
        >>> compare([0, 2], [7, 1])
        1
        >>> compare([3, 4], [3, 4])
        0
    """
    if len(a) != len(b):
        return -1 if len(a) < len(b) else 1

    for index in range(len(a) - 1, -1, -1):
        if a[index] != b[index]:
            return -1 if a[index] < b[index] else 1
    return 0


def compare_limb(a: list[int], d: int) -> int:
    """
    Сравнение величины с native значением шириной в один лимб.

    Величина из двух и более лимбов всегда больше.
    """
    if len(a) > 1:
        return 1
    return _sign_of(a[0] - d)


def compare_double_limb(a: list[int], dd: int) -> int:
    """
    Сравнение величины с native значением шириной в два лимба.

    Величина из трёх и более лимбов всегда больше. Значение dd
    раскладывается на старший и младший лимб без аллокации величины.
    """
    if len(a) > 2:
        return 1

    high = dd >> LIMB_BITS
    low = dd & LIMB_MASK
    a_high = a[1] if len(a) == 2 else 0

    if a_high != high:
        return -1 if a_high < high else 1
    return _sign_of(a[0] - low)


def compare_native(a: list[int], value: int) -> int:
    """
    Сравнение величины с произвольным native int.

    Выбирает ширину сравнения по значению:
    - value < 0: величина всегда больше
    - value < B: compare_limb
    - value < B^2: compare_double_limb
    - иначе: promotion в величину и compare

    Returns:
        -1, 0 или +1 (знак a - value)
    """
    if value < 0:
        return 1
    if value < LIMB_BASE:
        return compare_limb(a, value)
    if value < DOUBLE_LIMB_BASE:
        return compare_double_limb(a, value)
    return compare(a, limbs_from_int(value))
