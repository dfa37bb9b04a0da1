"""
Limb-Vector Core: каноническое представление беззнаковой величины

Величина хранится как list[int] лимбов фиксированной ширины LIMB_BITS,
младший лимб первым:

    value = Σ limbs[i] * LIMB_BASE**i

КАНОНИЧЕСКАЯ ФОРМА (pre- и postcondition каждой функции движка):
1. Список содержит хотя бы один лимб
2. Каждый лимб лежит в [0, LIMB_BASE)
3. Если лимбов больше одного, старший лимб ненулевой
4. Ноль представлен ровно одним лимбом [0]

Python int используется как double-width accumulator: произведение
двух лимбов или сумма лимба с переносом помещается в него без потерь,
результат маскируется обратно в ширину лимба.
"""

from typing import Final, Iterator

# =============================================================================
# ПАРАМЕТРЫ ЛИМБА
# =============================================================================

# Ширина лимба в битах (W)
LIMB_BITS: Final[int] = 32

# Основание системы счисления (B = 2^W)
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Маска младших W бит double-width accumulator
LIMB_MASK: Final[int] = LIMB_BASE - 1

# Основание для double-limb значений (B^2)
DOUBLE_LIMB_BASE: Final[int] = 1 << (2 * LIMB_BITS)


# =============================================================================
# КАНОНИЧЕСКАЯ ФОРМА
# =============================================================================


def trim(limbs: list[int]) -> list[int]:
    """
    Удаление лишних старших нулевых лимбов (in place).

    Пустой или полностью нулевой список схлопывается в [0].

    Args:
        limbs: Список лимбов (изменяется на месте)

    Returns:
        Тот же список (для цепочек вызовов)

    Examples:
        >>> trim([1, 0, 0])
        [1]
        >>> trim([0, 0])
        [0]
        >>> trim([])
        [0]
    """
    while len(limbs) > 1 and limbs[-1] == 0:
        limbs.pop()
    if not limbs:
        limbs.append(0)
    return limbs


def satisfies_invariant(limbs: list[int]) -> bool:
    """
    Проверка канонической формы.

    Returns:
        True если список непустой, все лимбы в диапазоне и нет
        лишнего старшего нулевого лимба
    """
    if not limbs:
        return False
    if any(not 0 <= limb <= LIMB_MASK for limb in limbs):
        return False
    return len(limbs) == 1 or limbs[-1] != 0


def validate_limb(value: int, name: str) -> None:
    """
    Валидация, что native значение помещается в один лимб.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value вне [0, LIMB_BASE)
    """
    if not 0 <= value <= LIMB_MASK:
        raise ValueError(f"{name} must fit in one {LIMB_BITS}-bit limb, got {value}")


def canonical_from_limbs(limbs: list[int]) -> list[int]:
    """
    Построение канонической копии из явного списка лимбов.

    Raises:
        ValueError: Если какой-либо лимб вне [0, LIMB_BASE)
    """
    result = list(limbs)
    for index, limb in enumerate(result):
        validate_limb(limb, f"limb[{index}]")
    return trim(result)


# =============================================================================
# КОНВЕРСИЯ С NATIVE INT
# =============================================================================


def limbs_from_int(value: int) -> list[int]:
    """
    Конверсия неотрицательного native int в канонические лимбы.

    Значение меньше LIMB_BASE даёт ровно один лимб.

    Raises:
        ValueError: Если value < 0

    Examples:
        >>> limbs_from_int(0)
        [0]
        >>> limbs_from_int(4294967296)
        [0, 1]
    """
    if value < 0:
        raise ValueError(f"magnitude cannot be negative, got {value}")

    limbs = [value & LIMB_MASK]
    value >>= LIMB_BITS
    while value:
        limbs.append(value & LIMB_MASK)
        value >>= LIMB_BITS
    return limbs


def limbs_to_int(limbs: list[int]) -> int:
    """Конверсия лимбов в native int (схема Горнера от старшего лимба)."""
    value = 0
    for limb in reversed(limbs):
        value = (value << LIMB_BITS) | limb
    return value


# =============================================================================
# ПРЕДИКАТЫ И БИТОВЫЙ ДОСТУП
# =============================================================================


def is_zero(limbs: list[int]) -> bool:
    return len(limbs) == 1 and limbs[0] == 0


def is_one(limbs: list[int]) -> bool:
    return len(limbs) == 1 and limbs[0] == 1


def bit_length(limbs: list[int]) -> int:
    """
    Количество значащих бит величины.

    Returns:
        0 для нуля, иначе позиция старшего единичного бита + 1
    """
    return (len(limbs) - 1) * LIMB_BITS + limbs[-1].bit_length()


def iter_bits_msb(limbs: list[int]) -> Iterator[int]:
    """
    Итератор по битам величины от старшего значащего к младшему.

    Ведущие нули старшего лимба пропускаются. Для нуля не выдаёт
    ни одного бита.
    """
    top_bits = limbs[-1].bit_length()
    for index in range(len(limbs) - 1, -1, -1):
        limb = limbs[index]
        width = top_bits if index == len(limbs) - 1 else LIMB_BITS
        for shift in range(width - 1, -1, -1):
            yield (limb >> shift) & 1
