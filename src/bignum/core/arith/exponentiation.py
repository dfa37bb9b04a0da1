"""
Exponentiation: возведение в степень (square-and-multiply)

Биты показателя обходятся от младшего к старшему: на каждом шаге
накопитель квадратов возводится в квадрат, а накопитель результата
умножается на текущий квадрат, если соответствующий бит установлен.

Граничные случаи:
- exponent == 0 → 1 для любого основания, включая 0
- base == 0, exponent > 0 → 0

Модулярный вариант (pow_mod) намеренно отсутствует.
"""

from bignum.core.arith.limbs import is_zero
from bignum.core.arith.multiplication import multiply
from bignum.core.config import DEFAULT_CONTEXT, ArithmeticContext


def power(
    base: list[int],
    exponent: int,
    context: ArithmeticContext = DEFAULT_CONTEXT,
) -> list[int]:
    """
    Возведение величины в неотрицательную степень.

    Args:
        base: Каноническая величина
        exponent: Показатель (native int >= 0)
        context: Контекст умножения

    Returns:
        Новая каноническая величина base ** exponent

    Raises:
        ValueError: Если exponent < 0

    Examples:
        >>> power([0], 0)
        [1]
        >>> power([2], 32)
        [0, 1]
    """
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if exponent == 0:
        return [1]
    if is_zero(base):
        return [0]

    result = [1]
    square = list(base)
    while True:
        if exponent & 1:
            result = multiply(result, square, context)
        exponent >>= 1
        if not exponent:
            return result
        square = multiply(square, square, context)
