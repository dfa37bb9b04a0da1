"""
BigUInt: беззнаковая величина произвольной точности

Value type поверх движка core.arith. Каждый экземпляр эксклюзивно владеет
своим списком лимбов; буфер никогда не разделяется между двумя живыми
значениями.

Семантика операций:
- Compound assignment (+=, -=, *=, //=, %=) мутирует приёмник на месте
- Бинарные операторы (+, -, *, //, %, divmod, **) копируют и возвращают
  новое каноническое значение, операнды не изменяются
- inc() / dec() мутируют приёмник и ничего не возвращают

Promotion layer: native int операнды шириной в один лимб идут через
fast path движка (add_limb, sub_limb, multiply_limb, divmod_limb);
остальные native int сначала превращаются в лимбы. Для сравнений
native значения шириной до двух лимбов не аллоцируют величину.

Умножение в операторах использует DEFAULT_CONTEXT; для явного контекста
(например, из tuning harness) есть multiply(other, context) и
pow(exponent, context).
"""

from typing import Iterable, Union

from bignum.core.arith.addsub import (
    add_inplace,
    add_limb_inplace,
    decrement_inplace,
    increment_inplace,
    sub_inplace,
    sub_limb_inplace,
)
from bignum.core.arith.comparison import compare, compare_native
from bignum.core.arith.division import divmod_limb, divmod_magnitude
from bignum.core.arith.exponentiation import power
from bignum.core.arith.limbs import (
    LIMB_MASK,
    bit_length,
    canonical_from_limbs,
    is_zero,
    limbs_from_int,
    limbs_to_int,
    satisfies_invariant,
)
from bignum.core.arith.multiplication import multiply, multiply_limb_inplace
from bignum.core.arith.text_codec import format_decimal, parse_decimal
from bignum.core.config import DEFAULT_CONTEXT, ArithmeticContext


def _is_native(value: object) -> bool:
    return isinstance(value, int)


def _fits_limb(value: object) -> bool:
    return isinstance(value, int) and 0 <= value <= LIMB_MASK


class BigUInt:
    """
    Беззнаковое целое произвольной точности (base 2^32, little-endian).

    Конструкторы:
        BigUInt()                  → 0
        BigUInt(42)                → из неотрицательного native int
        BigUInt([0, 1])            → из явного списка лимбов (trim к канону)
        BigUInt("4294967296")      → из десятичной строки
        BigUInt(other)             → копия

    Raises:
        InvalidFormat: Некорректная десятичная строка
        ValueError: Отрицательный int или лимб вне [0, 2^32)
        TypeError: Неподдерживаемый тип значения
    """

    __slots__ = ("_limbs",)

    # Изменяемый value type: хэширование запрещено
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union[int, str, Iterable[int], "BigUInt"] = 0):
        if isinstance(value, BigUInt):
            self._limbs = list(value._limbs)
        elif _is_native(value):
            self._limbs = limbs_from_int(value)
        elif isinstance(value, str):
            self._limbs = parse_decimal(value)
        elif isinstance(value, (list, tuple)):
            self._limbs = canonical_from_limbs(list(value))
        else:
            raise TypeError(f"cannot build BigUInt from {type(value).__name__}")

    @classmethod
    def _wrap(cls, limbs: list[int]) -> "BigUInt":
        """Обёртка над уже канонической величиной без копирования."""
        instance = cls.__new__(cls)
        instance._limbs = limbs
        return instance

    # =========================================================================
    # ДОСТУП К ПРЕДСТАВЛЕНИЮ
    # =========================================================================

    @property
    def limbs(self) -> tuple[int, ...]:
        """Лимбы младшим первым (read-only снимок)."""
        return tuple(self._limbs)

    def satisfies_invariant(self) -> bool:
        return satisfies_invariant(self._limbs)

    def is_zero(self) -> bool:
        return is_zero(self._limbs)

    def bit_length(self) -> int:
        return bit_length(self._limbs)

    def copy(self) -> "BigUInt":
        return BigUInt._wrap(list(self._limbs))

    # =========================================================================
    # PROMOTION LAYER
    # =========================================================================

    def _coerce(self, other: object) -> Union[list[int], None]:
        """
        Приведение операнда к лимбам.

        Returns:
            Список лимбов (копия, если other is self) или None для
            неподдерживаемого типа
        """
        if isinstance(other, BigUInt):
            return list(other._limbs) if other is self else other._limbs
        if _is_native(other):
            return limbs_from_int(other)
        return None

    def _compare_to(self, other: object) -> Union[int, None]:
        if isinstance(other, BigUInt):
            return compare(self._limbs, other._limbs)
        if _is_native(other):
            return compare_native(self._limbs, other)
        return None

    # =========================================================================
    # INCREMENT / DECREMENT
    # =========================================================================

    def inc(self) -> None:
        """Увеличение на 1 (in place)."""
        increment_inplace(self._limbs)

    def dec(self) -> None:
        """
        Уменьшение на 1 (in place).

        Raises:
            DecrementUnderflow: Если значение равно нулю
        """
        decrement_inplace(self._limbs)

    # =========================================================================
    # СЛОЖЕНИЕ И ВЫЧИТАНИЕ
    # =========================================================================

    def __iadd__(self, other: object) -> "BigUInt":
        if _fits_limb(other):
            add_limb_inplace(self._limbs, other)
            return self
        limbs = self._coerce(other)
        if limbs is None:
            return NotImplemented
        add_inplace(self._limbs, limbs)
        return self

    def __add__(self, other: object) -> "BigUInt":
        return self.copy().__iadd__(other)

    __radd__ = __add__

    def __isub__(self, other: object) -> "BigUInt":
        if _fits_limb(other):
            sub_limb_inplace(self._limbs, other)
            return self
        limbs = self._coerce(other)
        if limbs is None:
            return NotImplemented
        sub_inplace(self._limbs, limbs)
        return self

    def __sub__(self, other: object) -> "BigUInt":
        return self.copy().__isub__(other)

    def __rsub__(self, other: object) -> "BigUInt":
        limbs = self._coerce(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(list(limbs)).__isub__(self)

    # =========================================================================
    # УМНОЖЕНИЕ
    # =========================================================================

    def multiply(
        self,
        other: Union["BigUInt", int],
        context: ArithmeticContext = DEFAULT_CONTEXT,
    ) -> "BigUInt":
        """
        Чистое умножение с явным контекстом алгоритма.

        Точка входа для внешнего benchmark / tuning harness.

        Raises:
            TypeError: Если other не BigUInt и не int
        """
        limbs = self._coerce(other)
        if limbs is None:
            raise TypeError(f"cannot multiply BigUInt by {type(other).__name__}")
        return BigUInt._wrap(multiply(self._limbs, limbs, context))

    def __imul__(self, other: object) -> "BigUInt":
        if _fits_limb(other):
            multiply_limb_inplace(self._limbs, other)
            return self
        limbs = self._coerce(other)
        if limbs is None:
            return NotImplemented
        self._limbs = multiply(self._limbs, limbs, DEFAULT_CONTEXT)
        return self

    def __mul__(self, other: object) -> "BigUInt":
        return self.copy().__imul__(other)

    __rmul__ = __mul__

    # =========================================================================
    # ДЕЛЕНИЕ
    # =========================================================================

    def _divmod_limbs(self, other: object) -> Union[tuple[list[int], list[int]], None]:
        if _fits_limb(other):
            quotient, remainder = divmod_limb(self._limbs, other)
            return quotient, [remainder]
        limbs = self._coerce(other)
        if limbs is None:
            return None
        return divmod_magnitude(self._limbs, limbs)

    def __divmod__(self, other: object) -> tuple["BigUInt", "BigUInt"]:
        result = self._divmod_limbs(other)
        if result is None:
            return NotImplemented
        quotient, remainder = result
        return BigUInt._wrap(quotient), BigUInt._wrap(remainder)

    def __rdivmod__(self, other: object) -> tuple["BigUInt", "BigUInt"]:
        limbs = self._coerce(other)
        if limbs is None:
            return NotImplemented
        return divmod(BigUInt._wrap(list(limbs)), self)

    def __ifloordiv__(self, other: object) -> "BigUInt":
        result = self._divmod_limbs(other)
        if result is None:
            return NotImplemented
        self._limbs = result[0]
        return self

    def __floordiv__(self, other: object) -> "BigUInt":
        result = self._divmod_limbs(other)
        if result is None:
            return NotImplemented
        return BigUInt._wrap(result[0])

    def __rfloordiv__(self, other: object) -> "BigUInt":
        limbs = self._coerce(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(list(limbs)) // self

    def __imod__(self, other: object) -> "BigUInt":
        result = self._divmod_limbs(other)
        if result is None:
            return NotImplemented
        self._limbs = result[1]
        return self

    def __mod__(self, other: object) -> "BigUInt":
        result = self._divmod_limbs(other)
        if result is None:
            return NotImplemented
        return BigUInt._wrap(result[1])

    def __rmod__(self, other: object) -> "BigUInt":
        limbs = self._coerce(other)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(list(limbs)) % self

    # =========================================================================
    # ВОЗВЕДЕНИЕ В СТЕПЕНЬ
    # =========================================================================

    def pow(
        self,
        exponent: Union["BigUInt", int],
        context: ArithmeticContext = DEFAULT_CONTEXT,
    ) -> "BigUInt":
        """
        Возведение в степень (square-and-multiply).

        pow(0) == 1 для любого основания, включая 0.

        Raises:
            ValueError: Если exponent < 0
            TypeError: Если exponent не int и не BigUInt
        """
        if isinstance(exponent, BigUInt):
            exponent = int(exponent)
        elif not _is_native(exponent):
            raise TypeError(f"exponent must be int or BigUInt, got {type(exponent).__name__}")
        return BigUInt._wrap(power(self._limbs, exponent, context))

    def __pow__(self, exponent: object, modulo: object = None) -> "BigUInt":
        if modulo is not None:
            raise TypeError("modular exponentiation is not supported")
        if not isinstance(exponent, BigUInt) and not _is_native(exponent):
            return NotImplemented
        return self.pow(exponent)

    def __rpow__(self, base: object) -> "BigUInt":
        limbs = self._coerce(base)
        if limbs is None:
            return NotImplemented
        return BigUInt._wrap(list(limbs)).pow(self)

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigUInt):
            return self._limbs == other._limbs
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result == 0

    def __lt__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare_to(other)
        if result is None:
            return NotImplemented
        return result >= 0

    # =========================================================================
    # КОНВЕРСИИ
    # =========================================================================

    def __bool__(self) -> bool:
        return not is_zero(self._limbs)

    def __int__(self) -> int:
        return limbs_to_int(self._limbs)

    def __str__(self) -> str:
        return format_decimal(self._limbs)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"BigUInt('{self}')"
