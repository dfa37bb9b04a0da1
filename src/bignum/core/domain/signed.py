"""
BigInt: знаковое целое произвольной точности (sign-magnitude)

Состояние: Sign × BigUInt. Знак хранится отдельно от модуля, модуль
эксклюзивно принадлежит экземпляру.

ИНВАРИАНТ: нулевой модуль всегда имеет знак PLUS (нет отрицательного
нуля). Каждая операция восстанавливает инвариант через _normalize().

ПРАВИЛА ЗНАКОВ:
- add: одинаковые знаки → сложение модулей, знак сохраняется;
  разные → из большего модуля вычитается меньший, знак большего
- subtract(x, y) = add(x, -y)
- multiply / divide: PLUS если знаки совпадают, иначе MINUS
- modulo: знак остатка равен знаку ДЕЛИМОГО (truncating семантика,
  не Euclidean и не floor как у встроенного int)
- inc / dec: переход через ноль меняет знак (+0 - 1 → -1, -1 + 1 → +0)

ПОРЯДОК: любой MINUS меньше любого PLUS; среди PLUS порядок по модулю
по возрастанию, среди MINUS по убыванию.

ВАЖНО: // и % у BigInt усекают к нулю:
    BigInt(-7) // 2 == -3,  BigInt(-7) % 2 == -1
тогда как у int: -7 // 2 == -4, -7 % 2 == 1.
"""

from enum import Enum
from typing import Union

from bignum.core.arith.text_codec import split_sign
from bignum.core.config import DEFAULT_CONTEXT, ArithmeticContext
from bignum.core.domain.magnitude import BigUInt
from bignum.core.errors import DivisionByZero

# =============================================================================
# ENUMS
# =============================================================================


class Sign(str, Enum):
    """Знак значения"""

    PLUS = "+"
    MINUS = "-"

    def flipped(self) -> "Sign":
        return Sign.MINUS if self is Sign.PLUS else Sign.PLUS

    @staticmethod
    def of_product(left: "Sign", right: "Sign") -> "Sign":
        """Знак произведения / частного: PLUS при совпадении знаков."""
        return Sign.PLUS if left is right else Sign.MINUS


# =============================================================================
# SIGNED VALUE
# =============================================================================


class BigInt:
    """
    Знаковое целое произвольной точности.

    Конструкторы:
        BigInt()              → +0
        BigInt(-42)           → из native int
        BigInt("-100")        → из десятичной строки с необязательным знаком
        BigInt(BigUInt(5))    → неотрицательное значение из величины
        BigInt(other)         → копия

    Raises:
        InvalidFormat: Некорректная десятичная строка
        TypeError: Неподдерживаемый тип значения
    """

    __slots__ = ("_sign", "_magnitude")

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: Union[int, str, BigUInt, "BigInt"] = 0):
        if isinstance(value, BigInt):
            self._sign = value._sign
            self._magnitude = value._magnitude.copy()
        elif isinstance(value, BigUInt):
            self._sign = Sign.PLUS
            self._magnitude = value.copy()
        elif isinstance(value, int):
            self._sign = Sign.MINUS if value < 0 else Sign.PLUS
            self._magnitude = BigUInt(abs(value))
        elif isinstance(value, str):
            negative, digits = split_sign(value)
            self._magnitude = BigUInt(digits)
            self._sign = Sign.MINUS if negative else Sign.PLUS
        else:
            raise TypeError(f"cannot build BigInt from {type(value).__name__}")
        self._normalize()

    @classmethod
    def from_magnitude(cls, sign: Sign, magnitude: BigUInt) -> "BigInt":
        """
        Построение из знака и модуля (модуль копируется).

        Отрицательный ноль нормализуется в +0.
        """
        instance = cls.__new__(cls)
        instance._sign = Sign(sign)
        instance._magnitude = magnitude.copy()
        instance._normalize()
        return instance

    def _normalize(self) -> None:
        if self._magnitude.is_zero():
            self._sign = Sign.PLUS

    # =========================================================================
    # ДОСТУП К СОСТОЯНИЮ
    # =========================================================================

    @property
    def sign(self) -> Sign:
        return self._sign

    @property
    def magnitude(self) -> BigUInt:
        """Модуль значения (копия)."""
        return self._magnitude.copy()

    def satisfies_invariant(self) -> bool:
        return self._magnitude.satisfies_invariant() and (
            not self._magnitude.is_zero() or self._sign is Sign.PLUS
        )

    def is_zero(self) -> bool:
        return self._magnitude.is_zero()

    def copy(self) -> "BigInt":
        return BigInt(self)

    @staticmethod
    def _coerce(other: object) -> Union["BigInt", None]:
        if isinstance(other, BigInt):
            return other
        if isinstance(other, (int, BigUInt)):
            return BigInt(other)
        return None

    # =========================================================================
    # ЗНАК
    # =========================================================================

    def negate(self) -> None:
        """Смена знака (in place); ноль остаётся +0."""
        if not self._magnitude.is_zero():
            self._sign = self._sign.flipped()

    def __neg__(self) -> "BigInt":
        result = self.copy()
        result.negate()
        return result

    def __pos__(self) -> "BigInt":
        return self.copy()

    def __abs__(self) -> "BigInt":
        return BigInt(self._magnitude)

    # =========================================================================
    # INCREMENT / DECREMENT
    # =========================================================================

    def inc(self) -> None:
        """
        Увеличение на 1 (in place).

        MINUS: модуль уменьшается, при достижении нуля знак становится PLUS.
        """
        if self._sign is Sign.MINUS:
            self._magnitude.dec()
            self._normalize()
        else:
            self._magnitude.inc()

    def dec(self) -> None:
        """
        Уменьшение на 1 (in place).

        +0 переходит в -1 без декремента беззнакового нуля;
        MINUS: модуль увеличивается.
        """
        if self._sign is Sign.MINUS:
            self._magnitude.inc()
        elif self._magnitude.is_zero():
            self._sign = Sign.MINUS
            self._magnitude.inc()
        else:
            self._magnitude.dec()

    # =========================================================================
    # СЛОЖЕНИЕ И ВЫЧИТАНИЕ
    # =========================================================================

    def __iadd__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented

        if self._sign is operand._sign:
            self._magnitude += operand._magnitude
        elif self._magnitude >= operand._magnitude:
            self._magnitude -= operand._magnitude
        else:
            self._magnitude = operand._magnitude - self._magnitude
            self._sign = operand._sign

        self._normalize()
        return self

    def __add__(self, other: object) -> "BigInt":
        return self.copy().__iadd__(other)

    __radd__ = __add__

    def __isub__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self.__iadd__(-operand)

    def __sub__(self, other: object) -> "BigInt":
        return self.copy().__isub__(other)

    def __rsub__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand - self

    # =========================================================================
    # УМНОЖЕНИЕ
    # =========================================================================

    def multiply(
        self,
        other: Union["BigInt", BigUInt, int],
        context: ArithmeticContext = DEFAULT_CONTEXT,
    ) -> "BigInt":
        """Чистое умножение с явным контекстом алгоритма."""
        operand = self._coerce(other)
        if operand is None:
            raise TypeError(f"cannot multiply BigInt by {type(other).__name__}")
        return BigInt.from_magnitude(
            Sign.of_product(self._sign, operand._sign),
            self._magnitude.multiply(operand._magnitude, context),
        )

    def __imul__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        self._sign = Sign.of_product(self._sign, operand._sign)
        self._magnitude *= operand._magnitude
        self._normalize()
        return self

    def __mul__(self, other: object) -> "BigInt":
        return self.copy().__imul__(other)

    __rmul__ = __mul__

    # =========================================================================
    # ДЕЛЕНИЕ (TRUNCATING)
    # =========================================================================

    def _divmod_parts(self, operand: "BigInt") -> tuple["BigInt", "BigInt"]:
        if operand._magnitude.is_zero():
            raise DivisionByZero("division by zero")
        quotient, remainder = divmod(self._magnitude, operand._magnitude)
        return (
            BigInt.from_magnitude(Sign.of_product(self._sign, operand._sign), quotient),
            BigInt.from_magnitude(self._sign, remainder),
        )

    def __divmod__(self, other: object) -> tuple["BigInt", "BigInt"]:
        """
        Деление с остатком (truncating).

        Частное усекается к нулю, остаток имеет знак делимого:
            self == quotient * other + remainder

        Raises:
            DivisionByZero: Если делитель равен нулю
        """
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return self._divmod_parts(operand)

    def __rdivmod__(self, other: object) -> tuple["BigInt", "BigInt"]:
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand._divmod_parts(self)

    def __ifloordiv__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        quotient, _ = self._divmod_parts(operand)
        self._sign, self._magnitude = quotient._sign, quotient._magnitude
        return self

    def __floordiv__(self, other: object) -> "BigInt":
        return self.copy().__ifloordiv__(other)

    def __rfloordiv__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand // self

    def __imod__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        _, remainder = self._divmod_parts(operand)
        self._sign, self._magnitude = remainder._sign, remainder._magnitude
        return self

    def __mod__(self, other: object) -> "BigInt":
        return self.copy().__imod__(other)

    def __rmod__(self, other: object) -> "BigInt":
        operand = self._coerce(other)
        if operand is None:
            return NotImplemented
        return operand % self

    # =========================================================================
    # ВОЗВЕДЕНИЕ В СТЕПЕНЬ
    # =========================================================================

    def pow(
        self,
        exponent: Union[BigUInt, int],
        context: ArithmeticContext = DEFAULT_CONTEXT,
    ) -> "BigInt":
        """
        Возведение в неотрицательную степень.

        Знак MINUS только для отрицательного основания и нечётного показателя.

        Raises:
            ValueError: Если exponent < 0
        """
        magnitude = self._magnitude.pow(exponent, context)
        odd = int(exponent) & 1
        sign = Sign.MINUS if self._sign is Sign.MINUS and odd else Sign.PLUS
        return BigInt.from_magnitude(sign, magnitude)

    def __pow__(self, exponent: object, modulo: object = None) -> "BigInt":
        if modulo is not None:
            raise TypeError("modular exponentiation is not supported")
        if not isinstance(exponent, (int, BigUInt)):
            return NotImplemented
        return self.pow(exponent)

    def __rpow__(self, base: object) -> "BigInt":
        operand = self._coerce(base)
        if operand is None:
            return NotImplemented
        return operand.pow(int(self))

    # =========================================================================
    # СРАВНЕНИЯ
    # =========================================================================

    def _compare_to(self, other: object) -> Union[int, None]:
        operand = self._coerce(other)
        if operand is None:
            return None

        if self._sign is not operand._sign:
            return -1 if self._sign is Sign.MINUS else 1

        if self._magnitude == operand._magnitude:
            by_magnitude = 0
        elif self._magnitude < operand._magnitude:
            by_magnitude = -1
        else:
            by_magnitude = 1
        return by_magnitude if self._sign is Sign.PLUS else -by_magnitude

    def __eq__(self, other: object) -> bool:
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
        return not self._magnitude.is_zero()

    def __int__(self) -> int:
        value = int(self._magnitude)
        return -value if self._sign is Sign.MINUS else value

    def __str__(self) -> str:
        prefix = "-" if self._sign is Sign.MINUS else ""
        return f"{prefix}{self._magnitude}"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"BigInt('{self}')"
