"""
Errors: таксономия ошибок арифметического движка

Два класса ошибок с разной политикой обработки:

1. Recoverable (BigNumError): ошибки входных данных на границе API.
   Вызывающий код может перехватить исключение и повторить операцию
   с исправленным вводом. Значение-приёмник при этом не изменяется.
   - InvalidFormat: некорректная десятичная строка
   - DivisionByZero: деление или остаток с нулевым делителем

2. Fail-fast (InvariantViolation): нарушение предусловия беззнакового
   движка. Это ошибка в последовательности операций вызывающего кода,
   а не ошибка ввода. Никогда не "исправляется" (например, clamp к нулю).
   - MagnitudeUnderflow: a - b при a < b
   - DecrementUnderflow: декремент беззнакового нуля

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Любая ошибка выбрасывается ДО мутации значения-приёмника
2. InvariantViolation выбрасывается явно (не через assert) и не
   отключается флагом -O
"""


# =============================================================================
# RECOVERABLE ERRORS
# =============================================================================


class BigNumError(Exception):
    """Базовый класс recoverable ошибок арифметического движка."""

    pass


class InvalidFormat(BigNumError, ValueError):
    """
    Некорректная десятичная строка.

    Выбрасывается при пустом вводе, пустой последовательности цифр
    после знака или любом символе, отличном от десятичной цифры.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid decimal literal {text!r}: {reason}")


class DivisionByZero(BigNumError, ZeroDivisionError):
    """
    Деление или взятие остатка с нулевым делителем.

    Наследуется от ZeroDivisionError, чтобы код, написанный для
    встроенного int, корректно перехватывал ошибку.
    """

    pass


# =============================================================================
# FAIL-FAST INVARIANT VIOLATIONS
# =============================================================================


class InvariantViolation(AssertionError):
    """
    Нарушение предусловия беззнакового движка.

    Сигнализирует о баге в вызывающем коде. Не предназначено для
    перехвата в production-логике: операция должна завершиться громко.
    """

    pass


class MagnitudeUnderflow(InvariantViolation):
    """
    Беззнаковое вычитание с уменьшаемым меньше вычитаемого.

    Знаковая обёртка (BigInt) никогда не вызывает это исключение:
    она выбирает порядок операндов через смену знака.
    """

    pass


class DecrementUnderflow(InvariantViolation):
    """Декремент беззнакового нуля."""

    pass
