"""
Тесты таксономии ошибок
"""

import pytest

from bignum import (
    BigInt,
    BigNumError,
    BigUInt,
    DecrementUnderflow,
    DivisionByZero,
    InvalidFormat,
    InvariantViolation,
    MagnitudeUnderflow,
)


class TestHierarchy:
    """Тесты иерархии исключений"""

    def test_recoverable_errors(self) -> None:
        assert issubclass(InvalidFormat, BigNumError)
        assert issubclass(InvalidFormat, ValueError)
        assert issubclass(DivisionByZero, BigNumError)
        assert issubclass(DivisionByZero, ZeroDivisionError)

    def test_invariant_violations_are_not_recoverable(self) -> None:
        """Fail-fast ошибки не перехватываются как BigNumError"""
        assert issubclass(MagnitudeUnderflow, InvariantViolation)
        assert issubclass(DecrementUnderflow, InvariantViolation)
        assert issubclass(InvariantViolation, AssertionError)
        assert not issubclass(InvariantViolation, BigNumError)

    def test_invalid_format_message(self) -> None:
        error = InvalidFormat("1x", "non-digit character 'x' at position 1")
        assert str(error) == "Invalid decimal literal '1x': non-digit character 'x' at position 1"


class TestNoMutationOnError:
    """Значение сохраняет последнее каноническое состояние после ошибки"""

    def test_biguint_after_failed_operations(self) -> None:
        value = BigUInt(2**50)
        for operation in (
            lambda: value.__isub__(2**51),
            lambda: value.__ifloordiv__(0),
            lambda: value.__imod__(BigUInt()),
        ):
            with pytest.raises((InvariantViolation, BigNumError)):
                operation()
            assert int(value) == 2**50
            assert value.satisfies_invariant()

    def test_signed_never_underflows(self) -> None:
        """BigInt выбирает порядок операндов и не вызывает MagnitudeUnderflow"""
        value = BigInt(3)
        value -= 10**30
        assert int(value) == 3 - 10**30
