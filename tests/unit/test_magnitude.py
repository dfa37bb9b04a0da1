"""
Тесты для BigUInt

Проверяет value type поверх движка:
1. Конструкторы и каноническую форму
2. Compound assignment vs бинарные операторы (мутация / копия)
3. Promotion native int операндов
4. Ошибки без мутации значения
5. Сравнения, конверсии, репрезентацию
"""

import pytest

from bignum import BigUInt
from bignum.core.config import ArithmeticContext
from bignum.core.errors import DecrementUnderflow, DivisionByZero, InvalidFormat, MagnitudeUnderflow

# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


class TestConstruction:
    """Тесты конструкторов BigUInt"""

    def test_default_is_zero(self) -> None:
        value = BigUInt()
        assert value.limbs == (0,)
        assert value.is_zero()
        assert value.satisfies_invariant()

    def test_from_int(self) -> None:
        assert BigUInt(4294967296).limbs == (0, 1)

    def test_from_str(self) -> None:
        assert BigUInt("340282367000166625996085689103316680705").limbs == (1, 1, 1, 1, 1)

    def test_from_limbs_trims(self) -> None:
        assert BigUInt([7, 0, 0]).limbs == (7,)
        assert BigUInt(()).limbs == (0,)

    def test_copy_constructor_is_independent(self) -> None:
        original = BigUInt(10)
        clone = BigUInt(original)
        clone += 1
        assert original == 10
        assert clone == 11

    def test_negative_int_rejected(self) -> None:
        with pytest.raises(ValueError):
            BigUInt(-1)

    def test_invalid_string_rejected(self) -> None:
        with pytest.raises(InvalidFormat):
            BigUInt("12 34")

    def test_unsupported_type_rejected(self) -> None:
        with pytest.raises(TypeError, match="cannot build BigUInt"):
            BigUInt(1.5)  # type: ignore[arg-type]

    def test_limbs_snapshot_is_read_only(self) -> None:
        value = BigUInt(5)
        assert isinstance(value.limbs, tuple)


# =============================================================================
# СЛОЖЕНИЕ И ВЫЧИТАНИЕ
# =============================================================================


class TestAddSub:
    """Тесты сложения и вычитания"""

    def test_carry_into_new_limb(self) -> None:
        """4294967295 + 1 → [0, 1]"""
        value = BigUInt("4294967295")
        value += 1
        assert value.limbs == (0, 1)

    def test_binary_add_does_not_mutate(self) -> None:
        a = BigUInt(5)
        b = BigUInt(7)
        c = a + b
        assert c == 12
        assert a == 5
        assert b == 7

    def test_iadd_mutates_receiver(self) -> None:
        a = BigUInt(5)
        alias = a
        a += BigUInt(2**70)
        assert alias is a
        assert int(a) == 2**70 + 5

    def test_self_aliasing(self) -> None:
        """x += x и x *= x корректны"""
        x = BigUInt(2**40 + 1)
        x += x
        assert int(x) == 2 * (2**40 + 1)
        y = BigUInt(2**40 + 1)
        y -= y
        assert y == 0
        z = BigUInt(2**40 + 1)
        z *= z
        assert int(z) == (2**40 + 1) ** 2

    def test_native_operands(self) -> None:
        value = BigUInt(10)
        assert int(value + 2**100) == 10 + 2**100
        assert int(2**100 + value) == 10 + 2**100
        assert int(2**100 - value) == 2**100 - 10

    def test_subtract_underflow(self) -> None:
        value = BigUInt(5)
        with pytest.raises(MagnitudeUnderflow):
            value -= 6
        assert value == 5

    def test_subtract_underflow_multi_limb(self) -> None:
        value = BigUInt(2**40)
        with pytest.raises(MagnitudeUnderflow):
            value -= BigUInt(2**41)
        assert int(value) == 2**40

    def test_inc_dec(self) -> None:
        value = BigUInt(4294967295)
        assert value.inc() is None
        assert value.limbs == (0, 1)
        value.dec()
        assert value.limbs == (4294967295,)

    def test_dec_zero_raises(self) -> None:
        value = BigUInt()
        with pytest.raises(DecrementUnderflow):
            value.dec()
        assert value.is_zero()


# =============================================================================
# УМНОЖЕНИЕ, ДЕЛЕНИЕ, СТЕПЕНЬ
# =============================================================================


class TestMulDivPow:
    """Тесты умножения, деления и возведения в степень"""

    def test_two_limb_max_squared(self) -> None:
        m = BigUInt([4294967295, 4294967295])
        assert (m * m).limbs == (1, 0, 4294967294, 4294967295)

    def test_multiply_with_context(self) -> None:
        a = BigUInt(3**100)
        b = BigUInt(5**80)
        context = ArithmeticContext(karatsuba_threshold=2)
        assert int(a.multiply(b, context)) == 3**100 * 5**80
        assert a.multiply(b, context) == a * b

    def test_multiply_type_error(self) -> None:
        with pytest.raises(TypeError):
            BigUInt(2).multiply("3")  # type: ignore[arg-type]

    def test_reference_division(self) -> None:
        a = BigUInt("193337807559688298930754147171641093868975707")
        b = BigUInt("4490169110513596108074543157")
        quotient, remainder = divmod(a, b)
        assert str(quotient) == "43058023606949152"
        assert str(remainder) == "1933748539936698160940422843"
        assert a // b == quotient
        assert a % b == remainder

    def test_inplace_division(self) -> None:
        value = BigUInt(10**30)
        value //= 10**10
        assert int(value) == 10**20
        value %= 7
        assert int(value) == 10**20 % 7

    def test_reflected_division(self) -> None:
        value = BigUInt(7)
        assert int(100 // value) == 14
        assert int(100 % value) == 2
        assert tuple(map(int, divmod(100, value))) == (14, 2)

    def test_division_by_zero_leaves_value(self) -> None:
        value = BigUInt(42)
        with pytest.raises(DivisionByZero):
            value //= 0
        with pytest.raises(DivisionByZero):
            value %= BigUInt()
        assert value == 42

    def test_pow(self) -> None:
        assert int(BigUInt(3) ** 200) == 3**200
        assert BigUInt(0).pow(0) == 1
        assert int(BigUInt(2).pow(BigUInt(100))) == 2**100
        assert int(2 ** BigUInt(10)) == 1024

    def test_pow_rejects_modulo(self) -> None:
        with pytest.raises(TypeError, match="modular"):
            pow(BigUInt(2), 3, 5)

    def test_pow_negative_exponent(self) -> None:
        with pytest.raises(ValueError):
            BigUInt(2).pow(-1)


# =============================================================================
# СРАВНЕНИЯ И КОНВЕРСИИ
# =============================================================================


class TestCompareConvert:
    """Тесты сравнений и конверсий"""

    def test_ordering(self) -> None:
        small = BigUInt(4294967295)
        large = BigUInt(4294967296)
        assert small < large
        assert large > small
        assert small <= BigUInt(small)
        assert large >= small
        assert small != large

    def test_native_comparison(self) -> None:
        value = BigUInt(2**40)
        assert value == 2**40
        assert value > 2**39
        assert value < 2**100
        assert value > -1

    def test_unsupported_comparison(self) -> None:
        assert BigUInt(1) != "1"
        with pytest.raises(TypeError):
            BigUInt(1) < "1"  # type: ignore[operator]

    def test_not_hashable(self) -> None:
        with pytest.raises(TypeError):
            hash(BigUInt(1))

    def test_conversions(self) -> None:
        value = BigUInt(10**25)
        assert int(value) == 10**25
        assert str(value) == "1" + "0" * 25
        assert repr(value) == f"BigUInt('{10**25}')"
        assert f"{BigUInt(42):>5}" == "   42"
        assert bool(BigUInt()) is False
        assert bool(value) is True

    def test_bit_length(self) -> None:
        assert BigUInt(2**64).bit_length() == 65


# =============================================================================
# АЛГЕБРАИЧЕСКИЕ ЗАКОНЫ
# =============================================================================

_MULTI_LIMB = [
    (2**64 - 1, 2**96 + 12345, 3**70),
    (10**40 + 7, 2**32, 7**55),
    (4294967295, 2**200 - 1, 1),
]


class TestLaws:
    """Алгебраические законы на многолимбовых операндах"""

    @pytest.mark.parametrize("a,b,c", _MULTI_LIMB)
    def test_addition_associative(self, a: int, b: int, c: int) -> None:
        x, y, z = BigUInt(a), BigUInt(b), BigUInt(c)
        assert (x + y) + z == x + (y + z)

    @pytest.mark.parametrize("a,b,c", _MULTI_LIMB)
    def test_multiplication_commutative(self, a: int, b: int, c: int) -> None:
        x, y = BigUInt(a), BigUInt(b)
        assert x * y == y * x
        assert (x * y).satisfies_invariant()

    @pytest.mark.parametrize("a,b,c", _MULTI_LIMB)
    def test_multiplication_associative(self, a: int, b: int, c: int) -> None:
        x, y, z = BigUInt(a), BigUInt(b), BigUInt(c)
        assert (x * y) * z == x * (y * z)

    @pytest.mark.parametrize("a", [2**64 - 1, 10**40 + 7, 3**150])
    def test_multiplicative_identity_and_zero(self, a: int) -> None:
        x = BigUInt(a)
        assert x * BigUInt(1) == x
        assert x * BigUInt(0) == BigUInt(0)
        assert (x * BigUInt(0)).limbs == (0,)

    @pytest.mark.parametrize("a,e", [(2**40 + 3, 1), (2**40 + 3, 7), (10**20, 12), (4294967295, 33)])
    def test_pow_step(self, a: int, e: int) -> None:
        """a.pow(e) == a.pow(e - 1) * a"""
        x = BigUInt(a)
        assert x.pow(e) == x.pow(e - 1) * x

    @pytest.mark.parametrize("a", [0, 4294967296, 10**50 - 1, 2**200 + 1, 3**300])
    def test_decimal_round_trip(self, a: int) -> None:
        """parse(format(x)) == x"""
        x = BigUInt(a)
        assert BigUInt(str(x)) == x
        assert BigUInt(str(x)).limbs == x.limbs
