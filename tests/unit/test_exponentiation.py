"""
Тесты для Exponentiation
"""

import pytest

from bignum.core.arith.exponentiation import power
from bignum.core.arith.limbs import limbs_from_int, limbs_to_int
from bignum.core.config import ArithmeticContext


class TestPower:
    """Тесты для power"""

    def test_zero_to_zero_is_one(self) -> None:
        """0 ** 0 == 1"""
        assert power([0], 0) == [1]

    def test_any_to_zero_is_one(self) -> None:
        assert power([5, 6], 0) == [1]

    def test_zero_base(self) -> None:
        assert power([0], 17) == [0]

    def test_two_to_limb_width(self) -> None:
        assert power([2], 32) == [0, 1]

    @pytest.mark.parametrize("base,exponent", [(3, 1), (3, 200), (10, 77), (2**40 + 3, 13), (1, 1000)])
    def test_matches_native(self, base: int, exponent: int) -> None:
        result = power(limbs_from_int(base), exponent)
        assert limbs_to_int(result) == base**exponent

    def test_explicit_context(self) -> None:
        """Результат не зависит от порога Karatsuba"""
        context = ArithmeticContext(karatsuba_threshold=2)
        result = power(limbs_from_int(12345678901), 40, context)
        assert limbs_to_int(result) == 12345678901**40

    def test_negative_exponent(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            power([2], -1)

    def test_base_not_mutated(self) -> None:
        base = [3]
        power(base, 5)
        assert base == [3]
