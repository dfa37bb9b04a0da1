"""
Тесты для Text Codec

Проверяет:
1. Разбор десятичных строк (включая переход через границу лимба)
2. Форматирование величин
3. Отклонение некорректного ввода через InvalidFormat
"""

import pytest

from bignum.core.arith.limbs import limbs_from_int
from bignum.core.arith.text_codec import format_decimal, parse_decimal, split_sign
from bignum.core.errors import BigNumError, InvalidFormat


class TestParseDecimal:
    """Тесты для parse_decimal"""

    def test_zero(self) -> None:
        assert parse_decimal("0") == [0]

    def test_leading_zeros_accepted(self) -> None:
        assert parse_decimal("000042") == [42]
        assert parse_decimal("0000") == [0]

    def test_limb_boundary(self) -> None:
        assert parse_decimal("4294967295") == [4294967295]
        assert parse_decimal("4294967296") == [0, 1]

    def test_five_limb_value(self) -> None:
        """1 + B + B^2 + B^3 + B^4 → [1, 1, 1, 1, 1]"""
        assert parse_decimal("340282367000166625996085689103316680705") == [1, 1, 1, 1, 1]

    def test_matches_native(self) -> None:
        value = 3**300
        assert parse_decimal(str(value)) == limbs_from_int(value)

    def test_empty_rejected(self) -> None:
        with pytest.raises(InvalidFormat, match="empty digit sequence"):
            parse_decimal("")

    @pytest.mark.parametrize("text", ["12a4", " 12", "12 ", "1_000", "-5", "+5", "١٢"])
    def test_non_digit_rejected(self, text: str) -> None:
        with pytest.raises(InvalidFormat, match="non-digit character"):
            parse_decimal(text)

    def test_error_carries_details(self) -> None:
        with pytest.raises(InvalidFormat) as exc_info:
            parse_decimal("12x")
        assert exc_info.value.text == "12x"
        assert "position 2" in exc_info.value.reason

    def test_invalid_format_is_value_error(self) -> None:
        """InvalidFormat перехватывается как ValueError и BigNumError"""
        with pytest.raises(ValueError):
            parse_decimal("abc")
        with pytest.raises(BigNumError):
            parse_decimal("abc")

    def test_non_string_rejected(self) -> None:
        with pytest.raises(TypeError, match="must be str"):
            parse_decimal(42)  # type: ignore[arg-type]


class TestFormatDecimal:
    """Тесты для format_decimal"""

    def test_zero(self) -> None:
        assert format_decimal([0]) == "0"

    def test_limb_boundary(self) -> None:
        assert format_decimal([0, 1]) == "4294967296"

    def test_five_limb_value(self) -> None:
        assert format_decimal([1, 1, 1, 1, 1]) == "340282367000166625996085689103316680705"

    @pytest.mark.parametrize("value", [1, 9, 10, 10**9, 10**50 - 1, 2**200 + 1])
    def test_matches_native(self, value: int) -> None:
        assert format_decimal(limbs_from_int(value)) == str(value)


class TestSplitSign:
    """Тесты для split_sign"""

    def test_signs(self) -> None:
        assert split_sign("-100") == (True, "100")
        assert split_sign("+7") == (False, "7")
        assert split_sign("42") == (False, "42")

    def test_only_one_sign_removed(self) -> None:
        assert split_sign("--1") == (True, "-1")

    def test_bare_sign(self) -> None:
        assert split_sign("-") == (True, "")
