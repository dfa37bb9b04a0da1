"""
Text Codec: десятичный разбор и форматирование

Parse: цифры обрабатываются слева направо, value = value * 10 + digit
(умножение на лимб и сложение с лимбом из движка).
Format: повторное деление на 10 через divmod_limb, цифры остатков
собираются от младшей к старшей и выводятся в обратном порядке.

Формат ввода строгий: допускаются только ASCII цифры 0-9 (и один
ведущий знак для знаковых значений). Пробелы, разделители и
не-ASCII цифры → InvalidFormat.
"""

from typing import Final

from bignum.core.arith.addsub import add_limb_inplace
from bignum.core.arith.division import divmod_limb
from bignum.core.arith.limbs import is_zero
from bignum.core.arith.multiplication import multiply_limb_inplace
from bignum.core.errors import InvalidFormat

DECIMAL_DIGITS: Final[str] = "0123456789"

DECIMAL_RADIX: Final[int] = 10


def split_sign(text: str) -> tuple[bool, str]:
    """
    Отделение необязательного ведущего знака.

    Returns:
        (negative, digits): negative=True для '-', остаток строки

    Examples:
        >>> split_sign("-100")
        (True, '100')
        >>> split_sign("+7")
        (False, '7')
        >>> split_sign("42")
        (False, '42')
    """
    if text[:1] == "-":
        return True, text[1:]
    if text[:1] == "+":
        return False, text[1:]
    return False, text


def parse_decimal(text: str) -> list[int]:
    """
    Разбор десятичной строки без знака в каноническую величину.

    Args:
        text: Строка из цифр 0-9 (ведущие нули допустимы)

    Returns:
        Каноническая величина

    Raises:
        InvalidFormat: Если строка пустая или содержит не-цифру
        TypeError: Если text не str
    """
    if not isinstance(text, str):
        raise TypeError(f"decimal literal must be str, got {type(text).__name__}")
    if not text:
        raise InvalidFormat(text, "empty digit sequence")

    value = [0]
    for position, char in enumerate(text):
        if char not in DECIMAL_DIGITS:
            raise InvalidFormat(text, f"non-digit character {char!r} at position {position}")
        multiply_limb_inplace(value, DECIMAL_RADIX)
        add_limb_inplace(value, ord(char) - ord("0"))
    return value


def format_decimal(limbs: list[int]) -> str:
    """
    Форматирование канонической величины в десятичную строку.

    Examples:
        >>> format_decimal([0])
        '0'
        >>> format_decimal([0, 1])
        '4294967296'
    """
    if is_zero(limbs):
        return "0"

    digits: list[str] = []
    current = limbs
    while not is_zero(current):
        current, remainder = divmod_limb(current, DECIMAL_RADIX)
        digits.append(DECIMAL_DIGITS[remainder])
    return "".join(reversed(digits))
