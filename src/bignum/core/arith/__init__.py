"""
Core arithmetic engine для bignum

Чистые алгоритмы над каноническими последовательностями лимбов (list[int]).
"""

# Limb-Vector Core
from bignum.core.arith.limbs import (
    DOUBLE_LIMB_BASE,
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MASK,
    bit_length,
    canonical_from_limbs,
    is_one,
    is_zero,
    iter_bits_msb,
    limbs_from_int,
    limbs_to_int,
    satisfies_invariant,
    trim,
    validate_limb,
)

# Comparator
from bignum.core.arith.comparison import (
    compare,
    compare_double_limb,
    compare_limb,
    compare_native,
)

# Add/Subtract Engine
from bignum.core.arith.addsub import (
    add,
    add_inplace,
    add_limb_inplace,
    add_shifted_inplace,
    decrement_inplace,
    increment_inplace,
    sub_inplace,
    sub_limb_inplace,
    subtract,
)

# Multiplication Engine
from bignum.core.arith.multiplication import (
    karatsuba_multiply,
    multiply,
    multiply_limb,
    multiply_limb_inplace,
    schoolbook_multiply,
)

# Division Engine
from bignum.core.arith.division import (
    divide,
    divmod_limb,
    divmod_magnitude,
    modulo,
)

# Exponentiation
from bignum.core.arith.exponentiation import power

# Text Codec
from bignum.core.arith.text_codec import (
    format_decimal,
    parse_decimal,
    split_sign,
)

__all__ = [
    # Limb-Vector Core
    "DOUBLE_LIMB_BASE",
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    "bit_length",
    "canonical_from_limbs",
    "is_one",
    "is_zero",
    "iter_bits_msb",
    "limbs_from_int",
    "limbs_to_int",
    "satisfies_invariant",
    "trim",
    "validate_limb",
    # Comparator
    "compare",
    "compare_double_limb",
    "compare_limb",
    "compare_native",
    # Add/Subtract Engine
    "add",
    "add_inplace",
    "add_limb_inplace",
    "add_shifted_inplace",
    "decrement_inplace",
    "increment_inplace",
    "sub_inplace",
    "sub_limb_inplace",
    "subtract",
    # Multiplication Engine
    "karatsuba_multiply",
    "multiply",
    "multiply_limb",
    "multiply_limb_inplace",
    "schoolbook_multiply",
    # Division Engine
    "divide",
    "divmod_limb",
    "divmod_magnitude",
    "modulo",
    # Exponentiation
    "power",
    # Text Codec
    "format_decimal",
    "parse_decimal",
    "split_sign",
]
