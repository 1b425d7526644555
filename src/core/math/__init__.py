"""
Core math modules

Примитивы над магнитудами radix 2^32, десятичная конверсия и NTT-умножение.
"""

# Limbs (магнитуды radix 2^32)
from src.core.math.limbs import (
    # Radix constants
    BASE,
    LIMB_BITS,
    LIMB_MASK,
    # Normalization / conversion
    compose_magnitude,
    is_zero_magnitude,
    split_magnitude,
    trim_leading_zeros,
    validate_limb,
    # Comparison
    compare_magnitudes,
    # Additive
    add_magnitudes,
    sub_magnitudes,
    # Increment / decrement
    decrement_magnitude,
    increment_magnitude,
    # Bitwise
    and_magnitudes,
    or_magnitudes,
    xor_magnitudes,
)

# Modular arithmetic (поле Z/MOD)
from src.core.math.modular import (
    MAX_TRANSFORM_LOG2,
    MOD,
    ROOT,
    modinv,
    modpow,
)

# NTT multiply
from src.core.math.ntt import (
    MAX_DIGIT_BITS,
    MIN_DIGIT_BITS,
    TransformSizeError,
    choose_digit_bits,
    compose_limbs,
    multiply_magnitudes,
    root_of_unity,
    root_table,
    split_digits,
    transform,
)

# Radix conversion (decimal text)
from src.core.math.radix import (
    DECIMAL_GROUP_BASE,
    DECIMAL_GROUP_DIGITS,
    BigIntParseError,
    Radix,
    UnsupportedRadixError,
    decimal_to_limbs,
    is_decimal_digit,
    limbs_to_decimal,
    require_decimal,
)

__all__ = [
    # Limbs: Radix constants
    "BASE",
    "LIMB_BITS",
    "LIMB_MASK",
    # Limbs: Normalization / conversion
    "compose_magnitude",
    "is_zero_magnitude",
    "split_magnitude",
    "trim_leading_zeros",
    "validate_limb",
    # Limbs: Comparison
    "compare_magnitudes",
    # Limbs: Additive
    "add_magnitudes",
    "sub_magnitudes",
    # Limbs: Increment / decrement
    "decrement_magnitude",
    "increment_magnitude",
    # Limbs: Bitwise
    "and_magnitudes",
    "or_magnitudes",
    "xor_magnitudes",
    # Modular: Constants
    "MAX_TRANSFORM_LOG2",
    "MOD",
    "ROOT",
    # Modular: Functions
    "modinv",
    "modpow",
    # NTT: Constants
    "MAX_DIGIT_BITS",
    "MIN_DIGIT_BITS",
    # NTT: Exceptions
    "TransformSizeError",
    # NTT: Functions
    "choose_digit_bits",
    "compose_limbs",
    "multiply_magnitudes",
    "root_of_unity",
    "root_table",
    "split_digits",
    "transform",
    # Radix: Constants
    "DECIMAL_GROUP_BASE",
    "DECIMAL_GROUP_DIGITS",
    # Radix: Types
    "Radix",
    # Radix: Exceptions
    "BigIntParseError",
    "UnsupportedRadixError",
    # Radix: Functions
    "decimal_to_limbs",
    "is_decimal_digit",
    "limbs_to_decimal",
    "require_decimal",
]
