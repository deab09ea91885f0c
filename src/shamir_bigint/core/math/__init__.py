"""
Core math modules для shamir_bigint

Примитивы над magnitude в основании 10^9 и десятичный кодек.
"""

# Limbs
from shamir_bigint.core.math.limbs import (
    # Constants
    BASE,
    LIMB_DIGITS,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    # Types
    Magnitude,
    # Normalization
    is_zero_magnitude,
    normalize,
    normalize_magnitude,
    # Conversion
    int_to_magnitude,
    magnitude_to_int,
    # Arithmetic
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    divmod_small,
    mul_magnitudes,
    mul_small,
    sub_magnitudes,
)

# Decimal codec
from shamir_bigint.core.math.decimal_codec import (
    DECIMAL_PATTERN,
    format_decimal,
    parse_decimal,
)

__all__ = [
    # Limbs — Constants
    "BASE",
    "LIMB_DIGITS",
    "ONE_MAGNITUDE",
    "ZERO_MAGNITUDE",
    # Limbs — Types
    "Magnitude",
    # Limbs — Normalization
    "is_zero_magnitude",
    "normalize",
    "normalize_magnitude",
    # Limbs — Conversion
    "int_to_magnitude",
    "magnitude_to_int",
    # Limbs — Arithmetic
    "add_magnitudes",
    "compare_magnitudes",
    "divmod_magnitudes",
    "divmod_small",
    "mul_magnitudes",
    "mul_small",
    "sub_magnitudes",
    # Decimal codec
    "DECIMAL_PATTERN",
    "format_decimal",
    "parse_decimal",
]
