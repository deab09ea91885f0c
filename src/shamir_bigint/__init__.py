"""
shamir_bigint — arbitrary-precision signed integer arithmetic.

Exact addition, subtraction, multiplication, truncating division,
comparison and decimal text conversion over base-10^9 limbs.
"""

import logging

from shamir_bigint.core.config import DEFAULT_CONVERSION_CONFIG, ConversionConfig
from shamir_bigint.core.domain import BigInteger
from shamir_bigint.core.errors import BigIntegerError, DivisionByZero, InvalidFormat

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "BigInteger",
    "BigIntegerError",
    "ConversionConfig",
    "DEFAULT_CONVERSION_CONFIG",
    "DivisionByZero",
    "InvalidFormat",
]
