"""
Domain models and value objects.

Contains the BigInteger value type.
"""

from shamir_bigint.core.domain.big_integer import BigInteger

__all__ = [
    "BigInteger",
]
