"""
Contract Validation Module

Валидация JSON-представления BigInteger по JSON Schema.
"""

from .validators import (
    CONTRACT_SCHEMA_VERSION,
    BigIntegerValidator,
    ContractValidator,
    SchemaLoader,
    from_contract,
    to_contract,
    validate_big_integer,
)

__all__ = [
    # Constants
    "CONTRACT_SCHEMA_VERSION",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntegerValidator",
    # Functions
    "validate_big_integer",
    "to_contract",
    "from_contract",
]
