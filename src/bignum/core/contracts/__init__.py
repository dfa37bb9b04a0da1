"""
JSON Schema контракты для конфигурации движка.
"""

from bignum.core.contracts.validators import (
    SCHEMA_DIR,
    ArithmeticContextValidator,
    ContractValidator,
    SchemaLoader,
    validate_arithmetic_context,
)

__all__ = [
    "SCHEMA_DIR",
    "ArithmeticContextValidator",
    "ContractValidator",
    "SchemaLoader",
    "validate_arithmetic_context",
]
