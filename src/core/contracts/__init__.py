"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных BigInt.
"""

from .validators import (
    ContractValidator,
    LimbRecordValidator,
    SchemaLoader,
    validate_limb_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "LimbRecordValidator",
    # Functions
    "validate_limb_record",
]
