"""
Domain models and value objects.

Contains the arbitrary-precision integer BigInt, its text I/O entry points
and the serializable LimbRecord.
"""

from src.core.domain.big_integer import (
    BigInt,
    ParseResult,
    format_big_int,
    parse_big_int,
)
from src.core.domain.limb_record import LimbRecord

__all__ = [
    # BigInt
    "BigInt",
    # Text I/O
    "ParseResult",
    "parse_big_int",
    "format_big_int",
    # Serialization
    "LimbRecord",
]
