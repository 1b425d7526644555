"""
Test suite for high-precision

Contains:
- tests/unit/          : Unit tests for limbs, NTT, radix conversion and BigInt
"""
