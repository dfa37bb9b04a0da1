"""
Test suite for bignum

Contains:
- tests/unit/          : Unit tests for the limb engine, value types,
                         configuration and contracts
"""
