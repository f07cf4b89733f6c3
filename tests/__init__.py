"""
Test suite for ordered_float

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Hypothesis property tests for the order/hash invariants
"""
