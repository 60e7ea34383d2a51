"""
Test suite for nonneg_float

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Property-based tests (hypothesis) for the invariants
- tests/performance/   : Timing checks for construction paths
"""
