"""
Test suite for valuekit

Contains:
- tests/unit/          : Unit tests for individual modules
- tests/property/      : Property-based tests (hypothesis) for algebraic laws
"""
