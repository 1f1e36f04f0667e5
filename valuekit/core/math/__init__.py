"""
Core math modules для valuekit

Целочисленные примитивы с эмуляцией переполнения int32.
"""

from valuekit.core.math.int_arithmetic import (
    # Int32 bounds
    INT32_MAX,
    INT32_MIN,
    # Checked arithmetic
    checked_add,
    is_int32,
    # Division
    adjusted_modulo,
    floor_divmod,
    truncated_divmod,
    # Validation
    validate_in_range,
    validate_non_negative,
)

__all__ = [
    # Int32 bounds
    "INT32_MIN",
    "INT32_MAX",
    # Checked arithmetic
    "is_int32",
    "checked_add",
    # Division
    "floor_divmod",
    "truncated_divmod",
    "adjusted_modulo",
    # Validation
    "validate_in_range",
    "validate_non_negative",
]
