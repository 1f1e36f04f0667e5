"""
Sequences Module

Операторы над последовательностями, использующие Maybe.
"""

from valuekit.core.sequences.qperators import (
    collect_any,
    element_at_or_none,
    first_any,
    first_or_none,
    last_or_none,
    may_fold,
    may_reduce,
    parse_values,
    repeat_any,
    select_any,
    single_or_none,
    sum_any,
    where_any,
    zip_any,
)

__all__ = [
    # Lazy filters
    "select_any",
    "where_any",
    "zip_any",
    "collect_any",
    "parse_values",
    "repeat_any",
    # Aggregation
    "first_any",
    "sum_any",
    "may_fold",
    "may_reduce",
    # Element access
    "first_or_none",
    "last_or_none",
    "single_or_none",
    "element_at_or_none",
]
