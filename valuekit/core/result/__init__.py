"""
Result Module

Result[T] = Ok(value) | Err(message): Option-тип с объяснением ошибки.
"""

from valuekit.core.result.result import (
    Err,
    Ok,
    Result,
    err,
    flatten,
    from_maybe,
    none,
    of,
    ok,
    some_or_none,
    try_with,
)

__all__ = [
    # Types
    "Result",
    "Ok",
    "Err",
    # Factories
    "of",
    "ok",
    "err",
    "none",
    "some_or_none",
    "flatten",
    # Bridges
    "from_maybe",
    "try_with",
]
