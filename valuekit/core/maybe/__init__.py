"""
Maybe Module

Optional value type, комбинаторы, трёхзначная логика и стратегии сравнения.
"""

from valuekit.core.maybe.combinators import (
    MAYBE_UNIT,
    MAYBE_ZERO,
    compose,
    compose_back,
    empty_sequence,
    first_some,
    flatten,
    guard,
    invoke,
    lift,
    use,
    use_select,
    value_or_empty,
)
from valuekit.core.maybe.comparers import (
    DEFAULT_COMPARER,
    DEFAULT_EQUALITY_COMPARER,
    DEFAULT_MAYBE_COMPARER,
    Comparer,
    EqualityComparer,
    MaybeComparer,
)
from valuekit.core.maybe.logic import FALSE, TRUE, UNKNOWN, and_, negate, or_
from valuekit.core.maybe.maybe import (
    NOTHING,
    Maybe,
    Nothing,
    Repeated,
    Some,
    from_nullable,
    none,
    of,
    some,
    some_or_none,
)

__all__ = [
    # Types
    "Maybe",
    "Some",
    "Nothing",
    "NOTHING",
    "Repeated",
    # Factories
    "of",
    "some",
    "none",
    "some_or_none",
    "from_nullable",
    # Combinators
    "MAYBE_UNIT",
    "MAYBE_ZERO",
    "flatten",
    "guard",
    "first_some",
    "lift",
    "invoke",
    "compose",
    "compose_back",
    "use",
    "use_select",
    "empty_sequence",
    "value_or_empty",
    # Three-valued logic
    "TRUE",
    "FALSE",
    "UNKNOWN",
    "negate",
    "and_",
    "or_",
    # Comparers
    "EqualityComparer",
    "Comparer",
    "MaybeComparer",
    "DEFAULT_EQUALITY_COMPARER",
    "DEFAULT_COMPARER",
    "DEFAULT_MAYBE_COMPARER",
]
