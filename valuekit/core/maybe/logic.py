"""
Three-Valued Logic — Maybe[bool]

Maybe[bool] как трёхзначная логика Клини: Nothing означает "неизвестно".

or_ (строка: left, столбец: right):

    |         | TRUE | FALSE   | UNKNOWN |
    | TRUE    | TRUE | TRUE    | TRUE    |
    | FALSE   | TRUE | FALSE   | UNKNOWN |
    | UNKNOWN | TRUE | UNKNOWN | UNKNOWN |

and_:

    |         | TRUE    | FALSE | UNKNOWN |
    | TRUE    | TRUE    | FALSE | UNKNOWN |
    | FALSE   | FALSE   | FALSE | FALSE   |
    | UNKNOWN | UNKNOWN | FALSE | UNKNOWN |

В отличие от SQL NULL, UNKNOWN == UNKNOWN истинно.
"""

from typing import Final

from valuekit.core.maybe.maybe import NOTHING, Maybe, Some

TRUE: Final[Maybe[bool]] = Some(True)
FALSE: Final[Maybe[bool]] = Some(False)
UNKNOWN: Final[Maybe[bool]] = NOTHING


def _is(value: Maybe[bool], expected: bool) -> bool:
    return value.is_some() and bool(value.value) is expected


def negate(value: Maybe[bool]) -> Maybe[bool]:
    """NOT: TRUE <-> FALSE, UNKNOWN остаётся UNKNOWN."""
    if value.is_none():
        return UNKNOWN
    return FALSE if value.value else TRUE


def or_(left: Maybe[bool], right: Maybe[bool]) -> Maybe[bool]:
    """Известный TRUE в любом операнде даёт TRUE."""
    if _is(left, True) or _is(right, True):
        return TRUE
    if _is(left, False) and _is(right, False):
        return FALSE
    return UNKNOWN


def and_(left: Maybe[bool], right: Maybe[bool]) -> Maybe[bool]:
    """Известный FALSE в любом операнде даёт FALSE."""
    if _is(left, False) or _is(right, False):
        return FALSE
    if _is(left, True) and _is(right, True):
        return TRUE
    return UNKNOWN
