"""
May — Parsers Returning Maybe

Обёртки над встроенными парсерами: Some(parsed) при успехе, NOTHING при
ошибке разбора или None на входе. Исключения парсеров не выходят наружу.
"""

import datetime
import decimal
from enum import Enum
from typing import Any, Hashable, Mapping, TypeVar

from valuekit.core.errors import check_not_none
from valuekit.core.maybe.maybe import NOTHING, Maybe, Some, of

E = TypeVar("E", bound=Enum)
V = TypeVar("V")

_TRUE_LITERAL = "true"
_FALSE_LITERAL = "false"


# =============================================================================
# ЧИСЛА
# =============================================================================


def parse_int(value: str | None) -> Maybe[int]:
    """
    Examples:
        >>> parse_int(" 42 ")
        Some(42)
        >>> parse_int("4.2")
        Nothing
    """
    if value is None:
        return NOTHING
    try:
        return Some(int(value))
    except (TypeError, ValueError):
        return NOTHING


def parse_float(value: str | None) -> Maybe[float]:
    if value is None:
        return NOTHING
    try:
        return Some(float(value))
    except (TypeError, ValueError):
        return NOTHING


def parse_decimal(value: str | None) -> Maybe[decimal.Decimal]:
    if value is None:
        return NOTHING
    try:
        parsed = decimal.Decimal(value.strip())
    except (AttributeError, decimal.InvalidOperation):
        return NOTHING
    # NaN/Infinity не считаются числами
    return Some(parsed) if parsed.is_finite() else NOTHING


def parse_bool(value: str | None) -> Maybe[bool]:
    """'true' / 'false' без учёта регистра и пробелов по краям."""
    if not isinstance(value, str):
        return NOTHING
    literal = value.strip().lower()
    if literal == _TRUE_LITERAL:
        return Some(True)
    if literal == _FALSE_LITERAL:
        return Some(False)
    return NOTHING


# =============================================================================
# ENUM
# =============================================================================


def parse_enum(enum_type: type[E], value: str | None, ignore_case: bool = True) -> Maybe[E]:
    """
    Разбор члена Enum по имени или по целочисленному значению.

    Args:
        enum_type: Класс Enum
        value: Имя члена или целое значение
        ignore_case: Сравнение имён без учёта регистра (default: True)

    Raises:
        ArgumentNoneError: Если enum_type is None
    """
    check_not_none(enum_type, "enum_type")
    if not isinstance(value, str):
        return NOTHING
    name = value.strip()
    if not name:
        return NOTHING

    members = enum_type.__members__
    if name in members:
        return Some(members[name])
    if ignore_case:
        folded = name.casefold()
        for member_name, member in members.items():
            if member_name.casefold() == folded:
                return Some(member)

    number = parse_int(name)
    if number.is_some():
        try:
            return Some(enum_type(number.value))
        except ValueError:
            return NOTHING
    return NOTHING


# =============================================================================
# ДАТА И ВРЕМЯ
# =============================================================================


def parse_datetime(value: str | None) -> Maybe[datetime.datetime]:
    """ISO 8601 (datetime.fromisoformat)."""
    if not isinstance(value, str):
        return NOTHING
    try:
        return Some(datetime.datetime.fromisoformat(value.strip()))
    except ValueError:
        return NOTHING


def parse_datetime_exact(value: str | None, fmt: str) -> Maybe[datetime.datetime]:
    """
    Разбор по формату strptime.

    Raises:
        ArgumentNoneError: Если fmt is None
    """
    check_not_none(fmt, "fmt")
    if not isinstance(value, str):
        return NOTHING
    try:
        return Some(datetime.datetime.strptime(value, fmt))
    except ValueError:
        return NOTHING


# =============================================================================
# КОЛЛЕКЦИИ
# =============================================================================


def may_get_value(mapping: Mapping[Any, V], key: Hashable | None) -> Maybe[V]:
    """
    Значение по ключу или NOTHING (ключ None или отсутствует).

    Raises:
        ArgumentNoneError: Если mapping is None
    """
    check_not_none(mapping, "mapping")
    if key is None or key not in mapping:
        return NOTHING
    return of(mapping[key])
