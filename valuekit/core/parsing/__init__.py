"""
Parsing Module

Парсеры строк, возвращающие Maybe.
"""

from valuekit.core.parsing.may import (
    may_get_value,
    parse_bool,
    parse_datetime,
    parse_datetime_exact,
    parse_decimal,
    parse_enum,
    parse_float,
    parse_int,
)

__all__ = [
    "parse_int",
    "parse_float",
    "parse_decimal",
    "parse_bool",
    "parse_enum",
    "parse_datetime",
    "parse_datetime_exact",
    "may_get_value",
]
