"""
Calendar Module

Bit-packed григорианская дата и календарные формулы.
"""

from valuekit.core.calendar.gregorian_date import DayOfWeek, DaySequence, GregorianDate
from valuekit.core.calendar.packing import (
    MAX_DAYS_SINCE_EPOCH,
    MAX_SUPPORTED_YEAR,
    MIN_DAYS_SINCE_EPOCH,
    MIN_SUPPORTED_YEAR,
    count_days_in_month,
    count_days_in_year,
    is_leap_year,
)

__all__ = [
    # Types
    "GregorianDate",
    "DayOfWeek",
    "DaySequence",
    # Range constants
    "MIN_SUPPORTED_YEAR",
    "MAX_SUPPORTED_YEAR",
    "MIN_DAYS_SINCE_EPOCH",
    "MAX_DAYS_SINCE_EPOCH",
    # Calendar helpers
    "is_leap_year",
    "count_days_in_year",
    "count_days_in_month",
]
