"""
Bit-Packed Date — Binary Layout and Calendar Formulae

Дата хранится как одно 32-битное знаковое целое:

    year  — 23 бита (используется не более 14 для 1..9999)
    month —  4 бита (1..12)
    day   —  5 бит  (1..31)

    binary = (year << 9) | (month << 5) | day

Старший байт всегда равен нулю, поэтому сравнение дат сводится к сравнению
целых чисел.

Все формулы работают с пропорциональным (proleptic) григорианским
календарём. Для вычислений с эпохой год "начинается" в марте: тогда длины
месяцев (кроме февраля, который становится последним) описываются
линейной формулой (153 * m + 2) // 5.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. unpack(pack(y, m, d)) == (y, m, d) для всех валидных троек
2. days_since_epoch(*from_days_since_epoch(n)) == n для n in [0, 3_652_058]
3. Ненормализованные (lenient) тройки создаются только когда валидность
   уже доказана арифметикой вызывающего кода
4. День недели по правилу Doomsday: Sunday = 0 ... Saturday = 6
"""

import logging
from typing import Final

from valuekit.core.errors import ArgumentOutOfRangeError, InvalidBinaryInputError
from valuekit.core.math.int_arithmetic import adjusted_modulo

logger = logging.getLogger(__name__)

# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

MIN_SUPPORTED_YEAR: Final[int] = 1
MAX_SUPPORTED_YEAR: Final[int] = 9999

# Дни с эпохи (0001-01-01 -> 0, 9999-12-31 -> 3_652_058)
MIN_DAYS_SINCE_EPOCH: Final[int] = 0
MAX_DAYS_SINCE_EPOCH: Final[int] = 3_652_058

DAYS_PER_400_YEARS: Final[int] = 400 * 365 + 97
DAYS_FROM_MARCH_TO_DECEMBER: Final[int] = 306

# =============================================================================
# БИНАРНЫЙ ФОРМАТ
# =============================================================================

YEAR_SHIFT: Final[int] = 9
MONTH_SHIFT: Final[int] = 5
MONTH_MASK: Final[int] = (1 << 4) - 1
DAY_MASK: Final[int] = (1 << 5) - 1
MONTH_DAY_MASK: Final[int] = (1 << 9) - 1

# Sentinels: бинарные (month, day) для выбранных дат
END_OF_FEBRUARY: Final[int] = (2 << 5) | 28
INTERCALARY_DAY: Final[int] = (2 << 5) | 29
START_OF_MARCH: Final[int] = (3 << 5) | 1
START_OF_YEAR: Final[int] = (1 << 5) | 1
END_OF_YEAR: Final[int] = (12 << 5) | 31


def pack(year: int, month: int, day: int) -> int:
    """
    Упаковка (year, month, day) в 32-битное целое. Без валидации.

    Examples:
        >>> pack(2000, 1, 1)
        1024033
    """
    return (year << YEAR_SHIFT) | (month << MONTH_SHIFT) | day


def unpack(binary: int) -> tuple[int, int, int]:
    """Распаковка бинарного представления в (year, month, day)."""
    return binary >> YEAR_SHIFT, (binary >> MONTH_SHIFT) & MONTH_MASK, binary & DAY_MASK


def year_month_part(binary: int) -> int:
    """Бинарная пара (year, month): binary >> 5."""
    return binary >> MONTH_SHIFT


def month_day_part(binary: int) -> int:
    """Бинарная пара (month, day): младшие 9 бит."""
    return binary & MONTH_DAY_MASK


# =============================================================================
# КАЛЕНДАРНЫЕ ТАБЛИЦЫ
# =============================================================================


def is_leap_year(year: int) -> bool:
    """
    Високосный год: кратен 4 и, если вековой, кратен 400.

    Examples:
        >>> is_leap_year(2000), is_leap_year(1900), is_leap_year(2008)
        (True, False, True)
    """
    return (year & 3) == 0 and (year % 100 != 0 or year % 400 == 0)


def count_days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def count_days_in_year_before_month(year: int, month: int) -> int:
    """
    Количество дней в году до первого числа месяца.

    Для m >= 3 сдвинутая к марту формула (153 * m + 2) // 5 дополняется
    смещением 59/60 (январь + февраль); в итоге:
    - високосный: (153 * m - 157) // 5
    - обычный:    (153 * m - 162) // 5
    """
    if month < 3:
        return 31 * (month - 1)
    if is_leap_year(year):
        return (153 * month - 157) // 5
    return (153 * month - 162) // 5


def count_days_in_month(year: int, month: int) -> int:
    """
    Количество дней в месяце.

    До августа нечётные месяцы длинные, с августа длинные чётные:
    (m + (m >> 3)) & 1 == 1 означает 31 день.
    """
    if month != 2:
        return 30 + ((month + (month >> 3)) & 1)
    return 29 if is_leap_year(year) else 28


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_year(year: int, param_name: str = "year") -> None:
    """
    Raises:
        ArgumentOutOfRangeError: Если year вне [1, 9999]
    """
    if not _is_int(year) or year < MIN_SUPPORTED_YEAR or year > MAX_SUPPORTED_YEAR:
        raise ArgumentOutOfRangeError(
            param_name,
            year,
            f"{param_name} must be in [{MIN_SUPPORTED_YEAR}, {MAX_SUPPORTED_YEAR}], got {year!r}",
        )


def validate_month(month: int, param_name: str = "month") -> None:
    """
    Raises:
        ArgumentOutOfRangeError: Если month вне [1, 12]
    """
    if not _is_int(month) or month < 1 or month > 12:
        raise ArgumentOutOfRangeError(param_name, month, f"{param_name} must be in [1, 12], got {month!r}")


def validate_date_parts(year: int, month: int, day: int) -> None:
    """
    Валидация тройки в порядке year -> month -> day.

    День <= 28 валиден для любого месяца, поэтому длина месяца
    вычисляется только для day > 28.

    Raises:
        ArgumentOutOfRangeError: С именем первого невалидного поля
    """
    validate_year(year)
    validate_month(month)
    if not _is_int(day) or day < 1 or (day > 28 and day > count_days_in_month(year, month)):
        raise ArgumentOutOfRangeError(
            "day",
            day,
            f"day must be in [1, {count_days_in_month(year, month)}] for {year:04d}-{month:02d}, got {day!r}",
        )


def is_valid_binary(binary: int) -> bool:
    """True если binary кодирует валидную дату в [1, 9999]."""
    if not _is_int(binary) or binary >> 24 != 0:
        return False
    y, m, d = unpack(binary)
    if y < MIN_SUPPORTED_YEAR or y > MAX_SUPPORTED_YEAR:
        return False
    if m < 1 or m > 12:
        return False
    return 1 <= d and (d <= 28 or d <= count_days_in_month(y, m))


def validate_binary(binary: int) -> None:
    """
    Валидация бинарного представления (для from_binary).

    Проверяется: старший байт равен нулю, год в диапазоне, месяц 1..12,
    день валиден для месяца.

    Raises:
        InvalidBinaryInputError: Если binary не кодирует валидную дату
    """
    if not is_valid_binary(binary):
        logger.debug("Rejected binary date input %r", binary)
        raise InvalidBinaryInputError(binary)


# =============================================================================
# ДЕНЬ НЕДЕЛИ (DOOMSDAY RULE)
# =============================================================================


def get_doomsday(year: int, month: int) -> int:
    """
    Сдвиг дня недели для (year, month) по правилу Doomsday (Conway,
    вариант Keith & Craver).

    День недели (Sunday = 0) равен (get_doomsday(y, m) + d) % 7.
    Январь и февраль относятся к предыдущему году.
    """
    if month < 3:
        year -= 1
        alpha = 23 * month // 9 - 2
    else:
        alpha = 23 * month // 9 + 2
    c = year // 100
    return alpha + year + (year >> 2) - c + (c >> 2)


def day_of_week(year: int, month: int, day: int) -> int:
    """День недели: Sunday = 0 ... Saturday = 6."""
    return (get_doomsday(year, month) + day) % 7


def iso_weekday(year: int, month: int, day: int) -> int:
    """ISO день недели: Monday = 1 ... Sunday = 7."""
    return adjusted_modulo(get_doomsday(year, month) + day, 7)


def iso_weekday_at_start_of_year(year: int) -> int:
    """ISO день недели для 1 января (Doomsday при m = d = 1)."""
    year -= 1
    c = year // 100
    return adjusted_modulo(1 + year + (year >> 2) - c + (c >> 2), 7)


# =============================================================================
# ЭПОХА И ОРДИНАЛЬНЫЕ ДАТЫ
# =============================================================================


def days_since_epoch(year: int, month: int, day: int) -> int:
    """
    Количество дней с 0001-01-01.

    Месяцы нумеруются от марта (0) до февраля (11) следующего года,
    затем применяется разложение 400 / 4 / 1 год:

        days = -306 + (146097 * C >> 2) + (1461 * Y >> 2) + (153 * m + 2) // 5 + d - 1

    Examples:
        >>> days_since_epoch(1, 1, 1)
        0
        >>> days_since_epoch(9999, 12, 31)
        3652058
    """
    if month < 3:
        year -= 1
        month += 9
    else:
        month -= 3
    c, y = divmod(year, 100)
    return (
        -DAYS_FROM_MARCH_TO_DECEMBER
        + (DAYS_PER_400_YEARS * c >> 2)
        + (1461 * y >> 2)
        + (153 * month + 2) // 5
        + day
        - 1
    )


def from_days_since_epoch(days: int) -> tuple[int, int, int]:
    """
    Обратное преобразование к days_since_epoch. Без валидации диапазона.

    Returns:
        (year, month, day)
    """
    days += DAYS_FROM_MARCH_TO_DECEMBER
    c = ((days << 2) + 3) // DAYS_PER_400_YEARS
    d400 = days - (DAYS_PER_400_YEARS * c >> 2)
    y = ((d400 << 2) + 3) // 1461
    day_of_shifted_year = d400 - (1461 * y >> 2)
    m = (5 * day_of_shifted_year + 2) // 153
    d = 1 + day_of_shifted_year - (153 * m + 2) // 5
    if m > 9:
        y += 1
        m -= 9
    else:
        m += 3
    return 100 * c + y, m, d


def from_ordinal_date(year: int, day_of_year: int) -> tuple[int, int, int]:
    """
    (year, day_of_year) -> (year, month, day). Без валидации.

    day_of_year < 60 всегда лежит в январе/феврале; 60 это 29 февраля или
    1 марта; остальное считается от марта.
    """
    if day_of_year < 60:
        day_of_year -= 1
        return year, 1 + day_of_year // 31, 1 + day_of_year % 31
    if day_of_year == 60:
        return (year, 2, 29) if is_leap_year(year) else (year, 3, 1)
    day_of_year -= 61 if is_leap_year(year) else 60
    m = (5 * day_of_year + 2) // 153
    d = 1 + day_of_year - (153 * m + 2) // 5
    return year, m + 3, d
