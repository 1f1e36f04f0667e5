"""
GregorianDate — Bit-Packed Calendar Date

Неизменяемая дата пропорционального григорианского календаря в диапазоне
0001-01-01 .. 9999-12-31. Внутреннее представление: одно 32-битное целое
(см. packing), поэтому равенство, хэш и порядок сводятся к операциям над
этим целым.

Арифметика:
- plus_days: быстрый путь для |n| <= 365 через день года, медленный путь
  через дни с эпохи
- plus_months / plus_years: не "алгебраичны", день обрезается до длины
  месяца (29 февраля -> 28 февраля в невисокосный год)
- count_*_since: обратные операции, date.plus_x(n).count_x_since(date) == n

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый экземпляр кодирует валидную дату в [MIN_VALUE, MAX_VALUE]
2. Публичные фабрики валидируют вход; lenient-конструктор используется
   только когда валидность доказана арифметикой
3. Ошибки диапазона полей: ArgumentOutOfRangeError с именем поля
4. Выход за диапазон дат: CalendarOverflowError
"""

import datetime
import re
from enum import IntEnum
from typing import Any, ClassVar, Iterator

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from valuekit.core.calendar.packing import (
    END_OF_FEBRUARY,
    END_OF_YEAR,
    INTERCALARY_DAY,
    MAX_DAYS_SINCE_EPOCH,
    MAX_SUPPORTED_YEAR,
    MIN_DAYS_SINCE_EPOCH,
    MIN_SUPPORTED_YEAR,
    START_OF_YEAR,
    YEAR_SHIFT,
    count_days_in_month,
    count_days_in_year,
    count_days_in_year_before_month,
    day_of_week,
    days_since_epoch,
    from_days_since_epoch,
    from_ordinal_date,
    is_leap_year,
    iso_weekday,
    iso_weekday_at_start_of_year,
    month_day_part,
    pack,
    unpack,
    validate_binary,
    validate_date_parts,
    validate_month,
    validate_year,
    year_month_part,
)
from valuekit.core.errors import ArgumentOutOfRangeError, CalendarOverflowError
from valuekit.core.math.int_arithmetic import (
    adjusted_modulo,
    checked_add,
    floor_divmod,
    truncated_divmod,
    validate_in_range,
)

_ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


# =============================================================================
# DAY OF WEEK
# =============================================================================


class DayOfWeek(IntEnum):
    """День недели, Sunday = 0 ... Saturday = 6."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def _validate_day_of_week(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 6:
        raise ArgumentOutOfRangeError("day_of_week", value, f"day_of_week must be in [0, 6], got {value!r}")
    return int(value)


# =============================================================================
# ОШИБКИ ПЕРЕПОЛНЕНИЯ
# =============================================================================


def _day_number_overflow() -> CalendarOverflowError:
    return CalendarOverflowError("The operation would overflow the latest supported date.")


def _day_number_underflow() -> CalendarOverflowError:
    return CalendarOverflowError("The operation would underflow the earliest supported date.")


def _day_number_out_of_range() -> CalendarOverflowError:
    return CalendarOverflowError(
        f"The number of consecutive days from the epoch would overflow "
        f"[{MIN_DAYS_SINCE_EPOCH}, {MAX_DAYS_SINCE_EPOCH}]."
    )


def _year_out_of_range(year: int) -> CalendarOverflowError:
    return CalendarOverflowError(
        f"The resulting year {year} would overflow [{MIN_SUPPORTED_YEAR}, {MAX_SUPPORTED_YEAR}]."
    )


# =============================================================================
# GREGORIAN DATE
# =============================================================================


class GregorianDate:
    """
    Дата григорианского календаря, упакованная в одно целое.

    Args:
        year: Год в [1, 9999]
        month: Месяц в [1, 12]
        day: День в [1, days_in_month]

    Raises:
        ArgumentOutOfRangeError: С именем первого невалидного поля

    Examples:
        >>> d = GregorianDate(2000, 1, 1)
        >>> str(d), d.day_of_week.name
        ('2000-01-01', 'SATURDAY')
        >>> str(GregorianDate(2008, 2, 29).plus_years(1))
        '2009-02-28'
    """

    __slots__ = ("_bin",)

    MIN_VALUE: ClassVar["GregorianDate"]
    MAX_VALUE: ClassVar["GregorianDate"]

    def __init__(self, year: int, month: int, day: int):
        validate_date_parts(year, month, day)
        object.__setattr__(self, "_bin", pack(year, month, day))

    @classmethod
    def _from_bin(cls, binary: int) -> "GregorianDate":
        # Lenient: binary уже валиден.
        date = object.__new__(cls)
        object.__setattr__(date, "_bin", binary)
        return date

    @classmethod
    def _create_lenient(cls, year: int, month: int, day: int) -> "GregorianDate":
        return cls._from_bin(pack(year, month, day))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self):
        return (GregorianDate.from_binary, (self._bin,))

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def from_binary(cls, data: int) -> "GregorianDate":
        """
        Десериализация из 32-битного представления (to_binary).

        Raises:
            InvalidBinaryInputError: Если data не кодирует валидную дату
        """
        validate_binary(data)
        return cls._from_bin(data)

    @classmethod
    def from_days_since_epoch(cls, days: int) -> "GregorianDate":
        """
        Дата по количеству дней с 0001-01-01.

        Raises:
            ArgumentOutOfRangeError: Если days вне [0, 3_652_058]
        """
        validate_in_range(days, "days_since_epoch", MIN_DAYS_SINCE_EPOCH, MAX_DAYS_SINCE_EPOCH)
        return cls._create_lenient(*from_days_since_epoch(days))

    @classmethod
    def from_ordinal_date(cls, year: int, day_of_year: int) -> "GregorianDate":
        """
        Дата по (год, день года).

        Raises:
            ArgumentOutOfRangeError: 'year' или 'day_of_year'
        """
        validate_year(year)
        if (
            isinstance(day_of_year, bool)
            or not isinstance(day_of_year, int)
            or day_of_year < 1
            or (day_of_year > 365 and day_of_year > count_days_in_year(year))
        ):
            raise ArgumentOutOfRangeError(
                "day_of_year",
                day_of_year,
                f"day_of_year must be in [1, {count_days_in_year(year)}], got {day_of_year!r}",
            )
        return cls._create_lenient(*from_ordinal_date(year, day_of_year))

    @classmethod
    def from_date(cls, value: datetime.date) -> "GregorianDate":
        """Конвертация из datetime.date (datetime.datetime тоже принимается)."""
        return cls(value.year, value.month, value.day)

    @classmethod
    def today(cls) -> "GregorianDate":
        now = datetime.date.today()
        return cls._create_lenient(now.year, now.month, now.day)

    @classmethod
    def parse(cls, text: str) -> "GregorianDate":
        """
        Разбор ISO строки YYYY-MM-DD.

        Raises:
            ValueError: Если формат не YYYY-MM-DD
            ArgumentOutOfRangeError: Если поля вне диапазона
        """
        match = _ISO_DATE_PATTERN.match(text.strip()) if isinstance(text, str) else None
        if match is None:
            raise ValueError(f"Invalid ISO date string, expected YYYY-MM-DD, got {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)

    # -------------------------------------------------------------------------
    # Поля и свойства
    # -------------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self._bin >> YEAR_SHIFT

    @property
    def month(self) -> int:
        return unpack(self._bin)[1]

    @property
    def day(self) -> int:
        return unpack(self._bin)[2]

    @property
    def century(self) -> int:
        q, r = divmod(self.year, 100)
        return q if r == 0 else q + 1

    @property
    def year_of_century(self) -> int:
        return adjusted_modulo(self.year, 100)

    @property
    def day_of_year(self) -> int:
        y, m, d = unpack(self._bin)
        return count_days_in_year_before_month(y, m) + d

    @property
    def day_of_week(self) -> DayOfWeek:
        return DayOfWeek(day_of_week(*unpack(self._bin)))

    @property
    def iso_weekday(self) -> int:
        """ISO день недели: Monday = 1 ... Sunday = 7."""
        return iso_weekday(*unpack(self._bin))

    @property
    def week_of_year(self) -> int:
        """Номер недели, неделя начинается в понедельник (1 января в неделе 1)."""
        return (self.day_of_year + 5 + iso_weekday_at_start_of_year(self.year)) // 7

    @property
    def is_intercalary(self) -> bool:
        """True для 29 февраля."""
        return month_day_part(self._bin) == INTERCALARY_DAY

    @property
    def days_since_epoch(self) -> int:
        return days_since_epoch(*unpack(self._bin))

    def count_days_in_year(self) -> int:
        return count_days_in_year(self.year)

    def count_days_in_month(self) -> int:
        y, m, _ = unpack(self._bin)
        return count_days_in_month(y, m)

    def count_remaining_days_in_year(self) -> int:
        y, m, d = unpack(self._bin)
        return count_days_in_year(y) - count_days_in_year_before_month(y, m) - d

    def count_remaining_days_in_month(self) -> int:
        y, m, d = unpack(self._bin)
        return count_days_in_month(y, m) - d

    def to_binary(self) -> int:
        """32-битное представление, единственный формат сериализации."""
        return self._bin

    def to_date(self) -> datetime.date:
        return datetime.date(*unpack(self._bin))

    def deconstruct(self) -> tuple[int, int, int]:
        """Возвращает (year, month, day)."""
        return unpack(self._bin)

    def __repr__(self) -> str:
        y, m, d = unpack(self._bin)
        return f"GregorianDate({y}, {m}, {d})"

    def __str__(self) -> str:
        y, m, d = unpack(self._bin)
        return f"{y:04d}-{m:02d}-{d:02d}"

    # -------------------------------------------------------------------------
    # Границы года и месяца
    # -------------------------------------------------------------------------

    def start_of_year(self) -> "GregorianDate":
        return self._from_bin((self.year << YEAR_SHIFT) | START_OF_YEAR)

    def end_of_year(self) -> "GregorianDate":
        return self._from_bin((self.year << YEAR_SHIFT) | END_OF_YEAR)

    def start_of_month(self) -> "GregorianDate":
        y, m, _ = unpack(self._bin)
        return self._create_lenient(y, m, 1)

    def end_of_month(self) -> "GregorianDate":
        y, m, _ = unpack(self._bin)
        return self._create_lenient(y, m, count_days_in_month(y, m))

    # -------------------------------------------------------------------------
    # Замена одного поля
    # -------------------------------------------------------------------------

    def adjust_year(self, new_year: int) -> "GregorianDate":
        """
        Замена года.

        Raises:
            ArgumentOutOfRangeError: Если new_year вне диапазона или дата
                29 февраля, а new_year не високосный
        """
        validate_year(new_year, "new_year")
        month_day = month_day_part(self._bin)
        if month_day == INTERCALARY_DAY and not is_leap_year(new_year):
            raise ArgumentOutOfRangeError(
                "new_year", new_year, f"new_year {new_year} is not a leap year, cannot keep February 29"
            )
        return self._from_bin((new_year << YEAR_SHIFT) | month_day)

    def adjust_month(self, new_month: int) -> "GregorianDate":
        validate_month(new_month, "new_month")
        y, _, d = unpack(self._bin)
        if d > count_days_in_month(y, new_month):
            raise ArgumentOutOfRangeError(
                "new_month", new_month, f"day {d} does not exist in month {new_month} of year {y}"
            )
        return self._create_lenient(y, new_month, d)

    def adjust_day(self, new_day: int) -> "GregorianDate":
        y, m, _ = unpack(self._bin)
        validate_in_range(new_day, "new_day", 1, count_days_in_month(y, m))
        return self._create_lenient(y, m, new_day)

    # -------------------------------------------------------------------------
    # Навигация по дням недели
    # -------------------------------------------------------------------------

    def previous(self, day_of_week: int) -> "GregorianDate":
        """Ближайший строго предшествующий день с заданным днём недели."""
        delta = _validate_day_of_week(day_of_week) - self.day_of_week
        return self._plus_days_fast(delta - 7 if delta >= 0 else delta)

    def previous_or_same(self, day_of_week: int) -> "GregorianDate":
        delta = _validate_day_of_week(day_of_week) - self.day_of_week
        if delta == 0:
            return self
        return self._plus_days_fast(delta - 7 if delta > 0 else delta)

    def next_or_same(self, day_of_week: int) -> "GregorianDate":
        delta = _validate_day_of_week(day_of_week) - self.day_of_week
        if delta == 0:
            return self
        return self._plus_days_fast(delta + 7 if delta < 0 else delta)

    def next(self, day_of_week: int) -> "GregorianDate":
        """Ближайший строго следующий день с заданным днём недели."""
        delta = _validate_day_of_week(day_of_week) - self.day_of_week
        return self._plus_days_fast(delta + 7 if delta <= 0 else delta)

    # -------------------------------------------------------------------------
    # Арифметика дней
    # -------------------------------------------------------------------------

    def count_days_since(self, other: "GregorianDate") -> int:
        if year_month_part(self._bin) == year_month_part(other._bin):
            return self.day - other.day
        return self.days_since_epoch - other.days_since_epoch

    def plus_days(self, days: int) -> "GregorianDate":
        """
        Сдвиг на days дней.

        При |days| <= 365 результат лежит в соседних годах и вычисляется
        через день года; иначе через дни с эпохи.

        Raises:
            ArgumentOutOfRangeError: Если days не int
            CalendarOverflowError: Если результат вне [MIN_VALUE, MAX_VALUE]
        """
        validate_in_range(days, "days")
        if days < -365 or days > 365:
            target = checked_add(self.days_since_epoch, days)
            if target < MIN_DAYS_SINCE_EPOCH or target > MAX_DAYS_SINCE_EPOCH:
                raise _day_number_out_of_range()
            return self._create_lenient(*from_days_since_epoch(target))
        return self._plus_days_fast(days)

    def _plus_days_fast(self, days: int) -> "GregorianDate":
        y, m, d = unpack(self._bin)
        day_of_month = d + days
        if day_of_month >= 1 and (day_of_month <= 28 or day_of_month <= count_days_in_month(y, m)):
            return self._create_lenient(y, m, day_of_month)

        day_of_year = count_days_in_year_before_month(y, m) + day_of_month
        if day_of_year < 1:
            if y == MIN_SUPPORTED_YEAR:
                raise _day_number_underflow()
            y -= 1
            day_of_year += count_days_in_year(y)
        else:
            days_in_year = count_days_in_year(y)
            if day_of_year > days_in_year:
                if y == MAX_SUPPORTED_YEAR:
                    raise _day_number_overflow()
                y += 1
                day_of_year -= days_in_year
        return self._create_lenient(*from_ordinal_date(y, day_of_year))

    def next_day(self) -> "GregorianDate":
        if self._bin == _MAX_BIN:
            raise _day_number_overflow()
        y, m, d = unpack(self._bin)
        if d < 28 or d < count_days_in_month(y, m):
            return self._create_lenient(y, m, d + 1)
        if m < 12:
            return self._create_lenient(y, m + 1, 1)
        return self._from_bin(((y + 1) << YEAR_SHIFT) | START_OF_YEAR)

    def previous_day(self) -> "GregorianDate":
        if self._bin == _MIN_BIN:
            raise _day_number_underflow()
        y, m, d = unpack(self._bin)
        if d > 1:
            return self._create_lenient(y, m, d - 1)
        if m > 1:
            return self._create_lenient(y, m - 1, count_days_in_month(y, m - 1))
        return self._from_bin(((y - 1) << YEAR_SHIFT) | END_OF_YEAR)

    # -------------------------------------------------------------------------
    # Арифметика лет
    # -------------------------------------------------------------------------

    @staticmethod
    def add_years(date: "GregorianDate", years: int) -> tuple["GregorianDate", int]:
        """
        Сдвиг на years лет с флагом обрезки.

        Returns:
            (date, cutoff): cutoff == 1 если 29 февраля перешло в 28 февраля

        Raises:
            CalendarOverflowError: Если год вне [1, 9999]
        """
        y = checked_add(date.year, years)
        if y < MIN_SUPPORTED_YEAR or y > MAX_SUPPORTED_YEAR:
            raise _year_out_of_range(y)
        month_day = month_day_part(date._bin)
        cutoff = 0
        if month_day == INTERCALARY_DAY and not is_leap_year(y):
            month_day = END_OF_FEBRUARY
            cutoff = 1
        return date._from_bin((y << YEAR_SHIFT) | month_day), cutoff

    def plus_years(self, years: int) -> "GregorianDate":
        return GregorianDate.add_years(self, years)[0]

    def count_years_since(self, other: "GregorianDate") -> int:
        """
        Количество полных лет между датами.

        При сравнении через невисокосный год 29 февраля считается 28 февраля,
        поэтому date.plus_years(n).count_years_since(date) == n.
        """
        y = self.year
        y0 = other.year
        years = y - y0
        if years == 0:
            return 0

        month_day = month_day_part(self._bin)
        month_day0 = month_day_part(other._bin)
        if years > 0:
            month_day0 = _patch_intercalary(month_day0, y, month_day)
            return years - 1 if month_day < month_day0 else years
        month_day = _patch_intercalary(month_day, y0, month_day0)
        return years + 1 if month_day0 < month_day else years

    # -------------------------------------------------------------------------
    # Арифметика месяцев
    # -------------------------------------------------------------------------

    @staticmethod
    def add_months(date: "GregorianDate", months: int) -> tuple["GregorianDate", int]:
        """
        Сдвиг на months месяцев с количеством обрезанных дней.

        Returns:
            (date, cutoff): cutoff = max(0, day - days_in_new_month)

        Raises:
            CalendarOverflowError: Если год вне [1, 9999]
        """
        y, m, d = unpack(date._bin)
        carry, m0 = floor_divmod(checked_add(m - 1, months), 12)
        y += carry
        if y < MIN_SUPPORTED_YEAR or y > MAX_SUPPORTED_YEAR:
            raise _year_out_of_range(y)
        m = 1 + m0
        days_in_month = count_days_in_month(y, m)
        cutoff = max(0, d - days_in_month)
        return date._create_lenient(y, m, days_in_month if cutoff > 0 else d), cutoff

    def plus_months(self, months: int) -> "GregorianDate":
        return GregorianDate.add_months(self, months)[0]

    def count_months_since(self, other: "GregorianDate") -> int:
        """
        Количество полных месяцев между датами.

        Конец месяца сравнивается как "последний день", поэтому
        date.plus_months(n).count_months_since(date) == n.
        """
        y, m, d = unpack(self._bin)
        y0, m0, d0 = unpack(other._bin)
        months = 12 * (y - y0) + (m - m0)
        if months == 0:
            return 0
        if self >= other:
            if d0 > d and d == count_days_in_month(y, m):
                d0 = d
            return months - 1 if d < d0 else months
        if d > d0 and d0 == count_days_in_month(y0, m0):
            d = d0
        return months + 1 if d0 < d else months

    # -------------------------------------------------------------------------
    # Разность дат
    # -------------------------------------------------------------------------

    @staticmethod
    def subtract(left: "GregorianDate", right: "GregorianDate") -> tuple[int, int, int]:
        """
        Разность left - right как (years, months, days).

        Сначала считается общее число месяцев (без патча конца месяца),
        затем остаток в днях; годы и месяцы делятся с усечением к нулю.

        Examples:
            >>> GregorianDate.subtract(GregorianDate(12, 2, 28), GregorianDate(8, 2, 29))
            (3, 11, 30)
        """
        y, m, d = unpack(left._bin)
        y0, m0, d0 = unpack(right._bin)
        if left >= right:
            chi = -1 if d < d0 else 0
        else:
            chi = 1 if d0 < d else 0
        months = 12 * (y - y0) + (m - m0) + chi
        days = left.count_days_since(right.plus_months(months))
        years, months = truncated_divmod(months, 12)
        return years, months, days

    # -------------------------------------------------------------------------
    # Перечисление
    # -------------------------------------------------------------------------

    @staticmethod
    def get_days_in_year(year: int) -> "DaySequence":
        """
        Все дни года по порядку. Аргумент проверяется сразу, дни
        генерируются лениво при каждой итерации.
        """
        validate_year(year)
        return DaySequence(year, range(1, 13))

    @staticmethod
    def get_days_in_month(year: int, month: int) -> "DaySequence":
        validate_year(year)
        validate_month(month)
        return DaySequence(year, range(month, month + 1))

    # -------------------------------------------------------------------------
    # Сравнение и операторы
    # -------------------------------------------------------------------------

    @staticmethod
    def min_of(left: "GregorianDate", right: "GregorianDate") -> "GregorianDate":
        return left if left < right else right

    @staticmethod
    def max_of(left: "GregorianDate", right: "GregorianDate") -> "GregorianDate":
        return left if left > right else right

    def compare_to(self, other: "GregorianDate | None") -> int:
        """
        Сравнение: -1, 0, 1. None меньше любой даты.

        Raises:
            TypeError: Если other не GregorianDate
        """
        if other is None:
            return 1
        if not isinstance(other, GregorianDate):
            raise TypeError(f"other must be a GregorianDate, got {type(other).__name__}")
        return (self._bin > other._bin) - (self._bin < other._bin)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._bin == other._bin

    def __hash__(self) -> int:
        return hash(self._bin)

    def __lt__(self, other: "GregorianDate") -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._bin < other._bin

    def __le__(self, other: "GregorianDate") -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._bin <= other._bin

    def __gt__(self, other: "GregorianDate") -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._bin > other._bin

    def __ge__(self, other: "GregorianDate") -> bool:
        if not isinstance(other, GregorianDate):
            return NotImplemented
        return self._bin >= other._bin

    def __add__(self, days: int) -> "GregorianDate":
        if isinstance(days, bool) or not isinstance(days, int):
            return NotImplemented
        return self.plus_days(days)

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, GregorianDate):
            return self.count_days_since(other)
        if isinstance(other, bool) or not isinstance(other, int):
            return NotImplemented
        return self.plus_days(-other)

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Pydantic v2: принимает GregorianDate, datetime.date, ISO строку или
        упакованное int (strict); в JSON сериализуется как ISO строка.
        """
        from_iso = core_schema.no_info_after_validator_function(cls.parse, core_schema.str_schema())
        from_binary = core_schema.no_info_after_validator_function(
            cls.from_binary, core_schema.int_schema(strict=True)
        )
        from_date = core_schema.no_info_after_validator_function(
            cls.from_date, core_schema.is_instance_schema(datetime.date)
        )
        return core_schema.json_or_python_schema(
            json_schema=core_schema.union_schema([from_iso, from_binary]),
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_date, from_iso, from_binary]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_iso, info_arg=False, when_used="json"
            ),
        )


def _patch_intercalary(month_day0: int, year: int, month_day: int) -> int:
    # 29 февраля сравнивается как 28 февраля, если целевой год не високосный.
    if month_day0 == INTERCALARY_DAY and month_day == END_OF_FEBRUARY and not is_leap_year(year):
        return END_OF_FEBRUARY
    return month_day0


def _serialize_iso(value: GregorianDate) -> str:
    return str(value)


# =============================================================================
# ПЕРЕЧИСЛЕНИЕ ДНЕЙ
# =============================================================================


class DaySequence:
    """
    Ленивая, конечная и перезапускаемая последовательность дней одного года
    (по месяцам из months). Каждая итерация генерирует даты заново.
    """

    __slots__ = ("_year", "_months")

    def __init__(self, year: int, months: range):
        self._year = year
        self._months = months

    def __iter__(self) -> Iterator[GregorianDate]:
        year_bits = self._year << YEAR_SHIFT
        for m in self._months:
            year_month_bits = year_bits | (m << 5)
            for d in range(1, count_days_in_month(self._year, m) + 1):
                yield GregorianDate._from_bin(year_month_bits | d)

    def __len__(self) -> int:
        return sum(count_days_in_month(self._year, m) for m in self._months)

    def __repr__(self) -> str:
        return f"DaySequence(year={self._year}, months={self._months.start}..{self._months.stop - 1})"


GregorianDate.MIN_VALUE = GregorianDate(MIN_SUPPORTED_YEAR, 1, 1)
GregorianDate.MAX_VALUE = GregorianDate(MAX_SUPPORTED_YEAR, 12, 31)

_MIN_BIN = GregorianDate.MIN_VALUE.to_binary()
_MAX_BIN = GregorianDate.MAX_VALUE.to_binary()
