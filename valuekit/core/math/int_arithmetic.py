"""
Integer Arithmetic — Checked Int32 Primitives

Целочисленные примитивы для календарной арифметики:
- Checked сложение с границами int32 (Python int не переполняется,
  поэтому переполнение "нативного" 32-битного слова эмулируется явно)
- Floor-деление с остатком и деление с усечением к нулю
- Adjusted modulo (результат в 1..n вместо 0..n-1)
- Валидация диапазонов с именованными параметрами

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. checked_* никогда не возвращает значение вне [INT32_MIN, INT32_MAX]
2. floor_divmod: a == q * n + r, 0 <= r < n (для n > 0)
3. truncated_divmod: q округляется к нулю, знак r совпадает со знаком a
4. adjusted_modulo(a, n) in [1, n] для n > 0
"""

from typing import Final

from valuekit.core.errors import ArgumentOutOfRangeError, CalendarOverflowError

# =============================================================================
# ГРАНИЦЫ INT32
# =============================================================================

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# CHECKED АРИФМЕТИКА
# =============================================================================


def is_int32(value: int) -> bool:
    """True если value помещается в знаковое 32-битное слово."""
    return INT32_MIN <= value <= INT32_MAX


def checked_add(a: int, b: int) -> int:
    """
    Сложение с контролем переполнения int32.

    Args:
        a: Первое слагаемое (int32)
        b: Второе слагаемое (int32)

    Returns:
        a + b

    Raises:
        CalendarOverflowError: Если сумма вне [INT32_MIN, INT32_MAX]

    Examples:
        >>> checked_add(1, 2)
        3
        >>> checked_add(INT32_MAX, 1)
        Traceback (most recent call last):
        ...
        valuekit.core.errors.CalendarOverflowError: ...
    """
    result = a + b
    if not is_int32(result):
        raise CalendarOverflowError(f"Arithmetic operation resulted in an overflow: {a} + {b}")
    return result


# =============================================================================
# ДЕЛЕНИЕ И МОДУЛИ
# =============================================================================


def floor_divmod(a: int, n: int) -> tuple[int, int]:
    """
    Floor-деление: (q, r) с 0 <= r < n при n > 0.

    Используется для переноса месяцев в год (plus_months).

    Examples:
        >>> floor_divmod(-1, 12)
        (-1, 11)
    """
    return divmod(a, n)


def truncated_divmod(a: int, n: int) -> tuple[int, int]:
    """
    Деление с усечением к нулю: q = trunc(a / n), r = a - q * n.

    Examples:
        >>> truncated_divmod(-13, 12)
        (-1, -1)
        >>> truncated_divmod(13, 12)
        (1, 1)
    """
    q = abs(a) // abs(n)
    if (a < 0) != (n < 0):
        q = -q
    return q, a - q * n


def adjusted_modulo(a: int, n: int) -> int:
    """
    Модуль со сдвигом в диапазон [1, n].

    Examples:
        >>> adjusted_modulo(7, 7)
        7
        >>> adjusted_modulo(8, 7)
        1
    """
    r = a % n
    return n if r == 0 else r


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_in_range(
    value: int,
    name: str,
    min_value: int | None = None,
    max_value: int | None = None,
) -> None:
    """
    Валидация, что целое значение в заданном диапазоне.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Raises:
        ArgumentOutOfRangeError: Если value вне диапазона или не int
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ArgumentOutOfRangeError(name, value, f"{name} must be an int, got {value!r}")

    if min_value is not None and value < min_value:
        raise ArgumentOutOfRangeError(name, value, f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ArgumentOutOfRangeError(name, value, f"{name} must be <= {max_value}, got {value}")


def validate_non_negative(value: int, name: str) -> None:
    """
    Валидация, что значение неотрицательно.

    Raises:
        ArgumentOutOfRangeError: Если value < 0
    """
    validate_in_range(value, name, min_value=0)
