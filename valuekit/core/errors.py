"""
Errors — Exception Taxonomy

Иерархия исключений библиотеки. Каждое исключение наследует и общий корень
ValueKitError, и подходящее встроенное исключение Python, чтобы вызывающий
код мог ловить как `ValueError`, так и `ValueKitError`.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ошибки валидации аргументов называют параметр (param_name)
2. Ошибки диапазона дат отличаются от ошибок переполнения
3. Доступ к значению пустого Maybe/Err никогда не возвращает sentinel
"""

from typing import Any


class ValueKitError(Exception):
    """Корень иерархии исключений valuekit."""


class ArgumentNoneError(ValueKitError, TypeError):
    """
    Обязательный аргумент (callback, comparer, source) равен None.

    Attributes:
        param_name: Имя отсутствующего параметра
    """

    def __init__(self, param_name: str):
        self.param_name = param_name
        super().__init__(f"{param_name} must not be None")


class ArgumentOutOfRangeError(ValueKitError, ValueError):
    """
    Значение аргумента вне допустимого диапазона.

    Attributes:
        param_name: Имя параметра (например, 'year', 'month', 'day')
        actual_value: Переданное значение
    """

    def __init__(self, param_name: str, actual_value: Any, message: str | None = None):
        self.param_name = param_name
        self.actual_value = actual_value
        if message is None:
            message = f"{param_name} is out of range, got {actual_value!r}"
        super().__init__(message)


class InvalidBinaryInputError(ValueKitError, ValueError):
    """Упакованное 32-битное представление даты невалидно."""

    def __init__(self, data: Any, reason: str = "does not encode a valid date"):
        self.data = data
        super().__init__(f"Binary input {data!r} {reason}")


class CalendarOverflowError(ValueKitError, OverflowError):
    """Результат арифметики выходит за [MIN_VALUE, MAX_VALUE] или за int32."""


class NoValueError(ValueKitError, LookupError):
    """Попытка получить значение из Nothing или Err."""

    def __init__(self, message: str = "The object does not contain any value."):
        super().__init__(message)


class EmptySequenceError(ValueKitError, ValueError):
    """Агрегация без seed над пустой последовательностью."""

    def __init__(self):
        super().__init__("Sequence contains no elements.")


def check_not_none(value: Any, param_name: str) -> None:
    """
    Eager-проверка обязательного аргумента.

    Raises:
        ArgumentNoneError: Если value is None
    """
    if value is None:
        raise ArgumentNoneError(param_name)
