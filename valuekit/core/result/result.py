"""
Result — Success or Explained Failure

Result[T] одновременно Option-тип и Result-тип:
- Ok(value): успех, value никогда не None
- Err(message, is_none): ошибка с сообщением; Result.NONE это
  "пустое" значение (is_none=True)

API повторяет упрощённую алгебру Maybe: select / where / bind / join /
or_else, плюс мосты to_maybe() и from_maybe().
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Generic, TypeVar

from valuekit.core.errors import ArgumentNoneError, NoValueError, check_not_none
from valuekit.core.maybe.comparers import DEFAULT_EQUALITY_COMPARER, EqualityComparer
from valuekit.core.maybe.maybe import NOTHING, Maybe, Some

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")
U = TypeVar("U")
K = TypeVar("K")


# =============================================================================
# RESULT
# =============================================================================


class Result(ABC, Generic[T]):
    """Базовый класс; конкретные варианты: Ok и Err."""

    NONE: ClassVar["Err[Any]"]

    @abstractmethod
    def is_error(self) -> bool: ...

    @abstractmethod
    def to_maybe(self) -> Maybe[T]: ...

    @abstractmethod
    def or_else(self, other: "Result[T]") -> "Result[T]": ...

    @abstractmethod
    def select(self, selector: Callable[[T], R]) -> "Result[R]": ...

    @abstractmethod
    def where(self, predicate: Callable[[T], bool]) -> "Result[T]": ...

    @abstractmethod
    def bind(self, binder: "Callable[[T], Result[R]]") -> "Result[R]": ...

    @abstractmethod
    def select_many(
        self,
        selector: "Callable[[T], Result[U]]",
        result_selector: Callable[[T, U], R],
    ) -> "Result[R]": ...

    @abstractmethod
    def join(
        self,
        inner: "Result[U]",
        outer_key_selector: Callable[[T], K],
        inner_key_selector: Callable[[U], K],
        result_selector: Callable[[T, U], R],
        comparer: EqualityComparer[K] | None = None,
    ) -> "Result[R]": ...

    def value_or_else(self, other: T) -> T:
        return other if self.is_error() else self.value


@dataclass(frozen=True)
class Ok(Result[T]):
    """
    Успешный результат.

    Raises:
        ArgumentNoneError: Если value is None
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ArgumentNoneError("value")

    def is_error(self) -> bool:
        return False

    def to_maybe(self) -> Maybe[T]:
        return Some(self.value)

    def or_else(self, other: Result[T]) -> Result[T]:
        return self

    def select(self, selector: Callable[[T], R]) -> Result[R]:
        check_not_none(selector, "selector")
        return of(selector(self.value))

    def where(self, predicate: Callable[[T], bool]) -> Result[T]:
        check_not_none(predicate, "predicate")
        return self if predicate(self.value) else Result.NONE

    def bind(self, binder: Callable[[T], Result[R]]) -> Result[R]:
        check_not_none(binder, "binder")
        return binder(self.value)

    def select_many(
        self,
        selector: Callable[[T], Result[U]],
        result_selector: Callable[[T, U], R],
    ) -> Result[R]:
        check_not_none(selector, "selector")
        check_not_none(result_selector, "result_selector")
        middle = selector(self.value)
        if isinstance(middle, Err):
            return middle.with_return_type()
        return of(result_selector(self.value, middle.value))

    def join(
        self,
        inner: Result[U],
        outer_key_selector: Callable[[T], K],
        inner_key_selector: Callable[[U], K],
        result_selector: Callable[[T, U], R],
        comparer: EqualityComparer[K] | None = None,
    ) -> Result[R]:
        check_not_none(outer_key_selector, "outer_key_selector")
        check_not_none(inner_key_selector, "inner_key_selector")
        check_not_none(result_selector, "result_selector")
        comparer = DEFAULT_EQUALITY_COMPARER if comparer is None else comparer
        if isinstance(inner, Err):
            return inner.with_return_type()
        if comparer.equals(outer_key_selector(self.value), inner_key_selector(inner.value)):
            return of(result_selector(self.value, inner.value))
        return Result.NONE


@dataclass(frozen=True)
class Err(Result[T]):
    """
    Ошибка с сообщением.

    Attributes:
        message: Описание ошибки (не None)
        is_none: True для "пустого" результата (Result.NONE)
    """

    message: str
    is_none: bool = False

    def __post_init__(self) -> None:
        if self.message is None:
            raise ArgumentNoneError("message")

    def __str__(self) -> str:
        return self.message

    @property
    def value(self) -> Any:
        """
        Raises:
            NoValueError: Всегда
        """
        raise NoValueError(f"The result is an error: {self.message}")

    def with_return_type(self) -> "Err[Any]":
        """Та же ошибка с другим типом значения (NONE остаётся NONE)."""
        return Result.NONE if self.is_none else self

    def is_error(self) -> bool:
        return True

    def to_maybe(self) -> Maybe[T]:
        return NOTHING

    def or_else(self, other: Result[T]) -> Result[T]:
        return other

    def select(self, selector: Callable[[T], R]) -> Result[R]:
        return self.with_return_type()

    def where(self, predicate: Callable[[T], bool]) -> Result[T]:
        return self

    def bind(self, binder: Callable[[T], Result[R]]) -> Result[R]:
        return self.with_return_type()

    def select_many(
        self,
        selector: Callable[[T], Result[U]],
        result_selector: Callable[[T, U], R],
    ) -> Result[R]:
        return self.with_return_type()

    def join(
        self,
        inner: Result[U],
        outer_key_selector: Callable[[T], K],
        inner_key_selector: Callable[[U], K],
        result_selector: Callable[[T, U], R],
        comparer: EqualityComparer[K] | None = None,
    ) -> Result[R]:
        return self.with_return_type()


Result.NONE = Err("No value.", is_none=True)


# =============================================================================
# ФАБРИКИ
# =============================================================================


def of(value: T | None) -> Result[T]:
    """Ok(value) или Result.NONE для None."""
    return Result.NONE if value is None else Ok(value)


def ok(value: T) -> Ok[T]:
    return Ok(value)


def err(message: str) -> Err[Any]:
    return Err(message)


def none() -> Err[Any]:
    return Result.NONE


def some_or_none(value: T | None) -> Result[T]:
    return of(value)


def flatten(result: Result[Result[T]]) -> Result[T]:
    """Ok(Ok(x)) -> Ok(x); Ok(Err) -> Err; Err -> Err."""
    check_not_none(result, "result")
    if isinstance(result, Err):
        return result.with_return_type()
    return result.value


def from_maybe(maybe: Maybe[T], message: str = "No value.") -> Result[T]:
    """
    Мост Maybe -> Result.

    Returns:
        Ok(value) для Some, Err(message) для Nothing
        (Result.NONE при сообщении по умолчанию)
    """
    if maybe.is_some():
        return Ok(maybe.value)
    return Result.NONE if message == Result.NONE.message else Err(message)


def try_with(func: Callable[..., T], *args: Any, **kwargs: Any) -> Result[T]:
    """
    Вызов func с перехватом исключений в Err.

    Returns:
        of(func(*args, **kwargs)) или Err(str(exception))

    Raises:
        ArgumentNoneError: Если func is None
    """
    check_not_none(func, "func")
    try:
        value = func(*args, **kwargs)
    except Exception as e:
        logger.debug("try_with captured %s: %s", type(e).__name__, e)
        return Err(str(e) or type(e).__name__)
    return of(value)
