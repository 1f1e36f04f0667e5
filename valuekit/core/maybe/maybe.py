"""
Maybe — Optional Value Type

Tagged union из двух состояний:
- Some(value): всегда содержит значение, отличное от None
- Nothing: не содержит значения (единственный экземпляр NOTHING)

Отсутствие значения представимо только через Nothing: фабрики of(),
some_or_none() и select() перенаправляют None в NOTHING, а Some(None)
запрещён.

Проверка аргументов:
- eager (сразу при вызове): bind, select, where, zip_with, join,
  group_join, contains, structural_* (comparer)
- deferred (только в выполняемой ветке): switch, fold, value_or_else_get,
  value_or_throw, do, on_some, on_none

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Some никогда не содержит None
2. Экземпляры неизменяемы; каждый комбинатор возвращает новое значение
3. Законы функтора и монады: select(id) == id, some(v).bind(f) == f(v),
   m.bind(some) == m, ассоциативность bind
4. Порядок: Nothing < Some(x); Some(a) < Some(b) iff a < b
"""

import inspect
import itertools
from abc import ABC, abstractmethod
from typing import (
    Any,
    Awaitable,
    Callable,
    Final,
    Generic,
    Iterator,
    TypeVar,
    get_args,
)

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from valuekit.core.errors import ArgumentNoneError, NoValueError, check_not_none
from valuekit.core.math.int_arithmetic import validate_non_negative
from valuekit.core.maybe.comparers import (
    DEFAULT_COMPARER,
    DEFAULT_EQUALITY_COMPARER,
    Comparer,
    EqualityComparer,
)
from valuekit.core.unit import UNIT, Unit

T = TypeVar("T")
R = TypeVar("R")
U = TypeVar("U")
K = TypeVar("K")

_MISSING: Final = object()


# =============================================================================
# ПОВТОРЕНИЕ
# =============================================================================


class Repeated(Generic[T]):
    """
    Перезапускаемая последовательность из value, повторённого count раз
    (без count бесконечная). Каждая итерация начинается заново.
    """

    __slots__ = ("_value", "_count")

    def __init__(self, value: T, count: int | None = None):
        self._value = value
        self._count = count

    def __iter__(self) -> Iterator[T]:
        if self._count is None:
            return itertools.repeat(self._value)
        return itertools.repeat(self._value, self._count)

    def __len__(self) -> int:
        if self._count is None:
            raise TypeError("infinite Repeated has no len()")
        return self._count

    def __repr__(self) -> str:
        return f"Repeated({self._value!r}, count={self._count})"


# =============================================================================
# MAYBE
# =============================================================================


class Maybe(ABC, Generic[T]):
    """
    Базовый класс Maybe. Конкретные состояния: Some и Nothing.

    Maybe ведёт себя как последовательность из 0 или 1 элемента:
    iter(), len() и bool() отражают наличие значения.

    Examples:
        >>> some(3).zip_with(some(4), lambda a, b: a + b)
        Some(7)
        >>> some(3).where(lambda x: x > 5)
        Nothing
        >>> of(None) is NOTHING
        True
    """

    __slots__ = ()

    @abstractmethod
    def is_some(self) -> bool:
        """True если значение присутствует."""

    def is_none(self) -> bool:
        return not self.is_some()

    @property
    @abstractmethod
    def value(self) -> T:
        """
        Значение Some.

        Raises:
            NoValueError: Для Nothing
        """

    # -------------------------------------------------------------------------
    # Монадические операции
    # -------------------------------------------------------------------------

    def bind(self, binder: "Callable[[T], Maybe[R]]") -> "Maybe[R]":
        """
        Some(v).bind(f) == f(v); Nothing.bind(f) == Nothing.

        Raises:
            ArgumentNoneError: Если binder is None (даже для Nothing)
        """
        check_not_none(binder, "binder")
        return binder(self.value) if self.is_some() else NOTHING

    def select(self, selector: Callable[[T], R]) -> "Maybe[R]":
        """
        Some(v).select(f) == of(f(v)); None от selector даёт Nothing.

        Raises:
            ArgumentNoneError: Если selector is None
        """
        check_not_none(selector, "selector")
        return of(selector(self.value)) if self.is_some() else NOTHING

    def where(self, predicate: Callable[[T], bool]) -> "Maybe[T]":
        """Some(v) если predicate(v), иначе Nothing."""
        check_not_none(predicate, "predicate")
        return self if self.is_some() and predicate(self.value) else NOTHING

    flat_map = bind
    map = select
    filter = where

    def select_many(
        self,
        selector: "Callable[[T], Maybe[U]]",
        result_selector: Callable[[T, U], R],
    ) -> "Maybe[R]":
        """bind + select: of(result_selector(v, m)) для middle = selector(v) = Some(m)."""
        check_not_none(selector, "selector")
        check_not_none(result_selector, "result_selector")
        if self.is_none():
            return NOTHING
        middle = selector(self.value)
        if middle.is_none():
            return NOTHING
        return of(result_selector(self.value, middle.value))

    def or_else(self, other: "Maybe[T]") -> "Maybe[T]":
        """Включающее ИЛИ: self если Some, иначе other."""
        return self if self.is_some() else other

    def continue_with(self, other: "Maybe[R]") -> "Maybe[R]":
        """Правое И: other если self Some, иначе Nothing."""
        return other if self.is_some() else NOTHING

    and_then = continue_with

    def pass_thru(self, other: "Maybe[Any]") -> "Maybe[T]":
        """Левое И: self если other Some, иначе Nothing."""
        return self if other.is_some() else NOTHING

    def xor_else(self, other: "Maybe[T]") -> "Maybe[T]":
        """
        Исключающее ИЛИ.

        Examples:
            >>> some(1).xor_else(some(2))
            Nothing
            >>> NOTHING.xor_else(some(2))
            Some(2)
        """
        if self.is_some():
            return NOTHING if other.is_some() else self
        return other

    def __or__(self, other: "Maybe[T]") -> "Maybe[T]":
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.or_else(other)

    def __and__(self, other: "Maybe[R]") -> "Maybe[R]":
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.continue_with(other)

    def __xor__(self, other: "Maybe[T]") -> "Maybe[T]":
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.xor_else(other)

    # -------------------------------------------------------------------------
    # Комбинаторы
    # -------------------------------------------------------------------------

    def zip_with(self, other: "Maybe[U]", zipper: Callable[[T, U], R]) -> "Maybe[R]":
        check_not_none(zipper, "zipper")
        if self.is_some() and other.is_some():
            return of(zipper(self.value, other.value))
        return NOTHING

    def apply(self, applicative: "Maybe[Callable[[T], R]]") -> "Maybe[R]":
        """Some(f) применяется к Some(v): of(f(v)); любой Nothing даёт Nothing."""
        if self.is_some() and applicative.is_some():
            return of(applicative.value(self.value))
        return NOTHING

    def join(
        self,
        inner: "Maybe[U]",
        outer_key_selector: Callable[[T], K],
        inner_key_selector: Callable[[U], K],
        result_selector: Callable[[T, U], R],
        comparer: EqualityComparer[K] | None = None,
    ) -> "Maybe[R]":
        """
        Реляционный join двух Maybe по ключам.

        Args:
            inner: Внутренний Maybe
            outer_key_selector: Ключ внешнего значения
            inner_key_selector: Ключ внутреннего значения
            result_selector: Результат для пары с равными ключами
            comparer: Равенство ключей (None -> DEFAULT_EQUALITY_COMPARER)

        Returns:
            of(result_selector(outer, inner)) если оба Some и ключи равны,
            иначе Nothing
        """
        check_not_none(outer_key_selector, "outer_key_selector")
        check_not_none(inner_key_selector, "inner_key_selector")
        check_not_none(result_selector, "result_selector")
        comparer = DEFAULT_EQUALITY_COMPARER if comparer is None else comparer

        if self.is_some() and inner.is_some():
            outer_key = outer_key_selector(self.value)
            inner_key = inner_key_selector(inner.value)
            if comparer.equals(outer_key, inner_key):
                return of(result_selector(self.value, inner.value))
        return NOTHING

    def group_join(
        self,
        inner: "Maybe[U]",
        outer_key_selector: Callable[[T], K],
        inner_key_selector: Callable[[U], K],
        result_selector: "Callable[[T, Maybe[U]], R]",
        comparer: EqualityComparer[K] | None = None,
    ) -> "Maybe[R]":
        """
        Group join: для Some результат есть всегда.

        result_selector получает внешнее значение и совпавший внутренний
        Maybe (inner при равных ключах, иначе Nothing).
        """
        check_not_none(outer_key_selector, "outer_key_selector")
        check_not_none(inner_key_selector, "inner_key_selector")
        check_not_none(result_selector, "result_selector")
        comparer = DEFAULT_EQUALITY_COMPARER if comparer is None else comparer

        if self.is_none():
            return NOTHING
        match: Maybe[U] = NOTHING
        if inner.is_some():
            outer_key = outer_key_selector(self.value)
            if comparer.equals(outer_key, inner_key_selector(inner.value)):
                match = inner
        return of(result_selector(self.value, match))

    def skip(self) -> "Maybe[Unit]":
        """Отбрасывает значение: Some(UNIT) или Nothing."""
        return _MAYBE_UNIT if self.is_some() else NOTHING

    def replace_with(self, value: R) -> "Maybe[R]":
        return of(value) if self.is_some() else NOTHING

    def duplicate(self) -> "Maybe[Maybe[T]]":
        """Some(self), в том числе для Nothing."""
        return Some(self)

    def replicate(self, count: int | None = None) -> "Maybe[Repeated[T]]":
        """
        Some(последовательность, повторяющая значение count раз).

        Без count последовательность бесконечна. Её можно перебирать
        повторно.

        Raises:
            ArgumentOutOfRangeError: Если count < 0
        """
        if count is not None:
            validate_non_negative(count, "count")
        if self.is_none():
            return NOTHING
        return Some(Repeated(self.value, count))

    # -------------------------------------------------------------------------
    # Безопасные выходы
    # -------------------------------------------------------------------------

    def switch(self, case_some: Callable[[T], R], case_none: Callable[[], R]) -> R:
        """
        Pattern matching. Проверяется только аргумент выполняемой ветки.

        Raises:
            ArgumentNoneError: Если аргумент выполняемой ветки is None
        """
        if self.is_some():
            check_not_none(case_some, "case_some")
            return case_some(self.value)
        check_not_none(case_none, "case_none")
        return case_none()

    def fold(self, case_none: R, case_some: Callable[[T], R]) -> R:
        """switch с готовым значением для Nothing."""
        if self.is_some():
            check_not_none(case_some, "case_some")
            return case_some(self.value)
        return case_none

    def try_get_value(self) -> tuple[bool, T | None]:
        return (True, self.value) if self.is_some() else (False, None)

    def value_or_none(self) -> T | None:
        return self.value if self.is_some() else None

    def value_or_else(self, other: T) -> T:
        return self.value if self.is_some() else other

    def value_or_else_get(self, value_factory: Callable[[], T]) -> T:
        if self.is_some():
            return self.value
        check_not_none(value_factory, "value_factory")
        return value_factory()

    def value_or_throw(self, exception: Any = _MISSING) -> T:
        """
        Значение Some или исключение.

        Args:
            exception: Экземпляр исключения или фабрика (например, класс);
                без аргумента поднимается NoValueError

        Raises:
            NoValueError: Для Nothing без exception
            ArgumentNoneError: Для Nothing при exception=None
        """
        if self.is_some():
            return self.value
        if exception is _MISSING:
            raise NoValueError()
        check_not_none(exception, "exception")
        if isinstance(exception, BaseException):
            raise exception
        raise exception()

    # -------------------------------------------------------------------------
    # Побочные эффекты
    # -------------------------------------------------------------------------

    def do(self, on_some: Callable[[T], Any], on_none: Callable[[], Any]) -> None:
        """Выполняет ровно одно из действий; проверяется только выполняемое."""
        if self.is_some():
            check_not_none(on_some, "on_some")
            on_some(self.value)
        else:
            check_not_none(on_none, "on_none")
            on_none()

    def on_some(self, action: Callable[[T], Any]) -> None:
        if self.is_some():
            check_not_none(action, "action")
            action(self.value)

    def on_none(self, action: Callable[[], Any]) -> None:
        if self.is_none():
            check_not_none(action, "action")
            action()

    def when(
        self,
        condition: bool,
        on_some: Callable[[T], Any] | None = None,
        on_none: Callable[[], Any] | None = None,
    ) -> None:
        """do() при condition; действия, равные None, пропускаются."""
        if not condition:
            return
        if self.is_some():
            if on_some is not None:
                on_some(self.value)
        elif on_none is not None:
            on_none()

    # -------------------------------------------------------------------------
    # Последовательность
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[T]:
        if self.is_some():
            yield self.value

    def __len__(self) -> int:
        return 1 if self.is_some() else 0

    def __bool__(self) -> bool:
        return self.is_some()

    def yield_(self, count: int | None = None) -> Iterator[T]:
        """
        Повторяет значение count раз (пусто для Nothing).

        Без count итератор бесконечен для Some.

        Raises:
            ArgumentOutOfRangeError: Если count < 0
        """
        if count is not None:
            validate_non_negative(count, "count")
        if self.is_none():
            return iter(())
        if count is None:
            return itertools.repeat(self.value)
        return itertools.repeat(self.value, count)

    def contains(self, value: T, comparer: EqualityComparer[T] = DEFAULT_EQUALITY_COMPARER) -> bool:
        check_not_none(comparer, "comparer")
        return self.is_some() and comparer.equals(self.value, value)

    # -------------------------------------------------------------------------
    # Сравнение и равенство
    # -------------------------------------------------------------------------

    def compare_to(self, other: "Maybe[T] | None", comparer: Comparer[T] | None = None) -> int:
        """
        Полный порядок: Nothing < Some; None (не Maybe) меньше всего.

        Args:
            other: Сравниваемый Maybe
            comparer: Порядок payload (None -> DEFAULT_COMPARER)

        Raises:
            TypeError: Если other не Maybe
        """
        if other is None:
            return 1
        if not isinstance(other, Maybe):
            raise TypeError(f"other must be a Maybe, got {type(other).__name__}")
        if self.is_some():
            if other.is_some():
                return (DEFAULT_COMPARER if comparer is None else comparer).compare(self.value, other.value)
            return 1
        return -1 if other.is_some() else 0

    def structural_compare(self, other: "Maybe[T] | None", comparer: Comparer[T]) -> int:
        """
        compare_to с внешним comparer payload.

        Raises:
            TypeError: Если other не Maybe
            ArgumentNoneError: Если comparer is None
        """
        if other is None:
            return 1
        if not isinstance(other, Maybe):
            raise TypeError(f"other must be a Maybe, got {type(other).__name__}")
        check_not_none(comparer, "comparer")
        if self.is_some():
            return comparer.compare(self.value, other.value) if other.is_some() else 1
        return -1 if other.is_some() else 0

    def structural_equals(self, other: object, comparer: EqualityComparer[T]) -> bool:
        """
        Равенство с внешним comparer payload. Не-Maybe никогда не равен.

        Raises:
            ArgumentNoneError: Если comparer is None (для other типа Maybe)
        """
        if other is None or not isinstance(other, Maybe):
            return False
        check_not_none(comparer, "comparer")
        if self.is_some():
            return other.is_some() and comparer.equals(self.value, other.value)
        return other.is_none()

    def structural_hash(self, comparer: EqualityComparer[T]) -> int:
        check_not_none(comparer, "comparer")
        return comparer.hash(self.value) if self.is_some() else 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self.is_some():
            return other.is_some() and self.value == other.value
        return other.is_none()

    def __hash__(self) -> int:
        return hash(self.value) if self.is_some() else 0

    def __lt__(self, other: "Maybe[T]") -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: "Maybe[T]") -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: "Maybe[T]") -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: "Maybe[T]") -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self.compare_to(other) >= 0

    # -------------------------------------------------------------------------
    # Async
    # -------------------------------------------------------------------------

    async def bind_async(self, binder: "Callable[[T], Awaitable[Maybe[R]]]") -> "Maybe[R]":
        check_not_none(binder, "binder")
        return await binder(self.value) if self.is_some() else NOTHING

    async def select_async(self, selector: Callable[[T], Awaitable[R]]) -> "Maybe[R]":
        check_not_none(selector, "selector")
        return of(await selector(self.value)) if self.is_some() else NOTHING

    async def or_else_async(self, other: "Awaitable[Maybe[T]]") -> "Maybe[T]":
        """
        Для Some возвращает self без ожидания other (неиспользованная
        корутина закрывается).
        """
        check_not_none(other, "other")
        if self.is_some():
            _discard(other)
            return self
        return await other

    async def switch_async(
        self,
        case_some: Callable[[T], Awaitable[R]],
        case_none: Awaitable[R],
    ) -> R:
        if self.is_some():
            check_not_none(case_some, "case_some")
            _discard(case_none)
            return await case_some(self.value)
        check_not_none(case_none, "case_none")
        return await case_none

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Pydantic v2: Maybe[X] валидирует X | None; None -> NOTHING,
        значение -> Some. Maybe на входе разворачивается и валидируется
        заново. Сериализуется в payload или null.
        """
        args = get_args(source_type)
        inner = handler.generate_schema(args[0]) if args else core_schema.any_schema()
        nullable = core_schema.nullable_schema(inner)
        return core_schema.no_info_before_validator_function(
            _unwrap_for_validation,
            core_schema.no_info_after_validator_function(of, nullable),
            serialization=core_schema.plain_serializer_function_ser_schema(
                _serialize_maybe, info_arg=False, return_schema=nullable
            ),
        )


def _discard(awaitable: Any) -> None:
    if inspect.iscoroutine(awaitable):
        awaitable.close()


def _unwrap_for_validation(value: Any) -> Any:
    return value.value_or_none() if isinstance(value, Maybe) else value


def _serialize_maybe(value: Any) -> Any:
    return value.value_or_none() if isinstance(value, Maybe) else value


# =============================================================================
# SOME / NOTHING
# =============================================================================


class Some(Maybe[T]):
    """Maybe со значением. Some(None) запрещён."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T):
        if value is None:
            raise ArgumentNoneError("value")
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Maybe is immutable")

    def __reduce__(self):
        return (Some, (self._value,))

    def is_some(self) -> bool:
        return True

    @property
    def value(self) -> T:
        return self._value

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


class Nothing(Maybe[Any]):
    """Пустой Maybe. Единственный экземпляр: NOTHING."""

    __slots__ = ()

    _instance: "Nothing | None" = None

    def __new__(cls) -> "Nothing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Maybe is immutable")

    def __reduce__(self):
        return (Nothing, ())

    def is_some(self) -> bool:
        return False

    @property
    def value(self) -> Any:
        raise NoValueError()

    def __repr__(self) -> str:
        return "Nothing"


NOTHING: Final[Nothing] = Nothing()

_MAYBE_UNIT: Final[Maybe[Unit]] = Some(UNIT)


# =============================================================================
# ФАБРИКИ
# =============================================================================


def of(value: T | None) -> Maybe[T]:
    """Some(value) или NOTHING для None."""
    return NOTHING if value is None else Some(value)


def some(value: T) -> Maybe[T]:
    """
    Строгая фабрика Some.

    Raises:
        ArgumentNoneError: Если value is None
    """
    return Some(value)


def none() -> Maybe[Any]:
    return NOTHING


def some_or_none(value: T | None) -> Maybe[T]:
    """Some(value) или NOTHING для None (для nullable значений)."""
    return NOTHING if value is None else Some(value)


from_nullable = some_or_none
