"""
Maybe Combinators — Module-Level Algebra

Операции над несколькими Maybe и над функциями:
- flatten / guard / first_some
- lift / invoke: аппликативное применение n-арных функций
  (all-or-nothing, аргументы проверяются слева направо)
- compose / compose_back: композиция в категории Клейсли
- use / use_select: bind/select с гарантированным освобождением ресурса
- empty_sequence / value_or_empty
"""

import contextlib
from typing import Any, Callable, ContextManager, Final, Iterable, TypeVar

from valuekit.core.errors import check_not_none
from valuekit.core.maybe.maybe import NOTHING, Maybe, Some, of
from valuekit.core.unit import UNIT, Unit

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

MAYBE_UNIT: Final[Maybe[Unit]] = Some(UNIT)
MAYBE_ZERO: Final[Maybe[Unit]] = NOTHING

_EMPTY_SEQUENCE: Final[Maybe[tuple]] = Some(())


# =============================================================================
# СТРУКТУРНЫЕ ОПЕРАЦИИ
# =============================================================================


def flatten(maybe: Maybe[Maybe[T]]) -> Maybe[T]:
    """Some(Some(x)) -> Some(x); Some(Nothing) и Nothing -> Nothing."""
    return maybe.value if maybe.is_some() else NOTHING


def guard(condition: bool) -> Maybe[Unit]:
    """MAYBE_UNIT если condition, иначе MAYBE_ZERO."""
    return MAYBE_UNIT if condition else MAYBE_ZERO


def empty_sequence() -> Maybe[tuple]:
    """Some от пустой последовательности."""
    return _EMPTY_SEQUENCE


def value_or_empty(maybe: Maybe[Iterable[T]]) -> Iterable[T]:
    return maybe.value if maybe.is_some() else ()


def first_some(*maybes: Maybe[T]) -> Maybe[T]:
    """
    Первый Some среди аргументов или NOTHING.

    Examples:
        >>> first_some(NOTHING, some(2), some(3))
        Some(2)
    """
    for maybe in maybes:
        if maybe.is_some():
            return maybe
    return NOTHING


# =============================================================================
# LIFT / INVOKE
# =============================================================================


def lift(func: Callable[..., R], *maybes: Maybe[Any]) -> Maybe[R]:
    """
    Поднимает n-арную функцию на n Maybe.

    Args:
        func: Функция от значений
        *maybes: Аргументы-Maybe (по одному на параметр func)

    Returns:
        of(func(*values)) если все аргументы Some, иначе Nothing

    Raises:
        ArgumentNoneError: Если func is None

    Examples:
        >>> lift(lambda a, b, c: a + b + c, some(1), some(2), some(3))
        Some(6)
    """
    check_not_none(func, "func")
    if len(maybes) == 1:
        return maybes[0].select(func)
    if all(m.is_some() for m in maybes):
        return of(func(*(m.value for m in maybes)))
    return NOTHING


def invoke(maybe_func: Maybe[Callable[..., R]], *maybes: Maybe[Any]) -> Maybe[R]:
    """
    Применяет функцию внутри Maybe к аргументам-Maybe.

    Returns:
        of(f(*values)) если maybe_func и все аргументы Some, иначе Nothing
    """
    if len(maybes) == 1:
        return maybes[0].apply(maybe_func)
    if all(m.is_some() for m in maybes) and maybe_func.is_some():
        return of(maybe_func.value(*(m.value for m in maybes)))
    return NOTHING


# =============================================================================
# КАТЕГОРИЯ КЛЕЙСЛИ
# =============================================================================


def compose(
    first: Callable[[T], Maybe[U]],
    second: Callable[[U], Maybe[R]],
) -> Callable[[T], Maybe[R]]:
    """
    Композиция слева направо: x -> first(x).bind(second).

    Raises:
        ArgumentNoneError: Если first is None (second проверяется bind при вызове)
    """
    check_not_none(first, "first")
    return lambda x: first(x).bind(second)


def compose_back(
    second: Callable[[U], Maybe[R]],
    first: Callable[[T], Maybe[U]],
) -> Callable[[T], Maybe[R]]:
    """Композиция справа налево: x -> first(x).bind(second)."""
    check_not_none(first, "first")
    return lambda x: first(x).bind(second)


# =============================================================================
# SCOPED RESOURCES
# =============================================================================


def _scope(resource: Any) -> ContextManager[Any]:
    if hasattr(resource, "__enter__") and hasattr(resource, "__exit__"):
        return resource
    if hasattr(resource, "close"):
        return contextlib.closing(resource)
    raise TypeError(f"{type(resource).__name__} is neither a context manager nor closeable")


def use(maybe: Maybe[T], binder: Callable[[T], Maybe[R]]) -> Maybe[R]:
    """
    bind с освобождением ресурса (context manager или close()) на любом
    выходе из binder.
    """
    check_not_none(binder, "binder")

    def scoped(resource: T) -> Maybe[R]:
        with _scope(resource):
            return binder(resource)

    return maybe.bind(scoped)


def use_select(maybe: Maybe[T], selector: Callable[[T], R]) -> Maybe[R]:
    """select с освобождением ресурса на любом выходе из selector."""
    check_not_none(selector, "selector")

    def scoped(resource: T) -> R:
        with _scope(resource):
            return selector(resource)

    return maybe.select(scoped)
