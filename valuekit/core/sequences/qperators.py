"""
Sequence Operators over Maybe

Расширения для итерируемых последовательностей:
- select_any / where_any / zip_any / collect_any / parse_values /
  repeat_any: ленивые фильтры (генераторы)
- first_any / sum_any / may_fold / may_reduce: агрегации
- first_or_none / last_or_none / single_or_none / element_at_or_none:
  безопасный доступ к элементам

Аргументы (source, callbacks) проверяются сразу при вызове, даже для
ленивых операций; сама последовательность перебирается при итерации.
"""

import itertools
from typing import Any, Callable, Iterable, Iterator, Sequence, TypeVar

from valuekit.core.errors import EmptySequenceError, check_not_none
from valuekit.core.math.int_arithmetic import validate_non_negative
from valuekit.core.maybe.maybe import NOTHING, Maybe, of

T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")
A = TypeVar("A")

# Маркер конца итерации
_END: Any = object()


# =============================================================================
# ЛЕНИВЫЕ ФИЛЬТРЫ
# =============================================================================


def select_any(source: Iterable[T], selector: Callable[[T], Maybe[R]]) -> Iterator[R]:
    """
    Проекция с отбрасыванием Nothing.

    Examples:
        >>> list(select_any(["1", "x", "3"], parse_int))
        [1, 3]
    """
    check_not_none(source, "source")
    check_not_none(selector, "selector")
    return _select_any(source, selector)


def _select_any(source: Iterable[T], selector: Callable[[T], Maybe[R]]) -> Iterator[R]:
    for item in source:
        result = selector(item)
        if result.is_some():
            yield result.value


def where_any(source: Iterable[T], predicate: Callable[[T], Maybe[bool]]) -> Iterator[T]:
    """Оставляет элементы, для которых predicate вернул Some(True)."""
    check_not_none(source, "source")
    check_not_none(predicate, "predicate")
    return _where_any(source, predicate)


def _where_any(source: Iterable[T], predicate: Callable[[T], Maybe[bool]]) -> Iterator[T]:
    for item in source:
        result = predicate(item)
        if result.is_some() and result.value:
            yield item


def zip_any(
    first: Iterable[T],
    second: Iterable[U],
    selector: Callable[[T, U], Maybe[R]],
) -> Iterator[R]:
    """Попарная проекция (до конца короткой последовательности) без Nothing."""
    check_not_none(first, "first")
    check_not_none(second, "second")
    check_not_none(selector, "selector")
    return _zip_any(first, second, selector)


def _zip_any(first: Iterable[T], second: Iterable[U], selector: Callable[[T, U], Maybe[R]]) -> Iterator[R]:
    for x, y in zip(first, second):
        result = selector(x, y)
        if result.is_some():
            yield result.value


def collect_any(source: Iterable[Maybe[T]]) -> Iterator[T]:
    """Значения всех Some в порядке следования."""
    check_not_none(source, "source")
    return (item.value for item in source if item.is_some())


def parse_values(values: Iterable[str], parser: Callable[[str], Maybe[T]]) -> Iterator[T]:
    """Разбор строк parser-ом с пропуском неразобранных."""
    check_not_none(values, "values")
    check_not_none(parser, "parser")
    return _select_any(values, parser)


def repeat_any(value: Maybe[T], count: int) -> Iterator[T]:
    """Значение count раз; пусто для Nothing."""
    validate_non_negative(count, "count")
    return itertools.repeat(value.value, count) if value.is_some() else iter(())


# =============================================================================
# АГРЕГАЦИЯ
# =============================================================================


def first_any(source: Iterable[Maybe[T]]) -> Maybe[T]:
    """Первый Some или NOTHING."""
    check_not_none(source, "source")
    for item in source:
        if item.is_some():
            return item
    return NOTHING


def sum_any(source: Iterable[Maybe[T]]) -> Maybe[T]:
    """Свёртка через or_else: совпадает с first_any, но перебирает всё."""
    check_not_none(source, "source")
    result: Maybe[T] = NOTHING
    for item in source:
        result = result.or_else(item)
    return result


def may_fold(
    source: Iterable[T],
    seed: A,
    accumulator: Callable[[A, T], Maybe[A]],
    predicate: Callable[[Maybe[A]], bool] | None = None,
) -> Maybe[A]:
    """
    Левая свёртка, где accumulator может вернуть Nothing.

    После первого Nothing accumulator больше не вызывается. С predicate
    перебор останавливается, как только predicate(текущий результат) ложен.

    Args:
        source: Последовательность
        seed: Начальное значение (None даёт NOTHING)
        accumulator: (acc, item) -> Maybe[acc]
        predicate: Условие продолжения (optional)
    """
    check_not_none(source, "source")
    check_not_none(accumulator, "accumulator")
    result: Maybe[A] = of(seed)
    iterator = iter(source)
    while predicate is None or predicate(result):
        item = next(iterator, _END)
        if item is _END:
            break
        result = result.bind(lambda acc: accumulator(acc, item))
    return result


def may_reduce(
    source: Iterable[T],
    accumulator: Callable[[T, T], Maybe[T]],
    predicate: Callable[[Maybe[T]], bool] | None = None,
) -> Maybe[T]:
    """
    may_fold с первым элементом в качестве seed.

    Raises:
        EmptySequenceError: Если source пуст
    """
    check_not_none(source, "source")
    check_not_none(accumulator, "accumulator")
    iterator = iter(source)
    first = next(iterator, _END)
    if first is _END:
        raise EmptySequenceError()
    return may_fold(iterator, first, accumulator, predicate)


# =============================================================================
# ДОСТУП К ЭЛЕМЕНТАМ
# =============================================================================


def first_or_none(source: Iterable[T], predicate: Callable[[T], bool] | None = None) -> Maybe[T]:
    check_not_none(source, "source")
    if predicate is None:
        if isinstance(source, Sequence):
            return of(source[0]) if len(source) > 0 else NOTHING
        return of(next(iter(source), None))
    for item in source:
        if predicate(item):
            return of(item)
    return NOTHING


def last_or_none(source: Iterable[T], predicate: Callable[[T], bool] | None = None) -> Maybe[T]:
    check_not_none(source, "source")
    if predicate is None and isinstance(source, Sequence):
        return of(source[-1]) if len(source) > 0 else NOTHING
    last: T | None = None
    for item in source:
        if predicate is None or predicate(item):
            last = item
    return of(last)


def single_or_none(source: Iterable[T], predicate: Callable[[T], bool] | None = None) -> Maybe[T]:
    """Единственный (подходящий) элемент; NOTHING если их нет или больше одного."""
    check_not_none(source, "source")
    matches = source if predicate is None else (item for item in source if predicate(item))
    iterator = iter(matches)
    first = next(iterator, _END)
    if first is _END or next(iterator, _END) is not _END:
        return NOTHING
    return of(first)


def element_at_or_none(source: Iterable[T], index: int) -> Maybe[T]:
    """Элемент по индексу; NOTHING для отрицательного или слишком большого."""
    check_not_none(source, "source")
    if index < 0:
        return NOTHING
    if isinstance(source, Sequence):
        return of(source[index]) if index < len(source) else NOTHING
    return of(next(itertools.islice(source, index, None), None))
