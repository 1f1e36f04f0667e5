"""
Comparers — Equality and Ordering Strategies

Внешние стратегии сравнения для Maybe: join по ключам, contains,
structural equality/compare и MaybeComparer (полный порядок на Maybe).

Nothing меньше любого Some; два Some сравниваются по payload.
"""

from typing import Any, Final, Generic, Protocol, TypeVar, runtime_checkable

from valuekit.core.errors import check_not_none

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


# =============================================================================
# ПРОТОКОЛЫ
# =============================================================================


@runtime_checkable
class EqualityComparer(Protocol[T_contra]):
    """Стратегия равенства: equals + согласованный hash."""

    def equals(self, x: T_contra, y: T_contra) -> bool: ...

    def hash(self, obj: T_contra) -> int: ...


@runtime_checkable
class Comparer(Protocol[T_contra]):
    """Стратегия порядка: compare(x, y) < 0, == 0, > 0."""

    def compare(self, x: T_contra, y: T_contra) -> int: ...


# =============================================================================
# РЕАЛИЗАЦИИ ПО УМОЛЧАНИЮ
# =============================================================================


class DefaultEqualityComparer:
    """Равенство через == и hash()."""

    def equals(self, x: Any, y: Any) -> bool:
        return x == y

    def hash(self, obj: Any) -> int:
        return 0 if obj is None else hash(obj)


class DefaultComparer:
    """Порядок через < и >."""

    def compare(self, x: Any, y: Any) -> int:
        if x < y:
            return -1
        if x > y:
            return 1
        return 0


DEFAULT_EQUALITY_COMPARER: Final[DefaultEqualityComparer] = DefaultEqualityComparer()
DEFAULT_COMPARER: Final[DefaultComparer] = DefaultComparer()


# =============================================================================
# MAYBE COMPARER
# =============================================================================


class MaybeComparer(Generic[T]):
    """
    Полный порядок и равенство на Maybe[T].

    Nothing == Nothing, Nothing < Some(x); Some сравниваются переданными
    стратегиями payload.

    Args:
        comparer: Порядок payload (default: DEFAULT_COMPARER)
        equality_comparer: Равенство payload (default: DEFAULT_EQUALITY_COMPARER)

    Raises:
        ArgumentNoneError: Если стратегия явно передана как None
    """

    def __init__(
        self,
        comparer: Comparer[T] = DEFAULT_COMPARER,
        equality_comparer: EqualityComparer[T] = DEFAULT_EQUALITY_COMPARER,
    ):
        check_not_none(comparer, "comparer")
        check_not_none(equality_comparer, "equality_comparer")
        self._comparer = comparer
        self._equality_comparer = equality_comparer

    def compare(self, x, y) -> int:
        if x.is_some():
            return self._comparer.compare(x.value, y.value) if y.is_some() else 1
        return -1 if y.is_some() else 0

    def equals(self, x, y) -> bool:
        if x.is_some():
            return y.is_some() and self._equality_comparer.equals(x.value, y.value)
        return y.is_none()

    def hash(self, obj) -> int:
        return self._equality_comparer.hash(obj.value) if obj.is_some() else 0


DEFAULT_MAYBE_COMPARER: Final[MaybeComparer[Any]] = MaybeComparer()
