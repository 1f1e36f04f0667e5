"""
Тесты для Maybe

Проверяет:
1. Конструирование: None всегда даёт NOTHING
2. Монадические операции (bind / select / where) и их алиасы
3. Логические комбинаторы (or_else / continue_with / pass_thru / xor_else)
4. zip_with / apply / join / group_join
5. Безопасные выходы и момент проверки аргументов (eager vs deferred)
6. Последовательность из 0 или 1 элемента
7. Порядок, равенство, structural_* с внешними comparer
8. Интеграцию с pydantic v2
"""

import itertools
import pickle

import pytest
from pydantic import BaseModel, ValidationError

from valuekit.core.errors import ArgumentNoneError, ArgumentOutOfRangeError, NoValueError
from valuekit.core.maybe import (
    DEFAULT_MAYBE_COMPARER,
    NOTHING,
    Maybe,
    MaybeComparer,
    Nothing,
    Repeated,
    Some,
    from_nullable,
    none,
    of,
    some,
    some_or_none,
)
from valuekit.core.unit import UNIT


class CaseInsensitive:
    """Равенство и порядок строк без учёта регистра"""

    def equals(self, x: str, y: str) -> bool:
        return x.casefold() == y.casefold()

    def hash(self, obj: str) -> int:
        return hash(obj.casefold())

    def compare(self, x: str, y: str) -> int:
        a, b = x.casefold(), y.casefold()
        return (a > b) - (a < b)


# =============================================================================
# ТЕСТЫ КОНСТРУИРОВАНИЯ
# =============================================================================


class TestConstruction:
    """Тесты фабрик"""

    def test_none_always_yields_nothing(self) -> None:
        """Все nullable-фабрики отображают None в NOTHING"""
        assert of(None) is NOTHING
        assert some_or_none(None) is NOTHING
        assert from_nullable(None) is NOTHING
        assert none() is NOTHING
        assert some(1).select(lambda _: None) is NOTHING

    def test_some_rejects_none(self) -> None:
        """Some(None) запрещён"""
        with pytest.raises(ArgumentNoneError, match="value"):
            some(None)
        with pytest.raises(TypeError):
            Some(None)

    def test_falsy_values_are_some(self) -> None:
        """0, "" и False это значения, а не отсутствие"""
        for value in (0, "", False, []):
            assert of(value).is_some()
            assert of(value).value == value

    def test_nothing_singleton(self) -> None:
        """Nothing() возвращает единственный экземпляр"""
        assert Nothing() is NOTHING
        assert pickle.loads(pickle.dumps(NOTHING)) is NOTHING

    def test_value_access(self) -> None:
        """value для Nothing поднимает NoValueError"""
        assert some(5).value == 5
        with pytest.raises(NoValueError, match="does not contain any value"):
            NOTHING.value
        with pytest.raises(LookupError):
            NOTHING.value

    def test_immutable(self) -> None:
        """Some неизменяем"""
        maybe = some(1)
        with pytest.raises(AttributeError):
            maybe._value = 2  # type: ignore[attr-defined]

    def test_repr(self) -> None:
        """Текстовые представления"""
        assert repr(some("a")) == "Some('a')"
        assert repr(NOTHING) == "Nothing"

    def test_pattern_matching(self) -> None:
        """match по Some(value) / Nothing()"""

        def describe(maybe: Maybe[int]) -> str:
            match maybe:
                case Some(value):
                    return f"some {value}"
                case Nothing():
                    return "nothing"
            return "unreachable"

        assert describe(some(3)) == "some 3"
        assert describe(NOTHING) == "nothing"

    def test_pickle_some(self) -> None:
        """pickle сохраняет значение"""
        assert pickle.loads(pickle.dumps(some((1, 2)))) == some((1, 2))


# =============================================================================
# ТЕСТЫ МОНАДИЧЕСКИХ ОПЕРАЦИЙ
# =============================================================================


class TestMonadicOperations:
    """Тесты bind / select / where"""

    def test_bind(self) -> None:
        """Some(v).bind(f) == f(v); Nothing.bind(f) == Nothing"""
        half = lambda x: some(x // 2) if x % 2 == 0 else NOTHING  # noqa: E731
        assert some(4).bind(half) == some(2)
        assert some(3).bind(half) is NOTHING
        assert NOTHING.bind(half) is NOTHING

    def test_select(self) -> None:
        """Some(v).select(f) == Some(f(v))"""
        assert some(3).select(lambda x: x * 2) == some(6)
        assert NOTHING.select(lambda x: x * 2) is NOTHING

    def test_where(self) -> None:
        """Фильтрация"""
        assert some(3).where(lambda x: x > 5) is NOTHING
        assert some(3).where(lambda x: x > 0) == some(3)
        assert NOTHING.where(lambda x: True) is NOTHING

    def test_aliases(self) -> None:
        """flat_map / map / filter совпадают с bind / select / where"""
        assert some(2).map(str) == some("2")
        assert some(2).flat_map(lambda x: some(x + 1)) == some(3)
        assert some(2).filter(lambda x: x > 5) is NOTHING

    def test_eager_validation_on_nothing(self) -> None:
        """bind / select / where проверяют аргумент даже для Nothing"""
        with pytest.raises(ArgumentNoneError, match="binder"):
            NOTHING.bind(None)
        with pytest.raises(ArgumentNoneError, match="selector"):
            NOTHING.select(None)
        with pytest.raises(ArgumentNoneError, match="predicate"):
            NOTHING.where(None)

    def test_select_many(self) -> None:
        """bind + select"""
        result = some(2).select_many(lambda x: some(x * 10), lambda x, y: x + y)
        assert result == some(22)
        assert some(2).select_many(lambda x: NOTHING, lambda x, y: x + y) is NOTHING
        assert NOTHING.select_many(lambda x: some(x), lambda x, y: x) is NOTHING


# =============================================================================
# ТЕСТЫ ЛОГИЧЕСКИХ КОМБИНАТОРОВ
# =============================================================================


class TestLogicalCombinators:
    """Тесты or_else / continue_with / pass_thru / xor_else"""

    def test_or_else(self) -> None:
        """Включающее ИЛИ"""
        assert some(1).or_else(some(2)) == some(1)
        assert NOTHING.or_else(some(2)) == some(2)
        assert (some(1) | some(2)) == some(1)
        assert (NOTHING | NOTHING) is NOTHING

    @pytest.mark.parametrize(
        "left,right,expected",
        [
            (some(1), some(2), NOTHING),
            (some(1), NOTHING, some(1)),
            (NOTHING, some(2), some(2)),
            (NOTHING, NOTHING, NOTHING),
        ],
    )
    def test_xor_else_truth_table(self, left: Maybe[int], right: Maybe[int], expected: Maybe[int]) -> None:
        """Исключающее ИЛИ"""
        assert left.xor_else(right) == expected
        assert (left ^ right) == expected

    def test_continue_with_and_pass_thru(self) -> None:
        """Правое и левое И"""
        assert some(1).continue_with(some("a")) == some("a")
        assert NOTHING.continue_with(some("a")) is NOTHING
        assert some(1).pass_thru(some("a")) == some(1)
        assert some(1).pass_thru(NOTHING) is NOTHING
        assert (some(1) & some("a")) == some("a")
        assert some(1).and_then(NOTHING) is NOTHING

    def test_operators_reject_non_maybe(self) -> None:
        """| / & / ^ с не-Maybe"""
        with pytest.raises(TypeError):
            some(1) | 2  # type: ignore[operator]


# =============================================================================
# ТЕСТЫ КОМБИНАТОРОВ
# =============================================================================


class TestCombinators:
    """Тесты zip_with / apply / join / group_join / skip / replicate"""

    def test_zip_with(self) -> None:
        """Оба Some -> Some(f(a, b))"""
        add = lambda a, b: a + b  # noqa: E731
        assert some(3).zip_with(some(4), add) == some(7)
        assert NOTHING.zip_with(some(4), add) is NOTHING
        assert some(3).zip_with(NOTHING, add) is NOTHING
        with pytest.raises(ArgumentNoneError, match="zipper"):
            NOTHING.zip_with(NOTHING, None)

    def test_apply(self) -> None:
        """Some(f) применяется к Some(v)"""
        assert some(3).apply(some(lambda x: x + 1)) == some(4)
        assert NOTHING.apply(some(lambda x: x + 1)) is NOTHING
        assert some(3).apply(NOTHING) is NOTHING

    def test_join(self) -> None:
        """Результат только при равных ключах"""
        outer = some({"id": 1, "name": "a"})
        inner = some({"owner": 1, "total": 10})
        result = outer.join(inner, lambda o: o["id"], lambda i: i["owner"], lambda o, i: (o["name"], i["total"]))
        assert result == some(("a", 10))

        other = some({"owner": 2, "total": 10})
        assert outer.join(other, lambda o: o["id"], lambda i: i["owner"], lambda o, i: o) is NOTHING
        assert outer.join(NOTHING, lambda o: o["id"], lambda i: i["owner"], lambda o, i: o) is NOTHING

    def test_join_with_comparer(self) -> None:
        """Внешнее равенство ключей"""
        result = some("Alice").join(some("ALICE"), str, str, lambda o, i: o + i, CaseInsensitive())
        assert result == some("AliceALICE")

    def test_join_eager_validation(self) -> None:
        """Селекторы проверяются и для Nothing"""
        with pytest.raises(ArgumentNoneError, match="result_selector"):
            NOTHING.join(NOTHING, str, str, None)

    def test_group_join(self) -> None:
        """Для Some результат есть всегда, совпадение передаётся как Maybe"""
        pair = lambda o, m: (o, m)  # noqa: E731
        assert some(1).group_join(some(1), int, int, pair) == some((1, some(1)))
        assert some(1).group_join(some(2), int, int, pair) == some((1, NOTHING))
        assert some(1).group_join(NOTHING, int, int, pair) == some((1, NOTHING))
        assert NOTHING.group_join(some(1), int, int, pair) is NOTHING

    def test_skip_and_replace(self) -> None:
        """skip / replace_with / duplicate"""
        assert some(1).skip() == some(UNIT)
        assert NOTHING.skip() is NOTHING
        assert some(1).replace_with("x") == some("x")
        assert NOTHING.replace_with("x") is NOTHING
        assert some(1).duplicate() == some(some(1))
        assert NOTHING.duplicate() == some(NOTHING)

    def test_replicate(self) -> None:
        """Some(итератор) повторений"""
        assert list(some("a").replicate(3).value) == ["a", "a", "a"]
        assert list(itertools.islice(some("a").replicate().value, 5)) == ["a"] * 5
        assert NOTHING.replicate(3) is NOTHING

    def test_replicate_payload_is_restartable(self) -> None:
        """Повторения внутри Some можно перебрать несколько раз"""
        replicated = some(1).replicate(2)
        assert isinstance(replicated.value, Repeated)
        assert list(replicated.value) == [1, 1]
        assert list(replicated.value) == [1, 1]
        assert len(replicated.value) == 2
        assert list(some(1).replicate(0).value) == []

    def test_replicate_negative_count_rejected(self) -> None:
        """Отрицательный count отклоняется даже для Nothing"""
        with pytest.raises(ArgumentOutOfRangeError, match="count must be >= 0") as exc_info:
            some(1).replicate(-1)
        assert exc_info.value.param_name == "count"
        with pytest.raises(ArgumentOutOfRangeError):
            NOTHING.replicate(-1)

    def test_infinite_replicate_has_no_len(self) -> None:
        """Бесконечное повторение не имеет длины"""
        with pytest.raises(TypeError):
            len(some(1).replicate().value)


# =============================================================================
# ТЕСТЫ БЕЗОПАСНЫХ ВЫХОДОВ
# =============================================================================


class TestEscapes:
    """Тесты switch / fold / value_or_* и отложенной проверки"""

    def test_switch(self) -> None:
        """Выполняется ровно одна ветка"""
        assert some(2).switch(lambda x: x * 10, lambda: -1) == 20
        assert NOTHING.switch(lambda x: x * 10, lambda: -1) == -1

    def test_switch_deferred_validation(self) -> None:
        """Аргумент невыполняемой ветки не проверяется"""
        assert some(2).switch(lambda x: x, None) == 2
        assert NOTHING.switch(None, lambda: 0) == 0
        with pytest.raises(ArgumentNoneError, match="case_some"):
            some(2).switch(None, lambda: 0)
        with pytest.raises(ArgumentNoneError, match="case_none"):
            NOTHING.switch(lambda x: x, None)

    def test_fold(self) -> None:
        """switch с готовым значением"""
        assert some(2).fold(0, lambda x: x + 1) == 3
        assert NOTHING.fold(0, lambda x: x + 1) == 0
        assert NOTHING.fold(0, None) == 0

    def test_try_get_value(self) -> None:
        """(bool, value)"""
        assert some(1).try_get_value() == (True, 1)
        assert NOTHING.try_get_value() == (False, None)

    def test_value_or_variants(self) -> None:
        """value_or_none / value_or_else / value_or_else_get"""
        assert some(1).value_or_none() == 1
        assert NOTHING.value_or_none() is None
        assert NOTHING.value_or_else(5) == 5
        assert some(1).value_or_else(5) == 1
        assert NOTHING.value_or_else_get(lambda: 7) == 7
        assert some(1).value_or_else_get(None) == 1
        with pytest.raises(ArgumentNoneError, match="value_factory"):
            NOTHING.value_or_else_get(None)

    def test_value_or_throw(self) -> None:
        """Исключение по умолчанию, экземпляр или фабрика"""
        assert some(1).value_or_throw(None) == 1
        with pytest.raises(NoValueError):
            NOTHING.value_or_throw()
        with pytest.raises(KeyError):
            NOTHING.value_or_throw(KeyError("missing"))
        with pytest.raises(RuntimeError):
            NOTHING.value_or_throw(RuntimeError)
        with pytest.raises(ArgumentNoneError, match="exception"):
            NOTHING.value_or_throw(None)


# =============================================================================
# ТЕСТЫ ПОБОЧНЫХ ЭФФЕКТОВ
# =============================================================================


class TestSideEffects:
    """Тесты do / on_some / on_none / when"""

    def test_do_runs_exactly_one(self) -> None:
        """Ровно одно действие"""
        calls: list[str] = []
        some(1).do(lambda x: calls.append(f"some {x}"), lambda: calls.append("none"))
        NOTHING.do(lambda x: calls.append(f"some {x}"), lambda: calls.append("none"))
        assert calls == ["some 1", "none"]

    def test_do_deferred_validation(self) -> None:
        """Проверяется только выполняемое действие"""
        some(1).do(lambda x: None, None)
        NOTHING.do(None, lambda: None)
        with pytest.raises(ArgumentNoneError, match="on_some"):
            some(1).do(None, lambda: None)

    def test_on_some_silent_for_nothing(self) -> None:
        """on_some для Nothing ничего не делает и не проверяет action"""
        NOTHING.on_some(None)
        some(1).on_none(None)
        calls: list[int] = []
        some(1).on_some(calls.append)
        assert calls == [1]
        with pytest.raises(ArgumentNoneError):
            some(1).on_some(None)

    def test_when(self) -> None:
        """Действия только при condition"""
        calls: list[object] = []
        some(1).when(False, calls.append)
        some(1).when(True, calls.append)
        NOTHING.when(True, calls.append, lambda: calls.append("none"))
        NOTHING.when(True)
        assert calls == [1, "none"]


# =============================================================================
# ТЕСТЫ ПОСЛЕДОВАТЕЛЬНОСТИ
# =============================================================================


class TestSequenceBehaviour:
    """Maybe как последовательность из 0 или 1 элемента"""

    def test_iteration(self) -> None:
        """iter / len / bool"""
        assert list(some(1)) == [1]
        assert list(NOTHING) == []
        assert len(some(1)) == 1 and len(NOTHING) == 0
        assert bool(some(0)) is True
        assert bool(NOTHING) is False

    def test_yield(self) -> None:
        """yield_ повторяет значение"""
        assert list(some("x").yield_(3)) == ["x", "x", "x"]
        assert list(NOTHING.yield_(3)) == []
        assert list(NOTHING.yield_()) == []
        assert list(itertools.islice(some("x").yield_(), 4)) == ["x"] * 4

    def test_yield_negative_count_rejected(self) -> None:
        """yield_ с отрицательным count"""
        with pytest.raises(ArgumentOutOfRangeError, match="count must be >= 0"):
            some(1).yield_(-1)
        with pytest.raises(ArgumentOutOfRangeError):
            NOTHING.yield_(-1)

    def test_contains(self) -> None:
        """contains с comparer по умолчанию и внешним"""
        assert some(1).contains(1)
        assert not some(1).contains(2)
        assert not NOTHING.contains(1)
        assert some("abc").contains("ABC", CaseInsensitive())
        with pytest.raises(ArgumentNoneError):
            NOTHING.contains(1, None)


# =============================================================================
# ТЕСТЫ ПОРЯДКА И РАВЕНСТВА
# =============================================================================


class TestOrdering:
    """Тесты compare_to, операторов сравнения, structural_*"""

    def test_nothing_less_than_some(self) -> None:
        """Nothing < Some(x) для любого x"""
        assert NOTHING < some(-(10**9))
        assert NOTHING.compare_to(some(0)) == -1
        assert some(0).compare_to(NOTHING) == 1
        assert NOTHING.compare_to(NOTHING) == 0

    def test_some_ordered_by_payload(self) -> None:
        """Some(a) < Some(b) iff a < b"""
        assert some(1) < some(2)
        assert some(2) >= some(2)
        assert some("b") > some("a")
        assert sorted([some(3), NOTHING, some(1)]) == [NOTHING, some(1), some(3)]

    def test_compare_to_none_and_wrong_type(self) -> None:
        """None меньше любого Maybe, не-Maybe поднимает TypeError"""
        assert NOTHING.compare_to(None) == 1
        with pytest.raises(TypeError):
            some(1).compare_to(1)  # type: ignore[arg-type]

    def test_compare_to_with_comparer(self) -> None:
        """Внешний порядок payload"""
        assert some("a").compare_to(some("B")) == 1
        assert some("a").compare_to(some("B"), CaseInsensitive()) == -1

    def test_equality_and_hash(self) -> None:
        """Равенство по payload, Unknown == Unknown"""
        assert some(1) == some(1)
        assert some(1) != some(2)
        assert some(1) != NOTHING
        assert NOTHING == NOTHING
        assert some(1) != 1
        assert hash(some("a")) == hash("a")
        assert hash(NOTHING) == 0
        assert len({some(1), some(1), NOTHING, NOTHING}) == 2

    def test_structural_compare_eager_comparer_check(self) -> None:
        """comparer проверяется даже для Nothing"""
        assert some("a").structural_compare(some("B"), CaseInsensitive()) == -1
        assert NOTHING.structural_compare(some("a"), CaseInsensitive()) == -1
        with pytest.raises(ArgumentNoneError, match="comparer"):
            NOTHING.structural_compare(NOTHING, None)
        with pytest.raises(TypeError):
            NOTHING.structural_compare("x", CaseInsensitive())  # type: ignore[arg-type]

    def test_structural_equals(self) -> None:
        """Равенство через внешний comparer"""
        assert some("a").structural_equals(some("A"), CaseInsensitive())
        assert NOTHING.structural_equals(NOTHING, CaseInsensitive())
        assert not some("a").structural_equals("a", CaseInsensitive())
        with pytest.raises(ArgumentNoneError):
            NOTHING.structural_equals(NOTHING, None)

    def test_structural_hash(self) -> None:
        """Хэш через внешний comparer"""
        assert some("a").structural_hash(CaseInsensitive()) == some("A").structural_hash(CaseInsensitive())
        assert NOTHING.structural_hash(CaseInsensitive()) == 0
        with pytest.raises(ArgumentNoneError):
            NOTHING.structural_hash(None)

    def test_maybe_comparer(self) -> None:
        """MaybeComparer как стратегия сортировки"""
        comparer = MaybeComparer(comparer=CaseInsensitive(), equality_comparer=CaseInsensitive())
        assert comparer.compare(some("a"), some("B")) == -1
        assert comparer.equals(some("a"), some("A"))
        assert comparer.hash(some("a")) == comparer.hash(some("A"))
        assert DEFAULT_MAYBE_COMPARER.compare(NOTHING, some(1)) == -1
        assert DEFAULT_MAYBE_COMPARER.equals(NOTHING, NOTHING)
        with pytest.raises(ArgumentNoneError):
            MaybeComparer(comparer=None)  # type: ignore[arg-type]


# =============================================================================
# ТЕСТЫ PYDANTIC
# =============================================================================


class Profile(BaseModel):
    nickname: Maybe[str]
    age: Maybe[int] = NOTHING


class TestPydanticIntegration:
    """Тесты Maybe как поля pydantic модели"""

    def test_none_becomes_nothing(self) -> None:
        """None -> NOTHING, значение -> Some"""
        profile = Profile(nickname=None, age=30)
        assert profile.nickname is NOTHING
        assert profile.age == some(30)

    def test_accepts_maybe(self) -> None:
        """Maybe на входе разворачивается и валидируется"""
        profile = Profile(nickname=some("neo"))
        assert profile.nickname == some("neo")
        assert profile.age is NOTHING
        with pytest.raises(ValidationError):
            Profile(nickname=some(1), age=some("not a number"))

    def test_json_round_trip(self) -> None:
        """Сериализация в payload или null"""
        profile = Profile(nickname="neo", age=None)
        assert profile.model_dump() == {"nickname": "neo", "age": None}
        payload = profile.model_dump_json()
        assert payload == '{"nickname":"neo","age":null}'
        assert Profile.model_validate_json(payload) == profile
