"""
Unit — тип с единственным значением.

Используется как payload для Maybe.skip() и как нейтральный результат
для операций, которые важны только своим успехом.
"""

from typing import Final


class Unit:
    """Singleton: все экземпляры равны, hash == 0, str == "()"."""

    __slots__ = ()

    _instance: "Unit | None" = None

    def __new__(cls) -> "Unit":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unit)

    def __hash__(self) -> int:
        return 0

    def __repr__(self) -> str:
        return "Unit()"

    def __str__(self) -> str:
        return "()"

    def __reduce__(self):
        return (Unit, ())


UNIT: Final[Unit] = Unit()
