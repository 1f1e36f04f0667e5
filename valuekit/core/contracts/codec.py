"""
GregorianDate Codec

Кодирование даты в JSON документ контракта gregorian_date и обратно.

Единственная сохраняемая форма даты: 32-битное двоичное представление
(GregorianDate.to_binary). Поле iso опционально и служит для
читаемости; при декодировании оно обязано совпадать с binary.
"""

from typing import Any, Dict

from valuekit.core.calendar.gregorian_date import GregorianDate
from valuekit.core.contracts.validators import GregorianDateValidator
from valuekit.core.errors import InvalidBinaryInputError

_VALIDATOR: GregorianDateValidator | None = None


def _validator() -> GregorianDateValidator:
    global _VALIDATOR
    if _VALIDATOR is None:
        _VALIDATOR = GregorianDateValidator()
    return _VALIDATOR


def encode_gregorian_date(date: GregorianDate, include_iso: bool = True) -> Dict[str, Any]:
    """
    Examples:
        >>> encode_gregorian_date(GregorianDate(2000, 1, 1))
        {'binary': 1024033, 'iso': '2000-01-01'}
    """
    payload: Dict[str, Any] = {"binary": date.to_binary()}
    if include_iso:
        payload["iso"] = str(date)
    return payload


def decode_gregorian_date(payload: Dict[str, Any]) -> GregorianDate:
    """
    Декодирование документа gregorian_date.

    Raises:
        ValidationError: Документ не соответствует схеме
        InvalidBinaryInputError: binary не кодирует валидную дату, либо iso
            не совпадает с binary
    """
    _validator().validate(payload)
    date = GregorianDate.from_binary(payload["binary"])
    iso = payload.get("iso")
    if iso is not None and iso != str(date):
        raise InvalidBinaryInputError(payload["binary"], f"does not match iso {iso!r}")
    return date
