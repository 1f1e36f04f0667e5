"""
Tests for JSON Schema Contract Validators

Тестирование контракта сохранённой формы GregorianDate:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей, типов и constraints
- Кодек encode/decode поверх ContractValidator
- Интеграция с pydantic моделью
"""

import json

import pytest
from jsonschema import ValidationError
from pydantic import BaseModel

from valuekit.core.calendar import GregorianDate
from valuekit.core.contracts import (
    ContractValidator,
    GregorianDateValidator,
    SchemaLoader,
    decode_gregorian_date,
    encode_gregorian_date,
    validate_gregorian_date,
)
from valuekit.core.errors import InvalidBinaryInputError

# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def leap_day():
    return GregorianDate(2024, 2, 29)


@pytest.fixture
def valid_payload(leap_day):
    """Валидный gregorian_date документ."""
    return {"binary": leap_day.to_binary(), "iso": "2024-02-29"}


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Тесты загрузки схем"""

    def test_schema_directory_exists(self) -> None:
        """Каталог схем лежит внутри пакета"""
        loader = SchemaLoader()
        assert loader.schema_dir.name == "schema"
        assert (loader.schema_dir / "gregorian_date.json").exists()

    def test_schema_is_valid_draft_2020_12(self) -> None:
        """Схема проходит meta-validation"""
        schema = SchemaLoader().load_schema("gregorian_date")
        assert schema["$schema"] == "https://json-schema.org/draft/2020-12/schema"
        assert schema["required"] == ["binary"]

    def test_schema_is_cached(self) -> None:
        """Повторная загрузка возвращает тот же объект"""
        loader = SchemaLoader()
        assert loader.load_schema("gregorian_date") is loader.load_schema("gregorian_date")

    def test_missing_schema(self) -> None:
        """Отсутствующая схема"""
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_invalid_schema_rejected(self, tmp_path) -> None:
        """Невалидная схема не проходит meta-validation"""
        (tmp_path / "broken.json").write_text(json.dumps({"type": 42}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")

    def test_missing_directory(self, tmp_path) -> None:
        """Отсутствующий каталог"""
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "nope")


# =============================================================================
# GREGORIAN DATE CONTRACT
# =============================================================================


class TestGregorianDateContract:
    """Тесты валидации gregorian_date документа"""

    def test_valid(self, valid_payload) -> None:
        """Валидный документ"""
        validate_gregorian_date(valid_payload)
        assert GregorianDateValidator().is_valid(valid_payload)

    def test_iso_optional(self, leap_day) -> None:
        """iso необязателен"""
        validate_gregorian_date({"binary": leap_day.to_binary()})

    def test_missing_binary(self) -> None:
        """binary обязателен"""
        with pytest.raises(ValidationError, match="'binary' is a required property"):
            validate_gregorian_date({"iso": "2024-02-29"})

    @pytest.mark.parametrize("binary", ["1037149", 1.5, True, None])
    def test_binary_wrong_type(self, binary) -> None:
        """binary только integer"""
        with pytest.raises(ValidationError):
            validate_gregorian_date({"binary": binary})

    @pytest.mark.parametrize("binary", [0, 544, 1 << 24, -1])
    def test_binary_out_of_range(self, binary) -> None:
        """binary вне [0001-01-01, 9999-12-31]"""
        with pytest.raises(ValidationError):
            validate_gregorian_date({"binary": binary})

    @pytest.mark.parametrize("iso", ["2024-2-29", "24-02-29", "2024-13-01", "2024-02-32", "2024/02/29"])
    def test_iso_pattern(self, leap_day, iso) -> None:
        """iso соответствует YYYY-MM-DD"""
        with pytest.raises(ValidationError):
            validate_gregorian_date({"binary": leap_day.to_binary(), "iso": iso})

    def test_additional_properties(self, valid_payload) -> None:
        """Лишние поля запрещены"""
        with pytest.raises(ValidationError, match="Additional properties"):
            validate_gregorian_date({**valid_payload, "tz": "UTC"})

    def test_iter_errors(self) -> None:
        """Все ошибки сразу"""
        errors = list(ContractValidator("gregorian_date").iter_errors({"iso": 1, "extra": True}))
        assert len(errors) == 3


# =============================================================================
# CODEC
# =============================================================================


class TestCodec:
    """Тесты encode_gregorian_date / decode_gregorian_date"""

    def test_encode(self, leap_day) -> None:
        """Документ содержит binary и iso"""
        assert encode_gregorian_date(leap_day) == {"binary": (2024 << 9) | (2 << 5) | 29, "iso": "2024-02-29"}
        assert encode_gregorian_date(leap_day, include_iso=False) == {"binary": leap_day.to_binary()}

    def test_decode(self, valid_payload, leap_day) -> None:
        """Декодирование валидного документа"""
        assert decode_gregorian_date(valid_payload) == leap_day

    def test_round_trip_through_json(self) -> None:
        """encode -> json -> decode"""
        for date in (GregorianDate.MIN_VALUE, GregorianDate.MAX_VALUE, GregorianDate(1970, 1, 1)):
            text = json.dumps(encode_gregorian_date(date))
            assert decode_gregorian_date(json.loads(text)) == date

    def test_decode_rejects_invalid_day(self) -> None:
        """binary в диапазоне схемы, но 29 февраля невисокосного года"""
        binary = (2023 << 9) | (2 << 5) | 29
        with pytest.raises(InvalidBinaryInputError):
            decode_gregorian_date({"binary": binary})

    def test_decode_rejects_iso_mismatch(self, leap_day) -> None:
        """iso обязан совпадать с binary"""
        with pytest.raises(InvalidBinaryInputError, match="does not match iso"):
            decode_gregorian_date({"binary": leap_day.to_binary(), "iso": "2024-02-28"})

    def test_decode_rejects_schema_violation(self) -> None:
        """Нарушение схемы поднимает ValidationError до разбора"""
        with pytest.raises(ValidationError):
            decode_gregorian_date({"binary": "2024-02-29"})


# =============================================================================
# PYDANTIC INTEGRATION
# =============================================================================


class Deadline(BaseModel):
    title: str
    due: GregorianDate


class TestPydanticIntegration:
    """Документ из pydantic модели проходит контракт"""

    def test_model_date_passes_contract(self) -> None:
        """due модели кодируется в валидный документ"""
        model = Deadline.model_validate_json('{"title": "report", "due": "2024-02-29"}')
        validate_gregorian_date(encode_gregorian_date(model.due))
