"""
Тесты для JSON round-trip Optional

Проверяет:
1. Формат to_json (type / subType / value)
2. Round-trip для present / empty значений
3. Детекцию битых данных (DeserializationException)
4. Детекцию несовпадения subType (SubTypeMismatchException)
5. Раскрытие вложенных Serializable
"""

import json
from unittest import mock

import pytest

from javalike.core.domain import Optional
from javalike.core.exceptions import (
    DeserializationException,
    RunTimeException,
    SubTypeMismatchException,
)
from javalike.core.serialization import Serializable, stringify, type_tag_of


# =============================================================================
# FIXTURES
# =============================================================================


class Money(Serializable):
    def __init__(self, amount: int, currency: str) -> None:
        self.amount = amount
        self.currency = currency

    def to_json(self):
        return {"amount": self.amount, "currency": self.currency}


# =============================================================================
# TO_JSON
# =============================================================================


class TestToJson:
    """Тесты для формата to_json"""

    def test_number(self) -> None:
        assert Optional.of(42).to_json() == {"type": "Optional", "subType": "number", "value": 42}

    def test_string(self) -> None:
        assert Optional.of("hi").to_json()["subType"] == "string"

    def test_boolean(self) -> None:
        assert Optional.of(True).to_json()["subType"] == "boolean"

    def test_empty(self) -> None:
        assert Optional.empty().to_json() == {"type": "Optional", "subType": "object", "value": None}

    def test_nested_serializable(self) -> None:
        record = Optional.of(Money(5, "EUR")).to_json()
        assert record["subType"] == "object"
        assert record["value"] == {"amount": 5, "currency": "EUR"}

    def test_nested_optional(self) -> None:
        record = Optional.of(Optional.of(1)).to_json()
        assert record["value"] == {"type": "Optional", "subType": "number", "value": 1}

    def test_to_json_string_is_valid_json(self) -> None:
        text = Optional.of(3.5).to_json_string()
        assert json.loads(text) == {"type": "Optional", "subType": "number", "value": 3.5}

    def test_stringify_uses_serializable(self) -> None:
        assert json.loads(stringify([Money(1, "USD")])) == [{"amount": 1, "currency": "USD"}]


class TestTypeTag:
    """Тесты для type_tag_of"""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (1, "number"),
            (1.5, "number"),
            (True, "boolean"),
            (False, "boolean"),
            ("", "string"),
            (None, "object"),
            ([1], "object"),
            ({"a": 1}, "object"),
        ],
    )
    def test_type_tag_of(self, value, expected) -> None:
        assert type_tag_of(value) == expected


# =============================================================================
# ROUND-TRIP
# =============================================================================


class TestRoundTrip:
    """Тесты для to_json → from_json"""

    def test_number_round_trip(self) -> None:
        original = Optional.of(42)
        restored = Optional.from_json(original.to_json(), "number")
        assert restored.equals(original)
        assert restored is not original

    def test_round_trip_from_text(self) -> None:
        original = Optional.of("hello")
        restored = Optional.from_json(original.to_json_string(), "string")
        assert restored == original

    def test_round_trip_from_bytes(self) -> None:
        original = Optional.of(False)
        restored = Optional.from_json(original.to_json_string().encode("utf-8"), "boolean")
        assert restored.get() is False

    def test_empty_round_trip(self) -> None:
        restored = Optional.from_json(Optional.empty().to_json_string(), "object")
        assert restored.is_empty()

    def test_composite_round_trip_keeps_value(self) -> None:
        restored = Optional.from_json(Optional.of({"k": [1, 2]}).to_json(), "object")
        assert restored.get() == {"k": [1, 2]}

    def test_subtype_mismatch(self) -> None:
        with pytest.raises(SubTypeMismatchException) as exc_info:
            Optional.from_json(Optional.of(42).to_json(), "string")
        assert exc_info.value.actual == "number"
        assert exc_info.value.expected == "string"
        assert isinstance(exc_info.value, RunTimeException)

    def test_subtype_mismatch_constructs_nothing(self) -> None:
        payload = Optional.of(42).to_json()
        with mock.patch.object(Optional, "of_nullable", wraps=Optional.of_nullable) as factory:
            with pytest.raises(SubTypeMismatchException):
                Optional.from_json(payload, "string")
        factory.assert_not_called()


# =============================================================================
# MALFORMED INPUT
# =============================================================================


class TestMalformedInput:
    """Битые данные → DeserializationException (не SubTypeMismatchException)"""

    @pytest.mark.parametrize(
        "text",
        [
            "not json",
            "",
            "null",
            "42",
            "[]",
            '"Optional"',
            "{}",
            '{"subType": "number", "value": 1}',
            '{"type": "Other", "subType": "number", "value": 1}',
            '{"type": "Optional", "value": 1}',
            '{"type": "Optional", "subType": "", "value": 1}',
            '{"type": "Optional", "subType": 5, "value": 1}',
            '{"type": "Optional", "subType": "number"}',
            '{"type": "Optional", "subType": "number", "value": 1, "extra": true}',
        ],
    )
    def test_malformed_text(self, text: str) -> None:
        with pytest.raises(DeserializationException) as exc_info:
            Optional.from_json(text, "number")
        assert not isinstance(exc_info.value, SubTypeMismatchException)
        assert exc_info.value.payload == text

    def test_value_inconsistent_with_subtype(self) -> None:
        text = '{"type": "Optional", "subType": "number", "value": "42"}'
        with pytest.raises(DeserializationException, match="does not match subType"):
            Optional.from_json(text, "number")

    def test_malformed_checked_before_subtype(self) -> None:
        text = '{"type": "Optional", "subType": "number", "value": "42"}'
        with pytest.raises(DeserializationException):
            Optional.from_json(text, "string")

    def test_contract_violations_listed_in_message(self) -> None:
        text = '{"type": "Maybe", "subType": "number"}'
        with pytest.raises(DeserializationException) as exc_info:
            Optional.from_json(text, "number")
        message = str(exc_info.value)
        assert "type: " in message
        assert "'value' is a required property" in message

    def test_invalid_json_is_chained(self) -> None:
        with pytest.raises(DeserializationException) as exc_info:
            Optional.from_json("{", "number")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)

    def test_malformed_is_runtime_error(self) -> None:
        with pytest.raises(RuntimeError):
            Optional.from_json("{}", "number")
