"""
Тесты для таксономии исключений
"""

import pytest

from javalike.core.exceptions import (
    DeserializationException,
    IllegalArgumentException,
    IllegalStateException,
    JavaLikeException,
    NoSuchElementException,
    NotImplementedException,
    RunTimeException,
    SubTypeMismatchException,
)


@pytest.mark.parametrize(
    "exc_type,builtin",
    [
        (IllegalArgumentException, ValueError),
        (IllegalStateException, RuntimeError),
        (RunTimeException, RuntimeError),
        (NotImplementedException, NotImplementedError),
        (NoSuchElementException, LookupError),
    ],
)
def test_taxonomy_builtin_bases(exc_type, builtin) -> None:
    assert issubclass(exc_type, JavaLikeException)
    assert issubclass(exc_type, builtin)


def test_deserialization_kinds_are_distinct() -> None:
    assert issubclass(DeserializationException, RunTimeException)
    assert issubclass(SubTypeMismatchException, RunTimeException)
    assert not issubclass(SubTypeMismatchException, DeserializationException)
    assert not issubclass(DeserializationException, SubTypeMismatchException)


def test_deserialization_exception_payload() -> None:
    exc = DeserializationException("bad", payload="{")
    assert str(exc) == "bad"
    assert exc.payload == "{"


def test_sub_type_mismatch_message() -> None:
    exc = SubTypeMismatchException("number", "string")
    assert str(exc) == "Cannot deserialize Optional of type number to string"
