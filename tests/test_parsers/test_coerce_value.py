from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal, Union

import pytest

from argwise.exceptions import ConversionError
from argwise.parser.utils import coerce_bool, coerce_value, trim_leading_dashes, try_parse


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int, 42),
        ("3.14", float, 3.14),
        ("True", bool, True),
        ("hello", str, "hello"),
        ("", str, ""),
        ("False", bool, False),
        ("./a.txt", Path, Path("./a.txt")),
    ],
)
def test_coerce_value_basic(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


@pytest.mark.parametrize(
    "value, target_type, expected",
    [
        ("42", int | float, 42),
        ("3.14", int | float, 3.14),
        ("hello", str | int, "hello"),
        ("1", bool | str, True),
        ("7", int | None, 7),
    ],
)
def test_coerce_value_union_success(value, target_type, expected):
    assert coerce_value(value, target_type) == expected


def test_coerce_value_union_failure():
    with pytest.raises(ValueError) as excinfo:
        coerce_value("abc", int | float)
    assert "could not be coerced" in str(excinfo.value)


def test_coerce_value_typing_union_equivalent():
    assert coerce_value("123", Union[int, str]) == 123
    assert coerce_value("abc", Union[int, str]) == "abc"


def test_coerce_value_enum():
    class Color(Enum):
        RED = "red"
        GREEN = "green"

    assert coerce_value("red", Color) == Color.RED
    assert coerce_value("GREEN", Color) == Color.GREEN

    with pytest.raises(ValueError):
        coerce_value("yellow", Color)


def test_coerce_value_literal():
    assert coerce_value("a", Literal["a", "b"]) == "a"
    with pytest.raises(ValueError):
        coerce_value("c", Literal["a", "b"])


def test_coerce_value_datetime():
    assert coerce_value("2025-01-02", datetime) == datetime(2025, 1, 2)
    with pytest.raises(ValueError):
        coerce_value("not a date", datetime)


@pytest.mark.parametrize("value", ["yes", "ON", " t ", "1"])
def test_coerce_bool_true(value):
    assert coerce_bool(value) is True


def test_coerce_bool_rejects_unknown_words():
    with pytest.raises(ValueError):
        coerce_bool("maybe")


def test_try_parse_never_raises():
    conversion = try_parse("abc", int)
    assert not conversion.ok
    assert not conversion
    assert isinstance(conversion.error, ConversionError)
    assert conversion.error.text == "abc"
    assert conversion.error.target_type is int
    assert conversion.value_or(0) == 0

    conversion = try_parse("12", int)
    assert conversion.ok
    assert conversion.value == 12


def test_try_parse_non_callable_target():
    assert not try_parse("x", 5)


@pytest.mark.parametrize(
    "name, expected",
    [("--out", "out"), ("-o", "o"), ("o", "o"), ("---x-y", "x-y"), ("-", "-"), ("--", "--")],
)
def test_trim_leading_dashes(name, expected):
    assert trim_leading_dashes(name) == expected
