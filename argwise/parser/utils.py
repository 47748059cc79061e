# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains token tests and value coercion utilities for Argwise parsing.

This module provides the small predicates the classifier uses to decide what a
token is, and the type coercion functions behind `ParsedValue` conversions.

Functions:
- trim_leading_dashes: Strip every leading '-' from an option token.
- is_number: Check whether a token is a full numeric literal.
- is_option: Check whether a token is an option.
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string or raw value to an Enum instance.
- coerce_value: General-purpose coercion to a target type (including unions, enums, etc.).
- try_parse: Exception-free wrapper around `coerce_value` returning a `Conversion`.
"""
import re
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from argwise.exceptions import ConversionError
from argwise.parser.parser_types import Conversion

_NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def trim_leading_dashes(name: str) -> str:
    """
    Remove all leading '-' characters from a name.

    A name made only of dashes is returned unchanged.
    """
    stripped = name.lstrip("-")
    return stripped if stripped else name


def is_number(token: str) -> bool:
    """Return True if the whole token is a decimal floating-point literal."""
    return _NUMBER_PATTERN.fullmatch(token) is not None


def is_option(token: str) -> bool:
    """Return True if the token starts with '-' and is not a number."""
    if not token or is_number(token):
        return False
    return token[0] == "-"


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts various truthy and falsy representations such as 'true', 'yes', '0', 'off', etc.

    Args:
        value (str): The input string or boolean.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the string is not a recognized boolean word.
    """
    if isinstance(value, bool):
        return value
    value = value.strip().lower()
    if value in {"true", "t", "1", "yes", "y", "on"}:
        return True
    elif value in {"false", "f", "0", "no", "n", "off"}:
        return False
    raise ValueError(f"'{value}' is not a boolean value")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Convert a raw value or string to an Enum instance.

    Tries to resolve by name, value, or coerced base type.

    Raises:
        ValueError: If the value cannot be resolved to a valid Enum member.
    """
    if isinstance(value, enum_type):
        return value

    if isinstance(value, str):
        try:
            return enum_type[value]
        except KeyError:
            pass

    base_type = type(next(iter(enum_type)).value)
    try:
        coerced_value = base_type(value)
        return enum_type(coerced_value)
    except (ValueError, TypeError):
        values = [str(enum.value) for enum in enum_type]
        raise ValueError(f"'{value}' should be one of {{{', '.join(values)}}}") from None


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles complex typing constructs such as Union, Literal, Enum, and datetime.
    Any other callable target is invoked with the string.

    Args:
        value (str): The input string to convert.
        target_type (type): The desired type.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if target_type is Any or target_type is str:
        return value

    if origin is Literal:
        if value not in args:
            raise ValueError(
                f"Value '{value}' is not a valid literal for type {target_type}"
            )
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(
                f"Value '{value}' could not be parsed as a datetime"
            ) from error

    if not callable(target_type):
        raise TypeError(f"Target type {target_type!r} is not callable")

    return target_type(value)


def try_parse(text: str, target_type: Any = str) -> Conversion:
    """
    Convert `text` to `target_type` without raising.

    Returns:
        Conversion: `ok` with the value on success, otherwise carrying a
        `ConversionError` describing the failure.
    """
    try:
        return Conversion(value=coerce_value(text, target_type))
    except (ValueError, TypeError, ArithmeticError) as error:
        return Conversion(error=ConversionError(text, target_type, str(error)))
