"""
Argwise

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .parser_types import Conversion, Index, Key, Name, Names, to_key
from .utils import coerce_value, is_number, is_option, trim_leading_dashes, try_parse
from .parsed_value import ParsedValue
from .registry import ParamRegistry
from .parse_result import ParseResult
from .argument_parser import ArgumentParser

__all__ = [
    "ArgumentParser",
    "Conversion",
    "Index",
    "Key",
    "Name",
    "Names",
    "ParamRegistry",
    "ParsedValue",
    "ParseResult",
    "coerce_value",
    "is_number",
    "is_option",
    "to_key",
    "trim_leading_dashes",
    "try_parse",
]
