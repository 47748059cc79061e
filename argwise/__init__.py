"""
Argwise

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import ArgwiseError, ConfigError, ConversionError, ModeConflictError
from .mode import ParseMode
from .parser import (
    ArgumentParser,
    Index,
    Name,
    Names,
    ParamRegistry,
    ParsedValue,
    ParseResult,
    try_parse,
)
from .version import __version__

logger = logging.getLogger("argwise")


__all__ = [
    "ArgumentParser",
    "ArgwiseError",
    "ConfigError",
    "ConversionError",
    "Index",
    "ModeConflictError",
    "Name",
    "Names",
    "ParamRegistry",
    "ParsedValue",
    "ParseMode",
    "ParseResult",
    "try_parse",
    "__version__",
]
