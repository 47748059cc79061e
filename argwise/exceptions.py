# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argwise.

Argwise avoids exceptions for ordinary lookup misses and conversion failures:
those are reported through sentinel values and failed `ParsedValue` handles.
Exceptions are reserved for caller programming errors, such as an invalid
`ParseMode` combination or a malformed configuration file.

All exceptions inherit from `ArgwiseError`, the base exception for the package.

Exception Hierarchy:
- ArgwiseError
    ├── ModeConflictError
    ├── ConversionError
    └── ConfigError
"""


class ArgwiseError(Exception):
    """Base exception for Argwise."""


class ModeConflictError(ArgwiseError, ValueError):
    """Exception raised when both PREFER_* bits are set in a parse mode."""


class ConversionError(ArgwiseError, ValueError):
    """
    Describes a failed text-to-value conversion.

    Instances are carried inside `Conversion` and `ParsedValue` results rather
    than raised by the accessor layer.
    """

    def __init__(self, text: str, target_type: object, reason: str = "") -> None:
        self.text = text
        self.target_type = target_type
        self.reason = reason
        type_name = getattr(target_type, "__name__", repr(target_type))
        message = f"Could not convert '{text}' to {type_name}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ConfigError(ArgwiseError):
    """Exception raised when a parser configuration file cannot be loaded."""
