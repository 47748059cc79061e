# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedValue`, the typed-conversion handle returned by
`ParseResult.value()`.

A handle wraps the text found for an index or name (or the text form of a
caller-supplied default) and converts it on request. Like an input stream, it
has a validity state: a failed lookup produces an invalid handle, and a failed
`extract()` leaves the handle invalid. Conversion problems never raise; callers
check `ok` (or the handle's truthiness) before trusting an extracted value.

Example:
    port = result.value(["p", "port"], default=8080)
    number = port.extract(int)
    if not port:
        ...  # port.error explains why, port.text holds the raw input
"""
from __future__ import annotations

from typing import Any, Literal

from argwise.exceptions import ConversionError
from argwise.parser.parser_types import Key
from argwise.parser.utils import try_parse

ValueSource = Literal["positional", "param", "default", "missing"]


class ParsedValue:
    """
    Text-to-value converter for a single lookup result.

    Attributes:
        key (Key | None): The key that produced this handle.
        source (str): "positional", "param", "default" or "missing".
        error (ConversionError | None): Set after a failed extraction.
    """

    def __init__(
        self,
        text: str | None,
        source: ValueSource,
        key: Key | None = None,
    ) -> None:
        self._text = text
        self.source = source
        self.key = key
        self.error: ConversionError | None = None
        self._failed = text is None

    @classmethod
    def missing(cls, key: Key | None = None) -> ParsedValue:
        """Return a handle in the failed state."""
        return cls(None, "missing", key)

    @property
    def text(self) -> str:
        """The raw text; empty when the lookup missed."""
        return self._text if self._text is not None else ""

    @property
    def ok(self) -> bool:
        return not self._failed

    @property
    def found(self) -> bool:
        """True if the text came from the parsed tokens rather than a default."""
        return self.source in ("positional", "param")

    def extract(self, target_type: Any = str) -> Any:
        """
        Convert the text to `target_type`.

        Returns the converted value, or None if the handle is (or becomes)
        invalid. A failed conversion records `error` and invalidates the handle.
        """
        if self._failed or self._text is None:
            return None
        conversion = try_parse(self._text, target_type)
        if not conversion.ok:
            self._failed = True
            self.error = conversion.error
            return None
        return conversion.value

    def as_(self, target_type: Any = str, default: Any = None) -> Any:
        """Convert the text without touching the handle's state."""
        if self._failed or self._text is None:
            return default
        return try_parse(self._text, target_type).value_or(default)

    def __bool__(self) -> bool:
        return self.ok

    def __str__(self) -> str:
        return self.text

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ParsedValue):
            return (self._text, self.ok) == (other._text, other.ok)
        if isinstance(other, str):
            return self.ok and self._text == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        state = "ok" if self.ok else "failed"
        return f"ParsedValue(text={self._text!r}, source={self.source!r}, {state})"
