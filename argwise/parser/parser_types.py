# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Key and result types for Argwise's accessor layer.

Contents:
- `Index`, `Name`, `Names`: the tagged lookup key consumed by
  `ParseResult.lookup()`. `Index` addresses a positional argument, `Name` a
  flag or parameter, and `Names` an ordered list of alternative names.
- `to_key`: Coerces plain `int`, `str` and sequences of `str` into a key.
- `Conversion`: The outcome of `try_parse`, holding either a value or a
  `ConversionError`. Conversion failures are returned, never raised.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from argwise.exceptions import ConversionError

T = TypeVar("T")


@dataclass(frozen=True)
class Index:
    """Position of a positional argument."""

    position: int

    def __post_init__(self) -> None:
        if isinstance(self.position, bool) or not isinstance(self.position, int):
            raise TypeError(f"Index position must be an int, got {self.position!r}")

    def __str__(self) -> str:
        return f"[{self.position}]"


@dataclass(frozen=True)
class Name:
    """A single flag or parameter name, with or without leading dashes."""

    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Name must be a str, got {self.name!r}")

    @property
    def names(self) -> tuple[str, ...]:
        return (self.name,)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Names:
    """Ordered alternative names; the first one present wins."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        if not all(isinstance(name, str) for name in self.names):
            raise TypeError(f"Names must all be str, got {self.names!r}")

    def __str__(self) -> str:
        return "|".join(self.names)


Key = Union[Index, Name, Names]
NameKey = Union[str, list[str], tuple[str, ...], Name, Names]


def to_key(value: Any) -> Key:
    """
    Convert a raw accessor argument into a `Key`.

    `int` → `Index`, `str` → `Name`, list/tuple of `str` → `Names`.

    Raises:
        TypeError: If the value cannot be used as a key.
    """
    if isinstance(value, (Index, Name, Names)):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Invalid key: {value!r}")
    if isinstance(value, int):
        return Index(value)
    if isinstance(value, str):
        return Name(value)
    if isinstance(value, (list, tuple)):
        return Names(tuple(value))
    raise TypeError(
        f"Invalid key: {value!r}. Expected an int, a str, or a list of str."
    )


@dataclass(frozen=True)
class Conversion(Generic[T]):
    """Result of converting text to a typed value."""

    value: T | None = None
    error: ConversionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: Any = None) -> Any:
        """Return the converted value, or `default` if the conversion failed."""
        return self.value if self.ok else default

    def __bool__(self) -> bool:
        return self.ok
