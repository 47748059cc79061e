# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the immutable outcome of one `ArgumentParser.parse()` call,
together with its read-only query surface.

A result holds three containers:
- positional arguments, in input order (duplicates kept)
- flags, as a multiset of names (repeated `-v` increases the count)
- parameters, as name → values in input order (every occurrence kept)

Lookups never raise for missing data. Keys are `Index`, `Name` or `Names`
(see `parser_types`); plain ints, strings and lists of strings are coerced.
Query names may carry leading dashes, which are ignored.

Duplicate parameters: every value is retained. Single-value lookups return the
first value given on the command line; `get_all()` returns all of them.

Example:
    result = parser.parse(["build", "-v", "--name=foo", "-j", "4"])
    result[0]                         # "build"
    result["v"]                       # True (flag)
    result.value("name").text         # "foo"
    result.value(["j", "jobs"], default=1).extract(int)
"""
from __future__ import annotations

from collections import Counter
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argwise.console import console as default_console
from argwise.mode import ParseMode
from argwise.parser.parsed_value import ParsedValue
from argwise.parser.parser_types import Index, Key, NameKey, to_key
from argwise.parser.utils import trim_leading_dashes
from argwise.themes import OneColors


class ParseResult:
    """
    Classified tokens from a single parse.

    Attributes:
        mode (ParseMode): The mode the tokens were parsed with.
    """

    def __init__(
        self,
        positional: Iterable[str] = (),
        flags: Iterable[str] = (),
        params: Iterable[tuple[str, str]] = (),
        mode: ParseMode = ParseMode.PREFER_FLAG_FOR_UNREG_OPTION,
    ) -> None:
        self.mode: ParseMode = mode
        self._positional: tuple[str, ...] = tuple(positional)
        self._flags: Counter[str] = Counter(flags)
        self._param_items: tuple[tuple[str, str], ...] = tuple(params)
        grouped: dict[str, list[str]] = {}
        for name, value in self._param_items:
            grouped.setdefault(name, []).append(value)
        self._params: dict[str, tuple[str, ...]] = {
            name: tuple(values) for name, values in grouped.items()
        }

    @property
    def positional(self) -> tuple[str, ...]:
        return self._positional

    @property
    def flags(self) -> Mapping[str, int]:
        """Read-only view of flag name → occurrence count."""
        return MappingProxyType(self._flags)

    @property
    def params(self) -> Mapping[str, tuple[str, ...]]:
        """Read-only view of parameter name → values, in input order."""
        return MappingProxyType(self._params)

    @property
    def param_items(self) -> tuple[tuple[str, str], ...]:
        """Every (name, value) pair, in input order."""
        return self._param_items

    def _names(self, key: Key) -> tuple[str, ...]:
        if isinstance(key, Index):
            raise TypeError(f"Expected a name or list of names, got index {key}")
        return tuple(trim_leading_dashes(name) for name in key.names)

    def lookup(self, key: Any) -> str | None:
        """
        Resolve a key to the stored text.

        `Index` returns the positional argument at that position, `Name` the first
        value of that parameter, and `Names` the first value of the first name
        that has one. Returns None when nothing matches.
        """
        key = to_key(key)
        if isinstance(key, Index):
            if 0 <= key.position < len(self._positional):
                return self._positional[key.position]
            return None
        for name in self._names(key):
            values = self._params.get(name)
            if values:
                return values[0]
        return None

    def has_flag(self, key: NameKey) -> bool:
        """Return True if the flag (or any of the alternatives) was given."""
        return any(name in self._flags for name in self._names(to_key(key)))

    def flag_count(self, key: NameKey) -> int:
        """Return how many times the flag (or the alternatives together) was given."""
        return sum(self._flags.get(name, 0) for name in self._names(to_key(key)))

    def has_param(self, key: NameKey) -> bool:
        """Return True if the parameter (or any of the alternatives) has a value."""
        return any(name in self._params for name in self._names(to_key(key)))

    def get_all(self, key: NameKey) -> tuple[str, ...]:
        """Return every value given for the name(s), in input order."""
        wanted = set(self._names(to_key(key)))
        return tuple(value for name, value in self._param_items if name in wanted)

    def positional_at(self, index: int) -> str:
        """Return the positional argument at `index`, or "" if out of range."""
        text = self.lookup(Index(index))
        return text if text is not None else ""

    def value(self, key: Any, default: Any = None) -> ParsedValue:
        """
        Return a `ParsedValue` handle for a positional index or parameter name(s).

        Args:
            key: An index, a name, or a list of alternative names.
            default: Used when the key has no stored text. The handle wraps
                `str(default)`, or the member name for an `Enum`. Without a
                default a missing key yields a failed handle.
        """
        key = to_key(key)
        text = self.lookup(key)
        if text is not None:
            source = "positional" if isinstance(key, Index) else "param"
            return ParsedValue(text, source, key)
        if isinstance(default, Enum):
            return ParsedValue(default.name, "default", key)
        if default is not None:
            return ParsedValue(str(default), "default", key)
        return ParsedValue.missing(key)

    def __getitem__(self, key: Any) -> Any:
        """
        `result[i]` → positional text ("" if missing), `result[i:j]` → tuple of
        positional args, `result["v"]` / `result[["v", "verbose"]]` → flag membership.
        """
        if isinstance(key, slice):
            return self._positional[key]
        key = to_key(key)
        if isinstance(key, Index):
            return self.positional_at(key.position)
        return self.has_flag(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self._positional)

    def __len__(self) -> int:
        return len(self._positional)

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, JSON-friendly copy of the result."""
        return {
            "positional": list(self._positional),
            "flags": dict(self._flags),
            "params": {name: list(values) for name, values in self._params.items()},
            "mode": self.mode.member_names(),
        }

    def to_table(self, title: str = "Parsed Arguments") -> Table:
        """Build a Rich table with one row per positional, flag and parameter value."""
        table = Table(title=title, box=box.SIMPLE, expand=False)
        table.add_column("Kind", style="bold")
        table.add_column("Name")
        table.add_column("Value")

        for index, text in enumerate(self._positional):
            table.add_row(f"[{OneColors.BLUE}]positional", f"[{index}]", escape(text))
        for name, count in self._flags.items():
            suffix = f" [{OneColors.COMMENT_GREY}](x{count})[/]" if count > 1 else ""
            table.add_row(f"[{OneColors.GREEN}]flag", f"{escape(name)}{suffix}", "")
        for name, text in self._param_items:
            table.add_row(f"[{OneColors.LIGHT_YELLOW}]param", escape(name), escape(text))

        if not table.row_count:
            table.add_row(f"[{OneColors.COMMENT_GREY}]empty", "", "")
        table.caption = f"mode: {self.mode}"
        return table

    def summary(self, console: Console | None = None) -> None:
        """Print the result as a Rich table."""
        (console or default_console).print(self.to_table())

    def __rich__(self) -> Table:
        return self.to_table()

    def __str__(self) -> str:
        return (
            f"ParseResult(positional={len(self._positional)}, "
            f"flags={sum(self._flags.values())}, params={len(self._param_items)}, "
            f"mode={self.mode})"
        )

    def __repr__(self) -> str:
        return (
            f"ParseResult(positional={list(self._positional)!r}, "
            f"flags={dict(self._flags)!r}, params={dict(self._params)!r})"
        )
