# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParamRegistry`, the set of option names declared as value-bearing.

Registering a name shifts classification policy only: a registered option that
is followed by a non-option token always consumes that token as its value, and
a registered single character stops a `-xyz` bundle from being expanded past
it. Names are stored without leading dashes, so "-o", "--o" and "o" are the
same entry.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from argwise.logger import logger
from argwise.parser.utils import trim_leading_dashes


class ParamRegistry:
    """Set of registered parameter names."""

    def __init__(self, names: Iterable[str] | None = None) -> None:
        self._names: set[str] = set()
        if names:
            self.register(*names)

    def register(self, *names: str) -> None:
        """Add one or more names. Registering a name twice has no effect."""
        for name in names:
            if not isinstance(name, str):
                raise TypeError(f"Parameter name must be a str, got {name!r}")
            if not name:
                raise ValueError("Parameter name cannot be empty")
            stripped = trim_leading_dashes(name)
            if stripped in self._names:
                continue
            self._names.add(stripped)
            logger.debug("Registered parameter name '%s'", stripped)

    def is_registered(self, name: str) -> bool:
        return trim_leading_dashes(name) in self._names

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self._names)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"ParamRegistry({sorted(self._names)!r})"
