# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseMode`, the bitmask that steers how `ArgumentParser` resolves
ambiguous tokens during a single parse call.

Members are independently combinable with `|`. The two PREFER_* members are
mutually exclusive; combining them is a caller error reported as
`ModeConflictError`.

Supports alias coercion for config-friendly values:

Example:
    ParseMode.coerce("multiflag")                  → ParseMode.SINGLE_DASH_IS_MULTIFLAG
    ParseMode.coerce(["prefer-param", "no-split"]) → PREFER_PARAM | NO_SPLIT
    ParseMode.coerce(9)                            → PREFER_FLAG | MULTIFLAG
"""
from __future__ import annotations

from enum import IntFlag
from typing import Any, Iterable

from argwise.exceptions import ModeConflictError


class ParseMode(IntFlag):
    """
    Configuration switches for one parse call.

    Members:
        PREFER_FLAG_FOR_UNREG_OPTION: An unregistered option followed by a
            non-option token becomes a flag (default).
        PREFER_PARAM_FOR_UNREG_OPTION: An unregistered option followed by a
            non-option token consumes it as its value.
        NO_SPLIT_ON_EQUALSIGN: Disable `--name=value` splitting.
        SINGLE_DASH_IS_MULTIFLAG: Expand unregistered `-abc` into flags a, b, c.

    Aliases:
        - "prefer-flag" → PREFER_FLAG_FOR_UNREG_OPTION
        - "prefer-param" → PREFER_PARAM_FOR_UNREG_OPTION
        - "no-split" → NO_SPLIT_ON_EQUALSIGN
        - "multiflag" → SINGLE_DASH_IS_MULTIFLAG
    """

    PREFER_FLAG_FOR_UNREG_OPTION = 1 << 0
    PREFER_PARAM_FOR_UNREG_OPTION = 1 << 1
    NO_SPLIT_ON_EQUALSIGN = 1 << 2
    SINGLE_DASH_IS_MULTIFLAG = 1 << 3

    @classmethod
    def default(cls) -> ParseMode:
        return cls.PREFER_FLAG_FOR_UNREG_OPTION

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "prefer-flag": "PREFER_FLAG_FOR_UNREG_OPTION",
            "prefer-param": "PREFER_PARAM_FOR_UNREG_OPTION",
            "no-split": "NO_SPLIT_ON_EQUALSIGN",
            "multiflag": "SINGLE_DASH_IS_MULTIFLAG",
        }
        normalized = value.strip().lower().replace("_", "-")
        return aliases.get(normalized, value.strip().upper().replace("-", "_"))

    @classmethod
    def coerce(cls, value: Any) -> ParseMode:
        """
        Convert a mode-like value to a `ParseMode`.

        Accepts a `ParseMode`, an `int`, a member name or alias, or an iterable of
        any of those (combined with `|`). `None` yields the default mode.

        Raises:
            ValueError: If a name is unknown or an int carries undefined bits.
            TypeError: If the value has an unsupported type.
        """
        if value is None:
            return cls.default()
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise TypeError(f"Invalid {cls.__name__}: {value!r}")
        if isinstance(value, int):
            known = 0
            for member in cls:
                known |= member.value
            if value < 0 or value & ~known:
                raise ValueError(f"Invalid {cls.__name__} bits: {value!r}")
            return cls(value)
        if isinstance(value, str):
            name = cls._get_alias(value)
            try:
                return cls[name]
            except KeyError:
                valid = ", ".join(member.name for member in cls)
                raise ValueError(
                    f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}"
                ) from None
        if isinstance(value, Iterable):
            combined = cls(0)
            for item in value:
                combined |= cls.coerce(item)
            return combined
        raise TypeError(f"Invalid {cls.__name__}: {value!r}")

    @classmethod
    def validate(cls, mode: ParseMode) -> ParseMode:
        """Raise `ModeConflictError` if both PREFER_* bits are set."""
        both = cls.PREFER_FLAG_FOR_UNREG_OPTION | cls.PREFER_PARAM_FOR_UNREG_OPTION
        if mode & both == both:
            raise ModeConflictError(
                "PREFER_FLAG_FOR_UNREG_OPTION and PREFER_PARAM_FOR_UNREG_OPTION "
                "are mutually exclusive"
            )
        return mode

    @property
    def prefers_param(self) -> bool:
        return bool(self & ParseMode.PREFER_PARAM_FOR_UNREG_OPTION)

    @property
    def splits_on_equalsign(self) -> bool:
        return not self & ParseMode.NO_SPLIT_ON_EQUALSIGN

    @property
    def multiflag(self) -> bool:
        return bool(self & ParseMode.SINGLE_DASH_IS_MULTIFLAG)

    def member_names(self) -> list[str]:
        """Return the names of the single-bit modes set in this value."""
        return [member.name for member in type(self) if member in self]

    def __str__(self) -> str:
        return "|".join(self.member_names()) or "0"

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)
