# Argwise — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `ArgumentParser`, a grammar-free command-line classifier.

Instead of declaring every argument up front, callers hand the parser a list of
tokens and get back a `ParseResult` that sorts each token into one of three
buckets: positional arguments, flags, or parameters (name + value). Options the
caller never mentioned are still accepted and classified heuristically; the
only declaration available is registering a name as value-bearing.

Key Features:
- Single left-to-right pass, bounded by the number of tokens, never raises for input
- `--name=value` splitting (disable with `NO_SPLIT_ON_EQUALSIGN`)
- Negative numbers such as `-5` or `-3.14` are positional, never options
- POSIX-style bundling of single-dash flags (`-xvf`) with `SINGLE_DASH_IS_MULTIFLAG`
- Registered names always take the following non-option token as their value
- Per-call `ParseMode` to choose flag or parameter for unregistered options

Public Interface:
- `register(*names)`: Declare value-bearing parameter names.
- `is_registered(name)`: Membership test against the registry.
- `parse(tokens, mode=None)`: Classify tokens into a fresh `ParseResult`.
- `parse_argv(mode=None)`: Classify `sys.argv[1:]`.

Example Usage:
    parser = ArgumentParser(params=["-o", "--output"])
    result = parser.parse(["-v", "-o", "out.txt", "input.txt"])

    # result.positional == ("input.txt",)
    # result["v"] is True
    # result.value(["o", "output"]).text == "out.txt"

Design Notes:
Each `parse` call builds a new, immutable `ParseResult`; nothing from an earlier
call leaks into a later one. The registry is read-only while parsing.
"""
from __future__ import annotations

import sys
from typing import Any, Iterable

from argwise.logger import logger
from argwise.mode import ParseMode
from argwise.parser.parse_result import ParseResult
from argwise.parser.registry import ParamRegistry
from argwise.parser.utils import is_option, trim_leading_dashes


class ArgumentParser:
    """
    Heuristic classifier for command-line tokens.

    Tokens are classified as:
    - positional: anything that does not start with '-', or is a number
    - flag: an option with no value
    - parameter: an option with a value, from `name=value` or the next token

    Args:
        params (Iterable[str] | None): Names to register as value-bearing.
        mode (ParseMode | int | str | list | None): Default mode for `parse()`.
    """

    def __init__(
        self,
        params: Iterable[str] | None = None,
        mode: Any = None,
    ) -> None:
        self.registry: ParamRegistry = ParamRegistry(params)
        self.mode: ParseMode = ParseMode.validate(ParseMode.coerce(mode))

    def register(self, *names: str) -> None:
        """Register one or more parameter names (leading dashes are ignored)."""
        self.registry.register(*names)

    def is_registered(self, name: str) -> bool:
        return self.registry.is_registered(name)

    def _expand_multiflag(self, name: str, flags: list[str]) -> str | None:
        """
        Emit each character of a single-dash bundle as a flag.

        If the last character is a registered name it is held back and returned
        so the caller can resolve it as a regular option.
        """
        keep_param = None
        if name and self.registry.is_registered(name[-1]):
            keep_param = name[-1]
            name = name[:-1]
        flags.extend(name)
        logger.debug(
            "Expanded bundle '-%s' into flags %s", name + (keep_param or ""), list(name)
        )
        return keep_param

    def parse(self, tokens: Iterable[str] | None = None, mode: Any = None) -> ParseResult:
        """
        Classify tokens into positional arguments, flags and parameters.

        Args:
            tokens (Iterable[str] | None): The raw tokens. Token 0 is not treated
                specially; drop the program name beforehand if needed.
            mode (ParseMode | int | str | list | None): Overrides the parser's
                default mode for this call.

        Returns:
            ParseResult: A new, immutable result.

        Raises:
            ModeConflictError: If both PREFER_* bits are set.
        """
        mode = self.mode if mode is None else ParseMode.validate(ParseMode.coerce(mode))
        args: list[str] = list(tokens) if tokens is not None else []
        for token in args:
            if not isinstance(token, str):
                raise TypeError(f"Tokens must be str, got {token!r}")

        positional: list[str] = []
        flags: list[str] = []
        params: list[tuple[str, str]] = []

        i = 0
        while i < len(args):
            token = args[i]
            if not is_option(token):
                positional.append(token)
                i += 1
                continue

            name = trim_leading_dashes(token)

            if mode.splits_on_equalsign and "=" in name:
                key, _, value = name.partition("=")
                params.append((key, value))
                i += 1
                continue

            single_dash = len(token) - len(name) == 1
            if single_dash and mode.multiflag and not self.registry.is_registered(name):
                keep_param = self._expand_multiflag(name, flags)
                if keep_param is None:
                    i += 1
                    continue
                name = keep_param

            if i == len(args) - 1 or is_option(args[i + 1]):
                flags.append(name)
                i += 1
                continue

            if self.registry.is_registered(name) or mode.prefers_param:
                params.append((name, args[i + 1]))
                i += 2
                continue

            logger.debug(
                "Unregistered option '%s' treated as flag; '%s' left independent",
                name,
                args[i + 1],
            )
            flags.append(name)
            i += 1

        result = ParseResult(positional, flags, params, mode)
        logger.debug(
            "Parsed %d tokens with mode %s: %d positional, %d flags, %d params",
            len(args),
            mode,
            len(positional),
            len(flags),
            len(params),
        )
        return result

    def parse_argv(self, mode: Any = None) -> ParseResult:
        """Parse the current process arguments, excluding the program name."""
        return self.parse(sys.argv[1:], mode)

    def __str__(self) -> str:
        return (
            f"ArgumentParser(registered={len(self.registry)}, mode={self.mode})"
        )

    def __repr__(self) -> str:
        return f"ArgumentParser(params={list(self.registry)!r}, mode={self.mode!r})"
