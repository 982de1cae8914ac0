# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate action-style option tokens into ``ansible-lint`` flags."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final

from .errors import MissingOptionValueError, UnsupportedFlagError

END_OF_OPTIONS: Final[str] = "--"


@dataclass(frozen=True, slots=True)
class FlagSpec:
    """Describe how a supported flag is forwarded to the linter.

    Attributes:
        emit: Flag emitted on the linter command line.
        takes_value: ``True`` when the next token is consumed as the value.
        inline_value: Emit the value as ``emit=value`` instead of two tokens.
    """

    emit: str
    takes_value: bool = False
    inline_value: bool = False

    def render(self, value: str | None) -> tuple[str, ...]:
        """Return the linter tokens for this flag and ``value``."""

        if not self.takes_value or value is None:
            return (self.emit,)
        if self.inline_value:
            return (f"{self.emit}={value}",)
        return (self.emit, value)


_QUIET = FlagSpec("-q")
_CONFIG_FILE = FlagSpec("-c", takes_value=True)
_PARSEABLE = FlagSpec("-p")
_RULES_DIR = FlagSpec("-r", takes_value=True)
_RULES_DIR_EXCLUSIVE = FlagSpec("-R")
_TAGS = FlagSpec("-t", takes_value=True)
_SKIP_LIST = FlagSpec("-x", takes_value=True)
_EXCLUDE = FlagSpec("--exclude", takes_value=True, inline_value=True)
_NO_COLOR = FlagSpec("--no-color")
_PARSEABLE_SEVERITY = FlagSpec("--parseable-severity")

SUPPORTED_FLAGS: Final[dict[str, FlagSpec]] = {
    "-q": _QUIET,
    "--quiet": _QUIET,
    "-c": _CONFIG_FILE,
    "--config-file": _CONFIG_FILE,
    "-p": _PARSEABLE,
    "--parseable": _PARSEABLE,
    "-r": _RULES_DIR,
    "--rules-dir": _RULES_DIR,
    "-R": _RULES_DIR_EXCLUSIVE,
    "-t": _TAGS,
    "--tags": _TAGS,
    "-x": _SKIP_LIST,
    "--skip-list": _SKIP_LIST,
    "--exclude": _EXCLUDE,
    "--no-color": _NO_COLOR,
    "--nocolor": _NO_COLOR,
    "--parseable-severity": _PARSEABLE_SEVERITY,
}


@dataclass(frozen=True, slots=True)
class TranslatedOptions:
    """Linter flags produced from caller-supplied options."""

    args: tuple[str, ...] = ()

    def __str__(self) -> str:
        return " ".join(self.args)

    def __bool__(self) -> bool:
        return bool(self.args)


def translate_options(tokens: Iterable[str]) -> TranslatedOptions:
    """Translate ``tokens`` into the subset of flags ``ansible-lint`` accepts.

    Tokens are scanned left to right. A supported flag that takes a value
    consumes the next token verbatim, even when that token looks like another
    flag. Positional tokens are ignored and ``--`` ends option parsing.

    Args:
        tokens: Raw option tokens in caller order.

    Returns:
        TranslatedOptions: Translated flags in input order.

    Raises:
        UnsupportedFlagError: If a ``-``-prefixed token is not supported.
        MissingOptionValueError: If a value-taking flag has no following token.
    """

    pending = list(tokens)
    translated: list[str] = []
    index = 0
    while index < len(pending):
        token = pending[index]
        if token == END_OF_OPTIONS:
            break
        spec = SUPPORTED_FLAGS.get(token)
        if spec is None:
            if token.startswith("-"):
                raise UnsupportedFlagError(token)
            index += 1
            continue
        value: str | None = None
        if spec.takes_value:
            if index + 1 >= len(pending):
                raise MissingOptionValueError(token)
            value = pending[index + 1]
            index += 1
        translated.extend(spec.render(value))
        index += 1
    return TranslatedOptions(tuple(translated))


__all__ = [
    "END_OF_OPTIONS",
    "FlagSpec",
    "SUPPORTED_FLAGS",
    "TranslatedOptions",
    "translate_options",
]
