# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Error taxonomy shared by the lint action components."""

from __future__ import annotations


class LintActionError(Exception):
    """Base class for failures raised by the lint action itself."""


class ConfigurationError(LintActionError):
    """Raised when a required input is missing or malformed."""


class OptionError(LintActionError):
    """Raised when caller-supplied linter options cannot be translated."""


class UnsupportedFlagError(OptionError):
    """Raised when an option token is not part of the supported vocabulary."""

    def __init__(self, flag: str) -> None:
        """Initialise the error for ``flag``.

        Args:
            flag: Offending token exactly as supplied by the caller.
        """

        super().__init__(f"Unsupported flag: '{flag}'")
        self.flag = flag


class MissingOptionValueError(OptionError):
    """Raised when a value-taking flag is the final token."""

    def __init__(self, flag: str) -> None:
        """Initialise the error for ``flag``.

        Args:
            flag: Value-taking flag that had no token left to consume.
        """

        super().__init__(f"Flag '{flag}' requires a value")
        self.flag = flag


class PublishError(LintActionError):
    """Raised when the lint report cannot be delivered to the review system."""


__all__ = [
    "ConfigurationError",
    "LintActionError",
    "MissingOptionValueError",
    "OptionError",
    "PublishError",
    "UnsupportedFlagError",
]
