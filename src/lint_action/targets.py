# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Normalise the newline/whitespace separated target list."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ResolvedTargets:
    """Clean, ordered target identifiers."""

    items: tuple[str, ...]

    @property
    def printable(self) -> str:
        """Return the targets joined by newlines for display."""

        return "\n".join(self.items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def resolve_targets(blob: str | None) -> ResolvedTargets:
    """Split ``blob`` into individual targets, dropping blank entries.

    Args:
        blob: Raw target list with one or more targets per line.

    Returns:
        ResolvedTargets: Targets in their original order.

    Raises:
        ConfigurationError: If ``blob`` contains no targets.
    """

    items = tuple(entry.strip() for entry in (blob or "").split() if entry.strip())
    if not items:
        raise ConfigurationError("No targets to check. Nothing to do.")
    return ResolvedTargets(items)


__all__ = ["ResolvedTargets", "resolve_targets"]
