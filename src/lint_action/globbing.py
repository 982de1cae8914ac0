# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Target pattern expansion with a scoped recursive (``**``) glob toggle."""

from __future__ import annotations

import glob
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Final

_GLOB_CHARS: Final[frozenset[str]] = frozenset("*?[")


class TargetGlobber:
    """Expand target patterns relative to ``root``.

    Recursive matching is off by default, mirroring a shell without
    ``globstar``: ``**`` then behaves like ``*``. Use :meth:`recursive` to
    enable it for the duration of a block.
    """

    def __init__(self, root: Path) -> None:
        self.root = root
        self.recursive_enabled = False

    @contextmanager
    def recursive(self) -> Iterator[TargetGlobber]:
        """Enable recursive matching until the block exits.

        The previous setting is restored on every exit path, including
        exceptions raised inside the block.
        """

        previous = self.recursive_enabled
        self.recursive_enabled = True
        try:
            yield self
        finally:
            self.recursive_enabled = previous

    def expand(self, patterns: Iterable[str]) -> list[str]:
        """Expand ``patterns`` in order, keeping unmatched patterns literally.

        Args:
            patterns: Target identifiers that may contain glob characters.

        Returns:
            list[str]: Sorted matches for each pattern, in pattern order.
        """

        expanded: list[str] = []
        for pattern in patterns:
            if not _GLOB_CHARS.intersection(pattern):
                expanded.append(pattern)
                continue
            matches = sorted(glob.glob(pattern, root_dir=self.root, recursive=self.recursive_enabled))
            expanded.extend(matches or [pattern])
        return expanded


__all__ = ["TargetGlobber"]
