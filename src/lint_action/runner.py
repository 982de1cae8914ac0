# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invoke ``ansible-lint`` and capture its results without raising on findings."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .globbing import TargetGlobber
from .options import TranslatedOptions
from .process import CommandOptions, run_command

DEFAULT_LINTER: Final[str] = "ansible-lint"
AGGREGATE_FLAGS: Final[tuple[str, ...]] = ("-v", "--force-color")
ATTRIBUTION_FLAGS: Final[tuple[str, ...]] = ("--nocolor",)

# Shell conventions for commands that could not be started.
EXIT_NOT_FOUND: Final[int] = 127
EXIT_NOT_EXECUTABLE: Final[int] = 126


@dataclass(frozen=True, slots=True)
class LintResult:
    """Outcome of a single linter invocation.

    Attributes:
        target: Target linted on its own, or ``None`` for the aggregate run.
        exit_code: Process exit status.
        output: Combined stdout and stderr.
    """

    target: str | None
    exit_code: int
    output: str

    @property
    def ok(self) -> bool:
        """Return ``True`` when the linter reported no findings."""

        return self.exit_code == 0


class LintRunner:
    """Run the linter once over every target or once per target."""

    def __init__(
        self,
        workspace: Path,
        *,
        executable: str = DEFAULT_LINTER,
        globber: TargetGlobber | None = None,
    ) -> None:
        self.workspace = workspace
        self.executable = executable
        self.globber = globber or TargetGlobber(workspace)
        self._options = CommandOptions(
            cwd=workspace,
            check=False,
            capture_output=True,
            merge_stderr=True,
            discard_stdin=True,
        )

    def aggregate_command(self, targets: Iterable[str], options: TranslatedOptions) -> list[str]:
        """Return the aggregate command line with target patterns expanded."""

        return [self.executable, *AGGREGATE_FLAGS, *options.args, *self.globber.expand(targets)]

    def target_command(self, target: str, options: TranslatedOptions) -> list[str]:
        """Return the attribution command line for ``target``."""

        return [self.executable, *ATTRIBUTION_FLAGS, *options.args, target]

    def run_aggregate(self, targets: Iterable[str], options: TranslatedOptions) -> LintResult:
        """Lint every target in a single colourised invocation.

        Args:
            targets: Target identifiers, possibly containing ``**`` patterns.
            options: Translated linter flags.

        Returns:
            LintResult: Aggregate result with ``target`` set to ``None``.
        """

        with self.globber.recursive():
            return self._execute(None, self.aggregate_command(targets, options))

    def run_target(self, target: str, options: TranslatedOptions) -> LintResult:
        """Lint ``target`` on its own with plain output."""

        return self._execute(target, self.target_command(target, options))

    def run_targets(self, targets: Iterable[str], options: TranslatedOptions) -> Iterator[LintResult]:
        """Yield one attribution result per target, in order.

        A failure on one target, including the linter failing to start, is
        recorded in its result and never stops the remaining targets.
        """

        for target in targets:
            yield self.run_target(target, options)

    def _execute(self, target: str | None, command: Sequence[str]) -> LintResult:
        try:
            completed = run_command(command, options=self._options)
        except FileNotFoundError as exc:
            return LintResult(target=target, exit_code=EXIT_NOT_FOUND, output=str(exc))
        except OSError as exc:
            return LintResult(target=target, exit_code=EXIT_NOT_EXECUTABLE, output=str(exc))
        return LintResult(target=target, exit_code=completed.returncode, output=completed.stdout or "")


__all__ = [
    "AGGREGATE_FLAGS",
    "ATTRIBUTION_FLAGS",
    "DEFAULT_LINTER",
    "LintResult",
    "LintRunner",
]
