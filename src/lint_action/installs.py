# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Install caller-requested Python packages before the linter runs."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from .process import CommandOptions, run_command

Notify = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class OverrideSummary:
    """Packages installed from the override specification."""

    requirements: tuple[str, ...]


def parse_override(spec: str | None) -> tuple[str, ...]:
    """Split an override specification into pip requirement arguments."""

    return tuple(shlex.split(spec or ""))


def install_overrides(
    spec: str | None,
    *,
    cwd: Path | None = None,
    python: str = sys.executable,
    on_install: Notify | None = None,
) -> OverrideSummary:
    """Install ``spec`` with pip and verify the environment with ``pip check``.

    Nothing runs when ``spec`` is blank.

    Args:
        spec: Whitespace separated pip requirements, e.g. ``"ansible-lint==6.22.0"``.
        cwd: Directory pip runs in, so relative requirement paths resolve there.
        python: Interpreter whose environment receives the packages.
        on_install: Optional callback invoked with the requirement list.

    Returns:
        OverrideSummary: Requirements that were installed.

    Raises:
        SubprocessExecutionError: If ``pip install`` or ``pip check`` fails.
    """

    requirements = parse_override(spec)
    if not requirements:
        return OverrideSummary(requirements=())

    if on_install is not None:
        on_install(" ".join(requirements))
    options = CommandOptions(cwd=cwd, check=True)
    run_command([python, "-m", "pip", "install", *requirements], options=options)
    run_command([python, "-m", "pip", "check"], options=options)
    return OverrideSummary(requirements=requirements)


__all__ = ["OverrideSummary", "install_overrides", "parse_override"]
