# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render Markdown reports describing which targets failed linting."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .options import TranslatedOptions
from .runner import AGGREGATE_FLAGS, DEFAULT_LINTER, LintResult

_FENCE = "```"


@dataclass(frozen=True, slots=True)
class ReportSection:
    """Captured linter output for a single failing target."""

    target: str
    output: str

    def render(self) -> str:
        """Return a collapsible ``<details>`` block for the target."""

        return (
            f"<details><summary><code>{self.target}</code></summary>\n"
            "\n"
            f"{_FENCE}\n"
            f"{self.output}\n"
            f"{_FENCE}\n"
            "\n"
            "</details>"
        )


@dataclass(frozen=True, slots=True)
class Report:
    """Immutable failure report posted to the pull request.

    Attributes:
        options: Translated linter flags used for the run.
        printable_targets: Target list as shown to users.
        workflow: CI workflow identifier.
        action: CI action identifier.
        sections: Failing targets and their output, in target order.
        linter: Linter executable name shown in the header.
    """

    options: str
    printable_targets: str
    workflow: str
    action: str
    sections: tuple[ReportSection, ...] = field(default_factory=tuple)
    linter: str = DEFAULT_LINTER

    def header(self) -> str:
        """Return the single-line heading naming the aggregate linter invocation."""

        targets = " ".join(self.printable_targets.split())
        parts = (self.linter, AGGREGATE_FLAGS[0], self.options, targets)
        command = " ".join(part for part in parts if part)
        return f"#### `{command}` Failed"

    def footer(self) -> str:
        return f"*Workflow: `{self.workflow}`, Action: `{self.action}`*"

    def render(self) -> str:
        """Return the complete Markdown document."""

        body = "".join(f"\n{section.render()}" for section in self.sections)
        return f"{self.header()}\n{body}\n\n{self.footer()}\n"


def build_report(
    results: Iterable[LintResult],
    *,
    options: TranslatedOptions,
    printable_targets: str,
    workflow: str,
    action: str,
    linter: str = DEFAULT_LINTER,
) -> Report:
    """Fold per-target results into a :class:`Report`.

    Only targets whose own run failed are included. A target that fails
    solely in combination with others passes on its own and is therefore
    absent, so the report can be empty even though the aggregate run failed.

    Args:
        results: Attribution results in target order.
        options: Translated linter flags.
        printable_targets: Target list as shown to users.
        workflow: CI workflow identifier.
        action: CI action identifier.
        linter: Linter executable name shown in the header.

    Returns:
        Report: Report with one section per failing target.
    """

    sections = tuple(
        ReportSection(target=result.target or "", output=result.output.rstrip("\n"))
        for result in results
        if not result.ok
    )
    return Report(
        options=str(options),
        printable_targets=printable_targets,
        workflow=workflow,
        action=action,
        sections=sections,
        linter=linter,
    )


__all__ = ["Report", "ReportSection", "build_report"]
