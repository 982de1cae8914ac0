# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import typer

from .lint import CONTEXT_SETTINGS, lint_command
from .typer_ext import PassthroughTyperCommand

app = typer.Typer(
    help="Run ansible-lint in CI and comment on pull requests when it fails.",
    add_completion=False,
)
app.command(name="lint", cls=PassthroughTyperCommand, context_settings=CONTEXT_SETTINGS)(lint_command)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
