# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Lint command implementation."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ..config import ActionSettings
from ..errors import ConfigurationError, OptionError
from ..pipeline import LintPipeline, PipelineOutcome
from ..process import SubprocessExecutionError
from .shared import CLIError, CLILogger, build_cli_logger

CONTEXT_SETTINGS = {"ignore_unknown_options": True}


def lint_command(
    linter_args: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="[LINTER OPTIONS]...",
            help="Options forwarded to ansible-lint (for example -c .ansible-lint -x yaml).",
            show_default=False,
        ),
    ] = None,
    targets: Annotated[
        str | None,
        typer.Option("--targets", envvar="TARGETS", help="Files or directories to lint, whitespace separated."),
    ] = None,
    workspace: Annotated[
        Path | None,
        typer.Option("--workspace", envvar="GITHUB_WORKSPACE", help="Directory the linter runs in."),
    ] = None,
    event_name: Annotated[
        str | None,
        typer.Option("--event-name", envvar="GITHUB_EVENT_NAME", help="CI event that triggered the run."),
    ] = None,
    event_path: Annotated[
        Path | None,
        typer.Option("--event-path", envvar="GITHUB_EVENT_PATH", help="JSON payload describing the CI event."),
    ] = None,
    token: Annotated[
        str | None,
        typer.Option("--token", envvar="GITHUB_TOKEN", help="Token used to comment on the pull request."),
    ] = None,
    comment: Annotated[
        str | None,
        typer.Option("--comment", envvar="INPUT_COMMENT", help="Comment on pull requests when 'true' or '1'."),
    ] = None,
    workflow: Annotated[
        str | None,
        typer.Option("--workflow", envvar="GITHUB_WORKFLOW", help="Workflow name shown in the report."),
    ] = None,
    action: Annotated[
        str | None,
        typer.Option("--action", envvar="GITHUB_ACTION", help="Action identifier shown in the report."),
    ] = None,
    override: Annotated[
        str | None,
        typer.Option("--override", envvar="OVERRIDE", help="Extra pip requirements installed before linting."),
    ] = None,
    linter: Annotated[
        str | None,
        typer.Option("--linter", envvar="ANSIBLE_LINT", help="Linter executable to run."),
    ] = None,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in CLI output.")] = True,
    debug: Annotated[bool, typer.Option("--debug", help="Print debug details.")] = False,
) -> None:
    """Run ansible-lint over TARGETS and report failures on the pull request."""

    logger = build_cli_logger(emoji=emoji, debug=debug)
    try:
        settings = ActionSettings.from_inputs(
            targets=targets,
            workspace=workspace,
            linter=linter,
            override=override,
            workflow=workflow,
            action=action,
            event_name=event_name,
            event_path=event_path,
            token=token,
            comment=comment,
        )
        outcome = _execute_lint(settings, linter_args or [], logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except ConfigurationError as exc:
        logger.fail(f"ERROR: {exc}")
        raise typer.Exit(code=1) from exc
    raise typer.Exit(code=outcome.exit_code)


def _execute_lint(settings: ActionSettings, linter_args: list[str], *, logger: CLILogger) -> PipelineOutcome:
    """Run the pipeline, converting option and install failures into CLI errors."""

    logger.debug(f"workspace={settings.workspace} linter={settings.linter} event={settings.publish.event_name or '-'}")
    pipeline = LintPipeline(settings, logger=logger)
    try:
        return pipeline.run(linter_args)
    except OptionError as exc:
        raise CLIError(f"ERROR: {exc}") from exc
    except SubprocessExecutionError as exc:
        raise CLIError(str(exc), exit_code=exc.returncode or 1) from exc


__all__ = ["CONTEXT_SETTINGS", "lint_command"]
