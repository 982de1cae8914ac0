# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run the aggregate lint and, on pull request failures, report per target."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .config import ActionSettings
from .errors import PublishError
from .installs import install_overrides
from .options import TranslatedOptions, translate_options
from .publish import ReviewCommentPublisher
from .report import Report, build_report
from .runner import AGGREGATE_FLAGS, LintResult, LintRunner


class PipelineLogger(Protocol):
    """Console sink used by :class:`LintPipeline`."""

    def info(self, message: str) -> None: ...

    def ok(self, message: str) -> None: ...

    def warn(self, message: str) -> None: ...

    def fail(self, message: str) -> None: ...

    def echo(self, message: str) -> None: ...

    def debug(self, message: str) -> None: ...


@dataclass(frozen=True, slots=True)
class PipelineOutcome:
    """Everything a caller needs after a run.

    Attributes:
        exit_code: Final process exit status; the aggregate run's code.
        aggregate: Result of the aggregate lint.
        report: Failure report when pull request reporting ran.
        published: ``True`` when the report was delivered.
        publish_error: Delivery failure, if any.
    """

    exit_code: int
    aggregate: LintResult
    report: Report | None = None
    published: bool = False
    publish_error: PublishError | None = None


class LintPipeline:
    """Coordinate option translation, linting, reporting and publishing."""

    def __init__(
        self,
        settings: ActionSettings,
        *,
        logger: PipelineLogger,
        runner: LintRunner | None = None,
        publisher: ReviewCommentPublisher | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self.runner = runner or LintRunner(settings.workspace, executable=settings.linter)
        self._publisher = publisher

    @property
    def publisher(self) -> ReviewCommentPublisher:
        if self._publisher is None:
            self._publisher = ReviewCommentPublisher(self.settings.publish)
        return self._publisher

    def run(self, tokens: Sequence[str]) -> PipelineOutcome:
        """Lint the configured targets using the caller's option ``tokens``.

        Args:
            tokens: Raw option tokens to translate for the linter.

        Returns:
            PipelineOutcome: Exit code and collected artefacts.

        Raises:
            OptionError: If ``tokens`` contain an unsupported flag; raised
                before any subprocess starts.
            SubprocessExecutionError: If installing override packages fails.
        """

        options = translate_options(tokens)
        settings = self.settings
        install_overrides(
            settings.override,
            cwd=settings.workspace,
            on_install=lambda spec: self.logger.info(f"Installing override dependencies: {spec}"),
        )

        printable = settings.printable_targets
        command = " ".join(part for part in (settings.linter, *AGGREGATE_FLAGS, str(options), printable) if part)
        self.logger.info(f"Executing '{command}'")
        aggregate = self.runner.run_aggregate(settings.targets, options)
        self.logger.debug(f"aggregate exit_code={aggregate.exit_code}")

        if aggregate.ok:
            self.logger.ok(f"Successfully linted '{printable}'")
            self.logger.echo(aggregate.output.rstrip("\n"))
            return PipelineOutcome(exit_code=0, aggregate=aggregate)

        self.logger.fail(f"Linting errors were found in '{printable}':")
        self.logger.echo(aggregate.output.rstrip("\n"))

        if not settings.publish.should_publish:
            self.logger.debug(
                f"skipping pull request comment event={settings.publish.event_name or '-'} "
                f"enabled={settings.publish.enabled}",
            )
            return PipelineOutcome(exit_code=aggregate.exit_code, aggregate=aggregate)

        report = self._build_report(options)
        if not report.sections:
            self.logger.warn("No target failed on its own; the findings only appear when targets are linted together")
        self.logger.info("commenting on the pull request")
        try:
            self.publisher.publish(report)
        except PublishError as exc:
            self.logger.fail(str(exc))
            return PipelineOutcome(
                exit_code=aggregate.exit_code,
                aggregate=aggregate,
                report=report,
                publish_error=exc,
            )
        return PipelineOutcome(exit_code=aggregate.exit_code, aggregate=aggregate, report=report, published=True)

    def _build_report(self, options: TranslatedOptions) -> Report:
        settings = self.settings
        results: list[LintResult] = []
        for result in self.runner.run_targets(settings.targets, options):
            self.logger.debug(f"target={result.target} exit_code={result.exit_code}")
            results.append(result)
        return build_report(
            results,
            options=options,
            printable_targets=settings.printable_targets,
            workflow=settings.workflow,
            action=settings.action,
            linter=settings.linter,
        )


__all__ = ["LintPipeline", "PipelineLogger", "PipelineOutcome"]
