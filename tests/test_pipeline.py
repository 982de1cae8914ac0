# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the lint pipeline decision flow."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from subprocess import CompletedProcess
from typing import Any

import pytest
import requests

from lint_action.config import ActionSettings
from lint_action.errors import PublishError, UnsupportedFlagError
from lint_action.options import TranslatedOptions
from lint_action.pipeline import LintPipeline
from lint_action.publish import ReviewCommentPublisher
from lint_action.report import Report
from lint_action.runner import LintResult


class FakeRunner:
    """Return canned results and record which runs happened."""

    def __init__(self, aggregate_code: int, per_target: dict[str, int] | None = None) -> None:
        self.aggregate_code = aggregate_code
        self.per_target = per_target or {}
        self.aggregate_calls: list[tuple[tuple[str, ...], TranslatedOptions]] = []
        self.target_calls: list[str] = []

    def run_aggregate(self, targets: Iterable[str], options: TranslatedOptions) -> LintResult:
        self.aggregate_calls.append((tuple(targets), options))
        return LintResult(target=None, exit_code=self.aggregate_code, output="aggregate output\n")

    def run_targets(self, targets: Iterable[str], options: TranslatedOptions) -> Iterator[LintResult]:
        for target in targets:
            self.target_calls.append(target)
            code = self.per_target.get(target, 0)
            yield LintResult(target=target, exit_code=code, output=f"{target} output")


class FakePublisher:
    def __init__(self, error: PublishError | None = None) -> None:
        self.error = error
        self.reports: list[Report] = []

    def publish(self, report: Report) -> None:
        self.reports.append(report)
        if self.error is not None:
            raise self.error


def _settings(tmp_path: Path, *, event_name: str = "pull_request", comment: str = "true") -> ActionSettings:
    return ActionSettings.from_inputs(
        targets="playbooks/site.yml\nroles/common/tasks/main.yml",
        workspace=tmp_path,
        workflow="CI",
        action="lint",
        event_name=event_name,
        event_path=tmp_path / "event.json",
        token="token",
        comment=comment,
    )


def _pipeline(
    settings: ActionSettings,
    runner: FakeRunner,
    publisher: FakePublisher,
    logger,  # noqa: ANN001
) -> LintPipeline:
    return LintPipeline(settings, logger=logger, runner=runner, publisher=publisher)  # type: ignore[arg-type]


def test_success_never_publishes(tmp_path: Path, recording_logger) -> None:
    runner = FakeRunner(aggregate_code=0)
    publisher = FakePublisher()

    outcome = _pipeline(_settings(tmp_path), runner, publisher, recording_logger).run(["-q"])

    assert outcome.exit_code == 0
    assert outcome.report is None
    assert runner.target_calls == []
    assert publisher.reports == []
    assert recording_logger.messages("ok") == ["Successfully linted 'playbooks/site.yml\nroles/common/tasks/main.yml'"]
    assert recording_logger.messages("echo") == ["aggregate output"]


def test_failure_outside_pull_request_skips_reporting(tmp_path: Path, recording_logger) -> None:
    runner = FakeRunner(aggregate_code=2, per_target={"playbooks/site.yml": 2})
    publisher = FakePublisher()

    outcome = _pipeline(_settings(tmp_path, event_name="push"), runner, publisher, recording_logger).run([])

    assert outcome.exit_code == 2
    assert runner.target_calls == []
    assert publisher.reports == []
    assert recording_logger.messages("fail")[0].startswith("Linting errors were found in")


@pytest.mark.parametrize("comment", ["false", "0", ""])
def test_failure_with_comments_disabled_skips_reporting(tmp_path: Path, recording_logger, comment: str) -> None:
    runner = FakeRunner(aggregate_code=2)
    publisher = FakePublisher()

    outcome = _pipeline(_settings(tmp_path, comment=comment), runner, publisher, recording_logger).run([])

    assert outcome.exit_code == 2
    assert publisher.reports == []


@pytest.mark.parametrize("comment", ["true", "1"])
def test_pull_request_failure_reports_failing_targets(tmp_path: Path, recording_logger, comment: str) -> None:
    runner = FakeRunner(aggregate_code=2, per_target={"playbooks/site.yml": 2})
    publisher = FakePublisher()

    outcome = _pipeline(_settings(tmp_path, comment=comment), runner, publisher, recording_logger).run(["-p"])

    assert outcome.exit_code == 2
    assert outcome.published
    assert runner.target_calls == ["playbooks/site.yml", "roles/common/tasks/main.yml"]
    assert len(publisher.reports) == 1
    report = publisher.reports[0]
    assert report is outcome.report
    assert [section.target for section in report.sections] == ["playbooks/site.yml"]
    assert report.options == "-p"


def test_publish_failure_keeps_lint_exit_code(tmp_path: Path, recording_logger) -> None:
    runner = FakeRunner(aggregate_code=3, per_target={"playbooks/site.yml": 3})
    publisher = FakePublisher(error=PublishError("Failed to comment on the pull request: 502"))

    outcome = _pipeline(_settings(tmp_path), runner, publisher, recording_logger).run([])

    assert outcome.exit_code == 3
    assert not outcome.published
    assert isinstance(outcome.publish_error, PublishError)
    assert "Failed to comment on the pull request: 502" in recording_logger.messages("fail")


def test_unsupported_flag_stops_before_any_run(monkeypatch, tmp_path: Path, recording_logger) -> None:
    installs: list[str | None] = []
    monkeypatch.setattr("lint_action.pipeline.install_overrides", lambda spec, **kwargs: installs.append(spec))
    runner = FakeRunner(aggregate_code=0)

    with pytest.raises(UnsupportedFlagError):
        _pipeline(_settings(tmp_path), runner, FakePublisher(), recording_logger).run(["-q", "--fix"])

    assert installs == []
    assert runner.aggregate_calls == []


def test_overrides_install_before_linting(monkeypatch, tmp_path: Path, recording_logger) -> None:
    order: list[str] = []
    monkeypatch.setattr(
        "lint_action.pipeline.install_overrides",
        lambda spec, **kwargs: order.append(f"install:{spec}"),
    )

    class OrderedRunner(FakeRunner):
        def run_aggregate(self, targets: Iterable[str], options: TranslatedOptions) -> LintResult:
            order.append("lint")
            return super().run_aggregate(targets, options)

    settings = _settings(tmp_path).model_copy(update={"override": "ansible-lint==6.22.1"})

    _pipeline(settings, OrderedRunner(aggregate_code=0), FakePublisher(), recording_logger).run([])

    assert order == ["install:ansible-lint==6.22.1", "lint"]


class _RecordingSession:
    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    def post(self, url: str, **kwargs: Any) -> requests.Response:
        self.calls.append({"url": url, **kwargs})
        response = requests.Response()
        response.status_code = 201
        return response


def test_end_to_end_reports_only_the_failing_playbook(
    monkeypatch,
    tmp_path: Path,
    recording_logger,
    event_file,
) -> None:
    site_output = "playbooks/site.yml:12: risky-file-permissions File permissions unset or incorrect\n"
    commands: list[list[str]] = []

    def fake_run_command(args, *, options):  # noqa: ANN001
        commands.append(list(args))
        if "--nocolor" not in args:
            return CompletedProcess(args=list(args), returncode=2, stdout="\x1b[31maggregate\x1b[0m\n")
        if args[-1] == "playbooks/site.yml":
            return CompletedProcess(args=list(args), returncode=2, stdout=site_output)
        return CompletedProcess(args=list(args), returncode=0, stdout="")

    monkeypatch.setattr("lint_action.runner.run_command", fake_run_command)
    comments_url = "https://api.github.test/repos/acme/site/issues/7/comments"
    settings = ActionSettings.from_inputs(
        targets="playbooks/site.yml\nroles/common/tasks/main.yml",
        workspace=tmp_path,
        workflow="CI",
        action="ansible-lint",
        event_name="pull_request",
        event_path=event_file(comments_url),
        token="token",
        comment="true",
    )
    session = _RecordingSession()
    publisher = ReviewCommentPublisher(settings.publish, session=session)  # type: ignore[arg-type]

    outcome = LintPipeline(settings, logger=recording_logger, publisher=publisher).run([])

    assert outcome.exit_code == 2
    assert len(commands) == 3
    assert len(session.calls) == 1
    assert session.calls[0]["url"] == comments_url
    body = json.loads(session.calls[0]["data"])["body"]
    assert body.count("<details>") == 1
    assert "<code>playbooks/site.yml</code>" in body
    assert "roles/common/tasks/main.yml</code>" not in body
    assert f"```\n{site_output.rstrip()}\n```" in body


def test_cross_target_failure_still_posts_empty_report(tmp_path: Path, recording_logger) -> None:
    runner = FakeRunner(aggregate_code=2)
    publisher = FakePublisher()

    outcome = _pipeline(_settings(tmp_path), runner, publisher, recording_logger).run([])

    assert outcome.exit_code == 2
    assert publisher.reports[0].sections == ()
    assert "*Workflow: `CI`, Action: `lint`*" in publisher.reports[0].render()
    assert recording_logger.messages("warn")
