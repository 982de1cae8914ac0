# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

import pytest


@dataclass
class RecordingLogger:
    """Collect pipeline log calls for assertions."""

    records: list[tuple[str, str]] = field(default_factory=list)

    def info(self, message: str) -> None:
        self.records.append(("info", message))

    def ok(self, message: str) -> None:
        self.records.append(("ok", message))

    def warn(self, message: str) -> None:
        self.records.append(("warn", message))

    def fail(self, message: str) -> None:
        self.records.append(("fail", message))

    def echo(self, message: str) -> None:
        self.records.append(("echo", message))

    def debug(self, message: str) -> None:
        self.records.append(("debug", message))

    def messages(self, level: str) -> list[str]:
        return [message for kind, message in self.records if kind == level]


@pytest.fixture
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def event_file(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing a pull request event payload."""

    def _write(comments_url: str | None = "https://api.github.test/repos/acme/site/issues/7/comments") -> Path:
        pull_request = {"number": 7}
        if comments_url is not None:
            pull_request["comments_url"] = comments_url
        path = tmp_path / "event.json"
        path.write_text(json.dumps({"action": "opened", "pull_request": pull_request}), encoding="utf-8")
        return path

    return _write
