# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for a single lint action run."""

from __future__ import annotations

from pathlib import Path
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigurationError
from .runner import DEFAULT_LINTER
from .targets import ResolvedTargets, resolve_targets

PULL_REQUEST_EVENT: Final[str] = "pull_request"
TRUTHY_TOGGLES: Final[frozenset[str]] = frozenset({"1", "true"})

MISSING_WORKSPACE_MESSAGE: Final[str] = (
    "GITHUB_WORKSPACE has to be set. Did you use the actions/checkout action?"
)


def parse_toggle(value: str | bool | None) -> bool:
    """Return ``True`` when ``value`` is ``"true"`` or ``"1"``.

    Args:
        value: Raw toggle value from the CLI or environment.

    Returns:
        bool: Parsed toggle.
    """

    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return value.strip().lower() in TRUTHY_TOGGLES


class PublishContext(BaseModel):
    """CI context deciding whether and where a failure report is posted."""

    model_config = ConfigDict(frozen=True)

    event_name: str = ""
    event_path: Path | None = None
    token: str = Field(default="", repr=False)
    enabled: bool = False

    @property
    def is_pull_request(self) -> bool:
        return self.event_name == PULL_REQUEST_EVENT

    @property
    def should_publish(self) -> bool:
        """Return ``True`` for pull-request events with commenting enabled."""

        return self.is_pull_request and self.enabled


class ActionSettings(BaseModel):
    """Validated inputs for one run of the lint action.

    Attributes:
        targets: Individual targets in caller order.
        workspace: Directory the linter runs in.
        linter: Linter executable name or path.
        override: Extra pip requirements installed before linting.
        workflow: CI workflow identifier shown in the report footer.
        action: CI action identifier shown in the report footer.
        publish: Pull-request reporting context.
    """

    model_config = ConfigDict(frozen=True)

    targets: tuple[str, ...]
    workspace: Path
    linter: str = DEFAULT_LINTER
    override: str = ""
    workflow: str = ""
    action: str = ""
    publish: PublishContext = Field(default_factory=PublishContext)

    @property
    def resolved_targets(self) -> ResolvedTargets:
        return ResolvedTargets(self.targets)

    @property
    def printable_targets(self) -> str:
        return self.resolved_targets.printable

    @classmethod
    def from_inputs(
        cls,
        *,
        targets: str | None,
        workspace: str | Path | None,
        linter: str | None = None,
        override: str | None = None,
        workflow: str | None = None,
        action: str | None = None,
        event_name: str | None = None,
        event_path: str | Path | None = None,
        token: str | None = None,
        comment: str | bool | None = None,
    ) -> ActionSettings:
        """Build settings from raw CLI/environment values.

        Required inputs are checked before anything else so that a
        misconfigured run fails before any subprocess starts.

        Raises:
            ConfigurationError: If targets or the workspace are missing, or the
                workspace is not a directory.
        """

        resolved = resolve_targets(targets)
        if workspace is None or not str(workspace).strip():
            raise ConfigurationError(MISSING_WORKSPACE_MESSAGE)
        root = Path(workspace)
        if not root.is_dir():
            raise ConfigurationError(f"Workspace '{root}' is not a directory")

        publish = PublishContext(
            event_name=(event_name or "").strip(),
            event_path=Path(event_path) if event_path else None,
            token=token or "",
            enabled=parse_toggle(comment),
        )
        return cls(
            targets=resolved.items,
            workspace=root,
            linter=(linter or "").strip() or DEFAULT_LINTER,
            override=(override or "").strip(),
            workflow=workflow or "",
            action=action or "",
            publish=publish,
        )


__all__ = [
    "ActionSettings",
    "PULL_REQUEST_EVENT",
    "PublishContext",
    "parse_toggle",
]
