# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Deliver lint reports as pull request comments."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Final

import requests

from .config import PublishContext
from .errors import PublishError
from .report import Report

DEFAULT_TIMEOUT: Final[float] = 30.0
USER_AGENT: Final[str] = "lint-action"


def read_comments_url(event_path: Path | None) -> str:
    """Return ``pull_request.comments_url`` from the CI event payload.

    Args:
        event_path: Location of the JSON event payload written by the CI platform.

    Returns:
        str: Comment collection endpoint for the pull request.

    Raises:
        PublishError: If the payload is missing, unreadable or has no URL.
    """

    if event_path is None:
        raise PublishError("No event payload available; cannot locate the pull request")
    try:
        event = json.loads(event_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise PublishError(f"Unable to read event payload {event_path}: {exc}") from exc

    pull_request = event.get("pull_request") if isinstance(event, dict) else None
    url = pull_request.get("comments_url") if isinstance(pull_request, dict) else None
    if not isinstance(url, str) or not url:
        raise PublishError(f"Event payload {event_path} has no pull_request.comments_url")
    return url


class ReviewCommentPublisher:
    """Post a :class:`Report` to the pull request comment endpoint."""

    def __init__(
        self,
        context: PublishContext,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.context = context
        self.session = session or requests.Session()
        self.timeout = timeout

    @staticmethod
    def build_payload(report: Report) -> str:
        """Return the JSON document ``{"body": <markdown>}`` for ``report``."""

        return json.dumps({"body": report.render()})

    def headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {self.context.token}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    def publish(self, report: Report) -> requests.Response:
        """POST ``report`` to the pull request's comments URL.

        Args:
            report: Fully built failure report.

        Returns:
            requests.Response: Successful API response.

        Raises:
            PublishError: If the URL cannot be resolved, the request fails, or
                the API answers with a non-2xx status.
        """

        url = read_comments_url(self.context.event_path)
        payload = self.build_payload(report)
        try:
            response = self.session.post(
                url,
                data=payload.encode("utf-8"),
                headers=self.headers(),
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as exc:
            raise PublishError(f"Failed to comment on the pull request: {exc}") from exc
        return response


__all__ = ["ReviewCommentPublisher", "read_comments_url"]
