# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run ansible-lint in CI and report failures on pull requests."""

from __future__ import annotations

from importlib import metadata

from .config import ActionSettings, PublishContext
from .errors import (
    ConfigurationError,
    LintActionError,
    MissingOptionValueError,
    OptionError,
    PublishError,
    UnsupportedFlagError,
)
from .options import TranslatedOptions, translate_options
from .pipeline import LintPipeline, PipelineOutcome
from .publish import ReviewCommentPublisher
from .report import Report, build_report
from .runner import LintResult, LintRunner
from .targets import ResolvedTargets, resolve_targets

__all__ = [
    "ActionSettings",
    "ConfigurationError",
    "LintActionError",
    "LintPipeline",
    "LintResult",
    "LintRunner",
    "MissingOptionValueError",
    "OptionError",
    "PipelineOutcome",
    "PublishContext",
    "PublishError",
    "Report",
    "ResolvedTargets",
    "ReviewCommentPublisher",
    "TranslatedOptions",
    "UnsupportedFlagError",
    "__version__",
    "build_report",
    "resolve_targets",
    "translate_options",
]

try:
    __version__ = metadata.version("lint-action")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"
