# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer command that hands the end-of-options marker to the linter options."""

from __future__ import annotations

from typing import Final

from click.core import Context
from typer.core import TyperCommand

from ..options import END_OF_OPTIONS


class PassthroughTyperCommand(TyperCommand):
    """Typer command that keeps ``--`` and everything after it for the callback.

    Click normally swallows the first ``--``. Here the tail starting at that
    marker is appended verbatim to the variadic argument named by
    ``passthrough_param`` so the option translator can see where options end.
    """

    passthrough_param: Final[str] = "linter_args"

    def parse_args(self, ctx: Context, args: list[str]) -> list[str]:
        """Parse everything before the first ``--`` and forward the rest.

        Args:
            ctx: Click context for the invocation.
            args: Raw command-line tokens.

        Returns:
            list[str]: Leftover tokens reported by Click.
        """

        if END_OF_OPTIONS not in args:
            return super().parse_args(ctx, args)
        split = args.index(END_OF_OPTIONS)
        remaining = super().parse_args(ctx, args[:split])
        forwarded = ctx.params.get(self.passthrough_param) or ()
        ctx.params[self.passthrough_param] = (*forwarded, *args[split:])
        return remaining


__all__ = ["PassthroughTyperCommand"]
