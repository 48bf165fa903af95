# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass

import typer

from ..errors import ToolNotFoundError, UnsupportedPlatformError, VSWhereError
from ..logging import fail as core_fail
from ..logging import warn as core_warn

ENVIRONMENT_EXIT_CODE = 2
FAILURE_EXIT_CODE = 1


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = FAILURE_EXIT_CODE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code

    @classmethod
    def from_vswhere_error(cls, error: VSWhereError) -> CLIError:
        """Return a CLI error whose exit status reflects the failure category.

        Args:
            error: Library error raised while querying ``vswhere``.

        Returns:
            CLIError: Error carrying the library message.
        """

        environmental = isinstance(error, (UnsupportedPlatformError, ToolNotFoundError))
        return cls(str(error), exit_code=ENVIRONMENT_EXIT_CODE if environmental else FAILURE_EXIT_CODE)


@dataclass(slots=True)
class CLILogger:
    """Adapter around the console helpers respecting CLI emoji and colour settings."""

    use_emoji: bool
    use_color: bool | None = None

    def fail(self, message: str) -> None:
        core_fail(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def warn(self, message: str) -> None:
        core_warn(message, use_emoji=self.use_emoji, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper."""

        typer.echo(message)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided presentation flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        no_color: Whether terminal colour output should be disabled.

    Returns:
        CLILogger: Logger bound to the shared console helpers.
    """

    return CLILogger(use_emoji=emoji, use_color=False if no_color else None)


__all__ = ["CLIError", "CLILogger", "ENVIRONMENT_EXIT_CODE", "FAILURE_EXIT_CODE", "build_cli_logger"]
