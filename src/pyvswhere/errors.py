# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while querying ``vswhere``."""

from __future__ import annotations

from collections.abc import Sequence


class VSWhereError(RuntimeError):
    """Base class for every failure surfaced by :mod:`pyvswhere`."""


class UnsupportedPlatformError(VSWhereError):
    """Raised when the host platform cannot run ``vswhere``."""

    def __init__(self, platform: str) -> None:
        """Initialise the error with the offending platform identifier.

        Args:
            platform: Value of ``sys.platform`` (or the caller override) that was rejected.
        """

        super().__init__(f"vswhere is only available on Windows (current platform: {platform})")
        self.platform = platform


class ToolNotFoundError(VSWhereError):
    """Raised when no ``vswhere.exe`` candidate exists on disk."""

    def __init__(self, candidates: Sequence[str]) -> None:
        """Initialise the error with the candidate paths that were probed.

        Args:
            candidates: Ordered candidate paths checked by the locator.
        """

        probed = ", ".join(candidates) if candidates else "<no search roots configured>"
        super().__init__(f"vswhere could not be found (searched: {probed})")
        self.candidates = tuple(candidates)


class SpawnFailedError(VSWhereError):
    """Raised when the operating system refuses to start ``vswhere``."""

    def __init__(self, executable: str, reason: OSError) -> None:
        """Initialise the error with the executable and the underlying OS error.

        Args:
            executable: Path of the executable that failed to launch.
            reason: ``OSError`` raised by :mod:`subprocess`.
        """

        super().__init__(f"Failed to launch '{executable}': {reason}")
        self.executable = executable
        self.reason = reason


class ToolReportedError(VSWhereError):
    """Raised when ``vswhere`` reports a failure through its output streams."""

    def __init__(self, message: str, *, stdout: str = "", stderr: str = "", returncode: int | None = None) -> None:
        """Initialise the error with the diagnostic text captured from the tool.

        Args:
            message: Diagnostic text used as the exception message.
            stdout: Captured standard output.
            stderr: Captured standard error.
            returncode: Exit status of the child process when known.
        """

        super().__init__(message)
        self.stdout = stdout
        self.stderr = stderr
        self.returncode = returncode


class MalformedOutputError(VSWhereError):
    """Raised when ``vswhere`` output is not valid JSON."""

    def __init__(self, output: str, detail: str) -> None:
        """Initialise the error with the raw output and decoder detail.

        Args:
            output: Raw text that failed to decode.
            detail: Message reported by the JSON decoder.
        """

        super().__init__(f"vswhere returned malformed JSON: {detail}")
        self.output = output


class InvalidResultShapeError(VSWhereError):
    """Raised when decoded output does not describe a list of installations."""

    def __init__(self, detail: str | None = None) -> None:
        message = "Invalid installation data returned from vswhere"
        super().__init__(f"{message}: {detail}" if detail else message)
        self.detail = detail


class InvocationTimeoutError(VSWhereError):
    """Raised when ``vswhere`` does not exit before the configured deadline."""

    def __init__(self, timeout: float) -> None:
        super().__init__(f"vswhere did not exit within {timeout:.1f}s and was terminated")
        self.timeout = timeout


class InvocationCancelledError(VSWhereError):
    """Raised when the caller cancels a running ``vswhere`` invocation."""

    def __init__(self) -> None:
        super().__init__("vswhere invocation was cancelled and the process was terminated")


__all__ = [
    "InvalidResultShapeError",
    "InvocationCancelledError",
    "InvocationTimeoutError",
    "MalformedOutputError",
    "SpawnFailedError",
    "ToolNotFoundError",
    "ToolReportedError",
    "UnsupportedPlatformError",
    "VSWhereError",
]
