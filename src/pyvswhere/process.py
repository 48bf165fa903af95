# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Run ``vswhere`` and interpret its output streams."""

from __future__ import annotations

import logging

# Bandit: the executable path comes from the locator and arguments from the
# argument builder; no shell is involved.
import subprocess  # nosec B404
import threading
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Final

from .constants import JSON_ARRAY_PREFIX, OUTPUT_ENCODING
from .errors import InvocationCancelledError, InvocationTimeoutError, SpawnFailedError, ToolReportedError

LOGGER = logging.getLogger(__name__)

_CANCEL_POLL_INTERVAL: Final[float] = 0.1
_REAP_TIMEOUT: Final[float] = 5.0


class StderrPolicy(str, Enum):
    """Enumerate how output on standard error is interpreted."""

    FAIL = "fail"
    WARN = "warn"


@dataclass(slots=True)
class InvocationOptions:
    """Execution settings for a single ``vswhere`` run.

    The defaults wait indefinitely and treat any standard-error output as a
    failure.
    """

    timeout: float | None = None
    cancel_event: threading.Event | None = None
    stderr_policy: StderrPolicy = StderrPolicy.FAIL
    env: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must be non-negative")


@dataclass(slots=True)
class CapturedOutput:
    """Decoded output of a finished child process."""

    returncode: int
    stdout: str
    stderr: str


def invoke(
    executable: str,
    arguments: Sequence[str],
    *,
    options: InvocationOptions | None = None,
) -> str:
    """Run ``executable`` with ``arguments`` and return its standard output.

    Args:
        executable: Absolute path of ``vswhere.exe``.
        arguments: Arguments produced by :func:`pyvswhere.arguments.build_arguments`.
        options: Execution settings; defaults to :class:`InvocationOptions`.

    Returns:
        str: Standard output text, expected to hold a JSON array.

    Raises:
        SpawnFailedError: If the process cannot be started.
        ToolReportedError: If the tool wrote to standard error, or its standard
            output does not start with ``[``.
        InvocationTimeoutError: If the deadline expired before the process exited.
        InvocationCancelledError: If ``options.cancel_event`` was set while waiting.
    """

    resolved = options or InvocationOptions()
    captured = capture(executable, arguments, options=resolved)

    if captured.stderr:
        if resolved.stderr_policy is StderrPolicy.FAIL or captured.returncode != 0:
            raise ToolReportedError(
                captured.stderr,
                stdout=captured.stdout,
                stderr=captured.stderr,
                returncode=captured.returncode,
            )
        LOGGER.warning("vswhere wrote to stderr (exit 0): %s", captured.stderr.strip())

    if captured.stdout and not captured.stdout.startswith(JSON_ARRAY_PREFIX):
        raise ToolReportedError(
            captured.stdout,
            stdout=captured.stdout,
            stderr=captured.stderr,
            returncode=captured.returncode,
        )
    return captured.stdout


def capture(
    executable: str,
    arguments: Sequence[str],
    *,
    options: InvocationOptions,
) -> CapturedOutput:
    """Spawn the process and collect both streams until it exits.

    Args:
        executable: Program to launch.
        arguments: Arguments passed to the program.
        options: Execution settings controlling deadline and cancellation.

    Returns:
        CapturedOutput: Exit status plus decoded stdout and stderr.

    Raises:
        SpawnFailedError: If the process cannot be started.
        InvocationTimeoutError: If the deadline expired first.
        InvocationCancelledError: If cancellation was requested.
    """

    cancel_event = options.cancel_event
    if cancel_event is not None and cancel_event.is_set():
        raise InvocationCancelledError()

    command = [executable, *arguments]
    LOGGER.debug("running %s", subprocess.list2cmdline(command))
    try:
        process = subprocess.Popen(  # nosec B603 - argument list, no shell
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            env=dict(options.env) if options.env is not None else None,
        )
    except OSError as exc:
        raise SpawnFailedError(executable, exc) from exc

    deadline = None if options.timeout is None else time.monotonic() + options.timeout
    while True:
        try:
            stdout, stderr = process.communicate(timeout=_next_wait(deadline, cancel_event))
            break
        except subprocess.TimeoutExpired:
            if cancel_event is not None and cancel_event.is_set():
                _terminate(process)
                raise InvocationCancelledError() from None
            if deadline is not None and time.monotonic() >= deadline:
                _terminate(process)
                raise InvocationTimeoutError(options.timeout or 0.0) from None

    LOGGER.debug("vswhere exited with status %s", process.returncode)
    return CapturedOutput(
        returncode=process.returncode,
        stdout=_decode(stdout),
        stderr=_decode(stderr),
    )


def _next_wait(deadline: float | None, cancel_event: threading.Event | None) -> float | None:
    """Return how long the next ``communicate`` call may block."""

    wait = _CANCEL_POLL_INTERVAL if cancel_event is not None else None
    if deadline is not None:
        remaining = max(deadline - time.monotonic(), 0.0)
        wait = remaining if wait is None else min(wait, remaining)
    return wait


def _terminate(process: subprocess.Popen[bytes]) -> None:
    """Kill ``process`` and reap it so no zombie or open pipe is left behind.

    Draining the pipes is bounded by ``_REAP_TIMEOUT``: a descendant that
    inherited them can keep them open after the child itself has died.
    """

    process.kill()
    try:
        process.communicate(timeout=_REAP_TIMEOUT)
    except subprocess.TimeoutExpired:
        LOGGER.warning("vswhere output pipes still open %.1fs after kill; closing them", _REAP_TIMEOUT)
        for stream in (process.stdout, process.stderr):
            if stream is not None:
                stream.close()
        process.wait()


def _decode(payload: bytes | None) -> str:
    if not payload:
        return ""
    return payload.decode(OUTPUT_ENCODING, errors="replace")


__all__ = ["CapturedOutput", "InvocationOptions", "StderrPolicy", "capture", "invoke"]
