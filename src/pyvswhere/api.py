# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Public entry point tying the locator, invoker and parser together."""

from __future__ import annotations

import sys

from .arguments import build_arguments
from .config import LocatorConfig
from .constants import SUPPORTED_PLATFORM
from .errors import UnsupportedPlatformError
from .locator import find_vswhere
from .models import Installation, QueryOptions
from .parsing import parse_installations
from .process import InvocationOptions, invoke


def ensure_supported_platform(platform: str | None = None) -> None:
    """Raise :class:`UnsupportedPlatformError` unless running on Windows.

    Args:
        platform: Platform identifier to check; defaults to :data:`sys.platform`.
    """

    current = sys.platform if platform is None else platform
    if current != SUPPORTED_PLATFORM:
        raise UnsupportedPlatformError(current)


def locate_vswhere(config: LocatorConfig | None = None, *, platform: str | None = None) -> str:
    """Return the path of ``vswhere.exe`` after checking the platform.

    Args:
        config: Locator configuration; built from the environment when omitted.
        platform: Optional platform override used for the platform check.

    Returns:
        str: Path of the executable.
    """

    ensure_supported_platform(platform)
    return find_vswhere(config if config is not None else LocatorConfig.from_environment())


def get_installations(
    options: QueryOptions | None = None,
    *,
    config: LocatorConfig | None = None,
    invocation: InvocationOptions | None = None,
    platform: str | None = None,
) -> list[Installation]:
    """Return the Visual Studio installations reported by ``vswhere``.

    The platform is checked before the environment or filesystem is touched.
    Nothing is retried; the first failure propagates to the caller.

    Args:
        options: Query options. ``None`` selects ``all``, ``prerelease`` and ``sort``.
        config: Locator configuration; built from ``ProgramFiles`` variables when omitted.
        invocation: Process execution settings (deadline, cancellation, stderr policy).
        platform: Optional platform override used for the platform check.

    Returns:
        list[Installation]: Validated installation records.

    Raises:
        UnsupportedPlatformError: If the host is not Windows.
        ToolNotFoundError: If ``vswhere.exe`` cannot be located.
        SpawnFailedError: If the process cannot be started.
        ToolReportedError: If ``vswhere`` reported an error.
        MalformedOutputError: If the output is not JSON.
        InvalidResultShapeError: If the JSON does not describe installations.
        InvocationTimeoutError: If the deadline expired.
        InvocationCancelledError: If the invocation was cancelled.
    """

    ensure_supported_platform(platform)
    arguments = build_arguments(options)
    executable = find_vswhere(config if config is not None else LocatorConfig.from_environment())
    output = invoke(executable, arguments, options=invocation)
    return parse_installations(output)


__all__ = ["ensure_supported_platform", "get_installations", "locate_vswhere"]
