# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Query ``vswhere`` for installed Visual Studio instances."""

from __future__ import annotations

from importlib import metadata

from .api import ensure_supported_platform, get_installations, locate_vswhere
from .arguments import build_arguments, format_version, format_version_range, parse_version_range
from .config import LocatorConfig
from .errors import (
    InvalidResultShapeError,
    InvocationCancelledError,
    InvocationTimeoutError,
    MalformedOutputError,
    SpawnFailedError,
    ToolNotFoundError,
    ToolReportedError,
    UnsupportedPlatformError,
    VSWhereError,
)
from .models import Catalog, Installation, InstallationProperties, Product, QueryOptions, Version, VersionRange
from .process import InvocationOptions, StderrPolicy

try:
    __version__ = metadata.version("pyvswhere")
except metadata.PackageNotFoundError:  # pragma: no cover - local development fallback
    __version__ = "0.0.0"

__all__ = [
    "Catalog",
    "Installation",
    "InstallationProperties",
    "InvalidResultShapeError",
    "InvocationCancelledError",
    "InvocationOptions",
    "InvocationTimeoutError",
    "LocatorConfig",
    "MalformedOutputError",
    "Product",
    "QueryOptions",
    "SpawnFailedError",
    "StderrPolicy",
    "ToolNotFoundError",
    "ToolReportedError",
    "UnsupportedPlatformError",
    "VSWhereError",
    "Version",
    "VersionRange",
    "__version__",
    "build_arguments",
    "ensure_supported_platform",
    "format_version",
    "format_version_range",
    "get_installations",
    "locate_vswhere",
    "parse_version_range",
]
