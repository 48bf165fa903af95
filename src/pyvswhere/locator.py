# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Locate ``vswhere.exe`` beneath the configured ``Program Files`` roots."""

from __future__ import annotations

import logging
import os
from pathlib import PureWindowsPath

from .config import LocatorConfig
from .errors import ToolNotFoundError

LOGGER = logging.getLogger(__name__)


def candidate_paths(config: LocatorConfig) -> list[str]:
    """Return the candidate executable paths in probe order.

    Args:
        config: Locator configuration providing the search roots.

    Returns:
        list[str]: Windows-style paths, one per configured root.
    """

    return [
        str(PureWindowsPath(root, *config.installer_subpath, config.executable_name))
        for root in config.search_roots
    ]


def find_vswhere(config: LocatorConfig) -> str:
    """Return the first existing ``vswhere.exe`` candidate.

    Args:
        config: Locator configuration providing the search roots.

    Returns:
        str: Absolute path of the discovered executable.

    Raises:
        ToolNotFoundError: If no candidate exists.
    """

    candidates = candidate_paths(config)
    for candidate in candidates:
        if _exists(candidate):
            LOGGER.debug("vswhere located at %s", candidate)
            return candidate
        LOGGER.debug("vswhere not present at %s", candidate)
    raise ToolNotFoundError(candidates)


def _exists(path: str) -> bool:
    """Return ``True`` when ``path`` can be stat'ed; stat failures count as missing."""

    try:
        os.stat(path)
    except (OSError, ValueError):
        return False
    return True


__all__ = ["candidate_paths", "find_vswhere"]
