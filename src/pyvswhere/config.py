# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Explicit configuration records consumed by the locator."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import EXECUTABLE_NAME, INSTALLER_SUBPATH, SEARCH_ROOT_ENV_VARS


class LocatorConfig(BaseModel):
    """Search roots and layout used to find ``vswhere.exe``.

    Roots are probed in order; blank roots are ignored so that an unset
    environment variable and an empty one behave the same way.
    """

    model_config = ConfigDict(frozen=True)

    search_roots: tuple[str, ...] = Field(default_factory=tuple)
    installer_subpath: tuple[str, ...] = INSTALLER_SUBPATH
    executable_name: str = EXECUTABLE_NAME

    @field_validator("search_roots")
    @classmethod
    def _drop_blank_roots(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Return ``value`` without blank entries.

        Args:
            value: Candidate roots supplied by the caller.

        Returns:
            tuple[str, ...]: Roots containing at least one non-whitespace character.
        """

        return tuple(root for root in value if root and root.strip())

    @classmethod
    def from_environment(cls, env: Mapping[str, str] | None = None) -> LocatorConfig:
        """Build a configuration from the ``ProgramFiles`` environment variables.

        Args:
            env: Environment mapping to read; defaults to :data:`os.environ`.

        Returns:
            LocatorConfig: Configuration whose roots follow the x86-first probe order.
        """

        source = os.environ if env is None else env
        roots = tuple(source.get(name, "") for name in SEARCH_ROOT_ENV_VARS)
        return cls(search_roots=roots)


__all__ = ["LocatorConfig"]
