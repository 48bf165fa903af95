# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate :class:`QueryOptions` into the ``vswhere`` command-line grammar."""

from __future__ import annotations

import re
from typing import Final

from .constants import ALL_PRODUCTS_TOKEN, OUTPUT_FORMAT_TOKENS
from .models import QueryOptions, Version, VersionRange

_INCLUSIVE_LOWER: Final[str] = "["
_EXCLUSIVE_LOWER: Final[str] = "("
_INCLUSIVE_UPPER: Final[str] = "]"
_EXCLUSIVE_UPPER: Final[str] = ")"
_BOUND_PATTERN: Final[re.Pattern[str]] = re.compile(r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?$")
_MAX_VERSION_COMPONENTS: Final[int] = 3


def build_arguments(options: QueryOptions | None = None) -> list[str]:
    """Return the ``vswhere`` arguments corresponding to ``options``.

    The emission order is fixed and always ends with the JSON/UTF-8 output
    tokens. ``None`` selects :meth:`QueryOptions.default`.

    Args:
        options: Query options supplied by the caller.

    Returns:
        list[str]: Ordered argument tokens excluding the executable itself.
    """

    resolved = QueryOptions.default() if options is None else options
    args: list[str] = []
    if resolved.all:
        args.append("-all")
    if resolved.prerelease:
        args.append("-prerelease")
    if resolved.products:
        args.extend(["-products", *(product.value for product in resolved.products)])
    else:
        args.extend(["-products", ALL_PRODUCTS_TOKEN])
    if resolved.requires:
        args.extend(["-requires", *resolved.requires])
    if resolved.requires_any:
        args.append("-requiresAny")
    if resolved.version_range is not None:
        args.extend(["-version", format_version_range(resolved.version_range)])
    if resolved.latest:
        args.append("-latest")
    if resolved.sort:
        args.append("-sort")
    if resolved.legacy:
        args.append("-legacy")
    args.extend(OUTPUT_FORMAT_TOKENS)
    return args


def format_version(version: Version | None) -> str:
    """Render ``version`` the way ``-version`` bounds are emitted.

    A minor component without a patch is appended to the major component with
    no separator, so ``17``/``5`` renders as ``"175"``.

    Args:
        version: Bound to render; ``None`` renders as an open end.

    Returns:
        str: Rendered bound.
    """

    if version is None:
        return ""
    if version.minor is None:
        return str(version.major)
    if version.patch is None:
        return f"{version.major}{version.minor}"
    return f"{version.major}.{version.minor}.{version.patch}"


def format_version_range(version_range: VersionRange) -> str:
    """Render ``version_range`` in interval notation (``[lo,hi)``)."""

    lower, upper = version_range.lower, version_range.upper
    left = _EXCLUSIVE_LOWER if lower is not None and lower.exclusive else _INCLUSIVE_LOWER
    right = _EXCLUSIVE_UPPER if upper is not None and upper.exclusive else _INCLUSIVE_UPPER
    return f"{left}{format_version(lower)},{format_version(upper)}{right}"


def parse_version_range(text: str) -> VersionRange:
    """Parse interval notation such as ``[17.0,18.0)`` into a :class:`VersionRange`.

    A bare version (``17.0``) is treated as an inclusive lower bound with an
    open upper end.

    Args:
        text: Range expression supplied by a user.

    Returns:
        VersionRange: Parsed bounds.

    Raises:
        ValueError: If ``text`` is not a valid range expression.
    """

    expr = text.strip()
    if not expr:
        raise ValueError("version range must not be empty")
    if expr[0] not in (_INCLUSIVE_LOWER, _EXCLUSIVE_LOWER):
        return VersionRange(lower=_parse_bound(expr, exclusive=False))
    if expr[-1] not in (_INCLUSIVE_UPPER, _EXCLUSIVE_UPPER):
        raise ValueError(f"version range '{text}' must end with ']' or ')'")
    parts = expr[1:-1].split(",")
    if len(parts) != 2:
        raise ValueError(f"version range '{text}' must contain exactly one ','")
    low_text, high_text = (part.strip() for part in parts)
    lower = _parse_bound(low_text, exclusive=expr[0] == _EXCLUSIVE_LOWER) if low_text else None
    upper = _parse_bound(high_text, exclusive=expr[-1] == _EXCLUSIVE_UPPER) if high_text else None
    return VersionRange(lower=lower, upper=upper)


def _parse_bound(text: str, *, exclusive: bool) -> Version:
    """Return a :class:`Version` parsed from ``major[.minor[.patch]]``.

    A ``major.minor`` bound gains ``patch=0`` so it renders dotted (``17.0.0``)
    rather than through the separator-less ``major``/``minor`` form; vswhere
    treats missing components as zero.

    Args:
        text: Version text for a single bound.
        exclusive: Whether the bound excludes its own value.

    Returns:
        Version: Parsed bound.

    Raises:
        ValueError: If ``text`` is not a dotted list of up to three integers.
    """

    match = _BOUND_PATTERN.match(text)
    if match is None:
        raise ValueError(
            f"invalid version bound '{text}' (expected up to {_MAX_VERSION_COMPONENTS} dot-separated integers)"
        )
    major, minor, patch = (int(group) if group is not None else None for group in match.groups())
    if minor is not None and patch is None:
        patch = 0
    return Version(major=major, minor=minor, patch=patch, exclusive=exclusive)


__all__ = ["build_arguments", "format_version", "format_version_range", "parse_version_range"]
