# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decode and validate the JSON document emitted by ``vswhere``."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping

from pydantic import ValidationError

from .constants import REQUIRED_INSTALLATION_FIELDS
from .errors import InvalidResultShapeError, MalformedOutputError
from .models import Installation

LOGGER = logging.getLogger(__name__)


def parse_installations(raw: str) -> list[Installation]:
    """Return the installations described by ``raw``.

    Validation is all-or-nothing: one bad record rejects the whole payload.

    Args:
        raw: Standard output captured from ``vswhere -format json``.

    Returns:
        list[Installation]: Validated installation records in tool order.

    Raises:
        MalformedOutputError: If ``raw`` is not valid JSON or nests too deeply to decode.
        InvalidResultShapeError: If the document is not a list of installations.
    """

    try:
        payload = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise MalformedOutputError(raw, str(exc)) from exc

    problem = _describe_shape_problem(payload)
    if problem is not None:
        raise InvalidResultShapeError(problem)

    try:
        installations = [Installation.model_validate(entry) for entry in payload]
    except ValidationError as exc:
        raise InvalidResultShapeError(str(exc)) from exc
    LOGGER.debug("vswhere reported %d installation(s)", len(installations))
    return installations


def validate_installations(payload: object) -> bool:
    """Return ``True`` when ``payload`` is a list of well-formed installation mappings."""

    return _describe_shape_problem(payload) is None


def _describe_shape_problem(payload: object) -> str | None:
    """Return a description of the first structural problem, or ``None``.

    Args:
        payload: Decoded JSON value.

    Returns:
        str | None: Human-readable problem description when invalid.
    """

    if not isinstance(payload, list):
        return f"expected a JSON array, got {type(payload).__name__}"
    for index, entry in enumerate(payload):
        if not isinstance(entry, Mapping):
            return f"entry {index} is not an object"
        for field in REQUIRED_INSTALLATION_FIELDS:
            value = entry.get(field)
            if not isinstance(value, str) or not value:
                return f"entry {index} has no '{field}'"
    return None


__all__ = ["parse_installations", "validate_installations"]
