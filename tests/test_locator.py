# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for locating ``vswhere.exe``."""

from __future__ import annotations

import pytest

from pyvswhere import locator
from pyvswhere.config import LocatorConfig
from pyvswhere.errors import ToolNotFoundError
from pyvswhere.locator import candidate_paths, find_vswhere

X86_ROOT = "C:\\Program Files (x86)"
NATIVE_ROOT = "C:\\Program Files"
X86_VSWHERE = "C:\\Program Files (x86)\\Microsoft Visual Studio\\Installer\\vswhere.exe"
NATIVE_VSWHERE = "C:\\Program Files\\Microsoft Visual Studio\\Installer\\vswhere.exe"


def _existing(monkeypatch: pytest.MonkeyPatch, *paths: str) -> list[str]:
    probed: list[str] = []

    def fake_exists(path: str) -> bool:
        probed.append(path)
        return path in paths

    monkeypatch.setattr(locator, "_exists", fake_exists)
    return probed


def test_candidate_paths_follow_root_order() -> None:
    config = LocatorConfig(search_roots=(X86_ROOT, NATIVE_ROOT))

    assert candidate_paths(config) == [X86_VSWHERE, NATIVE_VSWHERE]


def test_find_vswhere_prefers_x86_root(monkeypatch: pytest.MonkeyPatch) -> None:
    probed = _existing(monkeypatch, X86_VSWHERE, NATIVE_VSWHERE)

    assert find_vswhere(LocatorConfig(search_roots=(X86_ROOT, NATIVE_ROOT))) == X86_VSWHERE
    assert probed == [X86_VSWHERE]


def test_find_vswhere_falls_back_to_program_files(monkeypatch: pytest.MonkeyPatch) -> None:
    probed = _existing(monkeypatch, NATIVE_VSWHERE)

    assert find_vswhere(LocatorConfig(search_roots=(X86_ROOT, NATIVE_ROOT))) == NATIVE_VSWHERE
    assert probed == [X86_VSWHERE, NATIVE_VSWHERE]


def test_find_vswhere_raises_when_nothing_exists(monkeypatch: pytest.MonkeyPatch) -> None:
    _existing(monkeypatch)

    with pytest.raises(ToolNotFoundError, match="vswhere could not be found") as excinfo:
        find_vswhere(LocatorConfig(search_roots=(X86_ROOT, NATIVE_ROOT)))

    assert excinfo.value.candidates == (X86_VSWHERE, NATIVE_VSWHERE)


def test_find_vswhere_without_roots_never_probes(monkeypatch: pytest.MonkeyPatch) -> None:
    probed = _existing(monkeypatch)

    with pytest.raises(ToolNotFoundError):
        find_vswhere(LocatorConfig.from_environment({"ProgramFiles": "", "ProgramFiles(x86)": ""}))

    assert probed == []


def test_exists_treats_stat_errors_as_missing(tmp_path) -> None:
    present = tmp_path / "vswhere.exe"
    present.write_bytes(b"MZ")

    assert locator._exists(str(present)) is True
    assert locator._exists(str(tmp_path / "absent.exe")) is False
    assert locator._exists("bad\x00path") is False
