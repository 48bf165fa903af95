# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the ``pyvswhere`` command-line interface."""

from __future__ import annotations

import json
from types import ModuleType
from typing import Any

import pytest
from typer.testing import CliRunner

from pyvswhere.arguments import build_arguments
from pyvswhere.cli.app import app
from pyvswhere.errors import ToolNotFoundError, ToolReportedError, UnsupportedPlatformError
from pyvswhere.models import Installation, Product, QueryOptions, Version, VersionRange
from pyvswhere.process import InvocationOptions, StderrPolicy

runner = CliRunner()


def _capture_queries(
    monkeypatch: pytest.MonkeyPatch,
    result: list[Installation] | Exception,
) -> list[tuple[QueryOptions | None, InvocationOptions | None]]:
    queries: list[tuple[QueryOptions | None, InvocationOptions | None]] = []

    def fake_get_installations(options=None, *, invocation=None, **kwargs):  # noqa: ANN001, ANN003
        queries.append((options, invocation))
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr("pyvswhere.cli.app.get_installations", fake_get_installations)
    return queries


def test_list_json_prints_wire_names(monkeypatch: pytest.MonkeyPatch, installation_record: dict[str, Any]) -> None:
    queries = _capture_queries(monkeypatch, [Installation.model_validate(installation_record)])

    result = runner.invoke(app, ["list", "--json"])

    assert result.exit_code == 0, result.stdout
    assert json.loads(result.stdout) == [installation_record]
    options, invocation = queries[0]
    assert options == QueryOptions.default()
    assert invocation is not None and invocation.stderr_policy is StderrPolicy.FAIL


def test_list_translates_filters(monkeypatch: pytest.MonkeyPatch) -> None:
    queries = _capture_queries(monkeypatch, [])

    result = runner.invoke(
        app,
        [
            "list",
            "--no-all",
            "--no-sort",
            "--product",
            "community",
            "--product",
            "buildtools",
            "--requires",
            "Microsoft.VisualStudio.Workload.VCTools",
            "--version",
            "[17.0,18.0)",
            "--latest",
            "--timeout",
            "5",
            "--tolerate-stderr",
            "--json",
        ],
    )

    assert result.exit_code == 0, result.stdout
    options, invocation = queries[0]
    assert options == QueryOptions(
        prerelease=True,
        products=(Product.COMMUNITY, Product.BUILD_TOOLS),
        requires=("Microsoft.VisualStudio.Workload.VCTools",),
        version_range=VersionRange(
            lower=Version(major=17, minor=0, patch=0),
            upper=Version(major=18, minor=0, patch=0, exclusive=True),
        ),
        latest=True,
    )
    assert invocation is not None
    assert invocation.timeout == 5.0
    assert invocation.stderr_policy is StderrPolicy.WARN


def test_list_version_option_reaches_vswhere_as_dotted_range(monkeypatch: pytest.MonkeyPatch) -> None:
    queries = _capture_queries(monkeypatch, [])

    result = runner.invoke(app, ["list", "--version", "[17.0,18.0)", "--json"])

    assert result.exit_code == 0, result.stdout
    args = build_arguments(queries[0][0])
    assert args[args.index("-version") + 1] == "[17.0.0,18.0.0)"


def test_list_table_output(monkeypatch: pytest.MonkeyPatch, installation_record: dict[str, Any]) -> None:
    _capture_queries(monkeypatch, [Installation.model_validate(installation_record)])

    result = runner.invoke(app, ["list", "--no-color"])

    assert result.exit_code == 0, result.stdout
    assert "a1b2c3d4" in result.stdout


def test_list_warns_when_nothing_matches(monkeypatch: pytest.MonkeyPatch) -> None:
    _capture_queries(monkeypatch, [])

    result = runner.invoke(app, ["list", "--no-emoji"])

    assert result.exit_code == 0
    assert "No Visual Studio installations matched." in result.stdout


def test_list_rejects_unknown_product(monkeypatch: pytest.MonkeyPatch) -> None:
    queries = _capture_queries(monkeypatch, [])

    result = runner.invoke(app, ["list", "--product", "express"])

    assert result.exit_code == 2
    assert queries == []


def test_list_rejects_invalid_version_range(monkeypatch: pytest.MonkeyPatch) -> None:
    queries = _capture_queries(monkeypatch, [])

    result = runner.invoke(app, ["list", "--version", "[17,"])

    assert result.exit_code == 2
    assert queries == []


@pytest.mark.parametrize(
    ("error", "exit_code"),
    [
        (UnsupportedPlatformError("linux"), 2),
        (ToolNotFoundError(["C:\\Program Files\\Microsoft Visual Studio\\Installer\\vswhere.exe"]), 2),
        (ToolReportedError("Error 0x57: invalid parameter"), 1),
    ],
)
def test_list_reports_library_errors(monkeypatch: pytest.MonkeyPatch, error: Exception, exit_code: int) -> None:
    _capture_queries(monkeypatch, error)

    result = runner.invoke(app, ["list", "--no-emoji"])

    assert result.exit_code == exit_code
    assert str(error) in result.stdout


def test_locate_prints_path(monkeypatch: pytest.MonkeyPatch) -> None:
    path = "C:\\Program Files (x86)\\Microsoft Visual Studio\\Installer\\vswhere.exe"
    monkeypatch.setattr("pyvswhere.cli.app.locate_vswhere", lambda: path)

    result = runner.invoke(app, ["locate"])

    assert result.exit_code == 0
    assert result.stdout.strip() == path


def test_locate_on_unsupported_platform(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("pyvswhere.api.sys.platform", "linux")

    result = runner.invoke(app, ["locate", "--no-emoji"])

    assert result.exit_code == 2
    assert "only available on Windows" in result.stdout


def test_cli_package_exposes_app_module_for_patching() -> None:
    import pyvswhere.cli

    assert isinstance(pyvswhere.cli.app, ModuleType)
    assert pyvswhere.cli.app.app is app
