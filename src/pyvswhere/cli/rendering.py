# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render installation records for terminal output."""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich import box
from rich.table import Table

from ..models import Installation


def installations_to_json(installations: Sequence[Installation]) -> str:
    """Serialise ``installations`` using ``vswhere``'s own key names."""

    payload = [
        installation.model_dump(mode="json", by_alias=True, exclude_none=True) for installation in installations
    ]
    return json.dumps(payload, indent=2)


def installations_table(installations: Sequence[Installation]) -> Table:
    """Return a Rich table summarising ``installations``.

    Args:
        installations: Records returned by :func:`pyvswhere.get_installations`.

    Returns:
        Table: One row per installation.
    """

    table = Table(title="Visual Studio Installations", box=box.SIMPLE, expand=True)
    table.add_column("Name", style="bold")
    table.add_column("Version")
    table.add_column("Product")
    table.add_column("Instance")
    table.add_column("Path", overflow="fold")
    table.add_column("State")

    for installation in installations:
        version = installation.parsed_version
        table.add_row(
            installation.display_name or installation.installation_name or "-",
            str(version) if version is not None else installation.installation_version or "-",
            installation.product_id.rsplit(".", 1)[-1],
            installation.instance_id,
            installation.installation_path,
            _state_label(installation),
        )
    return table


def _state_label(installation: Installation) -> str:
    flags: list[str] = []
    if installation.is_prerelease:
        flags.append("[yellow]prerelease[/]")
    if installation.is_complete is False:
        flags.append("[red]incomplete[/]")
    if installation.is_reboot_required:
        flags.append("[red]reboot required[/]")
    return ", ".join(flags) or "[green]ok[/]"


__all__ = ["installations_table", "installations_to_json"]
