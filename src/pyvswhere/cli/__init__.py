# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line interface for pyvswhere; the Typer application lives in :mod:`pyvswhere.cli.app`."""
