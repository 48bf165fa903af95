# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Typer application exposing ``pyvswhere list`` and ``pyvswhere locate``."""

from __future__ import annotations

from typing import Annotated, NoReturn

import typer

from ..api import get_installations, locate_vswhere
from ..arguments import parse_version_range
from ..errors import VSWhereError
from ..logging import detect_tty, get_console
from ..models import Product, QueryOptions
from ..process import InvocationOptions, StderrPolicy
from .rendering import installations_table, installations_to_json
from .shared import CLIError, CLILogger, build_cli_logger

app = typer.Typer(
    name="pyvswhere",
    help="Locate Visual Studio installations via vswhere.",
    no_args_is_help=True,
    add_completion=False,
)

EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in status messages.")]
NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]


def build_query_options(
    *,
    include_all: bool,
    prerelease: bool,
    products: list[str] | None,
    requires: list[str] | None,
    requires_any: bool,
    version: str | None,
    latest: bool,
    sort: bool,
    legacy: bool,
) -> QueryOptions:
    """Translate raw CLI values into :class:`QueryOptions`.

    Raises:
        typer.BadParameter: If a product name or version range is invalid.
    """

    try:
        resolved_products = tuple(Product.from_raw(raw) for raw in products or ())
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--product") from exc
    try:
        version_range = parse_version_range(version) if version is not None else None
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--version") from exc
    return QueryOptions(
        all=include_all,
        prerelease=prerelease,
        products=resolved_products,
        requires=tuple(requires or ()),
        requires_any=requires_any,
        version_range=version_range,
        latest=latest,
        sort=sort,
        legacy=legacy,
    )


@app.command("list")
def list_command(
    include_all: Annotated[
        bool,
        typer.Option("--all/--no-all", help="Include incomplete and non-launchable instances."),
    ] = True,
    prerelease: Annotated[bool, typer.Option("--prerelease/--no-prerelease", help="Include prereleases.")] = True,
    sort: Annotated[bool, typer.Option("--sort/--no-sort", help="Sort newest first.")] = True,
    products: Annotated[
        list[str] | None,
        typer.Option("--product", help="Product to match (community, professional, enterprise, buildtools)."),
    ] = None,
    requires: Annotated[
        list[str] | None,
        typer.Option("--requires", help="Workload or component id that must be installed (wildcards allowed)."),
    ] = None,
    requires_any: Annotated[
        bool,
        typer.Option("--requires-any", help="Match instances with any of the --requires ids."),
    ] = False,
    version: Annotated[
        str | None,
        typer.Option("--version", help="Version range in interval notation, e.g. '[17.0,18.0)'."),
    ] = None,
    latest: Annotated[bool, typer.Option("--latest", help="Return only the newest instance.")] = False,
    legacy: Annotated[bool, typer.Option("--legacy", help="Also search Visual Studio 2015 and older.")] = False,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", min=0.0, help="Seconds to wait for vswhere before terminating it."),
    ] = None,
    tolerate_stderr: Annotated[
        bool,
        typer.Option("--tolerate-stderr", help="Treat stderr output as a warning when vswhere exits 0."),
    ] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print records as JSON.")] = False,
    emoji: EmojiOption = True,
    no_color: NoColorOption = False,
) -> None:
    """List installed Visual Studio instances."""

    logger = build_cli_logger(emoji=emoji, no_color=no_color)
    options = build_query_options(
        include_all=include_all,
        prerelease=prerelease,
        products=products,
        requires=requires,
        requires_any=requires_any,
        version=version,
        latest=latest,
        sort=sort,
        legacy=legacy,
    )
    invocation = InvocationOptions(
        timeout=timeout,
        stderr_policy=StderrPolicy.WARN if tolerate_stderr else StderrPolicy.FAIL,
    )
    try:
        installations = get_installations(options, invocation=invocation)
    except VSWhereError as exc:
        _exit_with(CLIError.from_vswhere_error(exc), logger)

    if as_json:
        logger.echo(installations_to_json(installations))
        return
    if not installations:
        logger.warn("No Visual Studio installations matched.")
        return
    console = get_console(color=not no_color and detect_tty(), emoji=emoji)
    console.print(installations_table(installations))


@app.command("locate")
def locate_command(emoji: EmojiOption = True, no_color: NoColorOption = False) -> None:
    """Print the path of vswhere.exe."""

    logger = build_cli_logger(emoji=emoji, no_color=no_color)
    try:
        path = locate_vswhere()
    except VSWhereError as exc:
        _exit_with(CLIError.from_vswhere_error(exc), logger)
    logger.echo(path)


def _exit_with(error: CLIError, logger: CLILogger) -> NoReturn:
    logger.fail(str(error))
    raise typer.Exit(code=error.exit_code) from error


def main() -> None:
    """Console-script entry point."""

    app()


__all__ = ["app", "build_query_options", "main"]
