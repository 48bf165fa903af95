# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Constants describing where ``vswhere`` lives and how it is driven."""

from __future__ import annotations

from typing import Final

PROGRAM_FILES_X86_ENV: Final[str] = "ProgramFiles(x86)"
PROGRAM_FILES_ENV: Final[str] = "ProgramFiles"
SEARCH_ROOT_ENV_VARS: Final[tuple[str, ...]] = (PROGRAM_FILES_X86_ENV, PROGRAM_FILES_ENV)

INSTALLER_SUBPATH: Final[tuple[str, ...]] = ("Microsoft Visual Studio", "Installer")
EXECUTABLE_NAME: Final[str] = "vswhere.exe"

SUPPORTED_PLATFORM: Final[str] = "win32"

ALL_PRODUCTS_TOKEN: Final[str] = "*"
OUTPUT_FORMAT_TOKENS: Final[tuple[str, ...]] = ("-format", "json", "-utf8")
JSON_ARRAY_PREFIX: Final[str] = "["
OUTPUT_ENCODING: Final[str] = "utf-8"

REQUIRED_INSTALLATION_FIELDS: Final[tuple[str, ...]] = ("instanceId", "installationPath", "productId")

PRODUCT_ALIASES: Final[dict[str, str]] = {
    "community": "Microsoft.VisualStudio.Product.Community",
    "professional": "Microsoft.VisualStudio.Product.Professional",
    "enterprise": "Microsoft.VisualStudio.Product.Enterprise",
    "buildtools": "Microsoft.VisualStudio.Product.BuildTools",
}

__all__ = [
    "ALL_PRODUCTS_TOKEN",
    "EXECUTABLE_NAME",
    "INSTALLER_SUBPATH",
    "JSON_ARRAY_PREFIX",
    "OUTPUT_ENCODING",
    "OUTPUT_FORMAT_TOKENS",
    "PRODUCT_ALIASES",
    "PROGRAM_FILES_ENV",
    "PROGRAM_FILES_X86_ENV",
    "REQUIRED_INSTALLATION_FIELDS",
    "SEARCH_ROOT_ENV_VARS",
    "SUPPORTED_PLATFORM",
]
