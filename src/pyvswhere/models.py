# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models describing query options and discovered installations."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from packaging.version import InvalidVersion
from packaging.version import Version as PackagingVersion
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .constants import PRODUCT_ALIASES


class Product(str, Enum):
    """Enumerate the Visual Studio product identifiers understood by ``vswhere``."""

    COMMUNITY = "Microsoft.VisualStudio.Product.Community"
    PROFESSIONAL = "Microsoft.VisualStudio.Product.Professional"
    ENTERPRISE = "Microsoft.VisualStudio.Product.Enterprise"
    BUILD_TOOLS = "Microsoft.VisualStudio.Product.BuildTools"

    @classmethod
    def from_raw(cls, raw: str) -> Product:
        """Return the product matching a short alias or a full product id.

        Args:
            raw: Alias such as ``"community"`` or the full product identifier.

        Returns:
            Product: Matching enum member.

        Raises:
            ValueError: If ``raw`` names no known product.
        """

        token = raw.strip()
        alias = PRODUCT_ALIASES.get(token.lower().replace("-", "").replace("_", ""))
        for member in cls:
            if member.value in {token, alias}:
                return member
        known = ", ".join(sorted(PRODUCT_ALIASES))
        raise ValueError(f"Unknown product '{raw}' (expected one of: {known} or a full product id)")


class Version(BaseModel):
    """Version bound used in a ``-version`` range."""

    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int | None = Field(default=None, ge=0)
    patch: int | None = Field(default=None, ge=0)
    exclusive: bool = False


class VersionRange(BaseModel):
    """Lower and upper version bounds; either side may be open."""

    model_config = ConfigDict(frozen=True)

    lower: Version | None = None
    upper: Version | None = None


class QueryOptions(BaseModel):
    """Options controlling which installations ``vswhere`` reports."""

    model_config = ConfigDict(frozen=True)

    all: bool = False
    prerelease: bool = False
    products: tuple[Product, ...] = ()
    requires: tuple[str, ...] = ()
    requires_any: bool = False
    version_range: VersionRange | None = None
    latest: bool = False
    sort: bool = False
    legacy: bool = False

    @classmethod
    def default(cls) -> QueryOptions:
        """Return the options applied when the caller supplies none."""

        return cls(all=True, prerelease=True, sort=True)


class _WireModel(BaseModel):
    """Base model mapping snake_case attributes onto ``vswhere``'s camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow", frozen=True)


def _text_or_none(value: object) -> str | None:
    """Return ``value`` when it is a string, otherwise ``None``."""

    return value if isinstance(value, str) else None


def _flag_or_none(value: object) -> bool | None:
    return value if isinstance(value, bool) else None


def _integer_or_none(value: object) -> int | None:
    return value if isinstance(value, int) and not isinstance(value, bool) else None


def _section_or_none(value: object) -> object | None:
    return value if isinstance(value, (Mapping, BaseModel)) else None


class Catalog(_WireModel):
    """Build and product metadata reported under ``catalog``."""

    build_branch: str | None = None
    build_version: str | None = None
    id: str | None = None
    local_build: str | None = None
    manifest_name: str | None = None
    manifest_type: str | None = None
    product_display_version: str | None = None
    product_line: str | None = None
    product_line_version: str | None = None
    product_milestone: str | None = None
    product_milestone_is_pre_release: str | None = None
    product_name: str | None = None
    product_patch_version: str | None = None
    product_pre_release_milestone_suffix: str | None = None
    product_semantic_version: str | None = None
    required_engine_version: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _drop_mistyped(cls, value: object) -> str | None:
        return _text_or_none(value)


class InstallationProperties(_WireModel):
    """Setup metadata reported under ``properties``."""

    campaign_id: str | None = None
    channel_manifest_id: str | None = None
    include_recommended: str | None = None
    nickname: str | None = None
    setup_engine_file_path: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _drop_mistyped(cls, value: object) -> str | None:
        return _text_or_none(value)


class Installation(_WireModel):
    """A single Visual Studio instance as reported by ``vswhere``.

    Only the identifying fields are mandatory; legacy instances (``-legacy``)
    report little beyond them.

    Optional fields holding a value of the wrong JSON type read as ``None``;
    the raw value is not kept. Unknown keys are preserved as extras.
    """

    instance_id: str
    installation_path: str
    product_id: str
    installation_name: str | None = None
    display_name: str | None = None
    description: str | None = None
    resolved_installation_path: str | None = None
    product_path: str | None = None
    engine_path: str | None = None
    state: int | None = None
    is_complete: bool | None = None
    is_launchable: bool | None = None
    is_prerelease: bool | None = None
    is_reboot_required: bool | None = None
    installation_version: str | None = None
    install_date: str | None = None
    update_date: str | None = None
    channel_id: str | None = None
    channel_uri: str | None = None
    installed_channel_id: str | None = None
    installed_channel_uri: str | None = None
    release_notes: str | None = None
    third_party_notices: str | None = None
    catalog: Catalog | None = None
    properties: InstallationProperties | None = None

    @field_validator(
        "installation_name",
        "display_name",
        "description",
        "resolved_installation_path",
        "product_path",
        "engine_path",
        "installation_version",
        "install_date",
        "update_date",
        "channel_id",
        "channel_uri",
        "installed_channel_id",
        "installed_channel_uri",
        "release_notes",
        "third_party_notices",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: object) -> str | None:
        """Return ``value`` for string fields, dropping values of any other type."""

        return _text_or_none(value)

    @field_validator("state", mode="before")
    @classmethod
    def _coerce_state(cls, value: object) -> int | None:
        return _integer_or_none(value)

    @field_validator("is_complete", "is_launchable", "is_prerelease", "is_reboot_required", mode="before")
    @classmethod
    def _coerce_flags(cls, value: object) -> bool | None:
        return _flag_or_none(value)

    @field_validator("catalog", "properties", mode="before")
    @classmethod
    def _coerce_sections(cls, value: object) -> object | None:
        """Return nested sections only when ``vswhere`` reported them as objects."""

        return _section_or_none(value)

    @property
    def parsed_version(self) -> PackagingVersion | None:
        """Return ``installationVersion`` as a comparable version when parsable."""

        if not self.installation_version:
            return None
        try:
            return PackagingVersion(self.installation_version)
        except InvalidVersion:
            return None


__all__ = [
    "Catalog",
    "Installation",
    "InstallationProperties",
    "Product",
    "QueryOptions",
    "Version",
    "VersionRange",
]
