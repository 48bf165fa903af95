# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import copy
import json
from typing import Any

import pytest

_SAMPLE_INSTALLATION: dict[str, Any] = {
    "instanceId": "a1b2c3d4",
    "installDate": "2024-01-15T09:30:00Z",
    "installationName": "VisualStudio/17.9.2+34622.214",
    "installationPath": "C:\\Program Files\\Microsoft Visual Studio\\2022\\Community",
    "installationVersion": "17.9.34622.214",
    "productId": "Microsoft.VisualStudio.Product.Community",
    "productPath": "C:\\Program Files\\Microsoft Visual Studio\\2022\\Community\\Common7\\IDE\\devenv.exe",
    "state": 4294967295,
    "isComplete": True,
    "isLaunchable": True,
    "isPrerelease": False,
    "isRebootRequired": False,
    "displayName": "Visual Studio Community 2022",
    "description": "Powerful IDE, free for students, open-source contributors, and individuals",
    "channelId": "VisualStudio.17.Release",
    "channelUri": "https://aka.ms/vs/17/release/channel",
    "enginePath": "C:\\Program Files (x86)\\Microsoft Visual Studio\\Installer\\resources\\app\\ServiceHub\\Services",
    "installedChannelId": "VisualStudio.17.Release",
    "installedChannelUri": "https://aka.ms/vs/17/release/channel",
    "releaseNotes": "https://docs.microsoft.com/en-us/visualstudio/releases/2022/release-notes-v17.9",
    "resolvedInstallationPath": "C:\\Program Files\\Microsoft Visual Studio\\2022\\Community",
    "thirdPartyNotices": "https://go.microsoft.com/fwlink/?LinkId=661288",
    "updateDate": "2024-03-01T10:00:00Z",
    "catalog": {
        "buildBranch": "d17.9",
        "buildVersion": "17.9.34622.214",
        "id": "VisualStudio/17.9.2+34622.214",
        "localBuild": "build-lab",
        "manifestName": "VisualStudio",
        "manifestType": "installer",
        "productDisplayVersion": "17.9.2",
        "productLine": "Dev17",
        "productLineVersion": "2022",
        "productMilestone": "RTW",
        "productMilestoneIsPreRelease": "False",
        "productName": "Visual Studio",
        "productPatchVersion": "2",
        "productPreReleaseMilestoneSuffix": "1.0",
        "productSemanticVersion": "17.9.2+34622.214",
        "requiredEngineVersion": "3.9.2164.13427",
    },
    "properties": {
        "campaignId": "",
        "channelManifestId": "VisualStudio.17.Release/17.9.2+34622.214",
        "nickname": "",
        "setupEngineFilePath": "C:\\Program Files (x86)\\Microsoft Visual Studio\\Installer\\setup.exe",
    },
}


@pytest.fixture
def installation_record() -> dict[str, Any]:
    """Return a realistic ``vswhere`` record for Visual Studio Community 2022."""

    return copy.deepcopy(_SAMPLE_INSTALLATION)


@pytest.fixture
def vswhere_output(installation_record: dict[str, Any]) -> str:
    """Return ``vswhere -format json`` output listing one installation."""

    return json.dumps([installation_record], indent=2)
