from __future__ import annotations

import pytest

from supported_frameworks.models import Table
from supported_frameworks.rules import (
    CONFIGURATION_GENERAL,
    SUPPORTED_NETCOREAPP_TARGET_FRAMEWORK,
    SUPPORTED_NETFRAMEWORK_TARGET_FRAMEWORK,
    SUPPORTED_NETSTANDARD_TARGET_FRAMEWORK,
)


def general(identifier: str | None = None, framework: str | None = None) -> Table:
    properties = {}
    if identifier is not None:
        properties["TargetFrameworkIdentifier"] = identifier
    if framework is not None:
        properties["TargetFramework"] = framework
    return Table(name=CONFIGURATION_GENERAL, properties=properties)


def items(name: str, rows: dict) -> Table:
    return Table(name=name, items={key: {"DisplayName": value} for key, value in rows.items()})


NETCOREAPP_ROWS = {
    ".NETCoreApp,Version=v10.0": ".NET 10.0",
    ".NETCoreApp,Version=v3.1": ".NET Core 3.1",
    ".NETCoreApp,Version=v9.0": ".NET 9.0",
    ".NETCoreApp,Version=v8.0": ".NET 8.0",
}

NETFRAMEWORK_ROWS = {
    ".NETFramework,Version=v4.8": ".NET Framework 4.8",
    ".NETFramework,Version=v4.7.2": ".NET Framework 4.7.2",
    ".NETFramework,Version=v4.6.1": ".NET Framework 4.6.1",
}

NETSTANDARD_ROWS = {
    ".NETStandard,Version=v2.1": ".NET Standard 2.1",
    ".NETStandard,Version=v2.0": ".NET Standard 2.0",
    ".NETStandard,Version=v1.6": ".NET Standard 1.6",
}


@pytest.fixture
def make_snapshot():
    def _make(identifier: str | None = None, framework: str | None = None, *, omit: tuple = ()):
        tables = {
            CONFIGURATION_GENERAL: general(identifier, framework),
            SUPPORTED_NETCOREAPP_TARGET_FRAMEWORK: items(SUPPORTED_NETCOREAPP_TARGET_FRAMEWORK, NETCOREAPP_ROWS),
            SUPPORTED_NETFRAMEWORK_TARGET_FRAMEWORK: items(SUPPORTED_NETFRAMEWORK_TARGET_FRAMEWORK, NETFRAMEWORK_ROWS),
            SUPPORTED_NETSTANDARD_TARGET_FRAMEWORK: items(SUPPORTED_NETSTANDARD_TARGET_FRAMEWORK, NETSTANDARD_ROWS),
        }
        for name in omit:
            tables.pop(name)
        return tables

    return _make
