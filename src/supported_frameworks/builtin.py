"""Providers shipped with the package."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .provider import SupportedTargetFrameworksProvider

if TYPE_CHECKING:
    from .registry import ProviderRegistry

TARGET_FRAMEWORKS_PROVIDER = "SupportedTargetFrameworksEnumProvider"


def register_builtin_providers(registry: "ProviderRegistry") -> None:
    if any(item.name == TARGET_FRAMEWORKS_PROVIDER for item in registry.providers()):
        return
    registry.register(
        TARGET_FRAMEWORKS_PROVIDER,
        SupportedTargetFrameworksProvider,
        aliases=["target-frameworks"],
        description="Valid values for the TargetFramework property from evaluation.",
    )
