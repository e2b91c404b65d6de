from __future__ import annotations

import importlib.metadata
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from .provider import FrameworkEnumProvider

log = logging.getLogger(__name__)

ProviderFactory = Callable[[], FrameworkEnumProvider]


@dataclass(slots=True)
class ProviderRegistration:
    name: str
    factory: ProviderFactory
    description: str = ""
    _instance: Optional[FrameworkEnumProvider] = None

    @property
    def provider(self) -> FrameworkEnumProvider:
        if self._instance is None:
            self._instance = self.factory()
            log.debug("Created provider '%s'", self.name)
        return self._instance


class ProviderRegistry:
    """Providers attached to enumerated properties, owned by the embedding application."""

    ENTRYPOINT_GROUP = "supported_frameworks.providers"

    def __init__(self) -> None:
        self._providers: Dict[str, ProviderRegistration] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, name: str, factory: ProviderFactory, *, aliases: Iterable[str] | None = None, description: str = "") -> None:
        key = name.lower()
        if key in self._providers:
            raise ValueError(f"Provider '{name}' already registered")
        self._providers[key] = ProviderRegistration(name=name, factory=factory, description=description)
        for alias in aliases or []:
            self._aliases[alias.lower()] = key
        log.debug("Registered provider '%s'", name)

    def resolve(self, name: str) -> FrameworkEnumProvider:
        key = name.lower()
        if key in self._aliases:
            key = self._aliases[key]
        if key not in self._providers:
            raise KeyError(f"Unknown provider '{name}'")
        return self._providers[key].provider

    def providers(self) -> Iterable[ProviderRegistration]:
        return self._providers.values()

    def load_builtin(self) -> None:
        from .builtin import register_builtin_providers

        register_builtin_providers(self)

    def load_plugins(self) -> None:
        for entry_point in importlib.metadata.entry_points().select(group=self.ENTRYPOINT_GROUP):
            try:
                entry_point.load()
                log.debug("Loaded provider plugin '%s'", entry_point.name)
            except Exception as exc:  # pragma: no cover
                log.error("Failed to load provider plugin '%s': %s", entry_point.name, exc)


def enum_provider(name: str, *, aliases: Iterable[str] | None = None, description: str = "") -> Callable[[ProviderFactory], ProviderFactory]:
    def decorator(factory: ProviderFactory) -> ProviderFactory:
        registry = get_global_registry()
        registry.register(name, factory, aliases=aliases, description=description)
        return factory

    return decorator


_GLOBAL_REGISTRY: Optional[ProviderRegistry] = None


def get_global_registry() -> ProviderRegistry:
    global _GLOBAL_REGISTRY
    if _GLOBAL_REGISTRY is None:
        _GLOBAL_REGISTRY = ProviderRegistry()
    return _GLOBAL_REGISTRY


__all__ = [
    "ProviderRegistry",
    "ProviderRegistration",
    "ProviderFactory",
    "enum_provider",
    "get_global_registry",
]
