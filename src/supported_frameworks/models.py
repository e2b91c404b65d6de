"""Value entries and read-only snapshot tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Mapping, Optional, Tuple

from .errors import missing_property, missing_table

__all__ = ["ValueEntry", "Table", "Snapshot", "get_table"]


@dataclass(frozen=True, slots=True)
class ValueEntry:
    """One selectable value for an enumerated project property."""

    name: str
    display_name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("ValueEntry name must be non-empty")


@dataclass(frozen=True, slots=True)
class Table:
    """Evaluated state of one rule.

    Property rules such as ``ConfigurationGeneral`` fill ``properties``; item
    rules such as ``SupportedNETCoreAppTargetFramework`` fill ``items``, keyed
    by item identity in evaluation order.
    """

    name: str
    properties: Mapping[str, str] = field(default_factory=dict)
    items: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def get_property(self, name: str) -> Optional[str]:
        return self.properties.get(name)

    def get_row(self, key: str) -> Mapping[str, str]:
        return self.items[key]

    def rows(self) -> Iterator[Tuple[str, Mapping[str, str]]]:
        yield from self.items.items()

    def require(self, key: str, properties: Mapping[str, str], prop: str) -> str:
        """Return a metadata value the item must declare."""
        value = properties.get(prop)
        if value is None:
            raise missing_property(self.name, key, prop)
        return value


# rule name -> table
Snapshot = Mapping[str, Table]


def get_table(snapshot: Snapshot, name: str) -> Table:
    table = snapshot.get(name)
    if table is None:
        raise missing_table(name)
    return table
