"""Selection of the supported frameworks table and conversion to value entries."""

from __future__ import annotations

import functools
import logging
from typing import Callable, List, Mapping, Optional

from .models import Snapshot, Table, ValueEntry, get_table
from .natural import compare_natural
from .rules import DEFAULT_RULES, FrameworkFamily, FrameworkRules

__all__ = [
    "RowMapper",
    "EntryComparer",
    "classify_identifier",
    "display_name_mapper",
    "compare_by_display_name",
    "transform_supported_values",
]

log = logging.getLogger(__name__)

RowMapper = Callable[[Table, str, Mapping[str, str]], ValueEntry]
EntryComparer = Callable[[ValueEntry, ValueEntry], int]


def classify_identifier(identifier: Optional[str], rules: FrameworkRules = DEFAULT_RULES) -> Optional[FrameworkFamily]:
    """Return the family selected by ``identifier``, or ``None`` when unrecognized."""
    if not identifier:
        return None
    for family in rules.families:
        if family.matches(identifier):
            return family
    return None


def display_name_mapper(display_name_property: str) -> RowMapper:
    """Map a row to ``ValueEntry(key, row[display_name_property])``."""

    def to_value(table: Table, key: str, properties: Mapping[str, str]) -> ValueEntry:
        return ValueEntry(name=key, display_name=table.require(key, properties, display_name_property))

    return to_value


def compare_by_display_name(a: ValueEntry, b: ValueEntry) -> int:
    return compare_natural(a.display_name, b.display_name) or compare_natural(a.name, b.name)


def transform_supported_values(
    snapshot: Snapshot,
    *,
    rules: FrameworkRules = DEFAULT_RULES,
    to_value: Optional[RowMapper] = None,
    compare: EntryComparer = compare_by_display_name,
) -> List[ValueEntry]:
    """Produce the ordered framework choices for ``snapshot``.

    A recognized ``TargetFrameworkIdentifier`` selects its family table and
    every row of that table becomes one entry. Otherwise the evaluated
    ``TargetFramework`` is offered as the only choice, or nothing when it is
    empty. Missing tables and rows without a display name raise.
    """

    general = get_table(snapshot, rules.general_table)
    identifier = general.get_property(rules.identifier_property)
    family = classify_identifier(identifier, rules)

    if family is None:
        target_framework = general.get_property(rules.framework_property)
        log.debug(
            "Identifier %r not recognized; falling back to %s=%r",
            identifier,
            rules.framework_property,
            target_framework,
        )
        # A user-defined TargetFramework with an unknown moniker.
        if target_framework:
            return [ValueEntry(name=target_framework, display_name=target_framework)]
        return []

    log.debug("Identifier %r selects table '%s'", identifier, family.table)
    mapper = to_value or display_name_mapper(rules.display_name_property)
    table = get_table(snapshot, family.table)
    entries = [mapper(table, key, properties) for key, properties in table.rows()]
    entries.sort(key=functools.cmp_to_key(compare))
    return entries
