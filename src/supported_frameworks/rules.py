"""Rule (table) names and the framework family configuration."""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, List, Tuple

import yaml

from .errors import snapshot_format_error

__all__ = [
    "CONFIGURATION_GENERAL",
    "SUPPORTED_NETCOREAPP_TARGET_FRAMEWORK",
    "SUPPORTED_NETFRAMEWORK_TARGET_FRAMEWORK",
    "SUPPORTED_NETSTANDARD_TARGET_FRAMEWORK",
    "TARGET_FRAMEWORK_IDENTIFIER_PROPERTY",
    "TARGET_FRAMEWORK_PROPERTY",
    "DISPLAY_NAME_PROPERTY",
    "FrameworkFamily",
    "FrameworkRules",
    "DEFAULT_FAMILIES",
    "DEFAULT_RULES",
    "load_rules",
]

CONFIGURATION_GENERAL = "ConfigurationGeneral"
SUPPORTED_NETCOREAPP_TARGET_FRAMEWORK = "SupportedNETCoreAppTargetFramework"
SUPPORTED_NETFRAMEWORK_TARGET_FRAMEWORK = "SupportedNETFrameworkTargetFramework"
SUPPORTED_NETSTANDARD_TARGET_FRAMEWORK = "SupportedNETStandardTargetFramework"

TARGET_FRAMEWORK_IDENTIFIER_PROPERTY = "TargetFrameworkIdentifier"
TARGET_FRAMEWORK_PROPERTY = "TargetFramework"
# Example: <SupportedTargetFramework Include=".NETCoreApp,Version=v5.0" DisplayName=".NET 5.0" />
DISPLAY_NAME_PROPERTY = "DisplayName"


@dataclass(frozen=True, slots=True)
class FrameworkFamily:
    """A framework family and the table listing its supported frameworks.

    ``identifiers`` holds every spelling of ``TargetFrameworkIdentifier`` that
    selects this family; MSBuild evaluates them with a leading dot.
    """

    family: str
    table: str
    identifiers: Tuple[str, ...] = ()

    def matches(self, identifier: str) -> bool:
        return any(_equals_ignore_case(identifier, candidate) for candidate in (self.family, *self.identifiers))


def _upper_char(char: str) -> str:
    # Simple one-to-one mapping only; "ß" does not expand to "SS".
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _equals_ignore_case(left: str, right: str) -> bool:
    """Ordinal comparison ignoring case, character by character, independent of locale."""
    return len(left) == len(right) and all(
        _upper_char(a) == _upper_char(b) for a, b in zip(left, right)
    )


DEFAULT_FAMILIES: Tuple[FrameworkFamily, ...] = (
    FrameworkFamily("NetCoreApp", SUPPORTED_NETCOREAPP_TARGET_FRAMEWORK, (".NETCoreApp",)),
    FrameworkFamily("NetFramework", SUPPORTED_NETFRAMEWORK_TARGET_FRAMEWORK, (".NETFramework",)),
    FrameworkFamily("NetStandard", SUPPORTED_NETSTANDARD_TARGET_FRAMEWORK, (".NETStandard",)),
)


@dataclass(frozen=True, slots=True)
class FrameworkRules:
    general_table: str = CONFIGURATION_GENERAL
    identifier_property: str = TARGET_FRAMEWORK_IDENTIFIER_PROPERTY
    framework_property: str = TARGET_FRAMEWORK_PROPERTY
    display_name_property: str = DISPLAY_NAME_PROPERTY
    families: Tuple[FrameworkFamily, ...] = DEFAULT_FAMILIES

    @property
    def rule_names(self) -> Tuple[str, ...]:
        """Tables a snapshot must carry for these rules, general table last."""
        return tuple(family.table for family in self.families) + (self.general_table,)


DEFAULT_RULES = FrameworkRules()


def load_rules(path: str | Path, *, base: FrameworkRules = DEFAULT_RULES) -> FrameworkRules:
    """Load a rules override from YAML.

    Keys not present in the document keep the values of ``base``::

        general: ConfigurationGeneral
        display_name_property: DisplayName
        families:
          - family: NetCoreApp
            table: SupportedNETCoreAppTargetFramework
            identifiers: [.NETCoreApp]
    """

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    try:
        data: Any = yaml.safe_load(p.read_text(encoding="utf-8"))
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise snapshot_format_error(f"Unable to parse rules: {exc}", {"path": str(p)}) from exc
    if data is None:
        return base
    if not isinstance(data, dict):
        raise snapshot_format_error("Root of rules document must be an object", {"path": str(p)})

    overrides: dict[str, Any] = {}
    for key, attr in (
        ("general", "general_table"),
        ("identifier_property", "identifier_property"),
        ("framework_property", "framework_property"),
        ("display_name_property", "display_name_property"),
    ):
        if key in data:
            overrides[attr] = _require_str(data[key], key, p)

    if "families" in data:
        raw_families = data["families"]
        if not isinstance(raw_families, list) or not raw_families:
            raise snapshot_format_error("'families' must be a non-empty list", {"path": str(p)})
        families: List[FrameworkFamily] = []
        for index, raw in enumerate(raw_families):
            if not isinstance(raw, dict):
                raise snapshot_format_error(
                    "Family entry must be an object", {"path": str(p), "index": index}
                )
            identifiers = raw.get("identifiers", [])
            if not isinstance(identifiers, list):
                raise snapshot_format_error(
                    "'identifiers' must be a list", {"path": str(p), "index": index}
                )
            families.append(
                FrameworkFamily(
                    family=_require_str(raw.get("family"), "family", p),
                    table=_require_str(raw.get("table"), "table", p),
                    identifiers=tuple(_require_str(item, "identifiers", p) for item in identifiers),
                )
            )
        overrides["families"] = tuple(families)

    return replace(base, **overrides)


def _require_str(value: Any, key: str, path: Path) -> str:
    if not isinstance(value, str) or not value:
        raise snapshot_format_error(f"'{key}' must be a non-empty string", {"path": str(path)})
    return value
