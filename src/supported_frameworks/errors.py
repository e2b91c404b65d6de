"""Error definitions for supported framework value providers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

E_MISSING_TABLE = "E_MISSING_TABLE"
E_MISSING_PROPERTY = "E_MISSING_PROPERTY"
E_SNAPSHOT_FORMAT = "E_SNAPSHOT_FORMAT"
E_MSBUILD = "E_MSBUILD"


@dataclass
class FrameworkValuesError(Exception):
    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


class MissingRequiredTable(FrameworkValuesError):
    pass


class MissingRequiredProperty(FrameworkValuesError):
    pass


class SnapshotFormatError(FrameworkValuesError):
    pass


class MSBuildEvaluationError(FrameworkValuesError):
    pass


def missing_table(table: str) -> MissingRequiredTable:
    return MissingRequiredTable(
        code=E_MISSING_TABLE,
        message=f"Snapshot has no '{table}' table",
        context={"table": table},
    )


def missing_property(table: str, item: str, prop: str) -> MissingRequiredProperty:
    return MissingRequiredProperty(
        code=E_MISSING_PROPERTY,
        message=f"Item '{item}' in '{table}' has no '{prop}' property",
        context={"table": table, "item": item, "property": prop},
    )


def snapshot_format_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> SnapshotFormatError:
    return SnapshotFormatError(code=E_SNAPSHOT_FORMAT, message=message, context=context)


__all__ = [
    "FrameworkValuesError",
    "MissingRequiredTable",
    "MissingRequiredProperty",
    "SnapshotFormatError",
    "MSBuildEvaluationError",
    "missing_table",
    "missing_property",
    "snapshot_format_error",
    "E_MISSING_TABLE",
    "E_MISSING_PROPERTY",
    "E_SNAPSHOT_FORMAT",
    "E_MSBUILD",
]
