"""Snapshot loading utilities (JSON/YAML).

A snapshot document maps rule names to tables. Each table may declare
``properties`` (a flat object) and ``items`` (item identity -> metadata)::

    ConfigurationGeneral:
      properties:
        TargetFrameworkIdentifier: .NETCoreApp
        TargetFramework: net8.0
    SupportedNETCoreAppTargetFramework:
      items:
        .NETCoreApp,Version=v8.0: {DisplayName: .NET 8.0}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import snapshot_format_error
from .models import Snapshot, Table

__all__ = ["load_snapshot", "parse_snapshot"]

_TABLE_KEYS = {"properties", "items"}


def load_snapshot(path: str | Path) -> Snapshot:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    try:
        text = p.read_text(encoding="utf-8")
        if p.suffix.lower() in {".yaml", ".yml"}:
            data: Any = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise snapshot_format_error(f"Unable to parse snapshot: {exc}", {"path": str(p)}) from exc
    return parse_snapshot(data, source=str(p))


def parse_snapshot(data: Any, *, source: str = "<memory>") -> Snapshot:
    """Validate a snapshot document and build its tables.

    Scalar values are converted to strings; ``null`` becomes an empty
    string, matching how evaluation reports unset properties.
    """

    if not isinstance(data, dict):
        raise snapshot_format_error("Root of snapshot must be an object", {"source": source})

    snapshot: Dict[str, Table] = {}
    for raw_name, body in data.items():
        name = str(raw_name)
        ctx = {"source": source, "table": name}
        if body is None:
            body = {}
        if not isinstance(body, dict):
            raise snapshot_format_error(f"Table '{name}' must be an object", ctx)
        unknown = set(body) - _TABLE_KEYS
        if unknown:
            raise snapshot_format_error(
                f"Table '{name}' has unknown keys: {', '.join(sorted(map(str, unknown)))}", ctx
            )

        properties = _scalars(body.get("properties"), f"properties of '{name}'", ctx)
        raw_items = body.get("items") or {}
        if not isinstance(raw_items, dict):
            raise snapshot_format_error(f"Items of '{name}' must be an object", ctx)
        items: Dict[str, Dict[str, str]] = {}
        for key, metadata in raw_items.items():
            if key is None or str(key) == "":
                raise snapshot_format_error(f"Items of '{name}' must have non-empty keys", ctx)
            items[str(key)] = _scalars(metadata, f"item '{key}' in '{name}'", ctx)
        snapshot[name] = Table(name=name, properties=properties, items=items)
    return snapshot


def _scalars(value: Any, what: str, ctx: Dict[str, Any]) -> Dict[str, str]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise snapshot_format_error(f"The {what} must be an object", ctx)
    result: Dict[str, str] = {}
    for key, item in value.items():
        if isinstance(item, (dict, list)):
            raise snapshot_format_error(f"'{key}' in the {what} must be a scalar", ctx)
        result[str(key)] = "" if item is None else str(item)
    return result
