from __future__ import annotations

import json
import logging
import subprocess
from pathlib import Path
from typing import Any, Dict, Iterable, List, Tuple

from .errors import E_MSBUILD, MSBuildEvaluationError
from .models import Snapshot, Table
from .rules import DEFAULT_RULES, FrameworkRules

__all__ = ["query_msbuild", "evaluate_project_snapshot", "snapshot_from_evaluation"]

log = logging.getLogger(__name__)

PROJECT_SUFFIXES = {".csproj", ".fsproj", ".vbproj"}


def query_msbuild(project: Path, properties: Iterable[str], items: Iterable[str], *, configuration: str | None = None) -> Tuple[Dict[str, Any], subprocess.CompletedProcess[str]]:
    """Evaluate MSBuild properties and items using ``dotnet msbuild``.

    Returns a tuple with the parsed JSON payload and the completed process.
    When parsing fails, the dictionary will be empty but the raw process
    output remains available for diagnostics.
    """

    args = [
        "dotnet",
        "msbuild",
        str(project),
        "-nologo",
    ]
    if configuration:
        args.append(f"-property:Configuration={configuration}")
    for prop in properties:
        args.append(f"-getProperty:{prop}")
    for item in items:
        args.append(f"-getItem:{item}")

    log.debug("Evaluating %s", " ".join(args))
    completed = subprocess.run(args, capture_output=True, text=True, check=False)
    return _parse_payload(completed.stdout or ""), completed


def _parse_payload(output: str) -> Dict[str, Any]:
    start = output.find("{")
    if start < 0:
        return {}
    try:
        payload, _ = json.JSONDecoder().raw_decode(output[start:])
    except json.JSONDecodeError:
        return {}
    return payload if isinstance(payload, dict) else {}


def snapshot_from_evaluation(payload: Dict[str, Any], rules: FrameworkRules = DEFAULT_RULES) -> Snapshot:
    """Convert ``-getProperty``/``-getItem`` JSON into a snapshot.

    Items are keyed by their ``Identity``; the remaining metadata becomes the
    row properties. Tables the evaluation did not report are left out.
    """

    props = payload.get("Properties") or {}
    snapshot: Dict[str, Table] = {
        rules.general_table: Table(
            name=rules.general_table,
            properties={
                rules.identifier_property: str(props.get(rules.identifier_property) or ""),
                rules.framework_property: str(props.get(rules.framework_property) or ""),
            },
        )
    }

    items = payload.get("Items") or {}
    for family in rules.families:
        rows = items.get(family.table)
        if rows is None:
            continue
        table: Dict[str, Dict[str, str]] = {}
        for row in rows:
            identity = row.get("Identity")
            if not identity:
                continue
            table[identity] = {key: str(value) for key, value in row.items() if key != "Identity"}
        snapshot[family.table] = Table(name=family.table, items=table)
    return snapshot


def evaluate_project_snapshot(project: Path, *, configuration: str | None = None, rules: FrameworkRules = DEFAULT_RULES) -> Snapshot:
    properties: List[str] = [rules.identifier_property, rules.framework_property]
    items = [family.table for family in rules.families]
    payload, completed = query_msbuild(project, properties, items, configuration=configuration)
    if not payload:
        raise MSBuildEvaluationError(
            code=E_MSBUILD,
            message=f"dotnet msbuild returned exit code {completed.returncode} without an evaluation result for {project}",
            context={"project": str(project), "returncode": completed.returncode, "stderr": (completed.stderr or "").strip()},
        )
    return snapshot_from_evaluation(payload, rules)
