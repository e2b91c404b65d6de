from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table as RichTable

from .builtin import TARGET_FRAMEWORKS_PROVIDER
from .errors import FrameworkValuesError
from .models import Snapshot, ValueEntry
from .msbuild import PROJECT_SUFFIXES, evaluate_project_snapshot
from .provider import SupportedTargetFrameworksProvider
from .registry import get_global_registry
from .rules import DEFAULT_RULES, FrameworkRules, load_rules
from .snapshot_loader import load_snapshot


def build_parser() -> argparse.ArgumentParser:
    description = (
        "List the valid TargetFramework choices for a project.\n\n"
        "Examples:\n"
        "  supported-frameworks snapshot.yaml\n"
        "  supported-frameworks ./src/App/App.csproj --configuration Release\n"
        "  supported-frameworks snapshot.json --rules rules.yaml --json"
    )
    parser = argparse.ArgumentParser(
        prog="supported-frameworks",
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("source", help="Snapshot file (.json/.yaml) or MSBuild project file")
    parser.add_argument("--provider", default=TARGET_FRAMEWORKS_PROVIDER, help="Registered provider name (case-insensitive)")
    parser.add_argument("--rules", help="YAML file overriding table and identifier names")
    parser.add_argument("--configuration", help="Build configuration used when evaluating a project")
    parser.add_argument("--json", action="store_true", help="Print the values as JSON")
    parser.add_argument("--color", dest="color", action="store_true", default=None, help="Force rich-colored output")
    parser.add_argument("--no-color", dest="color", action="store_false", help="Disable colored output")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser


def configure_console(color_flag: Optional[bool]) -> Console:
    if color_flag is True:
        return Console()
    if color_flag is False:
        return Console(no_color=True)
    return Console(no_color=not sys.stdout.isatty())


def configure_logging(console: Console, debug: bool) -> logging.Logger:
    level = logging.DEBUG if debug else logging.WARNING
    handler = RichHandler(console=console, show_time=False, show_path=False)
    logging.basicConfig(level=level, handlers=[handler], force=True)
    return logging.getLogger("supported_frameworks")


def read_snapshot(source: Path, rules: FrameworkRules, configuration: str | None) -> Snapshot:
    if source.suffix.lower() in PROJECT_SUFFIXES:
        return evaluate_project_snapshot(source, configuration=configuration, rules=rules)
    return load_snapshot(source)


def print_values(console: Console, values: List[ValueEntry], *, as_json: bool) -> None:
    if as_json:
        payload = [{"name": value.name, "displayName": value.display_name} for value in values]
        print(json.dumps(payload, indent=2))
        return
    if not values:
        console.print("No supported target frameworks.")
        return
    table = RichTable("Name", "Display name")
    for value in values:
        table.add_row(value.name, value.display_name)
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    console = configure_console(args.color)
    logger = configure_logging(console, args.debug)

    registry = get_global_registry()
    registry.load_builtin()
    registry.load_plugins()
    try:
        provider = registry.resolve(args.provider)
    except KeyError as exc:
        parser.error(str(exc))

    try:
        if args.rules:
            rules = load_rules(args.rules)
            if isinstance(provider, SupportedTargetFrameworksProvider):
                provider = SupportedTargetFrameworksProvider(rules=rules)
            else:
                logger.warning("--rules ignored for provider '%s'", args.provider)
        else:
            rules = getattr(provider, "rules", DEFAULT_RULES)
        snapshot = read_snapshot(Path(args.source), rules, args.configuration)
        values = provider.transform(snapshot)
    except (FrameworkValuesError, OSError) as exc:
        if args.debug:
            raise
        console.print(f"[red]Error:[/] {escape(str(exc))}")
        return 1

    logger.debug("Provider '%s' produced %d value(s)", args.provider, len(values))
    print_values(console, values, as_json=args.json)
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
