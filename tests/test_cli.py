from __future__ import annotations

import json
import textwrap

import pytest

from supported_frameworks import cli
from supported_frameworks.errors import MissingRequiredTable

SNAPSHOT = textwrap.dedent(
    """
    ConfigurationGeneral:
      properties:
        TargetFrameworkIdentifier: NetCoreApp
        TargetFramework: net8.0
    SupportedNETCoreAppTargetFramework:
      items:
        .NETCoreApp,Version=v10.0: {DisplayName: .NET 10.0}
        .NETCoreApp,Version=v9.0: {DisplayName: .NET 9.0}
    SupportedNETFrameworkTargetFramework: {}
    SupportedNETStandardTargetFramework: {}
    """
)


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text(SNAPSHOT, encoding="utf-8")
    return path


def test_json_output(snapshot_file, capsys):
    assert cli.main([str(snapshot_file), "--json", "--no-color"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == [
        {"name": ".NETCoreApp,Version=v9.0", "displayName": ".NET 9.0"},
        {"name": ".NETCoreApp,Version=v10.0", "displayName": ".NET 10.0"},
    ]


def test_table_output(snapshot_file, capsys):
    assert cli.main([str(snapshot_file), "--no-color"]) == 0
    out = capsys.readouterr().out
    assert out.index(".NET 9.0") < out.index(".NET 10.0")


def test_fallback_empty_output(tmp_path, capsys):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps({"ConfigurationGeneral": {"properties": {"TargetFrameworkIdentifier": "Foo"}}}))
    assert cli.main([str(path), "--no-color"]) == 0
    assert "No supported target frameworks." in capsys.readouterr().out


def test_missing_table_exits_with_error(tmp_path, capsys):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps({"ConfigurationGeneral": {"properties": {"TargetFrameworkIdentifier": "NetStandard"}}}))
    assert cli.main([str(path), "--no-color"]) == 1
    assert "E_MISSING_TABLE" in capsys.readouterr().out


def test_missing_table_reraised_with_debug(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps({}))
    with pytest.raises(MissingRequiredTable):
        cli.main([str(path), "--no-color", "--debug"])


def test_rules_override(tmp_path, capsys):
    snapshot = tmp_path / "snapshot.yaml"
    snapshot.write_text(
        textwrap.dedent(
            """
            General:
              properties: {TargetFrameworkIdentifier: Custom}
            CustomFrameworks:
              items:
                custom2: {DisplayName: Custom 2}
            """
        ),
        encoding="utf-8",
    )
    rules = tmp_path / "rules.yaml"
    rules.write_text(
        "general: General\nfamilies:\n  - {family: Custom, table: CustomFrameworks}\n",
        encoding="utf-8",
    )
    assert cli.main([str(snapshot), "--rules", str(rules), "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == [{"name": "custom2", "displayName": "Custom 2"}]


def test_unknown_provider_is_usage_error(snapshot_file):
    with pytest.raises(SystemExit) as info:
        cli.main([str(snapshot_file), "--provider", "nope"])
    assert info.value.code == 2


def test_malformed_rules_exit_with_error(snapshot_file, tmp_path, capsys):
    rules = tmp_path / "rules.yaml"
    rules.write_text("families: [unclosed\n", encoding="utf-8")
    assert cli.main([str(snapshot_file), "--rules", str(rules), "--no-color"]) == 1
    assert "E_SNAPSHOT_FORMAT" in capsys.readouterr().out


def test_empty_item_key_exit_with_error(tmp_path, capsys):
    path = tmp_path / "snapshot.json"
    path.write_text(
        json.dumps(
            {
                "ConfigurationGeneral": {"properties": {"TargetFrameworkIdentifier": "NetCoreApp"}},
                "SupportedNETCoreAppTargetFramework": {"items": {"": {"DisplayName": "x"}}},
            }
        ),
        encoding="utf-8",
    )
    assert cli.main([str(path), "--no-color"]) == 1
    assert "E_SNAPSHOT_FORMAT" in capsys.readouterr().out


def test_invalid_utf8_snapshot_exit_with_error(tmp_path, capsys):
    path = tmp_path / "snapshot.yaml"
    path.write_bytes(b"ConfigurationGeneral:\n  properties: {TargetFramework: \xff}\n")
    assert cli.main([str(path), "--no-color"]) == 1
    assert "E_SNAPSHOT_FORMAT" in capsys.readouterr().out
