"""Unit tests for CLI command handling."""

from __future__ import annotations

import json

import pytest

from cli.main import main
from tests.fixture_paths import fixture_path


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for variable in ("SCHEMAFS_USE_LOCAL", "SCHEMAFS_LOCAL_ROOT", "SCHEMAFS_MOUNT", "SCHEMAFS_TABLE_PATH"):
        monkeypatch.delenv(variable, raising=False)


def test_cli_ls_lists_embedded_schemas(capsys) -> None:
    """CLI ls should print one line per root entry in registration order."""
    exit_code = main(["ls"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and lines[0].endswith("config-schema.json") and len(lines) == 7


def test_cli_ls_respects_count(capsys) -> None:
    exit_code = main(["ls", "/", "--count", "2"])
    lines = capsys.readouterr().out.strip().splitlines()

    assert exit_code == 0 and len(lines) == 2


def test_cli_cat_prints_schema_json(capsys) -> None:
    exit_code = main(["cat", "/defs.json"])
    payload = json.loads(capsys.readouterr().out)

    assert exit_code == 0 and "definitions" in payload


def test_cli_stat_prints_declared_size(capsys) -> None:
    exit_code = main(["stat", "/image-layout-schema.json"])
    output = capsys.readouterr().out

    assert exit_code == 0 and "\t439\t" in output


def test_cli_missing_path_returns_error_code(capsys) -> None:
    exit_code = main(["cat", "/missing.json"])
    captured = capsys.readouterr()

    assert exit_code == 1 and "missing.json" in captured.err


def test_cli_external_table_local_mode_reads_disk(capsys) -> None:
    """--table with --local should resolve sources next to the local root."""
    args = [
        "--table",
        str(fixture_path("tables/sample_table.json")),
        "--local",
        "--local-root",
        str(fixture_path("local")),
        "cat",
        "/defs.json",
    ]

    exit_code = main(args)

    assert exit_code == 0 and '"local"' in capsys.readouterr().out


def test_cli_ls_empty_directory_prints_nothing(capsys) -> None:
    args = ["--table", str(fixture_path("tables/sample_table.json")), "ls", "/empty_dir", "--count", "1"]

    exit_code = main(args)

    assert exit_code == 0 and capsys.readouterr().out == ""


def test_cli_mount_exposes_subtree(capsys) -> None:
    args = ["--table", str(fixture_path("tables/sample_table.json")), "--mount", "nested", "ls"]

    exit_code = main(args)

    assert exit_code == 0 and capsys.readouterr().out.strip().endswith("item.json")
