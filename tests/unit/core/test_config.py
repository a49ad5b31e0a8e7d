"""Unit tests for core config parsing."""

from __future__ import annotations

import os

import pytest

from core.config import SchemaFsConfig
from core.constants import SCHEMA_SOURCE_DIR
from core.errors import SchemaFsConfigError


def test_from_env_defaults_to_embedded_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should default to embedded mode over the schema sources."""
    for variable in ("SCHEMAFS_USE_LOCAL", "SCHEMAFS_LOCAL_ROOT", "SCHEMAFS_TABLE_PATH"):
        monkeypatch.delenv(variable, raising=False)

    config = SchemaFsConfig.from_env()

    assert not config.use_local and config.local_root == SCHEMA_SOURCE_DIR


def test_from_env_reads_local_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should accept common truthy spellings."""
    monkeypatch.setenv("SCHEMAFS_USE_LOCAL", "Yes")

    config = SchemaFsConfig.from_env()

    assert config.use_local


def test_from_env_raises_for_invalid_flag(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for a non-boolean local flag."""
    monkeypatch.setenv("SCHEMAFS_USE_LOCAL", "sometimes")

    with pytest.raises(SchemaFsConfigError):
        SchemaFsConfig.from_env()

    assert os.getenv("SCHEMAFS_USE_LOCAL") == "sometimes"


def test_from_env_raises_for_invalid_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject unknown log levels."""
    monkeypatch.setenv("SCHEMAFS_LOG_LEVEL", "loud")

    with pytest.raises(SchemaFsConfigError):
        SchemaFsConfig.from_env()


def test_from_env_roots_local_mode_at_table_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path
) -> None:
    """External tables should resolve local sources next to the table file."""
    monkeypatch.delenv("SCHEMAFS_LOCAL_ROOT", raising=False)
    monkeypatch.setenv("SCHEMAFS_TABLE_PATH", str(tmp_path / "table.json"))

    config = SchemaFsConfig.from_env()

    assert config.local_root == tmp_path.resolve()


def test_from_env_reads_mount(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SCHEMAFS_MOUNT", "/schemas")

    config = SchemaFsConfig.from_env()

    assert config.mount_name == "/schemas"
