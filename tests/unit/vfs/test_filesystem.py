"""Unit tests for the filesystem facade and storage strategies."""

from __future__ import annotations

from dataclasses import replace
from threading import Barrier
from concurrent.futures import ThreadPoolExecutor

import pytest

from core.config import SchemaFsConfig
from core.errors import AssetNotFoundError
from store.table_io import load_asset_table
from vfs.filesystem import (
    AssetFileSystem,
    EmbeddedFileSystem,
    LocalFileSystem,
    MountedFileSystem,
    open_filesystem,
)
from tests.asset_builders import sample_table
from tests.fixture_paths import fixture_path


def _config(**overrides: object) -> SchemaFsConfig:
    base = SchemaFsConfig(
        use_local=False,
        local_root=fixture_path("local"),
        mount_name="",
        table_path=fixture_path("tables/sample_table.json"),
        log_level="info",
    )
    return replace(base, **overrides)


def test_open_filesystem_selects_embedded_by_default() -> None:
    assert isinstance(open_filesystem(sample_table()), EmbeddedFileSystem)


def test_open_filesystem_selects_local_strategy() -> None:
    filesystem = open_filesystem(sample_table(), use_local=True, local_root=fixture_path("local"))

    assert isinstance(filesystem, LocalFileSystem)


def test_open_filesystem_wraps_mount() -> None:
    assert isinstance(open_filesystem(sample_table(), mount_name="/nested"), MountedFileSystem)


def test_embedded_open_missing_path_raises_not_found() -> None:
    with pytest.raises(AssetNotFoundError):
        EmbeddedFileSystem(sample_table()).open("/missing.json")


def test_embedded_read_bytes_matches_declared_size() -> None:
    table = sample_table()

    content = EmbeddedFileSystem(table).read_bytes("nested//item.json")

    assert len(content) == table.lookup("/nested/item.json").declared_size


def test_concurrent_opens_share_one_decode() -> None:
    """N concurrent opens should yield identical bytes from one decode."""
    filesystem = EmbeddedFileSystem(sample_table())
    barrier = Barrier(6)

    def _read(_: int) -> bytes:
        barrier.wait()
        with filesystem.open("/defs.json") as handle:
            return handle.read()

    with ThreadPoolExecutor(max_workers=6) as executor:
        contents = list(executor.map(_read, range(6)))

    assert len(set(contents)) == 1 and filesystem.materializer.attempts("/defs.json") == 1


def test_local_mode_reads_host_file_not_payload() -> None:
    """Local mode should bypass the embedded payload entirely."""
    table = load_asset_table(fixture_path("tables/sample_table.json"))
    filesystem = LocalFileSystem(table, fixture_path("local"))

    with filesystem.open("/defs.json") as handle:
        content = handle.read()

    assert content == fixture_path("local/defs.json").read_bytes()
    assert b'"local"' in content


def test_local_mode_rejects_paths_missing_from_table() -> None:
    filesystem = LocalFileSystem(sample_table(), fixture_path("local"))

    with pytest.raises(AssetNotFoundError):
        filesystem.open("/unlisted.json")


def test_local_mode_rejects_sources_missing_on_disk(tmp_path) -> None:
    filesystem = LocalFileSystem(sample_table(), tmp_path)

    with pytest.raises(AssetNotFoundError):
        filesystem.open("/defs.json")


def test_mount_exposes_subtree_as_root() -> None:
    filesystem = open_filesystem(sample_table(), mount_name="nested")

    with filesystem.open("/item.json") as handle:
        content = handle.read()

    assert content == b'{"type": "object"}\n'


def test_mount_root_lists_subtree() -> None:
    filesystem = open_filesystem(sample_table(), mount_name="/nested/")

    with filesystem.open("/") as handle:
        names = [entry.name for entry in handle.readdir(0)]

    assert names == ["item.json", "other.json"]


def test_mounted_local_mode_reads_subtree_files() -> None:
    table = load_asset_table(fixture_path("tables/sample_table.json"))
    filesystem = open_filesystem(
        table, use_local=True, mount_name="/nested", local_root=fixture_path("local")
    )

    content = filesystem.read_bytes("item.json")

    assert content == fixture_path("local/nested/item.json").read_bytes()


def test_asset_filesystem_reads_text_from_configured_table() -> None:
    client = AssetFileSystem(_config())

    text = client.read_text("/defs.json")

    assert '"embedded"' in text


def test_asset_filesystem_local_mode_reads_text_from_disk() -> None:
    client = AssetFileSystem(_config(use_local=True))

    assert '"local"' in client.read_text("/defs.json")


def test_asset_filesystem_stat_and_listdir() -> None:
    client = AssetFileSystem(_config())

    info = client.stat("/defs.json")
    names = [entry.name for entry in client.listdir("/", 2)]

    assert info.size == 47 and names == ["defs.json", "empty.txt"]


def test_asset_filesystem_accepts_explicit_table() -> None:
    client = AssetFileSystem(_config(table_path=None), table=sample_table())

    assert client.table.lookup("/nested/other.json").declared_size == 18
