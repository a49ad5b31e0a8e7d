"""Filesystem facade over embedded or local assets.

The storage strategy is chosen once at construction: ``EmbeddedFileSystem``
serves the compiled table through the materializer, ``LocalFileSystem``
serves the recorded source files from disk. ``MountedFileSystem`` rewrites
paths onto a subtree of either one.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from core.config import SchemaFsConfig
from core.constants import DEFAULT_READDIR_COUNT, DEFAULT_TEXT_ENCODING
from core.errors import AssetNotFoundError
from core.logging_config import get_logger
from core.paths import base_name, join_mount
from core.types import AssetStat
from schema import EMBEDDED_TABLE
from store.asset_table import AssetTable
from store.materializer import Materializer
from store.table_io import load_asset_table
from vfs.file_handle import EmbeddedFile, LocalFile, VirtualFile

_LOGGER = get_logger(__name__)


class FileSystem(Protocol):
    """Read-only virtual filesystem contract."""

    def open(self, name: str) -> VirtualFile: ...

    def read_bytes(self, name: str) -> bytes: ...


class EmbeddedFileSystem:
    """Serve assets from the compiled, compressed table."""

    def __init__(self, table: AssetTable, materializer: Materializer | None = None) -> None:
        self._table = table
        self._materializer = materializer or Materializer(table)

    @property
    def materializer(self) -> Materializer:
        return self._materializer

    def open(self, name: str) -> EmbeddedFile:
        """Open a table path.

        Args:
            name: Any spelling of a table path.

        Returns:
            Handle over the materialized content.

        Raises:
            AssetNotFoundError: If the path is not in the table.
            AssetDecodeError: If the payload cannot be decoded.
            AssetIntegrityError: If the decoded size is wrong.
        """
        record = self._table.lookup(name)
        content = self._materializer.materialize(record)
        _LOGGER.debug("asset_opened", path=record.path, mode="embedded")
        return EmbeddedFile(record, content, self._table)

    def read_bytes(self, name: str) -> bytes:
        """Return the full content of a table path without a handle."""
        return self._materializer.materialize(self._table.lookup(name))


class LocalFileSystem:
    """Serve the loose source files recorded in the table."""

    def __init__(self, table: AssetTable, local_root: Path) -> None:
        """Create a local-mode filesystem.

        Args:
            table: Table mapping virtual paths to ``local_source_path``.
            local_root: Directory the source paths resolve against.
        """
        self._table = table
        self._local_root = local_root

    def open(self, name: str) -> LocalFile:
        """Open the host file recorded for a table path.

        Args:
            name: Any spelling of a table path.

        Returns:
            Handle over the host file or directory.

        Raises:
            AssetNotFoundError: If the path is not in the table or the
                recorded source is missing on disk.
        """
        record = self._table.lookup(name)
        host_path = self._local_root / record.local_source_path
        try:
            handle = LocalFile(host_path, base_name(record.path))
        except FileNotFoundError as error:
            raise AssetNotFoundError(
                f"Local source for {record.path} not found at {host_path}."
            ) from error
        _LOGGER.debug("asset_opened", path=record.path, mode="local", host_path=str(host_path))
        return handle

    def read_bytes(self, name: str) -> bytes:
        with self.open(name) as handle:
            return handle.read()


class MountedFileSystem:
    """Expose a subtree of another filesystem as its root."""

    def __init__(self, base: FileSystem, mount_name: str) -> None:
        self._base = base
        self._mount_name = mount_name

    def open(self, name: str) -> VirtualFile:
        return self._base.open(join_mount(self._mount_name, name))

    def read_bytes(self, name: str) -> bytes:
        return self._base.read_bytes(join_mount(self._mount_name, name))


def open_filesystem(
    table: AssetTable,
    use_local: bool = False,
    mount_name: str = "",
    local_root: Path | None = None,
) -> FileSystem:
    """Select the storage strategy for a table.

    Args:
        table: Compiled asset table.
        use_local: Serve loose files from ``local_root`` instead of payloads.
        mount_name: Optional prefix exposed as the root.
        local_root: Base directory for local mode; the working directory
            when omitted.

    Returns:
        Filesystem implementing ``open`` and ``read_bytes``.
    """
    base: FileSystem
    if use_local:
        base = LocalFileSystem(table, local_root or Path("."))
    else:
        base = EmbeddedFileSystem(table)
    if mount_name:
        return MountedFileSystem(base, mount_name)
    return base


class AssetFileSystem:
    """Primary entry point for reading embedded schema assets."""

    def __init__(
        self,
        config: SchemaFsConfig | None = None,
        table: AssetTable | None = None,
    ) -> None:
        """Create a filesystem client.

        Args:
            config: Optional runtime configuration; read from the
                environment when omitted.
            table: Optional table; defaults to ``config.table_path`` when
                set, otherwise the compiled schema table.
        """
        self._config = config or SchemaFsConfig.from_env()
        self._table = table or _default_table(self._config)
        self._fs = open_filesystem(
            self._table,
            use_local=self._config.use_local,
            mount_name=self._config.mount_name,
            local_root=self._config.local_root,
        )

    @property
    def table(self) -> AssetTable:
        return self._table

    def open(self, name: str) -> VirtualFile:
        """Open a path; see ``EmbeddedFileSystem.open`` for errors."""
        return self._fs.open(name)

    def read_bytes(self, name: str) -> bytes:
        return self._fs.read_bytes(name)

    def read_text(self, name: str, encoding: str = DEFAULT_TEXT_ENCODING) -> str:
        return self._fs.read_bytes(name).decode(encoding)

    def stat(self, name: str) -> AssetStat:
        with self._fs.open(name) as handle:
            return handle.stat()

    def listdir(self, name: str = "/", count: int = DEFAULT_READDIR_COUNT) -> list[AssetStat]:
        """List a directory.

        Args:
            name: Directory path.
            count: Maximum entries; ``<= 0`` returns the whole listing.

        Returns:
            Ordered entry stats.

        Raises:
            AssetNotFoundError: If the path does not exist.
            InvalidAssetOperationError: If the path is not a directory.
            EndOfListing: If the directory is empty and ``count > 0``.
        """
        with self._fs.open(name) as handle:
            return handle.readdir(count)


def _default_table(config: SchemaFsConfig) -> AssetTable:
    if config.table_path is not None:
        return load_asset_table(config.table_path)
    return EMBEDDED_TABLE
