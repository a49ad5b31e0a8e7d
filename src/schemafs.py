"""Public API surface for schemafs.

This module provides a stable import path for library users.
It re-exports the filesystem client, factories, typed models, and errors.
"""

from __future__ import annotations

from core.config import SchemaFsConfig
from core.errors import (
    AssetDecodeError,
    AssetIntegrityError,
    AssetNotFoundError,
    EndOfListing,
    InvalidAssetOperationError,
    SchemaFsError,
    SchemaFsTableError,
)
from core.paths import canonical_path
from core.types import AssetRecord, AssetStat
from schema import EMBEDDED_TABLE
from store.asset_table import AssetTable
from store.materializer import Materializer
from store.payload_codec import encode_payload
from store.table_io import build_asset_table, load_asset_table
from vfs.file_handle import VirtualFile
from vfs.filesystem import AssetFileSystem, open_filesystem

__all__ = [
    "AssetDecodeError",
    "AssetFileSystem",
    "AssetIntegrityError",
    "AssetNotFoundError",
    "AssetRecord",
    "AssetStat",
    "AssetTable",
    "EMBEDDED_TABLE",
    "EndOfListing",
    "InvalidAssetOperationError",
    "Materializer",
    "SchemaFsConfig",
    "SchemaFsError",
    "SchemaFsTableError",
    "VirtualFile",
    "build_asset_table",
    "canonical_path",
    "encode_payload",
    "load_asset_table",
    "open_filesystem",
]
