"""Embedded OCI image-spec JSON schemas.

The compiled table is built once at import time and shared for the
process lifetime. Payloads decode lazily on first open.

Usage:
    from schema import EMBEDDED_TABLE
    from vfs.filesystem import open_filesystem

    fs = open_filesystem(EMBEDDED_TABLE)
    with fs.open("/defs.json") as handle:
        definitions = handle.read()
"""

from __future__ import annotations

from core.constants import SCHEMA_SOURCE_DIR
from schema.compiled_assets import SCHEMA_ASSET_ENTRIES, SCHEMA_DIRECTORY_LISTINGS
from store.table_io import build_asset_table

EMBEDDED_TABLE = build_asset_table(SCHEMA_ASSET_ENTRIES, SCHEMA_DIRECTORY_LISTINGS)

__all__ = ["EMBEDDED_TABLE", "SCHEMA_SOURCE_DIR"]
