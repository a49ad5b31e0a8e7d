"""Asset table entry serialization and loading.

This module maps the compiled-table entry layout onto typed records.
It reads table files produced by an external build step in JSON or YAML.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Sequence, cast

from core.constants import (
    SUPPORTED_TABLE_EXTENSIONS,
    TABLE_ASSETS_KEY,
    TABLE_DIRECTORIES_KEY,
    YAML_TABLE_EXTENSIONS,
)
from core.errors import SchemaFsDependencyError, SchemaFsTableError
from core.logging_config import get_logger
from core.types import AssetRecord
from store.asset_table import AssetTable

_LOGGER = get_logger(__name__)


def asset_record_to_payload(record: AssetRecord) -> dict[str, object]:
    """Serialize an AssetRecord into the table entry layout.

    Args:
        record: Asset record.

    Returns:
        JSON-safe entry; ``payload`` is omitted for empty records.
    """
    entry: dict[str, object] = {
        "path": record.path,
        "localSourcePath": record.local_source_path,
        "declaredSize": record.declared_size,
        "modTimeEpochSec": record.mod_time,
        "isDirectory": record.is_directory,
    }
    if record.payload is not None:
        entry["payload"] = record.payload
    return entry


def asset_record_from_payload(entry: Mapping[str, Any]) -> AssetRecord:
    """Deserialize one table entry into an AssetRecord.

    Args:
        entry: Entry in the compiled-table layout.

    Returns:
        Parsed record.

    Raises:
        SchemaFsTableError: If required fields are missing or mistyped.
    """
    try:
        path = str(entry["path"])
        declared_size = int(entry.get("declaredSize", 0))
        mod_time = int(entry.get("modTimeEpochSec", 0))
    except KeyError as error:
        raise SchemaFsTableError(f"Asset table entry is missing field {error}.") from error
    except (TypeError, ValueError) as error:
        raise SchemaFsTableError(
            f"Asset table entry {entry.get('path')!r} has a non-integer size or time: {error}."
        ) from error
    is_directory = entry.get("isDirectory", False)
    if not isinstance(is_directory, bool):
        raise SchemaFsTableError(
            f"Asset table entry {path!r} has a non-boolean isDirectory: {is_directory!r}."
        )
    payload = entry.get("payload")
    return AssetRecord(
        path=path,
        local_source_path=str(entry.get("localSourcePath", path.lstrip("/") or ".")),
        declared_size=declared_size,
        mod_time=mod_time,
        is_directory=is_directory,
        payload=str(payload) if payload else None,
    )


def build_asset_table(
    entries: Sequence[Mapping[str, Any]],
    directories: Mapping[str, Sequence[str]] | None = None,
) -> AssetTable:
    """Build a validated table from entry rows.

    Args:
        entries: Rows in the compiled-table layout, in registration order.
        directories: Optional explicit directory listings.

    Returns:
        Immutable asset table.

    Raises:
        SchemaFsTableError: If rows or table invariants are invalid.
    """
    records = [asset_record_from_payload(entry) for entry in entries]
    return AssetTable(records, directories)


def load_asset_table(table_path: Path) -> AssetTable:
    """Load a table file from disk.

    The file holds either a list of entries or a mapping with an
    ``assets`` list and an optional ``directories`` mapping.

    Args:
        table_path: JSON or YAML table file.

    Returns:
        Immutable asset table.

    Raises:
        SchemaFsTableError: If the file is missing, unreadable, or invalid.
        SchemaFsDependencyError: If a YAML table is given without PyYAML.
    """
    if table_path.suffix.lower() not in SUPPORTED_TABLE_EXTENSIONS:
        raise SchemaFsTableError(
            f"Unsupported asset table file {table_path}: expected one of "
            f"{SUPPORTED_TABLE_EXTENSIONS}."
        )
    if not table_path.exists():
        raise SchemaFsTableError(
            f"Asset table file does not exist at {table_path}. Provide a valid table path."
        )
    document = _read_table_document(table_path)
    entries, directories = _split_table_document(document, table_path)
    table = build_asset_table(entries, directories)
    _LOGGER.info("asset_table_loaded", table_path=str(table_path), asset_count=len(table))
    return table


def _read_table_document(table_path: Path) -> object:
    """Parse the raw table document.

    Args:
        table_path: JSON or YAML table file.

    Returns:
        Parsed document.

    Raises:
        SchemaFsTableError: If the file cannot be read or parsed.
    """
    try:
        text = table_path.read_text(encoding="utf-8")
    except OSError as error:
        raise SchemaFsTableError(
            f"Failed to read asset table at {table_path}: {error}. Check file permissions."
        ) from error
    if table_path.suffix.lower() in YAML_TABLE_EXTENSIONS:
        return _parse_yaml(text, table_path)
    try:
        return cast(object, json.loads(text))
    except json.JSONDecodeError as error:
        raise SchemaFsTableError(
            f"Failed to parse asset table at {table_path}: {error.msg}. "
            "Regenerate the table file."
        ) from error


def _parse_yaml(text: str, table_path: Path) -> object:
    try:
        import yaml  # type: ignore[import-untyped]
    except ImportError as error:  # pragma: no cover - dependency failure
        raise SchemaFsDependencyError(
            "YAML asset tables require PyYAML. Install with 'pip install pyyaml'."
        ) from error
    try:
        return cast(object, yaml.safe_load(text))
    except yaml.YAMLError as error:
        raise SchemaFsTableError(
            f"Failed to parse YAML asset table at {table_path}: {error}. Fix YAML syntax."
        ) from error


def _split_table_document(
    document: object,
    table_path: Path,
) -> tuple[list[Mapping[str, Any]], Mapping[str, Sequence[str]] | None]:
    """Separate entry rows from the optional directory listings.

    Args:
        document: Parsed table document.
        table_path: Source path, for error messages.

    Returns:
        Pair of entry rows and directory listings (None when derived).

    Raises:
        SchemaFsTableError: If the document shape is invalid.
    """
    directories: Mapping[str, Sequence[str]] | None = None
    if isinstance(document, Mapping):
        rows = document.get(TABLE_ASSETS_KEY)
        raw_directories = document.get(TABLE_DIRECTORIES_KEY)
        if raw_directories is not None:
            if not isinstance(raw_directories, Mapping):
                raise SchemaFsTableError(
                    f"Asset table at {table_path}: '{TABLE_DIRECTORIES_KEY}' must be a mapping."
                )
            directories = {
                str(directory): [str(child) for child in children]
                for directory, children in raw_directories.items()
            }
    else:
        rows = document
    if not isinstance(rows, list):
        raise SchemaFsTableError(
            f"Asset table at {table_path}: expected a list of entries "
            f"or a mapping with an '{TABLE_ASSETS_KEY}' list."
        )
    entries: list[Mapping[str, Any]] = []
    for index, row in enumerate(rows):
        if not isinstance(row, Mapping):
            raise SchemaFsTableError(
                f"Asset table at {table_path}: entry {index} is not a mapping."
            )
        entries.append(row)
    return entries, directories
