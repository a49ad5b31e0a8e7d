"""Immutable asset table and directory index.

This module owns the path-keyed record table and the per-directory child
listings. Both are validated once at construction and never mutated, so
reads need no locking.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

from core.constants import ROOT_PATH
from core.errors import AssetIntegrityError, AssetNotFoundError, SchemaFsTableError
from core.paths import canonical_path, is_canonical, parent_path
from core.types import AssetRecord


class AssetTable:
    """Path-keyed lookup over compiled asset records.

    The directory index is derived from each record's parent path in
    record order unless an explicit listing mapping is given, in which case
    that mapping is authoritative.
    """

    def __init__(
        self,
        records: Sequence[AssetRecord],
        directories: Mapping[str, Sequence[str]] | None = None,
    ) -> None:
        """Build and validate the table.

        Args:
            records: Records in registration order.
            directories: Optional explicit directory listings keyed by
                canonical directory path.

        Raises:
            SchemaFsTableError: If table invariants are violated.
        """
        self._records = MappingProxyType(_index_records(records))
        _validate_root(self._records)
        _validate_parents(self._records)
        if directories is None:
            listings = _derive_listings(self._records)
        else:
            listings = _explicit_listings(self._records, directories)
        self._listings = MappingProxyType(listings)

    def lookup(self, name: str) -> AssetRecord:
        """Resolve a path to its record.

        Args:
            name: Any spelling of a table path.

        Returns:
            The record stored under the canonical path.

        Raises:
            AssetNotFoundError: If the canonical path is not in the table.
        """
        path = canonical_path(name)
        record = self._records.get(path)
        if record is None:
            raise AssetNotFoundError(f"Asset not found: {path}")
        return record

    def children(self, path: str) -> tuple[AssetRecord, ...]:
        """Return the registered children of a directory.

        Args:
            path: Canonical directory path.

        Returns:
            Child records in registration order.

        Raises:
            AssetIntegrityError: If the directory has no registered listing.
        """
        listing = self._listings.get(path)
        if listing is None:
            raise AssetIntegrityError(
                f"Directory {path} has no registered listing in the asset table. "
                "Regenerate the compiled asset table."
            )
        return listing

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and canonical_path(name) in self._records

    def __iter__(self) -> Iterator[AssetRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    @property
    def paths(self) -> tuple[str, ...]:
        """All canonical paths in registration order."""
        return tuple(self._records)


def _index_records(records: Sequence[AssetRecord]) -> dict[str, AssetRecord]:
    """Key records by path, rejecting duplicates and malformed entries.

    Args:
        records: Records in registration order.

    Returns:
        Insertion-ordered mapping of path to record.

    Raises:
        SchemaFsTableError: For non-canonical or duplicate paths and
            inconsistent size/payload fields.
    """
    indexed: dict[str, AssetRecord] = {}
    for record in records:
        if not is_canonical(record.path):
            raise SchemaFsTableError(
                f"Asset path '{record.path}' is not canonical; expected "
                f"'{canonical_path(record.path)}'."
            )
        if record.path in indexed:
            raise SchemaFsTableError(f"Duplicate asset path in table: {record.path}")
        _validate_record_fields(record)
        indexed[record.path] = record
    return indexed


def _validate_record_fields(record: AssetRecord) -> None:
    if record.declared_size < 0:
        raise SchemaFsTableError(
            f"Asset {record.path} declares negative size {record.declared_size}."
        )
    if record.is_directory and (record.payload or record.declared_size):
        raise SchemaFsTableError(f"Directory {record.path} must not carry a payload.")
    if record.declared_size > 0 and not record.payload:
        raise SchemaFsTableError(
            f"Asset {record.path} declares {record.declared_size} bytes but has no payload."
        )


def _validate_root(records: Mapping[str, AssetRecord]) -> None:
    root = records.get(ROOT_PATH)
    if root is None or not root.is_directory:
        raise SchemaFsTableError("Asset table must contain the root directory '/'.")


def _validate_parents(records: Mapping[str, AssetRecord]) -> None:
    for path in records:
        if path == ROOT_PATH:
            continue
        parent = records.get(parent_path(path))
        if parent is None or not parent.is_directory:
            raise SchemaFsTableError(
                f"Asset {path} has no parent directory {parent_path(path)} in the table."
            )


def _derive_listings(
    records: Mapping[str, AssetRecord],
) -> dict[str, tuple[AssetRecord, ...]]:
    """Group records under their parent directories.

    Args:
        records: Validated records keyed by path.

    Returns:
        Listing per directory, empty for directories without children.
    """
    grouped: dict[str, list[AssetRecord]] = {
        path: [] for path, record in records.items() if record.is_directory
    }
    for path, record in records.items():
        if path != ROOT_PATH:
            grouped[parent_path(path)].append(record)
    return {path: tuple(children) for path, children in grouped.items()}


def _explicit_listings(
    records: Mapping[str, AssetRecord],
    directories: Mapping[str, Sequence[str]],
) -> dict[str, tuple[AssetRecord, ...]]:
    """Resolve an explicit listing mapping against the records.

    Args:
        records: Validated records keyed by path.
        directories: Child paths keyed by directory path.

    Returns:
        Listing per directory named in the mapping.

    Raises:
        SchemaFsTableError: If a listing names an unknown path or a path
            from another directory, or is registered under a path that is
            not a directory.
    """
    listings: dict[str, tuple[AssetRecord, ...]] = {}
    for raw_directory, child_paths in directories.items():
        directory = canonical_path(raw_directory)
        owner = records.get(directory)
        if owner is None or not owner.is_directory:
            raise SchemaFsTableError(
                f"Directory listing registered for {directory}, which is not a directory."
            )
        children: list[AssetRecord] = []
        for raw_child in child_paths:
            child = records.get(canonical_path(raw_child))
            if child is None:
                raise SchemaFsTableError(
                    f"Directory listing for {directory} names unknown asset {raw_child}."
                )
            if parent_path(child.path) != directory:
                raise SchemaFsTableError(
                    f"Directory listing for {directory} names {child.path}, "
                    f"whose parent is {parent_path(child.path)}."
                )
            children.append(child)
        listings[directory] = tuple(children)
    return listings
