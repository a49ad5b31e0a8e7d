"""schemafs exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each failure class of the virtual filesystem raises a specific error type.
"""

from __future__ import annotations


class SchemaFsError(Exception):
    """Base exception for all schemafs failures."""


class SchemaFsConfigError(SchemaFsError):
    """Raised for invalid runtime configuration."""


class SchemaFsDependencyError(SchemaFsError):
    """Raised when an optional runtime dependency is missing."""


class SchemaFsTableError(SchemaFsError):
    """Raised when an asset table violates its structural invariants."""


class AssetNotFoundError(SchemaFsError, FileNotFoundError):
    """Raised when a path is absent from the table or the host filesystem."""


class AssetDecodeError(SchemaFsError):
    """Raised when a payload fails transport decoding or decompression."""


class AssetIntegrityError(SchemaFsError):
    """Raised for defects in the compiled table itself."""


class InvalidAssetOperationError(SchemaFsError):
    """Raised when an operation does not apply to the opened node."""


class EndOfListing(EOFError):
    """Signals that a directory has no entries to return.

    This is not a failure: it distinguishes an empty directory from an
    empty result caused by an error, like ``io.EOF`` for directory reads.
    """
