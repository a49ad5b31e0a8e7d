"""Shared typed models.

This module defines the immutable records and stat results passed
between the store and vfs layers, keeping interfaces explicit and stable.
"""

from __future__ import annotations

import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Literal

from core.paths import base_name

DecodeState = Literal["unloaded", "decoding", "loaded", "failed"]
DECODE_STATES: tuple[DecodeState, ...] = ("unloaded", "decoding", "loaded", "failed")


@dataclass(frozen=True)
class AssetRecord:
    """One compiled table entry for a file or directory node.

    Attributes:
        path: Canonical slash-rooted lookup key.
        local_source_path: Host path used only in local mode.
        declared_size: Expected decompressed length; 0 for directories
            and empty files.
        mod_time: Modification time in seconds since the epoch.
        is_directory: Whether the node is a directory.
        payload: Base64 text of gzip-compressed content, or None when
            ``declared_size`` is 0.
    """

    path: str
    local_source_path: str
    declared_size: int
    mod_time: int
    is_directory: bool = False
    payload: str | None = None

    @property
    def is_empty(self) -> bool:
        """Whether materializing this record yields no bytes."""
        return self.declared_size == 0


@dataclass(frozen=True)
class AssetStat:
    """File information returned by ``stat`` and ``readdir``.

    Attributes:
        name: Base name of the node; ``/`` for the root.
        size: Declared size for embedded nodes, host size in local mode.
        mod_time: Modification time in seconds since the epoch.
        is_directory: Whether the node is a directory.
    """

    name: str
    size: int
    mod_time: int
    is_directory: bool

    @property
    def mode(self) -> int:
        """File mode bits; only the type bit is set for embedded nodes."""
        return stat.S_IFDIR if self.is_directory else stat.S_IFREG

    @property
    def modified_at(self) -> datetime:
        """Modification time as an aware UTC datetime."""
        return datetime.fromtimestamp(self.mod_time, tz=timezone.utc)


def stat_for_record(record: AssetRecord) -> AssetStat:
    """Build the stat result for an embedded record.

    Args:
        record: Table record.

    Returns:
        Stat whose size is the declared size, not the decoded length.
    """
    return AssetStat(
        name=base_name(record.path),
        size=record.declared_size,
        mod_time=record.mod_time,
        is_directory=record.is_directory,
    )
