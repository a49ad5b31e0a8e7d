"""Readable, statable, seekable file handles.

Embedded handles read a materialized buffer; local handles read the host
file. Both answer ``stat`` and ``readdir`` with the same semantics.
"""

from __future__ import annotations

import io
import os
import stat
from pathlib import Path
from types import TracebackType
from typing import BinaryIO, Sequence

from core.constants import DEFAULT_READDIR_COUNT
from core.errors import EndOfListing, InvalidAssetOperationError
from core.types import AssetRecord, AssetStat, stat_for_record
from store.asset_table import AssetTable


def truncate_listing(entries: Sequence[AssetStat], count: int, name: str) -> list[AssetStat]:
    """Apply ``readdir(count)`` semantics to a static listing.

    Args:
        entries: Full ordered listing.
        count: Requested entry count; ``<= 0`` means all.
        name: Directory name, for the end-of-listing message.

    Returns:
        The first ``count`` entries, or all entries when ``count`` is
        non-positive or larger than the listing. The same prefix comes back
        on every call; no cursor is kept.

    Raises:
        EndOfListing: If the listing is empty and ``count > 0``.
    """
    if not entries and count > 0:
        raise EndOfListing(f"No entries in directory {name}")
    limit = len(entries) if count <= 0 or count > len(entries) else count
    return list(entries[:limit])


class VirtualFile:
    """Read-only handle over a byte stream with file information."""

    def __init__(self, stream: BinaryIO, info: AssetStat) -> None:
        self._stream = stream
        self._info = info

    @property
    def name(self) -> str:
        return self._info.name

    @property
    def closed(self) -> bool:
        return self._stream.closed

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes; all remaining bytes when negative."""
        return self._stream.read(size)

    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        return self._stream.seek(offset, whence)

    def tell(self) -> int:
        return self._stream.tell()

    def readable(self) -> bool:
        return True

    def seekable(self) -> bool:
        return True

    def close(self) -> None:
        """Release the stream. Repeated calls are no-ops."""
        self._stream.close()

    def stat(self) -> AssetStat:
        return self._info

    def readdir(self, count: int = DEFAULT_READDIR_COUNT) -> list[AssetStat]:
        """List directory entries.

        Args:
            count: Maximum entries; ``<= 0`` returns the whole listing.

        Returns:
            Ordered entry stats.

        Raises:
            InvalidAssetOperationError: If this handle is not a directory.
            EndOfListing: If the directory is empty and ``count > 0``.
        """
        if not self._info.is_directory:
            raise InvalidAssetOperationError(f"readdir: '{self._info.name}' is not a directory")
        return truncate_listing(self._list_entries(), count, self._info.name)

    def _list_entries(self) -> Sequence[AssetStat]:
        raise NotImplementedError

    def __enter__(self) -> "VirtualFile":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()


class EmbeddedFile(VirtualFile):
    """Handle over a record from the compiled table."""

    def __init__(self, record: AssetRecord, content: bytes, table: AssetTable) -> None:
        """Wrap materialized content.

        Args:
            record: Opened record.
            content: Materialized bytes; empty for directories.
            table: Table supplying directory listings.
        """
        super().__init__(io.BytesIO(content), stat_for_record(record))
        self._record = record
        self._table = table

    def _list_entries(self) -> Sequence[AssetStat]:
        return [stat_for_record(child) for child in self._table.children(self._record.path)]


class LocalFile(VirtualFile):
    """Handle over a loose file or directory on the host filesystem."""

    def __init__(self, host_path: Path, name: str) -> None:
        """Open a host path for reading.

        Args:
            host_path: Existing file or directory on disk.
            name: Base name reported by ``stat``.

        Raises:
            OSError: If the host path cannot be opened.
        """
        info = _host_stat(host_path, name)
        stream: BinaryIO = io.BytesIO() if info.is_directory else open(host_path, "rb")
        super().__init__(stream, info)
        self._host_path = host_path

    @property
    def host_path(self) -> Path:
        return self._host_path

    def _list_entries(self) -> Sequence[AssetStat]:
        with os.scandir(self._host_path) as entries:
            names = sorted(entry.name for entry in entries)
        return [_host_stat(self._host_path / entry_name, entry_name) for entry_name in names]


def _host_stat(host_path: Path, name: str) -> AssetStat:
    result = host_path.stat()
    return AssetStat(
        name=name,
        size=result.st_size,
        mod_time=int(result.st_mtime),
        is_directory=stat.S_ISDIR(result.st_mode),
    )
