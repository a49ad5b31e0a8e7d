"""Exactly-once payload materialization.

Each record gets one decode slot guarded by its own lock. The first caller
runs the decode while racing callers block on the lock; everyone then sees
the same terminal outcome. Failures are memoized and never retried.
"""

from __future__ import annotations

import threading
from typing import Callable

from core.errors import AssetDecodeError, AssetIntegrityError, AssetNotFoundError, SchemaFsError
from core.logging_config import get_logger
from core.types import AssetRecord, DecodeState
from store.asset_table import AssetTable
from store.payload_codec import decode_payload

_LOGGER = get_logger(__name__)

PayloadDecoder = Callable[[str, str], bytes]


class _DecodeSlot:
    """Per-record decode state; written only under ``lock``."""

    __slots__ = ("lock", "state", "data", "error", "attempts")

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.state: DecodeState = "unloaded"
        self.data = b""
        self.error: SchemaFsError | None = None
        self.attempts = 0


class Materializer:
    """Decode record payloads lazily, at most once per record."""

    def __init__(self, table: AssetTable, decoder: PayloadDecoder = decode_payload) -> None:
        """Create decode slots for every table record.

        Args:
            table: Immutable asset table.
            decoder: Transport + decompression codec, ``(payload, path) -> bytes``.
        """
        self._decoder = decoder
        # built once; the mapping itself is never mutated afterwards
        self._slots = {record.path: _DecodeSlot() for record in table}

    def materialize(self, record: AssetRecord) -> bytes:
        """Return the decoded content of a record.

        Empty records resolve to ``b""`` without touching the codec. A decode
        cut short by a non-``Exception`` interrupt leaves the record unloaded,
        so the next caller decodes again.

        Args:
            record: Record from the table this materializer was built for.

        Returns:
            Decoded content, shared and read-only.

        Raises:
            AssetDecodeError: If the payload is malformed; cached per record.
            AssetIntegrityError: If the decoded length differs from the
                declared size; cached per record.
        """
        slot = self._slot(record.path)
        with slot.lock:
            if slot.state == "unloaded":
                try:
                    self._decode_into(slot, record)
                finally:
                    # interrupted before an outcome was stored
                    if slot.state == "decoding":
                        slot.state = "unloaded"
            if slot.state == "failed" and slot.error is not None:
                raise slot.error
            if slot.state != "loaded":
                raise AssetDecodeError(
                    f"Asset {record.path} has no decoded content in state {slot.state}."
                )
            return slot.data

    def state(self, path: str) -> DecodeState:
        """Return the current decode state of a record path."""
        return self._slot(path).state

    def attempts(self, path: str) -> int:
        """Return how many times the codec ran for a record path."""
        return self._slot(path).attempts

    def _slot(self, path: str) -> _DecodeSlot:
        slot = self._slots.get(path)
        if slot is None:
            raise AssetNotFoundError(f"Asset not found: {path}")
        return slot

    def _decode_into(self, slot: _DecodeSlot, record: AssetRecord) -> None:
        """Run the single decode attempt and store its outcome.

        Args:
            slot: Locked slot for the record.
            record: Record to decode.
        """
        slot.state = "decoding"
        if record.is_empty:
            slot.state = "loaded"
            return
        slot.attempts += 1
        try:
            data = self._decoder(record.payload or "", record.path)
        except AssetDecodeError as error:
            self._fail(slot, record, error)
            return
        except Exception as error:
            wrapped = AssetDecodeError(
                f"Failed to decode asset {record.path}: {error}. "
                "Regenerate the compiled asset table."
            )
            wrapped.__cause__ = error
            self._fail(slot, record, wrapped)
            return
        if len(data) != record.declared_size:
            self._fail(
                slot,
                record,
                AssetIntegrityError(
                    f"Asset {record.path} decoded to {len(data)} bytes but declares "
                    f"{record.declared_size}. Regenerate the compiled asset table."
                ),
            )
            return
        slot.data = data
        slot.state = "loaded"
        _LOGGER.debug("asset_materialized", path=record.path, size=len(data))

    @staticmethod
    def _fail(slot: _DecodeSlot, record: AssetRecord, error: SchemaFsError) -> None:
        slot.error = error
        slot.state = "failed"
        _LOGGER.error("asset_decode_failed", path=record.path, error=str(error))
