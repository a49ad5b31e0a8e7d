"""Payload transport codec.

Compiled payloads are gzip streams wrapped in base64 text so they can be
stored as plain string literals. This module owns both directions.
"""

from __future__ import annotations

import base64
import binascii
import gzip
import zlib

from core.constants import GZIP_FIXED_MTIME
from core.errors import AssetDecodeError


def encode_payload(content: bytes) -> str:
    """Compress and transport-encode asset content.

    Args:
        content: Raw asset bytes.

    Returns:
        Base64 text of a gzip stream with a fixed header timestamp, so
        identical content always encodes identically.
    """
    compressed = gzip.compress(content, mtime=GZIP_FIXED_MTIME)
    return base64.b64encode(compressed).decode("ascii")


def decode_payload(payload: str, path: str = "") -> bytes:
    """Decode transport text and decompress the gzip stream.

    Whitespace inside the payload is ignored, so wrapped literals decode
    the same as single-line ones.

    Args:
        payload: Base64 text of gzip-compressed bytes.
        path: Asset path, used only for error messages.

    Returns:
        Decompressed content.

    Raises:
        AssetDecodeError: If the base64 text or the gzip stream is malformed.
    """
    compact = "".join(payload.split())
    try:
        compressed = base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as error:
        raise AssetDecodeError(
            f"Failed to decode transport encoding for asset {path or '<unnamed>'}: {error}. "
            "Regenerate the compiled asset table."
        ) from error
    try:
        return gzip.decompress(compressed)
    except (OSError, EOFError, zlib.error) as error:
        raise AssetDecodeError(
            f"Failed to decompress payload for asset {path or '<unnamed>'}: {error}. "
            "Regenerate the compiled asset table."
        ) from error
