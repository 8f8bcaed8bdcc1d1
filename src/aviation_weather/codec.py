"""Gzip decoding for bulk snapshot files."""

from __future__ import annotations

import gzip
import zlib

from .exceptions import DecompressionError


def decompress(data: bytes) -> bytes:
    """Return the decompressed contents of a gzip-framed payload."""
    try:
        return gzip.decompress(data)
    except (OSError, EOFError, zlib.error) as exc:
        # gzip.BadGzipFile is an OSError subclass.
        raise DecompressionError(f"invalid gzip stream: {exc}") from exc
