"""Internal shared utilities for tellenc."""

from __future__ import annotations

#: Default maximum number of bytes to examine during detection.
DEFAULT_MAX_BYTES: int = 100_000

#: Number of top-ranked double-byte pairs consulted in the frequency table.
FREQUENCY_LOOKUP_LIMIT: int = 10

#: Label printed by the command-line tool when no rule applies.
UNKNOWN: str = "unknown"


def _validate_max_bytes(max_bytes: int) -> None:
    """Raise ValueError if *max_bytes* is not a positive integer."""
    if isinstance(max_bytes, bool) or not isinstance(max_bytes, int) or max_bytes < 1:
        msg = "max_bytes must be a positive integer"
        raise ValueError(msg)


def _as_bytes(byte_str: bytes | bytearray | memoryview) -> bytes:
    """Return *byte_str* as ``bytes``, rejecting text and other types."""
    if isinstance(byte_str, bytes):
        return byte_str
    if isinstance(byte_str, (bytearray, memoryview)):
        return bytes(byte_str)
    msg = f"Expected a bytes-like object, got {type(byte_str).__name__}"
    raise TypeError(msg)
