"""Guess the encoding of text from its byte statistics.

Supports ASCII, Latin-1, UTF-8, GB2312, GBK, Big5, UTF-16 without a BOM, and
any Unicode encoding announced by a BOM.
"""

from __future__ import annotations

from collections.abc import Mapping

from tellenc._utils import DEFAULT_MAX_BYTES, UNKNOWN, _as_bytes, _validate_max_bytes
from tellenc.detector import EncodingDetector
from tellenc.enums import NulParity, Utf8ByteClass
from tellenc.pipeline import DetectionResult
from tellenc.pipeline.orchestrator import run_pipeline

__version__ = "1.2.0"
__all__ = [
    "UNKNOWN",
    "DetectionResult",
    "EncodingDetector",
    "NulParity",
    "Utf8ByteClass",
    "analyze",
    "detect",
    "tellenc",
]


def analyze(
    byte_str: bytes | bytearray,
    max_bytes: int = DEFAULT_MAX_BYTES,
    frequency_table: Mapping[int, str] | None = None,
) -> DetectionResult:
    """Detect the encoding of *byte_str* and keep the statistics behind it.

    :param byte_str: The bytes to examine, usually the start of a file.
    :param max_bytes: Only the first *max_bytes* bytes are examined.
    :param frequency_table: Optional ``dbyte -> encoding`` mapping replacing
        the built-in GBK/Big5 reference table.
    :raises ValueError: If *max_bytes* is not a positive integer.
    :raises TypeError: If *byte_str* is not bytes-like.
    """
    _validate_max_bytes(max_bytes)
    data = _as_bytes(byte_str)
    return run_pipeline(data, max_bytes=max_bytes, frequency_table=frequency_table)


def tellenc(
    byte_str: bytes | bytearray,
    max_bytes: int = DEFAULT_MAX_BYTES,
    frequency_table: Mapping[int, str] | None = None,
) -> str | None:
    """Return the encoding label for *byte_str*, or ``None`` if undecided."""
    return analyze(byte_str, max_bytes, frequency_table).encoding


def detect(
    byte_str: bytes | bytearray,
    max_bytes: int = DEFAULT_MAX_BYTES,
    frequency_table: Mapping[int, str] | None = None,
) -> dict[str, str | None]:
    """Detect the encoding of the given byte string.

    :returns: ``{"encoding": label}``; the label is ``None`` if undecided.
    """
    return analyze(byte_str, max_bytes, frequency_table).to_dict()
