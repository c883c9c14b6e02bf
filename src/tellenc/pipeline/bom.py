"""Stage 1: BOM (Byte Order Mark) detection."""

from __future__ import annotations

# Ordered longest-first so UCS-4 is checked before UTF-16
# (the UCS-4LE BOM starts with the same bytes as the UTF-16LE BOM)
_BOMS: tuple[tuple[bytes, str], ...] = (
    (b"\x00\x00\xfe\xff", "ucs-4"),
    (b"\xff\xfe\x00\x00", "ucs-4le"),
    (b"\xef\xbb\xbf", "utf-8"),
    (b"\xfe\xff", "utf-16"),
    (b"\xff\xfe", "utf-16le"),
)

# A BOM alone says nothing about the text behind it.
_MIN_BOM_INPUT = 5


def detect_bom(data: bytes) -> str | None:
    """Check for a BOM at the start of data.

    :param data: The raw byte data to examine.
    :returns: The encoding label, or ``None`` if there is no BOM or *data*
        is four bytes or shorter.
    """
    if len(data) < _MIN_BOM_INPUT:
        return None
    for bom_bytes, encoding in _BOMS:
        if data.startswith(bom_bytes):
            return encoding
    return None
