"""Binary content and NUL-placement helpers.

Four byte values essentially never appear in text: NUL, SUB (0x1A, the DOS
end-of-file marker), DEL and 0xFF.  Seeing any of them marks the buffer as
binary, unless it turns out to be UTF-16 whose NULs all sit at one parity.
"""

from __future__ import annotations

from tellenc.enums import NulParity

NON_TEXT_BYTES: frozenset[int] = frozenset({0x00, 0x1A, 0x7F, 0xFF})

# Translation deletes the non-text bytes; a length change means one was there.
_NON_TEXT_DELETE = bytes(sorted(NON_TEXT_BYTES))


def is_non_text(byte: int) -> bool:
    """Return True if *byte* never occurs in plain text."""
    return byte in NON_TEXT_BYTES


def nul_parity(index: int) -> NulParity:
    """Return the parity flag for a NUL found at buffer position *index*."""
    return NulParity.ODD if index & 1 else NulParity.EVEN


def is_binary(data: bytes) -> bool:
    """Return True if *data* contains any non-text byte."""
    return len(data.translate(None, _NON_TEXT_DELETE)) != len(data)


def classify_binary(parity: NulParity) -> str:
    """Name binary-looking data from where its NUL bytes were found.

    NULs only at odd positions is little-endian UTF-16 text of mostly Latin
    characters, NULs only at even positions is big-endian UTF-16.  Anything
    else (no NULs, or NULs at both parities) is plain binary.
    """
    if parity == NulParity.ODD:
        return "utf-16le"
    if parity == NulParity.EVEN:
        return "utf-16"
    return "binary"
