"""UTF-8 conformance checking via a per-byte class table.

The check is deliberately loose: it only looks at the role of each byte
(lead, continuation, ASCII), so overlong three- and four-byte forms and
encoded surrogates pass.  A sequence still open at the end of the buffer is
not held against the data, since the buffer is usually a truncated prefix.
"""

from __future__ import annotations

from tellenc.enums import Utf8ByteClass


def _build_utf8_char_table() -> tuple[Utf8ByteClass, ...]:
    table = [Utf8ByteClass.INVALID] * 256
    for byte in range(0x01, 0x80):
        table[byte] = Utf8ByteClass.SINGLE
    for byte in range(0x80, 0xC0):
        table[byte] = Utf8ByteClass.TAIL
    # 0xC0 and 0xC1 could only start overlong forms of ASCII.
    for byte in range(0xC2, 0xE0):
        table[byte] = Utf8ByteClass.LEAD2
    for byte in range(0xE0, 0xF0):
        table[byte] = Utf8ByteClass.LEAD3
    for byte in range(0xF0, 0xF5):
        table[byte] = Utf8ByteClass.LEAD4
    return tuple(table)


UTF8_CHAR_TABLE: tuple[Utf8ByteClass, ...] = _build_utf8_char_table()

_LEADS = frozenset({Utf8ByteClass.LEAD2, Utf8ByteClass.LEAD3, Utf8ByteClass.LEAD4})


def classify_byte(byte: int) -> Utf8ByteClass:
    """Return the UTF-8 role of *byte* (0-255)."""
    return UTF8_CHAR_TABLE[byte]


def advance_utf8_state(state: int, byte_class: Utf8ByteClass) -> int | None:
    """Feed one byte class to the decoder.

    :param state: Current decoder state, ``Utf8ByteClass.SINGLE`` at a
        sequence boundary or ``LEAD2``..``LEAD4`` inside a sequence.
    :param byte_class: Class of the next byte.
    :returns: The new state, or ``None`` if the byte cannot appear here.
    """
    if byte_class == Utf8ByteClass.INVALID:
        return None
    if byte_class == Utf8ByteClass.SINGLE:
        return state if state == Utf8ByteClass.SINGLE else None
    if byte_class in _LEADS:
        return int(byte_class) if state == Utf8ByteClass.SINGLE else None
    # Continuation byte
    if state > Utf8ByteClass.SINGLE:
        return state - 1
    return None


def is_utf8_conformant(data: bytes) -> bool:
    """Return True if every byte of *data* fits a UTF-8 byte sequence."""
    state: int = Utf8ByteClass.SINGLE
    for byte in data:
        next_state = advance_utf8_state(state, UTF8_CHAR_TABLE[byte])
        if next_state is None:
            return False
        state = next_state
    return True
