"""Enumerations for tellenc."""

import enum


class Utf8ByteClass(enum.IntEnum):
    """Role a single byte value can play in a UTF-8 sequence.

    ``SINGLE`` through ``LEAD4`` also name the decoder states.  A decoder in
    state ``LEAD3`` has consumed a three-byte lead and waits for two
    continuation bytes, each of which steps the state down by one.
    ``SINGLE`` means it is at a sequence boundary.
    """

    INVALID = 0
    SINGLE = 1
    LEAD2 = 2
    LEAD3 = 3
    LEAD4 = 4
    TAIL = 5


class NulParity(enum.IntFlag):
    """Positions (odd or even buffer index) at which NUL bytes were seen."""

    NONE = 0
    ODD = 1
    EVEN = 2
