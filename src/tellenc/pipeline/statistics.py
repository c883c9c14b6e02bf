"""Stage 2: single-pass byte statistics.

One scan over the buffer gathers everything the decision cascade needs:
per-value byte counts, UTF-8 conformance, NUL placement, and counts of
candidate double-byte characters.

Double-byte candidates are formed greedily.  A byte >= 0x80 that is not
already the second half of a pair is held, and the next byte (whatever its
value) completes the pair.  So in ``B0 B1 B2`` only ``B0 B1`` is counted and
``B2`` waits for a partner.
"""

from __future__ import annotations

from tellenc.pipeline import AnalysisState, ByteStatistics
from tellenc.pipeline.binary import is_non_text, nul_parity
from tellenc.pipeline.utf8 import UTF8_CHAR_TABLE, advance_utf8_state

# Both bytes above this value is typical of a GB2312/GBK/Big5 character.
_HIHI_THRESHOLD = 0xA0


def scan_byte(state: AnalysisState, index: int, byte: int) -> None:
    """Fold the byte at buffer position *index* into *state*."""
    if is_non_text(byte):
        state.is_binary = True
        if byte == 0:
            state.nul_parity |= nul_parity(index)

    if state.is_utf8_conformant:
        next_state = advance_utf8_state(state.utf8_state, UTF8_CHAR_TABLE[byte])
        if next_state is None:
            state.is_utf8_conformant = False
        else:
            state.utf8_state = next_state

    state.byte_counts[byte] += 1

    last = state.last_high_byte
    if last is not None:
        dbyte = (last << 8) | byte
        state.dbyte_counts[dbyte] = state.dbyte_counts.get(dbyte, 0) + 1
        state.dbyte_count += 1
        if last > _HIHI_THRESHOLD and byte > _HIHI_THRESHOLD:
            state.dbyte_hihi_count += 1
        state.last_high_byte = None
    elif byte >= 0x80:
        state.last_high_byte = byte


def collect_statistics(data: bytes) -> ByteStatistics:
    """Scan *data* once and return its byte statistics.

    :param data: The raw byte data to examine.  May be empty.
    :returns: A frozen :class:`ByteStatistics`.
    """
    state = AnalysisState()
    for index, byte in enumerate(data):
        scan_byte(state, index, byte)
    return ByteStatistics.from_state(state, len(data))
