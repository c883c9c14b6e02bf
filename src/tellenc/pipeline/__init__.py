"""Detection pipeline stages and shared types."""

from __future__ import annotations

import dataclasses
from dataclasses import field

from tellenc.enums import NulParity, Utf8ByteClass
from tellenc.pipeline.ranking import rank_counts


@dataclasses.dataclass(frozen=True, slots=True)
class ByteCount:
    """Occurrence count of a single byte value."""

    value: int
    count: int


@dataclasses.dataclass(frozen=True, slots=True)
class DoubleByteCount:
    """Occurrence count of a candidate double-byte character.

    *value* packs the two bytes big-endian: ``(first << 8) | second``.
    """

    value: int
    count: int


@dataclasses.dataclass(slots=True)
class AnalysisState:
    """Per-call mutable state for a single statistics scan.

    Created once at the start of ``collect_statistics()`` and discarded when
    the scan ends.  Each concurrent call gets its own state, so nothing from
    one buffer can leak into the verdict for another.
    """

    is_binary: bool = False
    is_utf8_conformant: bool = True
    nul_parity: NulParity = NulParity.NONE
    utf8_state: int = Utf8ByteClass.SINGLE
    last_high_byte: int | None = None
    byte_counts: list[int] = field(default_factory=lambda: [0] * 256)
    dbyte_counts: dict[int, int] = field(default_factory=dict)
    dbyte_count: int = 0
    dbyte_hihi_count: int = 0


@dataclasses.dataclass(frozen=True, slots=True)
class ByteStatistics:
    """Everything the decision cascade knows about a buffer."""

    length: int
    byte_counts: tuple[int, ...]
    dbyte_counts: dict[int, int]
    dbyte_count: int
    dbyte_hihi_count: int
    is_binary: bool
    is_utf8_conformant: bool
    nul_parity: NulParity

    @classmethod
    def from_state(cls, state: AnalysisState, length: int) -> ByteStatistics:
        """Freeze the accumulators of a finished scan."""
        return cls(
            length=length,
            byte_counts=tuple(state.byte_counts),
            dbyte_counts=dict(state.dbyte_counts),
            dbyte_count=state.dbyte_count,
            dbyte_hihi_count=state.dbyte_hihi_count,
            is_binary=state.is_binary,
            is_utf8_conformant=state.is_utf8_conformant,
            nul_parity=state.nul_parity,
        )

    @property
    def ranked_bytes(self) -> list[ByteCount]:
        """All 256 byte values, most frequent first."""
        return [
            ByteCount(value, count)
            for value, count in rank_counts(enumerate(self.byte_counts))
        ]

    @property
    def ranked_dbytes(self) -> list[DoubleByteCount]:
        """Observed double-byte values, most frequent first."""
        return [
            DoubleByteCount(value, count)
            for value, count in rank_counts(self.dbyte_counts.items())
        ]

    @property
    def unique_dbyte_count(self) -> int:
        return len(self.dbyte_counts)


@dataclasses.dataclass(frozen=True, slots=True)
class DetectionResult:
    """A single encoding detection result.

    *encoding* is ``None`` when no rule applies.  *statistics* is ``None``
    when a byte-order mark decided the result before the buffer was scanned.
    """

    encoding: str | None
    statistics: ByteStatistics | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Convert this result to a plain dict.

        :returns: A dict with a single ``'encoding'`` key.
        """
        return {"encoding": self.encoding}
