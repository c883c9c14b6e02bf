"""Human-readable dump of the statistics behind a detection."""

from __future__ import annotations

from tellenc.pipeline import ByteStatistics


def _printable(value: int) -> str:
    return chr(value) if 0x20 <= value < 0x7F else "?"


def format_byte_counts(stats: ByteStatistics) -> str:
    """Format the nonzero byte counts, most frequent first."""
    cells = [
        f"{entry.value:02x} ('{_printable(entry.value)}'): {entry.count:<6d}"
        for entry in stats.ranked_bytes
        if entry.count
    ]
    return "    ".join(cells)


def format_dbyte_counts(stats: ByteStatistics) -> str:
    """Format the double-byte counts, most frequent first."""
    return "        ".join(
        f"{entry.value:04x}: {entry.count:<6d}" for entry in stats.ranked_dbytes
    )


def format_report(stats: ByteStatistics) -> str:
    """Render the full diagnostic report for *stats*.

    The label is not part of the report; the report never influences it.
    """
    lines = [
        format_byte_counts(stats),
        format_dbyte_counts(stats),
        f"{stats.length} characters",
        f"{stats.dbyte_count} double-byte characters",
        f"{stats.dbyte_hihi_count} double-byte hi-hi characters",
        f"{stats.unique_dbyte_count} unique double-byte characters",
    ]
    return "\n".join(lines)
