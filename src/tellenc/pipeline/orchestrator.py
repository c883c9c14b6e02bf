"""Pipeline orchestrator: BOM check, statistics scan, decision cascade."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from tellenc._utils import DEFAULT_MAX_BYTES, FREQUENCY_LOOKUP_LIMIT
from tellenc.pipeline import ByteStatistics, DetectionResult, DoubleByteCount
from tellenc.pipeline.binary import classify_binary
from tellenc.pipeline.bom import detect_bom
from tellenc.pipeline.frequency import FREQUENCY_TABLE, check_freq_dbytes
from tellenc.pipeline.ranking import top_counts
from tellenc.pipeline.statistics import collect_statistics

logger = logging.getLogger(__name__)

# Below this percentage of high-high pairs the high bytes are taken to be
# accented Latin-1 letters scattered through ASCII text.
_LATIN1_HIHI_PERCENT = 5


def decide(
    stats: ByteStatistics,
    frequency_table: Mapping[int, str] = FREQUENCY_TABLE,
) -> str | None:
    """Turn the statistics of a BOM-less buffer into an encoding label.

    Rules are tried in order and the first that applies wins.

    :returns: The label, or ``None`` if no rule applies.
    """
    if not stats.is_utf8_conformant and stats.is_binary:
        return classify_binary(stats.nul_parity)
    if stats.dbyte_count == 0:
        return "ascii"
    if stats.is_utf8_conformant:
        return "utf-8"
    if stats.dbyte_hihi_count * 100 // stats.dbyte_count < _LATIN1_HIHI_PERCENT:
        return "latin1"
    if stats.dbyte_hihi_count == stats.dbyte_count:
        return "gb2312"
    top = [
        DoubleByteCount(value, count)
        for value, count in top_counts(
            stats.dbyte_counts.items(), FREQUENCY_LOOKUP_LIMIT
        )
    ]
    return check_freq_dbytes(top, frequency_table)


def run_pipeline(
    data: bytes,
    max_bytes: int = DEFAULT_MAX_BYTES,
    frequency_table: Mapping[int, str] | None = None,
) -> DetectionResult:
    """Run the detection stages on *data*.

    :param data: The raw byte data to examine.
    :param max_bytes: Only the first *max_bytes* bytes are examined.
    :param frequency_table: ``dbyte -> encoding`` mapping used to tell GBK
        from Big5; defaults to :data:`FREQUENCY_TABLE`.
    :returns: A :class:`DetectionResult`.
    """
    data = data[:max_bytes]
    if frequency_table is None:
        frequency_table = FREQUENCY_TABLE

    bom_encoding = detect_bom(data)
    if bom_encoding is not None:
        logger.debug("byte order mark found: %s", bom_encoding)
        return DetectionResult(encoding=bom_encoding)

    stats = collect_statistics(data)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "%d bytes, binary=%s, utf8_conformant=%s, nul_parity=%d",
            stats.length,
            stats.is_binary,
            stats.is_utf8_conformant,
            stats.nul_parity,
        )
        logger.debug(
            "%d double-byte pairs, %d hi-hi, %d unique",
            stats.dbyte_count,
            stats.dbyte_hihi_count,
            stats.unique_dbyte_count,
        )

    encoding = decide(stats, frequency_table)
    if encoding is None:
        logger.debug("no rule matched")
    else:
        logger.debug("detected %s", encoding)
    return DetectionResult(encoding=encoding, statistics=stats)
