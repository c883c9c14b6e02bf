"""Reference table of very frequent GBK and Big5 double-byte characters.

Each value packs two bytes big-endian, e.g. ``0xB5C4`` is the GBK encoding
of "的".  The table only breaks ties between DBCS encodings once the
structural rules have given up, so it is kept small.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from types import MappingProxyType
from typing import TYPE_CHECKING

from tellenc._utils import FREQUENCY_LOOKUP_LIMIT

if TYPE_CHECKING:
    from tellenc.pipeline import DoubleByteCount

GBK_FREQUENT_DBYTES: tuple[int, ...] = (
    0xA3AC,  # ，
    0xA1A3,  # 。
    0xA1A1,  # ideographic space
    0xA1AD,  # …
    0xB5C4,  # 的
    0xBFC9,  # 可
    0xBAF3,  # 后
    0xD2BB,  # 一
    0xCED2,  # 我
    0xCAC7,  # 是
    0xB8F6,  # 个
    0xB2BB,  # 不
    0xC8CB,  # 人
    0xD5E2,  # 这
    0xC1CB,  # 了
    0xD6AE,  # 之
)

BIG5_FREQUENT_DBYTES: tuple[int, ...] = (
    0xA141,
    0xA143,
    0xAABA,
    0xA7DA,
    0xA54C,
    0xA66F,
    0xA4A3,
    0xA440,
    0xA446,
    0xA457,
    0xBBA1,
    0xAC4F,
    0xA662,
)


def build_frequency_table(
    entries: Iterable[tuple[str, Iterable[int]]],
) -> Mapping[int, str]:
    """Build a read-only ``dbyte -> encoding`` mapping.

    :param entries: ``(encoding, dbytes)`` groups.  When a value appears in
        more than one group the first group keeps it.
    """
    table: dict[int, str] = {}
    for encoding, dbytes in entries:
        for dbyte in dbytes:
            table.setdefault(dbyte, encoding)
    return MappingProxyType(table)


FREQUENCY_TABLE: Mapping[int, str] = build_frequency_table(
    (("gbk", GBK_FREQUENT_DBYTES), ("big5", BIG5_FREQUENT_DBYTES))
)


def check_freq_dbytes(
    ranked_dbytes: Sequence[DoubleByteCount],
    table: Mapping[int, str] = FREQUENCY_TABLE,
    limit: int = FREQUENCY_LOOKUP_LIMIT,
) -> str | None:
    """Look up the most frequent double-byte values in *table*.

    Only the first *limit* entries of *ranked_dbytes* are examined; rarer
    pairs are noise.

    :param ranked_dbytes: Double-byte counts, most frequent first.
    :returns: The encoding of the first match, or ``None``.
    """
    for entry in ranked_dbytes[:limit]:
        encoding = table.get(entry.value)
        if encoding is not None:
            return encoding
    return None
