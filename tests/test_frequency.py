from __future__ import annotations

from collections import Counter

import pytest

from tellenc.pipeline import DoubleByteCount
from tellenc.pipeline.frequency import (
    BIG5_FREQUENT_DBYTES,
    FREQUENCY_TABLE,
    GBK_FREQUENT_DBYTES,
    build_frequency_table,
    check_freq_dbytes,
)


def test_table_sizes():
    assert len(FREQUENCY_TABLE) == 29
    assert Counter(FREQUENCY_TABLE.values()) == {"gbk": 16, "big5": 13}
    assert len(GBK_FREQUENT_DBYTES) == 16
    assert len(BIG5_FREQUENT_DBYTES) == 13


def test_table_is_read_only():
    with pytest.raises(TypeError):
        FREQUENCY_TABLE[0x1234] = "gbk"  # type: ignore[index]


def test_known_entries():
    assert FREQUENCY_TABLE[0xD2BB] == "gbk"
    assert FREQUENCY_TABLE[0xB5C4] == "gbk"
    assert FREQUENCY_TABLE[0xA440] == "big5"
    assert FREQUENCY_TABLE[0xA141] == "big5"


def _filler(n: int) -> list[DoubleByteCount]:
    return [DoubleByteCount(0xB000 + i, 100 - i) for i in range(n)]


def test_match_within_top_ten():
    ranked = [*_filler(9), DoubleByteCount(0xD2BB, 1)]
    assert check_freq_dbytes(ranked) == "gbk"


def test_match_beyond_top_ten_ignored():
    ranked = [*_filler(10), DoubleByteCount(0xD2BB, 1)]
    assert check_freq_dbytes(ranked) is None


def test_first_match_wins():
    ranked = [DoubleByteCount(0xA440, 5), DoubleByteCount(0xD2BB, 4)]
    assert check_freq_dbytes(ranked) == "big5"


def test_empty_ranking():
    assert check_freq_dbytes([]) is None


def test_custom_table_and_limit():
    ranked = [DoubleByteCount(0xB000, 2), DoubleByteCount(0xB001, 1)]
    table = {0xB001: "custom"}
    assert check_freq_dbytes(ranked, table) == "custom"
    assert check_freq_dbytes(ranked, table, limit=1) is None


def test_build_frequency_table_first_group_wins():
    table = build_frequency_table([("gbk", [0xA1A1]), ("big5", [0xA1A1, 0xA140])])
    assert dict(table) == {0xA1A1: "gbk", 0xA140: "big5"}
