"""Shared test fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def gbk_bytes() -> bytes:
    # "一" (D2 BB) repeated, plus GBK-extension pairs whose trail byte is
    # below 0xA1 so not every pair is high-high.
    return b"\xd2\xbb" * 10 + b"\x81\x40" * 2


@pytest.fixture
def big5_bytes() -> bytes:
    # Big5 "一" (A4 40) and "我" (A7 DA)
    return b"\xa4\x40" * 10 + b"\xa7\xda" * 5


@pytest.fixture
def gb2312_bytes() -> bytes:
    return "中文编码 and some ASCII".encode("gb2312")
