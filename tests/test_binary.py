from __future__ import annotations

import pytest

from tellenc.enums import NulParity
from tellenc.pipeline.binary import (
    NON_TEXT_BYTES,
    classify_binary,
    is_binary,
    is_non_text,
    nul_parity,
)


@pytest.mark.parametrize("byte", [0x00, 0x1A, 0x7F, 0xFF])
def test_non_text_bytes(byte: int):
    assert is_non_text(byte)


@pytest.mark.parametrize("byte", [0x09, 0x0A, 0x0D, 0x1B, 0x20, 0x80, 0xFE])
def test_text_bytes(byte: int):
    assert not is_non_text(byte)


def test_non_text_set_is_exactly_four_values():
    assert NON_TEXT_BYTES == {0, 26, 127, 255}


def test_nul_parity():
    assert nul_parity(0) == NulParity.EVEN
    assert nul_parity(1) == NulParity.ODD
    assert nul_parity(100) == NulParity.EVEN
    assert nul_parity(101) == NulParity.ODD


def test_is_binary():
    assert is_binary(b"abc\x00")
    assert is_binary(b"\x1a")
    assert not is_binary(b"plain text\r\n\t")
    assert not is_binary(b"")


def test_classify_binary():
    assert classify_binary(NulParity.ODD) == "utf-16le"
    assert classify_binary(NulParity.EVEN) == "utf-16"
    assert classify_binary(NulParity.ODD | NulParity.EVEN) == "binary"
    assert classify_binary(NulParity.NONE) == "binary"
