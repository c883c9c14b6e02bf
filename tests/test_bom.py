from tellenc.pipeline.bom import detect_bom


def test_utf8_bom():
    assert detect_bom(b"\xef\xbb\xbfHello") == "utf-8"


def test_utf16_le_bom():
    assert detect_bom(b"\xff\xfeH\x00e\x00l\x00l\x00o\x00") == "utf-16le"


def test_utf16_be_bom():
    assert detect_bom(b"\xfe\xff\x00H\x00e\x00l\x00l\x00o") == "utf-16"


def test_ucs4_le_bom():
    assert detect_bom(b"\xff\xfe\x00\x00" + b"\x48\x00\x00\x00") == "ucs-4le"


def test_ucs4_be_bom():
    assert detect_bom(b"\x00\x00\xfe\xff" + b"\x00\x00\x00\x48") == "ucs-4"


def test_ucs4_le_checked_before_utf16_le():
    # The UCS-4LE BOM starts with the UTF-16LE BOM
    assert detect_bom(b"\xff\xfe\x00\x00\x41") == "ucs-4le"


def test_no_bom():
    assert detect_bom(b"Hello, world!") is None


def test_empty_input():
    assert detect_bom(b"") is None


def test_four_bytes_or_fewer_never_match():
    assert detect_bom(b"\xef\xbb\xbfA") is None
    assert detect_bom(b"\xff\xfe\x00\x00") is None
    assert detect_bom(b"\xfe\xff") is None


def test_five_bytes_match():
    assert detect_bom(b"\xef\xbb\xbfAB") == "utf-8"
