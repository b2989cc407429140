import pytest

from horizonkit.fonts import Font

SPACE_7x12 = bytes(12)
BANG_7x12 = bytes([0x00, 0x10, 0x10, 0x10, 0x10, 0x10,
                   0x00, 0x00, 0x10, 0x00, 0x00, 0x00])
QUOTE_7x12 = bytes([0x00, 0x6C, 0x48, 0x48] + [0x00] * 8)

BANG_11x16 = bytes([0x00, 0x00] + [0x0C, 0x00] * 8
                   + [0x00, 0x00, 0x0C, 0x00] + [0x00, 0x00] * 5)


@pytest.fixture
def narrow():
    return Font(SPACE_7x12 + BANG_7x12 + QUOTE_7x12, width=7, height=12)


@pytest.fixture
def wide():
    return Font(bytes(32) + BANG_11x16, width=11, height=16)


def test_glyph_returns_table_slice(narrow):
    assert narrow.glyph("!") == BANG_7x12
    assert narrow.glyph('"') == QUOTE_7x12
    assert narrow.glyph(" ") == SPACE_7x12


def test_rows_single_byte_width(narrow):
    assert narrow.rows("!") == tuple(BANG_7x12)
    assert len(narrow.rows("!")) == narrow.height


def test_rows_two_byte_width_round_trip(wide):
    rows = wide.rows("!")
    assert len(rows) == 16
    rebuilt = b"".join(r.to_bytes(2, "big") for r in rows)
    assert rebuilt == BANG_11x16
    assert wide.glyph("!") == BANG_11x16


def test_len_and_coverage(narrow):
    assert len(narrow) == 3
    assert narrow.last_char == '"'
    assert "!" in narrow
    assert "#" not in narrow
    assert "ab" not in narrow


def test_missing_glyph_raises_key_error(narrow):
    with pytest.raises(KeyError):
        narrow.glyph("#")
    with pytest.raises(KeyError):
        narrow.rows("\x1f")


def test_multi_character_rejected(narrow):
    with pytest.raises(ValueError):
        narrow.glyph("!!")
    with pytest.raises(ValueError):
        narrow.glyph("")


def test_table_length_must_be_whole_glyphs():
    with pytest.raises(ValueError):
        Font(bytes(13), width=7, height=12)
    with pytest.raises(ValueError):
        Font(b"", width=7, height=12)


def test_bad_dimensions_rejected():
    with pytest.raises(ValueError):
        Font(bytes(12), width=0, height=12)


def test_glyph_size_matches_row_packing(narrow, wide):
    assert narrow.glyph_size == len(BANG_7x12)
    assert wide.glyph_size == len(BANG_11x16)


def test_custom_first_char():
    font = Font(BANG_7x12 + QUOTE_7x12, width=7, height=12, first_char="!")
    assert font.glyph("!") == BANG_7x12
    assert font.glyph('"') == QUOTE_7x12
    with pytest.raises(KeyError):
        font.glyph(" ")