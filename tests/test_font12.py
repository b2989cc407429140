import string

import pytest

from horizonkit.font12 import font12


def test_dimensions_match_source():
    font = font12()
    assert font.width == 7
    assert font.height == 12
    assert font.glyph_size == 12


def test_covers_printable_ascii_range():
    font = font12()
    assert font.first_char == " "
    assert font.last_char == "~"
    assert len(font) == 95


def test_same_instance_returned():
    first = font12()
    second = font12()
    assert first is second
    assert second.glyph("A") == bytes(
        [0x00, 0x30, 0x10, 0x28, 0x28, 0x28, 0x7C, 0x44, 0xEE, 0x00, 0x00, 0x00])


def test_space_is_blank():
    assert font12().glyph(" ") == bytes(12)


def test_plus_glyph_bytes():
    assert font12().glyph("+") == bytes(
        [0x00, 0x00, 0x10, 0x10, 0x10, 0xFE, 0x10, 0x10, 0x10, 0x00, 0x00, 0x00])


def test_underscore_only_last_row():
    rows = font12().rows("_")
    assert rows[-1] == 0xFE
    assert all(r == 0 for r in rows[:-1])


def test_at_sign_starts_on_top_row():
    assert font12().rows("@")[0] == 0x38


@pytest.mark.parametrize("char", list(string.printable[:95]))
def test_every_printable_has_twelve_rows(char):
    font = font12()
    if char in font:
        assert len(font.rows(char)) == 12
    else:
        assert char in "\t\n\r\x0b\x0c"


def test_eighth_column_never_lit():
    font = font12()
    for code in range(ord(" "), ord("~") + 1):
        assert all(row & 0x01 == 0 for row in font.rows(chr(code)))


def test_q_extends_o():
    font = font12()
    assert font.glyph("O")[:9] == font.glyph("Q")[:9]
    assert font.glyph("O")[9] == 0
    assert font.glyph("Q")[9] != 0


def test_digit_zero_matches_letter_o():
    font = font12()
    assert font.glyph("0") == font.glyph("O")


def test_every_visible_glyph_has_ink():
    font = font12()
    blank = [
        chr(code)
        for code in range(ord("!"), ord("~") + 1)
        if not any(font.glyph(chr(code)))
    ]
    assert blank == []


def test_missing_character_raises():
    with pytest.raises(KeyError):
        font12().glyph("\x7f")


def test_non_ascii_raises():
    with pytest.raises(KeyError):
        font12().rows("你")