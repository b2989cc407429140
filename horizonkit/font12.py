"""The 7x12 Courier-style ASCII font covering ' ' through '~'."""

from __future__ import annotations

from functools import lru_cache

from horizonkit.fonts import Font

_WIDTH = 7
_HEIGHT = 12

# One entry per glyph, twelve rows each, starting at ' ' and ending at '~'.
_GLYPH_ROWS = (
    "00 00 00 00 00 00 00 00 00 00 00 00",  # ' '
    "00 10 10 10 10 10 00 00 10 00 00 00",  # '!'
    "00 6C 48 48 00 00 00 00 00 00 00 00",  # '"'
    "00 14 14 28 7C 28 7C 28 50 50 00 00",  # '#'
    "00 10 38 40 40 38 48 70 10 10 00 00",  # '$'
    "00 20 50 20 0C 70 08 14 08 00 00 00",  # '%'
    "00 00 00 18 20 20 54 48 34 00 00 00",  # '&'
    "00 10 10 10 10 00 00 00 00 00 00 00",  # "'"
    "00 08 08 10 10 10 10 10 10 08 08 00",  # '('
    "00 20 20 10 10 10 10 10 10 20 20 00",  # ')'
    "00 10 7C 10 28 28 00 00 00 00 00 00",  # '*'
    "00 00 10 10 10 FE 10 10 10 00 00 00",  # '+'
    "00 00 00 00 00 00 00 18 10 30 20 00",  # ','
    "00 00 00 00 00 7C 00 00 00 00 00 00",  # '-'
    "00 00 00 00 00 00 00 30 30 00 00 00",  # '.'
    "00 04 04 08 08 10 10 20 20 40 00 00",  # '/'
    "00 38 44 44 44 44 44 44 38 00 00 00",  # '0'
    "00 30 10 10 10 10 10 10 7C 00 00 00",  # '1'
    "00 38 44 04 08 10 20 44 7C 00 00 00",  # '2'
    "00 38 44 04 18 04 04 44 38 00 00 00",  # '3'
    "00 0C 14 14 24 44 7E 04 0E 00 00 00",  # '4'
    "00 3C 20 20 38 04 04 44 38 00 00 00",  # '5'
    "00 1C 20 40 78 44 44 44 38 00 00 00",  # '6'
    "00 7C 44 04 08 08 08 10 10 00 00 00",  # '7'
    "00 38 44 44 38 44 44 44 38 00 00 00",  # '8'
    "00 38 44 44 44 3C 04 08 70 00 00 00",  # '9'
    "00 00 00 30 30 00 00 30 30 00 00 00",  # ':'
    "00 00 00 18 18 00 00 18 30 20 00 00",  # ';'
    "00 00 0C 10 60 80 60 10 0C 00 00 00",  # '<'
    "00 00 00 00 7C 00 7C 00 00 00 00 00",  # '='
    "00 00 C0 20 18 04 18 20 C0 00 00 00",  # '>'
    "00 00 18 24 04 08 10 00 30 00 00 00",  # '?'
    "38 44 44 4C 54 54 4C 40 44 38 00 00",  # '@'
    "00 30 10 28 28 28 7C 44 EE 00 00 00",  # 'A'
    "00 F8 44 44 78 44 44 44 F8 00 00 00",  # 'B'
    "00 3C 44 40 40 40 40 44 38 00 00 00",  # 'C'
    "00 F0 48 44 44 44 44 48 F0 00 00 00",  # 'D'
    "00 FC 44 50 70 50 40 44 FC 00 00 00",  # 'E'
    "00 7E 22 28 38 28 20 20 70 00 00 00",  # 'F'
    "00 3C 44 40 40 4E 44 44 38 00 00 00",  # 'G'
    "00 EE 44 44 7C 44 44 44 EE 00 00 00",  # 'H'
    "00 7C 10 10 10 10 10 10 7C 00 00 00",  # 'I'
    "00 3C 08 08 08 48 48 48 30 00 00 00",  # 'J'
    "00 EE 44 48 50 70 48 44 E6 00 00 00",  # 'K'
    "00 70 20 20 20 20 24 24 7C 00 00 00",  # 'L'
    "00 EE 6C 6C 54 54 44 44 EE 00 00 00",  # 'M'
    "00 EE 64 64 54 54 54 4C EC 00 00 00",  # 'N'
    "00 38 44 44 44 44 44 44 38 00 00 00",  # 'O'
    "00 78 24 24 24 38 20 20 70 00 00 00",  # 'P'
    "00 38 44 44 44 44 44 44 38 1C 00 00",  # 'Q'
    "00 F8 44 44 44 78 48 44 E2 00 00 00",  # 'R'
    "00 34 4C 40 38 04 04 64 58 00 00 00",  # 'S'
    "00 FE 92 10 10 10 10 10 38 00 00 00",  # 'T'
    "00 EE 44 44 44 44 44 44 38 00 00 00",  # 'U'
    "00 EE 44 44 28 28 28 10 10 00 00 00",  # 'V'
    "00 EE 44 44 54 54 54 54 28 00 00 00",  # 'W'
    "00 C6 44 28 10 10 28 44 C6 00 00 00",  # 'X'
    "00 EE 44 28 28 10 10 10 38 00 00 00",  # 'Y'
    "00 7C 44 08 10 10 20 44 7C 00 00 00",  # 'Z'
    "00 38 20 20 20 20 20 20 20 20 38 00",  # '['
    "00 40 20 20 20 10 10 08 08 08 00 00",  # '\'
    "00 38 08 08 08 08 08 08 08 08 38 00",  # ']'
    "00 10 10 28 44 00 00 00 00 00 00 00",  # '^'
    "00 00 00 00 00 00 00 00 00 00 00 FE",  # '_'
    "00 10 08 00 00 00 00 00 00 00 00 00",  # '`'
    "00 00 00 38 44 3C 44 44 3E 00 00 00",  # 'a'
    "00 C0 40 58 64 44 44 44 F8 00 00 00",  # 'b'
    "00 00 00 3C 44 40 40 44 38 00 00 00",  # 'c'
    "00 0C 04 34 4C 44 44 44 3E 00 00 00",  # 'd'
    "00 00 00 38 44 7C 40 40 3C 00 00 00",  # 'e'
    "00 1C 20 7C 20 20 20 20 7C 00 00 00",  # 'f'
    "00 00 00 36 4C 44 44 44 3C 04 38 00",  # 'g'
    "00 C0 40 58 64 44 44 44 EE 00 00 00",  # 'h'
    "00 10 00 70 10 10 10 10 7C 00 00 00",  # 'i'
    "00 10 00 78 08 08 08 08 08 08 70 00",  # 'j'
    "00 C0 40 5C 48 70 50 48 DC 00 00 00",  # 'k'
    "00 30 10 10 10 10 10 10 7C 00 00 00",  # 'l'
    "00 00 00 E8 54 54 54 54 FE 00 00 00",  # 'm'
    "00 00 00 D8 64 44 44 44 EE 00 00 00",  # 'n'
    "00 00 00 38 44 44 44 44 38 00 00 00",  # 'o'
    "00 00 00 D8 64 44 44 44 78 40 E0 00",  # 'p'
    "00 00 00 36 4C 44 44 44 3C 04 0E 00",  # 'q'
    "00 00 00 6C 30 20 20 20 7C 00 00 00",  # 'r'
    "00 00 00 3C 44 38 04 44 78 00 00 00",  # 's'
    "00 00 20 7C 20 20 20 22 1C 00 00 00",  # 't'
    "00 00 00 CC 44 44 44 4C 36 00 00 00",  # 'u'
    "00 00 00 EE 44 44 28 28 10 00 00 00",  # 'v'
    "00 00 00 EE 44 54 54 54 28 00 00 00",  # 'w'
    "00 00 00 CC 48 30 30 48 CC 00 00 00",  # 'x'
    "00 00 00 EE 44 24 28 18 10 10 78 00",  # 'y'
    "00 00 00 7C 48 10 20 44 7C 00 00 00",  # 'z'
    "00 08 10 10 10 10 20 10 10 10 08 00",  # '{'
    "00 10 10 10 10 10 10 10 10 10 00 00",  # '|'
    "00 20 10 10 10 10 08 10 10 10 20 00",  # '}'
    "00 00 00 00 00 24 58 00 00 00 00 00",  # '~'
)


@lru_cache(maxsize=None)
def font12() -> Font:
    """Return the shared 7x12 ASCII font."""
    table = b"".join(bytes.fromhex(rows) for rows in _GLYPH_ROWS)
    return Font(table=table, width=_WIDTH, height=_HEIGHT, first_char=" ")