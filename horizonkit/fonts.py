"""Fixed-width ASCII bitmap fonts stored as one contiguous glyph table."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Font:
    """Monospaced bitmap font.

    Glyphs are stored back to back starting at ``first_char``. Each glyph is
    ``height`` rows, each row ``(width + 7) // 8`` bytes packed MSB-first.
    """

    table: bytes = field(repr=False)
    width: int
    height: int
    first_char: str = " "

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("font dimensions must be positive")
        if len(self.first_char) != 1:
            raise ValueError("first_char must be a single character")
        object.__setattr__(self, "table", bytes(self.table))
        if not self.table or len(self.table) % self.glyph_size:
            raise ValueError(
                f"table of {len(self.table)} bytes is not a whole number of "
                f"{self.glyph_size}-byte glyphs")

    @property
    def bytes_per_row(self) -> int:
        return (self.width + 7) // 8

    @property
    def glyph_size(self) -> int:
        """Bytes taken by one glyph."""
        return self.bytes_per_row * self.height

    @property
    def last_char(self) -> str:
        """Highest character the table covers."""
        return chr(ord(self.first_char) + len(self) - 1)

    def __len__(self) -> int:
        return len(self.table) // self.glyph_size

    def __contains__(self, char: object) -> bool:
        return (isinstance(char, str) and len(char) == 1
                and self.first_char <= char <= self.last_char)

    def glyph(self, char: str) -> bytes:
        """Raw bitmap bytes for ``char``; KeyError if the font lacks it."""
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        if char not in self:
            raise KeyError(f"no glyph for {char!r}")
        start = (ord(char) - ord(self.first_char)) * self.glyph_size
        return self.table[start:start + self.glyph_size]

    def rows(self, char: str) -> Tuple[int, ...]:
        """Each pixel row of ``char`` as an integer, leftmost pixel in the top bit."""
        data = self.glyph(char)
        step = self.bytes_per_row
        return tuple(
            int.from_bytes(data[start:start + step], "big")
            for start in range(0, len(data), step)
        )