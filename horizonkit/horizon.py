"""Artificial-horizon rendering onto a monochrome framebuffer."""

from __future__ import annotations

import math

_LABEL_CAPACITY = 31


class MonoFramebuffer:
    """One bit per pixel display memory; writes outside the frame are ignored."""

    def __init__(self, width: int = 128, height: int = 64) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer dimensions must be positive")
        self.width = width
        self.height = height
        self._pixels = bytearray(width * height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_pixel(self, x: int, y: int, on: bool = True) -> None:
        """Light or clear one pixel."""
        if self._inside(x, y):
            self._pixels[y * self.width + x] = 1 if on else 0

    def get_pixel(self, x: int, y: int) -> bool:
        """Return whether a pixel is lit."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return bool(self._pixels[y * self.width + x])

    def clear(self) -> None:
        """Turn every pixel off."""
        self._pixels[:] = bytes(len(self._pixels))


def draw_horizon(fb: MonoFramebuffer, roll: float, pitch: float,
                 pitch_scale: float = 2.0) -> None:
    """Fill sky above and ground below a horizon line tilted by roll (degrees)."""
    center_x = fb.width // 2
    center_y = fb.height // 2
    y_offset = int(pitch * pitch_scale)
    sin_r = math.sin(math.radians(roll))
    for x in range(fb.width):
        boundary = center_y + y_offset + int((x - center_x) * sin_r)
        for yy in range(fb.height):
            fb.set_pixel(x, yy, yy < boundary)


def draw_center_marker(fb: MonoFramebuffer) -> None:
    """Draw the three-dot aircraft marker at the screen centre."""
    cx = fb.width // 2
    cy = fb.height // 2
    for dx in (0, -2, 2):
        fb.set_pixel(cx + dx, cy, True)


def bias_label(bias: float) -> str:
    """Text shown for the gyro bias magnitude."""
    return f"Bias: {bias:.3f}"[:_LABEL_CAPACITY]