"""Driver for the 7.5 inch 800x480 black/white/red e-paper panel."""

from __future__ import annotations

from typing import Iterable, Union

from horizonkit.devio import BoardIO, EpdPins

WIDTH = 800
HEIGHT = 480

ByteData = Union[bytes, bytearray, memoryview, Iterable[int]]


def _row_bytes(pixels: int) -> int:
    return (pixels + 7) // 8


class EPD7in5BV2:
    """Command-level control of the panel over a board's SPI port and pins."""

    width = WIDTH
    height = HEIGHT

    def __init__(self, io: BoardIO, pins: EpdPins = EpdPins()) -> None:
        self.io = io
        self.pins = pins

    @property
    def plane_size(self) -> int:
        """Bytes in one full-screen bit plane."""
        return _row_bytes(self.width) * self.height

    def _send_command(self, command: int) -> None:
        self.io.write(self.pins.dc, 0)
        self.io.write(self.pins.cs, 0)
        self.io.spi_write(bytes([command]))
        self.io.write(self.pins.cs, 1)

    def _send_data(self, data: ByteData) -> None:
        payload = bytes(data)
        if not payload:
            return
        self.io.write(self.pins.dc, 1)
        self.io.write(self.pins.cs, 0)
        self.io.spi_write(payload)
        self.io.write(self.pins.cs, 1)

    def _command(self, command: int, *data: int) -> None:
        self._send_command(command)
        self._send_data(data)

    def reset(self) -> None:
        """Pulse the reset line."""
        io, rst = self.io, self.pins.rst
        io.write(rst, 1)
        io.delay_ms(200)
        io.write(rst, 0)
        io.delay_ms(5)
        io.write(rst, 1)
        io.delay_ms(200)

    def wait_until_idle(self) -> None:
        """Block until the busy line reads high, then settle briefly."""
        while not self.io.read(self.pins.busy):
            pass
        self.io.delay_ms(20)

    def _turn_on_display(self) -> None:
        self._send_command(0x12)  # display refresh
        self.io.delay_ms(10)  # at least 200 us required before polling busy
        self.wait_until_idle()

    def _power_on(self) -> None:
        self._send_command(0x04)
        self.io.delay_ms(100)
        self.wait_until_idle()

    def init(self) -> None:
        """Full initialisation for a normal refresh."""
        self.reset()
        self._command(0x01, 0x07, 0x07, 0x3F, 0x3F)  # power setting
        self._command(0x06, 0x17, 0x17, 0x28, 0x17)  # booster soft start
        self._power_on()
        self._command(0x00, 0x0F)  # panel setting
        self._command(0x61, 0x03, 0x20, 0x01, 0xE0)  # resolution 800x480
        self._command(0x15, 0x00)
        self._command(0x50, 0x11, 0x07)  # VCOM and data interval
        self._command(0x60, 0x22)  # TCON

    def init_fast(self) -> None:
        """Initialisation for the fast refresh mode."""
        self.reset()
        self._command(0x00, 0x0F)
        self._power_on()
        self._command(0x06, 0x27, 0x27, 0x18, 0x17)
        self._command(0xE0, 0x02)
        self._command(0xE5, 0x5A)
        self._command(0x50, 0x11, 0x07)

    def init_part(self) -> None:
        """Initialisation for partial refresh."""
        self.reset()
        self._command(0x00, 0x1F)
        self._power_on()
        self._command(0xE0, 0x02)
        self._command(0xE5, 0x6E)
        self._command(0x50, 0xA9, 0x07)

    def _fill_planes(self, black_fill: int, red_fill: int) -> None:
        size = self.plane_size
        self._send_command(0x10)
        self._send_data(bytes([black_fill]) * size)
        self._send_command(0x13)
        self._send_data(bytes([red_fill]) * size)

    def clear(self) -> None:
        """Blank the whole panel to white."""
        self._fill_planes(0xFF, 0x00)
        self._turn_on_display()

    def clear_red(self) -> None:
        """Fill the whole panel with red."""
        self._fill_planes(0xFF, 0xFF)
        self._turn_on_display()

    def clear_black(self) -> None:
        """Fill the whole panel with black."""
        self._fill_planes(0x00, 0x00)
        self._turn_on_display()

    def _plane(self, data: ByteData, name: str) -> bytes:
        plane = bytes(data)
        if len(plane) != self.plane_size:
            raise ValueError(
                f"{name} image has {len(plane)} bytes, expected {self.plane_size}")
        return plane

    def display(self, black: ByteData, red: ByteData) -> None:
        """Send both full-screen planes and refresh; the red plane is inverted on the wire."""
        black_plane = self._plane(black, "black")
        red_plane = self._plane(red, "red")
        self._send_command(0x10)
        self._send_data(black_plane)
        self._send_command(0x13)
        self._send_data(bytes(~b & 0xFF for b in red_plane))
        self._turn_on_display()

    def display_base_color(self, color: int) -> None:
        """Load both planes with one byte pattern without refreshing."""
        if not 0 <= color <= 0xFF:
            raise ValueError(f"color byte out of range: {color}")
        self._fill_planes(~color & 0xFF, color)

    def display_partial(self, image: ByteData, x_start: int, y_start: int,
                        x_end: int, y_end: int) -> None:
        """Refresh the window [x_start, x_end) x [y_start, y_end) from ``image``."""
        if not 0 <= x_start < x_end <= 0xFFFF:
            raise ValueError(f"invalid x range {x_start}..{x_end}")
        if not 0 <= y_start < y_end <= 0xFFFF:
            raise ValueError(f"invalid y range {y_start}..{y_end}")
        row = _row_bytes(x_end - x_start)
        size = row * (y_end - y_start)
        data = bytes(image)
        if len(data) < size:
            raise ValueError(f"image has {len(data)} bytes, window needs {size}")

        self._send_command(0x91)  # enter partial mode
        self._command(
            0x90,
            x_start // 256, x_start % 256,
            x_end // 256, (x_end % 256 - 1) & 0xFF,
            y_start // 256, y_start % 256,
            y_end // 256, (y_end % 256 - 1) & 0xFF,
            0x01,
        )
        self._send_command(0x10)
        self._send_data(b"\xff" * size)
        self._send_command(0x13)
        self._send_data(data[:size])
        self._turn_on_display()
        self._send_command(0x92)  # leave partial mode

    def sleep(self) -> None:
        """Power the panel off and enter deep sleep."""
        self._command(0x50, 0xF7)
        self._send_command(0x02)  # power off
        self.wait_until_idle()
        self._command(0x07, 0xA5)  # deep sleep