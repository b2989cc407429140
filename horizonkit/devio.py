"""Board-level I/O for the e-paper panel: pin assignment and bit-banged SPI."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable


class BoardIO(ABC):
    """Digital pins, a hardware SPI port and a delay, as a board provides them."""

    @abstractmethod
    def write(self, pin: int, value: int) -> None:
        """Drive an output pin low (0) or high (1)."""

    @abstractmethod
    def read(self, pin: int) -> int:
        """Return the level of an input pin as 0 or 1."""

    @abstractmethod
    def spi_write(self, data: bytes) -> None:
        """Send bytes over the hardware SPI port."""

    @abstractmethod
    def pull(self, pin: int, up: bool) -> None:
        """Enable the pull-up (``up`` true) or pull-down resistor on a pin."""

    @abstractmethod
    def delay_ms(self, ms: int) -> None:
        """Block for ``ms`` milliseconds."""


@dataclass(frozen=True)
class EpdPins:
    """GPIO numbers and SPI clock rate used to drive the e-paper panel."""

    rst: int = 12
    dc: int = 8
    cs: int = 9
    pwr: int = 7
    busy: int = 13
    mosi: int = 11
    sclk: int = 10
    baudrate: int = 10_000_000


class SoftSpi:
    """Bit-banged SPI over the panel's MOSI and SCLK pins, most significant bit first."""

    def __init__(self, io: BoardIO, pins: EpdPins = EpdPins()) -> None:
        self.io = io
        self.pins = pins

    def send(self, value: int) -> None:
        """Clock one byte out on MOSI."""
        if not 0 <= value <= 0xFF:
            raise ValueError(f"byte out of range: {value}")
        io, pins = self.io, self.pins
        io.pull(pins.mosi, True)
        io.write(pins.cs, 0)
        for bit in range(7, -1, -1):
            io.write(pins.sclk, 0)
            io.write(pins.mosi, (value >> bit) & 1)
            io.write(pins.sclk, 1)
        io.write(pins.sclk, 0)
        io.write(pins.cs, 1)

    def send_many(self, data: Iterable[int]) -> None:
        """Clock out every byte of ``data`` in order."""
        for value in data:
            self.send(value)

    def read(self) -> int:
        """Clock one byte in from the MOSI line."""
        io, pins = self.io, self.pins
        io.pull(pins.mosi, False)
        io.write(pins.cs, 0)
        value = 0xFF
        for _ in range(8):
            io.write(pins.sclk, 0)
            value = (value << 1) & 0xFF
            if io.read(pins.mosi):
                value |= 0x01
            io.write(pins.sclk, 1)
        io.write(pins.sclk, 0)
        io.write(pins.cs, 1)
        return value