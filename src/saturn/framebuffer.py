"""Bit-packed monochrome framebuffer in SSD1306 page layout."""

from __future__ import annotations

DISPLAY_WIDTH = 128
DISPLAY_HEIGHT = 64
PAGE_HEIGHT = 8


class Framebuffer:
    """One bit per pixel, grouped into 8-row pages.

    Byte ``x + (y // 8) * width`` holds column ``x`` of page ``y // 8`` and
    bit ``y % 8`` of that byte is the pixel at row ``y``.
    """

    def __init__(self, width: int = DISPLAY_WIDTH, height: int = DISPLAY_HEIGHT) -> None:
        if width < 1 or height < 1:
            raise ValueError("Framebuffer requires width and height >= 1")
        self.width = width
        self.height = height
        self.pages = (height + PAGE_HEIGHT - 1) // PAGE_HEIGHT
        self._buffer = bytearray(self.pages * width)

    def __len__(self) -> int:
        return len(self._buffer)

    def get_buffer(self) -> bytes:
        return bytes(self._buffer)

    def clear(self) -> None:
        self._buffer[:] = bytes(len(self._buffer))

    def set_pixel(self, x: int, y: int, bit: int = 1) -> None:
        if not self._in_bounds(x, y):
            return
        index = x + (y // PAGE_HEIGHT) * self.width
        mask = 1 << (y % PAGE_HEIGHT)
        if bit:
            self._buffer[index] |= mask
        else:
            self._buffer[index] &= ~mask & 0xFF

    def get_pixel(self, x: int, y: int) -> int:
        if not self._in_bounds(x, y):
            return 0
        index = x + (y // PAGE_HEIGHT) * self.width
        return (self._buffer[index] >> (y % PAGE_HEIGHT)) & 1

    def lit_count(self) -> int:
        """Number of pixels currently set."""
        return sum(bin(byte).count("1") for byte in self._buffer)

    def _in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height
