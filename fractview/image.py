"""Pixel buffers and colour conversion for a TrueColor display."""

from __future__ import annotations

import numpy as np

BITS_PER_PIXEL = 32
_BYTES_PER_PIXEL = BITS_PER_PIXEL // 8
_ROW_SLACK = 32
_PIXEL_MASK = 0xFFFFFFFF


class Image:
    """A 32-bit ZPixmap image held in a byte buffer.

    ``endian`` is the byte order of each pixel in ``data``: 0 for
    little-endian, 1 for big-endian. A new image is all zero (black).
    """

    def __init__(self, width: int, height: int, endian: int = 0) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if endian not in (0, 1):
            raise ValueError(f"endian must be 0 or 1, got {endian!r}")
        self.width = width
        self.height = height
        self.endian = endian
        self.bpp = BITS_PER_PIXEL
        self.size_line = width * _BYTES_PER_PIXEL
        self.data = bytearray((width + _ROW_SLACK) * height * _BYTES_PER_PIXEL)

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height}, endian={self.endian})"

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * _BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (low 32 bits) at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        self.data[offset:offset + _BYTES_PER_PIXEL] = (color & _PIXEL_MASK).to_bytes(
            _BYTES_PER_PIXEL, self._byteorder
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned 32-bit value stored at column ``x``, row ``y``."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + _BYTES_PER_PIXEL], self._byteorder)

    def fill(self, color: int) -> None:
        """Set every pixel of the image to ``color``."""
        pixel = (color & _PIXEL_MASK).to_bytes(_BYTES_PER_PIXEL, self._byteorder)
        self.data[: self.size_line * self.height] = pixel * (self.width * self.height)

    def as_array(self) -> np.ndarray:
        """Return a ``(height, width)`` uint32 view of the pixels."""
        dtype = np.dtype(">u4" if self.endian else "<u4")
        return np.frombuffer(
            self.data, dtype=dtype, count=self.width * self.height
        ).reshape(self.height, self.width)


def _scale(component: int, width: int) -> int:
    if width <= 16:
        return component >> (16 - width)
    return component << (width - 16)


def color_value(color: int, depth: int = 24, shifts: tuple[int, ...] = (16, 8, 8, 8, 0, 8)) -> int:
    """Convert 0xRRGGBB into a pixel value for a visual of ``depth`` bits.

    ``shifts`` holds (red offset, red width, green offset, green width,
    blue offset, blue width) as returned by :func:`channel_shifts`.
    Depths of 24 and more take the colour unchanged.
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError("shifts must hold six values")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        (_scale(red, shifts[1]) << shifts[0])
        + (_scale(green, shifts[3]) << shifts[2])
        + (_scale(blue, shifts[5]) << shifts[4])
    )


def _offset_and_width(mask: int) -> tuple[int, int]:
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive bit mask, got {mask!r}")
    offset = (mask & -mask).bit_length() - 1
    mask >>= offset
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return offset, width


def channel_shifts(red_mask: int, green_mask: int, blue_mask: int) -> tuple[int, ...]:
    """Return (offset, width) of each channel mask, flattened to six values."""
    return tuple(
        value
        for mask in (red_mask, green_mask, blue_mask)
        for value in _offset_and_width(mask)
    )