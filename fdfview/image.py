"""In-memory pixel images and conversion of RGB colours to pixel values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

LITTLE_ENDIAN = 0
BIG_ENDIAN = 1


def _mask_layout(mask: int) -> tuple[int, int]:
    """Return (shift, width) of the contiguous run of set bits in ``mask``."""
    if mask <= 0:
        raise ValueError(f"colour mask must be a positive bit mask, got {mask!r}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


@dataclass
class PixelFormat:
    """Layout of a TrueColor pixel: depth, channel masks and storage size."""

    depth: int = 24
    red_mask: int = 0xFF0000
    green_mask: int = 0x00FF00
    blue_mask: int = 0x0000FF
    bits_per_pixel: int = 32
    _layouts: tuple[tuple[int, int], ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.bits_per_pixel <= 0 or self.bits_per_pixel % 8:
            raise ValueError("bits_per_pixel must be a positive multiple of 8")
        self._layouts = tuple(
            _mask_layout(mask)
            for mask in (self.red_mask, self.green_mask, self.blue_mask)
        )

    def convert(self, color: int) -> int:
        """Turn a 0x00RRGGBB colour into a pixel value for this format."""
        if self.depth >= 24:
            return color
        channels = ((color >> 8) & 0xFF00, color & 0xFF00, (color << 8) & 0xFF00)
        pixel = 0
        for channel, (shift, bits) in zip(channels, self._layouts):
            pixel += (channel >> (16 - bits)) << shift
        return pixel

    def _to_rgb(self, pixel: int) -> tuple[int, int, int]:
        if self.depth >= 24:
            return (pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF
        rgb = []
        for shift, bits in self._layouts:
            top = (1 << bits) - 1
            rgb.append(((pixel >> shift) & top) * 255 // top)
        return rgb[0], rgb[1], rgb[2]


class Image:
    """A width x height image stored as packed pixel rows."""

    def __init__(
        self,
        width: int,
        height: int,
        pixel_format: PixelFormat | None = None,
        endian: int = LITTLE_ENDIAN,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if endian not in (LITTLE_ENDIAN, BIG_ENDIAN):
            raise ValueError(f"endian must be 0 or 1, got {endian!r}")
        self.width = width
        self.height = height
        self.pixel_format = pixel_format if pixel_format is not None else PixelFormat()
        self.bits_per_pixel = self.pixel_format.bits_per_pixel
        self.size_line = ((width * self.bits_per_pixel + 31) // 32) * 4
        self.endian = endian
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.endian == BIG_ENDIAN else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store a raw pixel value at (x, y), keeping its low-order bytes."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (8 * opp)) - 1)
        self.data[offset:offset + opp] = value.to_bytes(opp, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the raw pixel value stored at (x, y)."""
        opp = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + opp], self._byteorder)

    def rgb_rows(self) -> Iterator[list[tuple[int, int, int]]]:
        """Yield each row, top to bottom, as a list of (r, g, b) tuples."""
        for y in range(self.height):
            yield [self.pixel_format._to_rgb(self.get_pixel(x, y)) for x in range(self.width)]