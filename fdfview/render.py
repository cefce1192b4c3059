"""Isometric projection of height maps and line drawing into images."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from typing import Sequence

from fdfview.image import Image

WIDTH = 1920
HEIGHT = 1080
WHITE = 0x00FFFFFF
GREEN = 0x0000FF00


def _f32(value: float) -> float:
    """Round a double to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


_ANGLE = _f32(math.pi / 6)
_COS = math.cos(_ANGLE)
_SIN = math.sin(_ANGLE)


@dataclass(frozen=True)
class Point:
    """A projected point in image coordinates."""

    x: int
    y: int
    color: int = WHITE


def _scale(index: int, size: int, extent: int) -> int:
    span = size - 1
    return int(index * (extent * 0.50 / span) + extent * 0.1 + (int(extent * 0.8) % span) // 2)


def project(x: int, y: int, z: int, x_max: int, y_max: int) -> Point:
    """Project grid cell (x, y) at height z onto the screen isometrically."""
    if x_max < 2 or y_max < 2:
        raise ValueError("a map needs at least two rows and two columns")
    sx = _scale(x, x_max, WIDTH)
    sy = _scale(y, y_max, HEIGHT)
    return Point(int((sx + sy) * _COS), int((sx - sy) * _SIN - z))


def _plot(image: Image, x: int, y: int, color: int) -> None:
    # The bounds are inclusive of the far edge: x == width lands on the
    # first pixel of the next row, and anything past the buffer is dropped.
    if x < 0 or x > image.width or y < 0 or y > image.height:
        return
    row, col = divmod(y * image.width + x, image.width)
    if row < image.height:
        image.put_pixel(col, row, color)


def draw_line(image: Image, start: Point, end: Point, color: int = WHITE) -> None:
    """Draw a line from ``start`` to ``end`` by stepping along its longer axis."""
    dx = end.x - start.x
    dy = end.y - start.y
    length = max(abs(dx), abs(dy))
    if length == 0:
        return
    step_x = _f32(dx / length)
    step_y = _f32(dy / length)
    px = float(start.x)
    py = float(start.y)
    for _ in range(length + 1):
        _plot(image, int(px), int(py), color)
        px = _f32(px + step_x)
        py = _f32(py + step_y)


def render_map(grid: Sequence[Sequence[int]], image: Image) -> Image:
    """Draw the wire frame of a height grid into ``image`` and return it."""
    y_max = len(grid)
    x_max = len(grid[0]) if grid else 0
    if y_max < 2 or x_max < 2:
        raise ValueError("a map needs at least two rows and two columns")
    if any(len(row) != x_max for row in grid):
        raise ValueError("all map rows must have the same length")

    def point(col: int, row: int) -> Point:
        return project(col, row, grid[row][col], x_max, y_max)

    for row in range(y_max):
        previous = point(0, row)
        for col in range(x_max):
            current = point(col, row)
            draw_line(image, previous, current, WHITE)
            previous = current
        _plot(image, previous.x, previous.y, GREEN)
    for col in range(x_max):
        previous = point(col, 0)
        for row in range(y_max):
            current = point(col, row)
            draw_line(image, previous, current, WHITE)
            previous = current
    return image