"""Command line entry point: read a map, print it and show its wire frame."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from fdfview.fdfmap import MapError, has_fdf_extension, parse_map
from fdfview.image import LITTLE_ENDIAN, Image
from fdfview.render import HEIGHT, WIDTH, render_map

WINDOW_TITLE = "title"


def format_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid as text: each value followed by a space, one row per line."""
    return "".join("".join(f"{value} " for value in row) + "\n" for row in grid)


def _rgb_bytes(image: Image) -> bytes:
    if (
        image.bits_per_pixel == 32
        and image.endian == LITTLE_ENDIAN
        and image.size_line == image.width * 4
    ):
        rgb = bytearray(image.width * image.height * 3)
        rgb[0::3] = image.data[2::4]
        rgb[1::3] = image.data[1::4]
        rgb[2::3] = image.data[0::4]
        return bytes(rgb)
    return bytes(
        channel for row in image.rgb_rows() for pixel in row for channel in pixel
    )


def show(image: Image, title: str) -> None:
    """Open a window showing ``image`` and wait until it is closed."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.display.init()
    try:
        size = (image.width, image.height)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(title)
        surface = pygame.image.frombuffer(_rgb_bytes(image), size, "RGB")
        screen.blit(surface, (0, 0))
        pygame.display.flip()
        while True:
            if any(event.type == pygame.QUIT for event in pygame.event.get()):
                return
            pygame.time.wait(20)
    finally:
        pygame.display.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the viewer on one ``.fdf`` file; return 0 on success, -1 on error."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1 or not has_fdf_extension(args[0]):
        print("usage: fdf <map.fdf>", file=sys.stderr)
        return -1
    try:
        grid = parse_map(args[0])
    except MapError as exc:
        print(f"fdf: {exc}", file=sys.stderr)
        return -1
    sys.stdout.write(format_grid(grid))
    sys.stdout.flush()
    image = Image(WIDTH, HEIGHT)
    try:
        render_map(grid, image)
    except ValueError as exc:
        print(f"fdf: {exc}", file=sys.stderr)
        return -1
    show(image, WINDOW_TITLE)
    return 0