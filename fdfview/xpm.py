"""Reader for XPM images, from files or from lists of data strings."""

from __future__ import annotations

import os
import re
from typing import Iterable, Iterator, Optional

from fdfview.colors import color_from_text
from fdfview.image import Image

TRANSPARENT = 0xFF000000

_ATOI = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def split_words(text: str) -> list[str]:
    """Split on spaces and tabs, dropping empty words."""
    return [word for word in text.replace("\t", " ").split(" ") if word]


def find(text: str, needle: str) -> int:
    """Return the position of ``needle`` in ``text``, or -1."""
    if not needle:
        raise ValueError("needle must not be empty")
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Like :func:`find`, but skip matches inside double-quoted strings."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def _blank(text: str, start: int, count: int) -> str:
    end = min(len(text), start + count)
    return text[:start] + " " * (end - start) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C comments outside strings with spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM data strings: header, colours, then pixel rows."""
    rows = iter(lines)

    def next_line() -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError("XPM data ends too early") from None

    header = split_words(next_line())
    if len(header) < 4:
        raise XpmError("XPM header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"bad XPM header: {' '.join(header)!r}")

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line()
        words = split_words(line[cpp:])
        try:
            index = words.index("c") + 1
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if index >= len(words):
            raise XpmError(f"colour line without colour value: {line!r}")
        suffix: Optional[str] = words[index + 1] if index + 1 < len(words) else None
        rgb = color_from_text(words[index], suffix)
        key = line[:cpp]
        # Short codes are a direct table (last entry wins); longer ones a list
        # searched from the front (first entry wins).
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = next_line()
        for x in range(width):
            color = palette.get(line[cpp * x:cpp * (x + 1)], 0)
            image.put_pixel(x, y, TRANSPARENT if color == -1 else color)
    return image


def read_xpm(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file into an image."""
    with open(path, encoding="latin-1", newline="") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))