"""Reading and validating ``.fdf`` height maps."""

from __future__ import annotations

import os
from typing import Iterable

EXTENSION = ".fdf"
INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class MapError(ValueError):
    """Raised when a map file cannot be read or holds invalid data."""


def _is_space(ch: str) -> bool:
    return ch == " " or "\t" <= ch <= "\r"


def _is_digit(ch: str) -> bool:
    return len(ch) == 1 and "0" <= ch <= "9"


def parse_int(text: str) -> int:
    """Read a leading integer, skipping whitespace and one optional sign.

    Trailing characters are ignored and text without digits gives 0. A value
    above the 32-bit maximum gives -1; one below the minimum gives 0.
    """
    pos = 0
    length = len(text)
    while pos < length and _is_space(text[pos]):
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and _is_digit(text[pos]):
        value = value * 10 + ord(text[pos]) - ord("0")
        if sign == 1 and value > INT_MAX:
            return -1
        if sign == -1 and -value < INT_MIN:
            return 0
        pos += 1
    return sign * value


def split_fields(line: str) -> list[str]:
    """Split a line on spaces, dropping empty fields."""
    return [field for field in line.split(" ") if field]


def _is_valid_token(token: str) -> bool:
    for pos, ch in enumerate(token):
        if ch in "+-":
            following = token[pos + 1] if pos + 1 < len(token) else ""
            if not _is_digit(following):
                return False
            if pos > 0 and not _is_space(token[pos - 1]):
                return False
        elif not (_is_digit(ch) or _is_space(ch)):
            return False
    return True


def is_valid_row(tokens: Iterable[str]) -> bool:
    """Tell whether every token holds only digits, whitespace and leading signs."""
    return all(_is_valid_token(token) for token in tokens)


def has_fdf_extension(path: str | os.PathLike[str]) -> bool:
    """Tell whether ``path`` ends in ``.fdf`` after at least one character."""
    name = os.fspath(path)
    return len(name) > len(EXTENSION) and name.endswith(EXTENSION)


def _field_value(token: str, line_number: int) -> int:
    value = parse_int(token)
    if (value == -1 and not token.startswith("-")) or (
        value == 0 and not token.startswith("0")
    ):
        raise MapError(f"line {line_number}: invalid value {token!r}")
    return value


def parse_map_lines(lines: Iterable[str]) -> list[list[int]]:
    """Turn map lines into a grid of heights, one list per row.

    Every row must have as many values as the first one.
    """
    grid: list[list[int]] = []
    width: int | None = None
    for number, line in enumerate(lines, 1):
        if line.endswith("\n"):
            line = line[:-1] + " "
        tokens = split_fields(line)
        if width is not None and len(tokens) != width:
            raise MapError(
                f"line {number}: expected {width} values, found {len(tokens)}"
            )
        width = len(tokens)
        if not is_valid_row(tokens):
            raise MapError(f"line {number}: invalid characters")
        grid.append([_field_value(token, number) for token in tokens])
    if not grid:
        raise MapError("map is empty")
    if width == 0:
        raise MapError("map rows hold no values")
    return grid


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def parse_map(path: str | os.PathLike[str]) -> list[list[int]]:
    """Read a map file into a grid of heights."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read map {os.fspath(path)!r}: {exc.strerror}") from exc
    return parse_map_lines(_split_lines(text))