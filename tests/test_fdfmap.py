import pytest

from fdfview.fdfmap import (
    MapError,
    has_fdf_extension,
    is_valid_row,
    parse_int,
    parse_map,
    parse_map_lines,
    split_fields,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("-17", -17),
        ("  +5", 5),
        ("\t\n7", 7),
        ("12abc", 12),
        ("abc", 0),
        ("", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_parse_int_values(text, expected):
    assert parse_int(text) == expected


def test_parse_int_positive_overflow_gives_minus_one():
    assert parse_int("2147483648") == -1


def test_parse_int_negative_overflow_gives_zero():
    assert parse_int("-2147483649") == 0


def test_split_fields_drops_empty_fields():
    assert split_fields("1  2 3 ") == ["1", "2", "3"]
    assert split_fields("   ") == []


@pytest.mark.parametrize(
    "tokens, expected",
    [
        (["1", "-2", "+3"], True),
        (["10", "2\r"], True),
        (["1-"], False),
        (["-"], False),
        (["5-3"], False),
        (["1a"], False),
        (["--1"], False),
    ],
)
def test_is_valid_row(tokens, expected):
    assert is_valid_row(tokens) is expected


@pytest.mark.parametrize(
    "path, expected",
    [
        ("map.fdf", True),
        ("dir/42.fdf", True),
        (".fdf", False),
        ("map.txt", False),
        ("map.fdfx", False),
    ],
)
def test_has_fdf_extension(path, expected):
    assert has_fdf_extension(path) is expected


def test_parse_map_lines_builds_grid():
    grid = parse_map_lines(["0 1 2\n", "3 4 5\n", "-6 7 8"])
    assert grid == [[0, 1, 2], [3, 4, 5], [-6, 7, 8]]


def test_parse_map_lines_accepts_leading_zeroes():
    assert parse_map_lines(["00 01\n"]) == [[0, 1]]


def test_parse_map_lines_rejects_ragged_rows():
    with pytest.raises(MapError):
        parse_map_lines(["1 2 3\n", "4 5\n"])


@pytest.mark.parametrize("token", ["x", "+0", "-0", "2147483648", "-2147483649", "1-2"])
def test_parse_map_lines_rejects_bad_values(token):
    with pytest.raises(MapError):
        parse_map_lines([f"1 {token}\n"])


def test_parse_map_lines_rejects_empty_input():
    with pytest.raises(MapError):
        parse_map_lines([])


def test_parse_map_lines_rejects_rows_without_values():
    with pytest.raises(MapError):
        parse_map_lines(["\n", "\n"])


def test_parse_map_reads_file(tmp_path):
    path = tmp_path / "small.fdf"
    path.write_bytes(b"1 2\r\n3 4\r\n")
    assert parse_map(path) == [[1, 2], [3, 4]]


def test_parse_map_without_final_newline(tmp_path):
    path = tmp_path / "tail.fdf"
    path.write_text("5 6\n7 8")
    assert parse_map(path) == [[5, 6], [7, 8]]


def test_parse_map_missing_file(tmp_path):
    with pytest.raises(MapError):
        parse_map(tmp_path / "absent.fdf")