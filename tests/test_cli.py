from unittest.mock import patch

import pygame
import pytest

from fdfview.cli import format_grid, main


def test_format_grid_layout():
    assert format_grid([[1, 2], [3, 4]]) == "1 2 \n3 4 \n"


def test_format_grid_negative_values():
    assert format_grid([[-5, 0]]) == "-5 0 \n"


@pytest.mark.parametrize("argv", [[], ["a.fdf", "b.fdf"], ["map.txt"], [".fdf"]])
def test_main_rejects_bad_arguments(argv, capsys):
    assert main(argv) == -1
    assert capsys.readouterr().out == ""


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.fdf")]) == -1
    assert capsys.readouterr().out == ""


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.fdf"
    path.write_text("1 2\n3 x\n")
    assert main([str(path)]) == -1
    assert capsys.readouterr().out == ""


def test_main_single_row_map_prints_then_fails(tmp_path, capsys):
    path = tmp_path / "line.fdf"
    path.write_text("1 2 3\n")
    assert main([str(path)]) == -1
    assert capsys.readouterr().out == "1 2 3 \n"


def test_main_prints_grid_and_shows_window(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    path = tmp_path / "plateau.fdf"
    path.write_text("0 0 0\n0 5 0\n0 0 0\n")
    quit_event = pygame.event.Event(pygame.QUIT)
    with patch("pygame.event.get", return_value=[quit_event]):
        assert main([str(path)]) == 0
    assert capsys.readouterr().out == "0 0 0 \n0 5 0 \n0 0 0 \n"