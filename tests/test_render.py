import pytest

from fdfview.image import Image
from fdfview.render import (
    HEIGHT,
    WHITE,
    WIDTH,
    Point,
    draw_line,
    project,
    render_map,
)


def lit(image):
    return {
        (x, y)
        for y in range(image.height)
        for x in range(image.width)
        if image.get_pixel(x, y)
    }


def test_project_origin_of_three_by_three():
    assert project(0, 0, 0, 3, 3) == Point(259, 42)


def test_project_height_lifts_point():
    flat = project(0, 0, 0, 3, 3)
    raised = project(0, 0, 10, 3, 3)
    assert raised.x == flat.x
    assert flat.y - raised.y == 10


def test_project_moves_right_along_row():
    assert project(1, 0, 0, 3, 3).x > project(0, 0, 0, 3, 3).x


@pytest.mark.parametrize("x_max, y_max", [(1, 3), (3, 1), (0, 0)])
def test_project_needs_two_cells_per_axis(x_max, y_max):
    with pytest.raises(ValueError):
        project(0, 0, 0, x_max, y_max)


def test_draw_line_diagonal():
    image = Image(6, 6)
    draw_line(image, Point(0, 0), Point(3, 3), 5)
    assert lit(image) == {(i, i) for i in range(4)}
    assert image.get_pixel(2, 2) == 5


def test_draw_line_is_direction_independent_for_axis_lines():
    forward = Image(6, 3)
    backward = Image(6, 3)
    draw_line(forward, Point(1, 1), Point(4, 1), WHITE)
    draw_line(backward, Point(4, 1), Point(1, 1), WHITE)
    assert lit(forward) == lit(backward) == {(x, 1) for x in range(1, 5)}


def test_draw_line_single_point_draws_nothing():
    image = Image(4, 4)
    draw_line(image, Point(2, 2), Point(2, 2), WHITE)
    assert lit(image) == set()


def test_draw_line_clips_negative_coordinates():
    image = Image(4, 2)
    draw_line(image, Point(-2, 0), Point(2, 0), WHITE)
    assert lit(image) == {(0, 0), (1, 0), (2, 0)}


def test_draw_line_far_edge_wraps_to_next_row():
    image = Image(4, 3)
    draw_line(image, Point(4, 0), Point(4, 1), 7)
    assert lit(image) == {(0, 1), (0, 2)}


def test_draw_line_drops_pixels_past_buffer():
    image = Image(4, 3)
    draw_line(image, Point(0, 2), Point(0, 3), 7)
    assert lit(image) == {(0, 2)}


def test_render_map_marks_every_projected_point():
    grid = [[0, 0, 0], [0, 10, 0], [0, 0, 0]]
    image = render_map(grid, Image(WIDTH, HEIGHT))
    for row in range(3):
        for col in range(3):
            p = project(col, row, grid[row][col], 3, 3)
            assert image.get_pixel(p.x, p.y) == WHITE
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize("grid", [[[1, 2, 3]], [[1], [2]], [[1, 2], [3]]])
def test_render_map_rejects_unusable_grids(grid):
    with pytest.raises(ValueError):
        render_map(grid, Image(4, 4))