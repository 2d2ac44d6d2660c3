import pygame
import pytest

from scopeasteroids.scope import Mode
from scopeasteroids.window import SIZE, WindowCanvas, bresenham


@pytest.fixture
def canvas():
    return WindowCanvas(pygame.Surface((SIZE, SIZE)))


def red(canvas, x, y):
    return canvas.surface.get_at((x, y)).r


def test_bresenham_horizontal():
    assert list(bresenham(0, 0, 3, 0)) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_bresenham_single_point():
    assert list(bresenham(5, 7, 5, 7)) == [(5, 7)]


@pytest.mark.parametrize(
    "x0,y0,x1,y1",
    [(0, 0, 10, 3), (10, 3, 0, 0), (2, 9, 4, -6), (-3, -3, 7, 7), (5, 0, 5, 12)],
)
def test_bresenham_invariants(x0, y0, x1, y1):
    pts = list(bresenham(x0, y0, x1, y1))
    assert pts[0] == (x0, y0)
    assert pts[-1] == (x1, y1)
    assert len(pts) == max(abs(x1 - x0), abs(y1 - y0)) + 1
    for (ax, ay), (bx, by) in zip(pts, pts[1:]):
        assert abs(bx - ax) <= 1 and abs(by - ay) <= 1


def test_move_draws_dim_dot(canvas):
    canvas.move_to(0, 0)
    assert red(canvas, 2, 2) == 10


def test_overlapping_lines_add(canvas):
    canvas.move_to(0, 0)
    once = red(canvas, 2, 2)
    canvas.move_to(0, 0)
    assert red(canvas, 2, 2) == 2 * once


def test_bright_line_along_top_row(canvas):
    canvas.move_to(0, 0)
    canvas.line_to(1000, 0, 1.0)
    lit = [x for x in range(SIZE) if red(canvas, x, 2)]
    assert min(lit) == 2
    assert max(lit) == 478
    assert red(canvas, 240, 2) == 255
    assert all(red(canvas, x, 3) == 0 for x in range(SIZE))


def test_weight_above_one_is_clamped(canvas):
    canvas.line_to(0, 0, 2.0)
    assert red(canvas, 2, 2) == 255


def test_flip_clear(canvas):
    canvas.move_to(0, 0)
    canvas.flip(False)
    assert red(canvas, 2, 2) == 10
    canvas.flip(True)
    assert red(canvas, 2, 2) == 0


def test_flip_x_mode(canvas):
    canvas.set_mode(Mode.FLIP_X)
    canvas.move_to(0, 0)
    assert red(canvas, 2, 2) == 0
    assert red(canvas, SIZE - 2, 2) == 10


def test_swap_mode(canvas):
    canvas.set_mode(Mode.SWAP_XY)
    canvas.move_to(0, 0)
    canvas.line_to(1000, 0, 1.0)
    assert red(canvas, 2, 240) == 255
    assert red(canvas, 240, 2) == 0


def test_set_mode_masks_bits(canvas):
    canvas.set_mode(13)
    assert canvas.mode == Mode.FLIP_X | Mode.SWAP_XY


def test_degenerate_scale_rejected(canvas):
    with pytest.raises(ValueError):
        canvas.set_scale(5, 5, 0, 1000, 100)


def test_refresh_rate_is_zero(canvas):
    canvas.flip(True)
    assert canvas.refresh_rate == 0.0