from array import array

import pytest

from scopeasteroids.scope import (
    MAX_POINTS,
    FrameQueue,
    Mode,
    ScopeCanvas,
    render_frame,
)


def _samples(data):
    out = array("h")
    out.frombytes(data)
    return list(out)


def test_render_frame_corner_values():
    data = render_frame([(0, 0, 0), (65535, 0, 1)], Mode.NORMAL)
    samples = _samples(data)
    # left channel (vertical) first, right channel (horizontal) second
    assert samples[0] == -32768
    assert samples[1] == 32767
    assert len(samples) == 4


def test_render_frame_pair_count_is_sum_of_weights_plus_one():
    points = [(0, 0, 0), (100, 200, 3), (300, 50, 0), (10, 10, 7)]
    data = render_frame(points, Mode.NORMAL)
    assert len(data) // 4 == sum(w + 1 for _, _, w in points[1:])


def test_render_frame_single_point_is_empty():
    assert render_frame([(5, 5, 0)], Mode.NORMAL) == b""


def test_swap_reverses_channels():
    points = [(1000, 2000, 0), (3000, 500, 4)]
    plain = _samples(render_frame(points, Mode.NORMAL))
    swapped = _samples(render_frame(points, Mode.SWAP_XY))
    assert swapped[0::2] == plain[1::2]
    assert swapped[1::2] == plain[0::2]


def test_flip_x_mirrors_horizontal_channel():
    points = [(1000, 2000, 0), (3000, 500, 4)]
    plain = _samples(render_frame(points, Mode.NORMAL))
    flipped = _samples(render_frame(points, Mode.FLIP_X))
    assert flipped[0::2] == plain[0::2]
    assert [a + b for a, b in zip(plain[1::2], flipped[1::2])] == [-1] * (len(plain) // 2)


def test_flip_y_mirrors_vertical_channel():
    points = [(1000, 2000, 0), (3000, 500, 4)]
    plain = _samples(render_frame(points, Mode.NORMAL))
    flipped = _samples(render_frame(points, Mode.FLIP_Y))
    assert flipped[1::2] == plain[1::2]
    assert [a + b for a, b in zip(plain[0::2], flipped[0::2])] == [-1] * (len(plain) // 2)


def test_queue_starts_silent_and_loops():
    queue = FrameQueue(2)
    assert queue.fill(20) == bytes(20)


def test_queue_switches_at_end_of_frame():
    queue = FrameQueue(2)
    frame = bytes([1, 2, 3, 4])
    queue.submit(frame)
    assert queue.fill(8) == bytes(8)
    assert queue.pending is None
    assert queue.fill(8) == frame * 2
    assert queue.current == frame


def test_queue_waits_for_current_frame_to_finish():
    queue = FrameQueue(2)
    queue.fill(4)
    queue.submit(bytes([9] * 4))
    assert queue.fill(8) == bytes(4) + bytes([9] * 4)


def test_queue_drops_waiting_frame():
    queue = FrameQueue(1)
    assert queue.submit(bytes([1] * 4)) is False
    assert queue.submit(bytes([2] * 4)) is True
    assert queue.pending == bytes([2] * 4)


def test_queue_rejects_partial_pairs():
    with pytest.raises(ValueError):
        FrameQueue(1).submit(b"\x00\x01\x02")


def test_queue_empty_frame_gives_silence():
    queue = FrameQueue(1)
    queue.submit(b"")
    assert queue.fill(12) == bytes(12)


def test_canvas_defaults():
    canvas = ScopeCanvas(0, -5)
    assert canvas.freq == 44100
    assert canvas.buffer == 1024


def test_first_point_has_no_weight_and_clamps():
    canvas = ScopeCanvas()
    canvas.line_to(2000, -50, 1.0)
    assert canvas.points == [(65535, 0, 0)]


def test_flattened_axis_goes_to_middle():
    canvas = ScopeCanvas()
    canvas.set_scale(5, 5, 0, 1000, 100)
    canvas.move_to(123, 0)
    assert canvas.points[0][0] == 32768


def test_full_width_line_weight_follows_scale():
    canvas = ScopeCanvas()
    canvas.set_scale(0, 1000, 0, 1000, 100)
    canvas.move_to(0, 0)
    canvas.line_to(1000, 0, 1.0)
    assert canvas.points[1] == (65535, 0, 100)


def test_move_weight_is_at_least_one():
    canvas = ScopeCanvas()
    canvas.move_to(0, 0)
    canvas.move_to(500, 500)
    assert canvas.points[1][2] == 1


def test_dwell_on_point_draws_dot():
    canvas = ScopeCanvas()
    canvas.set_scale(0, 1000, 0, 1000, 100)
    canvas.move_to(300, 300)
    canvas.line_to(300, 300, 1.0)
    assert canvas.points[1][2] == 5


def test_point_limit():
    canvas = ScopeCanvas()
    for i in range(MAX_POINTS + 10):
        canvas.move_to(i % 1000, 0)
    assert len(canvas.points) == MAX_POINTS


def test_flip_queues_frame_and_sets_refresh():
    canvas = ScopeCanvas(44100, 1024)
    canvas.move_to(0, 0)
    canvas.line_to(1000, 1000, 1.0)
    canvas.flip(True)
    pairs = len(canvas.queue.pending) // 4
    assert pairs > 0
    assert canvas.refresh_rate * pairs == pytest.approx(44100)
    assert canvas.points == []


def test_flip_without_clear_keeps_points():
    canvas = ScopeCanvas()
    canvas.move_to(0, 0)
    canvas.line_to(10, 10, 1.0)
    canvas.flip(False)
    assert len(canvas.points) == 2


def test_flip_uses_mode():
    canvas = ScopeCanvas()
    canvas.set_mode(Mode.SWAP_XY | 8)
    assert canvas.mode == Mode.SWAP_XY
    canvas.move_to(0, 0)
    canvas.line_to(500, 900, 1.0)
    points = list(canvas.points)
    canvas.flip(True)
    assert canvas.queue.pending == render_frame(points, Mode.SWAP_XY)