"""Vector drawing on an oscilloscope driven by a stereo audio signal.

The left channel drives the vertical input and the right channel the
horizontal one. Drawing calls collect points into a work list; ``flip``
renders that list into 16-bit PCM and queues it. The audio side calls
``FrameQueue.fill``, which loops the current frame and swaps in the waiting
one whenever the current one has been played to its end.
"""

from __future__ import annotations

import enum
import math
import threading
from array import array
from typing import Iterable, Sequence

MAX_POINTS = 4096
DEFAULT_FREQ = 44100
DEFAULT_BUFFER = 1024

_FULL = 65535
_CENTRE = 32768
_BYTES_PER_PAIR = 4
_DWELL_LENGTH = 5.0 / 100.0

Point = tuple[int, int, int]


class Mode(enum.IntFlag):
    """Picture orientation bits."""

    NORMAL = 0
    FLIP_X = 1
    FLIP_Y = 2
    SWAP_XY = 4


def _to_u16(value: float) -> int:
    return min(max(int(value), 0), _FULL)


def render_frame(points: Sequence[Point], mode: Mode | int) -> bytes:
    """Render (x, y, weight) points to interleaved native-endian 16-bit stereo samples.

    The first point is the start position; each later point is reached in
    ``weight + 1`` sample pairs.
    """
    mode = Mode(int(mode) & 7)
    samples = array("h")
    pts = list(points)
    for (x0, y0, _), (x1, y1, weight) in zip(pts, pts[1:]):
        steps = weight + 1
        x, y = float(x0), float(y0)
        dx = (x1 - x) / steps
        dy = (y1 - y) / steps
        for _ in range(steps):
            ux, uy = _to_u16(x), _to_u16(y)
            ix = ux - _CENTRE if mode & Mode.FLIP_X else (_FULL - ux) - _CENTRE
            iy = (_FULL - uy) - _CENTRE if mode & Mode.FLIP_Y else uy - _CENTRE
            samples.extend((ix, iy) if mode & Mode.SWAP_XY else (iy, ix))
            x += dx
            y += dy
    return samples.tobytes()


class FrameQueue:
    """The playing frame and at most one waiting frame, shared with the audio thread."""

    def __init__(self, initial_pairs: int) -> None:
        self._current = bytes(max(initial_pairs, 0) * _BYTES_PER_PAIR)
        self._pending: bytes | None = None
        self._pos = 0
        self._lock = threading.Lock()

    @property
    def current(self) -> bytes:
        """The frame being played."""
        with self._lock:
            return self._current

    @property
    def pending(self) -> bytes | None:
        """The frame waiting to be played, if any."""
        with self._lock:
            return self._pending

    def submit(self, samples: bytes) -> bool:
        """Queue a rendered frame; return True if it replaced a waiting frame."""
        data = bytes(samples)
        if len(data) % _BYTES_PER_PAIR:
            raise ValueError("frame length must be a whole number of sample pairs")
        with self._lock:
            dropped = self._pending is not None
            self._pending = data
        return dropped

    def fill(self, nbytes: int) -> bytes:
        """Return the next ``nbytes`` of audio, looping the current frame."""
        if nbytes < 0:
            raise ValueError("nbytes must not be negative")
        out = bytearray()
        with self._lock:
            while len(out) < nbytes:
                chunk = self._current[self._pos:self._pos + nbytes - len(out)]
                out += chunk
                self._pos += len(chunk)
                if self._pos >= len(self._current):
                    self._pos = 0
                    if self._pending is not None:
                        self._current, self._pending = self._pending, None
                    elif not self._current:
                        out += bytes(nbytes - len(out))
        return bytes(out)


class ScopeCanvas:
    """Drawing surface whose frames become audio for an oscilloscope."""

    def __init__(self, freq: int = DEFAULT_FREQ, buffer: int = DEFAULT_BUFFER) -> None:
        self.freq = freq if freq > 0 else DEFAULT_FREQ
        self.buffer = buffer if buffer > 0 else DEFAULT_BUFFER
        self.queue = FrameQueue(self.buffer // 4 * 2)
        self.points: list[Point] = []
        self.mode = Mode.NORMAL
        self.refresh_rate = 0.0
        self._xmin, self._xmax = 0.0, 1000.0
        self._ymin, self._ymax = 0.0, 1000.0
        self._weight = 100.0

    def set_scale(
        self, xleft: float, xright: float, ytop: float, ybottom: float, weight: float
    ) -> None:
        """Set the screen edges in drawing coordinates and the sample weight of a line."""
        self._xmin, self._xmax = xleft, xright
        self._ymin, self._ymax = ytop, ybottom
        self._weight = weight

    def move_to(self, x: float, y: float) -> None:
        """Jump to a point as fast as possible."""
        self.line_to(x, y, 0.0)

    def line_to(self, x: float, y: float, color: float) -> None:
        """Draw a line to a point; points beyond the screen are clamped to its edges."""
        if len(self.points) >= MAX_POINTS:
            return
        sx = _CENTRE if self._xmin == self._xmax else (x - self._xmin) / (self._xmax - self._xmin) * _FULL
        sy = _CENTRE if self._ymin == self._ymax else (y - self._ymin) / (self._ymax - self._ymin) * _FULL
        sx = min(max(sx, 0.0), float(_FULL))
        sy = min(max(sy, 0.0), float(_FULL))

        if self.points:
            px, py, _ = self.points[-1]
            length = math.hypot(px - sx, py - sy) / _FULL
            if length < 0.00002:
                length = _DWELL_LENGTH  # dwell on a point to draw a bright dot
            steps = max(color * length * self._weight, 1.0)
        else:
            steps = 0.0
        self.points.append((int(sx), int(sy), _to_u16(steps)))

    def flip(self, clear: bool = True) -> None:
        """Render the work list and queue it; optionally start a new, empty list."""
        samples = render_frame(self.points, self.mode)
        pairs = len(samples) // _BYTES_PER_PAIR
        self.refresh_rate = self.freq / pairs if pairs else 0.0
        self.queue.submit(samples)
        if clear:
            self.points.clear()

    def set_mode(self, mode: Mode | int) -> None:
        """Set the orientation from the mode bits."""
        self.mode = Mode(int(mode) & 7)