"""Vector outlines for the game, stored as polar (radius, angle) points."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

PI = math.pi

Shape = tuple[tuple[float, float], ...]


def _polar(points: Iterable[tuple[float, float]], shift: float = 0.0) -> Shape:
    """Build a shape from (radius, half-turns) pairs, turning half-turns into radians."""
    return tuple((r, turns * PI + shift) for r, turns in points)


# The ship was modelled pointing the wrong way, hence the quarter-turn shift,
# so that it faces the direction it shoots.
SHIP_RADIUS = 35.0
SHIP: Shape = _polar(
    (
        (1.61495, -0.66940), (1.00000, 0.50000), (1.61495, -0.33060),
        (1.21227, -0.30877), (1.21227, -0.69123),
    ),
    shift=-PI / 2,
)

FLAME: Shape = _polar(
    ((1.03578, -0.41609), (1.32782, -0.50000), (1.03578, -0.58391)),
    shift=-PI / 2,
)

ROID_RADII: tuple[float, ...] = (80.0, 40.0, 20.0)
ROID_SPLITS = len(ROID_RADII)

ROIDS: tuple[Shape, ...] = (
    _polar((
        (1.06765, 0.05172), (0.52644, 0.27217), (0.96699, 0.40478),
        (1.10489, 0.65537), (1.09309, 0.85692), (0.72809, 0.87608),
        (1.01805, -0.94299), (0.98332, -0.74407), (0.67835, -0.67480),
        (0.97739, -0.34487), (0.68491, -0.07701), (1.06765, 0.05172),
    )),
    _polar((
        (0.60636, 0.19849), (0.94163, 0.45607), (0.46642, 0.49411),
        (0.99493, 0.70096), (1.09309, 0.85692), (0.56240, 0.98044),
        (1.01805, -0.94299), (0.98332, -0.74407), (0.63042, -0.72840),
        (1.00889, -0.28863), (1.03000, 0.02137), (0.60636, 0.19849),
    )),
    _polar((
        (1.00192, -0.00549), (1.02800, 0.32248), (1.01320, 0.69018),
        (0.55277, 0.83907), (1.09309, 0.85692), (0.99553, 0.97789),
        (1.01805, -0.94299), (0.98332, -0.74407), (0.75311, -0.64758),
        (0.49012, -0.42066), (1.01398, -0.25767), (1.00192, -0.00549),
    )),
)
ROID_MODELS = len(ROIDS)

BULLET: Shape = _polar(((10.0, 1.0), (10.0, 0.0)))

LOGO_RADIUS = 450.0
LOGO: tuple[Shape, ...] = (
    _polar((  # A
        (0.80951, 0.95661), (0.90894, -0.95888), (1.00323, 0.96503),
        (0.96312, 0.99065), (0.83807, 0.98910),
    )),
    _polar((  # S
        (0.74412, 0.97417), (0.71120, 0.95056), (0.62021, 0.94324),
        (0.58157, 0.96692), (0.61747, 1.00000), (0.70264, 1.00000),
        (0.74442, -0.97265), (0.70883, -0.94717), (0.62848, -0.94034),
        (0.57842, -0.96478),
    )),
    _polar((  # T
        (0.53118, -0.92924), (0.36024, -0.89461), (0.44850, -0.91591),
        (0.44670, 0.92079),
    )),
    _polar((  # E
        (0.15811, 0.75505), (0.29786, 0.87959), (0.27685, -0.99385),
        (0.16339, -0.98617), (0.27685, -0.99385), (0.30055, -0.87260),
        (0.16814, -0.75475),
    )),
    _polar((  # R
        (0.11673, 0.60854), (0.12344, -0.60242), (0.14480, -0.29985),
        (0.15060, -0.19133), (0.12824, -0.08012), (0.07106, -0.01590),
        (0.03939, -0.95708), (0.07106, -0.01590), (0.17679, 0.21378),
    )),
    _polar((  # O
        (0.30116, 0.11903), (0.37153, 0.09569), (0.41155, 0.04129),
        (0.41253, -0.04672), (0.37369, -0.10146), (0.29403, -0.13039),
        (0.22814, -0.08518), (0.22637, 0.07556), (0.30116, 0.11903),
    )),
    _polar((  # I
        (0.51231, 0.06889), (0.51388, -0.07318), (0.51231, 0.06889),
    )),
    _polar((  # D
        (0.71470, 0.04919), (0.75774, 0.02238), (0.75827, -0.02535),
        (0.71583, -0.05231), (0.60409, -0.06210), (0.60275, 0.05842),
        (0.71470, 0.04919),
    )),
    _polar((  # S
        (0.83638, 0.02433), (0.88033, 0.04117), (0.97190, 0.03728),
        (0.99922, 0.02036), (0.95815, 0.00118), (0.87298, 0.00129),
        (0.83612, -0.02299), (0.88385, -0.04101), (0.96485, -0.03755),
        (1.00254, -0.01917),
    )),
)


def transform(
    shape: Sequence[tuple[float, float]],
    angle: float,
    radius: float,
    off_x: float,
    off_y: float,
) -> list[tuple[float, float]]:
    """Rotate, scale and move a polar shape, giving its points in screen coordinates."""
    return [
        (
            radius * r * math.cos(angle + theta) + off_x,
            radius * r * math.sin(angle + theta) + off_y,
        )
        for r, theta in shape
    ]