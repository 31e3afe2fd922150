from __future__ import annotations

import math
from typing import Tuple

Coords2d = Tuple[float, float]

TWO_PI = 2.0 * math.pi


def _vec2(a: Coords2d, b: Coords2d) -> Coords2d:
    return b[0] - a[0], b[1] - a[1]


def linear_distance(a: Coords2d, b: Coords2d) -> float:
    dx, dy = _vec2(a, b)
    return math.hypot(dx, dy)


def normalize_degrees(deg: float) -> float:
    """Wrap ``deg`` into ``[0, 360)``."""

    return ((deg % 360.0) + 360.0) % 360.0


def between(a: Coords2d, b: Coords2d) -> float:
    """Direction of the vector ``a -> b`` in degrees, within ``[0, 360)``."""

    dx, dy = _vec2(a, b)
    return normalize_degrees(math.degrees(math.atan2(dy, dx)))


def get_angle(p1: Coords2d, p2: Coords2d) -> float:
    """Angle of ``p2`` seen from ``p1`` in degrees, within ``[0, 360)``."""

    dx, dy = _vec2(p1, p2)
    angle = math.atan2(dy, dx)
    if angle < 0.0:
        angle += TWO_PI
    return math.degrees(angle)


def polar_offset(origin: Coords2d, angle_deg: float, reach: float) -> Coords2d:
    rad = math.radians(angle_deg)
    return origin[0] + reach * math.cos(rad), origin[1] + reach * math.sin(rad)


def get_tangent_point_from_previous_arc(
    center: Coords2d, ccw: bool, arc_end: Coords2d, reach: float = 10.0
) -> Coords2d:
    # The returned point sits behind arc_end along the arc's tangent, so that
    # arc_end - point points in the direction of travel.
    radial = get_angle(center, arc_end)
    tangential = radial - 90.0 if ccw else radial + 90.0
    return polar_offset(arc_end, tangential, reach)


def arc_sweep(center: Coords2d, start: Coords2d, end: Coords2d, ccw: bool, *, full_turn: bool = False) -> float:
    """Unsigned sweep in radians travelled from ``start`` to ``end``.

    Coincident start/end angles give ``0`` unless ``full_turn`` is set.
    """

    a0 = math.atan2(start[1] - center[1], start[0] - center[0])
    a1 = math.atan2(end[1] - center[1], end[0] - center[0])
    delta = (a1 - a0) if ccw else (a0 - a1)
    sweep = delta % TWO_PI
    if math.isclose(sweep, 0.0, abs_tol=1e-12) or math.isclose(sweep, TWO_PI, abs_tol=1e-12):
        return TWO_PI if full_turn else 0.0
    return sweep


def arc_length(center: Coords2d, radius: float, start: Coords2d, end: Coords2d, ccw: bool, *, full_turn: bool = False) -> float:
    return abs(radius) * arc_sweep(center, start, end, ccw, full_turn=full_turn)
