"""Tangent reference points for continuing a sketch smoothly past a segment.

The outgoing direction at a segment's end is ``atan2(end - ref)``, where
``ref`` is a point chosen per segment kind:

* straight segments use their own start point;
* arcs use a point ``tangent_reach`` units behind the end, along the tangent
  implied by the arc's center and direction;
* circles start and end at angle 0, so the point sits just below (ccw) or
  above (cw) that spot.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Union

from .config import QueryConfig, get_query_config
from .math_utils import get_tangent_point_from_previous_arc
from .model import ARC_KINDS, STRAIGHT_KINDS, Circle, Path, Point2d

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreviousPoint:
    point: Point2d


@dataclass(frozen=True)
class ArcTangent:
    center: Point2d
    ccw: bool


@dataclass(frozen=True)
class CircleTangent:
    center: Point2d
    radius: float
    ccw: bool


TangentInfo = Union[PreviousPoint, ArcTangent, CircleTangent]


def get_tangential_info(path: Path) -> TangentInfo:
    if isinstance(path, STRAIGHT_KINDS):
        return PreviousPoint(path.base.from_)
    if isinstance(path, ARC_KINDS):
        return ArcTangent(path.center, path.ccw)
    if isinstance(path, Circle):
        return CircleTangent(path.center, path.radius, path.ccw)
    raise TypeError(f"unknown segment kind {type(path).__name__}")


def tan_previous_point(info: TangentInfo, end: Point2d, config: Optional[QueryConfig] = None) -> Point2d:
    cfg = config or get_query_config()
    if isinstance(info, PreviousPoint):
        return info.point
    if isinstance(info, ArcTangent):
        return Point2d(*get_tangent_point_from_previous_arc(info.center, info.ccw, end, cfg.tangent_reach))
    if isinstance(info, CircleTangent):
        dy = -cfg.circle_tangent_offset if info.ccw else cfg.circle_tangent_offset
        return Point2d(info.center.x + info.radius, info.center.y + dy)
    raise TypeError(f"unknown tangent info {type(info).__name__}")


def tangent_angle(path: Path, config: Optional[QueryConfig] = None) -> float:
    """Outgoing direction at the end of ``path`` in degrees, within ``(-180, 180]``."""

    end = path.base.to
    info = get_tangential_info(path)
    ref = tan_previous_point(info, end, config)
    logger.debug("Tangent reference for %s: %s via %s", path.kind, ref, info)
    return math.degrees(math.atan2(end.y - ref.y, end.x - ref.x))


__all__ = [
    "PreviousPoint",
    "ArcTangent",
    "CircleTangent",
    "TangentInfo",
    "get_tangential_info",
    "tan_previous_point",
    "tangent_angle",
]
