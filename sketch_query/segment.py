"""Geometric queries over tagged segments and whole sketches.

Every query is a pure read. Tag-based queries resolve through a
:class:`~sketch_query.resolver.TagResolver`; ``span`` is the location of the
call in the user's program and defaults to the tag's own span.
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Union

from .ast import Span, TagIdentifier, span_list
from .errors import EmptySketchError
from .logging_utils import apply_debug_logging
from .math_utils import between
from .model import BasePath, Path, Point2d, Sketch, path_length
from .resolver import TagResolver
from .tangent import tangent_angle

logger = logging.getLogger(__name__)

TagLike = Union[TagIdentifier, str]


def _call_span(tag: TagLike, span: Optional[Span]) -> Optional[Span]:
    if span is not None:
        return span
    return tag.span if isinstance(tag, TagIdentifier) else None


def _last_base(sketch: Sketch, span: Optional[Span]) -> BasePath:
    last = sketch.last_path()
    if last is None:
        raise EmptySketchError(
            f"Expected a Sketch with at least one segment, found `{sketch!r}`",
            span_list(span),
        )
    return last.base


def segment_start(tag: TagLike, resolver: TagResolver, *, span: Optional[Span] = None) -> Point2d:
    """Starting point of the tagged segment."""

    return resolver.resolve(tag, _call_span(tag, span)).base.from_


def segment_start_x(tag: TagLike, resolver: TagResolver, *, span: Optional[Span] = None) -> float:
    return resolver.resolve(tag, _call_span(tag, span)).base.from_[0]


def segment_start_y(tag: TagLike, resolver: TagResolver, *, span: Optional[Span] = None) -> float:
    return resolver.resolve(tag, _call_span(tag, span)).base.from_[1]


def segment_end(tag: TagLike, resolver: TagResolver, *, span: Optional[Span] = None) -> Point2d:
    """Ending point of the tagged segment."""

    return resolver.resolve(tag, _call_span(tag, span)).base.to


def segment_end_x(tag: TagLike, resolver: TagResolver, *, span: Optional[Span] = None) -> float:
    return resolver.resolve(tag, _call_span(tag, span)).base.to[0]


def segment_end_y(tag: TagLike, resolver: TagResolver, *, span: Optional[Span] = None) -> float:
    return resolver.resolve(tag, _call_span(tag, span)).base.to[1]


def last_segment_x(sketch: Sketch, *, span: Optional[Span] = None) -> float:
    """``x`` of the end of the last segment in ``sketch``."""

    return _last_base(sketch, span).to[0]


def last_segment_y(sketch: Sketch, *, span: Optional[Span] = None) -> float:
    """``y`` of the end of the last segment in ``sketch``."""

    return _last_base(sketch, span).to[1]


def segment_length(tag: TagLike, resolver: TagResolver, *, span: Optional[Span] = None) -> float:
    """Length of the tagged segment measured along its geometry (true arc length for arcs)."""

    return path_length(resolver.resolve(tag, _call_span(tag, span)))


def segment_angle(tag: TagLike, resolver: TagResolver, *, span: Optional[Span] = None) -> float:
    """Direction from start to end of the tagged segment, in degrees within ``[0, 360)``.

    Zero-length segments are not guarded against.
    """

    base = resolver.resolve(tag, _call_span(tag, span)).base
    return between(base.from_, base.to)


async def tangent_to_end(tag: TagLike, resolver: TagResolver, *, span: Optional[Span] = None) -> float:
    """Direction, in degrees, a following segment must take to leave the tagged one tangentially."""

    path = await resolver.resolve_async(tag, _call_span(tag, span))
    return tangent_angle(path)


def _angle_to_match_length(
    tag: TagLike,
    to: float,
    sketch: Sketch,
    resolver: TagResolver,
    span: Optional[Span],
    axis: int,
) -> float:
    call_span = _call_span(tag, span)
    path: Path = resolver.resolve(tag, call_span)
    length = path_length(path)
    last = _last_base(sketch, call_span)

    diff = abs(to - last.to[axis])
    if diff > length:
        logger.debug(
            "Target %s unreachable from %s with length %s; falling back to 0",
            to,
            last.to[axis],
            length,
        )
        return 0.0

    # A zero-length tagged segment yields NaN rather than raising.
    ratio = diff / length if length else math.nan
    angle = math.acos(ratio) if axis == 0 else math.asin(ratio)
    return math.degrees(angle)


def angle_to_match_length_x(
    tag: TagLike,
    to: float,
    sketch: Sketch,
    resolver: TagResolver,
    *,
    span: Optional[Span] = None,
) -> float:
    """Angle for a segment as long as the tagged one, starting at the sketch's
    last point, to land on ``x = to``. Returns ``0`` when ``to`` is out of reach."""

    return _angle_to_match_length(tag, to, sketch, resolver, span, axis=0)


def angle_to_match_length_y(
    tag: TagLike,
    to: float,
    sketch: Sketch,
    resolver: TagResolver,
    *,
    span: Optional[Span] = None,
) -> float:
    """Same as :func:`angle_to_match_length_x`, for ``y = to``."""

    return _angle_to_match_length(tag, to, sketch, resolver, span, axis=1)


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "segment_start",
    "segment_start_x",
    "segment_start_y",
    "segment_end",
    "segment_end_x",
    "segment_end_y",
    "last_segment_x",
    "last_segment_y",
    "segment_length",
    "segment_angle",
    "tangent_to_end",
    "angle_to_match_length_x",
    "angle_to_match_length_y",
]
