"""Evaluator-facing entry points for the segment queries.

The evaluator hands over positional argument values together with the span
of the call; each entry point unpacks them, runs the query and returns a
plain user value (``[x, y]`` for points, ``float`` for scalars).
"""

from __future__ import annotations

import asyncio
import logging
import numbers
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple, Union

from . import segment
from .ast import Span, TagIdentifier, span_list
from .errors import InvalidArgumentsError
from .model import Point2d, Sketch
from .resolver import TagResolver

logger = logging.getLogger(__name__)

UserValue = Union[float, List[float]]
StdFunction = Callable[["Args"], Awaitable[UserValue]]


def coerce_float(value: object) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, numbers.Real):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


@dataclass
class Args:
    values: Sequence[Any]
    span: Optional[Span]
    resolver: TagResolver

    def _error(self, message: str) -> InvalidArgumentsError:
        return InvalidArgumentsError(message, span_list(self.span))

    def _arg(self, index: int, expected: str) -> Any:
        if index >= len(self.values):
            raise self._error(f"Expected {expected} as argument {index + 1}, but only {len(self.values)} given")
        return self.values[index]

    def _tag_at(self, index: int) -> TagIdentifier:
        raw = self._arg(index, "a tag")
        if isinstance(raw, TagIdentifier):
            return raw
        if isinstance(raw, str) and raw:
            return TagIdentifier(raw.lstrip("$"), self.span)
        raise self._error(f"Expected a tag as argument {index + 1}, found `{raw!r}`")

    def _sketch_at(self, index: int) -> Sketch:
        raw = self._arg(index, "a sketch")
        if not isinstance(raw, Sketch):
            raise self._error(f"Expected a Sketch as argument {index + 1}, found `{type(raw).__name__}`")
        return raw

    def _number_at(self, index: int) -> float:
        raw = self._arg(index, "a number")
        number = coerce_float(raw)
        if number is None:
            raise self._error(f"Expected a number as argument {index + 1}, found `{raw!r}`")
        return number

    def get_tag(self) -> TagIdentifier:
        return self._tag_at(0)

    def get_sketch(self) -> Sketch:
        return self._sketch_at(0)

    def get_tag_to_number_sketch(self) -> Tuple[TagIdentifier, float, Sketch]:
        return self._tag_at(0), self._number_at(1), self._sketch_at(2)


def _point_value(point: Point2d) -> List[float]:
    return [float(point.x), float(point.y)]


def _tag_point(query: Callable[..., Point2d]) -> StdFunction:
    async def run(args: Args) -> UserValue:
        return _point_value(query(args.get_tag(), args.resolver, span=args.span))

    return run


def _tag_scalar(query: Callable[..., float]) -> StdFunction:
    async def run(args: Args) -> UserValue:
        return float(query(args.get_tag(), args.resolver, span=args.span))

    return run


def _sketch_scalar(query: Callable[..., float]) -> StdFunction:
    async def run(args: Args) -> UserValue:
        return float(query(args.get_sketch(), span=args.span))

    return run


def _tag_to_sketch_scalar(query: Callable[..., float]) -> StdFunction:
    async def run(args: Args) -> UserValue:
        tag, to, sketch = args.get_tag_to_number_sketch()
        return float(query(tag, to, sketch, args.resolver, span=args.span))

    return run


async def _tangent_to_end(args: Args) -> UserValue:
    return float(await segment.tangent_to_end(args.get_tag(), args.resolver, span=args.span))


STD_FUNCTIONS: Dict[str, StdFunction] = {
    "segEnd": _tag_point(segment.segment_end),
    "segEndX": _tag_scalar(segment.segment_end_x),
    "segEndY": _tag_scalar(segment.segment_end_y),
    "segStart": _tag_point(segment.segment_start),
    "segStartX": _tag_scalar(segment.segment_start_x),
    "segStartY": _tag_scalar(segment.segment_start_y),
    "lastSegX": _sketch_scalar(segment.last_segment_x),
    "lastSegY": _sketch_scalar(segment.last_segment_y),
    "segLen": _tag_scalar(segment.segment_length),
    "segAng": _tag_scalar(segment.segment_angle),
    "tangentToEnd": _tangent_to_end,
    "angleToMatchLengthX": _tag_to_sketch_scalar(segment.angle_to_match_length_x),
    "angleToMatchLengthY": _tag_to_sketch_scalar(segment.angle_to_match_length_y),
}

# Queries taking a sketch as their first argument rather than a tag.
SKETCH_FUNCTIONS = frozenset({"lastSegX", "lastSegY"})
# Queries taking (tag, number, sketch).
TAG_NUMBER_SKETCH_FUNCTIONS = frozenset({"angleToMatchLengthX", "angleToMatchLengthY"})


async def call_std(name: str, args: Args) -> UserValue:
    try:
        func = STD_FUNCTIONS[name]
    except KeyError as exc:
        raise KeyError(f"Unknown sketch query '{name}'") from exc
    logger.debug("Calling %s with %d argument(s) at %s", name, len(args.values), args.span)
    return await func(args)


def run_std(name: str, args: Args) -> UserValue:
    """Synchronous wrapper around :func:`call_std` for callers without an event loop."""

    return asyncio.run(call_std(name, args))


__all__ = [
    "Args",
    "StdFunction",
    "UserValue",
    "STD_FUNCTIONS",
    "SKETCH_FUNCTIONS",
    "TAG_NUMBER_SKETCH_FUNCTIONS",
    "call_std",
    "run_std",
    "coerce_float",
]
