"""Core data structures for sketches and their segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from .ast import Span
from .math_utils import arc_length, linear_distance


class Point2d(NamedTuple):
    x: float
    y: float

    @classmethod
    def of(cls, value: Sequence[float]) -> "Point2d":
        if isinstance(value, Point2d):
            return value
        if len(value) != 2:
            raise ValueError(f"expected a 2-D point, got {value!r}")
        return cls(float(value[0]), float(value[1]))

    def to_list(self) -> List[float]:
        return [self.x, self.y]


@dataclass(frozen=True)
class BasePath:
    """Start and end of a segment in sketch-local coordinates."""

    from_: Point2d
    to: Point2d
    tag: Optional[str] = None
    span: Optional[Span] = None


@dataclass(frozen=True)
class ToPoint:
    kind: ClassVar[str] = "ToPoint"

    base: BasePath


@dataclass(frozen=True)
class Horizontal:
    kind: ClassVar[str] = "Horizontal"

    base: BasePath
    x: float


@dataclass(frozen=True)
class AngledLineTo:
    kind: ClassVar[str] = "AngledLineTo"

    base: BasePath
    x: Optional[float] = None
    y: Optional[float] = None


@dataclass(frozen=True)
class Base:
    kind: ClassVar[str] = "Base"

    base: BasePath


@dataclass(frozen=True)
class TangentialArc:
    kind: ClassVar[str] = "TangentialArc"

    base: BasePath
    center: Point2d
    ccw: bool


@dataclass(frozen=True)
class TangentialArcTo:
    kind: ClassVar[str] = "TangentialArcTo"

    base: BasePath
    center: Point2d
    ccw: bool


@dataclass(frozen=True)
class Arc:
    kind: ClassVar[str] = "Arc"

    base: BasePath
    center: Point2d
    radius: float
    ccw: bool


@dataclass(frozen=True)
class Circle:
    """Full circle; ``from`` and ``to`` both sit at ``center + (radius, 0)``."""

    kind: ClassVar[str] = "Circle"

    base: BasePath
    center: Point2d
    radius: float
    ccw: bool


Path = Union[ToPoint, Horizontal, AngledLineTo, Base, TangentialArc, TangentialArcTo, Arc, Circle]

STRAIGHT_KINDS: Tuple[type, ...] = (ToPoint, Horizontal, AngledLineTo, Base)
ARC_KINDS: Tuple[type, ...] = (TangentialArc, TangentialArcTo, Arc)
PATH_KINDS: Dict[str, type] = {
    cls.kind: cls for cls in (*STRAIGHT_KINDS, *ARC_KINDS, Circle)
}


def path_length(path: Path) -> float:
    """Length of ``path`` measured along its own geometry."""

    if isinstance(path, STRAIGHT_KINDS):
        return linear_distance(path.base.from_, path.base.to)
    if isinstance(path, (TangentialArc, TangentialArcTo)):
        radius = linear_distance(path.base.from_, path.center)
        return arc_length(path.center, radius, path.base.from_, path.base.to, path.ccw)
    if isinstance(path, Arc):
        return arc_length(path.center, path.radius, path.base.from_, path.base.to, path.ccw)
    if isinstance(path, Circle):
        return arc_length(
            path.center, path.radius, path.base.from_, path.base.to, path.ccw, full_turn=True
        )
    raise TypeError(f"unknown segment kind {type(path).__name__}")

@dataclass
class Sketch:
    """Ordered sequence of segments forming a 2-D profile."""

    paths: List[Path] = field(default_factory=list)
    name: str = ""
    on: str = "XY"
    start: Optional[BasePath] = None

    def __iter__(self) -> Iterator[Path]:
        return iter(self.paths)

    def __len__(self) -> int:
        return len(self.paths)

    def last_path(self) -> Optional[Path]:
        return self.paths[-1] if self.paths else None

    def tagged_paths(self) -> Dict[str, Path]:
        """Map tag name to segment; a re-used tag binds to its latest segment."""

        tagged: Dict[str, Path] = {}
        for path in self.paths:
            if path.base.tag:
                tagged[path.base.tag] = path
        return tagged

@dataclass
class TagEngineInfo:
    """What a tag is bound to. ``path`` is ``None`` for non-geometric bindings."""

    id: str
    sketch: Optional[str] = None
    path: Optional[Path] = None
    surface: Optional[Any] = None

__all__ = [
    "Point2d",
    "BasePath",
    "ToPoint",
    "Horizontal",
    "AngledLineTo",
    "Base",
    "TangentialArc",
    "TangentialArcTo",
    "Arc",
    "Circle",
    "Path",
    "STRAIGHT_KINDS",
    "ARC_KINDS",
    "PATH_KINDS",
    "path_length",
    "Sketch",
    "TagEngineInfo",
]
