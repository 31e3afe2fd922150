"""Read already-constructed sketches from JSON.

Expected layout::

    {
      "name": "pill",
      "on": "XZ",
      "start": [0, 0],
      "paths": [
        {"type": "ToPoint", "from": [0, 0], "to": [20, 0], "tag": "line1"},
        {"type": "TangentialArcTo", "from": [20, 0], "to": [20, 10],
         "center": [20, 5], "ccw": true, "tag": "arc1"}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path as FilePath
from typing import Any, Dict, Mapping, Optional, Union

from .ast import Span
from .model import (
    PATH_KINDS,
    AngledLineTo,
    Arc,
    BasePath,
    Circle,
    Horizontal,
    Path,
    Point2d,
    Sketch,
    TangentialArc,
    TangentialArcTo,
)

logger = logging.getLogger(__name__)


def _require_mapping(data: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{where}: expected an object, got {data!r}")
    return data


def _ccw(data: Mapping[str, Any], where: str) -> bool:
    value = data.get("ccw", True)
    if not isinstance(value, bool):
        raise ValueError(f"{where}: 'ccw' must be true or false, got {value!r}")
    return value


def _point(data: Mapping[str, Any], key: str, where: str) -> Point2d:
    if key not in data:
        raise ValueError(f"{where}: missing '{key}'")
    try:
        return Point2d.of(data[key])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{where}: '{key}' must be an [x, y] pair, got {data[key]!r}") from exc


def _span(data: Mapping[str, Any]) -> Optional[Span]:
    raw = data.get("span")
    if raw is None:
        return None
    return Span(int(raw[0]), int(raw[1]))


def _optional_float(data: Mapping[str, Any], key: str) -> Optional[float]:
    value = data.get(key)
    return None if value is None else float(value)


def path_from_dict(data: Mapping[str, Any], index: int = 0) -> Path:
    where = f"paths[{index}]"
    data = _require_mapping(data, where)
    kind = data.get("type")
    cls = PATH_KINDS.get(kind)  # type: ignore[arg-type]
    if cls is None:
        raise ValueError(f"{where}: unknown segment type {kind!r}")

    base = BasePath(
        from_=_point(data, "from", where),
        to=_point(data, "to", where),
        tag=data.get("tag"),
        span=_span(data),
    )
    if cls is Horizontal:
        return Horizontal(base, x=float(data.get("x", base.to.x)))
    if cls is AngledLineTo:
        return AngledLineTo(base, x=_optional_float(data, "x"), y=_optional_float(data, "y"))
    if cls in (TangentialArc, TangentialArcTo):
        return cls(base, center=_point(data, "center", where), ccw=_ccw(data, where))
    if cls in (Arc, Circle):
        center = _point(data, "center", where)
        radius = data.get("radius")
        if radius is None:
            radius = ((base.from_.x - center.x) ** 2 + (base.from_.y - center.y) ** 2) ** 0.5
        return cls(base, center=center, radius=float(radius), ccw=_ccw(data, where))
    return cls(base)


def sketch_from_dict(data: Mapping[str, Any]) -> Sketch:
    data = _require_mapping(data, "sketch")
    paths_data = data.get("paths", [])
    if not isinstance(paths_data, list):
        raise ValueError("'paths' must be a list")
    paths = [path_from_dict(item, idx) for idx, item in enumerate(paths_data)]

    start = None
    if data.get("start") is not None:
        origin = _point(data, "start", "sketch")
        start = BasePath(from_=origin, to=origin)

    sketch = Sketch(paths=paths, name=str(data.get("name", "")), on=str(data.get("on", "XY")), start=start)
    logger.info("Loaded sketch %r with %d segment(s)", sketch.name, len(sketch))
    return sketch


def load_sketch(path: Union[str, FilePath]) -> Sketch:
    with open(path, encoding="utf-8") as fin:
        try:
            data = json.load(fin)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}: invalid JSON ({exc})") from exc
    return sketch_from_dict(data)


def path_to_dict(path: Path) -> Dict[str, Any]:
    base = path.base
    out: Dict[str, Any] = {"type": path.kind, "from": base.from_.to_list(), "to": base.to.to_list()}
    if base.tag:
        out["tag"] = base.tag
    if base.span is not None:
        out["span"] = [base.span.line, base.span.col]
    if isinstance(path, Horizontal):
        out["x"] = path.x
    elif isinstance(path, AngledLineTo):
        if path.x is not None:
            out["x"] = path.x
        if path.y is not None:
            out["y"] = path.y
    elif isinstance(path, (TangentialArc, TangentialArcTo)):
        out["center"] = path.center.to_list()
        out["ccw"] = path.ccw
    elif isinstance(path, (Arc, Circle)):
        out["center"] = path.center.to_list()
        out["radius"] = path.radius
        out["ccw"] = path.ccw
    return out


def sketch_to_dict(sketch: Sketch) -> Dict[str, Any]:
    out: Dict[str, Any] = {"name": sketch.name, "on": sketch.on}
    if sketch.start is not None:
        out["start"] = sketch.start.from_.to_list()
    out["paths"] = [path_to_dict(path) for path in sketch]
    return out


__all__ = ["path_from_dict", "sketch_from_dict", "load_sketch", "path_to_dict", "sketch_to_dict"]
