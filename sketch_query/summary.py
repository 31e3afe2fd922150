"""Per-segment measurements for a whole sketch."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np

from .math_utils import between
from .model import Sketch, path_length

logger = logging.getLogger(__name__)


@dataclass
class SketchSummary:
    kinds: List[str]
    tags: List[Optional[str]]
    lengths: np.ndarray
    angles: np.ndarray
    total_length: float
    bounds: Optional[Tuple[Tuple[float, float], Tuple[float, float]]]
    notes: List[str] = field(default_factory=list)


def summarize_sketch(sketch: Sketch) -> SketchSummary:
    """Measure every segment of ``sketch``.

    ``angles`` holds orientation angles in degrees; zero-length segments get
    ``NaN`` there and a note. ``bounds`` covers segment endpoints only.
    """

    kinds = [path.kind for path in sketch]
    tags = [path.base.tag for path in sketch]
    lengths = np.array([path_length(path) for path in sketch], dtype=float)

    notes: List[str] = []
    angles = np.full(len(sketch), np.nan)
    for idx, path in enumerate(sketch):
        if path.base.from_ == path.base.to:
            notes.append(f"segment {idx} ({path.kind}) has coincident endpoints")
            continue
        angles[idx] = between(path.base.from_, path.base.to)

    bounds = None
    if len(sketch):
        pts = np.array(
            [p for path in sketch for p in (path.base.from_, path.base.to)],
            dtype=float,
        )
        lo = pts.min(axis=0)
        hi = pts.max(axis=0)
        bounds = ((float(lo[0]), float(lo[1])), (float(hi[0]), float(hi[1])))

    total = float(lengths.sum()) if lengths.size else 0.0
    logger.info("Summarized sketch %r: %d segment(s), total length %.6g", sketch.name, len(kinds), total)
    return SketchSummary(
        kinds=kinds,
        tags=tags,
        lengths=lengths,
        angles=angles,
        total_length=total,
        bounds=bounds,
        notes=notes,
    )
