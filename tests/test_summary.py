import math
from pathlib import Path

import numpy as np

from sketch_query.loader import load_sketch
from sketch_query.model import BasePath, Circle, Point2d, Sketch
from sketch_query.summary import summarize_sketch

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_rectangle_summary():
    summary = summarize_sketch(load_sketch(EXAMPLES / 'rectangle.json'))

    assert summary.kinds == ['ToPoint', 'AngledLineTo', 'ToPoint', 'Horizontal', 'Base']
    assert summary.tags == ['seg1', None, 'seg2', None, 'close']
    np.testing.assert_allclose(summary.lengths, [10.0, 10.0, 10.0, 20.0, 10.0])
    np.testing.assert_allclose(summary.angles, [0.0, 0.0, 90.0, 180.0, 270.0])
    assert summary.total_length == 60.0
    assert summary.bounds == ((0.0, 0.0), (20.0, 10.0))
    assert summary.notes == []


def test_circle_angle_is_nan_with_note():
    circle = Circle(BasePath(Point2d(3, 0), Point2d(3, 0)), center=Point2d(0, 0), radius=3.0, ccw=True)
    summary = summarize_sketch(Sketch(paths=[circle]))

    assert math.isnan(summary.angles[0])
    assert math.isclose(summary.total_length, 6 * math.pi)
    assert summary.notes == ['segment 0 (Circle) has coincident endpoints']


def test_empty_sketch_summary():
    summary = summarize_sketch(Sketch())

    assert summary.total_length == 0.0
    assert summary.bounds is None
    assert summary.lengths.shape == (0,)
