import asyncio
import math

import pytest

from sketch_query.ast import Span, TagIdentifier
from sketch_query.errors import EmptySketchError, NotASegmentError, UnresolvedTagError
from sketch_query.model import BasePath, Point2d, Sketch, TagEngineInfo, TangentialArcTo, ToPoint
from sketch_query.resolver import MappingTagLookup, TagResolver
from sketch_query.segment import (
    angle_to_match_length_x,
    angle_to_match_length_y,
    last_segment_x,
    last_segment_y,
    segment_angle,
    segment_end,
    segment_end_x,
    segment_end_y,
    segment_length,
    segment_start,
    segment_start_x,
    segment_start_y,
    tangent_to_end,
)


def line(frm, to, tag=None):
    return ToPoint(BasePath(Point2d(*frm), Point2d(*to), tag=tag))


def resolver_for(*paths):
    return TagResolver(MappingTagLookup.from_sketch(Sketch(paths=list(paths))))


def sketch_ending_at(x, y):
    return Sketch(paths=[line((0, 0), (x, y))])


@pytest.mark.parametrize('w', [1.0, 2.5, 100.0])
def test_horizontal_segment_queries(w):
    resolver = resolver_for(line((0, 0), (w, 0), 'seg'))

    assert segment_angle('seg', resolver) == 0.0
    assert segment_length('seg', resolver) == w
    assert segment_start('seg', resolver) == Point2d(0, 0)
    assert segment_end('seg', resolver) == Point2d(w, 0)


def test_vertical_segment_points_up():
    resolver = resolver_for(line((0, 0), (0, 7), 'seg'))
    assert segment_angle('seg', resolver) == 90.0


def test_segment_angle_is_within_full_turn():
    resolver = resolver_for(line((5, 5), (5, 0), 'down'), line((0, 0), (-1, 0), 'left'))

    assert math.isclose(segment_angle('down', resolver), 270.0)
    assert math.isclose(segment_angle('left', resolver), 180.0)


def test_component_queries():
    resolver = resolver_for(line((1, 2), (3, 4), 'seg'))

    assert segment_start_x('seg', resolver) == 1.0
    assert segment_start_y('seg', resolver) == 2.0
    assert segment_end_x('seg', resolver) == 3.0
    assert segment_end_y('seg', resolver) == 4.0


def test_segment_length_of_arc():
    arc = TangentialArcTo(
        BasePath(Point2d(20, 0), Point2d(20, 10), tag='arc'), center=Point2d(20, 5), ccw=True
    )
    assert math.isclose(segment_length('arc', resolver_for(arc)), 5 * math.pi)


def test_last_segment_components():
    sketch = Sketch(paths=[line((0, 0), (5, 0)), line((5, 0), (25, 5))])

    assert last_segment_x(sketch) == 25.0
    assert last_segment_y(sketch) == 5.0


@pytest.mark.parametrize('query', [last_segment_x, last_segment_y])
def test_last_segment_on_empty_sketch_fails(query):
    with pytest.raises(EmptySketchError) as exc:
        query(Sketch(), span=Span(4, 9))

    assert exc.value.source_ranges == [Span(4, 9)]
    assert 'at least one segment' in str(exc.value)


def test_unresolved_tag_uses_tag_span_by_default():
    resolver = resolver_for()

    with pytest.raises(UnresolvedTagError) as exc:
        segment_end(TagIdentifier('line1', Span(2, 14)), resolver)

    assert exc.value.source_ranges == [Span(2, 14)]
    assert 'line1' in str(exc.value)


def test_not_a_segment_surfaces_from_queries():
    resolver = TagResolver(MappingTagLookup({'cap': TagEngineInfo(id='cap')}))

    with pytest.raises(NotASegmentError):
        segment_length('cap', resolver)


def test_angle_to_match_length_x_exact_reach():
    resolver = resolver_for(line((0, 0), (7, 0), 'seg'))
    assert angle_to_match_length_x('seg', 10.0, sketch_ending_at(3, 0), resolver) == 0.0


def test_angle_to_match_length_x_unreachable_returns_zero():
    resolver = resolver_for(line((0, 0), (5, 0), 'seg'))
    result = angle_to_match_length_x('seg', 20.0, sketch_ending_at(0, 0), resolver)

    assert result == 0
    assert isinstance(result, float)


def test_angle_to_match_length_y_exact_reach():
    resolver = resolver_for(line((0, 0), (0, 15), 'seg'))
    result = angle_to_match_length_y('seg', 15.0, sketch_ending_at(4, 0), resolver)

    assert math.isclose(result, 90.0)


def test_angle_to_match_length_y_unreachable_returns_zero():
    resolver = resolver_for(line((0, 0), (0, 1), 'seg'))
    assert angle_to_match_length_y('seg', -50.0, sketch_ending_at(0, 0), resolver) == 0.0


def test_angle_to_match_length_partial_reach():
    resolver = resolver_for(line((0, 0), (10, 0), 'seg'))
    sketch = sketch_ending_at(0, 0)

    assert math.isclose(angle_to_match_length_x('seg', -5.0, sketch, resolver), 60.0)
    assert math.isclose(angle_to_match_length_y('seg', 5.0, sketch, resolver), 30.0)


def test_angle_to_match_length_requires_segments():
    resolver = resolver_for(line((0, 0), (10, 0), 'seg'))

    with pytest.raises(EmptySketchError):
        angle_to_match_length_x('seg', 1.0, Sketch(), resolver)


def test_angle_to_match_length_with_zero_length_segment_is_nan():
    resolver = resolver_for(line((2, 2), (2, 2), 'dot'))
    assert math.isnan(angle_to_match_length_x('dot', 0.0, sketch_ending_at(0, 0), resolver))


def test_tangent_of_straight_segment_matches_next_straight_segment():
    first = line((0, 0), (3, 4), 'first')
    second = line((3, 4), (6, 8), 'second')
    resolver = resolver_for(first, second)

    tangent = asyncio.run(tangent_to_end('first', resolver))
    assert math.isclose(tangent, segment_angle('second', resolver), abs_tol=1e-9)


def test_tangent_after_arc_matches_following_line():
    arc = TangentialArcTo(
        BasePath(Point2d(20, 0), Point2d(20, 10), tag='arc1'), center=Point2d(20, 5), ccw=True
    )
    top = line((20, 10), (0, 10), 'top')
    resolver = resolver_for(arc, top)

    tangent = asyncio.run(tangent_to_end('arc1', resolver))
    assert math.isclose(tangent, 180.0)
    assert math.isclose(tangent, segment_angle('top', resolver))


def test_tangent_to_end_reports_unbound_tag():
    with pytest.raises(UnresolvedTagError):
        asyncio.run(tangent_to_end(TagIdentifier('nope', Span(1, 1)), resolver_for()))
