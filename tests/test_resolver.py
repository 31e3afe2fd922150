import asyncio

import pytest

from sketch_query.ast import Span, TagIdentifier
from sketch_query.errors import InvalidArgumentsError, NotASegmentError, QueryError, UnresolvedTagError
from sketch_query.model import BasePath, Point2d, Sketch, TagEngineInfo, ToPoint
from sketch_query.resolver import MappingTagLookup, TagResolver


def line(frm, to, tag=None):
    return ToPoint(BasePath(Point2d(*frm), Point2d(*to), tag=tag))


def make_resolver(**bindings):
    return TagResolver(MappingTagLookup(bindings))


def test_resolve_returns_bound_segment():
    seg = line((0, 0), (5, 0), 'line1')
    resolver = make_resolver(line1=TagEngineInfo(id='line1', path=seg))

    assert resolver.resolve('line1') is seg
    assert resolver.resolve(TagIdentifier('line1', Span(2, 4))) is seg


def test_unbound_tag_reports_name_and_location():
    resolver = make_resolver()

    with pytest.raises(UnresolvedTagError) as exc:
        resolver.resolve(TagIdentifier('line9'), Span(5, 3))

    assert 'line9' in exc.value.message
    assert exc.value.source_ranges == [Span(5, 3)]
    assert str(exc.value).startswith('[line 5, col 3]')
    assert isinstance(exc.value, TypeError)


def test_error_carries_call_and_tag_spans():
    resolver = make_resolver()

    with pytest.raises(QueryError) as exc:
        resolver.resolve(TagIdentifier('missing', Span(1, 10)), Span(7, 2))

    assert exc.value.source_ranges == [Span(7, 2), Span(1, 10)]


def test_non_geometric_binding_is_not_a_segment():
    resolver = make_resolver(face=TagEngineInfo(id='face', path=None, surface='cap'))

    with pytest.raises(NotASegmentError) as exc:
        resolver.resolve('face', Span(3, 1))

    assert 'Expected a line segment with a path' in str(exc.value)


def test_info_attached_to_tag_wins_over_lookup():
    attached = line((0, 0), (1, 1))
    stale = line((9, 9), (8, 8))
    resolver = make_resolver(seg=TagEngineInfo(id='seg', path=stale))

    tag = TagIdentifier('seg', info=TagEngineInfo(id='seg', path=attached))
    assert resolver.resolve(tag) is attached


def test_from_sketch_binds_tagged_segments():
    first = line((0, 0), (1, 0), 'a')
    second = line((1, 0), (1, 1))
    third = line((1, 1), (0, 1), 'b')
    lookup = MappingTagLookup.from_sketch(Sketch(paths=[first, second, third], name='profile'))

    assert lookup.names() == ['a', 'b']
    info = lookup.get_tag_engine_info('b')
    assert info.path is third
    assert info.sketch == 'profile'
    assert lookup.get_tag_engine_info('c') is None


class AsyncLookup:
    def __init__(self, bindings):
        self.bindings = bindings
        self.calls = []

    async def get_tag_engine_info(self, name):
        self.calls.append(name)
        await asyncio.sleep(0)
        return self.bindings.get(name)


def test_resolve_async_awaits_lookup():
    seg = line((0, 0), (2, 0))
    lookup = AsyncLookup({'seg': TagEngineInfo(id='seg', path=seg)})
    resolver = TagResolver(lookup)

    assert asyncio.run(resolver.resolve_async('seg')) is seg
    assert lookup.calls == ['seg']


def test_resolve_async_reports_unbound_tag():
    resolver = TagResolver(AsyncLookup({}))

    with pytest.raises(UnresolvedTagError):
        asyncio.run(resolver.resolve_async('nope', Span(1, 1)))


def test_sync_resolve_refuses_async_lookup():
    resolver = TagResolver(AsyncLookup({}))

    with pytest.raises(InvalidArgumentsError) as exc:
        resolver.resolve(TagIdentifier('seg', Span(2, 4)), Span(6, 1))

    assert isinstance(exc.value, QueryError)
    assert 'resolve_async' in exc.value.message
    assert exc.value.source_ranges == [Span(6, 1), Span(2, 4)]
