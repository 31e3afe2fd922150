"""Resolve symbolic tags to the segments they were bound to."""

from __future__ import annotations

import inspect
import logging
from typing import Awaitable, Mapping, Optional, Protocol, Union

from .ast import Span, TagIdentifier, span_list
from .errors import InvalidArgumentsError, NotASegmentError, UnresolvedTagError
from .model import Path, Sketch, TagEngineInfo

logger = logging.getLogger(__name__)

LookupResult = Optional[TagEngineInfo]


class TagLookup(Protocol):
    """Read-only view of the evaluator's tag bindings."""

    def get_tag_engine_info(self, name: str) -> Union[LookupResult, Awaitable[LookupResult]]:
        ...


class MappingTagLookup:
    """Tag lookup backed by a plain mapping of name to engine info."""

    def __init__(self, bindings: Mapping[str, TagEngineInfo]):
        self._bindings = dict(bindings)

    @classmethod
    def from_sketch(cls, sketch: Sketch) -> "MappingTagLookup":
        bindings = {
            tag: TagEngineInfo(id=tag, sketch=sketch.name or None, path=path)
            for tag, path in sketch.tagged_paths().items()
        }
        logger.debug("Bound %d tag(s) from sketch %r", len(bindings), sketch.name)
        return cls(bindings)

    def get_tag_engine_info(self, name: str) -> LookupResult:
        return self._bindings.get(name)

    def names(self):
        return list(self._bindings)


def _as_tag(tag: Union[TagIdentifier, str]) -> TagIdentifier:
    return tag if isinstance(tag, TagIdentifier) else TagIdentifier(str(tag))


class TagResolver:
    def __init__(self, lookup: TagLookup):
        self.lookup = lookup

    def _unresolved(self, tag: TagIdentifier, span: Optional[Span]) -> UnresolvedTagError:
        return UnresolvedTagError(
            f"Tag `{tag.value}` does not have engine info",
            span_list(span, tag.span),
        )

    def _path_of(self, tag: TagIdentifier, info: TagEngineInfo, span: Optional[Span]) -> Path:
        if info.path is None:
            raise NotASegmentError(
                f"Expected a line segment with a path, found `{info!r}`",
                span_list(span, tag.span),
            )
        return info.path

    def engine_info(self, tag: Union[TagIdentifier, str], span: Optional[Span] = None) -> TagEngineInfo:
        tag = _as_tag(tag)
        info = tag.info if tag.info is not None else self.lookup.get_tag_engine_info(tag.value)
        if inspect.isawaitable(info):
            if inspect.iscoroutine(info):
                info.close()
            raise InvalidArgumentsError(
                f"Lookup for tag `{tag.value}` is asynchronous; use resolve_async",
                span_list(span, tag.span),
            )
        if info is None:
            raise self._unresolved(tag, span)
        return info

    def resolve(self, tag: Union[TagIdentifier, str], span: Optional[Span] = None) -> Path:
        tag = _as_tag(tag)
        path = self._path_of(tag, self.engine_info(tag, span), span)
        logger.debug("Resolved %s to %s", tag, path.kind)
        return path

    async def resolve_async(self, tag: Union[TagIdentifier, str], span: Optional[Span] = None) -> Path:
        tag = _as_tag(tag)
        info = tag.info if tag.info is not None else self.lookup.get_tag_engine_info(tag.value)
        if inspect.isawaitable(info):
            info = await info
        if info is None:
            raise self._unresolved(tag, span)
        path = self._path_of(tag, info, span)
        logger.debug("Resolved %s to %s", tag, path.kind)
        return path


__all__ = ["TagLookup", "MappingTagLookup", "TagResolver"]
