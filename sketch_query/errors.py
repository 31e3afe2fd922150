"""Errors raised by sketch queries.

Every error is a ``TypeError`` carrying a message plus the source spans
that triggered the query, so the evaluator can point at the offending call.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from .ast import Span


class QueryError(TypeError):
    """Base class for all query failures."""

    def __init__(self, message: str, source_ranges: Optional[Sequence[Span]] = None) -> None:
        self.message = message
        self.source_ranges: List[Span] = list(source_ranges or [])
        super().__init__(self._render())

    def _render(self) -> str:
        if not self.source_ranges:
            return self.message
        return f'{self.source_ranges[0]} {self.message}'


class UnresolvedTagError(QueryError):
    """The tag has no bound value."""


class NotASegmentError(QueryError):
    """The tag is bound, but not to something with a geometric path."""


class EmptySketchError(QueryError):
    """A last-segment query ran against a sketch with no segments."""


class InvalidArgumentsError(QueryError):
    """Arguments handed over by the evaluator have the wrong shape or type."""


__all__ = [
    "QueryError",
    "UnresolvedTagError",
    "NotASegmentError",
    "EmptySketchError",
    "InvalidArgumentsError",
]
