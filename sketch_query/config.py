"""Configuration helpers for query components."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class QueryConfig:
    # Distance from an arc's end to the reference point placed behind it.
    tangent_reach: float = 10.0
    # Vertical offset of the reference point used for circles.
    circle_tangent_offset: float = 1.0


_QUERY_CONFIG = QueryConfig()


def get_query_config() -> QueryConfig:
    return copy.deepcopy(_QUERY_CONFIG)


def set_query_config(config: QueryConfig) -> None:
    global _QUERY_CONFIG
    _QUERY_CONFIG = copy.deepcopy(config)


def reset_query_config() -> None:
    set_query_config(QueryConfig())
