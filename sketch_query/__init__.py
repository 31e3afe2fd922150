from .ast import Span, TagIdentifier
from .errors import (
    QueryError,
    UnresolvedTagError,
    NotASegmentError,
    EmptySketchError,
    InvalidArgumentsError,
)
from .model import (
    Point2d,
    BasePath,
    ToPoint,
    Horizontal,
    AngledLineTo,
    Base,
    TangentialArc,
    TangentialArcTo,
    Arc,
    Circle,
    Path,
    Sketch,
    TagEngineInfo,
    path_length,
)
from .config import QueryConfig, get_query_config, set_query_config, reset_query_config
from .tangent import TangentInfo, get_tangential_info, tan_previous_point, tangent_angle
from .resolver import TagLookup, MappingTagLookup, TagResolver
from .segment import (
    segment_start,
    segment_start_x,
    segment_start_y,
    segment_end,
    segment_end_x,
    segment_end_y,
    last_segment_x,
    last_segment_y,
    segment_length,
    segment_angle,
    tangent_to_end,
    angle_to_match_length_x,
    angle_to_match_length_y,
)
from .stdlib import Args, STD_FUNCTIONS, SKETCH_FUNCTIONS, TAG_NUMBER_SKETCH_FUNCTIONS, call_std, run_std
from .loader import load_sketch, sketch_from_dict, sketch_to_dict
from .summary import SketchSummary, summarize_sketch

__all__ = [
    'Span',
    'TagIdentifier',
    'QueryError',
    'UnresolvedTagError',
    'NotASegmentError',
    'EmptySketchError',
    'InvalidArgumentsError',
    'Point2d',
    'BasePath',
    'ToPoint',
    'Horizontal',
    'AngledLineTo',
    'Base',
    'TangentialArc',
    'TangentialArcTo',
    'Arc',
    'Circle',
    'Path',
    'Sketch',
    'TagEngineInfo',
    'path_length',
    'QueryConfig',
    'get_query_config',
    'set_query_config',
    'reset_query_config',
    'TangentInfo',
    'get_tangential_info',
    'tan_previous_point',
    'tangent_angle',
    'TagLookup',
    'MappingTagLookup',
    'TagResolver',
    'segment_start',
    'segment_start_x',
    'segment_start_y',
    'segment_end',
    'segment_end_x',
    'segment_end_y',
    'last_segment_x',
    'last_segment_y',
    'segment_length',
    'segment_angle',
    'tangent_to_end',
    'angle_to_match_length_x',
    'angle_to_match_length_y',
    'Args',
    'STD_FUNCTIONS',
    'SKETCH_FUNCTIONS',
    'TAG_NUMBER_SKETCH_FUNCTIONS',
    'call_std',
    'run_std',
    'load_sketch',
    'sketch_from_dict',
    'sketch_to_dict',
    'SketchSummary',
    'summarize_sketch',
]
