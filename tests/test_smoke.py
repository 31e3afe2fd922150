import asyncio
import math
from pathlib import Path

from sketch_query import (
    Args,
    MappingTagLookup,
    Span,
    TagResolver,
    call_std,
    load_sketch,
)

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def test_pill_example_end_to_end():
    sketch = load_sketch(EXAMPLES / 'pill.json')
    resolver = TagResolver(MappingTagLookup.from_sketch(sketch))

    async def query(name, *values):
        return await call_std(name, Args(values=list(values), span=Span(1, 1), resolver=resolver))

    async def scenario():
        return {
            'arc_end': await query('segEnd', 'arc1'),
            'arc_len': await query('segLen', 'arc1'),
            'arc_tangent': await query('tangentToEnd', 'arc1'),
            'top_angle': await query('segAng', 'top'),
            'last_x': await query('lastSegX', sketch),
            'match_x': await query('angleToMatchLengthX', 'line1', 10, sketch),
        }

    results = asyncio.run(scenario())

    assert results['arc_end'] == [20.0, 10.0]
    assert math.isclose(results['arc_len'], 5 * math.pi)
    assert math.isclose(results['arc_tangent'], results['top_angle'])
    assert results['last_x'] == 0.0
    assert math.isclose(results['match_x'], 60.0)
