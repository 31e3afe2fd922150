"""Example: resolve tags in a pill-shaped sketch and query their geometry."""

import asyncio
from pathlib import Path

from sketch_query import (
    MappingTagLookup,
    TagResolver,
    load_sketch,
    segment_angle,
    segment_end,
    segment_length,
    tangent_to_end,
)

SKETCH_PATH = Path(__file__).with_name("pill.json")


def main() -> None:
    sketch = load_sketch(SKETCH_PATH)
    resolver = TagResolver(MappingTagLookup.from_sketch(sketch))

    for tag in ("line1", "arc1", "top"):
        end = segment_end(tag, resolver)
        print(f"{tag}:")
        print(f"  end: ({end.x:.6f}, {end.y:.6f})")
        print(f"  length: {segment_length(tag, resolver):.6f}")
        print(f"  angle: {segment_angle(tag, resolver):.6f}")
        print(f"  tangent at end: {asyncio.run(tangent_to_end(tag, resolver)):.6f}")


if __name__ == "__main__":
    main()
