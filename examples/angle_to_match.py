"""Example: pick the angle that lets a segment of known length land on x = 10."""

from sketch_query import (
    BasePath,
    MappingTagLookup,
    Point2d,
    Sketch,
    TagResolver,
    ToPoint,
    angle_to_match_length_x,
    angle_to_match_length_y,
)


def main() -> None:
    seg01 = ToPoint(BasePath(Point2d(0, 0), Point2d(2, 5), tag="seg01"))
    sketch = Sketch(paths=[seg01], name="sketch001", on="XZ")
    resolver = TagResolver(MappingTagLookup.from_sketch(sketch))

    for target in (3.0, 5.0, 10.0):
        angle_x = angle_to_match_length_x("seg01", target, sketch, resolver)
        angle_y = angle_to_match_length_y("seg01", target, sketch, resolver)
        print(f"target={target}: angleToMatchLengthX={angle_x:.6f} angleToMatchLengthY={angle_y:.6f}")


if __name__ == "__main__":
    main()
