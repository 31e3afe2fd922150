import argparse
import logging
import sys
from typing import Optional, Sequence

from sketch_query import (
    Args,
    MappingTagLookup,
    QueryError,
    STD_FUNCTIONS,
    SKETCH_FUNCTIONS,
    Span,
    TAG_NUMBER_SKETCH_FUNCTIONS,
    TagResolver,
    load_sketch,
    run_std,
    summarize_sketch,
)

logger = logging.getLogger(__name__)

# Queries issued from the command line have no program text to point into.
CLI_SPAN = Span(1, 1)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _print_summary(sketch) -> None:
    summary = summarize_sketch(sketch)
    print(f"Sketch: {sketch.name or '(unnamed)'} on {sketch.on}")
    print("Segments:")
    for idx, kind in enumerate(summary.kinds):
        tag = summary.tags[idx] or "-"
        print(f"  [{idx}] {kind:<16} tag={tag:<10} length={summary.lengths[idx]:.6f} angle={summary.angles[idx]:.6f}")
    print(f"Total length: {summary.total_length:.6f}")
    if summary.bounds:
        (min_x, min_y), (max_x, max_y) = summary.bounds
        print(f"Bounds: ({min_x:.6f}, {min_y:.6f}) - ({max_x:.6f}, {max_y:.6f})")
    for note in summary.notes:
        print(f"  note: {note}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Query tagged segments of a sketch")
    parser.add_argument("path", help="Path to the sketch JSON file")
    parser.add_argument(
        "function",
        nargs="?",
        choices=sorted(STD_FUNCTIONS),
        help="Query to run",
    )
    parser.add_argument("tag", nargs="?", help="Tag the query refers to")
    parser.add_argument(
        "--to",
        type=float,
        help="Target coordinate for angleToMatchLengthX/Y",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print per-segment lengths and angles",
    )
    parser.add_argument(
        "--list-tags",
        action="store_true",
        help="Print the tags bound in the sketch",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Loading sketch from %s", args.path)
    try:
        sketch = load_sketch(args.path)
    except (OSError, ValueError) as exc:
        logger.error("Could not load sketch: %s", exc)
        raise SystemExit(1) from exc

    lookup = MappingTagLookup.from_sketch(sketch)

    if args.list_tags:
        print("Tags:")
        for name in lookup.names():
            print(f"  {name}")
    if args.summary:
        _print_summary(sketch)
    if not args.function:
        return

    if args.function in SKETCH_FUNCTIONS:
        values = [sketch]
    elif args.function in TAG_NUMBER_SKETCH_FUNCTIONS:
        if args.to is None:
            parser.error(f"{args.function} requires --to")
        values = [args.tag, args.to, sketch]
    else:
        values = [args.tag]

    query_args = Args(values=values, span=CLI_SPAN, resolver=TagResolver(lookup))
    try:
        result = run_std(args.function, query_args)
    except QueryError as exc:
        logger.error("%s failed: %s", args.function, exc)
        raise SystemExit(1) from exc

    logger.info("%s succeeded", args.function)
    if isinstance(result, list):
        print(f"{args.function}: ({result[0]:.6f}, {result[1]:.6f})")
    else:
        print(f"{args.function}: {result:.6f}")


if __name__ == "__main__":
    main(sys.argv[1:])
