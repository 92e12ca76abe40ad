"""
Quadra CLI - Main entry point.

Runs geometry queries on a single pair of rectangles given on the command
line.
"""

import argparse
import json
import sys
from typing import Any, Dict, List, Optional

from quadra_geometry import Point, Rectangle


def build_rectangle(values: List[float]) -> Rectangle:
    """
    Build a rectangle from [x, y, width, height].

    Raises:
        InvalidDimensionError: If width or height is not positive
    """
    x, y, width, height = values
    return Rectangle(origin=Point(x, y), width=width, height=height)


def run_query(command: str, first: Rectangle, second: Rectangle) -> Dict[str, Any]:
    """
    Execute one query and return a JSON-compatible result.

    Args:
        command: compare, contains, intersect or adjacency
        first: Rectangle 1
        second: Rectangle 2
    """
    result: Dict[str, Any] = {}

    if command in ('compare', 'contains'):
        result['first_inside_second'] = first.is_contained_inside(second)
        result['second_inside_first'] = second.is_contained_inside(first)

    if command in ('compare', 'adjacency'):
        result['adjacency'] = first.is_adjacent(second).to_dict()

    if command in ('compare', 'intersect'):
        result['intersections'] = [
            point.to_dict() for point in first.intersecting_points(second)
        ]

    return result


def format_result(result: Dict[str, Any]) -> List[str]:
    lines = []

    if 'first_inside_second' in result:
        lines.append(f"Rectangle 1 inside Rectangle 2: {result['first_inside_second']}")
        lines.append(f"Rectangle 2 inside Rectangle 1: {result['second_inside_first']}")

    if 'adjacency' in result:
        adjacency = result['adjacency']
        lines.append(
            f"Adjacent: {adjacency['is_adjacent']} (type: {adjacency['adjacency_type']})"
        )

    if 'intersections' in result:
        points = result['intersections']
        lines.append(f"Intersection points: {len(points)}")
        for point in points:
            lines.append(f"  ({point['x']}, {point['y']})")

    return lines


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Quadra CLI - Compare two axis-aligned rectangles",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Every relation at once
  quadra-cli compare --first 5 5 5 5 --second 10 5 5 5

  # Single queries
  quadra-cli contains --first 2 2 5 5 --second 0 0 10 10
  quadra-cli intersect --first 5 5 10 10 --second 7 3 5 20
  quadra-cli adjacency --first 5 5 5 10 --second 10 7 5 5

  # JSON output
  quadra-cli --json compare --first 5 5 5 5 --second 10 5 5 5
"""
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )

    subparsers = parser.add_subparsers(dest='command', help='Available queries')

    for name, help_text in (
        ('compare', 'Containment, adjacency and intersections'),
        ('contains', 'Containment in both directions'),
        ('intersect', 'Points where perpendicular sides cross'),
        ('adjacency', 'Adjacency classification'),
    ):
        query = subparsers.add_parser(name, help=help_text)
        query.add_argument(
            '--first', type=float, nargs=4, required=True,
            metavar=('X', 'Y', 'W', 'H'), help='Rectangle 1: origin x, origin y, width, height'
        )
        query.add_argument(
            '--second', type=float, nargs=4, required=True,
            metavar=('X', 'Y', 'W', 'H'), help='Rectangle 2: origin x, origin y, width, height'
        )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        first = build_rectangle(args.first)
        second = build_rectangle(args.second)
    except ValueError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)

    result = run_query(args.command, first, second)

    if args.json:
        print(json.dumps(result, indent=2))
    else:
        for line in format_result(result):
            print(line)


if __name__ == '__main__':
    main()
