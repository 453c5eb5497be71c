#!/usr/bin/env python3
"""
Command-line polygon triangulation.

Usage:
    earclip [polygon.json] [options]

Options:
    --config        Triangulation config JSON (default: <polygon>.earclip.json)
    --ear-order     Ear selection order: area or index
    --no-orient     Do not reverse clockwise polygons
    --check         Validate the triangulation
    --plot          Save a plot of the triangulation
    --debug         Log every clipped ear

Example:
    earclip outline.json --check --plot outline.png
"""

import sys
import json
import argparse
import logging

try:
    from .config import TriangulationConfig, EAR_ORDERS
    from .errors import TriangulationError
    from .triangulation import triangulate
    from .validation import check_triangulation
    from .plot import plot_triangulation
except ImportError:
    from config import TriangulationConfig, EAR_ORDERS
    from errors import TriangulationError
    from triangulation import triangulate
    from validation import check_triangulation
    from plot import plot_triangulation


# Concave quad with a collinear spike at vertex 0
SAMPLE_POLYGON = [(2.0, 0.0), (1.0, 0.0), (0.0, 1.0), (-1.0, 0.0)]


def load_polygon(filepath: str) -> list[tuple[float, float]]:
    """
    Load polygon vertices from a JSON file.

    Accepts either a list of [x, y] pairs or an object with a "vertices" list.
    """
    with open(filepath, 'r') as f:
        data = json.load(f)

    if isinstance(data, dict):
        if "vertices" not in data:
            raise ValueError(f"{filepath}: missing \"vertices\" list")
        data = data["vertices"]

    vertices = []
    for item in data:
        if len(item) != 2:
            raise ValueError(f"Vertex must have 2 coordinates, got {item!r}")
        vertices.append((float(item[0]), float(item[1])))
    return vertices


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description='Triangulate a simple polygon by ear clipping',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s outline.json
  %(prog)s outline.json --ear-order index --check --plot outline.png
        """
    )
    parser.add_argument('input', nargs='?',
                        help='Polygon JSON file (default: built-in sample polygon)')
    parser.add_argument('--config',
                        help='Triangulation config JSON file')
    parser.add_argument('--ear-order', choices=EAR_ORDERS,
                        help='Ear selection order (overrides config)')
    parser.add_argument('--no-orient', action='store_true',
                        help='Do not reverse clockwise polygons')
    parser.add_argument('--check', action='store_true',
                        help='Validate the triangulation')
    parser.add_argument('--plot', metavar='FILE',
                        help='Save a plot of the triangulation')
    parser.add_argument('--debug', action='store_true',
                        help='Log every clipped ear')

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    try:
        if args.config:
            config = TriangulationConfig.load(args.config)
        elif args.input:
            config = TriangulationConfig.load_for_polygon(args.input)
        else:
            config = TriangulationConfig()

        if args.ear_order:
            config.ear_order = args.ear_order
        if args.no_orient:
            config.auto_orient = False

        errors = config.validate()
        if errors:
            for error in errors:
                print(f"ERROR: {error}")
            return 1

        vertices = load_polygon(args.input) if args.input else SAMPLE_POLYGON
    except (OSError, ValueError, TypeError) as e:
        print(f"ERROR: {e}")
        return 1

    try:
        triangles = triangulate(vertices, config)
    except TriangulationError as e:
        print(e)
        return 1

    for tri in triangles:
        print(f"A: {tri.a}, B: {tri.b}, C: {tri.c}")

    status = 0
    if args.check:
        result = check_triangulation(vertices, triangles, config)
        for warning in result.warnings:
            print(f"{warning.severity.upper()}: {warning.message}")
        if not result.is_valid:
            status = 1

    if args.plot:
        plot_triangulation(vertices, triangles, filename=args.plot)
        print(f"Saved to {args.plot}")

    return status


if __name__ == '__main__':
    sys.exit(main())
