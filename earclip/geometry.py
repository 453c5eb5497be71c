"""
Geometry predicates for ear clipping.

Points are plain (x, y) pairs. Triangles are stored by vertex index and only
resolved to coordinates when a predicate needs them.
"""

from dataclasses import dataclass
from typing import Sequence


Point = tuple[float, float]


@dataclass
class Triangle:
    """A triangle made of three vertex indices (B is the clipped vertex)."""
    a: int
    b: int
    c: int

    def __iter__(self):
        yield self.a
        yield self.b
        yield self.c

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.a, self.b, self.c)


def orientation(p: Point, q: Point, r: Point) -> float:
    """
    Twice the signed area of the triangle pqr.
    Positive = CCW turn at q, Negative = CW turn, Zero = collinear
    """
    return (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])


def is_convex(a: Point, b: Point, c: Point) -> bool:
    """
    Check if b is a convex vertex (interior angle < 180 degrees).

    For a CCW polygon, convex means a positive turn. A collinear vertex is
    convex only when the two edges fold back on each other (a zero-degree
    spike); a straight 180 degree vertex is not.
    """
    turn = orientation(a, b, c)
    if turn != 0:
        return turn > 0
    dot = (b[0] - a[0]) * (c[0] - b[0]) + (b[1] - a[1]) * (c[1] - b[1])
    return dot < 0


def is_reflex(a: Point, b: Point, c: Point) -> bool:
    """Check if b is a reflex vertex (every vertex that is not convex)."""
    return not is_convex(a, b, c)


def point_in_triangle(p: Point, a: Point, b: Point, c: Point) -> bool:
    """Check if point p is inside triangle abc or on its boundary."""
    d1 = orientation(a, b, p)
    d2 = orientation(b, c, p)
    d3 = orientation(c, a, p)

    has_neg = (d1 < 0) or (d2 < 0) or (d3 < 0)
    has_pos = (d1 > 0) or (d2 > 0) or (d3 > 0)

    return not (has_neg and has_pos)


def signed_area(polygon: Sequence[Point]) -> float:
    """
    Calculate signed area of polygon.
    Positive = CCW, Negative = CW (in standard Y-up coordinates)
    """
    n = len(polygon)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += polygon[i][0] * polygon[j][1]
        area -= polygon[j][0] * polygon[i][1]
    return area / 2.0


def triangle_area(a: Point, b: Point, c: Point) -> float:
    """Unsigned area of triangle abc."""
    return abs(orientation(a, b, c)) / 2.0


def real_triangle(vertices: Sequence[Point], tri: Triangle) -> tuple[Point, Point, Point]:
    """Resolve a triangle of indices to its three points."""
    return (vertices[tri.a], vertices[tri.b], vertices[tri.c])
