"""
Ear clipping triangulation of simple polygons.

Repeatedly clips an ear off the polygon state until two vertices remain.
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence
import logging

try:
    from .geometry import Point, Triangle, signed_area
    from .tracker import PolygonState
    from .errors import NonSimplePolygonError
    from .config import TriangulationConfig
except ImportError:
    from geometry import Point, Triangle, signed_area
    from tracker import PolygonState
    from errors import NonSimplePolygonError
    from config import TriangulationConfig


logger = logging.getLogger(__name__)


@dataclass
class TriangulationResult:
    """Outcome of a triangulation: either triangles or the error that stopped it."""
    triangles: list[Triangle] = field(default_factory=list)
    error: Optional[NonSimplePolygonError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __len__(self):
        return len(self.triangles)


def ring_order(vertices: Sequence[Point], auto_orient: bool = True) -> list[int]:
    """
    Vertex ids in the order the ring should be walked.

    Clockwise polygons are walked backwards when auto_orient is set, so the
    convexity test always sees a CCW ring.
    """
    order = list(range(len(vertices)))
    if auto_orient and len(vertices) >= 3 and signed_area(vertices) < 0:
        order.reverse()
    return order


def try_triangulate(vertices: Sequence[Point],
                    config: Optional[TriangulationConfig] = None) -> TriangulationResult:
    """
    Triangulate a simple polygon, reporting failure in the result.

    Args:
        vertices: List of (x, y) vertices in order (or an (n, 2) array)
        config: Triangulation settings (defaults if None)

    Returns:
        TriangulationResult with n - 2 triangles, or with error set and no
        triangles when the polygon is not simple
    """
    config = config or TriangulationConfig()

    polygon = PolygonState(
        vertices,
        order=ring_order(vertices, config.auto_orient),
        ear_order=config.ear_order,
    )
    triangles = []

    while polygon.size() > 2:
        # Two-ears theorem: a simple polygon always has an ear
        if not polygon.has_ear():
            error = NonSimplePolygonError(polygon.ring(), len(triangles))
            logger.warning("%s %d vertices left after %d triangles",
                           error, polygon.size(), len(triangles))
            return TriangulationResult(error=error)

        ear = polygon.next_ear()
        triangles.append(polygon.remove_vertex(ear))

    return TriangulationResult(triangles=triangles)


def triangulate(vertices: Sequence[Point],
                config: Optional[TriangulationConfig] = None) -> list[Triangle]:
    """
    Triangulate a simple polygon using ear clipping.

    Args:
        vertices: List of (x, y) vertices in order (or an (n, 2) array)
        config: Triangulation settings (defaults if None)

    Returns:
        List of n - 2 triangles, each as indices into vertices. Empty for
        fewer than three vertices.

    Raises:
        NonSimplePolygonError: if the polygon runs out of ears
    """
    result = try_triangulate(vertices, config)
    if result.error is not None:
        raise result.error
    return result.triangles


def triangulate_polygon(vertices: Sequence[Point],
                        config: Optional[TriangulationConfig] = None) -> list[tuple[int, int, int]]:
    """Triangulate and return plain (i, j, k) index tuples."""
    return [tri.to_tuple() for tri in triangulate(vertices, config)]
