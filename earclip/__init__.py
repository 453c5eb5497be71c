"""
earclip - Triangulate simple polygons by ear clipping

Every vertex of the polygon is tracked as convex or reflex, and convex
vertices with no reflex vertex in their triangle as ears. Clipping an ear
only reclassifies its two neighbours.
"""

__version__ = "1.0.0"

from .geometry import Triangle, orientation, is_convex, is_reflex, point_in_triangle, signed_area
from .errors import TriangulationError, NonSimplePolygonError, VertexNotInRingError, EmptyEarSetError
from .config import TriangulationConfig
from .tracker import PolygonState
from .triangulation import TriangulationResult, triangulate, try_triangulate, triangulate_polygon
from .validation import ValidationResult, check_triangulation
