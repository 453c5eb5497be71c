"""
Validation of triangulation output.

Checks for:
- Triangle count (n - 2 for an n-vertex polygon)
- Out of range or repeated vertex indices
- Triangle areas not adding up to the polygon area
- Triangles overlapping each other
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence
import math

import numpy as np

try:
    from .geometry import Point, Triangle, signed_area, triangle_area
    from .config import TriangulationConfig
except ImportError:
    from geometry import Point, Triangle, signed_area, triangle_area
    from config import TriangulationConfig


@dataclass
class ValidationWarning:
    """A single validation warning."""
    category: str  # "count", "indices", "area", "overlap"
    severity: str  # "error", "warning", "info"
    message: str
    details: dict = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Results of all validation checks."""
    warnings: list[ValidationWarning] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return any(w.severity == "error" for w in self.warnings)

    @property
    def is_valid(self) -> bool:
        return not self.has_errors

    @property
    def error_count(self) -> int:
        return sum(1 for w in self.warnings if w.severity == "error")

    def get_by_category(self, category: str) -> list[ValidationWarning]:
        return [w for w in self.warnings if w.category == category]


def _as_tuples(triangles: Iterable) -> list[tuple[int, int, int]]:
    return [tuple(int(i) for i in tri) for tri in triangles]


def check_triangle_count(vertices: Sequence[Point], triangles: Iterable) -> list[ValidationWarning]:
    """A polygon with n >= 3 vertices needs exactly n - 2 triangles."""
    n = len(vertices)
    expected = max(n - 2, 0)
    actual = len(_as_tuples(triangles))
    if actual == expected:
        return []
    return [ValidationWarning(
        category="count",
        severity="error",
        message=f"Expected {expected} triangles for {n} vertices, got {actual}",
        details={"expected": expected, "actual": actual},
    )]


def check_indices(vertices: Sequence[Point], triangles: Iterable) -> list[ValidationWarning]:
    """Every index must be in range and distinct within its triangle."""
    warnings = []
    n = len(vertices)

    for i, tri in enumerate(_as_tuples(triangles)):
        out_of_range = [v for v in tri if not 0 <= v < n]
        if out_of_range:
            warnings.append(ValidationWarning(
                category="indices",
                severity="error",
                message=f"Triangle {i} {tri} references missing vertices {out_of_range}",
                details={"triangle": i, "indices": out_of_range},
            ))
        elif len(set(tri)) != 3:
            warnings.append(ValidationWarning(
                category="indices",
                severity="error",
                message=f"Triangle {i} {tri} repeats a vertex",
                details={"triangle": i},
            ))

    return warnings


def check_area(vertices: Sequence[Point], triangles: Iterable,
               tolerance: float = 1e-9) -> list[ValidationWarning]:
    """
    Compare the summed triangle area to the polygon area.

    Args:
        vertices: Polygon vertices
        triangles: Triangles as index triples (indices must be valid)
        tolerance: Relative tolerance (also used as absolute floor)
    """
    tris = np.asarray(_as_tuples(triangles), dtype=int).reshape(-1, 3)
    points = np.asarray(vertices, dtype=float).reshape(-1, 2)

    a = points[tris[:, 0]]
    b = points[tris[:, 1]]
    c = points[tris[:, 2]]
    ab = b - a
    ac = c - a
    areas = np.abs(ab[:, 0] * ac[:, 1] - ab[:, 1] * ac[:, 0]) / 2.0

    total = float(areas.sum())
    polygon_area = abs(signed_area(vertices)) if len(vertices) >= 3 else 0.0

    if math.isclose(total, polygon_area, rel_tol=tolerance, abs_tol=tolerance):
        return []
    return [ValidationWarning(
        category="area",
        severity="error",
        message=f"Triangle area {total:.6g} does not match polygon area {polygon_area:.6g}",
        details={"triangle_area": total, "polygon_area": polygon_area},
    )]


def _triangles_overlap(t1: Sequence[Point], t2: Sequence[Point], eps: float) -> bool:
    """
    Separating axis test for two triangles.

    Triangles that only touch along an edge or at a corner do not overlap.
    """
    if triangle_area(*t1) <= eps or triangle_area(*t2) <= eps:
        return False

    for tri in (t1, t2):
        for i in range(3):
            p, q = tri[i], tri[(i + 1) % 3]
            nx, ny = q[1] - p[1], p[0] - q[0]
            length = math.hypot(nx, ny)
            if length == 0:
                continue
            nx, ny = nx / length, ny / length

            proj1 = [nx * x + ny * y for x, y in t1]
            proj2 = [nx * x + ny * y for x, y in t2]
            if max(proj1) <= min(proj2) + eps or max(proj2) <= min(proj1) + eps:
                return False

    return True


def check_overlaps(vertices: Sequence[Point], triangles: Iterable,
                   tolerance: float = 1e-9) -> list[ValidationWarning]:
    """Check that no two triangles share interior area (indices must be valid)."""
    tris = _as_tuples(triangles)
    if not tris:
        return []

    xs = [float(v[0]) for v in vertices]
    ys = [float(v[1]) for v in vertices]
    extent = max(max(xs) - min(xs), max(ys) - min(ys), 1.0)
    eps = tolerance * extent

    real = [[(float(vertices[i][0]), float(vertices[i][1])) for i in tri] for tri in tris]
    boxes = [
        (min(p[0] for p in t), min(p[1] for p in t), max(p[0] for p in t), max(p[1] for p in t))
        for t in real
    ]

    warnings = []
    for i in range(len(real)):
        for j in range(i + 1, len(real)):
            bi, bj = boxes[i], boxes[j]
            if bi[2] <= bj[0] or bj[2] <= bi[0] or bi[3] <= bj[1] or bj[3] <= bi[1]:
                continue
            if _triangles_overlap(real[i], real[j], eps):
                warnings.append(ValidationWarning(
                    category="overlap",
                    severity="error",
                    message=f"Triangles {tris[i]} and {tris[j]} overlap",
                    details={"first": i, "second": j},
                ))

    return warnings


def check_triangulation(
    vertices: Sequence[Point],
    triangles: Iterable[Triangle],
    config: Optional[TriangulationConfig] = None
) -> ValidationResult:
    """
    Run all validation checks on a triangulation.

    Area and overlap checks are skipped when indices are invalid.

    Args:
        vertices: Polygon vertices the triangles index into
        triangles: Triangles (Triangle objects or index triples)
        config: Triangulation configuration (for area_tolerance)

    Returns:
        ValidationResult with all warnings
    """
    config = config or TriangulationConfig()
    triangles = _as_tuples(triangles)
    result = ValidationResult()

    result.warnings.extend(check_triangle_count(vertices, triangles))

    index_warnings = check_indices(vertices, triangles)
    result.warnings.extend(index_warnings)
    if index_warnings:
        return result

    result.warnings.extend(check_area(vertices, triangles, config.area_tolerance))
    result.warnings.extend(check_overlaps(vertices, triangles, config.area_tolerance))

    return result
