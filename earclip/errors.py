"""Exceptions raised by the triangulator."""


class TriangulationError(ValueError):
    """Base class for polygons that cannot be triangulated."""


class NonSimplePolygonError(TriangulationError):
    """
    No ear is left while more than two vertices remain.

    By the two-ears theorem this only happens when the input is not a simple
    polygon (self-intersecting, or degenerate).
    """

    def __init__(self, remaining: list[int], triangles_clipped: int = 0):
        self.remaining = list(remaining)
        self.triangles_clipped = triangles_clipped
        super().__init__("Triangulation failed; polygon is non-simple.")


class VertexNotInRingError(LookupError):
    """A vertex index was used that is not part of the current ring."""

    def __init__(self, vertex: int):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex} is not in the polygon ring")


class EmptyEarSetError(LookupError):
    """next_ear() was called while no ear is available."""

    def __init__(self):
        super().__init__("Ear set is empty; check has_ear() first")
