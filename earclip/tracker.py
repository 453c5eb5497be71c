"""
Incremental polygon state for ear clipping.

Based on "Triangulation by Ear Clipping" by David Eberly. Every vertex still
on the ring is either convex or reflex, and convex vertices whose triangle
holds no reflex vertex are ears. Clipping an ear changes the neighbour
triangle of exactly two vertices, so only those two are reclassified.
"""

from typing import Optional, Sequence
import heapq
import logging

try:
    from . import geometry
    from .geometry import Point, Triangle
    from .errors import VertexNotInRingError, EmptyEarSetError
    from .config import EAR_ORDERS
except ImportError:
    import geometry
    from geometry import Point, Triangle
    from errors import VertexNotInRingError, EmptyEarSetError
    from config import EAR_ORDERS


logger = logging.getLogger(__name__)


class PolygonState:
    """
    Live ring of polygon vertices plus their convex/reflex/ear classification.

    The ring is a doubly linked list stored as two dicts (vertex -> previous,
    vertex -> next), so neighbour lookup and removal are O(1) and vertex
    indices are never renumbered. The coordinate sequence is only read.

    Invariants:
        - every ring vertex is in exactly one of convex, reflex
        - ears is a subset of convex
        - every ear has a live entry in the ear heap
    """

    def __init__(self,
                 vertices: Sequence[Point],
                 order: Optional[Sequence[int]] = None,
                 ear_order: str = "area"):
        """
        Build the ring and classify every vertex.

        Args:
            vertices: Polygon coordinates; indices into it are the vertex ids
            order: Ring order as a permutation of range(len(vertices)).
                Defaults to input order. The ring must wind CCW.
            ear_order: "area" clips the largest ear first, "index" the
                smallest vertex id. Ties always go to the smallest id.
        """
        if ear_order not in EAR_ORDERS:
            raise ValueError(f"Unknown ear order {ear_order!r}, expected one of {EAR_ORDERS}")

        n = len(vertices)
        ring = list(range(n)) if order is None else list(order)
        if sorted(ring) != list(range(n)):
            raise ValueError(f"order must be a permutation of 0..{n - 1}")

        self.vertices = vertices
        self.ear_order = ear_order

        self._prev: dict[int, int] = {}
        self._next: dict[int, int] = {}
        for i, v in enumerate(ring):
            self._prev[v] = ring[i - 1]
            self._next[v] = ring[(i + 1) % n]
        self._head = ring[0] if ring else None

        self._convex: set[int] = set()
        self._reflex: set[int] = set()
        self._ears: set[int] = set()

        # Lazy heap: an entry is live only while its priority matches _ear_keys
        self._ear_heap: list[tuple[float, int]] = []
        self._ear_keys: dict[int, float] = {}

        for v in ring:
            if geometry.is_convex(*self.build_real_triangle(v)):
                self._convex.add(v)
            else:
                self._reflex.add(v)

        for v in ring:
            if v in self._convex and self.is_ear(v, use_pre_test=False):
                self._add_ear(v)

        logger.debug("Polygon state: %d vertices, %d convex, %d reflex, %d ears",
                     n, len(self._convex), len(self._reflex), len(self._ears))

    def __len__(self) -> int:
        return len(self._next)

    def __contains__(self, vertex: int) -> bool:
        return vertex in self._next

    def __repr__(self) -> str:
        return (f"PolygonState(size={len(self)}, convex={len(self._convex)}, "
                f"reflex={len(self._reflex)}, ears={len(self._ears)})")

    def size(self) -> int:
        """Number of vertices still on the ring."""
        return len(self._next)

    def ring(self) -> list[int]:
        """Vertex ids in ring order."""
        if self._head is None:
            return []
        result = [self._head]
        v = self._next[self._head]
        while v != self._head:
            result.append(v)
            v = self._next[v]
        return result

    @property
    def convex(self) -> frozenset[int]:
        return frozenset(self._convex)

    @property
    def reflex(self) -> frozenset[int]:
        return frozenset(self._reflex)

    @property
    def ears(self) -> frozenset[int]:
        return frozenset(self._ears)

    def snapshot(self) -> dict[str, frozenset[int]]:
        """Copy of the three classification sets."""
        return {
            "convex": self.convex,
            "reflex": self.reflex,
            "ears": self.ears,
        }

    # -------------------------------------------------------------------------
    # Neighbour triangles
    # -------------------------------------------------------------------------

    def neighbors(self, vertex: int) -> tuple[int, int]:
        """Return (previous, next) of a ring vertex."""
        try:
            return self._prev[vertex], self._next[vertex]
        except KeyError:
            raise VertexNotInRingError(vertex) from None

    def build_triangle(self, vertex: int) -> Triangle:
        """Triangle (previous, vertex, next) as vertex ids."""
        prev_v, next_v = self.neighbors(vertex)
        return Triangle(prev_v, vertex, next_v)

    def build_real_triangle(self, vertex: int) -> tuple[Point, Point, Point]:
        return geometry.real_triangle(self.vertices, self.build_triangle(vertex))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def is_convex(self, vertex: int) -> bool:
        if vertex in self._convex:
            return True
        return geometry.is_convex(*self.build_real_triangle(vertex))

    def is_reflex(self, vertex: int) -> bool:
        if vertex in self._reflex:
            return True
        return geometry.is_reflex(*self.build_real_triangle(vertex))

    def is_ear(self, vertex: int, use_pre_test: bool = True) -> bool:
        """
        Check whether the vertex is convex and no reflex vertex lies in or on
        its triangle.

        Only reflex vertices can block an ear of a simple polygon. The two
        neighbours are skipped; a reflex vertex sits on its own triangle and
        so is never an ear.

        Args:
            vertex: Ring vertex to test
            use_pre_test: Trust the ear set if the vertex is already in it.
                Only valid while its neighbours are unchanged.
        """
        if use_pre_test and vertex in self._ears:
            return True

        tri = self.build_triangle(vertex)
        a, b, c = geometry.real_triangle(self.vertices, tri)

        for r in self._reflex:
            if r == tri.a or r == tri.c:
                continue
            if geometry.point_in_triangle(self.vertices[r], a, b, c):
                return False

        return True

    def has_ear(self) -> bool:
        return bool(self._ears)

    def next_ear(self) -> int:
        """
        Return the ear to clip next without removing it.

        Raises:
            EmptyEarSetError: if there is no ear (check has_ear() first)
        """
        heap = self._ear_heap
        while heap:
            priority, vertex = heap[0]
            if self._ear_keys.get(vertex) == priority:
                return vertex
            heapq.heappop(heap)
        raise EmptyEarSetError()

    # -------------------------------------------------------------------------
    # Updates
    # -------------------------------------------------------------------------

    def update_vertex_convexity(self, vertex: int) -> bool:
        """
        Reclassify a vertex from its current neighbours.

        Returns:
            True if convex (an ear check should follow), False if reflex
        """
        if geometry.is_convex(*self.build_real_triangle(vertex)):
            self._convex.add(vertex)
            self._reflex.discard(vertex)
            return True

        self._convex.discard(vertex)
        self._reflex.add(vertex)
        self._remove_ear(vertex)
        return False

    def update_vertex_earness(self, vertex: int) -> bool:
        if self.is_ear(vertex, use_pre_test=False):
            self._add_ear(vertex)
            return True
        self._remove_ear(vertex)
        return False

    def update_vertex(self, vertex: int) -> None:
        if self.update_vertex_convexity(vertex):
            self.update_vertex_earness(vertex)

    def remove_vertex(self, vertex: int) -> Triangle:
        """
        Clip a vertex off the ring.

        Only the two neighbours get a new neighbour triangle, so they are
        the only vertices reclassified.

        Returns:
            The clipped triangle (previous, vertex, next)
        """
        tri = self.build_triangle(vertex)
        prev_v, next_v = tri.a, tri.c

        self._next[prev_v] = next_v
        self._prev[next_v] = prev_v
        del self._prev[vertex]
        del self._next[vertex]
        if self._head == vertex:
            self._head = next_v if self._next else None

        self._convex.discard(vertex)
        self._reflex.discard(vertex)
        self._remove_ear(vertex)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Clipped %s, ring: %s", tri.to_tuple(), self.ring())

        # Two vertices or fewer: nothing left to clip
        if len(self) > 2:
            self.update_vertex(prev_v)
            self.update_vertex(next_v)

        return tri

    def _ear_priority(self, vertex: int) -> float:
        if self.ear_order == "index":
            return 0.0
        return -geometry.triangle_area(*self.build_real_triangle(vertex))

    def _add_ear(self, vertex: int) -> None:
        priority = self._ear_priority(vertex)
        if vertex in self._ears and self._ear_keys.get(vertex) == priority:
            return
        self._ears.add(vertex)
        self._ear_keys[vertex] = priority
        heapq.heappush(self._ear_heap, (priority, vertex))

    def _remove_ear(self, vertex: int) -> None:
        self._ears.discard(vertex)
        self._ear_keys.pop(vertex, None)
