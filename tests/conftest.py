"""Pytest fixtures for earclip tests."""

import math
import os
import random
import sys
from pathlib import Path

import pytest

# Render plots off-screen
os.environ.setdefault("MPLBACKEND", "Agg")

# Add repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def square() -> list[tuple[float, float]]:
    """Unit square, counter-clockwise."""
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.fixture
def sample_quad() -> list[tuple[float, float]]:
    """Concave quad: vertex 1 is reflex, vertex 0 is a collinear spike."""
    return [(2.0, 0.0), (1.0, 0.0), (0.0, 1.0), (-1.0, 0.0)]


@pytest.fixture
def l_shape() -> list[tuple[float, float]]:
    """L-shaped hexagon with one reflex corner (vertex 3), area 3."""
    return [(0.0, 0.0), (2.0, 0.0), (2.0, 1.0), (1.0, 1.0), (1.0, 2.0), (0.0, 2.0)]


@pytest.fixture
def bowtie() -> list[tuple[float, float]]:
    """Square corners listed in self-intersecting order."""
    return [(0.0, 0.0), (1.0, 1.0), (1.0, 0.0), (0.0, 1.0)]


@pytest.fixture
def comb() -> list[tuple[float, float]]:
    """Comb with three teeth pointing up (several reflex vertices)."""
    return [
        (0.0, 0.0), (5.0, 0.0), (5.0, 3.0), (4.0, 3.0), (4.0, 1.0),
        (3.0, 1.0), (3.0, 3.0), (2.0, 3.0), (2.0, 1.0), (1.0, 1.0),
        (1.0, 3.0), (0.0, 3.0),
    ]


@pytest.fixture
def star() -> list[tuple[float, float]]:
    """Ten-point star, alternating outer and inner radius."""
    vertices = []
    for i in range(10):
        angle = 2 * math.pi * i / 10
        r = 10.0 if i % 2 == 0 else 4.0
        vertices.append((r * math.cos(angle), r * math.sin(angle)))
    return vertices


def generate_random_concave_polygon(rng, num_vertices, radius=10.0, concavity=0.6):
    """Star-shaped polygon around the origin (always simple, CCW)."""
    vertices = []
    for i in range(num_vertices):
        angle = 2 * math.pi * (i + rng.uniform(-0.3, 0.3)) / num_vertices
        if i % 3 == 1:
            r = radius * (1 - concavity * rng.uniform(0.5, 1.0))
        else:
            r = radius * (1 + rng.uniform(-0.1, 0.1))
        vertices.append((r * math.cos(angle), r * math.sin(angle)))
    return vertices


@pytest.fixture
def random_polygon():
    """Factory for seeded random concave polygons with min..max vertices."""
    def make(seed, min_vertices=5, max_vertices=30):
        rng = random.Random(seed)
        return generate_random_concave_polygon(rng, rng.randint(min_vertices, max_vertices))
    return make
