"""
Matplotlib rendering of a triangulated polygon.
"""

from typing import Iterable, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon as MplPolygon

try:
    from .geometry import Point
except ImportError:
    from geometry import Point


def plot_triangulation(vertices: Sequence[Point],
                       triangles: Iterable,
                       title: str = "Triangulation",
                       filename: Optional[str] = None,
                       show: bool = False):
    """
    Plot the triangulated polygon.

    Args:
        vertices: Polygon vertices
        triangles: Triangles as index triples into vertices
        title: Plot title (the triangle count is appended)
        filename: Save the figure here if given
        show: Open an interactive window

    Returns:
        The matplotlib Figure
    """
    triangles = [tuple(tri) for tri in triangles]
    fig, ax = plt.subplots(1, 1, figsize=(10, 10))

    # Plot each triangle
    colors = plt.cm.Set3(np.linspace(0, 1, max(len(triangles), 1)))
    for i, (a, b, c) in enumerate(triangles):
        tri_verts = [vertices[a], vertices[b], vertices[c]]
        tri = MplPolygon(tri_verts, closed=True,
                         facecolor=colors[i], edgecolor='black',
                         linewidth=1, alpha=0.7)
        ax.add_patch(tri)

    # Plot polygon outline
    if len(vertices) > 0:
        poly_closed = list(vertices) + [vertices[0]]
        xs, ys = zip(*poly_closed)
        ax.plot(xs, ys, 'b-', linewidth=2)

    # Mark vertices
    for i, v in enumerate(vertices):
        ax.plot(v[0], v[1], 'ko', markersize=5)
        ax.annotate(f'{i}', (v[0], v[1]), xytext=(4, 4),
                    textcoords='offset points', fontsize=7)

    ax.set_aspect('equal')
    ax.set_title(f"{title} ({len(triangles)} triangles)")
    ax.grid(True, alpha=0.3)
    ax.autoscale()

    if filename:
        fig.savefig(filename, dpi=150, bbox_inches='tight')
    if show:
        plt.show()

    return fig
