"""Interior points convex hull strategy (brute-force oracle)."""

from itertools import combinations
from typing import List, Sequence

from ...primitives import Triangle
from ...topology import Vertex, VertexId
from .graham_scan import polar_sort


def _is_interior(p: Vertex, vertices: Sequence[Vertex]) -> bool:
    others = [v for v in vertices if v.id != p.id]
    for a, b, c in combinations(others, 3):
        if Triangle(a.coords, b.coords, c.coords).contains(p.coords):
            return True
    return False


def hull_interior_points(vertices: Sequence[Vertex]) -> List[VertexId]:
    """Discard every point covered by a triangle of three other points.

    Containment is closed: a point on the boundary of a non-degenerate
    triangle counts as covered, which removes points in the middle of hull
    edges. What remains are the hull vertices, ordered by polar angle around
    the lowest-then-leftmost one. O(n^4); meant only to validate the other
    strategies on small inputs.

    Args:
        vertices: Distinct, not-all-collinear vertices

    Returns:
        Hull vertex ids in counter-clockwise order
    """
    extreme = [v for v in vertices if not _is_interior(v, vertices)]
    pivot = min(extreme, key=lambda v: (v.y, v.x))
    return [pivot.id] + [v.id for v in polar_sort(pivot, extreme)]


__all__ = ['hull_interior_points']
