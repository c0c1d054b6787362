"""QuickHull convex hull strategy."""

from typing import List, Sequence

import numpy as np

from ...predicates import as_coordinate_array, signed_areas
from ...topology import Vertex, VertexId


def _chain(p: Vertex, q: Vertex, candidates: List[Vertex]) -> List[VertexId]:
    """Hull vertices strictly between p and q, for points strictly right of p -> q."""
    if not candidates:
        return []

    coords = as_coordinate_array(v.coords for v in candidates)
    areas = signed_areas(p.coords, q.coords, coords)
    # Most negative area = farthest to the right of p -> q.
    farthest = candidates[int(np.argmin(areas))]

    coords_to_f = signed_areas(p.coords, farthest.coords, coords)
    coords_from_f = signed_areas(farthest.coords, q.coords, coords)
    right_of_pf = [v for v, a in zip(candidates, coords_to_f) if a < 0]
    right_of_fq = [v for v, a in zip(candidates, coords_from_f) if a < 0]

    return (
        _chain(p, farthest, right_of_pf)
        + [farthest.id]
        + _chain(farthest, q, right_of_fq)
    )


def hull_quick_hull(vertices: Sequence[Vertex]) -> List[VertexId]:
    """Divide and conquer around the leftmost and rightmost vertices.

    The line between the extreme-left and extreme-right vertices splits the
    set in two. Each side is handled recursively: the point farthest from the
    current line is a hull vertex, and only points strictly outside the two
    new lines survive to the next level, which drops collinear edge points.
    Average O(n log n), worst case O(n^2).

    Args:
        vertices: Distinct, not-all-collinear vertices

    Returns:
        Hull vertex ids in counter-clockwise order
    """
    leftmost = min(vertices, key=lambda v: (v.x, v.y))
    rightmost = max(vertices, key=lambda v: (v.x, v.y))

    coords = as_coordinate_array(v.coords for v in vertices)
    areas = signed_areas(leftmost.coords, rightmost.coords, coords)
    below = [v for v, a in zip(vertices, areas) if a < 0]
    above = [v for v, a in zip(vertices, areas) if a > 0]

    return (
        [leftmost.id]
        + _chain(leftmost, rightmost, below)
        + [rightmost.id]
        + _chain(rightmost, leftmost, above)
    )


__all__ = ['hull_quick_hull']
