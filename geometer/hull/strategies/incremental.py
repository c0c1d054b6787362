"""Sorted incremental convex hull strategy (monotone chain)."""

from typing import List, Sequence

from ...predicates import signed_area
from ...topology import Vertex, VertexId


def _half_hull(ordered: Sequence[Vertex]) -> List[Vertex]:
    chain: List[Vertex] = []
    for v in ordered:
        while len(chain) >= 2 and signed_area(chain[-2].coords, chain[-1].coords, v.coords) <= 0:
            chain.pop()
        chain.append(v)
    return chain


def hull_incremental(vertices: Sequence[Vertex]) -> List[VertexId]:
    """Add points in x-then-y order, repairing the hull after each insertion.

    Each new point is outside the hull of the points before it, so inserting
    it only removes vertices from the end of the lower chain (sweeping left
    to right) and of the upper chain (sweeping right to left). Straight
    angles are removed as well. O(n log n), dominated by the sort.

    Args:
        vertices: Distinct, not-all-collinear vertices

    Returns:
        Hull vertex ids in counter-clockwise order
    """
    ordered = sorted(vertices, key=lambda v: (v.x, v.y))
    lower = _half_hull(ordered)
    upper = _half_hull(list(reversed(ordered)))
    # Each chain ends where the other begins.
    return [v.id for v in lower[:-1] + upper[:-1]]


__all__ = ['hull_incremental']
