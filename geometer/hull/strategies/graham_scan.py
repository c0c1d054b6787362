"""Graham scan convex hull strategy."""

from functools import cmp_to_key
from typing import List, Sequence

from ...predicates import signed_area
from ...primitives import LineSegment
from ...topology import Vertex, VertexId


def polar_sort(pivot: Vertex, vertices: Sequence[Vertex]) -> List[Vertex]:
    """Sort vertices (excluding ``pivot``) counter-clockwise around ``pivot``.

    ``pivot`` must be the lowest-then-leftmost vertex so every other point
    lies in the half-plane above it. Ties in angle are broken nearest first.
    The comparison uses orientation only, with no trigonometry.
    """
    origin = pivot.coords

    def compare(p: Vertex, q: Vertex) -> int:
        turn = signed_area(origin, p.coords, q.coords)
        if turn > 0:
            return -1
        if turn < 0:
            return 1
        dp = LineSegment(origin, p.coords).length_squared()
        dq = LineSegment(origin, q.coords).length_squared()
        return (dp > dq) - (dp < dq)

    others = [v for v in vertices if v.id != pivot.id]
    return sorted(others, key=cmp_to_key(compare))


def hull_graham_scan(vertices: Sequence[Vertex]) -> List[VertexId]:
    """Sweep the polar-sorted points, keeping only left turns on a stack.

    Any point that makes a right turn or a straight line with the top two
    stack entries is popped, which also removes points in the middle of a
    hull edge. O(n log n).

    Args:
        vertices: Distinct, not-all-collinear vertices

    Returns:
        Hull vertex ids in counter-clockwise order
    """
    pivot = min(vertices, key=lambda v: (v.y, v.x))
    stack: List[Vertex] = [pivot]

    for v in polar_sort(pivot, vertices):
        while len(stack) >= 2 and signed_area(stack[-2].coords, stack[-1].coords, v.coords) <= 0:
            stack.pop()
        stack.append(v)

    return [v.id for v in stack]


__all__ = [
    'polar_sort',
    'hull_graham_scan',
]
