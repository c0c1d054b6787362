"""Divide and conquer convex hull strategy."""

from typing import List, Sequence, Tuple

from ...predicates import signed_area
from ...primitives import LineSegment
from ...topology import Vertex, VertexId


def _small_hull(vertices: Sequence[Vertex]) -> List[Vertex]:
    # vertices are sorted by (x, y); at most three of them
    if len(vertices) < 3:
        return list(vertices)
    a, b, c = vertices
    turn = signed_area(a.coords, b.coords, c.coords)
    if turn > 0:
        return [a, b, c]
    if turn < 0:
        return [a, c, b]
    return [a, c]


def _moves_past(l: Vertex, r: Vertex, candidate: Vertex, pivot: Vertex, current: Vertex, sign: int) -> bool:
    """True if the tangent end ``current`` should advance to ``candidate``.

    A candidate strictly outside the line l -> r always wins. One on the line
    wins only if it lies farther from the fixed end ``pivot``, so tangents
    span whole collinear runs.
    """
    area = sign * signed_area(l.coords, r.coords, candidate.coords)
    if area != 0:
        return area < 0
    return (
        LineSegment(pivot.coords, candidate.coords).length_squared()
        > LineSegment(pivot.coords, current.coords).length_squared()
    )


def _tangent(left: List[Vertex], right: List[Vertex], lower: bool) -> Tuple[int, int]:
    """Indices of the lower (or upper) common tangent of two separated hulls."""
    sign = 1 if lower else -1
    step_left = -1 if lower else 1
    step_right = 1 if lower else -1

    i = max(range(len(left)), key=lambda k: (left[k].x, left[k].y))
    j = min(range(len(right)), key=lambda k: (right[k].x, right[k].y))

    moved = True
    while moved:
        moved = False
        while True:
            candidate = left[(i + step_left) % len(left)]
            if not _moves_past(left[i], right[j], candidate, right[j], left[i], sign):
                break
            i = (i + step_left) % len(left)
            moved = True
        while True:
            candidate = right[(j + step_right) % len(right)]
            if not _moves_past(left[i], right[j], candidate, left[i], right[j], sign):
                break
            j = (j + step_right) % len(right)
            moved = True
    return i, j


def _merge(left: List[Vertex], right: List[Vertex]) -> List[Vertex]:
    lower_l, lower_r = _tangent(left, right, lower=True)
    upper_l, upper_r = _tangent(left, right, lower=False)

    merged: List[Vertex] = []
    k = lower_r
    while True:
        merged.append(right[k])
        if k == upper_r:
            break
        k = (k + 1) % len(right)
    k = upper_l
    while True:
        merged.append(left[k])
        if k == lower_l:
            break
        k = (k + 1) % len(left)
    return merged


def _hull(ordered: Sequence[Vertex]) -> List[Vertex]:
    if len(ordered) <= 3:
        return _small_hull(ordered)
    mid = len(ordered) // 2
    return _merge(_hull(ordered[:mid]), _hull(ordered[mid:]))


def hull_divide_conquer(vertices: Sequence[Vertex]) -> List[VertexId]:
    """Split the x-sorted points in half and merge the two sub-hulls.

    Sorting by x then y makes every point of the left half precede every
    point of the right half, so the two sub-hulls never overlap and are
    joined by their lower and upper common tangents. Each tangent is found
    by walking one end clockwise and the other counter-clockwise until
    neither can move; on a collinear run the walk continues to the farthest
    point, which keeps points in the middle of hull edges out of the result.
    O(n log n).

    Args:
        vertices: Distinct, not-all-collinear vertices

    Returns:
        Hull vertex ids in counter-clockwise order
    """
    ordered = sorted(vertices, key=lambda v: (v.x, v.y))
    return [v.id for v in _hull(ordered)]


__all__ = ['hull_divide_conquer']
