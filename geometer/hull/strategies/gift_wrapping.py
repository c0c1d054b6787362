"""Gift wrapping (Jarvis march) convex hull strategy."""

from typing import List, Sequence

from ...core.errors import HullError
from ...predicates import signed_area
from ...primitives import LineSegment
from ...topology import Vertex, VertexId


def hull_gift_wrapping(vertices: Sequence[Vertex]) -> List[VertexId]:
    """Wrap the point set starting from its lowest-then-leftmost vertex.

    From the current hull vertex, the next one is the candidate with every
    other point left of or on the directed edge towards it. Among collinear
    candidates the farthest wins, so points in the middle of a hull edge are
    skipped. Runs in O(nh) for h hull vertices.

    Args:
        vertices: Distinct, not-all-collinear vertices

    Returns:
        Hull vertex ids in counter-clockwise order

    Raises:
        HullError: If the march fails to return to its start (only possible
            with inconsistent floating-point orientation results)
    """
    start = min(vertices, key=lambda v: (v.y, v.x))
    hull: List[VertexId] = []
    current = start

    while True:
        hull.append(current.id)
        if len(hull) > len(vertices):
            raise HullError("gift wrapping did not close the hull")

        candidate = vertices[0] if vertices[0].id != current.id else vertices[1]
        for p in vertices:
            if p.id == current.id:
                continue
            turn = signed_area(current.coords, candidate.coords, p.coords)
            if turn < 0:
                candidate = p
            elif turn == 0 and (
                LineSegment(current.coords, p.coords).length_squared()
                > LineSegment(current.coords, candidate.coords).length_squared()
            ):
                candidate = p

        current = candidate
        if current.id == start.id:
            return hull


__all__ = ['hull_gift_wrapping']
