"""Extreme edges convex hull strategy (quadratic reference implementation)."""

from typing import Dict, List, Sequence

import numpy as np

from ...core.errors import HullError
from ...predicates import as_coordinate_array, between, signed_areas
from ...topology import Vertex, VertexId


def hull_extreme_edges(vertices: Sequence[Vertex]) -> List[VertexId]:
    """Test every ordered pair as a candidate hull edge, then chain them.

    ``p -> q`` is a hull edge iff every other point is strictly left of it or
    lies on the segment pq itself. Requiring collinear points to sit between
    p and q keeps only the maximal edge along a line, so mid-edge points never
    become hull vertices. Each hull vertex has exactly one outgoing hull edge;
    following those from the lowest-then-leftmost vertex yields the hull.
    O(n^3), with the inner loop vectorised.

    Args:
        vertices: Distinct, not-all-collinear vertices

    Returns:
        Hull vertex ids in counter-clockwise order

    Raises:
        HullError: If the extreme edges do not form a single cycle
    """
    coords = as_coordinate_array(v.coords for v in vertices)
    successor: Dict[VertexId, VertexId] = {}

    for p in vertices:
        for q in vertices:
            if p.id == q.id:
                continue
            areas = signed_areas(p.coords, q.coords, coords)
            if np.any(areas < 0):
                continue
            on_line = np.flatnonzero(areas == 0)
            if all(between(vertices[i].coords, p.coords, q.coords) for i in on_line):
                successor[p.id] = q.id

    start = min(vertices, key=lambda v: (v.y, v.x)).id
    hull: List[VertexId] = [start]
    current = successor.get(start)
    while current != start:
        if current is None or len(hull) > len(successor):
            raise HullError("extreme edges do not form a closed chain")
        hull.append(current)
        current = successor.get(current)
    return hull


__all__ = ['hull_extreme_edges']
