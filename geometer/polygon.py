"""Simple polygon built on a vertex topology.

The :class:`Polygon` is the object every algorithm in geometer consumes. It
is read-only from the caller's perspective: algorithms that need to remove
vertices (ear clipping) do so on a private working copy obtained from
:meth:`Polygon._working_copy`.

Conversions to and from Shapely and NumPy are the seams external loaders and
renderers use.
"""

from __future__ import annotations

from typing import Iterable, List, Set, Tuple, Union

import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.validation import explain_validity

from .core.errors import UnsupportedGeometryError
from .point import BoundingBox, Point
from .predicates import left, left_on
from .primitives import LineSegment, Triangle
from .topology import Vertex, VertexId, VertexTopology

Edge = Tuple[VertexId, VertexId]


class Polygon:
    """A simple polygon without holes.

    Args:
        points: Boundary points in order, as Points or ``(x, y)`` pairs.
            Either winding is accepted.

    Raises:
        DegenerateInputError: If fewer than 3 points are given

    Examples:
        >>> square = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        >>> square.double_area()
        32
        >>> sorted(square.edges())
        [(0, 1), (1, 2), (2, 3), (3, 0)]
    """

    def __init__(self, points: Iterable[Union[Point, Tuple]]):
        self._topology = VertexTopology.build(points)

    @classmethod
    def _from_topology(cls, topology: VertexTopology) -> "Polygon":
        polygon = cls.__new__(cls)
        polygon._topology = topology
        return polygon

    @classmethod
    def from_shapely(cls, geometry: ShapelyPolygon) -> "Polygon":
        """Build a polygon from the exterior ring of a Shapely Polygon.

        The closing coordinate is dropped and any Z values are ignored.

        Raises:
            UnsupportedGeometryError: If the geometry is not a Polygon, is
                empty or has holes
        """
        if not isinstance(geometry, ShapelyPolygon):
            raise UnsupportedGeometryError(
                f"expected a shapely Polygon, got {geometry.geom_type}"
            )
        if geometry.is_empty:
            raise UnsupportedGeometryError("cannot build a polygon from an empty geometry")
        if len(geometry.interiors) > 0:
            raise UnsupportedGeometryError("polygons with holes are not supported")

        coords = list(geometry.exterior.coords)[:-1]
        return cls([(c[0], c[1]) for c in coords])

    # ------------------------------------------------------------------
    # Vertex access
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._topology)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._topology

    def __repr__(self) -> str:
        return f"Polygon({self.points()!r})"

    def num_vertices(self) -> int:
        return len(self._topology)

    def num_edges(self) -> int:
        return len(self._topology)

    def get_vertex(self, vertex_id: VertexId) -> Vertex:
        return self._topology.get(vertex_id)

    def get_point(self, vertex_id: VertexId) -> Point:
        return self._topology.get(vertex_id).coords

    def vertices(self) -> List[Vertex]:
        """All vertices in id order."""
        return list(self._topology)

    def vertex_ids(self) -> List[VertexId]:
        return self._topology.ids()

    def points(self) -> List[Point]:
        """Coordinates in boundary order, starting at the anchor."""
        return [v.coords for v in self._topology.walk()]

    def anchor(self) -> Vertex:
        return self._topology.anchor()

    def get_line_segment(self, id_1: VertexId, id_2: VertexId) -> LineSegment:
        return LineSegment(self.get_point(id_1), self.get_point(id_2))

    # ------------------------------------------------------------------
    # Boundary queries
    # ------------------------------------------------------------------

    def edges(self) -> Set[Edge]:
        """Directed boundary edges ``(v.id, v.next)``, one per vertex."""
        return {(v.id, v.next) for v in self._topology.walk()}

    def double_area(self):
        """Twice the signed area: positive for counter-clockwise boundaries.

        Sums the signed areas of the fan (anchor, v, v.next). Triangles that
        fall outside the polygon cancel, so the anchor need not be convex.
        """
        anchor = self._topology.anchor().coords
        area = 0
        for v in self._topology:
            area += Triangle(anchor, v.coords, self.get_point(v.next)).double_area()
        return area

    def area(self) -> float:
        """Unsigned area."""
        return abs(self.double_area()) / 2

    def is_counter_clockwise(self) -> bool:
        return self.double_area() > 0

    def in_cone(self, a_id: VertexId, b_id: VertexId) -> bool:
        """True if b lies strictly inside the cone at a formed by a's neighbours.

        Assumes counter-clockwise winding.
        """
        a_vertex = self.get_vertex(a_id)
        a = a_vertex.coords
        b = self.get_point(b_id)
        a0 = self.get_point(a_vertex.prev)
        a1 = self.get_point(a_vertex.next)

        # Convex vertex
        if left_on(a, a1, a0):
            return left(a, b, a0) and left(b, a, a1)

        # Reflex vertex
        return not (left_on(a, b, a1) and left_on(b, a, a0))

    def diagonal(self, a_id: VertexId, b_id: VertexId) -> bool:
        """True if segment ab is an internal diagonal of the polygon."""
        return (
            self.in_cone(a_id, b_id)
            and self.in_cone(b_id, a_id)
            and self._diagonal_internal_external(a_id, b_id)
        )

    def _diagonal_internal_external(self, a_id: VertexId, b_id: VertexId) -> bool:
        # No edge that avoids both a and b may touch segment ab.
        ab = self.get_line_segment(a_id, b_id)
        for e1, e2 in self.edges():
            if e1 in (a_id, b_id) or e2 in (a_id, b_id):
                continue
            if self.get_line_segment(e1, e2).intersects(ab):
                return False
        return True

    # ------------------------------------------------------------------
    # Extremes
    # ------------------------------------------------------------------

    def bounding_box(self) -> BoundingBox:
        return BoundingBox.from_points(v.coords for v in self._topology)

    def lowest_leftmost_vertex(self) -> Vertex:
        """Minimum y, ties broken by minimum x."""
        return min(self._topology, key=lambda v: (v.y, v.x))

    def leftmost_lowest_vertex(self) -> Vertex:
        """Minimum x, ties broken by minimum y."""
        return min(self._topology, key=lambda v: (v.x, v.y))

    def leftmost_highest_vertex(self) -> Vertex:
        """Minimum x, ties broken by maximum y."""
        return min(self._topology, key=lambda v: (v.x, -v.y))

    def rightmost_lowest_vertex(self) -> Vertex:
        return max(self._topology, key=lambda v: (v.x, -v.y))

    def rightmost_highest_vertex(self) -> Vertex:
        """Maximum x, ties broken by maximum y."""
        return max(self._topology, key=lambda v: (v.x, v.y))

    def lowest_rightmost_vertex(self) -> Vertex:
        return min(self._topology, key=lambda v: (v.y, -v.x))

    def highest_leftmost_vertex(self) -> Vertex:
        return max(self._topology, key=lambda v: (v.y, -v.x))

    def highest_rightmost_vertex(self) -> Vertex:
        return max(self._topology, key=lambda v: (v.y, v.x))

    # ------------------------------------------------------------------
    # Conversion and validation
    # ------------------------------------------------------------------

    def to_numpy(self) -> np.ndarray:
        """Coordinates as an ``(n, 2)`` array in id order."""
        return np.array([(v.x, v.y) for v in self._topology])

    def to_shapely(self) -> ShapelyPolygon:
        return ShapelyPolygon([tuple(p) for p in self.points()])

    def is_simple(self) -> bool:
        """True if Shapely considers the boundary a valid simple ring."""
        return self.to_shapely().is_valid

    def explain_validity(self) -> str:
        return explain_validity(self.to_shapely())

    # ------------------------------------------------------------------
    # Internal mutation (working copies only)
    # ------------------------------------------------------------------

    def _working_copy(self) -> "Polygon":
        """Private copy whose topology may be consumed by an algorithm.

        Clockwise polygons are reversed so the copy is always
        counter-clockwise; ids are unchanged.
        """
        if self.double_area() < 0:
            return Polygon._from_topology(self._topology.reversed())
        return Polygon._from_topology(self._topology.copy())

    def _remove_vertex(self, vertex_id: VertexId) -> Vertex:
        return self._topology.remove(vertex_id)


__all__ = [
    'Polygon',
    'Edge',
]
