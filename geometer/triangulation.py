"""Ear-clipping triangulation of simple polygons.

The engine repeatedly finds an *ear* (a vertex whose two neighbours are
joined by an internal diagonal), records the ear's triangle and removes the
vertex from a private working copy of the polygon. When three vertices
remain they form the last triangle. Every simple polygon with more than
three vertices has an ear, so failing to find one means the input was not
simple.

Complexity is O(n^3): up to n scans of n candidates, each diagonal test
walking all n edges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import FrozenSet, Iterator, List, Optional, Set, Tuple

import numpy as np
from shapely.geometry import Polygon as ShapelyPolygon

from .core.config import KernelConfig, resolve_config
from .core.errors import DegenerateInputError, EarNotFoundError, InvalidPolygonError
from .point import Point
from .polygon import Polygon
from .predicates import all_collinear
from .primitives import Triangle
from .topology import VertexId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class TriangleIds:
    """The three corner ids of one triangulation piece.

    Ids are stored in the polygon's boundary winding, so re-projecting them
    gives a triangle with the same orientation as the polygon. Equality and
    hashing ignore order.
    """
    a: VertexId
    b: VertexId
    c: VertexId

    def __iter__(self) -> Iterator[VertexId]:
        yield self.a
        yield self.b
        yield self.c

    def as_set(self) -> FrozenSet[VertexId]:
        return frozenset((self.a, self.b, self.c))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TriangleIds):
            return NotImplemented
        return self.as_set() == other.as_set()

    def __hash__(self) -> int:
        return hash(self.as_set())


@dataclass
class Triangulation:
    """Set of triangles covering a polygon, plus the order they were clipped."""

    polygon: Polygon
    clip_order: List[TriangleIds] = field(default_factory=list)
    _triangles: Set[TriangleIds] = field(default_factory=set, repr=False)

    def insert(self, triangle: TriangleIds) -> bool:
        """Add a triangle; returns False if it was already present."""
        if triangle in self._triangles:
            return False
        self._triangles.add(triangle)
        self.clip_order.append(triangle)
        return True

    @property
    def triangles(self) -> FrozenSet[TriangleIds]:
        return frozenset(self._triangles)

    def __len__(self) -> int:
        return len(self._triangles)

    def __iter__(self) -> Iterator[TriangleIds]:
        return iter(self.clip_order)

    def __contains__(self, triangle: object) -> bool:
        return triangle in self._triangles

    def to_points(self) -> List[Tuple[Point, Point, Point]]:
        """Re-project each triangle to coordinates, in clip order."""
        get = self.polygon.get_point
        return [(get(t.a), get(t.b), get(t.c)) for t in self.clip_order]

    def double_area(self):
        """Sum of the signed double areas of all triangles.

        Equals ``polygon.double_area()`` exactly for integer coordinates.
        """
        return sum(Triangle(*pts).double_area() for pts in self.to_points())

    def edges(self) -> Set[Tuple[VertexId, VertexId]]:
        """Undirected edges of all triangles as ``(min_id, max_id)`` pairs."""
        result = set()
        for t in self.clip_order:
            for u, v in ((t.a, t.b), (t.b, t.c), (t.c, t.a)):
                result.add((min(u, v), max(u, v)))
        return result

    def to_numpy(self) -> np.ndarray:
        """Triangle coordinates as an ``(n, 3, 2)`` array, in clip order."""
        return np.array(
            [[(p.x, p.y) for p in pts] for pts in self.to_points()]
        ).reshape(len(self.clip_order), 3, 2)

    def to_shapely(self) -> List[ShapelyPolygon]:
        """One Shapely Polygon per triangle, in clip order."""
        return [ShapelyPolygon([tuple(p) for p in pts]) for pts in self.to_points()]


def find_ear(polygon: Polygon) -> VertexId:
    """Return the first vertex (in id order) whose neighbours form a diagonal.

    Args:
        polygon: Counter-clockwise polygon

    Raises:
        EarNotFoundError: If no vertex is an ear
    """
    for v in polygon.vertices():
        if polygon.diagonal(v.prev, v.next):
            return v.id
    raise EarNotFoundError(len(polygon))


def triangulate(polygon: Polygon, config: Optional[KernelConfig] = None) -> Triangulation:
    """Triangulate a simple polygon by ear clipping.

    The input polygon is never modified. Clockwise polygons are clipped on a
    reversed copy, but triangles are reported in the input's winding so their
    signed areas sum to ``polygon.double_area()``.

    Args:
        polygon: Simple polygon with at least 3 vertices
        config: Kernel settings (size limit, up-front validation)

    Returns:
        Triangulation with exactly ``len(polygon) - 2`` triangles

    Raises:
        DegenerateInputError: If all vertices are collinear
        EarNotFoundError: If the polygon is not simple (including zero-area
            self-intersecting shapes such as a bowtie)
        InvalidPolygonError: If ``config.validate_simple`` is set and the
            polygon is not simple
        InputTooLargeError: If the polygon exceeds ``config.max_vertices``

    Examples:
        >>> square = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        >>> triangulation = triangulate(square)
        >>> len(triangulation), triangulation.double_area()
        (2, 32)
    """
    config = resolve_config(config)
    config.check_size(len(polygon))

    if config.validate_simple and not polygon.is_simple():
        raise InvalidPolygonError(
            f"polygon is not simple: {polygon.explain_validity()}"
        )

    if all_collinear(polygon.points()):
        raise DegenerateInputError(
            "cannot triangulate collinear points", num_points=len(polygon)
        )

    reversed_winding = polygon.double_area() < 0
    working = polygon._working_copy()
    triangulation = Triangulation(polygon)

    def record(prev_id: VertexId, vertex_id: VertexId, next_id: VertexId) -> None:
        if reversed_winding:
            prev_id, next_id = next_id, prev_id
        triangulation.insert(TriangleIds(prev_id, vertex_id, next_id))

    while len(working) > 3:
        try:
            ear_id = find_ear(working)
        except EarNotFoundError as exc:
            raise EarNotFoundError(exc.remaining, polygon.explain_validity()) from None
        ear = working._remove_vertex(ear_id)
        logger.debug("clipped ear %s (%s, %s)", ear.id, ear.prev, ear.next)
        record(ear.prev, ear.id, ear.next)

    last = working.anchor()
    record(last.prev, last.id, last.next)
    return triangulation


__all__ = [
    'TriangleIds',
    'Triangulation',
    'find_ear',
    'triangulate',
]
