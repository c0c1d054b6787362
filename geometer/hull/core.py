"""Core convex hull orchestration logic.

Every strategy in :mod:`geometer.hull.strategies` works on the same prepared
input (distinct coordinates, not all collinear) and returns hull vertex ids
in counter-clockwise order. This module does that preparation, handles the
degenerate cases no strategy sees, and normalises the output so that results
from different strategies can be compared directly.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from collections.abc import Sequence
from typing import Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np
from shapely.geometry import LineString, Point as ShapelyPoint, Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from ..core.config import KernelConfig, resolve_config
from ..core.errors import DegenerateGeometryWarning, DegenerateInputError
from ..core.types import DegeneratePolicy, HullAlgorithm, coerce_enum
from ..point import Point
from ..polygon import Polygon
from ..predicates import all_collinear
from ..primitives import Triangle
from ..topology import Vertex, VertexId
from .strategies import (
    hull_divide_conquer,
    hull_extreme_edges,
    hull_gift_wrapping,
    hull_graham_scan,
    hull_incremental,
    hull_interior_points,
    hull_quick_hull,
)

logger = logging.getLogger(__name__)

HullStrategy = Callable[[Sequence[Vertex]], List[VertexId]]

STRATEGIES: Dict[HullAlgorithm, HullStrategy] = {
    HullAlgorithm.GIFT_WRAPPING: hull_gift_wrapping,
    HullAlgorithm.QUICK_HULL: hull_quick_hull,
    HullAlgorithm.GRAHAM_SCAN: hull_graham_scan,
    HullAlgorithm.EXTREME_EDGES: hull_extreme_edges,
    HullAlgorithm.INTERIOR_POINTS: hull_interior_points,
    HullAlgorithm.INCREMENTAL: hull_incremental,
    HullAlgorithm.DIVIDE_CONQUER: hull_divide_conquer,
}


@dataclass(frozen=True)
class ConvexHull(Sequence):
    """Hull vertex ids in counter-clockwise order.

    The sequence starts at the lowest-then-leftmost hull vertex, so hulls of
    the same polygon compare equal element by element regardless of the
    strategy that produced them.
    """

    vertex_ids: Tuple[VertexId, ...]
    polygon: Polygon
    algorithm: HullAlgorithm
    degenerate: bool = False

    def __len__(self) -> int:
        return len(self.vertex_ids)

    def __getitem__(self, index):
        return self.vertex_ids[index]

    def __iter__(self) -> Iterator[VertexId]:
        return iter(self.vertex_ids)

    def to_points(self) -> List[Point]:
        return [self.polygon.get_point(i) for i in self.vertex_ids]

    def edges(self) -> List[Tuple[VertexId, VertexId]]:
        """Directed hull edges in order, closing back to the first vertex."""
        ids = self.vertex_ids
        if len(ids) < 2:
            return []
        if len(ids) == 2:
            return [(ids[0], ids[1])]
        return [(ids[i], ids[(i + 1) % len(ids)]) for i in range(len(ids))]

    def double_area(self):
        """Twice the hull area (zero for degenerate hulls)."""
        points = self.to_points()
        if len(points) < 3:
            return 0
        anchor = points[0]
        return sum(
            Triangle(anchor, points[i], points[i + 1]).double_area()
            for i in range(1, len(points) - 1)
        )

    def to_numpy(self) -> np.ndarray:
        return np.array([(p.x, p.y) for p in self.to_points()])

    def to_shapely(self) -> BaseGeometry:
        """Hull as a Shapely Polygon, or LineString / Point when degenerate."""
        coords = [tuple(p) for p in self.to_points()]
        if len(coords) == 1:
            return ShapelyPoint(coords[0])
        if len(coords) == 2:
            return LineString(coords)
        return ShapelyPolygon(coords)


def compute_hull(
    polygon: Polygon,
    algorithm: Union[HullAlgorithm, str] = HullAlgorithm.GRAHAM_SCAN,
    config: Optional[KernelConfig] = None,
) -> ConvexHull:
    """Compute the convex hull of a polygon's vertices.

    Args:
        polygon: Input polygon (only its vertex set matters)
        algorithm: Hull strategy (enum or string literal):
            - HullAlgorithm.GRAHAM_SCAN: Polar sort and stack sweep (default)
            - HullAlgorithm.GIFT_WRAPPING: Jarvis march
            - HullAlgorithm.QUICK_HULL: Farthest-point divide and conquer
            - HullAlgorithm.INCREMENTAL: Sorted sweep
            - HullAlgorithm.DIVIDE_CONQUER: Tangent merge of x-split halves
            - HullAlgorithm.EXTREME_EDGES: O(n^3) reference implementation
            - HullAlgorithm.INTERIOR_POINTS: O(n^4) brute-force oracle
          String values should match the enum values (e.g., ``"quick_hull"``).
        config: Kernel settings (degenerate policy, size limit)

    Returns:
        ConvexHull with counter-clockwise vertex ids. Points in the middle of
        a hull edge are excluded. Repeated coordinates contribute only their
        lowest id.

    Raises:
        DegenerateInputError: If all points are collinear and the policy is
            ``DegeneratePolicy.RAISE``
        InputTooLargeError: If the polygon exceeds ``config.max_vertices``
        ConfigurationError: If ``algorithm`` is not a known strategy

    Examples:
        >>> square = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        >>> list(compute_hull(square, algorithm="gift_wrapping"))
        [0, 1, 2, 3]
    """
    algorithm = coerce_enum(algorithm, HullAlgorithm)
    config = resolve_config(config)
    config.check_size(len(polygon))

    vertices = distinct_vertices(polygon.vertices())

    if len(vertices) < 3 or all_collinear([v.coords for v in vertices]):
        ids = _degenerate_hull(vertices, config)
        logger.debug("degenerate hull %s for %d vertices", ids, len(polygon))
        return ConvexHull(tuple(ids), polygon, algorithm, degenerate=True)

    logger.debug("computing %s hull of %d vertices", algorithm.value, len(vertices))
    ids = STRATEGIES[algorithm](vertices)
    return ConvexHull(tuple(_normalize(ids, polygon)), polygon, algorithm)


def compute_all_hulls(
    polygon: Polygon,
    config: Optional[KernelConfig] = None,
    algorithms: Optional[Iterable[Union[HullAlgorithm, str]]] = None,
) -> Dict[HullAlgorithm, ConvexHull]:
    """Run several hull strategies on the same polygon.

    Args:
        polygon: Input polygon
        config: Kernel settings passed to every run
        algorithms: Strategies to run (default: all of them)

    Returns:
        Mapping from algorithm to its hull
    """
    selected = list(HullAlgorithm) if algorithms is None else [
        coerce_enum(a, HullAlgorithm) for a in algorithms
    ]
    return {a: compute_hull(polygon, a, config) for a in selected}


def hulls_agree(hulls: Iterable[ConvexHull]) -> bool:
    """True if every hull has the same vertex sequence."""
    sequences = {tuple(h) for h in hulls}
    return len(sequences) <= 1


def distinct_vertices(vertices: Iterable[Vertex]) -> List[Vertex]:
    """Drop vertices whose coordinates repeat an earlier (lower id) vertex."""
    seen: Dict[Point, Vertex] = {}
    for v in sorted(vertices, key=lambda v: v.id):
        seen.setdefault(v.coords, v)
    return list(seen.values())


def _degenerate_hull(vertices: List[Vertex], config: KernelConfig) -> List[VertexId]:
    if config.degenerate_policy == DegeneratePolicy.RAISE:
        raise DegenerateInputError(
            "cannot compute a polygonal hull of collinear points",
            num_points=len(vertices),
        )

    lo = min(vertices, key=lambda v: (v.x, v.y))
    hi = max(vertices, key=lambda v: (v.x, v.y))
    ends = [lo] if lo.id == hi.id else sorted([lo, hi], key=lambda v: (v.y, v.x))
    ids = [v.id for v in ends]
    warnings.warn(
        f"all points are collinear; hull reduced to extreme points {ids}",
        DegenerateGeometryWarning,
        stacklevel=3,
    )
    return ids


def _normalize(ids: List[VertexId], polygon: Polygon) -> List[VertexId]:
    """Rotate a counter-clockwise id cycle to start at its lowest-then-leftmost vertex."""
    def key(i: int):
        p = polygon.get_point(ids[i])
        return (p.y, p.x)

    start = min(range(len(ids)), key=key)
    return ids[start:] + ids[:start]


__all__ = [
    'ConvexHull',
    'HullStrategy',
    'STRATEGIES',
    'compute_hull',
    'compute_all_hulls',
    'hulls_agree',
    'distinct_vertices',
]
