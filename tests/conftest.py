"""Shared polygon fixtures.

Each fixture carries the coordinates plus the values every algorithm must
reproduce for it: signed double area, triangle count and convex hull ids
(counter-clockwise, starting at the lowest-then-leftmost hull vertex).
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

import numpy as np
import pytest

from geometer import Polygon


@dataclass
class PolygonCase:
    name: str
    coords: List[Tuple[int, int]]
    double_area: int
    num_triangles: int
    hull: List[int]

    def polygon(self) -> Polygon:
        return Polygon(self.coords)


RIGHT_TRIANGLE = PolygonCase(
    name="right_triangle",
    coords=[(0, 0), (3, 0), (0, 4)],
    double_area=12,
    num_triangles=1,
    hull=[0, 1, 2],
)

SQUARE_4X4 = PolygonCase(
    name="square_4x4",
    coords=[(0, 0), (4, 0), (4, 4), (0, 4)],
    double_area=32,
    num_triangles=2,
    hull=[0, 1, 2, 3],
)

# Dart with a reflex vertex at (4, 2)
ARROW = PolygonCase(
    name="arrow",
    coords=[(0, 0), (4, 2), (8, 0), (4, 8)],
    double_area=48,
    num_triangles=2,
    hull=[0, 2, 3],
)

# Letter E: two notches, four vertices collinear with the right hull edge
E_SHAPE = PolygonCase(
    name="e_shape",
    coords=[
        (0, 0), (6, 0), (6, 2), (2, 2), (2, 3), (6, 3),
        (6, 5), (2, 5), (2, 6), (6, 6), (6, 8), (0, 8),
    ],
    double_area=80,
    num_triangles=10,
    hull=[0, 1, 10, 11],
)

# Square with a vertex in the middle of every side
SQUARE_WITH_MIDPOINTS = PolygonCase(
    name="square_with_midpoints",
    coords=[(0, 0), (2, 0), (4, 0), (4, 2), (4, 4), (2, 4), (0, 4), (0, 2)],
    double_area=32,
    num_triangles=6,
    hull=[0, 2, 4, 6],
)

CLOCKWISE_SQUARE = PolygonCase(
    name="clockwise_square",
    coords=[(0, 0), (0, 4), (4, 4), (4, 0)],
    double_area=-32,
    num_triangles=2,
    hull=[0, 3, 2, 1],
)

# Orthogonal hook: a 10x10 square with a 32-unit pocket cut in from the top
HOOK = PolygonCase(
    name="hook",
    coords=[(0, 0), (10, 0), (10, 10), (4, 10), (4, 4), (6, 4), (6, 8), (8, 8), (8, 2), (2, 2), (2, 10), (0, 10)],
    double_area=136,
    num_triangles=10,
    hull=[0, 1, 2, 11],
)

ALL_CASES = [
    RIGHT_TRIANGLE,
    SQUARE_4X4,
    ARROW,
    E_SHAPE,
    SQUARE_WITH_MIDPOINTS,
    CLOCKWISE_SQUARE,
    HOOK,
]


@pytest.fixture(params=ALL_CASES, ids=lambda case: case.name)
def polygon_case(request) -> PolygonCase:
    return request.param


@pytest.fixture
def square() -> Polygon:
    return SQUARE_4X4.polygon()


@pytest.fixture
def arrow() -> Polygon:
    return ARROW.polygon()


@pytest.fixture
def bent_quad() -> Polygon:
    """Self-intersecting quadrilateral with non-zero signed area."""
    return Polygon([(0, 0), (6, 0), (0, 4), (2, 6)])


def _star_polygon(num_vertices: int, seed: int) -> Polygon:
    """Star-shaped polygon: evenly spaced angles, random integer radii."""
    rng = np.random.default_rng(seed)
    radii = rng.integers(50, 100, size=num_vertices)
    coords = []
    for i, r in enumerate(radii):
        theta = 2 * math.pi * i / num_vertices
        coords.append((int(round(r * math.cos(theta))), int(round(r * math.sin(theta)))))
    return Polygon(coords)


def _random_point_polygon(num_vertices: int, seed: int) -> Polygon:
    """Polygon over random integer points (not simple; for hull tests only)."""
    rng = np.random.default_rng(seed)
    coords = rng.integers(0, 1000, size=(num_vertices, 2))
    return Polygon([(int(x), int(y)) for x, y in coords])


@pytest.fixture
def e_shape() -> Polygon:
    return E_SHAPE.polygon()


@pytest.fixture
def midpoint_square() -> Polygon:
    return SQUARE_WITH_MIDPOINTS.polygon()


@pytest.fixture
def clockwise_square() -> Polygon:
    return CLOCKWISE_SQUARE.polygon()


@pytest.fixture
def make_star_polygon():
    """Factory for simple star-shaped polygons: ``make(num_vertices, seed)``."""
    return _star_polygon


@pytest.fixture
def make_random_polygon():
    """Factory for polygons over random points: ``make(num_vertices, seed)``."""
    return _random_point_polygon
