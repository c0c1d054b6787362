"""Geometer - 2D computational geometry kernel.

This library provides orientation predicates, a polygon type built on a
linked vertex topology, ear-clipping triangulation, and a family of convex
hull algorithms that can be cross-checked against one another.
"""

__version__ = "0.1.0"

# Value types
from .point import Point, BoundingBox

# Orientation predicates
from .predicates import (
    signed_area,
    orientation,
    collinear,
    left,
    left_on,
    between,
    proper_intersect,
    improper_intersect,
    intersects,
)

# Triangle and segment views
from .primitives import Triangle, LineSegment

# Topology and polygon
from .topology import Vertex, VertexId, VertexTopology
from .polygon import Polygon

# Triangulation
from .triangulation import TriangleIds, Triangulation, find_ear, triangulate

# Convex hulls
from .hull import ConvexHull, compute_hull, compute_all_hulls, hulls_agree

# Core types (enums) and configuration
from .core import (
    Orientation,
    HullAlgorithm,
    DegeneratePolicy,
    KernelConfig,
)

# Core exceptions
from .core import (
    GeometerError,
    DegenerateInputError,
    EarNotFoundError,
    ForeignIdError,
    TopologyError,
    InvalidPolygonError,
    InputTooLargeError,
    HullError,
    UnsupportedGeometryError,
    ConfigurationError,
    DegenerateGeometryWarning,
)

__all__ = [

    # Value types
    'Point',
    'BoundingBox',

    # Predicates
    'signed_area',
    'orientation',
    'collinear',
    'left',
    'left_on',
    'between',
    'proper_intersect',
    'improper_intersect',
    'intersects',

    # Views
    'Triangle',
    'LineSegment',

    # Topology and polygon
    'Vertex',
    'VertexId',
    'VertexTopology',
    'Polygon',

    # Triangulation
    'TriangleIds',
    'Triangulation',
    'find_ear',
    'triangulate',

    # Convex hulls
    'ConvexHull',
    'compute_hull',
    'compute_all_hulls',
    'hulls_agree',

    # Core types and configuration
    'Orientation',
    'HullAlgorithm',
    'DegeneratePolicy',
    'KernelConfig',

    # Core exceptions
    'GeometerError',
    'DegenerateInputError',
    'EarNotFoundError',
    'ForeignIdError',
    'TopologyError',
    'InvalidPolygonError',
    'InputTooLargeError',
    'HullError',
    'UnsupportedGeometryError',
    'ConfigurationError',
    'DegenerateGeometryWarning',
]
