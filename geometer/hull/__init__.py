"""Convex hull computation.

Seven interchangeable strategies share one contract (see
:func:`geometer.hull.compute_hull`) and are expected to agree exactly on
every input, which makes the brute-force ones usable as test oracles for the
fast ones.
"""

from .core import (
    ConvexHull,
    HullStrategy,
    STRATEGIES,
    compute_hull,
    compute_all_hulls,
    hulls_agree,
    distinct_vertices,
)

__all__ = [
    'ConvexHull',
    'HullStrategy',
    'STRATEGIES',
    'compute_hull',
    'compute_all_hulls',
    'hulls_agree',
    'distinct_vertices',
]
