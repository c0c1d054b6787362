"""Convex hull strategy implementations."""

from .gift_wrapping import hull_gift_wrapping
from .quick_hull import hull_quick_hull
from .graham_scan import hull_graham_scan, polar_sort
from .extreme_edges import hull_extreme_edges
from .interior_points import hull_interior_points
from .incremental import hull_incremental
from .divide_conquer import hull_divide_conquer

__all__ = [
    'hull_gift_wrapping',
    'hull_quick_hull',
    'hull_graham_scan',
    'hull_extreme_edges',
    'hull_interior_points',
    'hull_incremental',
    'hull_divide_conquer',
    'polar_sort',
]
