"""Orientation predicates.

Every predicate in this module is derived from :func:`signed_area`, the
cross product of ``b - a`` and ``c - a``. With integer (or Fraction)
coordinates the arithmetic is exact; with floats the results are subject to
ordinary rounding and no robustness guarantees are made.

Segment predicates take the four endpoints explicitly, ``(a, b)`` for the
first segment and ``(c, d)`` for the second. :mod:`geometer.primitives` wraps
them in Triangle and LineSegment views.
"""

from typing import Iterable, Sequence

import numpy as np

from .core.types import Orientation
from .point import Point

# Products of two coordinate differences must fit in int64.
_INT64_SAFE_COORD = 2 ** 30


def signed_area(a: Point, b: Point, c: Point):
    """Twice the signed area of triangle abc.

    Positive when a, b, c turn counter-clockwise, negative when clockwise and
    zero exactly when the three points are collinear (which includes any two
    of them coinciding).

    Examples:
        >>> signed_area(Point(0, 0), Point(3, 0), Point(0, 4))
        12
    """
    return (b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)


def orientation(a: Point, b: Point, c: Point) -> Orientation:
    """Side of the directed line a -> b on which c lies."""
    area = signed_area(a, b, c)
    if area > 0:
        return Orientation.LEFT
    if area < 0:
        return Orientation.RIGHT
    return Orientation.COLLINEAR


def collinear(a: Point, b: Point, c: Point) -> bool:
    return signed_area(a, b, c) == 0


def left(a: Point, b: Point, c: Point) -> bool:
    """True if c is strictly left of the directed line a -> b."""
    return signed_area(a, b, c) > 0


def left_on(a: Point, b: Point, c: Point) -> bool:
    """True if c is left of or on the directed line a -> b."""
    return signed_area(a, b, c) >= 0


def between(p: Point, a: Point, b: Point) -> bool:
    """True if p lies on the closed segment ab.

    p must be collinear with a and b, and its coordinate on the
    non-degenerate axis (y for vertical segments, x otherwise) must fall in
    the closed range spanned by a and b.
    """
    if a == b:
        return p == a
    if not collinear(a, b, p):
        return False
    if a.x == b.x:
        lo, hi, check = min(a.y, b.y), max(a.y, b.y), p.y
    else:
        lo, hi, check = min(a.x, b.x), max(a.x, b.x), p.x
    return lo <= check <= hi


def proper_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if segments ab and cd cross at a single interior point.

    Any collinear triple among the four endpoints rules out a proper
    intersection.
    """
    abc = signed_area(a, b, c)
    abd = signed_area(a, b, d)
    cda = signed_area(c, d, a)
    cdb = signed_area(c, d, b)

    if abc == 0 or abd == 0 or cda == 0 or cdb == 0:
        return False

    ab_splits_cd = (abc > 0) ^ (abd > 0)
    cd_splits_ab = (cda > 0) ^ (cdb > 0)
    return ab_splits_cd and cd_splits_ab


def improper_intersect(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if an endpoint of one segment lies on the other segment."""
    return between(c, a, b) or between(d, a, b) or between(a, c, d) or between(b, c, d)


def intersects(a: Point, b: Point, c: Point, d: Point) -> bool:
    """True if segments ab and cd share any point.

    A segment always intersects itself (improperly); callers that walk
    polygon edges must skip incident edges themselves.
    """
    return proper_intersect(a, b, c, d) or improper_intersect(a, b, c, d)


# ============================================================================
# Vectorised forms (work with numpy arrays)
# ============================================================================

def as_coordinate_array(points: Iterable[Point]) -> np.ndarray:
    """Stack points into an ``(n, 2)`` array suitable for :func:`signed_areas`.

    Integer coordinates stay exact: when any of them is too large for int64
    products the array is built with ``dtype=object`` (Python integers). The
    decision is made on the Python values, before NumPy picks a dtype.
    """
    pairs = [(p.x, p.y) for p in points]
    if not pairs:
        return np.empty((0, 2))
    values = [c for pair in pairs for c in pair]
    if all(isinstance(c, int) for c in values) and max(abs(c) for c in values) >= _INT64_SAFE_COORD:
        return np.array(pairs, dtype=object)
    return np.array(pairs)


def signed_areas(a: Point, b: Point, coords: np.ndarray) -> np.ndarray:
    """Vectorised :func:`signed_area` of ``(a, b, c)`` for every row ``c``.

    Args:
        a: First point of the directed line
        b: Second point of the directed line
        coords: Coordinate array (Nx2)

    Returns:
        Array of N signed double areas
    """
    return (b.x - a.x) * (coords[:, 1] - a.y) - (coords[:, 0] - a.x) * (b.y - a.y)


def all_collinear(points: Sequence[Point]) -> bool:
    """True if every point lies on one line (fewer than 3 points included)."""
    if len(points) < 3:
        return True
    a = points[0]
    # First point distinct from a fixes the line.
    for b in points[1:]:
        if b != a:
            break
    else:
        return True
    return all(collinear(a, b, c) for c in points)


__all__ = [
    'signed_area',
    'orientation',
    'collinear',
    'left',
    'left_on',
    'between',
    'proper_intersect',
    'improper_intersect',
    'intersects',
    'as_coordinate_array',
    'signed_areas',
    'all_collinear',
]
