"""Type definitions for geometer operations.

This module defines enums for orientation results and strategy parameters
throughout the library.
"""

from enum import Enum
from typing import Type, TypeVar, Union

from .errors import ConfigurationError

E = TypeVar('E', bound=Enum)


class Orientation(Enum):
    """Side of a directed line ``a -> b`` on which a third point lies.

    Attributes:
        LEFT: Counter-clockwise turn (positive signed area)
        RIGHT: Clockwise turn (negative signed area)
        COLLINEAR: The three points lie on one line (zero signed area)

    Examples:
        >>> from geometer import Point, orientation, Orientation
        >>> orientation(Point(0, 0), Point(1, 0), Point(0, 1)) is Orientation.LEFT
        True
    """
    LEFT = 'left'
    RIGHT = 'right'
    COLLINEAR = 'collinear'


class HullAlgorithm(Enum):
    """Algorithm used to compute a convex hull.

    Every algorithm returns the same set of hull vertices; they differ only in
    running time, which makes them useful to cross-check one another.

    Attributes:
        GIFT_WRAPPING: Jarvis march, O(nh)
        QUICK_HULL: Recursive farthest-point partitioning, O(n log n) average
        GRAHAM_SCAN: Polar sort plus stack sweep, O(n log n) (default)
        EXTREME_EDGES: Brute-force edge test, O(n^3), reference only
        INTERIOR_POINTS: Brute-force triangle containment, O(n^4), oracle only
        INCREMENTAL: Sorted sweep adding one point at a time, O(n log n)
        DIVIDE_CONQUER: Merge of x-split halves by common tangents, O(n log n)

    Examples:
        >>> from geometer import compute_hull, HullAlgorithm
        >>> hull = compute_hull(polygon, algorithm=HullAlgorithm.QUICK_HULL)
    """
    GIFT_WRAPPING = 'gift_wrapping'
    QUICK_HULL = 'quick_hull'
    GRAHAM_SCAN = 'graham_scan'
    EXTREME_EDGES = 'extreme_edges'
    INTERIOR_POINTS = 'interior_points'
    INCREMENTAL = 'incremental'
    DIVIDE_CONQUER = 'divide_conquer'


class DegeneratePolicy(Enum):
    """What a hull computation does with zero-area input.

    Attributes:
        EXTREMES: Return the two extreme collinear points and warn (default)
        RAISE: Raise DegenerateInputError

    Examples:
        >>> from geometer import KernelConfig, DegeneratePolicy
        >>> config = KernelConfig(degenerate_policy=DegeneratePolicy.RAISE)
    """
    EXTREMES = 'extremes'
    RAISE = 'raise'


def coerce_enum(value: Union[Enum, str], enum_cls: Type[E]) -> E:
    """Return ``value`` as a member of ``enum_cls``.

    Accepts an existing member or its string value (e.g. ``"graham_scan"``).

    Raises:
        ConfigurationError: If the value does not name a member
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        valid = ", ".join(repr(m.value) for m in enum_cls)
        raise ConfigurationError(
            f"Unknown {enum_cls.__name__} value {value!r}; expected one of {valid}"
        ) from None


__all__ = [
    'Orientation',
    'HullAlgorithm',
    'DegeneratePolicy',
    'coerce_enum',
]
