"""Triangle and line segment views over points.

These are thin, immutable wrappers that name the arguments of the
predicates in :mod:`geometer.predicates`. They own no topology.
"""

from typing import NamedTuple

from .core.types import Orientation
from .point import Point
from . import predicates


class Triangle(NamedTuple):
    """Three points, in the order given."""
    a: Point
    b: Point
    c: Point

    def double_area(self):
        return predicates.signed_area(self.a, self.b, self.c)

    def area(self) -> float:
        return self.double_area() / 2

    def area_sign(self) -> int:
        area = self.double_area()
        return (area > 0) - (area < 0)

    def orientation(self) -> Orientation:
        return predicates.orientation(self.a, self.b, self.c)

    def has_collinear_points(self) -> bool:
        return self.double_area() == 0

    def contains(self, p: Point) -> bool:
        """True if p is inside or on the boundary of this triangle.

        Works for either winding. A degenerate triangle contains nothing.
        """
        sign = self.area_sign()
        if sign == 0:
            return False
        return all(
            predicates.signed_area(u, v, p) * sign >= 0
            for u, v in ((self.a, self.b), (self.b, self.c), (self.c, self.a))
        )


class LineSegment(NamedTuple):
    """Directed segment from p1 to p2."""
    p1: Point
    p2: Point

    def reverse(self) -> "LineSegment":
        return LineSegment(self.p2, self.p1)

    def is_vertical(self) -> bool:
        return self.p1.x == self.p2.x

    def is_horizontal(self) -> bool:
        return self.p1.y == self.p2.y

    def length_squared(self):
        dx = self.p2.x - self.p1.x
        dy = self.p2.y - self.p1.y
        return dx * dx + dy * dy

    def proper_intersects(self, other: "LineSegment") -> bool:
        return predicates.proper_intersect(self.p1, self.p2, other.p1, other.p2)

    def improper_intersects(self, other: "LineSegment") -> bool:
        return predicates.improper_intersect(self.p1, self.p2, other.p1, other.p2)

    def intersects(self, other: "LineSegment") -> bool:
        return predicates.intersects(self.p1, self.p2, other.p1, other.p2)

    def incident_to(self, p: Point) -> bool:
        return self.p1 == p or self.p2 == p

    def connected_to(self, other: "LineSegment") -> bool:
        """True if the segments share an endpoint coordinate."""
        return self.incident_to(other.p1) or self.incident_to(other.p2)

    def has_left(self, p: Point) -> bool:
        return predicates.left(self.p1, self.p2, p)

    def has_left_on(self, p: Point) -> bool:
        return predicates.left_on(self.p1, self.p2, p)


__all__ = [
    'Triangle',
    'LineSegment',
]
