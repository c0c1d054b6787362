"""Point value type and axis-aligned bounding box."""

from __future__ import annotations

from dataclasses import dataclass
from math import cos, sin
from typing import Iterable, Iterator, Optional, Tuple, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Point:
    """Immutable 2D coordinate pair.

    Equality is exact field equality, with no tolerance. Integer coordinates
    keep every predicate exact; floats are accepted but subject to rounding.

    Examples:
        >>> Point(1, 2) == Point(1, 2)
        True
        >>> x, y = Point(3, 4)
    """
    x: Number
    y: Number

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def translated(self, dx: Number, dy: Number) -> "Point":
        """Return this point shifted by ``(dx, dy)``."""
        return Point(self.x + dx, self.y + dy)

    def rotated(self, radians: float, center: Optional["Point"] = None) -> "Point":
        """Return this point rotated counter-clockwise about ``center``.

        Args:
            radians: Rotation angle
            center: Pivot point (default: origin)

        Returns:
            New Point with float coordinates
        """
        cx, cy = (0.0, 0.0) if center is None else (center.x, center.y)
        cos_theta = cos(radians)
        sin_theta = sin(radians)
        x_diff = self.x - cx
        y_diff = self.y - cy
        return Point(
            x_diff * cos_theta - y_diff * sin_theta + cx,
            x_diff * sin_theta + y_diff * cos_theta + cy,
        )

    @classmethod
    def coerce(cls, value: Union["Point", Tuple[Number, Number]]) -> "Point":
        """Build a Point from a Point or an ``(x, y)`` pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(x, y)


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned bounding box."""
    min_x: Number
    max_x: Number
    min_y: Number
    max_y: Number

    @classmethod
    def from_points(cls, points: Iterable[Point]) -> "BoundingBox":
        points = list(points)
        if not points:
            raise ValueError("empty point set")
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return cls(min(xs), max(xs), min(ys), max(ys))

    @property
    def width(self) -> Number:
        return self.max_x - self.min_x

    @property
    def height(self) -> Number:
        return self.max_y - self.min_y

    def center(self) -> Point:
        return Point(
            0.5 * (self.max_x - self.min_x) + self.min_x,
            0.5 * (self.max_y - self.min_y) + self.min_y,
        )

    def contains(self, p: Point) -> bool:
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y


__all__ = [
    'Point',
    'BoundingBox',
]
