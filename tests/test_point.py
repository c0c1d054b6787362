import math

import pytest

from geometer import BoundingBox, Point


class TestPoint:
    """Tests for the Point value type."""

    def test_equality_is_exact(self):
        assert Point(1, 2) == Point(1, 2)
        assert Point(1, 2) != Point(2, 1)
        assert Point(0.1 + 0.2, 0) != Point(0.3, 0)

    def test_hashable(self):
        """Points can be used as set members and dict keys."""
        assert len({Point(1, 1), Point(1, 1), Point(2, 2)}) == 2

    def test_unpacking(self):
        x, y = Point(3, 4)
        assert (x, y) == (3, 4)

    def test_immutable(self):
        p = Point(0, 0)
        with pytest.raises(AttributeError):
            p.x = 5

    def test_coerce_tuple(self):
        assert Point.coerce((1, 2)) == Point(1, 2)

    def test_coerce_point_returns_same_object(self):
        p = Point(1, 2)
        assert Point.coerce(p) is p

    def test_translated(self):
        assert Point(1, 2).translated(3, -1) == Point(4, 1)


class TestRotation:
    """Tests for rotating points about a center."""

    def test_quarter_turn_about_origin(self):
        p = Point(1, 0).rotated(math.pi / 2)
        assert p.x == pytest.approx(0, abs=1e-12)
        assert p.y == pytest.approx(1)

    def test_half_turn_about_center(self):
        p = Point(2, 1).rotated(math.pi, center=Point(1, 1))
        assert p.x == pytest.approx(0)
        assert p.y == pytest.approx(1)

    def test_center_is_fixed(self):
        c = Point(5, 5)
        p = c.rotated(1.234, center=c)
        assert p.x == pytest.approx(5)
        assert p.y == pytest.approx(5)

    def test_full_turn_is_identity(self):
        p = Point(3, -7).rotated(2 * math.pi, center=Point(1, 2))
        assert p.x == pytest.approx(3)
        assert p.y == pytest.approx(-7)


class TestBoundingBox:
    """Tests for axis-aligned bounding boxes."""

    def test_from_points(self):
        box = BoundingBox.from_points([Point(1, 5), Point(-2, 3), Point(4, -1)])
        assert (box.min_x, box.max_x, box.min_y, box.max_y) == (-2, 4, -1, 5)
        assert box.width == 6
        assert box.height == 6

    def test_center(self):
        box = BoundingBox(0, 4, 0, 2)
        assert box.center() == Point(2.0, 1.0)

    def test_contains_boundary(self):
        box = BoundingBox(0, 4, 0, 2)
        assert box.contains(Point(0, 0))
        assert box.contains(Point(4, 1))
        assert not box.contains(Point(5, 1))

    def test_empty_raises(self):
        with pytest.raises(ValueError):
            BoundingBox.from_points([])
