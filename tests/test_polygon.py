import numpy as np
import pytest
from shapely.geometry import LineString, Polygon as ShapelyPolygon

from geometer import (
    DegenerateInputError,
    ForeignIdError,
    Point,
    Polygon,
    UnsupportedGeometryError,
)


class TestConstruction:
    """Tests for building polygons."""

    def test_from_tuples(self, square):
        assert len(square) == 4
        assert square.num_vertices() == 4
        assert square.num_edges() == 4
        assert square.vertex_ids() == [0, 1, 2, 3]

    def test_too_few_points(self):
        with pytest.raises(DegenerateInputError):
            Polygon([(0, 0), (1, 1)])

    def test_points_in_boundary_order(self, square):
        assert square.points() == [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]

    def test_unknown_vertex(self, square):
        with pytest.raises(ForeignIdError):
            square.get_vertex(4)
        assert 4 not in square
        assert 3 in square


class TestShapelyConversion:
    """Tests for Shapely import and export."""

    def test_from_shapely_drops_closing_coordinate(self):
        shp = ShapelyPolygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        polygon = Polygon.from_shapely(shp)
        assert len(polygon) == 4
        assert polygon.double_area() == 32

    def test_from_shapely_rejects_holes(self):
        shp = ShapelyPolygon(
            [(0, 0), (10, 0), (10, 10), (0, 10)],
            holes=[[(2, 2), (4, 2), (4, 4), (2, 4)]],
        )
        with pytest.raises(UnsupportedGeometryError):
            Polygon.from_shapely(shp)

    def test_from_shapely_rejects_other_types(self):
        with pytest.raises(UnsupportedGeometryError):
            Polygon.from_shapely(LineString([(0, 0), (1, 1)]))

    def test_from_shapely_rejects_empty(self):
        with pytest.raises(UnsupportedGeometryError):
            Polygon.from_shapely(ShapelyPolygon())

    def test_to_shapely_area_matches(self, polygon_case):
        polygon = polygon_case.polygon()
        assert polygon.to_shapely().area == pytest.approx(abs(polygon_case.double_area) / 2)

    def test_to_numpy(self, square):
        np.testing.assert_array_equal(
            square.to_numpy(), np.array([[0, 0], [4, 0], [4, 4], [0, 4]])
        )


class TestEdgesAndArea:
    """Tests for edges and signed area."""

    def test_edges(self, square):
        assert square.edges() == {(0, 1), (1, 2), (2, 3), (3, 0)}

    def test_edge_count_matches_vertex_count(self, polygon_case):
        polygon = polygon_case.polygon()
        assert len(polygon.edges()) == len(polygon)

    def test_double_area(self, polygon_case):
        assert polygon_case.polygon().double_area() == polygon_case.double_area

    def test_area(self, e_shape):
        assert e_shape.area() == 40.0

    def test_winding(self, square, clockwise_square):
        assert square.is_counter_clockwise()
        assert not clockwise_square.is_counter_clockwise()

    def test_area_independent_of_start_vertex(self, e_shape):
        points = e_shape.points()
        rotated = points[5:] + points[:5]
        assert Polygon(rotated).double_area() == 80

    def test_reflex_anchor(self):
        """The fan sum is exact even when the anchor vertex is reflex."""
        coords = [(4, 2), (8, 0), (4, 8), (0, 0)]
        assert Polygon(coords).double_area() == 48


class TestDiagonal:
    """Tests for in_cone and diagonal."""

    def test_square_diagonals(self, square):
        assert square.diagonal(0, 2)
        assert square.diagonal(1, 3)
        assert square.diagonal(2, 0)

    def test_adjacent_vertices_are_not_diagonals(self, square):
        assert not square.diagonal(0, 1)
        assert not square.diagonal(3, 0)

    def test_exterior_segment(self, arrow):
        """The segment under the notch lies outside the polygon."""
        assert not arrow.diagonal(0, 2)
        assert arrow.diagonal(1, 3)

    def test_in_cone_at_reflex_vertex(self, arrow):
        assert arrow.in_cone(1, 3)
        assert arrow.in_cone(3, 1)

    def test_in_cone_at_convex_vertex(self, arrow, square):
        assert square.in_cone(0, 2)
        assert not arrow.in_cone(0, 1)
        assert not arrow.in_cone(0, 2)
        assert not arrow.in_cone(2, 0)

    def test_blocked_by_non_incident_edge(self, e_shape):
        """Segment (0,0)-(6,8) crosses the notches of the E."""
        assert not e_shape.diagonal(0, 10)

    def test_segment_through_vertex(self):
        """A segment passing exactly through another vertex is rejected."""
        polygon = Polygon([(0, 0), (4, 0), (4, 4), (2, 2), (0, 4)])
        assert not polygon.diagonal(0, 2)


class TestExtremes:
    """Tests for bounding box and extreme vertex queries."""

    def test_bounding_box(self, arrow):
        box = arrow.bounding_box()
        assert (box.min_x, box.max_x, box.min_y, box.max_y) == (0, 8, 0, 8)
        assert box.center() == Point(4.0, 4.0)

    def test_extreme_vertices(self):
        polygon = Polygon([(2, 0), (5, 0), (5, 3), (0, 3), (0, 1)])
        assert polygon.lowest_leftmost_vertex().id == 0
        assert polygon.leftmost_lowest_vertex().id == 4
        assert polygon.leftmost_highest_vertex().id == 3
        assert polygon.rightmost_lowest_vertex().id == 1
        assert polygon.lowest_rightmost_vertex().id == 1
        assert polygon.highest_leftmost_vertex().id == 3
        assert polygon.highest_rightmost_vertex().id == 2
        assert polygon.rightmost_highest_vertex().id == 2


class TestValidity:
    """Tests for Shapely-backed simplicity checks."""

    def test_simple(self, polygon_case):
        assert polygon_case.polygon().is_simple()

    def test_self_intersecting(self, bent_quad):
        assert not bent_quad.is_simple()
        assert "Self-intersection" in bent_quad.explain_validity()
