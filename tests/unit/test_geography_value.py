"""Unit tests for the Geography value, its validity and repair."""

import pytest

from geoconvert.geography import Geography, GeographyType
from geoconvert.geography.shapes import from_shape, to_shape
from geoconvert.geometry.orientation import is_ccw


def _lonlat(figure):
    return [(lon, lat) for lat, lon in figure]


class TestAccessors:
    def test_one_based_points(self):
        line = Geography(GeographyType.LINESTRING, figures=[[(0, 0), (1, 2), (3, 4)]])
        assert line.num_points() == 3
        assert line.point_n(1).lat == 0
        assert line.point_n(3).long == 4
        with pytest.raises(IndexError):
            line.point_n(0)
        with pytest.raises(IndexError):
            line.point_n(4)

    def test_rings(self, polygon_geography, ccw_square_coords, cw_hole_coords):
        polygon = polygon_geography(ccw_square_coords, cw_hole_coords)
        assert polygon.num_rings() == 2
        ring = polygon.ring_n(2)
        assert ring.geometry_type == "LineString"
        assert ring.num_points() == 5
        assert ring.point_n(2).long == 2.0
        assert ring.point_n(2).lat == 4.0

    def test_ring_n_requires_polygon(self):
        with pytest.raises(TypeError):
            Geography(GeographyType.POINT, figures=[[(0, 0)]]).ring_n(1)

    def test_children(self):
        points = [Geography(GeographyType.POINT, figures=[[(i, i)]]) for i in range(3)]
        multi = Geography(GeographyType.MULTIPOINT, children=points)
        assert multi.num_geometries() == 3
        assert multi.geometry_n(2) is points[1]
        with pytest.raises(IndexError):
            multi.geometry_n(4)

    def test_leaf_counts_as_one_geometry(self):
        point = Geography(GeographyType.POINT, figures=[[(1, 2)]])
        assert point.num_geometries() == 1
        assert point.geometry_n(1) is point

    def test_null(self):
        null = Geography.null(srid=4269)
        assert null.is_null is True
        assert null.srid == 4269
        assert null.geometry_type is None
        assert null.is_valid() is False

    def test_composite_rejects_figures(self):
        with pytest.raises(ValueError):
            Geography(GeographyType.MULTIPOINT, figures=[[(0, 0)]])


class TestEmpty:
    def test_empty_collection(self):
        assert Geography(GeographyType.GEOMETRYCOLLECTION).is_empty() is True

    def test_collection_of_empty_children(self):
        collection = Geography(
            GeographyType.GEOMETRYCOLLECTION,
            children=[Geography(GeographyType.POLYGON)],
        )
        assert collection.is_empty() is True

    def test_point_not_empty(self):
        assert Geography(GeographyType.POINT, figures=[[(0, 0)]]).is_empty() is False


class TestValidity:
    def test_left_hand_polygon_valid(self, polygon_geography, ccw_square_coords, cw_hole_coords):
        assert polygon_geography(ccw_square_coords, cw_hole_coords).is_valid() is True

    def test_shell_order_does_not_matter(self, polygon_geography, ccw_square_coords, cw_hole_coords):
        assert polygon_geography(cw_hole_coords, ccw_square_coords).is_valid() is True

    def test_clockwise_shell_invalid(self, polygon_geography, cw_square_coords):
        assert polygon_geography(cw_square_coords).is_valid() is False

    def test_two_counter_clockwise_rings_invalid(self, polygon_geography, ccw_square_coords):
        inner = [(2.0, 2.0), (4.0, 2.0), (4.0, 4.0), (2.0, 4.0), (2.0, 2.0)]
        assert polygon_geography(ccw_square_coords, inner).is_valid() is False

    def test_latitude_out_of_range(self):
        assert Geography(GeographyType.POINT, figures=[[(95, 0)]]).is_valid() is False

    def test_longitude_out_of_range(self):
        assert Geography(GeographyType.POINT, figures=[[(0, 181)]]).is_valid() is False

    def test_single_point_line_invalid(self):
        assert Geography(GeographyType.LINESTRING, figures=[[(0, 0)]]).is_valid() is False

    def test_self_intersecting_polygon_invalid(self, polygon_geography):
        bowtie = [(0.0, 0.0), (10.0, 10.0), (10.0, 0.0), (0.0, 10.0), (0.0, 0.0)]
        assert polygon_geography(bowtie).is_valid() is False

    def test_composite_checks_children(self):
        bad = Geography(GeographyType.POINT, figures=[[(95, 0)]])
        good = Geography(GeographyType.POINT, figures=[[(1, 1)]])
        assert Geography(GeographyType.MULTIPOINT, children=[good]).is_valid() is True
        assert Geography(GeographyType.MULTIPOINT, children=[good, bad]).is_valid() is False


class TestRepair:
    def test_make_valid_reorients_shell(self, polygon_geography, cw_square_coords):
        repaired = polygon_geography(cw_square_coords, srid=4269).make_valid()
        assert repaired.is_valid() is True
        assert repaired.srid == 4269
        assert is_ccw(_lonlat(repaired.figures[0]))

    def test_make_valid_fixes_bowtie(self, polygon_geography):
        bowtie = [(0.0, 0.0), (10.0, 10.0), (10.0, 0.0), (0.0, 10.0), (0.0, 0.0)]
        repaired = polygon_geography(bowtie).make_valid()
        assert repaired.geometry_type == "MultiPolygon"
        assert repaired.is_valid() is True

    def test_make_valid_cannot_fix_latitude(self):
        point = Geography(GeographyType.POINT, figures=[[(95, 0)]])
        assert point.make_valid().is_valid() is False

    def test_reduce_keeps_corners(self, polygon_geography, ccw_square_coords):
        polygon = polygon_geography(ccw_square_coords)
        assert polygon.reduce(1.0) == polygon

    def test_reduce_removes_small_deviation(self):
        # Middle vertex is roughly 11 m off the straight line
        line = Geography(GeographyType.LINESTRING, figures=[[(0, 0), (0.0001, 1), (0, 2)]])
        reduced = line.reduce(100.0)
        assert reduced.num_points() == 2

    def test_null_is_returned_untouched(self):
        null = Geography.null()
        assert null.reduce(1.0) is null
        assert null.make_valid() is null


class TestPlanarImage:
    def test_image_swaps_axes(self):
        point = Geography(GeographyType.POINT, figures=[[(20, 10)]])
        shape = to_shape(point)
        assert (shape.x, shape.y) == (10, 20)

    def test_round_trip_through_image(self, polygon_geography, ccw_square_coords, cw_hole_coords):
        polygon = polygon_geography(ccw_square_coords, cw_hole_coords)
        assert from_shape(to_shape(polygon), polygon.srid) == polygon

    def test_null_has_no_image(self):
        with pytest.raises(ValueError):
            to_shape(Geography.null())
