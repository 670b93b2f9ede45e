"""Unit tests for GeometryFactory and GeometryServices."""

import pytest
import shapely
from shapely.geometry import LinearRing, LineString, Point

from geoconvert.geometry import GeometryFactory, GeometryServices, get_geometry_services
from geoconvert.geometry.types import UNSET_SRID


@pytest.fixture
def factory():
    return GeometryFactory(srid=4326)


class TestCreate:
    def test_point_srid(self, factory):
        point = factory.create_point((1.0, 2.0))
        assert (point.x, point.y) == (1.0, 2.0)
        assert shapely.get_srid(point) == 4326

    def test_unset_srid_left_alone(self):
        point = GeometryFactory().create_point((1.0, 2.0))
        assert shapely.get_srid(point) == UNSET_SRID

    def test_polygon_with_holes(self, factory, ccw_square_coords, cw_hole_coords):
        polygon = factory.create_polygon(ccw_square_coords, [cw_hole_coords])
        assert list(polygon.exterior.coords) == ccw_square_coords
        assert len(polygon.interiors) == 1

    def test_linear_ring(self, factory, ccw_square_coords):
        ring = factory.create_linear_ring(ccw_square_coords)
        assert ring.geom_type == "LinearRing"
        assert ring.is_closed
        assert shapely.get_srid(ring) == 4326

    def test_polygon_from_rings(self, factory, ccw_square_coords, cw_hole_coords):
        polygon = factory.create_polygon(
            factory.create_linear_ring(ccw_square_coords),
            [factory.create_linear_ring(cw_hole_coords)],
        )
        assert list(polygon.interiors[0].coords) == cw_hole_coords

    def test_empty_polygon(self, factory):
        assert factory.create_polygon().is_empty

    def test_empty_collection(self, factory):
        collection = factory.create_geometry_collection()
        assert collection.geom_type == "GeometryCollection"
        assert collection.is_empty

    def test_precision_grid(self):
        point = GeometryFactory(grid_size=0.1).create_point((1.234, 5.678))
        assert point.x == pytest.approx(1.2)
        assert point.y == pytest.approx(5.7)


class TestMemberTypes:
    def test_multi_polygon_rejects_point(self, factory):
        with pytest.raises(TypeError):
            factory.create_multi_polygon([Point(0, 0)])

    def test_multi_line_string_rejects_ring(self, factory):
        with pytest.raises(TypeError):
            factory.create_multi_line_string([LinearRing([(0, 0), (1, 0), (1, 1)])])

    def test_multi_line_string(self, factory):
        multi = factory.create_multi_line_string([LineString([(0, 0), (1, 1)])])
        assert multi.geom_type == "MultiLineString"
        assert shapely.get_srid(multi) == 4326


class TestServices:
    def test_factories_cached_per_srid(self):
        services = GeometryServices(grid_size=0.0)
        first = services.create_geometry_factory(4326)
        assert services.create_geometry_factory(4326) is first
        assert services.create_geometry_factory(3857).srid == 3857

    def test_grid_from_settings(self, monkeypatch):
        monkeypatch.setenv("GEOCONVERT_PRECISION_GRID_SIZE", "0.5")
        assert GeometryServices().create_geometry_factory(4326).grid_size == 0.5

    def test_lazily_created_once(self):
        assert get_geometry_services() is get_geometry_services()
