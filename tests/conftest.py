"""Pytest fixtures for conversion testing."""

from typing import Callable

import pytest
from shapely.geometry import Polygon

from geoconvert.config import get_settings
from geoconvert.converters import GeographyConverter
from geoconvert.geography import Geography, GeographyType
from geoconvert.geometry import GeometryServices


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def services() -> GeometryServices:
    return GeometryServices(grid_size=0.0)


@pytest.fixture
def converter(services) -> GeographyConverter:
    return GeographyConverter(reduce_tolerance=1.0, services=services)


@pytest.fixture
def ccw_square_coords() -> list[tuple[float, float]]:
    """10 x 10 square wound counter-clockwise."""
    return [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0), (0.0, 0.0)]


@pytest.fixture
def cw_square_coords(ccw_square_coords) -> list[tuple[float, float]]:
    """10 x 10 square wound clockwise."""
    return list(reversed(ccw_square_coords))


@pytest.fixture
def cw_hole_coords() -> list[tuple[float, float]]:
    """2 x 2 hole inside the square, wound clockwise."""
    return [(2.0, 2.0), (2.0, 4.0), (4.0, 4.0), (4.0, 2.0), (2.0, 2.0)]


@pytest.fixture
def cw_shell_polygon(cw_square_coords, cw_hole_coords) -> Polygon:
    """Polygon whose reversed shell already satisfies the left-hand rule."""
    return Polygon(cw_square_coords, [cw_hole_coords])


@pytest.fixture
def ccw_shell_polygon(ccw_square_coords, cw_hole_coords) -> Polygon:
    """Polygon in shapely's oriented form (shell CCW, holes CW)."""
    return Polygon(ccw_square_coords, [cw_hole_coords])


@pytest.fixture
def polygon_geography() -> Callable[..., Geography]:
    """Build a polygon geography from rings given as (lon, lat) pairs."""

    def _build(*rings, srid: int = 4326) -> Geography:
        figures = [[(lat, lon) for lon, lat in ring] for ring in rings]
        return Geography(GeographyType.POLYGON, figures=figures, srid=srid)

    return _build


@pytest.fixture
def notched_ccw_polygon() -> Polygon:
    """Counter-clockwise unit square with a vertex 1e-6 degrees off its base."""
    return Polygon([(0, 0), (0.5, 1e-6), (1, 0), (1, 1), (0, 1)])
