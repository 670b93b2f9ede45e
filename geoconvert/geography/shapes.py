"""Planar image of a geography, used for validity checks and repair.

The image maps every (latitude, longitude) point to a shapely
coordinate (x=longitude, y=latitude) without changing ring order or
winding. Repaired images are turned back into geographies through the
builder, again without any orientation change.
"""

import logging

import shapely
from shapely.errors import GEOSException
from shapely.geometry import (
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient

from geoconvert.core.exceptions import UnsupportedTypeError
from geoconvert.geography.builder import GeographyBuilder
from geoconvert.geography.types import GeographyType
from geoconvert.geography.value import Geography
from geoconvert.geometry.orientation import is_ccw

logger = logging.getLogger(__name__)

# Length of one degree of arc on the WGS 84 equator
METRES_PER_DEGREE = 111_319.49

MAX_LATITUDE = 90.0
MAX_LONGITUDE = 180.0


def to_shape(geography: Geography) -> BaseGeometry:
    """Build the planar image of a geography.

    Raises:
        ValueError: If the geography is null or a figure cannot form
            its planar counterpart (e.g. a one-point line)
    """
    if geography.is_null:
        raise ValueError("Null geography has no planar image")

    geometry_type = GeographyType(geography.geometry_type)

    if geometry_type is GeographyType.POINT:
        if not geography.figures:
            return Point()
        return Point(_planar(geography.figures[0])[0])

    if geometry_type is GeographyType.LINESTRING:
        if not geography.figures:
            return LineString()
        return LineString(_planar(geography.figures[0]))

    if geometry_type is GeographyType.POLYGON:
        rings = [_planar(figure) for figure in geography.figures]
        if not rings:
            return Polygon()
        shell_index = next((i for i, ring in enumerate(rings) if is_ccw(ring)), 0)
        holes = [ring for i, ring in enumerate(rings) if i != shell_index]
        return Polygon(rings[shell_index], holes)

    children = [to_shape(child) for child in geography.children]
    if geometry_type is GeographyType.MULTIPOINT:
        return MultiPoint(children)
    if geometry_type is GeographyType.MULTILINESTRING:
        return MultiLineString(children)
    if geometry_type is GeographyType.MULTIPOLYGON:
        return MultiPolygon(children)
    return GeometryCollection(children)


def from_shape(shape: BaseGeometry, srid: int) -> Geography:
    """Build a geography from a planar image, keeping ring order and winding."""
    builder = GeographyBuilder()
    builder.set_srid(srid)
    _emit(builder, shape)
    return builder.constructed_geography


def _emit(builder: GeographyBuilder, shape: BaseGeometry) -> None:
    if isinstance(shape, Point):
        builder.begin_geography(GeographyType.POINT)
        if not shape.is_empty:
            builder.begin_figure(shape.y, shape.x)
            builder.end_figure()
        builder.end_geography()
    elif isinstance(shape, LineString):
        builder.begin_geography(GeographyType.LINESTRING)
        _emit_figure(builder, shape.coords)
        builder.end_geography()
    elif isinstance(shape, Polygon):
        builder.begin_geography(GeographyType.POLYGON)
        if not shape.is_empty:
            _emit_figure(builder, shape.exterior.coords)
            for interior in shape.interiors:
                _emit_figure(builder, interior.coords)
        builder.end_geography()
    elif isinstance(shape, (MultiPoint, MultiLineString, MultiPolygon, GeometryCollection)):
        builder.begin_geography(GeographyType(shape.geom_type))
        for part in shape.geoms:
            _emit(builder, part)
        builder.end_geography()
    else:
        raise UnsupportedTypeError(shape.geom_type, direction="geometry")


def _emit_figure(builder: GeographyBuilder, coords) -> None:
    coords = list(coords)
    if not coords:
        return
    builder.begin_figure(coords[0][1], coords[0][0])
    for x, y, *_ in coords[1:]:
        builder.add_line(y, x)
    builder.end_figure()


def _planar(figure) -> list[tuple[float, float]]:
    return [(lon, lat) for lat, lon in figure]


def is_valid_geography(geography: Geography) -> bool:
    """Check a geography against geodetic and topological rules.

    Null geographies are invalid, empty ones valid. Composites are valid
    when every child is; member types are not checked.
    """
    if geography.is_null:
        return False
    return _is_valid_node(geography)


def _is_valid_node(geography: Geography) -> bool:
    if geography.is_empty():
        return True

    geometry_type = GeographyType(geography.geometry_type)
    if geometry_type.is_composite:
        return all(_is_valid_node(child) for child in geography.children)

    for figure in geography.figures:
        for lat, lon in figure:
            if abs(lat) > MAX_LATITUDE or abs(lon) > MAX_LONGITUDE:
                return False

    if geometry_type is GeographyType.POINT:
        return True

    if geometry_type is GeographyType.LINESTRING:
        figure = geography.figures[0]
        if len(figure) < 2:
            return False
        return LineString(_planar(figure)).is_valid

    rings = [_planar(figure) for figure in geography.figures]
    try:
        for ring in rings:
            LinearRing(ring)
    except (ValueError, GEOSException):
        return False

    shells = [i for i, ring in enumerate(rings) if is_ccw(ring)]
    if len(shells) != 1:
        return False

    holes = [ring for i, ring in enumerate(rings) if i != shells[0]]
    return Polygon(rings[shells[0]], holes).is_valid


def reduce_geography(geography: Geography, tolerance: float) -> Geography:
    """Topology-preserving simplification with ``tolerance`` in metres."""
    if geography.is_null:
        return geography

    tolerance_degrees = tolerance / METRES_PER_DEGREE
    simplified = shapely.simplify(
        to_shape(geography), tolerance_degrees, preserve_topology=True
    )
    return from_shape(simplified, geography.srid)


def make_valid_geography(geography: Geography) -> Geography:
    """Repair topology and re-orient polygons to the left-hand rule."""
    if geography.is_null:
        return geography

    shape = to_shape(geography)
    if not shape.is_valid:
        shape = shapely.make_valid(shape)
        logger.debug("Repaired planar image to %s", shape.geom_type)
    return from_shape(_orient(shape), geography.srid)


def _orient(shape: BaseGeometry) -> BaseGeometry:
    if isinstance(shape, Polygon):
        return shape if shape.is_empty else orient(shape, sign=1.0)
    if isinstance(shape, MultiPolygon):
        return MultiPolygon([_orient(polygon) for polygon in shape.geoms])
    if isinstance(shape, GeometryCollection):
        return GeometryCollection([_orient(part) for part in shape.geoms])
    return shape
