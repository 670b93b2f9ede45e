"""Type definitions for the planar geometry model.

Contains enums and aliases used throughout the geometry module.
"""

from enum import Enum

Coordinate = tuple[float, float]

# GEOS reports SRID 0 for geometries that never had one assigned
UNSET_SRID = 0


class GeometryType(str, Enum):
    """Planar geometry variants handled by the converter."""

    POINT = "Point"
    LINESTRING = "LineString"
    POLYGON = "Polygon"
    MULTIPOINT = "MultiPoint"
    MULTILINESTRING = "MultiLineString"
    MULTIPOLYGON = "MultiPolygon"
    GEOMETRYCOLLECTION = "GeometryCollection"


class RingOrientation(str, Enum):
    """Winding of a closed coordinate sequence."""

    CCW = "counter-clockwise"
    CW = "clockwise"
    DEGENERATE = "degenerate"
