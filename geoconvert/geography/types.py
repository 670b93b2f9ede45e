"""Type definitions for the geodetic geography model."""

from enum import Enum

# (latitude, longitude), the order the builder protocol takes ordinates in
GeoPoint = tuple[float, float]
Figure = tuple[GeoPoint, ...]

# WGS 84, the default spatial reference of a geography
WGS84_SRID = 4326


class GeographyType(str, Enum):
    """Shape types a geography can report from ``geometry_type``."""

    POINT = "Point"
    LINESTRING = "LineString"
    POLYGON = "Polygon"
    MULTIPOINT = "MultiPoint"
    MULTILINESTRING = "MultiLineString"
    MULTIPOLYGON = "MultiPolygon"
    GEOMETRYCOLLECTION = "GeometryCollection"

    @property
    def is_composite(self) -> bool:
        return self in COMPOSITE_TYPES


COMPOSITE_TYPES = frozenset(
    {
        GeographyType.MULTIPOINT,
        GeographyType.MULTILINESTRING,
        GeographyType.MULTIPOLYGON,
        GeographyType.GEOMETRYCOLLECTION,
    }
)


class BuilderState(str, Enum):
    """Position of a GeographyBuilder in its begin/end call sequence."""

    NOT_STARTED = "not_started"
    IN_GEOGRAPHY = "in_geography"
    IN_FIGURE = "in_figure"
    DONE = "done"
