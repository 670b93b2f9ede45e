"""Geometry to geography encoder.

Walks a shapely geometry tree and replays it as builder calls. Ordinates
are handed to the builder as (latitude, longitude), i.e. (y, x). Polygon
shells are reversed to match the geography's left-hand rule; holes are
passed through unchanged.
"""

import logging
from typing import Callable, Optional, Sequence

import shapely
from shapely.geometry.base import BaseGeometry

from geoconvert.config import get_settings
from geoconvert.converters.repair import repair_encoded
from geoconvert.core.exceptions import UnsupportedTypeError
from geoconvert.geography.builder import GeographyBuilder
from geoconvert.geography.types import GeographyType
from geoconvert.geography.value import Geography
from geoconvert.geometry.orientation import reverse_ring
from geoconvert.geometry.types import UNSET_SRID, GeometryType

logger = logging.getLogger(__name__)

# Rings with fewer points are dropped instead of emitted
MIN_RING_POINTS = 3


class GeographyEncoder:
    """Converts shapely geometries to geographies."""

    def __init__(self, default_srid: Optional[int] = None):
        if default_srid is None:
            default_srid = get_settings().default_srid
        self.default_srid = default_srid
        self._handlers: dict[GeometryType, Callable[[GeographyBuilder, BaseGeometry], None]] = {
            GeometryType.POINT: self._encode_point,
            GeometryType.LINESTRING: self._encode_line_string,
            GeometryType.POLYGON: self._encode_polygon,
            GeometryType.MULTIPOINT: self._encode_composite,
            GeometryType.MULTILINESTRING: self._encode_composite,
            GeometryType.MULTIPOLYGON: self._encode_composite,
            GeometryType.GEOMETRYCOLLECTION: self._encode_composite,
        }

    def encode(self, geometry: BaseGeometry, tolerance: float) -> Geography:
        """Convert a geometry to a valid geography.

        Args:
            geometry: Any of the seven supported shapely geometry types
            tolerance: Reduce tolerance in metres for the repair fallback

        Returns:
            The constructed, and if needed repaired, geography

        Raises:
            UnsupportedTypeError: Geometry type outside the supported set
            RepairFailedError: Repair of an invalid result raised
            StillInvalidError: Result is invalid even after repair
        """
        srid = int(shapely.get_srid(geometry))
        builder = GeographyBuilder()
        builder.set_srid(srid if srid != UNSET_SRID else self.default_srid)

        self._encode(builder, geometry)

        geography = builder.constructed_geography
        logger.debug("Encoded %s as %r", geometry.geom_type, geography)
        return repair_encoded(geography, geometry, tolerance)

    def _encode(self, builder: GeographyBuilder, geometry: BaseGeometry) -> None:
        try:
            handler = self._handlers[GeometryType(geometry.geom_type)]
        except ValueError:
            raise UnsupportedTypeError(geometry.geom_type, direction="geometry") from None
        handler(builder, geometry)

    def _encode_point(self, builder: GeographyBuilder, point: BaseGeometry) -> None:
        builder.begin_geography(GeographyType.POINT)
        if not point.is_empty:
            builder.begin_figure(point.y, point.x)
            builder.end_figure()
        builder.end_geography()

    def _encode_line_string(self, builder: GeographyBuilder, line: BaseGeometry) -> None:
        builder.begin_geography(GeographyType.LINESTRING)
        coords = list(line.coords)
        if coords:
            _add_figure(builder, coords)
        builder.end_geography()

    def _encode_polygon(self, builder: GeographyBuilder, polygon: BaseGeometry) -> None:
        builder.begin_geography(GeographyType.POLYGON)
        if not polygon.is_empty:
            add_ring(builder, reverse_ring(polygon.exterior.coords))
            for interior in polygon.interiors:
                add_ring(builder, list(interior.coords))
        builder.end_geography()

    def _encode_composite(self, builder: GeographyBuilder, collection: BaseGeometry) -> None:
        builder.begin_geography(GeographyType(collection.geom_type))
        for child in collection.geoms:
            self._encode(builder, child)
        builder.end_geography()


def add_ring(builder: GeographyBuilder, coords: Sequence[Sequence[float]]) -> None:
    """Emit one polygon ring as a figure, skipping degenerate rings."""
    if len(coords) < MIN_RING_POINTS:
        logger.debug("Dropping degenerate ring with %d point(s)", len(coords))
        return
    _add_figure(builder, coords)


def _add_figure(builder: GeographyBuilder, coords: Sequence[Sequence[float]]) -> None:
    builder.begin_figure(coords[0][1], coords[0][0])
    for coord in coords[1:]:
        builder.add_line(coord[1], coord[0])
    builder.end_figure()
