"""Geography to geometry decoder.

Reads a geography only through its 1-based numbered accessors and
rebuilds the shapely geometry tree with one shared factory. Polygon rings
carry no shell tag: the first counter-clockwise ring is taken as the
shell and reversed back to the planar convention, every other ring
becomes a hole in its original order.

Precondition: a polygon holds exactly one counter-clockwise ring. With
several, the first one wins; that choice is incidental, not a tie-break.
decode() repairs orientation before dispatch, so the polygon handler only
raises for a missing counter-clockwise ring when called on an unrepaired
geography.
"""

import logging
from typing import Callable, Optional

from shapely.geometry.base import BaseGeometry

from geoconvert.converters.repair import repair_decoded
from geoconvert.core.exceptions import UnsupportedTypeError
from geoconvert.geography.types import GeographyType
from geoconvert.geography.value import Geography
from geoconvert.geometry.factory import (
    GeometryFactory,
    GeometryServices,
    get_geometry_services,
)
from geoconvert.geometry.orientation import is_ccw, reverse_ring
from geoconvert.geometry.types import Coordinate

logger = logging.getLogger(__name__)


class GeometryDecoder:
    """Converts geographies to shapely geometries."""

    def __init__(self, services: Optional[GeometryServices] = None):
        self._services = services
        self._handlers: dict[GeographyType, Callable[[Geography, GeometryFactory], BaseGeometry]] = {
            GeographyType.POINT: self._decode_point,
            GeographyType.LINESTRING: self._decode_line_string,
            GeographyType.POLYGON: self._decode_polygon,
            GeographyType.MULTIPOINT: self._decode_multi_point,
            GeographyType.MULTILINESTRING: self._decode_multi_line_string,
            GeographyType.MULTIPOLYGON: self._decode_multi_polygon,
            GeographyType.GEOMETRYCOLLECTION: self._decode_geometry_collection,
        }

    @property
    def services(self) -> GeometryServices:
        if self._services is None:
            self._services = get_geometry_services()
        return self._services

    def resolve_factory(self, srid: int) -> GeometryFactory:
        return self.services.create_geometry_factory(srid)

    def decode(
        self,
        geography: Optional[Geography],
        factory: Optional[GeometryFactory] = None,
    ) -> Optional[BaseGeometry]:
        """Convert a geography to a geometry.

        Args:
            geography: Geography to convert, may be None or null-flagged
            factory: Factory for the output; resolved from the
                geography's SRID when omitted

        Returns:
            None for a null geography, an empty GeometryCollection for an
            empty one, the converted geometry otherwise

        Raises:
            UnsupportedTypeError: Unknown shape type
            TypeError: A decoded child does not fit its container
        """
        if geography is None or geography.is_null:
            return None

        if factory is None:
            factory = self.resolve_factory(geography.srid)

        if geography.is_empty():
            return factory.create_geometry_collection()

        geography = repair_decoded(geography)
        geometry = self._decode(geography, factory)
        logger.debug("Decoded %r as %s", geography, geometry.geom_type)
        return geometry

    def _decode(self, geography: Geography, factory: GeometryFactory) -> BaseGeometry:
        try:
            handler = self._handlers[GeographyType(geography.geometry_type)]
        except ValueError:
            raise UnsupportedTypeError(str(geography.geometry_type), direction="geography") from None
        return handler(geography, factory)

    def _decode_point(self, geography: Geography, factory: GeometryFactory) -> BaseGeometry:
        if geography.num_points() == 0:
            return factory.create_point()
        return factory.create_point((geography.long, geography.lat))

    def _decode_line_string(self, geography: Geography, factory: GeometryFactory) -> BaseGeometry:
        return factory.create_line_string(_read_points(geography))

    def _decode_polygon(self, geography: Geography, factory: GeometryFactory) -> BaseGeometry:
        rings = [
            _read_points(geography.ring_n(i))
            for i in range(1, geography.num_rings() + 1)
        ]
        if not rings:
            return factory.create_polygon()

        shell_index = next((i for i, ring in enumerate(rings) if is_ccw(ring)), None)
        if shell_index is None:
            raise ValueError("Polygon geography has no counter-clockwise ring to use as shell")

        shell = factory.create_linear_ring(reverse_ring(rings[shell_index]))
        holes = [
            factory.create_linear_ring(ring)
            for i, ring in enumerate(rings)
            if i != shell_index
        ]
        return factory.create_polygon(shell, holes)

    def _decode_multi_point(self, geography: Geography, factory: GeometryFactory) -> BaseGeometry:
        return factory.create_multi_point(self._decode_children(geography, factory))

    def _decode_multi_line_string(self, geography: Geography, factory: GeometryFactory) -> BaseGeometry:
        return factory.create_multi_line_string(self._decode_children(geography, factory))

    def _decode_multi_polygon(self, geography: Geography, factory: GeometryFactory) -> BaseGeometry:
        return factory.create_multi_polygon(self._decode_children(geography, factory))

    def _decode_geometry_collection(self, geography: Geography, factory: GeometryFactory) -> BaseGeometry:
        return factory.create_geometry_collection(self._decode_children(geography, factory))

    def _decode_children(self, geography: Geography, factory: GeometryFactory) -> list[BaseGeometry]:
        return [
            self._decode(geography.geometry_n(i), factory)
            for i in range(1, geography.num_geometries() + 1)
        ]


def _read_points(geography: Geography) -> list[Coordinate]:
    points = []
    for i in range(1, geography.num_points() + 1):
        point = geography.point_n(i)
        points.append((point.long, point.lat))
    return points
