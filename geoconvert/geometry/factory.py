"""Geometry factory producing shapely geometries in one SRID and precision.

The decoder creates every geometry of one conversion through a single
factory so all output coordinates share one precision context.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Sequence, Union

import shapely
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

from geoconvert.config import get_settings
from geoconvert.geometry.types import UNSET_SRID, Coordinate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeometryFactory:
    """Creates planar geometries tagged with ``srid``.

    Attributes:
        srid: Spatial reference id written onto every created geometry
        grid_size: Precision grid; 0 keeps floating precision
    """

    srid: int = UNSET_SRID
    grid_size: float = 0.0

    def create_point(self, coord: Optional[Coordinate] = None) -> Point:
        return self._finish(Point(coord) if coord is not None else Point())

    def create_line_string(self, coords: Sequence[Coordinate]) -> LineString:
        return self._finish(LineString(coords))

    def create_linear_ring(self, coords: Sequence[Coordinate]) -> LinearRing:
        return self._finish(LinearRing(coords))

    def create_polygon(
        self,
        shell: Optional[Union[LinearRing, Sequence[Coordinate]]] = None,
        holes: Optional[Iterable[Union[LinearRing, Sequence[Coordinate]]]] = None,
    ) -> Polygon:
        """Create a polygon from rings or raw coordinate sequences."""
        if shell is None:
            return self._finish(Polygon())
        return self._finish(Polygon(shell, list(holes or [])))

    def create_multi_point(self, points: Sequence[Point]) -> MultiPoint:
        _check_members(points, Point, "MultiPoint")
        return self._finish(MultiPoint(list(points)))

    def create_multi_line_string(self, lines: Sequence[LineString]) -> MultiLineString:
        _check_members(lines, LineString, "MultiLineString")
        return self._finish(MultiLineString(list(lines)))

    def create_multi_polygon(self, polygons: Sequence[Polygon]) -> MultiPolygon:
        _check_members(polygons, Polygon, "MultiPolygon")
        return self._finish(MultiPolygon(list(polygons)))

    def create_geometry_collection(
        self,
        geometries: Optional[Sequence[BaseGeometry]] = None,
    ) -> GeometryCollection:
        return self._finish(GeometryCollection(list(geometries or [])))

    def _finish(self, geometry: BaseGeometry) -> BaseGeometry:
        if self.grid_size > 0 and not geometry.is_empty:
            geometry = shapely.set_precision(geometry, self.grid_size)
        if self.srid != UNSET_SRID:
            geometry = shapely.set_srid(geometry, self.srid)
        return geometry


def _check_members(members: Sequence[BaseGeometry], expected: type, container: str) -> None:
    for member in members:
        # LinearRing subclasses LineString but is not a valid line member
        if not isinstance(member, expected) or isinstance(member, LinearRing):
            raise TypeError(
                f"{container} member must be {expected.__name__}, "
                f"got {type(member).__name__}"
            )


class GeometryServices:
    """Resolves a working geometry factory from a spatial reference id."""

    def __init__(self, grid_size: Optional[float] = None):
        if grid_size is None:
            grid_size = get_settings().precision_grid_size
        self.grid_size = grid_size
        self._factories: dict[int, GeometryFactory] = {}

    def create_geometry_factory(self, srid: int = UNSET_SRID) -> GeometryFactory:
        factory = self._factories.get(srid)
        if factory is None:
            factory = GeometryFactory(srid=srid, grid_size=self.grid_size)
            self._factories[srid] = factory
            logger.debug("Created geometry factory for SRID %s", srid)
        return factory


@lru_cache
def get_geometry_services() -> GeometryServices:
    return GeometryServices()
