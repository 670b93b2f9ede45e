"""Planar geometry model: factory, types and ring orientation."""

from geoconvert.geometry.factory import (
    GeometryFactory,
    GeometryServices,
    get_geometry_services,
)
from geoconvert.geometry.types import UNSET_SRID, GeometryType, RingOrientation

__all__ = [
    "GeometryFactory",
    "GeometryServices",
    "get_geometry_services",
    "GeometryType",
    "RingOrientation",
    "UNSET_SRID",
]
