"""Conversion between planar shapely geometries and geodetic geographies."""

from geoconvert.converters import GeographyConverter
from geoconvert.core.exceptions import (
    GeographyBuildError,
    GeographyConversionError,
    RepairFailedError,
    StillInvalidError,
    UnsupportedTypeError,
)
from geoconvert.geography import Geography, GeographyBuilder, GeographyType
from geoconvert.geometry import GeometryFactory, GeometryServices

__all__ = [
    "GeographyConverter",
    "Geography",
    "GeographyBuilder",
    "GeographyType",
    "GeometryFactory",
    "GeometryServices",
    "GeographyConversionError",
    "UnsupportedTypeError",
    "RepairFailedError",
    "StillInvalidError",
    "GeographyBuildError",
]
