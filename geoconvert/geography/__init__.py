"""Geodetic geography model with its builder and reader protocols."""

from geoconvert.geography.builder import GeographyBuilder
from geoconvert.geography.types import BuilderState, GeographyType, WGS84_SRID
from geoconvert.geography.value import Geography

__all__ = [
    "Geography",
    "GeographyBuilder",
    "GeographyType",
    "BuilderState",
    "WGS84_SRID",
]
