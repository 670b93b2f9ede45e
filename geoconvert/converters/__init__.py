"""Encoder, decoder and batch conversion between geometries and geographies."""

from geoconvert.converters.batch import ConversionResult
from geoconvert.converters.converter import GeographyConverter
from geoconvert.converters.decoder import GeometryDecoder
from geoconvert.converters.encoder import GeographyEncoder

__all__ = [
    "ConversionResult",
    "GeographyConverter",
    "GeometryDecoder",
    "GeographyEncoder",
]
