"""Bidirectional converter between shapely geometries and geographies."""

from typing import Iterable, Iterator, Optional

from shapely.geometry.base import BaseGeometry

from geoconvert.config import get_settings
from geoconvert.converters.batch import ConversionResult, decode_many, encode_many
from geoconvert.converters.decoder import GeometryDecoder
from geoconvert.converters.encoder import GeographyEncoder
from geoconvert.geography.value import Geography
from geoconvert.geometry.factory import GeometryFactory, GeometryServices


class GeographyConverter:
    """Converts geometries to geographies and back.

    The reduce tolerance is set once on the converter and applied to every
    encode call unless a call overrides it.
    """

    def __init__(
        self,
        reduce_tolerance: Optional[float] = None,
        services: Optional[GeometryServices] = None,
        default_srid: Optional[int] = None,
    ):
        settings = get_settings()
        self.reduce_tolerance = (
            reduce_tolerance if reduce_tolerance is not None else settings.reduce_tolerance
        )
        self.encoder = GeographyEncoder(default_srid=default_srid)
        self.decoder = GeometryDecoder(services=services)

    def to_geography(
        self,
        geometry: BaseGeometry,
        tolerance: Optional[float] = None,
    ) -> Geography:
        return self.encoder.encode(geometry, self._tolerance(tolerance))

    def to_geographies(
        self,
        geometries: Iterable[BaseGeometry],
        tolerance: Optional[float] = None,
    ) -> Iterator[ConversionResult[Geography]]:
        """Lazily encode geometries, stopping at the first failure."""
        tolerance = self._tolerance(tolerance)
        return encode_many(
            geometries,
            lambda geometry: self.encoder.encode(geometry, tolerance),
        )

    def to_geometry(
        self,
        geography: Optional[Geography],
        factory: Optional[GeometryFactory] = None,
    ) -> Optional[BaseGeometry]:
        return self.decoder.decode(geography, factory)

    def to_geometries(
        self,
        geographies: Iterable[Optional[Geography]],
        factory: Optional[GeometryFactory] = None,
    ) -> Iterator[ConversionResult[BaseGeometry]]:
        """Lazily decode geographies, stopping at the first failure."""
        return decode_many(
            geographies,
            self.decoder.decode,
            self.decoder.resolve_factory,
            factory=factory,
        )

    def _tolerance(self, tolerance: Optional[float]) -> float:
        return self.reduce_tolerance if tolerance is None else tolerance
