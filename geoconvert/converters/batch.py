"""Lazy, fail-fast batch conversion.

Each generator converts one input per pull and yields a ConversionResult.
The first failure is yielded as a terminal result carrying the error and
the generator stops, so later inputs are never converted. Anything that is
not a GeographyConversionError, such as the TypeError for a mismatched
composite member, escapes the generator unwrapped. Generators are
single-pass and carry no locking.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from shapely.geometry.base import BaseGeometry

from geoconvert.core.exceptions import GeographyConversionError
from geoconvert.geography.value import Geography
from geoconvert.geometry.factory import GeometryFactory
from geoconvert.geometry.types import UNSET_SRID

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Failures reported as a terminal result instead of escaping the generator
CONVERSION_FAILURES = (GeographyConversionError,)

_END = object()


@dataclass
class ConversionResult(Generic[T]):
    """Outcome of converting one element of a batch."""

    index: int
    value: Optional[T] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, raising the stored error for a failed result."""
        if self.error is not None:
            raise self.error
        return self.value


def convert_many(
    items: Iterable[Any],
    convert: Callable[[Any], T],
) -> Iterator[ConversionResult[T]]:
    for index, item in enumerate(items):
        try:
            value = convert(item)
        except CONVERSION_FAILURES as exc:
            logger.debug("Batch conversion stopped at element %d: %s", index, exc)
            yield ConversionResult(index=index, error=exc)
            return
        yield ConversionResult(index=index, value=value)


def encode_many(
    geometries: Iterable[BaseGeometry],
    encode: Callable[[BaseGeometry], Geography],
) -> Iterator[ConversionResult[Geography]]:
    return convert_many(geometries, encode)


def decode_many(
    geographies: Iterable[Optional[Geography]],
    decode: Callable[[Optional[Geography], GeometryFactory], Optional[BaseGeometry]],
    resolve_factory: Callable[[int], GeometryFactory],
    factory: Optional[GeometryFactory] = None,
) -> Iterator[ConversionResult[BaseGeometry]]:
    """Decode lazily, sharing one factory across the whole batch.

    Without ``factory``, one is resolved from the first element's SRID
    when that element is pulled.
    """
    iterator = iter(geographies)
    first = next(iterator, _END)
    if first is _END:
        return

    if factory is None:
        factory = resolve_factory(first.srid if first is not None else UNSET_SRID)

    yield from convert_many(
        itertools.chain([first], iterator),
        lambda geography: decode(geography, factory),
    )
