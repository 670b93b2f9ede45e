"""Validity repair for freshly built or freshly read geographies.

Encoding reduces with a tolerance before repairing topology; decoding
only repairs topology.
"""

import logging

from shapely.geometry.base import BaseGeometry

from geoconvert.core.exceptions import RepairFailedError, StillInvalidError
from geoconvert.geography.value import Geography

logger = logging.getLogger(__name__)


def repair_encoded(
    geography: Geography,
    geometry: BaseGeometry,
    tolerance: float,
) -> Geography:
    """Repair a geography built from ``geometry`` if it is invalid.

    Args:
        geography: Geography produced by the encoder
        geometry: The input geometry, attached to any error raised
        tolerance: Reduce tolerance in metres

    Returns:
        The geography itself when valid, otherwise the repaired one

    Raises:
        RepairFailedError: The reduce or repair step raised
        StillInvalidError: Repair finished but the result is invalid
    """
    if geography.is_valid():
        return geography

    logger.warning(
        "Invalid geography built from %s, reducing with tolerance %s and repairing",
        geometry.geom_type,
        tolerance,
    )
    try:
        repaired = geography.reduce(tolerance).make_valid()
    except Exception as exc:
        raise RepairFailedError(geometry, exc) from exc

    if not repaired.is_valid():
        raise StillInvalidError(geometry)

    logger.debug("Repaired geography: %r", repaired)
    return repaired


def repair_decoded(geography: Geography) -> Geography:
    if geography.is_valid():
        return geography

    logger.warning("Invalid %s geography, repairing before decode", geography.geometry_type)
    return geography.make_valid()
