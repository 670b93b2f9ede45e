"""Custom exception classes."""

from typing import Any, Optional


class GeographyConversionError(Exception):
    """Base exception for conversion errors."""

    def __init__(
        self,
        detail: str,
        code: str = "CONVERSION_ERROR",
    ):
        super().__init__(detail)
        self.detail = detail
        self.code = code


class UnsupportedTypeError(GeographyConversionError):
    def __init__(self, type_name: str, direction: str = "geometry"):
        self.type_name = type_name
        super().__init__(
            detail=f"Cannot convert {direction} type '{type_name}'",
            code="UNSUPPORTED_TYPE",
        )


class RepairFailedError(GeographyConversionError):
    """Repair of an invalid geography raised.

    The original input geometry is attached for diagnostics, the
    underlying exception is chained as ``__cause__``.
    """

    def __init__(self, geometry: Any, cause: Optional[BaseException] = None):
        self.geometry = geometry
        detail = f"Failed to repair geography built from {_describe(geometry)}"
        if cause is not None:
            detail += f": {cause}"
        super().__init__(detail=detail, code="REPAIR_FAILED")


class StillInvalidError(GeographyConversionError):
    def __init__(self, geometry: Any):
        self.geometry = geometry
        super().__init__(
            detail=f"Geography built from {_describe(geometry)} is invalid after repair",
            code="STILL_INVALID",
        )


class GeographyBuildError(GeographyConversionError):
    def __init__(self, message: str):
        super().__init__(detail=message, code="BUILD_ERROR")


def _describe(geometry: Any) -> str:
    geom_type = getattr(geometry, "geom_type", None)
    return geom_type if geom_type else type(geometry).__name__
