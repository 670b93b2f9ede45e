"""Append-only geography builder.

Shapes are described by strictly nested calls::

    begin_geography(POLYGON)
        begin_figure(lat, lon)   # first point of a ring
        add_line(lat, lon)       # each further point
        end_figure()
    end_geography()

Composite geographies nest further ``begin_geography`` calls. Calls made
out of order raise GeographyBuildError.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from geoconvert.core.exceptions import GeographyBuildError
from geoconvert.geography.types import (
    BuilderState,
    GeographyType,
    GeoPoint,
    WGS84_SRID,
)
from geoconvert.geography.value import Geography

logger = logging.getLogger(__name__)


@dataclass
class _OpenGeography:
    geometry_type: GeographyType
    figures: list[tuple[GeoPoint, ...]] = field(default_factory=list)
    children: list[Geography] = field(default_factory=list)


class GeographyBuilder:
    """Builds one Geography through begin/end bracketed calls."""

    def __init__(self):
        self._srid = WGS84_SRID
        self._state = BuilderState.NOT_STARTED
        self._stack: list[_OpenGeography] = []
        self._figure: Optional[list[GeoPoint]] = None
        self._result: Optional[Geography] = None

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def constructed_geography(self) -> Geography:
        if self._state is not BuilderState.DONE:
            raise GeographyBuildError(
                f"Geography is not finished (builder state: {self._state.value})"
            )
        return self._result

    def set_srid(self, srid: int) -> None:
        self._expect(BuilderState.NOT_STARTED, "set_srid")
        self._srid = srid

    def begin_geography(self, geometry_type: Union[GeographyType, str]) -> None:
        geometry_type = GeographyType(geometry_type)
        if self._state is BuilderState.IN_GEOGRAPHY:
            parent = self._stack[-1]
            if not parent.geometry_type.is_composite:
                raise GeographyBuildError(
                    f"Cannot nest {geometry_type.value} inside {parent.geometry_type.value}"
                )
        elif self._state is not BuilderState.NOT_STARTED:
            raise GeographyBuildError(
                f"begin_geography not allowed in state {self._state.value}"
            )

        self._stack.append(_OpenGeography(geometry_type))
        self._state = BuilderState.IN_GEOGRAPHY

    def begin_figure(self, lat: float, lon: float) -> None:
        self._expect(BuilderState.IN_GEOGRAPHY, "begin_figure")
        current = self._stack[-1]
        if current.geometry_type.is_composite:
            raise GeographyBuildError(
                f"{current.geometry_type.value} cannot hold figures directly"
            )
        if current.geometry_type is not GeographyType.POLYGON and current.figures:
            raise GeographyBuildError(
                f"{current.geometry_type.value} takes a single figure"
            )

        self._figure = [(lat, lon)]
        self._state = BuilderState.IN_FIGURE

    def add_line(self, lat: float, lon: float) -> None:
        self._expect(BuilderState.IN_FIGURE, "add_line")
        if self._stack[-1].geometry_type is GeographyType.POINT:
            raise GeographyBuildError("Point figure cannot take add_line")
        self._figure.append((lat, lon))

    def end_figure(self) -> None:
        self._expect(BuilderState.IN_FIGURE, "end_figure")
        self._stack[-1].figures.append(tuple(self._figure))
        self._figure = None
        self._state = BuilderState.IN_GEOGRAPHY

    def end_geography(self) -> None:
        self._expect(BuilderState.IN_GEOGRAPHY, "end_geography")
        node = self._stack.pop()
        geography = Geography(
            node.geometry_type,
            figures=node.figures,
            children=node.children,
            srid=self._srid,
        )

        if self._stack:
            self._stack[-1].children.append(geography)
            return

        self._result = geography
        self._state = BuilderState.DONE
        logger.debug("Constructed %r", geography)

    def _expect(self, state: BuilderState, call: str) -> None:
        if self._state is not state:
            raise GeographyBuildError(
                f"{call} not allowed in state {self._state.value}"
            )
