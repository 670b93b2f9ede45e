"""Immutable geography value and its numbered-accessor reader.

A geography is a tree of the seven shape types. Leaf nodes hold figures,
each a tuple of (latitude, longitude) points; composite nodes hold child
geographies. All index accessors are 1-based. Rings carry no shell/hole
tag; by the left-hand rule the shell is the ring that winds
counter-clockwise in the (longitude, latitude) plane.
"""

from typing import Iterable, Optional, Union

from geoconvert.geography.types import (
    Figure,
    GeographyType,
    GeoPoint,
    WGS84_SRID,
)


class Geography:
    """A finished geography, inspected only through numbered accessors."""

    __slots__ = ("_type", "_figures", "_children", "_srid", "_is_null")

    def __init__(
        self,
        geometry_type: Optional[Union[GeographyType, str]],
        figures: Iterable[Iterable[GeoPoint]] = (),
        children: Iterable["Geography"] = (),
        srid: int = WGS84_SRID,
        is_null: bool = False,
    ):
        self._type = GeographyType(geometry_type) if geometry_type is not None else None
        self._figures: tuple[Figure, ...] = tuple(
            tuple((float(lat), float(lon)) for lat, lon in figure) for figure in figures
        )
        self._children: tuple[Geography, ...] = tuple(children)
        self._srid = srid
        self._is_null = is_null

        if self._type is not None:
            if self._type.is_composite and self._figures:
                raise ValueError(f"{self._type.value} geography cannot hold figures")
            if not self._type.is_composite and self._children:
                raise ValueError(f"{self._type.value} geography cannot hold child geographies")

    @classmethod
    def null(cls, srid: int = WGS84_SRID) -> "Geography":
        """Create a null-flagged geography."""
        return cls(None, srid=srid, is_null=True)

    # Properties

    @property
    def is_null(self) -> bool:
        return self._is_null

    @property
    def srid(self) -> int:
        return self._srid

    @property
    def geometry_type(self) -> Optional[str]:
        """Shape-type name, e.g. ``"Polygon"``; None for a null geography."""
        return self._type.value if self._type is not None else None

    @property
    def figures(self) -> tuple[Figure, ...]:
        return self._figures

    @property
    def children(self) -> tuple["Geography", ...]:
        return self._children

    @property
    def lat(self) -> float:
        return self._single_point()[0]

    @property
    def long(self) -> float:
        return self._single_point()[1]

    # Numbered accessors

    def num_geometries(self) -> int:
        if self._type is None:
            return 0
        if self._type.is_composite:
            return len(self._children)
        return 0 if self.is_empty() else 1

    def geometry_n(self, n: int) -> "Geography":
        if self._type is not None and self._type.is_composite:
            return self._children[_index(n, len(self._children))]
        _index(n, self.num_geometries())
        return self

    def num_points(self) -> int:
        if self._type is not None and self._type.is_composite:
            return sum(child.num_points() for child in self._children)
        return sum(len(figure) for figure in self._figures)

    def point_n(self, n: int) -> "Geography":
        if self._type is not None and not self._type.is_composite and len(self._figures) == 1:
            figure = self._figures[0]
            point = figure[_index(n, len(figure))]
        else:
            points = list(self._iter_points())
            point = points[_index(n, len(points))]
        return Geography(GeographyType.POINT, figures=[(point,)], srid=self._srid)

    def num_rings(self) -> int:
        if self._type is not GeographyType.POLYGON:
            return 0
        return len(self._figures)

    def ring_n(self, n: int) -> "Geography":
        if self._type is not GeographyType.POLYGON:
            raise TypeError(f"ring_n() requires a Polygon geography, not {self.geometry_type}")
        figure = self._figures[_index(n, len(self._figures))]
        return Geography(GeographyType.LINESTRING, figures=[figure], srid=self._srid)

    # Finished-value operations

    def is_empty(self) -> bool:
        if self._type is None:
            return False
        if self._type.is_composite:
            return all(child.is_empty() for child in self._children)
        return not self._figures

    def is_valid(self) -> bool:
        from geoconvert.geography.shapes import is_valid_geography

        return is_valid_geography(self)

    def reduce(self, tolerance: float) -> "Geography":
        """Simplify with a tolerance in metres, returning a new geography."""
        from geoconvert.geography.shapes import reduce_geography

        return reduce_geography(self, tolerance)

    def make_valid(self) -> "Geography":
        from geoconvert.geography.shapes import make_valid_geography

        return make_valid_geography(self)

    def _iter_points(self) -> Iterable[GeoPoint]:
        if self._type is not None and self._type.is_composite:
            for child in self._children:
                yield from child._iter_points()
        else:
            for figure in self._figures:
                yield from figure

    def _single_point(self) -> GeoPoint:
        if self._type is not GeographyType.POINT:
            raise TypeError(f"lat/long require a Point geography, not {self.geometry_type}")
        if not self._figures:
            raise ValueError("Empty point geography has no coordinates")
        return self._figures[0][0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Geography):
            return NotImplemented
        return (
            self._type == other._type
            and self._figures == other._figures
            and self._children == other._children
            and self._srid == other._srid
            and self._is_null == other._is_null
        )

    def __hash__(self) -> int:
        return hash((self._type, self._figures, self._children, self._srid, self._is_null))

    def __repr__(self) -> str:
        if self._is_null:
            return f"Geography(null, srid={self._srid})"
        if self._type.is_composite:
            return f"Geography({self._type.value}, srid={self._srid}, geometries={len(self._children)})"
        return f"Geography({self._type.value}, srid={self._srid}, figures={list(self._figures)})"


def _index(n: int, count: int) -> int:
    if not 1 <= n <= count:
        raise IndexError(f"Index {n} out of range 1..{count}")
    return n - 1
