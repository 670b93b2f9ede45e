"""Ring orientation via the shoelace formula.

Signed area is positive for counter-clockwise rings and negative for
clockwise ones. Curvature is ignored, coordinates are treated as planar.
"""

from typing import Sequence

from geoconvert.geometry.types import Coordinate, RingOrientation


def signed_area(coords: Sequence[Sequence[float]]) -> float:
    """Signed area of a ring, open or closed.

    Args:
        coords: Ring coordinates as (x, y) pairs

    Returns:
        Half the shoelace sum; 0.0 for fewer than 3 points
    """
    n = len(coords)
    if n < 3:
        return 0.0

    total = 0.0
    for i in range(n):
        x1, y1 = coords[i][0], coords[i][1]
        x2, y2 = coords[(i + 1) % n][0], coords[(i + 1) % n][1]
        total += x1 * y2 - x2 * y1
    return total / 2.0


def ring_orientation(coords: Sequence[Sequence[float]]) -> RingOrientation:
    area = signed_area(coords)
    if area > 0:
        return RingOrientation.CCW
    if area < 0:
        return RingOrientation.CW
    return RingOrientation.DEGENERATE


def is_ccw(coords: Sequence[Sequence[float]]) -> bool:
    return ring_orientation(coords) is RingOrientation.CCW


def reverse_ring(coords: Sequence[Sequence[float]]) -> list[Coordinate]:
    """Return the ring with its winding flipped, as a new list."""
    return [(c[0], c[1]) for c in reversed(coords)]
