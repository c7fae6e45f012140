"""
Single source of truth for the geographic rules.

coordinate_to_dd() receives an already-split Coordinate and either returns
signed decimal degrees or raises a CoordError subclass. Checks run in a fixed
order; the first violated one wins.
"""

from .errors import (
    InvalidDegreeError,
    InvalidDirectionError,
    InvalidMinutesError,
    InvalidSecondsError,
    OutOfRangeError,
)
from .types import BOUNDARY_EPSILON, Coordinate, CoordinateKind

# kind -> (max degrees, legal direction letters)
_LIMITS = {
    CoordinateKind.LATITUDE: (90.0, frozenset("NS")),
    CoordinateKind.LONGITUDE: (180.0, frozenset("EOW")),
}

# O is the French "Ouest" (West)
NEGATIVE_DIRECTIONS = frozenset("SOW")


def _check_bounds(coord: Coordinate, max_deg: float, directions: frozenset) -> None:
    if coord.deg > max_deg + BOUNDARY_EPSILON:
        raise OutOfRangeError(coord.deg)
    # The pole / antimeridian is only legal as exactly D°00'00"
    if abs(coord.deg - max_deg) < BOUNDARY_EPSILON and (coord.min > 0.0 or coord.sec > 0.0):
        raise OutOfRangeError(coord.deg)
    if coord.dir not in directions:
        raise InvalidDirectionError(coord.dir)


def coordinate_to_dd(coord: Coordinate, kind: CoordinateKind) -> float:
    """
    Validate a parsed coordinate and convert it to decimal degrees.

    Raises:
        InvalidDegreeError: degrees below zero.
        InvalidMinutesError: minutes outside [0, 60).
        InvalidSecondsError: seconds outside [0, 60).
        OutOfRangeError: past 90 (latitude) / 180 (longitude), or a non-zero
            minute/second at exactly that boundary.
        InvalidDirectionError: letter not legal for this kind.
    """
    if coord.deg < 0.0:
        raise InvalidDegreeError(coord.deg)
    if coord.min < 0.0 or coord.min >= 60.0:
        raise InvalidMinutesError(coord.min)
    if coord.sec < 0.0 or coord.sec >= 60.0:
        raise InvalidSecondsError(coord.sec)

    max_deg, directions = _LIMITS[kind]
    _check_bounds(coord, max_deg, directions)

    value = coord.deg + (coord.min / 60.0) + (coord.sec / 3600.0)
    if coord.dir in NEGATIVE_DIRECTIONS:
        value = -value
    return value
