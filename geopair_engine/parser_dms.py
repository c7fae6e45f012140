"""
Degrees / minutes / seconds notation, e.g. 48°51'29"N or 48° 51′ 29″ n.
"""

import math
import re
from functools import lru_cache

from .errors import CoordError, DmsCoordError, DmsFieldError, DmsFormatError
from .types import Coordinate, CoordField, CoordinateKind
from .utils_parsing import parse_direction_field, parse_float_field
from .validator import coordinate_to_dd


@lru_cache(maxsize=1)
def dms_pattern() -> "re.Pattern[str]":
    """Compiled DMS grammar, built on first use. ASCII and Unicode marks."""
    return re.compile(
        r"""
        ^\s*
        (.+?)          # degrees
        \s*°\s*
        (.+?)          # minutes
        \s*['′]\s*
        (.+?)          # seconds
        \s*["″]\s*
        (.)            # direction
        \s*$
        """,
        re.IGNORECASE | re.VERBOSE,
    )


def dms_to_dd(text: str, kind: CoordinateKind) -> float:
    """
    Parse a DMS string and convert it to signed decimal degrees.

    Raises:
        DmsFormatError: text does not follow D°M'S"X, or a number is inf/nan.
        DmsFieldError: one component is not numeric (or the direction is blank).
        DmsCoordError: components parsed but break a geographic rule.
    """
    m = dms_pattern().fullmatch(text)
    if m is None:
        raise DmsFormatError()

    deg = parse_float_field(m.group(1))
    if deg is None:
        raise DmsFieldError(CoordField.DEG)
    minutes = parse_float_field(m.group(2))
    if minutes is None:
        raise DmsFieldError(CoordField.MIN)
    seconds = parse_float_field(m.group(3))
    if seconds is None:
        raise DmsFieldError(CoordField.SEC)
    direction = parse_direction_field(m.group(4))
    if direction is None:
        raise DmsFieldError(CoordField.DIR)

    if not all(math.isfinite(v) for v in (deg, minutes, seconds)):
        raise DmsFormatError()

    coord = Coordinate(deg=deg, min=minutes, sec=seconds, dir=direction)
    try:
        return coordinate_to_dd(coord, kind)
    except CoordError as e:
        raise DmsCoordError(e) from e
