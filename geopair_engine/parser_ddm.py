"""
Degrees / decimal-minutes notation, e.g. 48° 51.492' N. Seconds are always 0.
"""

import math
import re
from functools import lru_cache

from .errors import CoordError, DdmCoordError, DdmFieldError, DdmFormatError
from .types import Coordinate, CoordField, CoordinateKind
from .utils_parsing import parse_direction_field, parse_float_field
from .validator import coordinate_to_dd


@lru_cache(maxsize=1)
def ddm_pattern() -> "re.Pattern[str]":
    """Compiled DDM grammar, built on first use."""
    return re.compile(
        r"""
        ^\s*
        (.+?)          # degrees
        \s*°\s*
        (.+?)          # decimal minutes
        \s*['′]\s*
        (.)            # direction
        \s*$
        """,
        re.IGNORECASE | re.VERBOSE,
    )


def ddm_to_dd(text: str, kind: CoordinateKind) -> float:
    """
    Parse a DDM string and convert it to signed decimal degrees.

    Same three failure tiers as dms_to_dd (DdmFormatError / DdmFieldError /
    DdmCoordError).
    """
    m = ddm_pattern().fullmatch(text)
    if m is None:
        raise DdmFormatError()

    deg = parse_float_field(m.group(1))
    if deg is None:
        raise DdmFieldError(CoordField.DEG)
    minutes = parse_float_field(m.group(2))
    if minutes is None:
        raise DdmFieldError(CoordField.MIN)
    direction = parse_direction_field(m.group(3))
    if direction is None:
        raise DdmFieldError(CoordField.DIR)

    if not (math.isfinite(deg) and math.isfinite(minutes)):
        raise DdmFormatError()

    coord = Coordinate(deg=deg, min=minutes, sec=0.0, dir=direction)
    try:
        return coordinate_to_dd(coord, kind)
    except CoordError as e:
        raise DdmCoordError(e) from e
