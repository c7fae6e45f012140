"""
GeoPair coordinate engine (pure, no I/O)

Public API:
- types: CoordinateKind, CoordField, GeoTolerance, Nearly
- utils_numeric.round_to
- validator.coordinate_to_dd
- parser_dms.dms_to_dd / parser_ddm.ddm_to_dd
- formatter.dd_to_dms
- utils_geo.haversine / km_to_miles / compute_nearly
- errors: exception hierarchy rooted at GeoPairError
"""

from .types import (
    EARTH_RADIUS_KM,
    KM_TO_MILES,
    Coordinate,
    CoordField,
    CoordinateKind,
    GeoTolerance,
    Nearly,
)
from .errors import (
    CoordError,
    DdmCoordError,
    DdmError,
    DdmFieldError,
    DdmFormatError,
    DmsCoordError,
    DmsError,
    DmsFieldError,
    DmsFormatError,
    GeoPairError,
    HaversineError,
    InvalidDegreeError,
    InvalidDirectionError,
    InvalidDistanceError,
    InvalidMinutesError,
    InvalidSecondsError,
    NegativeDistanceError,
    OutOfRangeError,
)
from .utils_numeric import round_to
from .validator import coordinate_to_dd
from .parser_dms import dms_to_dd
from .parser_ddm import ddm_to_dd
from .formatter import dd_to_dms
from .utils_geo import compute_nearly, haversine, km_to_miles, nearly_equal_deg

__all__ = [
    "EARTH_RADIUS_KM",
    "KM_TO_MILES",
    "Coordinate",
    "CoordField",
    "CoordinateKind",
    "GeoTolerance",
    "Nearly",
    "GeoPairError",
    "CoordError",
    "OutOfRangeError",
    "InvalidDegreeError",
    "InvalidMinutesError",
    "InvalidSecondsError",
    "InvalidDirectionError",
    "DmsError",
    "DmsFormatError",
    "DmsFieldError",
    "DmsCoordError",
    "DdmError",
    "DdmFormatError",
    "DdmFieldError",
    "DdmCoordError",
    "HaversineError",
    "InvalidDistanceError",
    "NegativeDistanceError",
    "round_to",
    "coordinate_to_dd",
    "dms_to_dd",
    "ddm_to_dd",
    "dd_to_dms",
    "haversine",
    "km_to_miles",
    "nearly_equal_deg",
    "compute_nearly",
]
