# utils_geo.py - Great-circle distance and proximity helpers
#
# Spherical Earth (mean radius 6371 km). Inputs in decimal degrees.

import numpy as np

from .errors import InvalidDistanceError, NegativeDistanceError
from .types import EARTH_RADIUS_KM, GEO_PRECISION, KM_TO_MILES, GeoTolerance, Nearly


def haversine(lat1, lon1, lat2, lon2) -> float:
    """
    Great-circle distance between two points in kilometers.

    Raises InvalidDistanceError if the result is not finite, and
    NegativeDistanceError if it is below -GEO_PRECISION.
    """
    p = np.radians(np.array([lat1, lon1, lat2, lon2], dtype=float))
    dphi, dlmb = p[2] - p[0], p[3] - p[1]

    # inf / nan inputs must surface as InvalidDistanceError, not warnings
    with np.errstate(invalid="ignore"):
        a = np.sin(dphi / 2) ** 2 + np.cos(p[0]) * np.cos(p[2]) * np.sin(dlmb / 2) ** 2
        distance = float(2 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(a), np.sqrt(1 - a)))

    if not np.isfinite(distance):
        raise InvalidDistanceError()
    # Unreachable with this formula; kept as an invariant check
    if distance < -GEO_PRECISION:
        raise NegativeDistanceError(distance)

    return distance


def km_to_miles(km: float) -> float:
    return km * KM_TO_MILES


def nearly_equal_deg(a: float, b: float, tol: GeoTolerance) -> bool:
    return abs(a - b) <= tol.deg


def compute_nearly(lat_a, lon_a, lat_b, lon_b, tol: GeoTolerance = GeoTolerance.DEFAULT) -> Nearly:
    """
    Compare two positions axis by axis within tol.
    """
    lat = nearly_equal_deg(lat_a, lat_b, tol)
    lon = nearly_equal_deg(lon_a, lon_b, tol)
    return Nearly(lat=lat, lon=lon, both=lat and lon)
