from dataclasses import dataclass
from enum import Enum

# Mean Earth radius for the spherical model (km)
EARTH_RADIUS_KM = 6371.0
KM_TO_MILES = 0.621371

# Numerical noise allowed on computed distances
GEO_PRECISION = 1e-10
# Noise allowed when comparing degrees against the pole / antimeridian
BOUNDARY_EPSILON = 1e-12


class CoordinateKind(Enum):
    """
    Whether a value is a latitude or a longitude.
    Selects the bounds and the legal direction letters.
    """
    LATITUDE = "latitude"
    LONGITUDE = "longitude"


class CoordField(Enum):
    """
    Which textual field of a coordinate failed to parse.
    """
    DEG = "degrees"
    MIN = "minutes"
    SEC = "seconds"
    DIR = "direction"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Coordinate:
    """
    Parsed but not yet validated coordinate (degrees, minutes, seconds, direction).
    Only lives between a parser and coordinate_to_dd.
    """
    deg: float
    min: float
    sec: float
    dir: str


@dataclass(frozen=True)
class GeoTolerance:
    """
    Tolerance in decimal degrees used to compare two coordinates.
    """
    deg: float


# ~11 cm at the equator
GeoTolerance.DEFAULT = GeoTolerance(deg=1e-6)


@dataclass(frozen=True)
class Nearly:
    """
    Per-axis proximity result; both = lat and lon.
    """
    lat: bool
    lon: bool
    both: bool
