# ============================== GEOPAIR STANDARD HEADER ==============================
# Script Name: config.py
# Description:
#   - Runtime settings for the batch tool, read from the environment (.env supported).
# Environment Variables:
#   - GEOPAIR_LOG_LEVEL      (default "INFO")
#   - GEOPAIR_TOLERANCE_DEG  (default 1e-6; proximity tolerance in degrees)
#   - GEOPAIR_STRICT         ("1"/"true"/"yes" -> stop on first bad row)
# Data Handling Notes:
#   - CLI flags override anything read here.
#   - Bad values fall back to the defaults with a warning; they never abort.

from geopair_app.setup_imports import *
from dataclasses import dataclass

from geopair_engine import GeoTolerance

LOG = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "INFO"
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    tolerance_deg: float = GeoTolerance.DEFAULT.deg
    strict: bool = False

    @property
    def tolerance(self) -> GeoTolerance:
        return GeoTolerance(deg=self.tolerance_deg)


def _get_env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        LOG.warning("⚠️ %s=%r is not a number; using %s", name, raw, default)
        return default


def _get_env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def parse_tolerance(value: float) -> float:
    """Reject tolerances that are negative or not finite."""
    if not np.isfinite(value) or value < 0:
        raise ValueError(f"tolerance must be a finite, non-negative number of degrees (got {value})")
    return float(value)


def load_settings() -> Settings:
    """
    Build Settings from GEOPAIR_* environment variables.
    """
    log_level = (os.getenv("GEOPAIR_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()

    tolerance = _get_env_float("GEOPAIR_TOLERANCE_DEG", GeoTolerance.DEFAULT.deg)
    try:
        tolerance = parse_tolerance(tolerance)
    except ValueError as e:
        LOG.warning("⚠️ GEOPAIR_TOLERANCE_DEG ignored: %s", e)
        tolerance = GeoTolerance.DEFAULT.deg

    strict = _get_env_bool("GEOPAIR_STRICT", False)
    return Settings(log_level=log_level, tolerance_deg=tolerance, strict=strict)
