import math

from .types import CoordinateKind


def dd_to_dms(value: float, kind: CoordinateKind) -> str:
    """
    Convert decimal degrees to a display string such as 48°51'29.00"N.

    Degrees and minutes are truncated, seconds keep two decimals. Seconds
    that would print as 60.00 carry into the minutes (and minutes into the
    degrees), so the result always parses back. The letter
    comes from the sign only (N/S, E/W; never the French O).
    No validation: any finite value is accepted, including 400°.
    """
    if kind == CoordinateKind.LATITUDE:
        direction = "N" if value >= 0.0 else "S"
    else:
        direction = "E" if value >= 0.0 else "W"

    abs_value = abs(value)
    deg = math.floor(abs_value)
    min_f = (abs_value - deg) * 60.0
    minutes = math.floor(min_f)
    sec = (min_f - minutes) * 60.0

    if f"{sec:.2f}" == "60.00":
        sec = 0.0
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        deg += 1

    return f"{deg}°{minutes}'{sec:.2f}\"{direction}"
