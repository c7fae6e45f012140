import math
from decimal import Decimal, ROUND_HALF_UP

# Upper bound on requested decimals, keeps 10**n in a sane range
MAX_DECIMALS = 10

# Every float at or above 2**52 is already a whole number
_INTEGRAL_FLOAT = 2.0 ** 52
_ONE = Decimal(1)


def round_to(value: float, decimals: int) -> float:
    """
    Round value to `decimals` places, half away from zero.
    Requests above 10 places are clamped to 10 (negative ones to 0).
    """
    precision = min(max(int(decimals), 0), MAX_DECIMALS)
    factor = 10.0 ** precision
    scaled = value * factor
    if not math.isfinite(scaled) or abs(scaled) >= _INTEGRAL_FLOAT:
        return scaled / factor
    # Decimal(float) is exact, so ties are decided on the scaled float itself
    rounded = float(Decimal(scaled).quantize(_ONE, rounding=ROUND_HALF_UP))
    return rounded / factor
