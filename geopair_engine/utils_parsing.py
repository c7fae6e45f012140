"""
Field-level helpers shared by the DMS and DDM parsers.
"""

import re
from typing import Optional

# Plain decimal literal: sign, digits, fraction, exponent, or inf/nan.
# ASCII digits only, no digit-group underscores.
_FLOAT_LITERAL = re.compile(
    r"[+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)",
    re.IGNORECASE | re.ASCII,
)


def parse_float_field(raw: str) -> Optional[float]:
    """
    Trim and parse one numeric component.
    Returns None when the text is not a float literal.
    """
    text = raw.strip()
    if not _FLOAT_LITERAL.fullmatch(text):
        return None
    return float(text)


def parse_direction_field(raw: str) -> Optional[str]:
    """
    First character of the trimmed direction text, ASCII-uppercased.
    Returns None when nothing is left after trimming.
    """
    text = raw.strip()
    if not text:
        return None
    ch = text[0]
    return ch.upper() if ch.isascii() else ch
