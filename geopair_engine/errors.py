"""
Exception hierarchy for the coordinate engine.

Three tiers per textual notation:
- *FormatError: the text does not match the notation grammar at all.
- *FieldError:  the grammar matched but one named field is not a number/letter.
- *CoordError:  every field parsed, but the value breaks a geographic rule.
                The underlying CoordError is kept on `.error` (and as __cause__).

Distance computation has its own two defensive failures.
"""

from .types import CoordField


class GeoPairError(ValueError):
    """Base class for every error raised by geopair_engine."""


# --------------------------------------------------------------------------- #
# Validation (geographic rules)
# --------------------------------------------------------------------------- #

class CoordError(GeoPairError):
    """A well-formed coordinate that violates a numeric or geographic rule."""


class OutOfRangeError(CoordError):
    def __init__(self, value: float):
        self.value = value
        super().__init__("coordinate out of range")


class InvalidDegreeError(CoordError):
    def __init__(self, value: float):
        self.value = value
        super().__init__("invalid degree value")


class InvalidMinutesError(CoordError):
    def __init__(self, value: float):
        self.value = value
        super().__init__("invalid minutes value")


class InvalidSecondsError(CoordError):
    def __init__(self, value: float):
        self.value = value
        super().__init__("invalid seconds value")


class InvalidDirectionError(CoordError):
    def __init__(self, direction: str):
        self.direction = direction
        super().__init__(f"invalid direction `{direction}`")


# --------------------------------------------------------------------------- #
# DMS
# --------------------------------------------------------------------------- #

class DmsError(GeoPairError):
    """Failure while reading a degrees/minutes/seconds string."""


class DmsFormatError(DmsError):
    def __init__(self):
        super().__init__("invalid DMS format")


class DmsFieldError(DmsError):
    def __init__(self, field: CoordField):
        self.field = field
        super().__init__(f"invalid DMS field: {field}")


class DmsCoordError(DmsError):
    def __init__(self, error: CoordError):
        self.error = error
        super().__init__(f"invalid coord ({error})")


# --------------------------------------------------------------------------- #
# DDM
# --------------------------------------------------------------------------- #

class DdmError(GeoPairError):
    """Failure while reading a degrees/decimal-minutes string."""


class DdmFormatError(DdmError):
    def __init__(self):
        super().__init__("invalid DDM format")


class DdmFieldError(DdmError):
    def __init__(self, field: CoordField):
        self.field = field
        super().__init__(f"invalid DDM field: {field}")


class DdmCoordError(DdmError):
    def __init__(self, error: CoordError):
        self.error = error
        super().__init__(f"invalid coord ({error})")


# --------------------------------------------------------------------------- #
# Distance
# --------------------------------------------------------------------------- #

class HaversineError(GeoPairError):
    """Internal invariant violated by a distance computation."""


class InvalidDistanceError(HaversineError):
    def __init__(self):
        super().__init__("invalid distance")


class NegativeDistanceError(HaversineError):
    def __init__(self, dist: float):
        self.dist = dist
        super().__init__(f"negative distance `{dist}`")
