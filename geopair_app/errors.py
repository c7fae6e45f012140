"""
Application-level errors raised by the CSV batch layer.

Row errors carry the 1-based file line (the header is line 1). In strict
mode the first one aborts the run; otherwise they are counted and skipped.
"""

from geopair_engine import DdmError, DmsError, HaversineError


class AppError(Exception):
    """Base class for every error that should end a CLI run with exit code 1."""


class InputReadError(AppError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"I/O error: cannot read {path} ({reason})")


class OutputWriteError(AppError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"I/O error: cannot write {path} ({reason})")


class InvalidHeaderError(AppError):
    def __init__(self):
        super().__init__("Invalid header (missing or unreadable)")


class MissingHeaderFieldError(AppError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing header field '{field}'")


class RowError(AppError):
    """A single data row that could not be normalized."""

    def __init__(self, line: int, message: str):
        self.line = line
        super().__init__(message)


class MixedCoordinateFormatError(RowError):
    def __init__(self, line: int, expected: str):
        self.expected = expected
        super().__init__(line, f"Invalid coordinate format on line {line} (expected: {expected})")


class InvalidDmsError(RowError):
    def __init__(self, line: int, error: DmsError):
        self.error = error
        super().__init__(line, f"Line {line}: invalid DMS ({error})")


class InvalidDdmError(RowError):
    def __init__(self, line: int, error: DdmError):
        self.error = error
        super().__init__(line, f"Line {line}: invalid DDM ({error})")


class DistanceCalculationError(RowError):
    def __init__(self, line: int, error: HaversineError):
        self.error = error
        super().__init__(line, f"Line {line}: distance calculation error ({error})")
