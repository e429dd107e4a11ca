"""Error taxonomy for grid and world operations.

Every error raised by lifegrid derives from LifeGridError and also from the
closest built-in exception, so callers can catch either.
"""


class LifeGridError(Exception):
    """Base class for all lifegrid errors."""


class ConstructionError(LifeGridError, ValueError):
    """Raised when a grid is built or resized with a negative dimension."""


class OutOfRangeError(LifeGridError, IndexError):
    """Raised when a coordinate, crop window or merge placement is out of bounds."""


class InvalidDimensionsError(LifeGridError, RuntimeError):
    """Raised when the two World buffers no longer have the same size."""


class InvalidArgumentError(LifeGridError, ValueError):
    """Raised for arguments outside their documented domain (e.g. negative steps)."""


class CellValueError(LifeGridError, ValueError):
    """Raised when a value is neither ALIVE nor DEAD."""


class ReadOnlyGridError(LifeGridError, TypeError):
    """Raised when mutating a read-only grid view."""


class FileFormatError(LifeGridError, ValueError):
    """Raised when ASCII or binary grid data is malformed."""
