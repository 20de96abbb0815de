"""
Exceptions raised by the seam carving engine.

All of them derive from ValueError so callers that only care about
"bad argument" can keep catching that.
"""


class SeamCarvingError(ValueError):
    """Base class for seam carving errors."""


class ContractViolationError(SeamCarvingError):
    """Caller passed an invalid seam, coordinate, count or image."""


class DegenerateGeometryError(SeamCarvingError):
    """Operation would leave the grid with zero width or height."""
