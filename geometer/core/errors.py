"""Exception and warning hierarchy for geometer.

Every error raised by the kernel derives from :class:`GeometerError`, so
callers can catch the whole family at once. All of them are terminal for the
operation that raised them: the kernel is deterministic, so retrying on the
same input cannot succeed.
"""

from typing import Optional


class GeometerError(Exception):
    """Base class for all geometer errors."""
    pass


class DegenerateInputError(GeometerError):
    """Raised when input has too few points or no area to work with."""

    def __init__(self, message: str, num_points: Optional[int] = None):
        super().__init__(message)
        self.num_points = num_points


class EarNotFoundError(GeometerError):
    """Raised when ear clipping finds no ear while more than 3 vertices remain.

    This means the polygon is not simple (self-intersecting, repeated
    vertices, or otherwise broken topology).
    """

    def __init__(self, remaining: int, reason: Optional[str] = None):
        message = f"no ear found with {remaining} vertices remaining; polygon is likely invalid"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.remaining = remaining
        self.reason = reason


class ForeignIdError(GeometerError, KeyError):
    """Raised when a vertex id is not live in the topology being queried."""

    def __init__(self, vertex_id):
        super().__init__(vertex_id)
        self.vertex_id = vertex_id

    def __str__(self) -> str:
        return f"vertex id {self.vertex_id!r} does not belong to this topology"


class TopologyError(GeometerError):
    """Raised when prev/next links no longer form a single cycle."""
    pass


class InvalidPolygonError(GeometerError):
    """Raised when a polygon fails up-front simplicity validation."""
    pass


class InputTooLargeError(GeometerError):
    """Raised when input exceeds the configured vertex limit."""

    def __init__(self, num_vertices: int, limit: int):
        super().__init__(f"{num_vertices} vertices exceeds the limit of {limit}")
        self.num_vertices = num_vertices
        self.limit = limit


class HullError(GeometerError):
    """Raised when a hull strategy cannot close the hull boundary."""
    pass


class UnsupportedGeometryError(GeometerError):
    """Raised for geometries outside the kernel's scope (holes, wrong type)."""
    pass


class ConfigurationError(GeometerError):
    """Raised for invalid configuration values."""
    pass


class DegenerateGeometryWarning(UserWarning):
    """Issued when a degenerate input is handled by a fallback policy."""
    pass


__all__ = [
    'GeometerError',
    'DegenerateInputError',
    'EarNotFoundError',
    'ForeignIdError',
    'TopologyError',
    'InvalidPolygonError',
    'InputTooLargeError',
    'HullError',
    'UnsupportedGeometryError',
    'ConfigurationError',
    'DegenerateGeometryWarning',
]
