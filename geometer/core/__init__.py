"""Core types and utilities for geometer.

This module provides enum definitions, configuration, and the exception
hierarchy used throughout the library.
"""

from .types import (
    Orientation,
    HullAlgorithm,
    DegeneratePolicy,
    coerce_enum,
)

from .config import (
    KernelConfig,
    DEFAULT_CONFIG,
    resolve_config,
)

from .errors import (
    GeometerError,
    DegenerateInputError,
    EarNotFoundError,
    ForeignIdError,
    TopologyError,
    InvalidPolygonError,
    InputTooLargeError,
    HullError,
    UnsupportedGeometryError,
    ConfigurationError,
    DegenerateGeometryWarning,
)

__all__ = [
    # Enums
    'Orientation',
    'HullAlgorithm',
    'DegeneratePolicy',
    'coerce_enum',

    # Configuration
    'KernelConfig',
    'DEFAULT_CONFIG',
    'resolve_config',

    # Exceptions
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
