"""Kernel configuration shared by triangulation and hull computation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .errors import ConfigurationError, InputTooLargeError
from .types import DegeneratePolicy, coerce_enum


@dataclass(frozen=True)
class KernelConfig:
    """Settings that change how kernel operations treat their input.

    Attributes:
        degenerate_policy: How hull computation handles zero-area input
        max_vertices: Reject inputs with more vertices than this (None = no limit)
        validate_simple: Check simplicity with Shapely before triangulating
    """

    degenerate_policy: Union[DegeneratePolicy, str] = DegeneratePolicy.EXTREMES
    max_vertices: Optional[int] = None
    validate_simple: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "degenerate_policy", coerce_enum(self.degenerate_policy, DegeneratePolicy)
        )
        if self.max_vertices is not None and self.max_vertices < 3:
            raise ConfigurationError(
                f"max_vertices must be at least 3, got {self.max_vertices}"
            )

    def check_size(self, num_vertices: int) -> None:
        """Raise InputTooLargeError if ``num_vertices`` is above the limit."""
        if self.max_vertices is not None and num_vertices > self.max_vertices:
            raise InputTooLargeError(num_vertices, self.max_vertices)


DEFAULT_CONFIG = KernelConfig()


def resolve_config(config: Optional[KernelConfig]) -> KernelConfig:
    """Return ``config`` or the library default when it is None."""
    return DEFAULT_CONFIG if config is None else config


__all__ = [
    'KernelConfig',
    'DEFAULT_CONFIG',
    'resolve_config',
]
