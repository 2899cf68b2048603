"""Default implementations of infrastructure abstractions."""

from .system import FixedClock, SystemClock  # noqa: F401

__all__ = [
    "SystemClock",
    "FixedClock",
]
