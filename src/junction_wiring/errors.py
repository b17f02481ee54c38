"""Exception types raised by the wiring engine."""

from __future__ import annotations


class JunctionWiringError(Exception):
    """Base class for every error raised by this package."""


class InvalidInputError(JunctionWiringError, ValueError):
    """Raised for empty or malformed point sets and out-of-range indices."""


class UnderdeterminedQueryError(JunctionWiringError, ValueError):
    """Raised when a bounded query cannot produce the requested number of clusters."""


class ConnectivityInvariantError(JunctionWiringError, RuntimeError):
    """Raised when the full edge stream fails to join every point into one circuit."""


__all__ = [
    "JunctionWiringError",
    "InvalidInputError",
    "UnderdeterminedQueryError",
    "ConnectivityInvariantError",
]
