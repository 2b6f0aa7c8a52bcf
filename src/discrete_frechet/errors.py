"""
Exceptions raised for invalid curve input.

All of them derive from ``ValueError`` so callers that already guard
numeric code with ``except ValueError`` keep working.
"""

from __future__ import annotations


class FrechetInputError(ValueError):
    """Base class for input that cannot be turned into a distance."""


class MalformedInputError(FrechetInputError):
    """A text line is empty or yields no point tuples."""


class UnparsableCoordinateError(FrechetInputError):
    """A coordinate token is not an integer (strict parsing only)."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Coordinate {token!r} is not an integer")
        self.token = token


class DimensionMismatchError(FrechetInputError):
    """Points with differing numbers of coordinates were compared."""


class EmptySequenceError(FrechetInputError):
    """A curve without any points was handed to the distance engine."""
