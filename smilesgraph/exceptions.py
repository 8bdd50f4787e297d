"""Custom exceptions and warnings for smilesgraph."""

from __future__ import annotations


class ChemError(Exception):
    """Base exception for chemistry-related errors."""
    pass


class RingError(ChemError):
    """Invalid ring closure."""

    def __init__(self, message: str, ring_index: int | None = None):
        self.ring_index = ring_index
        super().__init__(message)


class UnknownElementWarning(UserWarning):
    """An element symbol has no entry in the atomic tables."""
    pass
