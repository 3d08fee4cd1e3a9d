"""
Custom exception hierarchy for numeral conversion.

Each exception type maps to one way a caller can step outside the
converter's domain, so callers (and the HTTP layer) can report a precise,
machine-readable code instead of a bare message.
"""

from __future__ import annotations


class NumeralError(ValueError):
    """Base exception for all numeral conversion failures."""

    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class GroupOutOfRangeError(NumeralError):
    """A 3-digit group fell outside [0, 999]."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("GROUP_OUT_OF_RANGE", message, details)


class ScaleOutOfRangeError(NumeralError):
    """A scale index has no entry in the scale-name table."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("SCALE_OUT_OF_RANGE", message, details)


class MagnitudeOutOfRangeError(NumeralError):
    """The number does not fit in a signed 64-bit integer."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__("MAGNITUDE_OUT_OF_RANGE", message, details)
