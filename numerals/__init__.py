"""
English Numerals: signed integers to English cardinal words.

    >>> from numerals import number_to_cardinal
    >>> number_to_cardinal(12345)
    'twelve thousand three hundred and forty-five'
"""

from .cardinal import I64_MAX, I64_MIN, format_group, number_to_cardinal, segment_to_words
from .exceptions import (
    GroupOutOfRangeError,
    MagnitudeOutOfRangeError,
    NumeralError,
    ScaleOutOfRangeError,
)

__version__ = "1.0.0"

__all__ = [
    "I64_MAX",
    "I64_MIN",
    "GroupOutOfRangeError",
    "MagnitudeOutOfRangeError",
    "NumeralError",
    "ScaleOutOfRangeError",
    "format_group",
    "number_to_cardinal",
    "segment_to_words",
]
