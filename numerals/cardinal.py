"""
Convert signed integers to English cardinal words.

    12345   → "twelve thousand three hundred and forty-five"
    -7      → "minus seven"
    1061044 → "one million sixty-one thousand forty-four"

The number is split into base-1000 groups, least significant first. Each
non-zero group is worded on its own ("sixty-one") and tagged with its scale
("thousand"), then prepended to the output so the most significant group
ends up first. "and" only ever appears inside a group, between the hundreds
and the rest.

Supported domain is the signed 64-bit range. The scale table itself stops at
quintillion, i.e. magnitudes up to 10**21 - 1; asking for a larger scale
raises rather than wrapping around the table.
"""

from __future__ import annotations

import logging

from .exceptions import (
    GroupOutOfRangeError,
    MagnitudeOutOfRangeError,
    ScaleOutOfRangeError,
)

logger = logging.getLogger(__name__)

# ─── Domain Bounds ───────────────────────────────────────────────────

I64_MIN: int = -(2**63)
I64_MAX: int = 2**63 - 1

# ─── Word Lookup Tables ──────────────────────────────────────────────

ZERO = "zero"
MINUS = "minus "
HUNDRED = "hundred"
SEPARATOR = " and "

# Indexed by digit; slot 0 is never emitted.
ONES: tuple[str, ...] = (
    "", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

# Indexed by (n - 10) for n in 11..19.
TEENS: tuple[str, ...] = (
    "", "eleven", "twelve", "thirteen", "fourteen",
    "fifteen", "sixteen", "seventeen", "eighteen", "nineteen",
)

# Indexed by tens digit.
TENS: tuple[str, ...] = (
    "", "ten", "twenty", "thirty", "forty",
    "fifty", "sixty", "seventy", "eighty", "ninety",
)

# Indexed by group position; index 0 is the units group.
SCALES: tuple[str, ...] = (
    "", "thousand", "million", "billion",
    "trillion", "quadrillion", "quintillion",
)


# ─── Segment Namer ───────────────────────────────────────────────────


def segment_to_words(n: int) -> str:
    """Word a number in [0, 999].

    Returns an empty string for 0; the caller decides whether anything is
    emitted for an empty group.

    Raises:
        TypeError: If ``n`` is not an ``int`` (``bool`` is rejected too).
        GroupOutOfRangeError: If ``n`` is outside [0, 999].
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"Expected int, got {type(n).__name__}")
    if not 0 <= n <= 999:
        raise GroupOutOfRangeError(
            f"Group value {n} is outside [0, 999]",
            details={"group": n},
        )

    words = ""

    hundreds = n // 100
    if hundreds:
        words += f"{ONES[hundreds]} {HUNDRED}"
        if n % 100:
            words += SEPARATOR

    remainder = n % 100
    if 1 <= remainder <= 9:
        words += ONES[remainder]
    elif remainder == 10:
        words += TENS[1]
    elif 11 <= remainder <= 19:
        words += TEENS[remainder - 10]
    elif remainder >= 20:
        words += TENS[remainder // 10]
        if remainder % 10:
            words += f"-{ONES[remainder % 10]}"

    return words


# ─── Group Formatter ─────────────────────────────────────────────────


def format_group(group: int, scale_idx: int) -> str | None:
    """Word one 3-digit group and append its scale name.

    Args:
        group: The group value, 0-999.
        scale_idx: Position of the group (0 = units, 1 = thousand, ...).

    Returns:
        ``None`` for an all-zero group, whatever its scale, so it is
        skipped entirely.
        Otherwise the worded group; groups above the units carry their scale
        name with a space on either side ("sixty-one thousand ").

    Raises:
        GroupOutOfRangeError: If ``group`` is outside [0, 999].
        ScaleOutOfRangeError: If ``scale_idx`` has no scale name.
    """
    if group == 0:
        return None
    if not 0 <= scale_idx < len(SCALES):
        raise ScaleOutOfRangeError(
            f"Scale index {scale_idx} exceeds the largest supported scale "
            f"({SCALES[-1]})",
            details={"scale_idx": scale_idx, "max_scale_idx": len(SCALES) - 1},
        )

    result = segment_to_words(group)
    if scale_idx > 0:
        result += f" {SCALES[scale_idx]} "
    return result


# ─── Cardinal Converter ──────────────────────────────────────────────


def number_to_cardinal(number: int) -> str:
    """Convert a signed 64-bit integer to English cardinal words.

    Args:
        number: e.g. 12345

    Returns:
        "twelve thousand three hundred and forty-five"

    Raises:
        TypeError: If ``number`` is not an ``int`` (``bool`` is rejected too).
        MagnitudeOutOfRangeError: If ``number`` does not fit in 64 bits.
    """
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"Expected int, got {type(number).__name__}")
    if not I64_MIN <= number <= I64_MAX:
        raise MagnitudeOutOfRangeError(
            f"{number} is outside the signed 64-bit range",
            details={"number": number, "min": I64_MIN, "max": I64_MAX},
        )

    if number == 0:
        return ZERO

    # Exact for I64_MIN as well; ints do not overflow.
    magnitude = abs(number)

    parts: list[str] = []
    scale_idx = 0
    while magnitude > 0:
        chunk = format_group(magnitude % 1000, scale_idx)
        if chunk is None:
            logger.debug("Skipping empty group at scale %d for %d", scale_idx, number)
        else:
            parts.insert(0, chunk)
        magnitude //= 1000
        scale_idx += 1

    if number < 0:
        parts.insert(0, MINUS)

    return "".join(parts).strip()
