#!/usr/bin/env python3
"""
English Numerals: Example
=========================

Converts a handful of literal integers and prints one line per number:

    0 == zero
    3 == three
    ...

Usage:
    python main.py
"""

from __future__ import annotations

from numerals import number_to_cardinal

EXAMPLE_NUMBERS: tuple[int, ...] = (0, 3, 10, 17, 23, 105)


def example(number: int) -> None:
    """Print `<number> == <words>`."""
    print(f"{number} == {number_to_cardinal(number)}")


def main():
    for number in EXAMPLE_NUMBERS:
        example(number)


if __name__ == "__main__":
    main()
