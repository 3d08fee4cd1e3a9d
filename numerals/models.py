"""
Pydantic models for conversion results.

The converter itself deals in plain ``int`` and ``str``; these models are
the typed shape used when a result leaves the library (HTTP responses).
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .cardinal import number_to_cardinal


class CardinalResult(BaseModel):
    """A number paired with its cardinal wording."""

    number: int
    words: str = Field(description="English cardinal words, e.g. 'forty-two'")

    @classmethod
    def from_number(cls, number: int) -> CardinalResult:
        """Run the converter and wrap the result."""
        return cls(number=number, words=number_to_cardinal(number))
