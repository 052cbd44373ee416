"""Validation errors and user input parsing for tour records.

Parsing and validation report problems as values rather than raising, so
callers decide whether to re-prompt, skip or abort:

1. ``parse_positive_float`` / ``parse_non_negative_int`` turn raw text into
   numbers and return a ``ParseResult``.
2. ``TourModel.validate_data`` returns a ``ValidationError`` or ``None``.

``ValidationError`` is still an exception so it can be raised where a hard
failure is wanted (e.g. a corrupt record in the backing store).
"""

import math
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")

# Largest whole-number input accepted (32-bit signed range)
MAX_INT_INPUT = 2**31 - 1


# Base Error Class ---------------------------------------------------------

@dataclass
class ValidationError(Exception):
    """Structured validation error with context.

    Attributes:
        rule: Name of the validation rule that failed (e.g. "duration<=0")
        message: Human-readable error description
        field: Optional name of the offending field
    """

    rule: str
    message: str
    field: str | None = None

    def __str__(self) -> str:
        """Format error message."""
        parts = []
        if self.field:
            parts.append(f"field '{self.field}'")
        parts.append(f"({self.rule})")
        parts.append(self.message)
        return " ".join(parts)


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing one piece of user input.

    Exactly one of ``value`` and ``error`` is set.
    """

    value: T | None = None
    error: ValidationError | None = None

    @property
    def ok(self) -> bool:
        """True when parsing succeeded."""
        return self.error is None


# Input Parsers ------------------------------------------------------------

def parse_positive_float(
    text: str | float, field: str = "duration"
) -> ParseResult[float]:
    """Parse text as a finite real number greater than zero.

    Args:
        text: Raw user input (numbers are accepted as-is)
        field: Field name reported in the error

    Returns:
        ParseResult holding the float, or a ValidationError
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        return ParseResult(
            error=ValidationError(
                rule="not_a_number",
                message=f"Enter a positive real number, got '{text}'.",
                field=field,
            )
        )

    if not math.isfinite(value) or value <= 0:
        return ParseResult(
            error=ValidationError(
                rule=f"{field}<=0",
                message=f"Enter a positive real number, got '{text}'.",
                field=field,
            )
        )

    return ParseResult(value=value)


def parse_non_negative_int(
    text: str | int, field: str = "stops"
) -> ParseResult[int]:
    """Parse text as an integer greater than or equal to zero.

    Args:
        text: Raw user input (ints are accepted as-is)
        field: Field name reported in the error

    Returns:
        ParseResult holding the int, or a ValidationError
    """
    if isinstance(text, (bool, float)):
        value = None
    elif isinstance(text, int):
        value = text
    else:
        try:
            value = int(str(text).strip())
        except ValueError:
            value = None

    if value is None:
        return ParseResult(
            error=ValidationError(
                rule="not_an_integer",
                message=f"Enter a non-negative whole number, got '{text}'.",
                field=field,
            )
        )

    if value < 0:
        return ParseResult(
            error=ValidationError(
                rule=f"{field}<0",
                message=f"Enter a non-negative whole number, got '{text}'.",
                field=field,
            )
        )

    if value > MAX_INT_INPUT:
        return ParseResult(
            error=ValidationError(
                rule=f"{field}>max",
                message=(
                    f"Enter a whole number no larger than {MAX_INT_INPUT}, "
                    f"got '{text}'."
                ),
                field=field,
            )
        )

    return ParseResult(value=value)
