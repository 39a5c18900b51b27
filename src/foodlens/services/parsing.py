"""Numeric extraction from free-text nutrition fields."""

import re
from decimal import ROUND_HALF_UP, Decimal

_NUMBER_PATTERN = re.compile(r"\d+(?:\.\d+)?", re.ASCII)


def parse_value(field: object) -> int:
    """Return the first number in a nutrition field, rounded, or 0.

    "250 kcal" -> 250, "12.5g" -> 13, "N/A" -> 0. Signs are ignored.
    """
    if field is None:
        return 0
    text = field if isinstance(field, str) else str(field)
    if not text:
        return 0
    match = _NUMBER_PATTERN.search(text)
    if match is None:
        return 0
    return round_half_up(Decimal(match.group()))


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer with halves going up."""
    return int(value.to_integral_value(rounding=ROUND_HALF_UP))
