#!/usr/bin/env python3
"""
Decimal String Parsing and Formatting

Converts between decimal strings and (unscaled, scale) integer pairs using
plain string and integer arithmetic. Nothing here rounds: parsing only trims
trailing fractional zeros, and formatting only places the decimal point.

Representation:
- unscaled: the value with its decimal point removed ("1.23" -> 123)
- scale: how many low-order digits of unscaled are fractional ("1.23" -> 2)
- canonical string: no trailing fractional zeros and no dangling "."
"""

import re
from decimal import Decimal
from typing import Union

from .errors import InvalidFormat

# ASCII digits only; str.isdigit() and \d would also accept other scripts.
DECIMAL_PATTERN = re.compile(r"-?[0-9]+(\.[0-9]+)?")

NumberLike = Union[int, float, str, Decimal]


def parse_decimal(value: NumberLike) -> tuple[int, int]:
    """
    Parse a decimal string or native number into an (unscaled, scale) pair.

    Numbers are converted to text first, so they go through the same
    validation as strings. Floats are written out in plain notation (1e-07
    becomes "0.0000001"); nan and inf are rejected.

    Args:
        value: Decimal string like "-12.340" or a number like 12.34

    Returns:
        Tuple of (unscaled integer, non-negative scale)

    Raises:
        InvalidFormat: If the input does not match ``-?digits(.digits)?``

    Examples:
        parse_decimal("1.230") -> (123, 2)
        parse_decimal("42") -> (42, 0)
        parse_decimal("-0.00") -> (0, 0)
        parse_decimal(1.5) -> (15, 1)
    """
    if isinstance(value, bool):
        raise InvalidFormat(value)

    if isinstance(value, str):
        text = value
    elif isinstance(value, float):
        # repr() is the shortest round-tripping form; "f" drops its exponent
        text = format(Decimal(repr(value)), "f")
    else:
        text = str(value)
    if not DECIMAL_PATTERN.fullmatch(text):
        raise InvalidFormat(value)

    integer_part, _, fractional_part = text.partition(".")
    fractional_part = fractional_part.rstrip("0")

    # int() keeps the sign from the integer part and drops a negative zero
    return int(integer_part + fractional_part), len(fractional_part)


def format_decimal(unscaled: int, scale: int) -> str:
    """
    Render an (unscaled, scale) pair as a canonical decimal string.

    Args:
        unscaled: Integer value with the decimal point removed
        scale: Number of fractional digits in unscaled

    Returns:
        Canonical decimal string

    Examples:
        format_decimal(123, 2) -> "1.23"
        format_decimal(150, 2) -> "1.5"
        format_decimal(-5, 3) -> "-0.005"
        format_decimal(1000, 3) -> "1"
    """
    if scale == 0:
        return str(unscaled)

    # At least one integer digit must remain after the split
    digits = str(abs(unscaled)).rjust(scale + 1, "0")
    integer_part = digits[:-scale] or "0"
    fractional_part = digits[-scale:].rstrip("0")

    result = f"{integer_part}.{fractional_part}" if fractional_part else integer_part
    if unscaled < 0:
        return f"-{result}"
    return result

