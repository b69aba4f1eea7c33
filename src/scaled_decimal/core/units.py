#!/usr/bin/env python3
"""
Token Base-Unit Helpers

Conversions between human-readable decimal amounts and integer base units,
as used for on-chain token balances (1 token = 10**decimals base units).

Unit Systems:
- Display amounts: decimal strings like "1.5"
- Base units: integers, e.g. 1.5 tokens at 18 decimals = 1500000000000000000
- Normalized units: base units rescaled to a common decimals count (18)

All conversions use integer arithmetic. Division truncates toward zero.
"""

import logging
from decimal import Decimal
from typing import Any, Optional, Union

from .errors import InvalidFormat
from .parsing import parse_decimal
from .scaled_decimal import DecimalLike, ScaledDecimal

logger = logging.getLogger(__name__)

DEFAULT_TARGET_DECIMALS = 18

IntegerLike = Union[int, str]


def _to_int(value: IntegerLike) -> int:
    """Parse an integer value, rejecting fractional and malformed input."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    unscaled, scale = parse_decimal(value)
    if scale:
        raise InvalidFormat(value)
    return unscaled


def _pow10(decimals: int) -> int:
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    return 10**decimals


def _truncating_div(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return -quotient if numerator < 0 else quotient


def add_decimals(value: IntegerLike, decimals: int) -> int:
    """
    Multiply an integer amount by 10**decimals.

    Example:
        add_decimals(5, 6) -> 5000000
    """
    return _to_int(value) * _pow10(decimals)


def remove_decimals(value: IntegerLike, decimals: int) -> int:
    """
    Divide an integer amount by 10**decimals, dropping the remainder.

    Example:
        remove_decimals(5123456, 6) -> 5
    """
    return _truncating_div(_to_int(value), _pow10(decimals))


def normalize_decimals(value: IntegerLike, decimals: int, target: int = DEFAULT_TARGET_DECIMALS) -> int:
    """
    Rescale base units from one decimals count to another.

    Args:
        value: Amount in base units with `decimals` decimals
        decimals: Current decimals count
        target: Desired decimals count (default: 18)

    Returns:
        Amount in base units with `target` decimals, truncated

    Example:
        normalize_decimals(1500000, 6) -> 1500000000000000000  # 1.5 USDC-style -> 18 decimals
    """
    return _truncating_div(_to_int(value) * _pow10(target), _pow10(decimals))


def to_base_units(amount: DecimalLike, decimals: int) -> int:
    """
    Convert a decimal amount into integer base units.

    Fractional digits beyond `decimals` are truncated.

    Examples:
        to_base_units("1.5", 18) -> 1500000000000000000
        to_base_units("0.0000001", 6) -> 0
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")
    value = ScaledDecimal.from_value(amount)
    if value.scale > decimals:
        logger.debug("Truncating %s to %d decimals", value, decimals)
        return _truncating_div(value.unscaled, _pow10(value.scale - decimals))
    return value.unscaled * _pow10(decimals - value.scale)


def from_base_units(value: IntegerLike, decimals: int) -> ScaledDecimal:
    """
    Convert integer base units into an exact ScaledDecimal.

    Example:
        str(from_base_units(1500000000000000000, 18)) -> "1.5"
    """
    return ScaledDecimal(unscaled=_to_int(value), scale=decimals)


def format_values_to_string(value: Any, seen: Optional[set[int]] = None) -> Any:
    """
    Convert numbers and decimals inside a (nested) structure to strings.

    Dicts and lists are rebuilt rather than modified, so tuples and other
    read-only results can be passed in too. None passes through unchanged.

    Args:
        value: ScaledDecimal, number, string, or dict/list/tuple of them
        seen: Ids of containers already visited (circular reference guard)

    Returns:
        The same structure with every number rendered as a string

    Example:
        format_values_to_string({"amount": ScaledDecimal(150, 2), "ids": [1, 2]})
        -> {"amount": "1.5", "ids": ["1", "2"]}
    """
    if value is None:
        return value

    if isinstance(value, (ScaledDecimal, int, float, Decimal, str)) and not isinstance(value, bool):
        return str(value)

    if isinstance(value, (dict, list, tuple)):
        if seen is None:
            seen = set()
        if id(value) in seen:
            return "[Circular]"
        seen.add(id(value))

        if isinstance(value, dict):
            return {key: format_values_to_string(item, seen) for key, item in value.items()}
        return [format_values_to_string(item, seen) for item in value]

    return value
