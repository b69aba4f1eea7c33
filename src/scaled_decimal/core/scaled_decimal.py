#!/usr/bin/env python3
"""
ScaledDecimal Primitive Type

Immutable fixed-point decimal built from an arbitrary-precision integer and
an explicit decimal-point position. Addition, subtraction and multiplication
are exact; division picks a working precision and truncates.
"""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from .errors import DivisionByZero
from .parsing import format_decimal, parse_decimal

logger = logging.getLogger(__name__)

# Fractional digits added by div() beyond the operands' own digits, at least
MIN_DIVISION_PRECISION = 6


@dataclass(frozen=True, eq=False)
class ScaledDecimal:
    """
    Immutable decimal value equal to ``unscaled / 10**scale``.

    Every operation returns a new instance. Instances with different scales
    can hold the same value (150/2 and 15/1 are both 1.5); equality, ordering
    and hashing compare values, while str() always gives the canonical form.

    Examples:
        >>> total = ScaledDecimal.from_value(1.23).add("4.56")
        >>> str(total)
        '5.79'
        >>> total
        ScaledDecimal(unscaled=579, scale=2)

        >>> price = ScaledDecimal.from_value("19.990")
        >>> price.scale
        2
        >>> str(price * 3)
        '59.97'

        >>> str(ScaledDecimal.from_value(10).div(3))
        '3.333333'
    """

    unscaled: int
    scale: int = 0

    def __post_init__(self) -> None:
        for name in ("unscaled", "scale"):
            field_value = getattr(self, name)
            if not isinstance(field_value, int) or isinstance(field_value, bool):
                raise TypeError(f"{name} must be an int, got {type(field_value).__name__}")
        if self.scale < 0:
            raise ValueError(f"scale must be non-negative, got {self.scale}")

    @classmethod
    def from_value(cls, value: "DecimalLike") -> "ScaledDecimal":
        """
        Create a ScaledDecimal from a decimal string, a number or another instance.

        Trailing fractional zeros are dropped, so "1.230" gets scale 2.

        Args:
            value: ScaledDecimal (returned as-is), string like "-1.23", or number

        Returns:
            ScaledDecimal object

        Raises:
            InvalidFormat: If the value is not a plain decimal
        """
        if isinstance(value, ScaledDecimal):
            return value
        unscaled, scale = parse_decimal(value)
        return cls(unscaled=unscaled, scale=scale)

    def add(self, other: "DecimalLike") -> "ScaledDecimal":
        """Exact sum; the result carries the larger of the two scales."""
        addend = ScaledDecimal.from_value(other)
        left, right, scale = self._aligned(addend)
        return ScaledDecimal(unscaled=left + right, scale=scale)

    def sub(self, other: "DecimalLike") -> "ScaledDecimal":
        """Exact difference; the result carries the larger of the two scales."""
        subtrahend = ScaledDecimal.from_value(other)
        left, right, scale = self._aligned(subtrahend)
        return ScaledDecimal(unscaled=left - right, scale=scale)

    def mul(self, other: "DecimalLike") -> "ScaledDecimal":
        """Exact product; the result scale is the sum of the operand scales."""
        multiplier = ScaledDecimal.from_value(other)
        return ScaledDecimal(
            unscaled=self.unscaled * multiplier.unscaled,
            scale=self.scale + multiplier.scale,
        )

    def div(self, other: "DecimalLike") -> "ScaledDecimal":
        """
        Divide by another value, truncating toward zero.

        The working precision is the length of this unscaled value's string
        form minus the integer-digit estimate of the divisor (its string length
        less its scale), but never fewer than MIN_DIVISION_PRECISION digits. A
        minus sign counts toward both lengths. The numerator is scaled up by
        that many digits before integer division.

        This is an approximation: the result is truncated, not rounded, and
        is not guaranteed to carry a fixed number of significant digits.

        Args:
            other: Divisor

        Returns:
            New ScaledDecimal with scale ``self.scale + precision - other.scale``

        Raises:
            DivisionByZero: If the divisor is zero
            InvalidFormat: If the divisor cannot be parsed
        """
        divisor = ScaledDecimal.from_value(other)
        if divisor.unscaled == 0:
            raise DivisionByZero(self)

        divisor_integer_digits = len(str(divisor.unscaled)) - divisor.scale
        precision = max(len(str(self.unscaled)) - divisor_integer_digits, MIN_DIVISION_PRECISION)

        numerator = self.unscaled * 10**precision
        quotient = abs(numerator) // abs(divisor.unscaled)
        if (numerator < 0) != (divisor.unscaled < 0):
            quotient = -quotient

        scale = self.scale + precision - divisor.scale
        logger.debug("div %s / %s: precision=%d scale=%d", self, divisor, precision, scale)
        if scale < 0:
            # Same value, expressed without a negative scale
            quotient *= 10**-scale
            scale = 0

        return ScaledDecimal(unscaled=quotient, scale=scale)

    def normalize(self) -> "ScaledDecimal":
        """Return the same value with the smallest possible scale."""
        unscaled, scale = self.unscaled, self.scale
        while scale > 0 and unscaled % 10 == 0:
            unscaled //= 10
            scale -= 1
        if scale == self.scale:
            return self
        return ScaledDecimal(unscaled=unscaled, scale=scale)

    def abs(self) -> "ScaledDecimal":
        """Return absolute value, keeping the scale."""
        if self.unscaled >= 0:
            return self
        return ScaledDecimal(unscaled=-self.unscaled, scale=self.scale)

    def to_string(self) -> str:
        """Canonical decimal string (no trailing fractional zeros, no dangling point)."""
        return format_decimal(self.unscaled, self.scale)

    def to_number(self) -> float:
        """
        Convert to a native float.

        Lossy: values beyond double precision or range are rounded (or become
        inf). Use to_string() when the exact value matters.
        """
        return float(self.to_string())

    def _aligned(self, other: "ScaledDecimal") -> tuple[int, int, int]:
        """Scale both unscaled values up to the larger scale."""
        scale = max(self.scale, other.scale)
        left = self.unscaled * 10 ** (scale - self.scale)
        right = other.unscaled * 10 ** (scale - other.scale)
        return left, right, scale

    def __add__(self, other: "DecimalLike") -> "ScaledDecimal":
        return self.add(other)

    def __radd__(self, other: "DecimalLike") -> "ScaledDecimal":
        return ScaledDecimal.from_value(other).add(self)

    def __sub__(self, other: "DecimalLike") -> "ScaledDecimal":
        return self.sub(other)

    def __rsub__(self, other: "DecimalLike") -> "ScaledDecimal":
        return ScaledDecimal.from_value(other).sub(self)

    def __mul__(self, other: "DecimalLike") -> "ScaledDecimal":
        return self.mul(other)

    def __rmul__(self, other: "DecimalLike") -> "ScaledDecimal":
        return ScaledDecimal.from_value(other).mul(self)

    def __truediv__(self, other: "DecimalLike") -> "ScaledDecimal":
        return self.div(other)

    def __rtruediv__(self, other: "DecimalLike") -> "ScaledDecimal":
        return ScaledDecimal.from_value(other).div(self)

    def __neg__(self) -> "ScaledDecimal":
        return ScaledDecimal(unscaled=-self.unscaled, scale=self.scale)

    def __abs__(self) -> "ScaledDecimal":
        return self.abs()

    def __bool__(self) -> bool:
        return self.unscaled != 0

    def __float__(self) -> float:
        return self.to_number()

    def __eq__(self, other: object) -> bool:
        """Value equality: ScaledDecimal(150, 2) == ScaledDecimal(15, 1)."""
        if not isinstance(other, ScaledDecimal):
            return NotImplemented
        left, right, _ = self._aligned(other)
        return left == right

    def __hash__(self) -> int:
        normalized = self.normalize()
        return hash((normalized.unscaled, normalized.scale))

    def __lt__(self, other: "DecimalLike") -> bool:
        left, right, _ = self._aligned(ScaledDecimal.from_value(other))
        return left < right

    def __le__(self, other: "DecimalLike") -> bool:
        left, right, _ = self._aligned(ScaledDecimal.from_value(other))
        return left <= right

    def __gt__(self, other: "DecimalLike") -> bool:
        left, right, _ = self._aligned(ScaledDecimal.from_value(other))
        return left > right

    def __ge__(self, other: "DecimalLike") -> bool:
        left, right, _ = self._aligned(ScaledDecimal.from_value(other))
        return left >= right

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ScaledDecimal(unscaled={self.unscaled}, scale={self.scale})"


DecimalLike = Union[ScaledDecimal, int, float, str, Decimal]
