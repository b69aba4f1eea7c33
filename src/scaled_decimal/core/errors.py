#!/usr/bin/env python3
"""
Error Types for Decimal Arithmetic

All failures raised by the decimal engine derive from ScaledDecimalError, so
callers can catch the whole family at once. The concrete types also inherit
from the matching builtin (ValueError, ZeroDivisionError) to fit existing
``except`` clauses.
"""


class ScaledDecimalError(ArithmeticError):
    """Base class for decimal engine failures."""


class InvalidFormat(ScaledDecimalError, ValueError):
    """Raised when input does not match the decimal pattern ``-?digits(.digits)?``."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid number format: {value!r}. "
            'There should be only one "." and the rest should be digits.'
        )


class DivisionByZero(ScaledDecimalError, ZeroDivisionError):
    """Raised when dividing by a value whose unscaled magnitude is zero."""

    def __init__(self, dividend: object) -> None:
        self.dividend = dividend
        super().__init__(f"Cannot divide {dividend} by zero")
