"""
Scaled Decimal - Exact Fixed-Point Decimal Arithmetic

Arbitrary-precision decimal numbers stored as an integer plus a decimal-point
position, for amounts that binary floats cannot represent exactly.

Key Features:
- Exact addition, subtraction and multiplication
- Division with a minimum working precision of six fractional digits
- Canonical decimal strings (no trailing zeros)
- Token base-unit conversions (e.g. 18-decimal balances)

Domain Packages:
- core: ScaledDecimal, parsing/formatting, unit helpers, configuration
- cli: Command-line calculator

Example Usage:
    from scaled_decimal import ScaledDecimal

    total = ScaledDecimal.from_value(1.23).add("4.56").mul(7.89)
    print(total)  # 45.6831
"""

__version__ = "0.1.0"
__author__ = "Karl Davis"

from .core.errors import DivisionByZero, InvalidFormat, ScaledDecimalError
from .core.parsing import format_decimal, parse_decimal
from .core.scaled_decimal import ScaledDecimal

__all__ = [
    "ScaledDecimal",
    # Errors
    "DivisionByZero",
    "InvalidFormat",
    "ScaledDecimalError",
    # Parsing
    "format_decimal",
    "parse_decimal",
]
