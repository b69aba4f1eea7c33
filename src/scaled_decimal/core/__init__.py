"""
Core Package

The decimal engine and its supporting utilities.

This package provides:
- ScaledDecimal, an immutable fixed-point decimal value type
- Parsing and canonical formatting of decimal strings
- Token base-unit conversions built on integer arithmetic
- Configuration management for environment-specific settings
"""

from .config import (
    Config,
    Environment,
    OutputFormat,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .errors import DivisionByZero, InvalidFormat, ScaledDecimalError
from .parsing import DECIMAL_PATTERN, format_decimal, parse_decimal
from .scaled_decimal import MIN_DIVISION_PRECISION, DecimalLike, ScaledDecimal
from .units import (
    add_decimals,
    format_values_to_string,
    from_base_units,
    normalize_decimals,
    remove_decimals,
    to_base_units,
)

__all__ = [
    # Configuration
    "Config",
    "DECIMAL_PATTERN",
    "DecimalLike",
    "DivisionByZero",
    "Environment",
    "InvalidFormat",
    "MIN_DIVISION_PRECISION",
    "OutputFormat",
    # Decimal type
    "ScaledDecimal",
    "ScaledDecimalError",
    # Unit helpers
    "add_decimals",
    "format_decimal",
    "format_values_to_string",
    "from_base_units",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "normalize_decimals",
    "parse_decimal",
    "reload_config",
    "remove_decimals",
    "to_base_units",
]
