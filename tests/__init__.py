"""
Test Suite for Scaled Decimal

Test Structure:
- unit/: Unit tests mirroring src/ package structure
- integration/: Configuration loading tests

Test Categories:
- Decimal parsing, formatting and arithmetic
- Token base-unit helpers
- Command-line interface
"""
