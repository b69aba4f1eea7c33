"""
Command Line Interface Package

Unified CLI for decimal parsing, arithmetic and base-unit conversion.

Command Structure:
- scaled-decimal: Main entry point with utility commands (version, config)
- scaled-decimal parse: Inspect the stored form of a decimal
- scaled-decimal calc: Evaluate a chain of add/sub/mul/div steps
- scaled-decimal to-base / from-base: Token base-unit conversions
"""
