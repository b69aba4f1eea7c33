#!/usr/bin/env python3
"""
Unit tests for the main CLI.

Tests command parsing, output formatting and error reporting.
"""

import pytest
from click.testing import CliRunner

from scaled_decimal.cli.main import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.cli
class TestUtilityCommands:
    """Test version and config commands."""

    def test_version(self, runner):
        """Test version output."""
        from scaled_decimal import __version__

        result = runner.invoke(main, ["version"])
        assert result.exit_code == 0
        assert f"v{__version__}" in result.output

    def test_config(self, runner):
        """Test configuration display."""
        result = runner.invoke(main, ["config"])
        assert result.exit_code == 0
        assert "Environment: test" in result.output
        assert "Base Unit Decimals: 18" in result.output

    def test_verbose_shows_environment(self, runner):
        """Test --verbose prints the active environment."""
        result = runner.invoke(main, ["-v", "version"])
        assert result.exit_code == 0
        assert "Environment: test" in result.output

    def test_invalid_config_reported(self, runner, monkeypatch):
        """Test configuration errors become CLI errors."""
        monkeypatch.setenv("BASE_UNIT_DECIMALS", "-1")
        result = runner.invoke(main, ["config"])
        assert result.exit_code != 0
        assert "Configuration validation failed" in result.output


@pytest.mark.cli
class TestParseCommand:
    """Test the parse command."""

    def test_parse_shows_fields(self, runner):
        """Test stored fields are reported."""
        result = runner.invoke(main, ["parse", "1.230"])
        assert result.exit_code == 0
        assert "Unscaled: 123" in result.output
        assert "Scale: 2" in result.output
        assert "Canonical: 1.23" in result.output

    def test_parse_negative_after_separator(self, runner):
        """Test negative values can be passed after --."""
        result = runner.invoke(main, ["parse", "--", "-0.50"])
        assert result.exit_code == 0
        assert "Unscaled: -5" in result.output

    def test_parse_invalid(self, runner):
        """Test malformed input exits with an error."""
        result = runner.invoke(main, ["parse", "1.2.3"])
        assert result.exit_code == 1
        assert "Invalid number format" in result.output


@pytest.mark.cli
class TestCalcCommand:
    """Test the calc command."""

    def test_single_value(self, runner):
        """Test a lone value is printed canonically."""
        result = runner.invoke(main, ["calc", "2.500"])
        assert result.exit_code == 0
        assert result.output.strip() == "2.5"

    def test_chain(self, runner):
        """Test a full chain of operations."""
        result = runner.invoke(
            main, ["calc", "1.23", "add", "4.56", "mul", "7.89", "sub", "0.12", "div", "3.45"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "13.20669565"

    def test_symbol_operators(self, runner):
        """Test symbolic operator aliases."""
        result = runner.invoke(main, ["calc", "10", "/", "4", "*", "2", "+", "1", "-", "0.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "5.5"

    def test_as_number(self, runner):
        """Test float output."""
        result = runner.invoke(main, ["calc", "1.23", "add", "4.56", "--as-number"])
        assert result.exit_code == 0
        assert result.output.strip() == "5.79"

    def test_output_format_from_environment(self, runner, monkeypatch):
        """Test OUTPUT_FORMAT=number switches to float output."""
        monkeypatch.setenv("OUTPUT_FORMAT", "number")
        result = runner.invoke(main, ["calc", "3"])
        assert result.exit_code == 0
        assert result.output.strip() == "3.0"

    def test_division_by_zero(self, runner):
        """Test division by zero is reported, not raised."""
        result = runner.invoke(main, ["calc", "1", "div", "0"])
        assert result.exit_code == 1
        assert "by zero" in result.output

    def test_unknown_operator(self, runner):
        """Test unknown operators are usage errors."""
        result = runner.invoke(main, ["calc", "1", "pow", "2"])
        assert result.exit_code == 2
        assert "Unknown operator: pow" in result.output

    def test_only_listed_operator_aliases(self, runner):
        """Test operators outside add/sub/mul/div and + - * / are rejected."""
        result = runner.invoke(main, ["calc", "2", "x", "3"])
        assert result.exit_code == 2
        assert "Unknown operator: x" in result.output

    def test_missing_operand(self, runner):
        """Test an operator without an operand is a usage error."""
        result = runner.invoke(main, ["calc", "1", "add"])
        assert result.exit_code == 2


@pytest.mark.cli
class TestBaseUnitCommands:
    """Test to-base and from-base commands."""

    def test_to_base_default_decimals(self, runner):
        """Test the configured default decimals are used."""
        result = runner.invoke(main, ["to-base", "1.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "1500000000000000000"

    def test_to_base_explicit_decimals(self, runner):
        """Test --decimals overrides the default."""
        result = runner.invoke(main, ["to-base", "1.5", "--decimals", "6"])
        assert result.exit_code == 0
        assert result.output.strip() == "1500000"

    def test_from_base(self, runner):
        """Test base units convert back to a decimal amount."""
        result = runner.invoke(main, ["from-base", "1500000", "--decimals", "6"])
        assert result.exit_code == 0
        assert result.output.strip() == "1.5"

    def test_from_base_rejects_fraction(self, runner):
        """Test fractional base units are rejected."""
        result = runner.invoke(main, ["from-base", "1.5", "--decimals", "6"])
        assert result.exit_code == 1
        assert "Invalid number format" in result.output

    def test_negative_decimals_rejected(self, runner):
        """Test click validates the decimals range."""
        result = runner.invoke(main, ["to-base", "1", "--decimals", "-1"])
        assert result.exit_code == 2
