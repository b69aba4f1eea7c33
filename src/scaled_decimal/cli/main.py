#!/usr/bin/env python3
"""
Main CLI Entry Point for Scaled Decimal

Command-line calculator over exact fixed-point decimals.
"""

import logging
import os

import click

from ..core.config import OutputFormat, get_config
from ..core.errors import ScaledDecimalError
from ..core.scaled_decimal import ScaledDecimal
from ..core.units import from_base_units, to_base_units

logger = logging.getLogger(__name__)

OPERATIONS = {
    "add": ScaledDecimal.add,
    "+": ScaledDecimal.add,
    "sub": ScaledDecimal.sub,
    "-": ScaledDecimal.sub,
    "mul": ScaledDecimal.mul,
    "*": ScaledDecimal.mul,
    "div": ScaledDecimal.div,
    "/": ScaledDecimal.div,
}


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Scaled Decimal - Exact Fixed-Point Decimal Arithmetic

    Parse, format and compute with decimal numbers without floating-point error.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["SCALED_DECIMAL_ENV"] = config_env

    # Configure debug logging if requested
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("scaled_decimal").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    try:
        ctx.obj["config"] = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        click.echo(f"Environment: {ctx.obj['config'].environment.value}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Show version information."""
    from scaled_decimal import __author__, __version__

    click.echo(f"Scaled Decimal v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Output Format: {config_obj.output_format.value}")
    click.echo(f"  Base Unit Decimals: {config_obj.base_unit_decimals}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.argument("value")
def parse(value: str) -> None:
    """
    Show how VALUE is stored: unscaled integer, scale and canonical form.

    Example:
      scaled-decimal parse 1.230
    """
    try:
        number = ScaledDecimal.from_value(value)
    except ScaledDecimalError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Unscaled: {number.unscaled}")
    click.echo(f"Scale: {number.scale}")
    click.echo(f"Canonical: {number}")


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("value")
@click.argument("steps", nargs=-1)
@click.option("--as-number", is_flag=True, help="Print the result as a float")
@click.pass_context
def calc(ctx: click.Context, value: str, steps: tuple[str, ...], as_number: bool) -> None:
    """
    Evaluate VALUE followed by OP OPERAND pairs, left to right.

    OP is one of add, sub, mul, div (or + - * /). There is no operator
    precedence: each step applies to the running result.

    Examples:
      scaled-decimal calc 1.23 add 4.56
      scaled-decimal calc 1.23 add 4.56 mul 7.89 sub 0.12 div 3.45
    """
    if len(steps) % 2:
        raise click.UsageError("Each operator needs an operand")

    try:
        result = ScaledDecimal.from_value(value)
        for op_name, operand in zip(steps[::2], steps[1::2]):
            operation = OPERATIONS.get(op_name.lower())
            if operation is None:
                raise click.UsageError(f"Unknown operator: {op_name}")
            result = operation(result, operand)
            logger.debug("%s %s -> %r", op_name, operand, result)
    except ScaledDecimalError as e:
        raise click.ClickException(str(e)) from e

    output_format = ctx.obj["config"].output_format
    if as_number or output_format == OutputFormat.NUMBER:
        click.echo(result.to_number())
    else:
        click.echo(result.to_string())


@main.command(name="to-base")
@click.argument("amount")
@click.option("--decimals", type=click.IntRange(min=0), help="Token decimals (default: BASE_UNIT_DECIMALS)")
@click.pass_context
def to_base(ctx: click.Context, amount: str, decimals: int | None) -> None:
    """
    Convert a decimal AMOUNT to integer base units (truncating).

    Example:
      scaled-decimal to-base 1.5 --decimals 6
    """
    if decimals is None:
        decimals = ctx.obj["config"].base_unit_decimals

    try:
        click.echo(to_base_units(amount, decimals))
    except ScaledDecimalError as e:
        raise click.ClickException(str(e)) from e


@main.command(name="from-base")
@click.argument("value")
@click.option("--decimals", type=click.IntRange(min=0), help="Token decimals (default: BASE_UNIT_DECIMALS)")
@click.pass_context
def from_base(ctx: click.Context, value: str, decimals: int | None) -> None:
    """
    Convert integer base units VALUE to a decimal amount.

    Example:
      scaled-decimal from-base 1500000 --decimals 6
    """
    if decimals is None:
        decimals = ctx.obj["config"].base_unit_decimals

    try:
        click.echo(from_base_units(value, decimals).to_string())
    except ScaledDecimalError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    main()
