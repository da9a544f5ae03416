#!/usr/bin/env python3
import logging
import sys
from typing import Optional

import click
import yaml
from dotenv import load_dotenv

from .config import Config
from .const import Radix
from .converter import format_positive_radix, format_radix
from .exceptions import ConfigurationError, InvalidArgumentError
from .utils.output import display_digits, print_error, print_heading, print_radix_table

# Load environment variables (e.g. NUMERAL_SYSTEMS_CONFIG_DIR) from .env file
load_dotenv()

_LOGGER = logging.getLogger(__name__)

RADIX_CHOICE = click.Choice([str(int(radix)) for radix in Radix])

# Negative numbers like "-1" are passed through as arguments, not options
NUMBER_COMMAND_SETTINGS = {"ignore_unknown_options": True}


def _resolve_radix(ctx: click.Context, radix: Optional[str]) -> Radix:
    """Use the --radix option if given, otherwise the configured default."""
    if radix is not None:
        return Radix(int(radix))
    try:
        return ctx.obj["CONFIG"].get_default_radix()
    except ConfigurationError as e:
        print_error(str(e))
        ctx.exit(1)


# Define the main group
@click.group()
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase verbosity: -v for INFO, -vv for DEBUG.",
)
@click.pass_context
def cli(ctx, verbose: int):
    """Format integers in octal, decimal or hexadecimal."""
    log_level = logging.WARNING
    if verbose == 1:
        log_level = logging.INFO
    elif verbose >= 2:
        log_level = logging.DEBUG

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,  # Ensures reconfiguration even if root handlers exist
    )

    ctx.ensure_object(dict)
    ctx.obj["CONFIG"] = Config()
    _LOGGER.debug("Using configuration file %s", ctx.obj["CONFIG"].config_file)


@cli.command(context_settings=NUMBER_COMMAND_SETTINGS)
@click.argument("number", type=int)
@click.option("-r", "--radix", type=RADIX_CHOICE, help="Target radix (default from config).")
@click.pass_context
def convert(ctx, number: int, radix: Optional[str]):
    """Format a signed 32-bit NUMBER, negatives in two's complement."""
    config: Config = ctx.obj["CONFIG"]
    try:
        if radix is None and config.get_show_table():
            print_radix_table(number, signed=True)
            return
        target = _resolve_radix(ctx, radix)
        click.echo(display_digits(format_radix(number, target)))
    except InvalidArgumentError as e:
        print_error(str(e))
        ctx.exit(1)


@cli.command(context_settings=NUMBER_COMMAND_SETTINGS)
@click.argument("number", type=int)
@click.option("-r", "--radix", type=RADIX_CHOICE, help="Target radix (default from config).")
@click.pass_context
def positive(ctx, number: int, radix: Optional[str]):
    """Format a non-negative NUMBER."""
    target = _resolve_radix(ctx, radix)
    try:
        click.echo(display_digits(format_positive_radix(number, target)))
    except InvalidArgumentError as e:
        print_error(str(e))
        ctx.exit(1)


@cli.command(context_settings=NUMBER_COMMAND_SETTINGS)
@click.argument("number", type=int)
@click.option("--unsigned", is_flag=True, help="Reject negative numbers instead of using two's complement.")
@click.pass_context
def table(ctx, number: int, unsigned: bool):
    """Show NUMBER in every supported radix."""
    try:
        print_radix_table(number, signed=not unsigned)
    except InvalidArgumentError as e:
        print_error(str(e))
        ctx.exit(1)


@cli.group("config")
def config_group():
    """Inspect or change the stored configuration."""


@config_group.command("show")
@click.pass_context
def config_show(ctx):
    """Print the current configuration."""
    config: Config = ctx.obj["CONFIG"]
    print_heading(f"Configuration ({config.config_file})")
    values = config.as_dict()
    if not values:
        click.echo("(empty)")
        return
    click.echo(yaml.dump(values, default_flow_style=False, sort_keys=False).rstrip())


@config_group.command("set-radix")
@click.argument("radix", type=RADIX_CHOICE)
@click.pass_context
def config_set_radix(ctx, radix: str):
    """Store RADIX as the default for convert and positive."""
    config: Config = ctx.obj["CONFIG"]
    try:
        config.set_default_radix(int(radix))
    except ConfigurationError as e:
        print_error(str(e))
        ctx.exit(1)
    click.echo(f"Default radix set to {radix}.")


if __name__ == "__main__":
    cli()
