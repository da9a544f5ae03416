"""Shared helpers for consistent human-readable CLI output."""

import click
from rich.console import Console
from rich.table import Table

from numeral_systems.const import RADIX_LABELS, Radix
from numeral_systems.converter import format_positive_radix, format_radix


def format_heading_lines(title: str) -> list[str]:
    """Return heading lines with a title and matching underline."""
    normalized = title.strip()
    return [normalized, "=" * len(normalized)]


def print_heading(title: str) -> None:
    """Print a consistent heading block."""
    for line in format_heading_lines(title):
        click.echo(line)


def print_error(message: str) -> None:
    """Print the shared error sentence to stderr."""
    click.echo(f"Error: {message}", err=True)


def radix_label(radix: int) -> str:
    return RADIX_LABELS[Radix(radix)]


def display_digits(digits: str) -> str:
    """Show zero, which formats to no digits, as a single "0"."""
    return digits or "0"


def build_radix_rows(number: int, signed: bool = True) -> list[tuple[str, Radix, str]]:
    """Format one number in every supported radix.

    Returns (label, radix, digits) tuples ordered octal, decimal, hexadecimal.
    Signed rows use format_radix, unsigned rows format_positive_radix.
    """
    formatter = format_radix if signed else format_positive_radix
    return [(radix_label(radix), radix, formatter(number, radix)) for radix in Radix]


def print_radix_table(number: int, signed: bool = True, console: Console | None = None) -> None:
    """Print a number in all radixes using a rich table."""
    rows = build_radix_rows(number, signed=signed)

    table = Table(title=str(number), show_header=True, header_style="bold magenta")
    table.add_column("System")
    table.add_column("Radix", justify="right")
    table.add_column("Digits", justify="right")
    for label, radix, digits in rows:
        table.add_row(label, str(radix.value), display_digits(digits))

    (console or Console()).print(table)
