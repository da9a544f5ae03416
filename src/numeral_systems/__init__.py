"""Octal, decimal and hexadecimal formatting of 32-bit integers."""

__version__ = "0.1.0"

from .const import INT32_MAX, INT32_MIN, SUPPORTED_RADIXES, Radix
from .converter import (
    format_positive_decimal,
    format_positive_hex,
    format_positive_octal,
    format_positive_radix,
    format_radix,
)
from .exceptions import ConfigurationError, InvalidArgumentError, NumeralSystemsError

__all__ = [
    "format_positive_octal",
    "format_positive_decimal",
    "format_positive_hex",
    "format_positive_radix",
    "format_radix",
    "Radix",
    "SUPPORTED_RADIXES",
    "INT32_MIN",
    "INT32_MAX",
    "NumeralSystemsError",
    "InvalidArgumentError",
    "ConfigurationError",
    "__version__",
]
