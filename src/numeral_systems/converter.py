"""Radix formatting of signed 32-bit integers.

Every formatter here is a pure function built on the same digit-extraction
loop. None of them use Python's built-in ``oct``/``hex``/``format`` helpers.
"""

import logging
from collections.abc import Callable
from typing import Any

from .const import (
    DIGITS,
    FULL_WIDTH,
    INT32_MAX,
    INT32_MIN,
    SIGN_DIGIT_OFFSET,
    SIGN_MASK,
    SIGN_ONLY_LITERAL,
    SUPPORTED_RADIXES,
    Radix,
)
from .exceptions import InvalidArgumentError

_LOGGER = logging.getLogger(__name__)


def _check_number(number: Any) -> int:
    """Validate that number is a plain int within the signed 32-bit range."""
    if isinstance(number, bool) or not isinstance(number, int):
        _LOGGER.debug("Rejected non-integer number: %r", number)
        raise InvalidArgumentError(
            f"Number must be an integer, got {type(number).__name__}.", "number", number
        )
    if not INT32_MIN <= number <= INT32_MAX:
        _LOGGER.debug("Rejected number outside 32-bit range: %s", number)
        raise InvalidArgumentError(
            f"Number {number} is outside the signed 32-bit range "
            f"[{INT32_MIN}, {INT32_MAX}].",
            "number",
            number,
        )
    return number


def _check_positive(number: Any) -> int:
    number = _check_number(number)
    if number < 0:
        _LOGGER.debug("Rejected negative number: %s", number)
        raise InvalidArgumentError(
            f"Number must not be less than zero, got {number}.", "number", number
        )
    return number


def _check_radix(radix: Any) -> Radix:
    """Return radix as a Radix member, or raise if it is not 8, 10 or 16."""
    if isinstance(radix, bool) or not isinstance(radix, int) or radix not in SUPPORTED_RADIXES:
        _LOGGER.debug("Rejected radix: %r", radix)
        raise InvalidArgumentError(
            f"Radix must be 8, 10 or 16, got {radix!r}.", "radix", radix
        )
    return Radix(radix)


def _extract_digits(number: int, radix: int) -> str:
    """Return the digits of a non-negative number, most significant first.

    Zero produces no digits at all, so the result is an empty string.
    """
    digits = []
    while number != 0:
        number, remainder = divmod(number, radix)
        digits.append(DIGITS[remainder])
    digits.reverse()
    return "".join(digits)


def format_positive_octal(number: int) -> str:
    """Format a non-negative integer in octal.

    Args:
        number: Source number.

    Returns:
        The octal digits of ``number``, or an empty string for zero.

    Raises:
        InvalidArgumentError: If ``number`` is less than zero.
    """
    return _extract_digits(_check_positive(number), Radix.OCTAL)


def format_positive_decimal(number: int) -> str:
    """Format a non-negative integer in decimal.

    Args:
        number: Source number.

    Returns:
        The decimal digits of ``number``, or an empty string for zero.

    Raises:
        InvalidArgumentError: If ``number`` is less than zero.
    """
    return _extract_digits(_check_positive(number), Radix.DECIMAL)


def format_positive_hex(number: int) -> str:
    """Format a non-negative integer in uppercase hexadecimal.

    Args:
        number: Source number.

    Returns:
        The hexadecimal digits of ``number``, or an empty string for zero.

    Raises:
        InvalidArgumentError: If ``number`` is less than zero.
    """
    return _extract_digits(_check_positive(number), Radix.HEXADECIMAL)


_POSITIVE_FORMATTERS: dict[Radix, Callable[[int], str]] = {
    Radix.OCTAL: format_positive_octal,
    Radix.DECIMAL: format_positive_decimal,
    Radix.HEXADECIMAL: format_positive_hex,
}


def format_positive_radix(number: int, radix: int) -> str:
    """Format a non-negative integer in the given radix.

    Args:
        number: Source number.
        radix: Base of the numeral system, one of 8, 10 or 16.

    Raises:
        InvalidArgumentError: If ``number`` is less than zero or ``radix`` is
            not 8, 10 or 16.
    """
    number = _check_positive(number)
    return _POSITIVE_FORMATTERS[_check_radix(radix)](number)


def _restore_sign_bit(magnitude: str, radix: Radix) -> str:
    """Put the sign bit back into the leading digit of a masked magnitude."""
    if not magnitude:
        return SIGN_ONLY_LITERAL[radix]

    full = magnitude.rjust(FULL_WIDTH[radix], "0")
    leading = DIGITS[DIGITS.index(full[0]) + SIGN_DIGIT_OFFSET[radix]]
    return leading + full[1:]


def format_radix(number: int, radix: int) -> str:
    """Format a signed 32-bit integer in the given radix.

    The sign bit is masked off and the remaining magnitude is formatted as an
    unsigned number. For negative numbers in octal and hexadecimal the sign
    bit is then restored into the leading digit, which yields the unsigned
    two's-complement rendering (``-1`` becomes ``"FFFFFFFF"``).

    Decimal output is left as the masked magnitude, so negative numbers come
    out without a sign: ``format_radix(-1, 10) == "2147483647"``.

    Args:
        number: Source number, any signed 32-bit value.
        radix: Base of the numeral system, one of 8, 10 or 16.

    Raises:
        InvalidArgumentError: If ``radix`` is not 8, 10 or 16.
    """
    radix = _check_radix(radix)
    number = _check_number(number)

    magnitude = _POSITIVE_FORMATTERS[radix](number & SIGN_MASK)
    if number >= 0 or radix is Radix.DECIMAL:
        return magnitude

    _LOGGER.debug("Restoring sign bit for %s in radix %s", number, radix.value)
    return _restore_sign_bit(magnitude, radix)
