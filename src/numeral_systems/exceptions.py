"""Exception classes for numeral system conversion."""

from typing import Any


class NumeralSystemsError(Exception):
    """Base exception for numeral-systems errors."""

    pass


class InvalidArgumentError(NumeralSystemsError, ValueError):
    """Exception raised when a conversion receives an unusable argument."""

    def __init__(self, message: str, argument: str, value: Any) -> None:
        super().__init__(message)
        self.argument = argument
        self.value = value


class ConfigurationError(NumeralSystemsError):
    """Exception raised when the configuration cannot be read or saved."""

    pass
