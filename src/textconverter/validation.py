"""Argument validation shared by converters and the conversion service."""

import codecs
import logging

logger = logging.getLogger(__name__)


class ConverterError(Exception):
    """Base class for converter configuration and argument errors."""

    pass


class ArgumentError(ConverterError, ValueError):
    """Raised when a required argument is missing or not usable."""

    def __init__(self, name: str, message: str | None = None):
        self.name = name
        super().__init__(message or f"{name} must not be None")


class RangeError(ConverterError, ValueError):
    """Raised when a numeric argument falls outside its allowed range."""

    def __init__(self, name: str, value: object, message: str | None = None):
        self.name = name
        self.value = value
        super().__init__(message or f"{name} is out of range: {value!r}")


def require(value, name: str):
    """Return ``value``, raising ArgumentError if it is None."""
    if value is None:
        raise ArgumentError(name)
    return value


def require_positive(value: int, name: str) -> int:
    """Return ``value``, raising RangeError unless it is an integer greater than zero."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise RangeError(name, value, f"{name} must be a positive integer, got {value!r}")
    return value


def validate_encoding(encoding: str | None, name: str) -> str:
    """
    Validate a codec name and return its normalized form.

    Args:
        encoding: Codec name such as "UTF-8" or "latin-1"
        name: Argument name used in error messages

    Returns:
        The canonical codec name (e.g. "utf-8", "iso8859-1")

    Raises:
        ArgumentError: If the encoding is None or unknown
    """
    require(encoding, name)

    try:
        return codecs.lookup(encoding).name
    except (LookupError, TypeError) as e:
        logger.debug(f"Rejected {name}={encoding!r}: {e}")
        raise ArgumentError(name, f"Unknown encoding for {name}: {encoding!r}") from e
