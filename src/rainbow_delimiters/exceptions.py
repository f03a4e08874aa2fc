"""Custom exceptions for rainbow delimiters."""


class RainbowError(Exception):
    """Base exception for all rainbow delimiter errors."""

    pass


class ConfigError(RainbowError):
    """Raised when the configuration file is invalid."""

    pass


class ColorParseError(RainbowError):
    """Raised when color text cannot be parsed."""

    pass
