"""Exceptions raised outside the light mutation path.

Setters on lights never raise for bad values; they report a rejected write
through their return value. These exceptions cover parsing and configuration.
"""


class LightsError(Exception):
    """Base exception for all ili-lights errors."""

    pass


class ValidationError(LightsError):
    """A light description holds values its own ranges do not allow."""

    pass


class SerializationError(LightsError):
    """Markup or dict data does not describe a light."""

    pass


class ConfigError(LightsError):
    """Configuration file cannot be read."""

    pass
