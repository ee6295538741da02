"""
Core exceptions for the entire package.
"""
from collections.abc import Iterable
from typing import Any


class SafeDict(dict):
    """Extends dict to ignore missing keys when using format_map operations"""
    def __missing__(self, key):
        return "{" + key + "}"


class PlaylistError(Exception):
    """Generic base class for all Playlist-related errors"""


class PlaylistValueError(PlaylistError, ValueError):
    """Exception raised for invalid values."""


class PlaylistAttributeError(PlaylistError, AttributeError):
    """Exception raised for invalid attributes."""


###########################################################################
## Model errors
###########################################################################
class UnknownAttributeError(PlaylistAttributeError):
    """
    Exception raised when a model is given an attribute it has no setter for.

    :param key: The attribute name that was not recognised.
    :param model: The name of the model that was being constructed.
    """
    def __init__(self, key: str, model: str, message: str = "Unknown attribute"):
        self.key = key
        self.model = model
        self.message = message
        super().__init__(f"{self.message} for {model}: {key!r}")


###########################################################################
## Format errors
###########################################################################
class MalformedInputError(PlaylistValueError):
    """
    Exception raised when text given to a format parser does not match its grammar.

    :param message: Explanation of the error.
    :param line_number: The 1-based number of the offending line.
    :param line: The offending line.
    """
    def __init__(self, message: str, line_number: int | None = None, line: str | None = None):
        self.message = message
        self.line_number = line_number
        self.line = line

        if line_number is not None:
            message = f"{message} (line {line_number}: {line!r})"
        super().__init__(message)


###########################################################################
## Config errors
###########################################################################
class ConfigError(PlaylistError):
    """
    Exception raised when processing config gives an exception.

    :param message: Explanation of the error.
    :param key: The key that caused the error.
    :param value: The value that caused the error.
    """
    def __init__(self, message: str = "Could not process config", key: Any | None = None, value: Any | None = None):
        suffix = []

        key = "->".join(key) if isinstance(key, Iterable) and not isinstance(key, str) else key
        if key and "{key}" in message:
            message = message.format_map(SafeDict(key=key))
        elif key:
            suffix.append(f"key='{key}'")

        value = ", ".join(map(str, value)) if isinstance(value, Iterable) and not isinstance(value, str) else value
        if value and "{value}" in message:
            message = message.format_map(SafeDict(value=value))
        elif value:
            suffix.append(f"value='{value}'")

        self.key = key
        self.value = value
        self.message = message
        super().__init__(": ".join([message, " | ".join(suffix)]) if suffix else message)
