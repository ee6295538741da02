from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from playlist._types import Milliseconds, Number
from playlist.exception import PlaylistValueError
from playlist.model._base import _AttributeModel

#: Raw duration values which mean the duration is not known.
UNKNOWN_DURATIONS = (0, -1)


def parse_milliseconds(value: Any) -> Any:
    """
    Convert the given ``value`` to a number of milliseconds.

    Numbers are returned as given. Any other value is converted from its text representation:
    a float if it contains a decimal point, an int otherwise.

    :raise PlaylistValueError: When the text representation of the value is not numeric.
    """
    if value is None:
        return value
    if isinstance(value, bool):
        raise PlaylistValueError(f"Invalid number of milliseconds: {value!r}")
    if isinstance(value, Number):
        return value

    text = str(value).strip()
    try:
        return float(text) if "." in text else int(text)
    except ValueError:
        raise PlaylistValueError(f"Invalid number of milliseconds: {value!r}") from None


class HasDuration(_AttributeModel):
    """Represents a resource that has a duration."""
    duration: Milliseconds | None = Field(
        description=(
            "The duration of this resource in milliseconds. "
            "May be a float to include fractions of a millisecond."
        ),
        default=None,
    )

    # noinspection PyNestedDecorators
    @field_validator("duration", mode="before")
    @staticmethod
    def _normalise_duration(value: Any) -> Any:
        value = parse_milliseconds(value)
        if value in UNKNOWN_DURATIONS:
            return None
        return value


class HasStartTime(_AttributeModel):
    """Represents a resource that starts playing at a given time."""
    start_time: Milliseconds | None = Field(
        description=(
            "The time this resource starts playing at in milliseconds. "
            "May be a float to include fractions of a millisecond."
        ),
        default=None,
    )

    # noinspection PyNestedDecorators
    @field_validator("start_time", mode="before")
    @staticmethod
    def _parse_start_time(value: Any) -> Any:
        return parse_milliseconds(value)
