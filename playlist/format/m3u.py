"""
Convert between a :py:class:`Playlist` and the extended M3U playlist format.

Each track is stored as an optional ``#EXTINF`` directive followed by its location::

    #EXTM3U
    #EXTINF:215,Hot Chip - One One One
    one_one_one.mp3

The directive holds the duration in seconds (-1 when unknown) and the performer and title
separated by ' - '. Parsing fails fast on any record which does not follow this grammar.
"""
import logging
import re
from decimal import Decimal

from playlist.exception import MalformedInputError, PlaylistValueError
from playlist.log.logger import PlaylistLogger
from playlist.model.collection.playlist import Playlist
from playlist.model.item.track import Track

logger: PlaylistLogger = logging.getLogger(__name__)

HEADER = "#EXTM3U"
DIRECTIVE = "#EXTINF:"
INFO_SEPARATOR = " - "
UNKNOWN_SECONDS = -1

EXTINF_PATTERN = re.compile(rf"^{DIRECTIVE}\s*(?P<seconds>-?\d+(?:\.\d+)?)\s*(?:,(?P<info>.*))?$")


def _seconds_to_milliseconds(seconds: str) -> int | float | None:
    value = Decimal(seconds)
    if value in (0, UNKNOWN_SECONDS):
        return

    milliseconds = value * 1000
    return float(milliseconds) if "." in seconds else int(milliseconds)


def _milliseconds_to_seconds(milliseconds: int | float | None) -> str:
    if milliseconds is None:
        return str(UNKNOWN_SECONDS)

    seconds = Decimal(str(milliseconds)) / 1000
    if seconds == seconds.to_integral_value():
        return str(int(seconds))
    return format(seconds.normalize(), "f")


def _is_single_line(value: str) -> bool:
    return len(value.splitlines()) == 1


def _parse_info(info: str | None) -> dict[str, str]:
    if not info:
        return {}

    creator, separator, title = info.partition(INFO_SEPARATOR)
    if not separator:
        creator, title = "", info

    attributes = {}
    if creator.strip():
        attributes["creator"] = creator
    if title.strip():
        attributes["title"] = title
    return attributes


def _parse_directive(line: str, line_number: int) -> dict[str, str | int | float]:
    match = EXTINF_PATTERN.match(line)
    if match is None:
        raise MalformedInputError("Invalid track information directive", line_number=line_number, line=line)

    seconds = match.group("seconds")
    if seconds.startswith("-") and float(seconds) != UNKNOWN_SECONDS:
        raise MalformedInputError("Invalid track duration", line_number=line_number, line=line)

    attributes = _parse_info(match.group("info"))
    if (duration := _seconds_to_milliseconds(seconds)) is not None:
        attributes["duration"] = duration
    return attributes


def _missing_location(line_number: int, line: str) -> MalformedInputError:
    return MalformedInputError("Track information directive has no location", line_number=line_number, line=line)


def parse(text: str) -> Playlist:
    """
    Parse the given M3U ``text`` to a new :py:class:`Playlist`.

    Blank lines, the header and any other comment or directive lines are skipped.
    Each location line closes a record and becomes one track in the order found.

    :param text: The text to parse.
    :return: The parsed playlist.
    :raise MalformedInputError: When a directive is invalid or is not followed by a location.
    """
    playlist = Playlist()

    attributes: dict[str, str | int | float] | None = None
    directive_line_number: int | None = None
    directive_line: str | None = None

    for line_number, line in enumerate(text.removeprefix("\ufeff").splitlines(), 1):
        stripped = line.strip()
        if not stripped:
            continue

        if stripped.startswith(DIRECTIVE):
            if attributes is not None:
                raise _missing_location(directive_line_number, directive_line)
            attributes = _parse_directive(line.lstrip(), line_number)
            directive_line_number, directive_line = line_number, line
            continue
        if stripped.startswith("#"):
            if not stripped.startswith(HEADER):
                logger.debug(f"Skipping unsupported M3U line {line_number}: {stripped}")
            continue

        playlist.add_track(Track(location=stripped, **(attributes or {})))
        attributes = None

    if attributes is not None:
        raise _missing_location(directive_line_number, directive_line)

    logger.stat(f"Parsed {len(playlist.tracks)} tracks from M3U text")
    return playlist


def _generate_directive(track: Track) -> str | None:
    performer = track.performer
    if track.duration is None and performer is None and track.title is None:
        return

    info = track.title or ""
    if performer is not None:
        info = performer + INFO_SEPARATOR + info
    return f"{DIRECTIVE}{_milliseconds_to_seconds(track.duration)},{info}"


def generate(playlist: Playlist) -> str:
    """
    Generate M3U text for the given ``playlist``.

    :param playlist: The playlist to generate text for.
    :return: The M3U text with one record per track in playlist order.
    :raise PlaylistValueError: When a track in the playlist has no location
        or has a line break in any value written to the text.
    """
    lines = [HEADER]
    for position, track in enumerate(playlist.tracks, 1):
        if track.location is None:
            raise PlaylistValueError(f"Track {position} in the playlist has no location")
        if not _is_single_line(track.location):
            raise PlaylistValueError(f"Track {position} in the playlist has a line break in its location")

        if (directive := _generate_directive(track)) is not None:
            if not _is_single_line(directive):
                raise PlaylistValueError(f"Track {position} in the playlist has a line break in its information")
            lines.append(directive)
        lines.append(track.location)

    logger.stat(f"Generated M3U text for {len(playlist.tracks)} tracks")
    return "\n".join(lines) + "\n"
