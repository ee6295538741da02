from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import Field, PrivateAttr

from playlist._types import StrippedString
from playlist.model._base import PlaylistModel
from playlist.model.item.track import Track


class Playlist(PlaylistModel):
    """
    Represents an ordered collection of tracks and its properties.

    The order tracks are added in is preserved and is the order they are serialised in.
    """
    title: StrippedString | None = Field(
        description="The title of this playlist.",
        default=None,
    )
    description: StrippedString | None = Field(
        description="The description of this playlist.",
        default=None,
    )
    _tracks: list[Track] = PrivateAttr(default_factory=list)

    @property
    def tracks(self) -> tuple[Track, ...]:
        """The tracks in this playlist"""
        return tuple(self._tracks)

    @property
    def duration(self) -> int | float | None:
        """The total duration of all tracks in this playlist that have a known duration in milliseconds"""
        durations = [track.duration for track in self._tracks if track.duration is not None]
        return sum(durations) if durations else None

    def add_track(self, value: Track | Mapping[str, Any]) -> Track:
        """
        Add a track to the end of this playlist.

        :param value: Either a :py:class:`Track` or a map of attributes to create a new one from.
        :return: The track that was added.
        """
        track = value if isinstance(value, Track) else Track(**value)
        self._tracks.append(track)
        return track

    def calculate_start_times(self) -> None:
        """
        Set the start time of every track that has none from the durations of the tracks before it.

        Timing begins at the start time of the first track or 0 if it has none.
        A track which already has a start time resets the running time to that start time.
        """
        if not self._tracks:
            return

        time = self._tracks[0].start_time or 0
        for track in self._tracks:
            if track.start_time is None:
                track.start_time = time
            else:
                time = track.start_time

            if track.duration is not None:
                time += track.duration

    def to_mapping(self) -> dict[str, Any]:
        mapping = super().to_mapping()
        mapping["tracks"] = self._tracks.copy()
        return mapping
