from pydantic import Field, PositiveInt

from playlist._types import StrippedString
from playlist.model.item.contributor import HasContributors
from playlist.model.properties.identifier import HasIdentifiers
from playlist.model.properties.length import HasDuration, HasStartTime


class Track(HasContributors, HasIdentifiers, HasDuration, HasStartTime):
    """
    Represents a track item and its properties.

    Construct from keyword attributes where each key names a field or a writeable property
    e.g. ``Track(location="song2.mp3", title="Song 2", creator="Blur", duration=110000)``.
    Keys with no setter raise :py:class:`.UnknownAttributeError`.
    """
    location: StrippedString | None = Field(
        description="A URI or filename for the location of the file.",
        default=None,
    )
    title: StrippedString | None = Field(
        description="The title of this track.",
        default=None,
    )
    album: StrippedString | None = Field(
        description="The name of the album that this track came from.",
        default=None,
    )
    catalogue_number: StrippedString | None = Field(
        description="The catalogue number of the album that this track came from. Also known as the UPC/EAN code.",
        default=None,
    )
    track_number: PositiveInt | None = Field(
        description="The number of this track on the album it came from.",
        default=None,
    )
    side: StrippedString | None = Field(
        description="The side of the disc if this track came from a vinyl album e.g. A/B.",
        default=None,
    )
    record_label: StrippedString | None = Field(
        description="The name of the record label that published this track/album.",
        default=None,
    )
    publisher: StrippedString | None = Field(
        description="The name of the publisher that published the score/lyrics of this track.",
        default=None,
    )
