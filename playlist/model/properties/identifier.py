from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from playlist._types import StrippedString
from playlist.model._base import _AttributeModel


class IdentifierKind(StrEnum):
    """The kinds of external identifier a resource may be given."""
    #: International Standard Recording Code
    ISRC = "isrc"
    #: International Standard Musical Work Code
    ISWC = "iswc"
    #: MusicBrainz recording ID
    MUSICBRAINZ = "musicbrainz"


class HasIdentifiers(_AttributeModel):
    """Represents a resource that has a map of external identifiers."""
    identifiers: dict[IdentifierKind, StrippedString] = Field(
        description="A map of external identifiers for this resource keyed by the kind of identifier.",
        default_factory=dict,
        frozen=True,
    )

    def get_identifier(self, kind: IdentifierKind | str) -> str | None:
        """Get the identifier of the given ``kind`` or None if this resource has no such identifier."""
        return self.identifiers.get(IdentifierKind(kind))

    def set_identifier(self, kind: IdentifierKind | str, value: str | None) -> None:
        """Set the identifier of the given ``kind``. Empty values remove the identifier."""
        kind = IdentifierKind(kind)
        value = str(value).strip() if value is not None else None
        if value:
            self.identifiers[kind] = value
        else:
            self.identifiers.pop(kind, None)

    @property
    def isrc(self) -> str | None:
        """The International Standard Recording Code for this resource"""
        return self.get_identifier(IdentifierKind.ISRC)

    @isrc.setter
    def isrc(self, value: str | None) -> None:
        self.set_identifier(IdentifierKind.ISRC, value)
