from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import Field, field_validator

from playlist._types import StrippedString
from playlist.exception import PlaylistValueError
from playlist.model._base import PlaylistModel, _AttributeModel


class Role(StrEnum):
    """The role a contributor had in the making of a resource."""
    PERFORMER = "performer"
    COMPOSER = "composer"
    ARRANGER = "arranger"

    #: Query-only wildcard matching contributors of every role. Never stored on a contributor.
    ANY = "any"


type RoleType = Role | str | None


def _to_role(value: Any) -> Any:
    """Convert a role name to its :py:class:`Role` when recognised, otherwise return the stripped name"""
    if not isinstance(value, str) or isinstance(value, Role):
        return value

    value = value.strip()
    try:
        return Role(value)
    except ValueError:
        return value


class Contributor(PlaylistModel):
    """Represents a person credited on a resource, optionally with a role."""
    role: Role | StrippedString | None = Field(
        description=(
            "The role of this contributor. None represents a generic creator with no specific role. "
            "Unrecognised roles are kept as given."
        ),
        default=None,
    )
    name: StrippedString = Field(
        description="The name of this contributor.",
    )

    # noinspection PyNestedDecorators
    @field_validator("role", mode="before")
    @staticmethod
    def _from_role_name(value: Any) -> Any:
        return _to_role(value)

    # noinspection PyNestedDecorators
    @field_validator("role", mode="after")
    @staticmethod
    def _role_is_not_wildcard(value: RoleType) -> RoleType:
        if value == Role.ANY:
            raise PlaylistValueError(f"{Role.ANY!r} may only be used to query contributors")
        return value


class HasContributors(_AttributeModel):
    """Represents a resource that has an ordered list of credited contributors."""
    contributors: list[Contributor] = Field(
        description="The contributors credited on this resource in the order they were added.",
        default_factory=list,
        frozen=True,
    )

    def add_contributor(self, value: Contributor | Mapping[str, Any]) -> Contributor:
        """
        Add a contributor to this resource.
        A given :py:class:`Contributor` is copied so that it is owned only by this resource.

        :param value: Either a :py:class:`Contributor` or a map of attributes to create a new one from.
        :return: The contributor that was added.
        """
        contributor = value.model_copy() if isinstance(value, Contributor) else Contributor(**value)
        self.contributors.append(contributor)
        return contributor

    def replace_contributor(self, role: RoleType, name: str | None) -> Contributor | None:
        """
        Remove all contributors with the given ``role`` then add a new contributor with that ``role``.
        When ``name`` is None, the contributors are removed and no new contributor is added.
        """
        role = _to_role(role)
        replacement = Contributor(role=role, name=name) if name is not None else None
        self.contributors[:] = [contributor for contributor in self.contributors if contributor.role != role]
        if replacement is None:
            return
        return self.add_contributor(replacement)

    def contributor_names(self, role: RoleType = Role.ANY) -> str | None:
        """
        Get the names of the contributors with the given ``role`` as one string
        e.g. 'name 1, name 2 & name 3'.

        :param role: The role to filter on. Give :py:attr:`Role.ANY` to join the names of all contributors.
        :return: The joined names or None if no contributors with the ``role`` were found.
        """
        role = _to_role(role)
        if role == Role.ANY:
            names = [contributor.name for contributor in self.contributors]
        else:
            names = [contributor.name for contributor in self.contributors if contributor.role == role]

        if not names:
            return
        if len(names) == 1:
            return names[0]
        return ", ".join(names[:-1]) + " & " + names[-1]

    @property
    def creator(self) -> str | None:
        """The names of the contributors with no role"""
        return self.contributor_names(None)

    @creator.setter
    def creator(self, name: str | None) -> None:
        self.replace_contributor(None, name)

    @property
    def performer(self) -> str | None:
        """The names of the performers, or the names of contributors with no role when there are no performers"""
        return self.contributor_names(Role.PERFORMER) or self.contributor_names(None)

    @performer.setter
    def performer(self, name: str | None) -> None:
        self.replace_contributor(Role.PERFORMER, name)

    artist = performer

    @property
    def composer(self) -> str | None:
        """The names of the composers"""
        return self.contributor_names(Role.COMPOSER)

    @composer.setter
    def composer(self, name: str | None) -> None:
        self.replace_contributor(Role.COMPOSER, name)

    @property
    def arranger(self) -> str | None:
        """The names of the arrangers"""
        return self.contributor_names(Role.ARRANGER)

    @arranger.setter
    def arranger(self, name: str | None) -> None:
        self.replace_contributor(Role.ARRANGER, name)
