from typing import Any

from pydantic import BaseModel, ConfigDict

from playlist.exception import UnknownAttributeError


class PlaylistModel(BaseModel):
    """
    Generic base class for any Playlist model.

    Models are built from keyword attributes where every key must name either a writeable field
    or a property with a setter. Keys for properties are applied in the order given,
    after all fields have been validated.
    """
    model_config = ConfigDict(
        validate_default=True,
        validate_assignment=True,
        extra="forbid",
    )

    @classmethod
    def _is_settable_property(cls, name: str) -> bool:
        attr = getattr(cls, name, None)
        return isinstance(attr, property) and attr.fset is not None

    def __init__(self, **kwargs):
        fields = type(self).model_fields

        property_values = {}
        for key in list(kwargs):
            if key in fields and not fields[key].frozen:
                continue
            if key not in fields and self._is_settable_property(key):
                property_values[key] = kwargs.pop(key)
                continue
            raise UnknownAttributeError(key, model=type(self).__name__)

        super().__init__(**kwargs)
        for key, value in property_values.items():
            setattr(self, key, value)

    def to_mapping(self) -> dict[str, Any]:
        """
        Get all the stored attributes of this model as a map of attribute name to value.
        Container values are shallow copies of the stored containers.
        """
        mapping = {}
        for name in type(self).model_fields:
            value = getattr(self, name)
            if isinstance(value, list | dict):
                value = value.copy()
            mapping[name] = value

        return mapping


class _AttributeModel(PlaylistModel):
    """Defines a common base model for attributes made of common properties."""
