from abc import ABCMeta, abstractmethod

import pytest

from playlist.exception import UnknownAttributeError
from playlist.model import PlaylistModel


class PlaylistModelTester(metaclass=ABCMeta):
    @abstractmethod
    def model(self, **kwargs) -> PlaylistModel:
        """Fixture for the model to test"""
        raise NotImplementedError

    def test_init_fails_on_unknown_attribute(self, model: PlaylistModel):
        with pytest.raises(UnknownAttributeError) as exc:
            model.__class__(not_an_attribute="value")

        assert exc.value.key == "not_an_attribute"
        assert exc.value.model == model.__class__.__name__

    def test_to_mapping_contains_all_fields(self, model: PlaylistModel):
        mapping = model.to_mapping()

        for name in model.__class__.model_fields:
            assert name in mapping
            assert mapping[name] == getattr(model, name)
