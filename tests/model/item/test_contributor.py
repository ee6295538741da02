import pytest
from faker import Faker

from playlist.model import PlaylistModel
from playlist.model.item.contributor import Contributor, Role
from tests.model.testers import PlaylistModelTester


class TestContributor(PlaylistModelTester):
    @pytest.fixture
    def model(self, faker: Faker) -> PlaylistModel:
        return Contributor(role=Role.PERFORMER, name=faker.name())

    def test_role_defaults_to_no_role(self, faker: Faker):
        contributor = Contributor(name=faker.name())
        assert contributor.role is None

    def test_role_from_name(self, faker: Faker):
        contributor = Contributor(role="composer", name=faker.name())
        assert contributor.role == Role.COMPOSER
        assert isinstance(contributor.role, Role)

        contributor.role = " arranger "
        assert contributor.role == Role.ARRANGER

    def test_unrecognised_role_is_kept(self, faker: Faker):
        contributor = Contributor(role="producer", name=faker.name())
        assert contributor.role == "producer"
        assert contributor.role not in list(Role)

    def test_wildcard_role_fails(self, faker: Faker):
        with pytest.raises(ValueError):
            Contributor(role=Role.ANY, name=faker.name())
        with pytest.raises(ValueError):
            Contributor(role="any", name=faker.name())

        contributor = Contributor(name=faker.name())
        with pytest.raises(ValueError):
            contributor.role = Role.ANY

    def test_name_is_stripped(self):
        assert Contributor(name="  Hot Chip ").name == "Hot Chip"

    def test_name_is_required(self):
        with pytest.raises(ValueError):
            Contributor(role=Role.PERFORMER)
        with pytest.raises(ValueError):
            Contributor(name="   ")
