import pytest
from faker import Faker

from playlist.model.collection.playlist import Playlist
from playlist.model.item.track import Track


@pytest.fixture(scope="session")
def faker() -> Faker:
    """Sets up and yields a basic Faker object for fake data"""
    return Faker()


@pytest.fixture
def tracks(faker: Faker) -> list[Track]:
    return [
        Track(
            location=faker.file_name(extension="mp3"),
            title=faker.sentence(nb_words=faker.random_int(1, 5)).rstrip("."),
            creator=faker.name(),
            duration=faker.random_int(30, 600) * 1000,
        )
        for _ in range(faker.random_int(5, 15))
    ]


@pytest.fixture
def playlist(tracks: list[Track], faker: Faker) -> Playlist:
    playlist = Playlist(title=faker.sentence())
    for track in tracks:
        playlist.add_track(track)
    return playlist
