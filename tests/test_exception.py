import pytest

from playlist.exception import PlaylistError, PlaylistValueError, PlaylistAttributeError
from playlist.exception import UnknownAttributeError, MalformedInputError, ConfigError


@pytest.mark.parametrize("error,builtin", [
    (PlaylistValueError, ValueError),
    (PlaylistAttributeError, AttributeError),
])
def test_errors_extend_builtins(error: type[PlaylistError], builtin: type[Exception]):
    assert issubclass(error, PlaylistError)
    assert issubclass(error, builtin)


def test_unknown_attribute_error():
    error = UnknownAttributeError("genre", model="Track")
    assert isinstance(error, AttributeError)
    assert error.key == "genre"
    assert error.model == "Track"
    assert str(error) == "Unknown attribute for Track: 'genre'"


def test_malformed_input_error():
    error = MalformedInputError("Invalid directive", line_number=3, line="#EXTINF:abc")
    assert isinstance(error, ValueError)
    assert error.message == "Invalid directive"
    assert str(error) == "Invalid directive (line 3: '#EXTINF:abc')"

    assert str(MalformedInputError("Invalid directive")) == "Invalid directive"


def test_config_error():
    error = ConfigError("Unrecognised type: {key}", key=".txt", value=[".yml", ".json"])
    assert str(error) == "Unrecognised type: .txt: value='.yml, .json'"
    assert error.key == ".txt"

    error = ConfigError(key=["loggers", "root"])
    assert str(error) == "Could not process config: key='loggers->root'"
