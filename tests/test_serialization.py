"""Tests for universe save and load."""

import json

import pytest

from starforge.engine import Generator, get_divisions_for_coord, get_hex
from starforge.models import SpaceCoordinates
from starforge.utils import ConfigurationError
from starforge.utils.serialization import load_universe, save_universe

from helpers import make_settings


@pytest.fixture
def explored():
    """A generated universe with a few hexes looked up."""
    generated = Generator.generate(make_settings("save"))
    galaxy = generated.galaxy(0)
    for coord in (SpaceCoordinates(0, 0, 0), SpaceCoordinates(3, -4, 1), SpaceCoordinates(-8, 8, 0)):
        get_hex(galaxy, coord)
    return generated


class TestSaveLoad:
    """Test universe files."""

    def test_round_trip(self, explored, tmp_path):
        """Test that a loaded universe equals the saved one."""
        path = tmp_path / "universe.json"
        save_universe(explored, str(path))

        loaded = load_universe(str(path))

        assert loaded == explored
        assert loaded.galaxy(0).hexes.keys() == explored.galaxy(0).hexes.keys()

    def test_loaded_universe_keeps_generating(self, explored, tmp_path):
        """Test that lookups on a loaded universe match a fresh one."""
        path = tmp_path / "universe.json"
        save_universe(explored, str(path))
        loaded = load_universe(str(path))
        coord = SpaceCoordinates(5, 5, 0)

        assert get_hex(loaded.galaxy(0), coord) == get_hex(explored.galaxy(0), coord)
        assert get_divisions_for_coord(loaded.galaxy(0), coord) == get_divisions_for_coord(
            explored.galaxy(0), coord
        )

    def test_file_format(self, explored, tmp_path):
        """Test the file's version and type tags."""
        path = tmp_path / "universe.json"
        save_universe(explored, str(path))

        data = json.loads(path.read_text())

        assert data["version"] == 1
        assert data["universe"]["type"] == "GeneratedUniverse"
        galaxy = data["universe"]["galaxies"][0]
        assert galaxy["settings"]["type"] == "GenerationSettings"
        assert galaxy["hexes"]["type"] == "dict"

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_universe(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path):
        """Test that a broken file is a configuration error."""
        path = tmp_path / "universe.json"
        path.write_text("{broken")
        with pytest.raises(ConfigurationError):
            load_universe(str(path))

    def test_unknown_version(self, tmp_path):
        """Test that files of another format version are rejected."""
        path = tmp_path / "universe.json"
        path.write_text(json.dumps({"version": 99, "universe": {}}))
        with pytest.raises(ConfigurationError):
            load_universe(str(path))

    def test_unknown_type(self, tmp_path):
        """Test that unknown type tags are rejected."""
        path = tmp_path / "universe.json"
        path.write_text(json.dumps({"version": 1, "universe": {"type": "Spaceship"}}))
        with pytest.raises(ConfigurationError):
            load_universe(str(path))

    def test_invalid_values(self, tmp_path):
        """Test that values failing model validation are rejected."""
        path = tmp_path / "universe.json"
        path.write_text(
            json.dumps(
                {"version": 1, "universe": {"type": "Universe", "era": {"type": "StelliferousEra", "name": "MIDDLE_STELLIFEROUS"}, "age": -1}}
            )
        )
        with pytest.raises(ConfigurationError):
            load_universe(str(path))

    def test_not_a_universe(self, tmp_path):
        """Test that a file must hold a generated universe."""
        path = tmp_path / "universe.json"
        path.write_text(json.dumps({"version": 1, "universe": [1, 2]}))
        with pytest.raises(ConfigurationError):
            load_universe(str(path))

    @pytest.mark.parametrize("tag", ["dict", "tuple"])
    def test_container_without_items(self, tmp_path, tag):
        """Test that dict and tuple tags must carry their items."""
        path = tmp_path / "universe.json"
        path.write_text(json.dumps({"version": 1, "universe": {"type": tag}}))
        with pytest.raises(ConfigurationError, match=f"Malformed {tag}"):
            load_universe(str(path))

    def test_dict_item_not_a_pair(self, tmp_path):
        """Test that dict items must be key/value pairs."""
        path = tmp_path / "universe.json"
        path.write_text(json.dumps({"version": 1, "universe": {"type": "dict", "items": [[1, 2, 3]]}}))
        with pytest.raises(ConfigurationError, match="Malformed dict"):
            load_universe(str(path))
