"""Tests for the command line entry point."""

import json

import pytest

from generate import main


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps(
            {
                "seed": "cli",
                "galaxy": {"fixed_neighborhood": {"kind": "group", "galaxies": 1, "minor": 1}},
            }
        )
    )
    return path


class TestMain:
    """Test the command line."""

    def test_generate(self, settings_file, capsys):
        """Test that a run prints the universe and its galaxies."""
        assert main(["--settings", str(settings_file)]) == 0

        output = capsys.readouterr().out
        assert "Universe:" in output
        assert "#0" in output
        assert "#1" in output

    def test_explore_coordinate(self, settings_file, capsys):
        """Test that a coordinate prints its divisions and hex."""
        assert main(["--settings", str(settings_file), "--coord", "0", "0", "0"]) == 0

        output = capsys.readouterr().out
        assert "level 9 division" in output
        assert "Hex" in output

    def test_save_then_load(self, settings_file, tmp_path, capsys):
        """Test that a saved universe can be explored again."""
        saved = tmp_path / "universe.json"
        assert main(["--settings", str(settings_file), "--coord", "1", "1", "0", "--save", str(saved)]) == 0
        assert saved.exists()

        assert main(["--load", str(saved), "--coord", "1", "1", "0"]) == 0
        assert f"Universe loaded from {saved}" in capsys.readouterr().out

    def test_seed_overrides_settings(self, settings_file, tmp_path):
        """Test that the seed option wins over the settings file."""
        saved = tmp_path / "universe.json"
        assert main(["--settings", str(settings_file), "--seed", "other", "--save", str(saved)]) == 0
        data = json.loads(saved.read_text())
        assert data["universe"]["galaxies"][0]["settings"]["data"]["seed"] == "other"

    def test_missing_settings_file(self, tmp_path, capsys):
        """Test that a missing file is reported."""
        assert main(["--settings", str(tmp_path / "missing.json")]) == 1
        assert "Error" in capsys.readouterr().out

    def test_settings_file_not_an_object(self, tmp_path, capsys):
        """Test that a settings file holding a list is reported, seed or not."""
        path = tmp_path / "list.json"
        path.write_text(json.dumps([1, 2]))
        assert main(["--settings", str(path), "--seed", "x"]) == 1
        assert "must hold a JSON object" in capsys.readouterr().out

    def test_coordinate_outside_galaxy(self, settings_file, capsys):
        """Test that coordinates outside the galaxy are reported."""
        assert main(["--settings", str(settings_file), "--coord", "9999999", "0", "0"]) == 1
        assert "outside galaxy" in capsys.readouterr().out

    def test_unknown_galaxy(self, settings_file, capsys):
        """Test that an unknown galaxy index is reported."""
        assert main(["--settings", str(settings_file), "--galaxy", "5", "--coord", "0", "0", "0"]) == 1
        assert "No galaxy #5" in capsys.readouterr().out
