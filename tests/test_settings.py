"""Tests for generation settings."""

import json

import pytest

from starforge.models import GenerationSettings, GroupDensity, StelliferousEra, load_settings
from starforge.utils import ConfigurationError


class TestGenerationSettings:
    """Test defaults and validation."""

    def test_defaults(self):
        """Test that every setting has a default."""
        settings = GenerationSettings()
        assert settings.seed == "default"
        assert settings.universe.use_ours is False
        assert settings.sector.hex_size == (1, 1, 1)
        assert settings.sector.flat_map is True
        assert settings.system.max_generation_tries == 200
        assert settings.star.yellow_dwarf_gen_chance == 180

    def test_level_size(self):
        """Test that level 0 is the hex size."""
        settings = GenerationSettings.model_validate({"sector": {"hex_size": (2, 2, 2)}})
        assert settings.sector.level_size(0) == (2, 2, 2)
        assert settings.sector.level_size(1) == (10, 10, 10)
        assert settings.sector.level_size(2) == (4, 4, 4)

    def test_sizes_must_be_positive(self):
        """Test that a zero size is rejected."""
        with pytest.raises(ValueError):
            GenerationSettings.model_validate({"sector": {"level_3_size": (0, 1, 1)}})

    def test_empty_seed_rejected(self):
        """Test that the seed can't be empty."""
        with pytest.raises(ValueError):
            GenerationSettings(seed="")

    def test_fixed_neighborhood(self):
        """Test that a fixed neighborhood converts to its density."""
        settings = GenerationSettings.model_validate(
            {"galaxy": {"fixed_neighborhood": {"kind": "group", "galaxies": 3, "minor": 5}}}
        )
        assert settings.galaxy.fixed_neighborhood.to_density() == GroupDensity(3, 5)

    def test_dominant_galaxies_only_in_clusters(self):
        """Test that a group with dominant galaxies is rejected."""
        with pytest.raises(ValueError):
            GenerationSettings.model_validate(
                {"galaxy": {"fixed_neighborhood": {"kind": "group", "dominant": 1, "galaxies": 1, "minor": 0}}}
            )

    def test_era_by_value(self):
        """Test that eras are read by their value."""
        settings = GenerationSettings.model_validate({"universe": {"fixed_era": "LateStelliferous"}})
        assert settings.universe.fixed_era == StelliferousEra.LATE_STELLIFEROUS


class TestLoadSettings:
    """Test loading settings files."""

    def test_load_partial_file(self, tmp_path):
        """Test that a file only needs the settings it changes."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"seed": "abc", "system": {"only_interesting": True}}))

        settings = load_settings(str(path))

        assert settings.seed == "abc"
        assert settings.system.only_interesting is True
        assert settings.star.use_ours is False

    def test_seed_override(self, tmp_path):
        """Test that an explicit seed wins over the file's one."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"seed": "abc"}))
        assert load_settings(str(path), seed="xyz").seed == "xyz"

    def test_invalid_json(self, tmp_path):
        """Test that a broken file is a configuration error."""
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        with pytest.raises(ConfigurationError):
            load_settings(str(path))

    def test_invalid_values(self, tmp_path):
        """Test that invalid values are a configuration error."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"system": {"max_generation_tries": 0}}))
        with pytest.raises(ConfigurationError):
            load_settings(str(path))

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_settings(str(tmp_path / "missing.json"))

    def test_non_object_document_with_seed(self, tmp_path):
        """Test that a JSON list is a configuration error even with a seed override."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps([1, 2]))
        with pytest.raises(ConfigurationError, match="must hold a JSON object"):
            load_settings(str(path), seed="x")
