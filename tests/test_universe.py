"""Tests for universe, neighborhood and galaxy generation."""

import pytest

from starforge.engine.galaxy_generator import generate_galaxy
from starforge.engine.neighborhood_generator import generate_neighborhood
from starforge.engine.universe_generator import generate_universe
from starforge.models import (
    GeneratedUniverse,
    GroupDensity,
    Spiral,
    StelliferousEra,
    VoidDensity,
    ClusterDensity,
    count_galaxies,
)
from starforge.utils import ConfigurationError

from helpers import make_settings


class TestUniverseGeneration:
    """Test universe generation."""

    def test_use_ours(self):
        """Test that our universe is 13.8 billion years old."""
        universe = generate_universe(make_settings(universe={"use_ours": True}))
        assert universe.age == 13.8
        assert universe.era == StelliferousEra.MIDDLE_STELLIFEROUS

    def test_fixed_age(self):
        """Test that a fixed age picks its era."""
        universe = generate_universe(make_settings(universe={"fixed_age": 100.0}))
        assert universe.age == 100.0
        assert universe.era == StelliferousEra.LATE_STELLIFEROUS

    def test_fixed_era(self):
        """Test that a rolled age stays inside a fixed era."""
        for seed in ("a", "b", "c", "d"):
            universe = generate_universe(
                make_settings(seed, universe={"fixed_era": "EarlyStelliferous"})
            )
            assert 0.5 < universe.age <= 5.0

    def test_deterministic(self):
        """Test that the same seed gives the same universe."""
        assert generate_universe(make_settings("x")) == generate_universe(make_settings("x"))

    def test_era_matches_age(self):
        """Test that the era of a rolled universe is the one its age falls in."""
        for seed in ("1", "2", "3", "4", "5"):
            universe = generate_universe(make_settings(seed))
            assert universe.era == StelliferousEra.from_age(universe.age)


class TestNeighborhoodGeneration:
    """Test neighborhood generation."""

    def test_fixed(self):
        """Test that a fixed neighborhood is used as is."""
        settings = make_settings()
        neighborhood = generate_neighborhood(generate_universe(settings), settings)
        assert neighborhood.density == GroupDensity(1, 0)

    def test_use_ours(self):
        """Test that our neighborhood is the Local Group."""
        settings = make_settings(galaxy={"use_ours": True})
        neighborhood = generate_neighborhood(generate_universe(settings), settings)
        assert neighborhood.density == GroupDensity(2, 36)

    def test_rolled(self):
        """Test that rolled neighborhoods are one of the three densities."""
        for seed in ("1", "2", "3", "4", "5", "6"):
            settings = make_settings(seed, galaxy={})
            neighborhood = generate_neighborhood(generate_universe(settings), settings)
            assert isinstance(neighborhood.density, (VoidDensity, GroupDensity, ClusterDensity))
            assert count_galaxies(neighborhood.density) >= 0


class TestGalaxyGeneration:
    """Test galaxy generation."""

    def test_milky_way(self):
        """Test that the first galaxy of our neighborhood is the Milky Way."""
        settings = make_settings(galaxy={"use_ours": True})
        neighborhood = generate_neighborhood(generate_universe(settings), settings)

        galaxy = generate_galaxy(neighborhood, 0, settings)

        assert galaxy.name == "Milky Way"
        assert galaxy.is_major
        assert galaxy.age == 13.61
        assert isinstance(galaxy.category, Spiral)
        assert galaxy.category.radius == 26_800

    def test_deterministic(self):
        """Test that a galaxy only depends on the seed and its index."""
        settings = make_settings("galaxy")
        neighborhood = generate_neighborhood(generate_universe(settings), settings)
        assert generate_galaxy(neighborhood, 0, settings) == generate_galaxy(neighborhood, 0, settings)

    def test_division_levels_and_empty_caches(self):
        """Test that a new galaxy has its ladder but nothing generated yet."""
        settings = make_settings()
        neighborhood = generate_neighborhood(generate_universe(settings), settings)

        galaxy = generate_galaxy(neighborhood, 0, settings)

        assert [level.level for level in galaxy.division_levels] == list(range(10))
        assert galaxy.divisions == {}
        assert galaxy.hexes == {}
        assert galaxy.seed == "test"


class TestGeneratedUniverse:
    """Test the generation result."""

    def test_galaxy_lookup(self, galaxy):
        """Test looking up galaxies by index."""
        generated = GeneratedUniverse(galaxy.neighborhood.universe, galaxy.neighborhood, [galaxy])
        assert generated.galaxy(0) is galaxy
        with pytest.raises(ConfigurationError):
            generated.galaxy(1)
