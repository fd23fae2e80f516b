"""Tests for hex and stellar neighborhood generation."""

import pytest

from starforge.engine.hex_generator import generate_hex, get_number_of_systems_to_generate
from starforge.engine.stellar_neighborhood import generate_stellar_neighborhood, get_region_modifier
from starforge.models import (
    Ancient,
    GalacticMapDivision,
    GalacticRegion,
    Mature,
    Old,
    SpaceCoordinates,
    Young,
)
from starforge.utils import InvariantViolation

from helpers import make_galaxy, make_settings


def make_divisions(region: GalacticRegion):
    """A hex and its sub-sector, both in ``region``."""
    return [
        GalacticMapDivision("Test", region, 0, SpaceCoordinates(0, 0, 0), 0, 0, 0),
        GalacticMapDivision("Test", region, 1, SpaceCoordinates(0, 0, 0), 0, 0, 0),
    ]


class TestNumberOfSystems:
    """Test how many systems a hex holds."""

    def test_dense_region_capped_to_one(self, galaxy):
        """Test that a core always gets exactly one system with the cap."""
        divisions = make_divisions(GalacticRegion.CORE)
        for i in range(10):
            index = SpaceCoordinates(i, 0, 0)
            assert get_number_of_systems_to_generate(galaxy, index, divisions) == 1

    def test_dense_region_without_cap(self):
        """Test that dense regions hold many systems without the cap."""
        galaxy = make_galaxy(make_settings(sector={"max_one_system_per_hex": False}))
        divisions = make_divisions(GalacticRegion.CORE)
        number = get_number_of_systems_to_generate(galaxy, SpaceCoordinates(1, 2, 3), divisions)
        assert 1 <= number <= 500 + 100

    def test_sparse_region(self, galaxy):
        """Test that a void holds at most one system per hex."""
        divisions = make_divisions(GalacticRegion.VOID)
        counts = {
            get_number_of_systems_to_generate(galaxy, SpaceCoordinates(i, 0, 0), divisions)
            for i in range(50)
        }
        assert counts <= {0, 1}

    def test_deterministic(self, galaxy):
        """Test that a hex index always gets the same count."""
        divisions = make_divisions(GalacticRegion.ARM)
        index = SpaceCoordinates(4, 4, 0)
        assert get_number_of_systems_to_generate(
            galaxy, index, divisions
        ) == get_number_of_systems_to_generate(galaxy, index, divisions)

    def test_missing_sub_sector(self, galaxy):
        """Test that a hex needs its sub-sector."""
        divisions = make_divisions(GalacticRegion.ARM)[:1]
        with pytest.raises(InvariantViolation):
            get_number_of_systems_to_generate(galaxy, SpaceCoordinates(0, 0, 0), divisions)


class TestGenerateHex:
    """Test hex generation."""

    def test_systems_at_first_vertex(self, galaxy):
        """Test that a core hex holds one system sitting at its first vertex."""
        first = SpaceCoordinates(2, 2, 0)
        hex_ = generate_hex(
            galaxy, SpaceCoordinates(51, 51, 4), first, first, make_divisions(GalacticRegion.CORE)
        )

        assert len(hex_.contents) == 1
        assert hex_.contents[0].all_objects
        assert hex_.contains(first)

    def test_invalid_vertices(self, galaxy):
        """Test that a hex can't end before it starts."""
        with pytest.raises(ValueError):
            generate_hex(
                galaxy,
                SpaceCoordinates(0, 0, 0),
                SpaceCoordinates(1, 0, 0),
                SpaceCoordinates(0, 0, 0),
                make_divisions(GalacticRegion.VOID),
            )


class TestStellarNeighborhood:
    """Test stellar neighborhood generation."""

    def test_region_modifier_counts_regions_once(self):
        """Test that a halo within a bar pushes the roll by three."""
        assert get_region_modifier([GalacticRegion.HALO, GalacticRegion.BAR]) == 3
        assert get_region_modifier([GalacticRegion.HALO, GalacticRegion.BAR, GalacticRegion.BAR]) == 3

    def test_age_bounded_by_universe(self, galaxy):
        """Test that neighborhood ages never exceed the universe's."""
        for region in GalacticRegion:
            neighborhood = generate_stellar_neighborhood(galaxy, make_divisions(region))
            assert isinstance(neighborhood.age, (Young, Mature, Old, Ancient))
            years = neighborhood.age_in_myr()
            if years is not None:
                assert 1 <= years <= 13_800

    def test_shared_by_sub_sector(self, galaxy):
        """Test that hexes of a sub-sector share their neighborhood."""
        sub_sector = GalacticMapDivision("Test", GalacticRegion.DISK, 1, SpaceCoordinates(3, 1, 0), 1, 1, 0)
        first = GalacticMapDivision("Test", GalacticRegion.DISK, 0, SpaceCoordinates(30, 10, 0), 0, 0, 0)
        second = GalacticMapDivision("Test", GalacticRegion.DISK, 0, SpaceCoordinates(31, 12, 0), 1, 2, 0)
        assert generate_stellar_neighborhood(galaxy, [first, sub_sector]) == generate_stellar_neighborhood(
            galaxy, [second, sub_sector]
        )

    def test_missing_sub_sector(self, galaxy):
        """Test that a neighborhood needs its sub-sector."""
        with pytest.raises(InvariantViolation):
            generate_stellar_neighborhood(galaxy, make_divisions(GalacticRegion.DISK)[:1])
