"""Tests for star generation."""

import pytest

from starforge.engine.star_generator import (
    calculate_luminosity_class,
    calculate_main_sequence_luminosity,
    calculate_spectral_type,
    generate_mass,
    generate_star,
    generate_stellar_evolution,
    get_mass_range,
    simulate_mass_loss_over_the_years,
)
from starforge.models import (
    GalacticHex,
    GalacticMapDivision,
    GalacticRegion,
    Mature,
    SpaceCoordinates,
    StarLuminosityClass,
    StarSpectralType,
    StellarEvolution,
    StellarNeighborhood,
)
from starforge.utils import ConfigurationError, SeededDiceRoller

from helpers import make_galaxy, make_settings

COORD = SpaceCoordinates(0, 0, 0)


def make_hex():
    return GalacticHex(COORD, COORD, COORD, StellarNeighborhood(Mature()))


def make_sub_sector():
    return GalacticMapDivision("Test", GalacticRegion.DISK, 1, COORD, 0, 0, 0)


class TestSpectralType:
    """Test spectral types from temperatures."""

    @pytest.mark.parametrize(
        "temperature,expected",
        [(5800, "G2"), (7200, "F1")],
    )
    def test_main_sequence(self, temperature, expected):
        """Test spectral types of well known temperatures."""
        assert str(calculate_spectral_type(temperature)) == expected

    def test_hotter_is_earlier(self):
        """Test that a hotter star never gets a later letter."""
        letters = ("WR", "O", "B", "A", "F", "G", "K", "M", "L", "T", "Y")
        assert letters.index(calculate_spectral_type(30000).letter) <= letters.index(
            calculate_spectral_type(3000).letter
        )

    def test_subtype_range(self):
        """Test that subtypes stay between 0 and 9."""
        with pytest.raises(ValueError):
            StarSpectralType("G", 10)


class TestLuminosityClass:
    """Test luminosity classes."""

    def test_main_sequence(self):
        """Test that a star on its main sequence is a dwarf."""
        cls = calculate_luminosity_class(1.0, StarSpectralType("G", 2), 4600, 10000, 1500)
        assert cls == StarLuminosityClass.V

    def test_subgiant(self):
        """Test that a star past its main sequence is a subgiant."""
        cls = calculate_luminosity_class(2.0, StarSpectralType("G", 2), 11000, 10000, 1500)
        assert cls == StarLuminosityClass.IV

    def test_giants_by_luminosity(self):
        """Test that giants are split by luminosity."""
        spectral_type = StarSpectralType("K", 0)
        assert calculate_luminosity_class(50, spectral_type, 20000, 10000, 1500) == StarLuminosityClass.III
        assert calculate_luminosity_class(500, spectral_type, 20000, 10000, 1500) == StarLuminosityClass.II
        assert calculate_luminosity_class(100000, spectral_type, 20000, 10000, 1500) == StarLuminosityClass.O

    def test_remnants(self):
        """Test that remnant letters give remnant classes."""
        assert calculate_luminosity_class(0, StarSpectralType("XBH"), 1, 1, 1) == StarLuminosityClass.XBH
        assert calculate_luminosity_class(0, StarSpectralType("DA"), 1, 1, 1) == StarLuminosityClass.VII
        assert calculate_luminosity_class(0, StarSpectralType("T", 5), 1, 1, 1) == StarLuminosityClass.Y


class TestStellarPhysics:
    """Test mass and luminosity formulas."""

    def test_main_sequence_luminosity(self):
        """Test the mass-luminosity relation on a few of its segments."""
        assert calculate_main_sequence_luminosity(1.1) == pytest.approx(1.1)
        assert calculate_main_sequence_luminosity(2.0) == pytest.approx(16.0)
        assert calculate_main_sequence_luminosity(100.0) == pytest.approx(3_200_000.0)

    def test_mass_loss(self):
        """Test that only very massive stars lose mass, down to 150."""
        assert simulate_mass_loss_over_the_years(10.0, 1000) == 10.0
        assert simulate_mass_loss_over_the_years(200.0, 10) == 190.0
        assert simulate_mass_loss_over_the_years(200.0, 1000) == 150.0

    def test_mass_range(self):
        """Test lifecycle rows from masses."""
        assert get_mass_range(0.3) == 0.0
        assert get_mass_range(1.5) == 2.5
        assert get_mass_range(1000.0) == 7.0

    def test_mass_from_settings_weights(self):
        """Test that a single weighted range gives masses inside it."""
        galaxy = make_galaxy(
            make_settings(
                star={
                    "brown_dwarf_gen_chance": 0,
                    "red_dwarf_one_gen_chance": 0,
                    "red_dwarf_two_gen_chance": 0,
                    "red_dwarf_three_gen_chance": 0,
                    "red_dwarf_four_gen_chance": 0,
                    "red_dwarf_five_gen_chance": 0,
                    "orange_dwarf_gen_chance": 0,
                    "white_star_gen_chance": 0,
                    "blue_star_one_gen_chance": 0,
                    "blue_star_two_gen_chance": 0,
                    "blue_star_three_gen_chance": 0,
                    "violet_star_one_gen_chance": 0,
                }
            )
        )
        rng = SeededDiceRoller("seed", "mass")
        for _ in range(20):
            assert 1.0 <= generate_mass(galaxy, rng) <= 1.999

    def test_no_mass_weight(self):
        """Test that settings without any mass weight are rejected."""
        zeroes = {name: 0 for name in make_settings().star.model_dump() if name.endswith("_gen_chance")}
        galaxy = make_galaxy(make_settings(star=zeroes))
        with pytest.raises(ConfigurationError):
            generate_mass(galaxy, SeededDiceRoller("seed", "mass"))


class TestGenerateStar:
    """Test whole stars."""

    def test_our_sun(self):
        """Test that the Sun comes out with its known values."""
        galaxy = make_galaxy(make_settings(star={"use_ours": True}))
        star = generate_star(galaxy, make_hex(), COORD, 0, 0, "Sol", StellarEvolution.DWARF)

        assert star.name == "Sun"
        assert star.mass == 1.0
        assert star.age == 4600.0
        assert star.luminosity_class == StarLuminosityClass.V

    def test_fixed_mass_and_age(self):
        """Test that fixed values from the settings are used."""
        galaxy = make_galaxy(make_settings(star={"fixed_mass": 0.8, "fixed_age": 2.0}))
        star = generate_star(galaxy, make_hex(), COORD, 0, 1, "Vega", StellarEvolution.DWARF)

        assert star.name == "Vega 2"
        assert star.mass == 0.8
        assert star.age == 2000.0

    def test_valid_stars(self, galaxy):
        """Test that generated stars are physically valid."""
        for star_index in range(30):
            star = generate_star(galaxy, make_hex(), COORD, 0, star_index, "Test", StellarEvolution.DWARF)
            assert star.mass > 0
            assert star.radius > 0
            assert star.luminosity >= 0
            assert star.temperature >= 0
            assert 1.0 <= star.age <= 13_800 - 40

    def test_deterministic(self, galaxy):
        """Test that a star only depends on its position and the seed."""
        first = generate_star(galaxy, make_hex(), COORD, 2, 1, "Test", StellarEvolution.SUBDWARF)
        second = generate_star(galaxy, make_hex(), COORD, 2, 1, "Test", StellarEvolution.SUBDWARF)
        assert first == second


class TestStellarEvolution:
    """Test stellar populations."""

    def test_population_in_enum(self, galaxy):
        """Test that every star gets a population."""
        sub_sector = make_sub_sector()
        for star_index in range(10):
            population = generate_stellar_evolution(
                galaxy, make_hex(), COORD, 0, star_index, sub_sector, [sub_sector]
            )
            assert isinstance(population, StellarEvolution)

    def test_attempt_changes_seed(self, galaxy):
        """Test that retries draw from other streams but stay deterministic."""
        sub_sector = make_sub_sector()
        args = (galaxy, make_hex(), COORD, 0, 0, sub_sector, [sub_sector])
        assert generate_stellar_evolution(*args, attempt=3) == generate_stellar_evolution(*args, attempt=3)
