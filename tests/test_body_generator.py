"""Tests for planets, belts, disks and rings."""

import pytest

from starforge.engine.body_generator import (
    calculate_blackbody_temperature,
    calculate_mass,
    can_form_gas_giant,
    downsize,
    generate_bodies,
    generate_body_type,
    generate_gas_giant_arrangement,
    generate_telluric_parameters,
    get_world_type,
    interpolate_density,
    should_spawn,
)
from starforge.engine.orbital_graph import add_orbital_point, validate_orbital_graph
from starforge.engine.zones import generate_star_zones
from starforge.models import (
    CelestialBody,
    CelestialBodyComposition,
    CelestialBodySize,
    CelestialBodyWorldType,
    CelestialDisk,
    CelestialRing,
    GasGiantArrangement,
    SpaceCoordinates,
    Star,
    ZoneType,
)
from starforge.utils import InvariantViolation, SeededDiceRoller

from helpers import make_galaxy, make_settings, make_star

COORD = SpaceCoordinates(0, 0, 0)


def make_sun_system():
    points = []
    add_orbital_point(points, make_star("Sun"))
    generate_star_zones(points)
    return points


class TestPhysics:
    """Test body formulas."""

    def test_blackbody_temperature(self):
        """Test the blackbody temperature at one AU from the Sun."""
        assert calculate_blackbody_temperature(1.0, 1.0) == 278
        assert calculate_blackbody_temperature(1.0, 4.0) == 139

    def test_blackbody_temperature_at_zero(self):
        """Test that a body can't sit on its star."""
        with pytest.raises(InvariantViolation):
            calculate_blackbody_temperature(1.0, 0.0)

    def test_earth_mass(self):
        """Test that an Earth sized sphere of Earth density weighs an Earth."""
        assert calculate_mass(5.513, 1.0) == pytest.approx(1.0, rel=0.01)

    def test_gas_giant_density(self):
        """Test densities read from the mass to density dataset."""
        assert interpolate_density(300.0) == pytest.approx(1.32)
        assert interpolate_density(1e9) == interpolate_density(1e10)

    def test_downsize(self):
        """Test that bodies shrink by one size, Puny staying Puny."""
        assert downsize(CelestialBodySize.LARGE) == CelestialBodySize.STANDARD
        assert downsize(CelestialBodySize.PUNY) == CelestialBodySize.PUNY

    def test_telluric_parameters_plausible(self):
        """Test that solid bodies come out lighter than ten Earths."""
        rng = SeededDiceRoller("seed", "telluric")
        for size in (CelestialBodySize.LARGE, CelestialBodySize.STANDARD, CelestialBodySize.TINY):
            density, final_size, radius, mass = generate_telluric_parameters(rng, 3.0, 6.0, size, 278)
            assert density >= 1.0
            assert radius > 0
            assert 0 < mass < 10.0


class TestWorldType:
    """Test surface types."""

    def test_temperate_standard_world(self):
        """Test that a standard rocky world at Earth's temperature is terrestrial."""
        world = get_world_type(CelestialBodySize.STANDARD, CelestialBodyComposition.ROCKY, 278, 1.0)
        assert world == CelestialBodyWorldType.TERRESTRIAL

    def test_temperate_icy_world(self):
        """Test that a standard icy world at Earth's temperature is an ocean."""
        world = get_world_type(CelestialBodySize.STANDARD, CelestialBodyComposition.ICY, 278, 1.0)
        assert world == CelestialBodyWorldType.OCEAN

    def test_small_cold_worlds(self):
        """Test small worlds far from their star."""
        assert get_world_type(CelestialBodySize.TINY, CelestialBodyComposition.ICY, 100, 1.0) == (
            CelestialBodyWorldType.ICE
        )
        assert get_world_type(CelestialBodySize.SMALL, CelestialBodyComposition.ROCKY, 50, 1.0) == (
            CelestialBodyWorldType.HADEAN
        )

    def test_hot_worlds(self):
        """Test worlds close to their star."""
        assert get_world_type(CelestialBodySize.LARGE, CelestialBodyComposition.ROCKY, 400, 1.0) == (
            CelestialBodyWorldType.GREENHOUSE
        )
        assert get_world_type(CelestialBodySize.LARGE, CelestialBodyComposition.METALLIC, 900, 1.0) == (
            CelestialBodyWorldType.CHTHONIAN
        )

    def test_ammonia_around_small_stars(self):
        """Test that cool worlds of light stars are ammonia worlds."""
        world = get_world_type(CelestialBodySize.LARGE, CelestialBodyComposition.ROCKY, 200, 0.5)
        assert world == CelestialBodyWorldType.AMMONIA


class TestSpawnRolls:
    """Test the rolls placing bodies."""

    def test_should_spawn_bounds(self):
        """Test that out of range chances always or never spawn."""
        rng = SeededDiceRoller("seed", "spawn")
        assert all(should_spawn(rng, 150) for _ in range(50))
        assert not any(should_spawn(rng, -5) for _ in range(50))

    def test_gas_giant_formation(self):
        """Test where gas giants may be rolled."""
        assert not can_form_gas_giant(None, ZoneType.OUTER_ZONE)
        assert can_form_gas_giant(GasGiantArrangement.CONVENTIONAL, ZoneType.OUTER_ZONE)
        assert not can_form_gas_giant(GasGiantArrangement.CONVENTIONAL, ZoneType.INNER_ZONE)
        assert can_form_gas_giant(GasGiantArrangement.EPISTELLAR, ZoneType.INNER_ZONE)

    def test_body_type_respects_settings(self):
        """Test that forbidden compositions are never rolled."""
        galaxy = make_galaxy(
            make_settings(celestial_body={"do_not_generate_gaseous": True, "do_not_generate_icy": True})
        )
        rng = SeededDiceRoller("seed", "type")
        for _ in range(50):
            composition = generate_body_type(rng, galaxy, ZoneType.OUTER_ZONE)
            assert composition in (CelestialBodyComposition.ROCKY, CelestialBodyComposition.METALLIC)

    def test_body_type_all_forbidden(self):
        """Test that nothing is rolled when every composition is forbidden."""
        galaxy = make_galaxy(
            make_settings(
                celestial_body={
                    "do_not_generate_gaseous": True,
                    "do_not_generate_icy": True,
                    "do_not_generate_rocky": True,
                    "do_not_generate_metallic": True,
                }
            )
        )
        assert generate_body_type(SeededDiceRoller("s", "t"), galaxy, ZoneType.INNER_ZONE) is None

    def test_no_arrangement_without_bodies(self):
        """Test that stars without bodies have no gas giants."""
        star = make_star()
        assert generate_gas_giant_arrangement(0, False, star, "seed", "step") is None
        assert generate_gas_giant_arrangement(5, True, star, "seed", "step") is None


class TestGenerateBodies:
    """Test populating whole systems."""

    @pytest.mark.parametrize("seed", ["alpha", "beta", "gamma", "delta", "epsilon"])
    def test_no_stub_left(self, seed):
        """Test that every stub is finalized on a committed orbit."""
        galaxy = make_galaxy(make_settings(seed))
        points = make_sun_system()

        generate_bodies(galaxy, points, COORD, 0)

        validate_orbital_graph(points)
        for point in points[1:]:
            obj = point.object
            assert isinstance(obj, (CelestialBody, CelestialDisk, CelestialRing))
            assert not obj.stub
            assert point.own_orbit is not None
            assert obj.orbit is point.own_orbit
            assert obj.orbital_point_id == point.id

    @pytest.mark.parametrize("seed", ["alpha", "beta", "gamma"])
    def test_bodies_named_after_star(self, seed):
        """Test that bodies and disks carry their star's name."""
        galaxy = make_galaxy(make_settings(seed))
        points = make_sun_system()

        generate_bodies(galaxy, points, COORD, 0)

        for point in points:
            if isinstance(point.object, (CelestialBody, CelestialDisk)):
                assert point.object.name.startswith("Sun")

    def test_rings_orbit_gas_giants(self):
        """Test that rings orbit bodies, never stars."""
        for seed in ("r1", "r2", "r3", "r4", "r5", "r6"):
            galaxy = make_galaxy(make_settings(seed))
            points = make_sun_system()
            generate_bodies(galaxy, points, COORD, 0)
            by_id = {p.id: p for p in points}
            for point in points:
                if isinstance(point.object, CelestialRing):
                    assert isinstance(by_id[point.primary_id].object, CelestialBody)

    def test_deterministic(self):
        """Test that the same system gets the same bodies."""
        galaxy = make_galaxy(make_settings("same"))
        first = make_sun_system()
        second = make_sun_system()
        generate_bodies(galaxy, first, COORD, 0)
        generate_bodies(galaxy, second, COORD, 0)
        assert first == second

    def test_stars_untouched(self):
        """Test that the star keeps its point and gets no orbit."""
        galaxy = make_galaxy(make_settings("stars"))
        points = make_sun_system()
        generate_bodies(galaxy, points, COORD, 0)
        assert isinstance(points[0].object, Star)
        assert points[0].own_orbit is None
        assert points[0].primary_id is None
