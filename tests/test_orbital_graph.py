"""Tests for the orbital graph builder."""

import pytest

from starforge.engine.orbital_graph import (
    PlannedOrbit,
    add_orbital_point,
    calculate_eccentricity,
    calculate_orbital_period,
    commit_orbits,
    find_point,
    get_next_id,
    get_point_mass,
    set_primary,
    sort_orbital_points_by_average_distance,
    validate_orbital_graph,
)
from starforge.models import CelestialRing, EmptyPoint, Orbit, OrbitalPoint, TelluricRing, ZoneType
from starforge.utils import InvariantViolation, SeededDiceRoller

from helpers import make_star


def make_binary():
    """A barycentre with two stars orbiting it."""
    points = []
    center = add_orbital_point(points, EmptyPoint())
    first = add_orbital_point(points, make_star("A", mass=1.0), center.id)
    second = add_orbital_point(points, make_star("B", mass=0.5), center.id)
    planned = {
        first.id: PlannedOrbit(1.0, ZoneType.FORBIDDEN_ZONE, eccentricity=0.0),
        second.id: PlannedOrbit(2.0, ZoneType.FORBIDDEN_ZONE, eccentricity=0.1),
    }
    return points, planned


class TestArena:
    """Test point allocation and links."""

    def test_first_id(self):
        """Test that ids start at 1."""
        assert get_next_id([]) == 1
        points = []
        assert add_orbital_point(points, make_star()).id == 1

    def test_ids_are_unique_and_linked(self):
        """Test that new points get fresh ids and join their primary's satellites."""
        points, _ = make_binary()

        assert [p.id for p in points] == [1, 2, 3]
        assert points[0].satellite_ids == [2, 3]
        assert points[1].primary_id == 1
        assert points[1].object.orbital_point_id == 2
        validate_orbital_graph(points)

    def test_unknown_primary(self):
        """Test that a point can't orbit a missing point."""
        with pytest.raises(InvariantViolation):
            add_orbital_point([], make_star(), primary_id=7)

    def test_find_point(self):
        """Test finding points by id."""
        points, _ = make_binary()
        assert find_point(points, 3).object.name == "B"
        with pytest.raises(InvariantViolation):
            find_point(points, 4)

    def test_set_primary_moves_satellite(self):
        """Test that changing primary unlinks the former one."""
        points, _ = make_binary()
        set_primary(points, 3, 2)

        assert points[0].satellite_ids == [2]
        assert points[1].satellite_ids == [3]
        assert points[2].primary_id == 2
        validate_orbital_graph(points)

    def test_set_primary_on_itself(self):
        """Test that a point can't orbit itself."""
        points, _ = make_binary()
        with pytest.raises(InvariantViolation):
            set_primary(points, 2, 2)


class TestValidateOrbitalGraph:
    """Test graph validation."""

    def test_duplicate_ids(self):
        """Test that duplicate ids are reported."""
        points = [OrbitalPoint(1, EmptyPoint()), OrbitalPoint(1, EmptyPoint())]
        with pytest.raises(InvariantViolation):
            validate_orbital_graph(points)

    def test_dangling_primary(self):
        """Test that a missing primary is reported."""
        with pytest.raises(InvariantViolation):
            validate_orbital_graph([OrbitalPoint(1, EmptyPoint(), primary_id=5)])

    def test_missing_back_reference(self):
        """Test that a satellite missing from its primary's list is reported."""
        points = [OrbitalPoint(1, EmptyPoint()), OrbitalPoint(2, EmptyPoint(), primary_id=1)]
        with pytest.raises(InvariantViolation):
            validate_orbital_graph(points)

    def test_satellite_not_orbiting(self):
        """Test that a listed satellite orbiting elsewhere is reported."""
        points = [OrbitalPoint(1, EmptyPoint(), satellite_ids=[2]), OrbitalPoint(2, EmptyPoint())]
        with pytest.raises(InvariantViolation):
            validate_orbital_graph(points)


class TestCommitOrbits:
    """Test orbit commits."""

    def test_orbits_built(self):
        """Test that planned points get their orbits."""
        points, planned = make_binary()
        commit_orbits(points, planned, "seed", "test")

        first, second = points[1], points[2]
        assert first.own_orbit.primary_body_id == 1
        assert first.own_orbit.average_distance == 1.0
        assert first.own_orbit.eccentricity == 0.0
        assert second.own_orbit.min_separation == pytest.approx(1.8)
        assert second.own_orbit.max_separation == pytest.approx(2.2)
        assert first.object.orbit is first.own_orbit
        assert points[0].own_orbit is None

    def test_distance_from_system_center(self):
        """Test that distances add up along primary chains."""
        points, planned = make_binary()
        moon = add_orbital_point(points, make_star("C", mass=0.1), 3)
        planned[moon.id] = PlannedOrbit(0.5, ZoneType.OUTER_ZONE, eccentricity=0.0)

        commit_orbits(points, planned, "seed", "test")

        assert moon.own_orbit.average_distance_from_system_center == pytest.approx(2.5)
        assert points[2].own_orbit.satellite_ids == [moon.id]

    def test_commit_twice_changes_nothing(self):
        """Test that committing again leaves orbits as they are."""
        points, planned = make_binary()
        planned[2] = PlannedOrbit(1.0, ZoneType.OUTER_ZONE)
        commit_orbits(points, planned, "seed", "test")
        orbits = [p.own_orbit for p in points]

        commit_orbits(points, planned, "seed", "test")

        assert [p.own_orbit for p in points] == orbits
        assert all(a is b for a, b in zip(orbits, [p.own_orbit for p in points]))

    def test_planned_point_without_primary(self):
        """Test that a root point can't be given an orbit."""
        points, planned = make_binary()
        planned[1] = PlannedOrbit(1.0, ZoneType.OUTER_ZONE)
        with pytest.raises(InvariantViolation):
            commit_orbits(points, planned, "seed", "test")

    def test_period_uses_both_masses(self):
        """Test that the period is computed around the primary's total mass."""
        points = []
        sun = add_orbital_point(points, make_star("Sun"))
        earth_like = add_orbital_point(points, make_star("Tiny", mass=1e-9), sun.id)
        commit_orbits(
            points, {earth_like.id: PlannedOrbit(1.0, ZoneType.BIO_ZONE, eccentricity=0.0)}, "s", "t"
        )
        assert earth_like.own_orbit.orbital_period == pytest.approx(365.256, rel=1e-6)


class TestSortOrbitalPoints:
    """Test sorting points by distance."""

    def test_uncommitted_last(self):
        """Test ascending distances with uncommitted points at the end."""

        def point(point_id, distance):
            orbit = None
            if distance is not None:
                orbit = Orbit(1, ZoneType.OUTER_ZONE, distance, distance, distance, distance)
            return OrbitalPoint(point_id, EmptyPoint(), primary_id=1, own_orbit=orbit)

        points = [point(2, 2.3), point(3, None), point(4, 1.1)]
        assert [p.id for p in sort_orbital_points_by_average_distance(points)] == [4, 2, 3]


class TestOrbitalMechanics:
    """Test eccentricity and period formulas."""

    def test_one_au_around_the_sun(self):
        """Test that one AU around one solar mass takes a year."""
        assert calculate_orbital_period(1.0, 1.0, 0.0) == pytest.approx(365.256)

    def test_massless_system(self):
        """Test that a massless pair has no period."""
        assert calculate_orbital_period(1.0, 0.0, 0.0) == 0.0

    def test_eccentricity_bounds(self):
        """Test that eccentricities stay within [0, 0.8]."""
        rng = SeededDiceRoller("seed", "ecc")
        for modifier in (-10, 0, 10):
            for _ in range(50):
                assert 0.0 <= calculate_eccentricity(rng, modifier) <= 0.8


class TestGetPointMass:
    """Test the mass seen by orbits around a point."""

    def test_barycentre_weighs_its_satellites(self):
        """Test that a void point weighs as much as its stars."""
        points, _ = make_binary()
        assert get_point_mass(points, points[0]) == pytest.approx(1.5)

    def test_ring_is_massless(self):
        """Test that rings count for no mass."""
        points = []
        point = add_orbital_point(points, CelestialRing(0, TelluricRing(), stub=True))
        assert get_point_mass(points, point) == 0.0

    def test_unknown_object(self):
        """Test that an object of no known kind is rejected."""
        with pytest.raises(TypeError, match="Unknown astronomical object"):
            get_point_mass([], OrbitalPoint(1, "comet"))
