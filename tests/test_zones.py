"""Tests for star and system zones."""

import pytest

from starforge.engine.orbital_graph import PlannedOrbit, add_orbital_point, commit_orbits
from starforge.engine.zones import (
    calculate_star_zones,
    carve_zone,
    collect_system_zones,
    consolidate_zones,
    generate_star_zones,
    get_zone_at,
)
from starforge.models import EmptyPoint, StarZone, ZoneType

from helpers import make_star


class TestCalculateStarZones:
    """Test the zones of a single star."""

    def test_sun_like_star(self):
        """Test the zones of a star with solar mass, luminosity and radius."""
        zones = calculate_star_zones(make_star())

        assert [z.zone_type for z in zones] == [
            ZoneType.CORONA,
            ZoneType.INNER_LIMIT,
            ZoneType.INNER_ZONE,
            ZoneType.BIO_ZONE,
            ZoneType.INNER_ZONE,
            ZoneType.OUTER_ZONE,
        ]
        assert zones[0].end == pytest.approx(0.00465047)
        assert zones[1].end == pytest.approx(0.1)
        assert (zones[3].start, zones[3].end) == pytest.approx((1.0, 1.77))
        assert zones[5].start == pytest.approx(4.85)
        assert zones[5].end == pytest.approx(40.0)

    def test_zones_are_contiguous(self):
        """Test that each zone starts where the previous one ends."""
        zones = calculate_star_zones(make_star(mass=0.3, luminosity=0.02, radius=0.3))
        for previous, zone in zip(zones, zones[1:]):
            assert previous.end == pytest.approx(zone.start)

    def test_dim_star_without_bio_zone(self):
        """Test that a very dim star's bio zone falls inside its inner limit."""
        zones = calculate_star_zones(make_star(mass=0.5, luminosity=0.0001, radius=0.1))
        assert ZoneType.BIO_ZONE not in [z.zone_type for z in zones]


class TestCarveZone:
    """Test zone carving."""

    def test_split(self):
        """Test that a hole inside a zone splits it in two."""
        zones = carve_zone(
            [StarZone(0.0, 10.0, ZoneType.OUTER_ZONE)], StarZone(2.0, 4.0, ZoneType.FORBIDDEN_ZONE)
        )
        assert [(z.start, z.end) for z in zones] == [(0.0, 2.0), (4.0, 10.0)]

    def test_covered_zone_removed(self):
        """Test that a zone fully covered by the hole disappears."""
        zones = carve_zone(
            [StarZone(3.0, 3.5, ZoneType.INNER_ZONE)], StarZone(2.0, 4.0, ZoneType.FORBIDDEN_ZONE)
        )
        assert zones == []

    def test_disjoint_zone_kept(self):
        """Test that zones outside the hole are untouched."""
        zone = StarZone(5.0, 6.0, ZoneType.INNER_ZONE)
        assert carve_zone([zone], StarZone(2.0, 4.0, ZoneType.FORBIDDEN_ZONE)) == [zone]


class TestConsolidateZones:
    """Test system zone consolidation."""

    def test_priority(self):
        """Test that the forbidden zone wins over the outer zone."""
        zones = consolidate_zones(
            [StarZone(0.0, 10.0, ZoneType.OUTER_ZONE), StarZone(2.0, 4.0, ZoneType.FORBIDDEN_ZONE)]
        )
        assert [(z.start, z.end, z.zone_type) for z in zones] == [
            (0.0, 2.0, ZoneType.OUTER_ZONE),
            (2.0, 4.0, ZoneType.FORBIDDEN_ZONE),
            (4.0, 10.0, ZoneType.OUTER_ZONE),
        ]

    def test_merge_touching_zones(self):
        """Test that touching zones of one type are merged."""
        zones = consolidate_zones(
            [StarZone(0.0, 1.0, ZoneType.INNER_ZONE), StarZone(1.0, 2.0, ZoneType.INNER_ZONE)]
        )
        assert [(z.start, z.end) for z in zones] == [(0.0, 2.0)]

    def test_gap_kept(self):
        """Test that uncovered spans stay uncovered."""
        zones = consolidate_zones(
            [StarZone(0.0, 1.0, ZoneType.INNER_ZONE), StarZone(2.0, 3.0, ZoneType.INNER_ZONE)]
        )
        assert len(zones) == 2
        assert get_zone_at(zones, 1.5) is None
        assert get_zone_at(zones, 2.5).zone_type == ZoneType.INNER_ZONE


class TestSystemZones:
    """Test zones of a whole system."""

    def test_single_star(self):
        """Test that a lone star's system zones are its own zones."""
        points = []
        add_orbital_point(points, make_star())
        generate_star_zones(points)

        zones = collect_system_zones(points)

        assert zones[0].zone_type == ZoneType.CORONA
        assert get_zone_at(zones, 1.2).zone_type == ZoneType.BIO_ZONE
        assert get_zone_at(zones, 20.0).zone_type == ZoneType.OUTER_ZONE

    def test_binary_forbidden_zone(self):
        """Test that binary stars carve a forbidden zone around their companion."""
        points = []
        center = add_orbital_point(points, EmptyPoint())
        first = add_orbital_point(points, make_star("A"), center.id)
        second = add_orbital_point(points, make_star("B", mass=0.8, luminosity=0.5), center.id)
        commit_orbits(
            points,
            {
                first.id: PlannedOrbit(1.0, ZoneType.FORBIDDEN_ZONE, eccentricity=0.0),
                second.id: PlannedOrbit(5.0, ZoneType.FORBIDDEN_ZONE, eccentricity=0.0),
            },
            "seed",
            "zones",
        )

        generate_star_zones(points)

        forbidden = [z for z in first.object.zones if z.zone_type == ZoneType.FORBIDDEN_ZONE]
        assert len(forbidden) == 1
        assert forbidden[0].start == pytest.approx(4.0 / 3)
        assert forbidden[0].end == pytest.approx(12.0)
        for previous, zone in zip(first.object.zones, first.object.zones[1:]):
            assert previous.end <= zone.start + 1e-9
