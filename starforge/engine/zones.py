"""Orbital zones of stars and of whole systems.

Around each star, from the inside out: the corona, the inner limit where
nothing can form, the inner zone up to the snow line, the outer zone up to
the star's outer limit, with the bio zone carved out of the inner zone.
Stars in a multiple system also get a forbidden zone where their companion
disrupts orbits.
"""

import logging
import math
from typing import Dict, List, Optional

from ..models import OrbitalPoint, Star, StarZone, ZoneType
from ..utils import solar_radii_to_astronomical_units

logger = logging.getLogger(__name__)

SNOW_LINE_FACTOR = 4.85
BIO_ZONE_INNER_FACTOR = 1.0
BIO_ZONE_OUTER_FACTOR = 1.77
OUTER_LIMIT_FACTOR = 40.0

# Higher priority zones win where zones of a system overlap
ZONE_PRIORITY: Dict[ZoneType, int] = {
    ZoneType.FORBIDDEN_ZONE: 6,
    ZoneType.CORONA: 5,
    ZoneType.INNER_LIMIT: 4,
    ZoneType.BIO_ZONE: 3,
    ZoneType.INNER_ZONE: 2,
    ZoneType.OUTER_ZONE: 1,
}


def sort_zones(zones: List[StarZone]) -> List[StarZone]:
    return sorted(zones, key=lambda z: (z.start, z.end))


def carve_zone(zones: List[StarZone], hole: StarZone) -> List[StarZone]:
    """Remove the span of ``hole`` from every other zone, splitting zones it falls inside.

    Zones of the hole's own type are left untouched.

    Examples:
        >>> inner = StarZone(0.1, 4.85, ZoneType.INNER_ZONE)
        >>> bio = StarZone(1.0, 1.77, ZoneType.BIO_ZONE)
        >>> [(z.start, z.end) for z in carve_zone([inner, bio], bio)]
        [(0.1, 1.0), (1.77, 4.85), (1.0, 1.77)]
    """
    result = []
    for zone in zones:
        if zone.zone_type == hole.zone_type or zone.end <= hole.start or zone.start >= hole.end:
            result.append(zone)
            continue
        if zone.start < hole.start:
            result.append(StarZone(zone.start, hole.start, zone.zone_type))
        if zone.end > hole.end:
            result.append(StarZone(hole.end, zone.end, zone.zone_type))
    return result


def calculate_star_zones(star: Star) -> List[StarZone]:
    """Zones of a single star, in AU from the star, sorted.

    Args:
        star: Star with its final mass, luminosity and radius

    Returns:
        Corona, inner limit, and the inner, bio and outer zones the star
        is large and bright enough to have
    """
    sqrt_luminosity = math.sqrt(star.luminosity)
    corona_end = solar_radii_to_astronomical_units(star.radius)
    inner_limit = max(0.1 * star.mass, 0.01 * sqrt_luminosity, corona_end)
    snow_line = SNOW_LINE_FACTOR * sqrt_luminosity
    bio_start = BIO_ZONE_INNER_FACTOR * sqrt_luminosity
    bio_end = BIO_ZONE_OUTER_FACTOR * sqrt_luminosity
    outer_limit = OUTER_LIMIT_FACTOR * star.mass

    zones = [
        StarZone(0.0, corona_end, ZoneType.CORONA),
        StarZone(corona_end, inner_limit, ZoneType.INNER_LIMIT),
    ]
    if snow_line > inner_limit:
        zones.append(StarZone(inner_limit, snow_line, ZoneType.INNER_ZONE))
    if outer_limit > inner_limit and outer_limit > snow_line:
        zones.append(StarZone(max(snow_line, inner_limit), outer_limit, ZoneType.OUTER_ZONE))
    if bio_end > inner_limit:
        bio_zone = StarZone(max(bio_start, inner_limit), bio_end, ZoneType.BIO_ZONE)
        zones = carve_zone(zones, bio_zone)
        zones.append(bio_zone)
    return sort_zones(zones)


def get_closest_companion(
    point: OrbitalPoint, points: List[OrbitalPoint]
) -> Optional[OrbitalPoint]:
    """The other orbiting point whose distance from the system center is closest to this one's."""
    if point.own_orbit is None:
        return None
    distance = point.own_orbit.average_distance_from_system_center
    candidates = [p for p in points if p.id != point.id and p.own_orbit is not None]
    if not candidates:
        return None
    return min(
        candidates,
        key=lambda p: abs(p.own_orbit.average_distance_from_system_center - distance),
    )


def calculate_forbidden_zone(point: OrbitalPoint, companion: OrbitalPoint) -> StarZone:
    """Forbidden zone a companion carves around a star of a multiple system.

    Orbits are stable well inside a third of the closest approach of the two
    bodies and well beyond three times their widest separation.
    """
    own = point.own_orbit
    other = companion.own_orbit
    min_separation = abs(other.max_separation - own.min_separation)
    max_separation = abs(own.max_separation - other.min_separation)
    return StarZone(min_separation / 3, max_separation * 3, ZoneType.FORBIDDEN_ZONE)


def generate_star_zones(points: List[OrbitalPoint]):
    """Compute the zones of every star of a system, in place.

    Star orbits must be committed first, as forbidden zones depend on them.
    """
    for point in points:
        star = point.object
        if not isinstance(star, Star):
            continue
        zones = calculate_star_zones(star)
        companion = get_closest_companion(point, points)
        if companion is not None:
            forbidden = calculate_forbidden_zone(point, companion)
            zones = carve_zone(zones, forbidden)
            zones.append(forbidden)
        star.zones = sort_zones(zones)
        logger.debug(f"{star.name} has {len(star.zones)} zone(s)")


def collect_system_zones(points: List[OrbitalPoint]) -> List[StarZone]:
    """Zones of every star, measured from the system center and consolidated.

    A star orbiting away from the center projects its zones on both sides
    of the center. Where zones overlap, the one with the highest ZONE_PRIORITY
    wins; touching zones of the same type are merged.

    Args:
        points: The system's arena, with star zones generated

    Returns:
        Non overlapping zones sorted by distance from the system center
    """
    projected = []
    for point in points:
        star = point.object
        if not isinstance(star, Star):
            continue
        offset = point.own_orbit.average_distance_from_system_center if point.own_orbit else 0.0
        for zone in star.zones:
            projected.append(StarZone(zone.start + offset, zone.end + offset, zone.zone_type))
            if offset > zone.end:
                projected.append(StarZone(offset - zone.end, offset - zone.start, zone.zone_type))
    return consolidate_zones(projected)


def consolidate_zones(zones: List[StarZone]) -> List[StarZone]:
    """Flatten overlapping zones by priority and merge touching zones of the same type.

    Examples:
        >>> zones = consolidate_zones([
        ...     StarZone(0.0, 10.0, ZoneType.OUTER_ZONE),
        ...     StarZone(2.0, 4.0, ZoneType.FORBIDDEN_ZONE),
        ... ])
        >>> [(z.start, z.end, z.zone_type.value) for z in zones]
        [(0.0, 2.0, 'OuterZone'), (2.0, 4.0, 'ForbiddenZone'), (4.0, 10.0, 'OuterZone')]
    """
    bounds = sorted({z.start for z in zones} | {z.end for z in zones})
    result: List[StarZone] = []
    for start, end in zip(bounds, bounds[1:]):
        covering = [z for z in zones if z.start <= start and z.end >= end]
        if not covering:
            continue
        zone_type = max(covering, key=lambda z: ZONE_PRIORITY[z.zone_type]).zone_type
        if result and result[-1].zone_type == zone_type and result[-1].end == start:
            result[-1].end = end
        else:
            result.append(StarZone(start, end, zone_type))
    return result


def get_zone_at(zones: List[StarZone], distance: float) -> Optional[StarZone]:
    """The zone containing a distance, if any."""
    return next((z for z in zones if z.contains(distance)), None)
