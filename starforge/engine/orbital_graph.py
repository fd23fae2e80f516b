"""Orbital graph builder.

A system's objects live in one flat list of OrbitalPoint (the arena); every
primary and satellite reference is an id into that list. Points are added
first, their occupants as stubs without orbits, then ``commit_orbits`` fills
in every orbit at once and replaces the stubs with their final objects.
"""

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from ..models import (
    AstronomicalObject,
    CelestialBody,
    CelestialDisk,
    CelestialRing,
    EmptyPoint,
    Orbit,
    OrbitalPoint,
    Spacecraft,
    Star,
    ZoneType,
)
from ..utils import InvariantViolation, SeededDiceRoller, earth_masses_to_solar_masses
from ..utils.constants import DAYS_IN_A_YEAR, MAX_ECCENTRICITY

logger = logging.getLogger(__name__)

# 3d6 + modifier -> base eccentricity
ECCENTRICITY_TABLE = (
    (3, 0.0),
    (6, 0.05),
    (9, 0.1),
    (11, 0.15),
    (12, 0.2),
    (13, 0.3),
    (14, 0.4),
    (15, 0.5),
    (16, 0.6),
    (17, 0.7),
)

Finalizer = Callable[[OrbitalPoint, List[OrbitalPoint]], AstronomicalObject]


@dataclass(frozen=True)
class PlannedOrbit:
    """Where a point will orbit once committed.

    ``eccentricity`` forces the eccentricity instead of rolling it with
    ``eccentricity_modifier``.
    """

    distance: float  # AU from the primary
    zone: ZoneType
    eccentricity_modifier: int = 0
    eccentricity: Optional[float] = None


def get_next_id(points: List[OrbitalPoint]) -> int:
    """Next free orbital point id: the highest id plus one, or 1 for an empty arena.

    Examples:
        >>> get_next_id([])
        1
    """
    if not points:
        return 1
    return max(point.id for point in points) + 1


def find_point(points: List[OrbitalPoint], point_id: int) -> OrbitalPoint:
    """Return the point with the given id.

    Raises:
        InvariantViolation: If no point has this id
    """
    for point in points:
        if point.id == point_id:
            return point
    raise InvariantViolation(f"No orbital point #{point_id} among {len(points)} points")


def add_orbital_point(
    points: List[OrbitalPoint], obj: AstronomicalObject, primary_id: Optional[int] = None
) -> OrbitalPoint:
    """Allocate an id for ``obj``, append its point and link it to its primary.

    Args:
        points: The system's arena, modified in place
        obj: Occupant of the new point; its ``orbital_point_id`` is updated
        primary_id: Id of the point it orbits, if any

    Returns:
        The new OrbitalPoint

    Raises:
        InvariantViolation: If ``primary_id`` is not in the arena
    """
    primary = find_point(points, primary_id) if primary_id is not None else None
    point = OrbitalPoint(get_next_id(points), obj, primary_id)
    if not isinstance(obj, EmptyPoint):
        obj.orbital_point_id = point.id
    points.append(point)
    if primary is not None:
        primary.satellite_ids.append(point.id)
    return point


def set_primary(points: List[OrbitalPoint], point_id: int, primary_id: int):
    """Make ``point_id`` orbit ``primary_id``, unlinking it from its former primary.

    Raises:
        InvariantViolation: If either id is not in the arena, or if a point
            would orbit itself
    """
    if point_id == primary_id:
        raise InvariantViolation(f"Orbital point #{point_id} cannot orbit itself")
    point = find_point(points, point_id)
    primary = find_point(points, primary_id)
    if point.primary_id is not None:
        former = find_point(points, point.primary_id)
        former.satellite_ids = [i for i in former.satellite_ids if i != point_id]
    point.primary_id = primary_id
    if point_id not in primary.satellite_ids:
        primary.satellite_ids.append(point_id)


def sort_orbital_points_by_average_distance(points: List[OrbitalPoint]) -> List[OrbitalPoint]:
    """Points sorted by the average distance of their own orbit, uncommitted ones last.

    The sort is stable.
    """
    return sorted(
        points,
        key=lambda p: (0, p.own_orbit.average_distance) if p.own_orbit else (1, 0.0),
    )


def calculate_eccentricity(rng: SeededDiceRoller, modifier: int = 0) -> float:
    """Roll an orbital eccentricity, clamped to [0, 0.8].

    A 3d6 table gives the base value, then 1d11 adds a jitter of up to
    0.05 either way.
    """
    roll = rng.roll(3, 6, modifier)
    base = next((value for limit, value in ECCENTRICITY_TABLE if roll <= limit), MAX_ECCENTRICITY)
    eccentricity = base + (rng.roll(1, 11) - 6) * 0.01
    return round(min(max(eccentricity, 0.0), MAX_ECCENTRICITY), 3)


def calculate_orbital_period(distance: float, primary_mass: float, satellite_mass: float) -> float:
    """Orbital period in days from Kepler's third law.

    Args:
        distance: Semi-major axis in AU
        primary_mass: Mass of the primary in solar masses
        satellite_mass: Mass of the satellite in solar masses

    Returns:
        The period in days, 0 when both masses are 0

    Examples:
        >>> round(calculate_orbital_period(1.0, 1.0, 0.0), 3)
        365.256
    """
    total_mass = primary_mass + satellite_mass
    if total_mass <= 0:
        return 0.0
    return math.sqrt(distance**3 / total_mass) * DAYS_IN_A_YEAR


def get_point_mass(points: List[OrbitalPoint], point: OrbitalPoint) -> float:
    """Mass of a point's occupant in solar masses.

    A void point weighs as much as all its satellites.
    """
    obj = point.object
    if isinstance(obj, Star):
        return obj.mass
    elif isinstance(obj, CelestialBody):
        return earth_masses_to_solar_masses(obj.mass)
    elif isinstance(obj, EmptyPoint):
        return sum(
            get_point_mass(points, find_point(points, sat_id)) for sat_id in point.satellite_ids
        )
    elif isinstance(obj, (CelestialDisk, CelestialRing, Spacecraft)):
        return 0.0
    raise TypeError(f"Unknown astronomical object: {obj!r}")


def _distance_from_center(
    points: List[OrbitalPoint], point: OrbitalPoint, known: Dict[int, float], visiting: set
) -> float:
    if point.id in known:
        return known[point.id]
    if point.id in visiting:
        raise InvariantViolation(f"Orbital point #{point.id} is part of a primary cycle")
    visiting.add(point.id)
    if point.primary_id is None:
        distance = 0.0
    else:
        primary = find_point(points, point.primary_id)
        own = point.own_orbit.average_distance if point.own_orbit else 0.0
        distance = _distance_from_center(points, primary, known, visiting) + own
    known[point.id] = distance
    return distance


def update_distances_from_system_center(points: List[OrbitalPoint]):
    """Recompute every committed orbit's distance from the system's center.

    Raises:
        InvariantViolation: If a primary reference is dangling or cyclic
    """
    known: Dict[int, float] = {}
    for point in points:
        distance = _distance_from_center(points, point, known, set())
        if point.own_orbit is not None:
            point.own_orbit.average_distance_from_system_center = distance


def commit_orbits(
    points: List[OrbitalPoint],
    planned: Dict[int, PlannedOrbit],
    seed: str,
    step: str,
    finalize: Optional[Finalizer] = None,
):
    """Build the orbits of planned points and replace stubs with final objects.

    Algorithm:
    1. Every uncommitted point with a planned orbit gets an Orbit: its
       eccentricity (rolled on ``{step}_{id}_ect`` unless forced), min and
       max separation, and period around its primary
    2. Distances from the system center are recomputed along primary chains
    3. Satellite lists of the orbits are refreshed from the points
    4. Stub occupants are replaced by ``finalize(point, points)``, keeping
       their point id and receiving the point's orbit

    Committing twice changes nothing.

    Args:
        points: The system's arena, modified in place
        planned: Planned orbit of each point, by point id
        seed: Generation seed
        step: Step prefix of the eccentricity rolls
        finalize: Builds the final object of a stub

    Raises:
        InvariantViolation: If a planned point has no primary, or a reference
            can't be resolved
    """
    for point in points:
        plan = planned.get(point.id)
        if plan is None or point.own_orbit is not None:
            continue
        if point.primary_id is None:
            raise InvariantViolation(f"Orbital point #{point.id} has an orbit but no primary")
        primary = find_point(points, point.primary_id)
        if plan.eccentricity is not None:
            eccentricity = plan.eccentricity
        else:
            rng = SeededDiceRoller(seed, f"{step}_{point.id}_ect")
            eccentricity = calculate_eccentricity(rng, plan.eccentricity_modifier)
        period = calculate_orbital_period(
            plan.distance, get_point_mass(points, primary), get_point_mass(points, point)
        )
        point.own_orbit = Orbit(
            primary_body_id=primary.id,
            zone=plan.zone,
            average_distance=plan.distance,
            min_separation=(1 - eccentricity) * plan.distance,
            max_separation=(1 + eccentricity) * plan.distance,
            average_distance_from_system_center=0.0,
            eccentricity=eccentricity,
            orbital_period=period,
        )
        if not isinstance(point.object, EmptyPoint):
            point.object.orbit = point.own_orbit

    update_distances_from_system_center(points)
    for point in points:
        if point.own_orbit is not None:
            point.own_orbit.satellite_ids = list(point.satellite_ids)

    if finalize is None:
        return
    for point in list(points):
        obj = point.object
        if isinstance(obj, (CelestialBody, CelestialDisk, CelestialRing)) and obj.stub:
            if point.own_orbit is None:
                continue
            final = finalize(point, points)
            if not isinstance(final, EmptyPoint):
                final.orbital_point_id = point.id
                final.orbit = point.own_orbit
            point.object = final
            logger.debug(f"Finalized orbital point {point}")


def validate_orbital_graph(points: List[OrbitalPoint]):
    """Check that ids are unique and every reference resolves both ways.

    Raises:
        InvariantViolation: On the first broken invariant found
    """
    ids = [point.id for point in points]
    if len(ids) != len(set(ids)):
        raise InvariantViolation(f"Duplicate orbital point ids in {sorted(ids)}")
    by_id = {point.id: point for point in points}
    for point in points:
        if point.primary_id is not None:
            primary = by_id.get(point.primary_id)
            if primary is None:
                raise InvariantViolation(
                    f"Orbital point #{point.id} orbits unknown point #{point.primary_id}"
                )
            if point.id not in primary.satellite_ids:
                raise InvariantViolation(
                    f"Orbital point #{point.id} is missing from its primary's satellites"
                )
        for sat_id in point.satellite_ids:
            satellite = by_id.get(sat_id)
            if satellite is None:
                raise InvariantViolation(
                    f"Orbital point #{point.id} lists unknown satellite #{sat_id}"
                )
            if satellite.primary_id != point.id:
                raise InvariantViolation(
                    f"Satellite #{sat_id} of #{point.id} does not orbit it"
                )
