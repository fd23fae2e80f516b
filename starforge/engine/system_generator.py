"""Star system generation.

A system is generated in stages over a single arena of orbital points: its
stars, the binary pairs they dance in around void barycentres, their zones,
then the bodies orbiting each star. When only interesting systems are
wanted, the whole system is generated again with a new attempt number until
it holds a world with liquid water.
"""

import logging
from typing import Dict, List, Tuple

from ..models import (
    CelestialBody,
    CelestialBodyWorldType,
    EmptyPoint,
    GalacticHex,
    GalacticMapDivision,
    Galaxy,
    IcyDetails,
    OrbitalPoint,
    SpaceCoordinates,
    Star,
    StarSystem,
    TelluricDetails,
    ZoneType,
)
from ..utils import (
    InvariantViolation,
    RollToProcess,
    SeededDiceRoller,
    solar_radii_to_astronomical_units,
)
from ..utils.naming import OUR_SYSTEM_NAME, pick_system_name
from .body_generator import generate_bodies
from .orbital_graph import (
    PlannedOrbit,
    add_orbital_point,
    commit_orbits,
    set_primary,
    validate_orbital_graph,
)
from .star_generator import generate_star, generate_stellar_evolution
from .zones import generate_star_zones

logger = logging.getLogger(__name__)

# Number of stars in a system -> weight
STARS_PER_SYSTEM_WEIGHTS = (
    (1, 400),
    (2, 280),
    (3, 120),
    (4, 32),
    (5, 20),
    (6, 12),
    (7, 4),
    (8, 2),
    (9, 1),
)

# Smallest distance in AU between a new companion and the pair it joins
MIN_COMPANION_DISTANCE = 0.005

INTERESTING_WORLD_TYPES = (CelestialBodyWorldType.TERRESTRIAL, CelestialBodyWorldType.OCEAN)


def generate_system(
    galaxy: Galaxy,
    hex_: GalacticHex,
    coord: SpaceCoordinates,
    system_index: int,
    divisions: List[GalacticMapDivision],
) -> StarSystem:
    """Generate the ``system_index``-th star system of a hex.

    Args:
        galaxy: Galaxy the system is in
        hex_: Hex holding the system
        coord: Coordinates of the system
        system_index: Index of the system in its hex
        divisions: Every division enclosing the system, level 0 first

    Returns:
        The generated StarSystem, its orbits committed and its graph valid

    Raises:
        InvariantViolation: If the generated orbital graph is inconsistent
    """
    settings = galaxy.settings
    name = generate_system_name(galaxy, coord, system_index)
    max_tries = settings.system.max_generation_tries if settings.system.only_interesting else 1

    system = None
    for attempt in range(max_tries):
        points: List[OrbitalPoint] = []
        stars = generate_stars(galaxy, hex_, coord, system_index, name, divisions, attempt)
        center_id, main_star_id = generate_binary_relations(
            galaxy, stars, points, coord, system_index, attempt
        )
        generate_star_zones(points)
        generate_bodies(galaxy, points, coord, system_index, attempt)
        validate_orbital_graph(points)
        system = StarSystem(name, center_id, main_star_id, points)
        if not settings.system.only_interesting or is_interesting(system):
            logger.debug(f"Generated {system} at {coord} after {attempt + 1} attempt(s)")
            return system

    logger.warning(
        f"No interesting system at {coord} #{system_index} in {max_tries} attempts, "
        f"keeping the last one"
    )
    return system


def generate_system_name(galaxy: Galaxy, coord: SpaceCoordinates, system_index: int) -> str:
    settings = galaxy.settings
    if settings.system.use_ours or settings.star.use_ours:
        return OUR_SYSTEM_NAME
    return pick_system_name(SeededDiceRoller(galaxy.seed, f"sys_{coord}_{system_index}_ste_evo"))


def generate_number_of_stars(
    galaxy: Galaxy, coord: SpaceCoordinates, system_index: int, attempt: int = 0
) -> int:
    rng = SeededDiceRoller(f"{attempt}{galaxy.seed}", f"sys_{coord}_{system_index}_ste_evo")
    return rng.get_result(RollToProcess.simple(STARS_PER_SYSTEM_WEIGHTS))


def generate_stars(
    galaxy: Galaxy,
    hex_: GalacticHex,
    coord: SpaceCoordinates,
    system_index: int,
    system_name: str,
    divisions: List[GalacticMapDivision],
    attempt: int = 0,
) -> List[Star]:
    """Generate every star of a system, in star index order.

    Raises:
        InvariantViolation: If no level 1 division is among ``divisions``
    """
    sub_sector = next((d for d in divisions if d.level == 1), None)
    if sub_sector is None:
        raise InvariantViolation(f"No sub-sector encloses the system at {coord}")
    stars = []
    for star_index in range(generate_number_of_stars(galaxy, coord, system_index, attempt)):
        population = generate_stellar_evolution(
            galaxy, hex_, coord, system_index, star_index, sub_sector, divisions, attempt
        )
        stars.append(
            generate_star(
                galaxy, hex_, coord, system_index, star_index, system_name, population, attempt
            )
        )
    return stars


def generate_distance_between_stars(min_distance: float, rng: SeededDiceRoller) -> float:
    """Distance in AU between the two members of a binary pair.

    A 3d6 roll picks a very close, close, moderate, wide or distant range,
    each starting beyond a multiple of the minimum distance.

    Examples:
        >>> d = generate_distance_between_stars(0.01, SeededDiceRoller("seed", "step"))
        >>> 0.01 <= d <= 60.0 + 600.0
        True
    """
    if min_distance < 0.5:
        multiplied = min_distance * 6000.0
    elif min_distance < 2.5:
        multiplied = min_distance * 600.0
    elif min_distance < 10.0:
        multiplied = min_distance * 60.0
    elif min_distance < 25.0:
        multiplied = min_distance * 10.0
    else:
        multiplied = min_distance * 2.0
    low, high = rng.get_result(
        RollToProcess.prepared_roll(
            [
                ((min_distance if min_distance < 15.0 else multiplied, multiplied + 0.48), 3),
                ((multiplied + 0.48, multiplied + 6.0), 3),
                ((multiplied + 6.0, multiplied + 72.0), 3),
                ((multiplied + 72.0, multiplied + 120.0), 2),
                ((multiplied + 120.0, multiplied + 600.0), 3),
            ],
            3,
            6,
        )
    )
    return rng.gen_range(low, high)


class PairMember:
    """A star or a whole binary pair, seen as a single mass in a larger pair."""

    def __init__(self, point_id: int, mass: float, radius: float):
        self.point_id = point_id
        self.mass = mass
        self.radius = radius  # AU, including the pair's own orbits


def make_binary_pair(
    points: List[OrbitalPoint],
    planned: Dict[int, PlannedOrbit],
    first: PairMember,
    second: PairMember,
    min_distance: float,
    rng: SeededDiceRoller,
) -> Tuple[PairMember, float]:
    """Make two members orbit a new void barycentre.

    Both members orbit on circular orbits of the forbidden zone, the
    heavier one closest to the barycentre.

    Returns:
        The pair as a new member and the distance taken by the whole pair
    """
    heavier, lighter = (first, second) if first.mass >= second.mass else (second, first)
    barycentre = add_orbital_point(points, EmptyPoint())
    set_primary(points, heavier.point_id, barycentre.id)
    set_primary(points, lighter.point_id, barycentre.id)

    distance = generate_distance_between_stars(min_distance, rng)
    heavier_distance = distance * lighter.mass / (heavier.mass + lighter.mass)
    lighter_distance = distance - heavier_distance
    planned[heavier.point_id] = PlannedOrbit(heavier_distance, ZoneType.FORBIDDEN_ZONE, eccentricity=0.0)
    planned[lighter.point_id] = PlannedOrbit(lighter_distance, ZoneType.FORBIDDEN_ZONE, eccentricity=0.0)

    heavier_extent = heavier.radius + heavier_distance
    lighter_extent = lighter.radius + lighter_distance
    pair = PairMember(
        barycentre.id, heavier.mass + lighter.mass, max(heavier_extent, lighter_extent)
    )
    return pair, heavier_extent + lighter_extent


def generate_binary_relations(
    galaxy: Galaxy,
    stars: List[Star],
    points: List[OrbitalPoint],
    coord: SpaceCoordinates,
    system_index: int,
    attempt: int = 0,
) -> Tuple[int, int]:
    """Add the stars to the arena and organize them in nested binary pairs.

    The most massive star starts as the center. Each turn, either a single
    star or a new pair of stars joins the center in a binary pair, whose
    barycentre becomes the new center.

    Args:
        galaxy: Galaxy the system is in
        stars: The system's stars, at least one
        points: The system's empty arena, filled in place
        coord: Coordinates of the system
        system_index: Index of the system in its hex
        attempt: System generation attempt

    Returns:
        The ids of the system's center and of its most massive star

    Raises:
        InvariantViolation: If there is no star
    """
    if not stars:
        raise InvariantViolation(f"System {system_index} at {coord} has no star")
    seed = f"{attempt}{galaxy.seed}"
    prefix = f"sys_{coord}_{system_index}"
    rng = SeededDiceRoller(seed, f"{prefix}_bin_rel")

    remaining = sorted(stars, key=lambda s: s.mass, reverse=True)
    number_of_stars = len(remaining)

    def add_star(star: Star) -> PairMember:
        point = add_orbital_point(points, star)
        return PairMember(point.id, star.mass, solar_radii_to_astronomical_units(star.radius))

    center = add_star(remaining.pop(0))
    main_star_id = center.point_id
    planned: Dict[int, PlannedOrbit] = {}
    previous_distance = MIN_COMPANION_DISTANCE
    first_turn = True
    pair_number = 0

    while remaining:
        if len(remaining) > 1 and (
            rng.gen_u8() % 7 != 0
            or (not first_turn and number_of_stars % 2 == 0 and rng.gen_u8() % 5 != 0)
        ):
            first = add_star(remaining.pop(0))
            second = add_star(remaining.pop(0))
            pair_rng = SeededDiceRoller(seed, f"{prefix}_pair{pair_number}_dist")
            companion, _ = make_binary_pair(
                points, planned, first, second, first.radius + second.radius, pair_rng
            )
            pair_number += 1
        else:
            companion = add_star(remaining.pop(0))
        pair_rng = SeededDiceRoller(seed, f"{prefix}_pair{pair_number}_dist")
        center, previous_distance = make_binary_pair(
            points, planned, center, companion, previous_distance, pair_rng
        )
        pair_number += 1
        first_turn = False

    commit_orbits(points, planned, seed, f"{prefix}_str")
    logger.debug(f"{number_of_stars} star(s) at {coord} arranged in {pair_number} pair(s)")
    return center.point_id, main_star_id


def is_interesting(system: StarSystem) -> bool:
    """Whether a system holds a terrestrial or ocean world."""
    for point in system.all_objects:
        body = point.object
        if isinstance(body, CelestialBody) and isinstance(body.details, (TelluricDetails, IcyDetails)):
            if body.details.world_type in INTERESTING_WORLD_TYPES:
                return True
    return False
