"""Planets, belts, disks and rings of a star system.

Bodies are generated in two passes over the system's orbital graph. The
planning pass works star by star: it rolls how many major bodies the star
has and where its gas giants ended up, lays out the star's orbits, and adds
a stub for every populated orbit. Orbits are then committed for the whole
system and every stub is finalized with the properties only a placed body
can have, such as its blackbody temperature. Gas giants may add a ring stub
of their own, committed in a second pass.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..models import (
    BeltDisk,
    CelestialBody,
    CelestialBodyComposition,
    CelestialBodySize,
    CelestialBodyWorldType,
    CelestialDisk,
    CelestialRing,
    Galaxy,
    GaseousDetails,
    GasGiantArrangement,
    IcyDetails,
    IcyRing,
    OrbitalPoint,
    ProtoplanetaryDisk,
    RingDisk,
    ShellDisk,
    SpaceCoordinates,
    Star,
    StarZone,
    StellarEvolution,
    TelluricDetails,
    TelluricRing,
    ZoneType,
)
from ..utils import InvariantViolation, RollToProcess, SeededDiceRoller
from ..utils.constants import (
    BLACKBODY_TEMPERATURE_FACTOR,
    EARTH_DENSITY,
    EARTH_MASS_G,
    EARTH_RADIUS_CM,
    EARTH_RADIUS_IN_AU,
    MIN_ORBIT_SEPARATION,
)
from ..utils.naming import get_body_name
from .orbital_graph import PlannedOrbit, add_orbital_point, commit_orbits, find_point
from .zones import collect_system_zones

logger = logging.getLogger(__name__)

# Ratio between two consecutive orbits
ORBIT_MULTIPLIERS = ((1.4, 1), (1.5, 7), (1.6, 16), (1.7, 48), (1.8, 16), (1.9, 7), (2.0, 1))

# (arrangement, base weight), None meaning no gas giant
GAS_GIANT_ARRANGEMENT_WEIGHTS = (
    (None, 50),
    (GasGiantArrangement.CONVENTIONAL, 30),
    (GasGiantArrangement.ECCENTRIC, 15),
    (GasGiantArrangement.EPISTELLAR, 5),
)

# Modifiers to the weights above, in the same order
ARRANGEMENT_MODIFIERS_BY_LETTER = {
    "M": (19, -10, -5, -4),
    "G": (-20, 20, 0, 0),
    "A": (20, 0, 20, -20),
    "B": (20, 0, 20, -20),
    "O": (20, 0, 20, -20),
    "WR": (20, 0, 20, -20),
    "XBH": (37, -25, -12, -100),
    "XNS": (37, -25, -12, -100),
    "L": (0, 10, 0, -5),
    "T": (0, 10, 0, -5),
    "Y": (0, 10, 0, -5),
}
WHITE_DWARF_ARRANGEMENT_MODIFIERS = (10, 0, 20, -10)
ARRANGEMENT_MODIFIERS_BY_POPULATION = {
    StellarEvolution.PALEODWARF: (45, -28, -13, -8),
    StellarEvolution.SUBDWARF: (14, -17, 10, -7),
    StellarEvolution.DWARF: (0, 10, 0, 0),
    StellarEvolution.SUPERDWARF: (0, 10, 0, 0),
    StellarEvolution.HYPERDWARF: (-35, 20, 10, 5),
}

NUMBER_OF_BODIES_POPULATION_MODIFIERS = {
    StellarEvolution.PALEODWARF: -10,
    StellarEvolution.SUBDWARF: -5,
    StellarEvolution.DWARF: 0,
    StellarEvolution.SUPERDWARF: 5,
    StellarEvolution.HYPERDWARF: 10,
}

# Eccentricity roll modifier of every body around a star, by arrangement
ECCENTRICITY_MODIFIERS = {
    None: 0,
    GasGiantArrangement.CONVENTIONAL: -6,
    GasGiantArrangement.ECCENTRIC: 4,
    GasGiantArrangement.EPISTELLAR: -6,
}

# (composition, weight, do_not_generate_* flag)
INNER_BODY_TYPE_WEIGHTS = (
    (CelestialBodyComposition.METALLIC, 2, "do_not_generate_metallic"),
    (CelestialBodyComposition.ROCKY, 6, "do_not_generate_rocky"),
    (CelestialBodyComposition.ICY, 2, "do_not_generate_icy"),
    (CelestialBodyComposition.GASEOUS, 1, "do_not_generate_gaseous"),
)
OUTER_BODY_TYPE_WEIGHTS = (
    (CelestialBodyComposition.METALLIC, 1, "do_not_generate_metallic"),
    (CelestialBodyComposition.ROCKY, 3, "do_not_generate_rocky"),
    (CelestialBodyComposition.ICY, 6, "do_not_generate_icy"),
    (CelestialBodyComposition.GASEOUS, 6, "do_not_generate_gaseous"),
)

# Size of solid bodies: radius constraint range, in arbitrary units
SIZE_CONSTRAINTS = {
    CelestialBodySize.LARGE: (0.065, 0.0915),
    CelestialBodySize.STANDARD: (0.030, 0.065),
    CelestialBodySize.SMALL: (0.024, 0.030),
    CelestialBodySize.TINY: (0.004, 0.024),
    CelestialBodySize.PUNY: (0.000003, 0.004),
}
SIZES_LARGEST_FIRST = tuple(CelestialBodySize)

# 1d400 + size modifier -> belt or (min density, max density, size)
# Rows are (highest roll, outcome), the last row catching everything above
ROCKY_SIZE_TABLE = (
    (21, BeltDisk(CelestialBodyComposition.ROCKY)),  # Debris
    (86, BeltDisk(CelestialBodyComposition.ROCKY)),  # Asteroids
    (96, BeltDisk(CelestialBodyComposition.ROCKY)),  # Ash
    (161, (3.3, 5.5, CelestialBodySize.TINY)),  # Rock dwarf
    (163, (3.0, 4.5, CelestialBodySize.TINY)),  # Coreless rock dwarf
    (235, (3.3, 5.5, CelestialBodySize.SMALL)),
    (237, (3.0, 4.5, CelestialBodySize.SMALL)),
    (240, (3.0, 4.5, CelestialBodySize.STANDARD)),  # Coreless rock planet
    (318, (4.4, 6.2, CelestialBodySize.STANDARD)),  # Rock planet
    (None, (4.9, 7.0, CelestialBodySize.LARGE)),  # Rock giant
)
METALLIC_SIZE_TABLE = (
    (61, BeltDisk(CelestialBodyComposition.METALLIC)),  # Dust
    (131, BeltDisk(CelestialBodyComposition.METALLIC)),  # Meteoroids
    (141, BeltDisk(CelestialBodyComposition.METALLIC)),  # Ore
    (221, (5.0, 7.0, CelestialBodySize.TINY)),
    (301, (7.0, 15.0, CelestialBodySize.TINY)),  # Solid metal dwarf
    (311, (6.0, 8.0, CelestialBodySize.SMALL)),
    (321, (7.0, 15.0, CelestialBodySize.SMALL)),
    (391, (6.0, 8.0, CelestialBodySize.STANDARD)),  # Metal planet
    (393, (7.0, 15.0, CelestialBodySize.STANDARD)),  # Solid metal planet
    (None, (6.0, 9.0, CelestialBodySize.LARGE)),  # Metal giant
)
ICY_SIZE_TABLE = (
    (21, BeltDisk(CelestialBodyComposition.ICY)),  # Frost
    (61, BeltDisk(CelestialBodyComposition.ICY)),  # Comets
    (65, ShellDisk()),  # Comet cloud
    (105, (1.0, 1.83, CelestialBodySize.TINY)),  # Coreless ice dwarf
    (135, (1.63, 2.6, CelestialBodySize.TINY)),  # Ice dwarf
    (140, (1.0, 1.5, CelestialBodySize.SMALL)),
    (170, (1.5, 3.9, CelestialBodySize.SMALL)),
    (175, (1.0, 1.5, CelestialBodySize.STANDARD)),  # Coreless ice planet
    (None, (1.5, 5.5, CelestialBodySize.STANDARD)),  # Ice planet
)
# Beyond the snow line, icy rolls above 255 give ice giants
ICE_GIANT_SIZE_TABLE = (
    (305, (1.2, 1.6, CelestialBodySize.LARGE)),
    (None, (0.6, 1.3, CelestialBodySize.LARGE)),
)
ICE_GIANT_MIN_ROLL = 256

# Gas giant mass in Earth masses -> density in g/cm³, by decreasing mass
MASS_TO_DENSITY_DATASET = (
    (25440.0, 60.0),
    (4131.0, 6.0),
    (4000.0, 8.82),
    (3500.0, 7.72),
    (3000.0, 6.62),
    (2500.0, 5.51),
    (2000.0, 4.41),
    (1500.0, 3.3),
    (1000.0, 2.2),
    (800.0, 1.93),
    (600.0, 1.7),
    (500.0, 1.6),
    (450.0, 1.49),
    (400.0, 1.43),
    (350.0, 1.38),
    (300.0, 1.32),
    (250.0, 1.21),
    (200.0, 1.1),
    (150.0, 1.05),
    (100.0, 0.99),
    (80.0, 0.94),
    (40.0, 0.94),
    (30.0, 1.05),
    (20.0, 1.21),
    (15.0, 1.43),
    (10.0, 2.31),
    (0.0, 0.687),
)

RING_DISTANCE_IN_PLANET_RADII = 2.5
MIN_MOONLETS_FOR_RING = 4
MAX_TELLURIC_MASS = 10.0  # Earth masses
MAX_TELLURIC_TRIES = 1000


@dataclass
class BodyPlan:
    """What the stub of an orbital point will turn into."""

    star_point_id: int
    orbit_index: int
    populated_index: int
    composition: Optional[CelestialBodyComposition]
    arrangement: Optional[GasGiantArrangement] = None
    proto_giant: bool = False
    disk_only: bool = False


@dataclass
class StarOrbit:
    """A possible orbit around a star, before anything is placed on it."""

    distance: float  # AU from the star
    distance_from_center: float
    zone: ZoneType
    proto_giant: bool = False


def generate_bodies(
    galaxy: Galaxy,
    points: List[OrbitalPoint],
    coord: SpaceCoordinates,
    system_index: int,
    attempt: int = 0,
):
    """Populate every star of a system with bodies, disks and rings.

    Star orbits and zones must be committed already. The arena is modified
    in place and ends with every orbit committed and no stub left.

    Args:
        galaxy: Galaxy the system is in
        points: The system's arena
        coord: Coordinates of the system
        system_index: Index of the system in its hex
        attempt: System generation attempt, part of every seed
    """
    seed = f"{attempt}{galaxy.seed}"
    system_zones = collect_system_zones(points)
    plans: Dict[int, BodyPlan] = {}
    planned: Dict[int, PlannedOrbit] = {}

    star_points = [p for p in points if isinstance(p.object, Star)]
    for star_point in star_points:
        plan_star_bodies(
            galaxy, points, star_point, system_zones, coord, system_index, seed, plans, planned
        )

    rings: Dict[int, PlannedOrbit] = {}
    finalizer = BodyFinalizer(plans, rings, coord, system_index, seed, system_zones)
    commit_orbits(points, planned, seed, f"sys_{coord}_{system_index}_bdy", finalizer.finalize)
    if rings:
        commit_orbits(points, rings, seed, f"sys_{coord}_{system_index}_rng", finalize_ring)
    logger.debug(
        f"System {system_index} at {coord}: {len(plans)} bodies and {len(rings)} rings placed"
    )


def plan_star_bodies(
    galaxy: Galaxy,
    points: List[OrbitalPoint],
    star_point: OrbitalPoint,
    system_zones: List[StarZone],
    coord: SpaceCoordinates,
    system_index: int,
    seed: str,
    plans: Dict[int, BodyPlan],
    planned: Dict[int, PlannedOrbit],
):
    """Lay out the orbits of one star and add a stub on each populated one.

    Algorithm:
    1. Roll the number of major bodies and the gas giant arrangement
    2. Pick a reference orbit, replaced by the proto gas giant's orbit when
       the arrangement places one outside of a forbidden zone
    3. Walk orbits inward then outward from the reference, keeping those
       landing in an inner, bio or outer zone of the system
    4. Visit orbits from the star outward; each spawns a body with a chance
       proportional to the number of bodies left, its composition rolled
       from the zone's weights
    """
    star = star_point.object
    prefix = f"sys_{coord}_{system_index}_str_{star_point.id}"
    bodies_left, disk_only = generate_number_of_bodies(star, seed, prefix)
    arrangement = generate_gas_giant_arrangement(bodies_left, disk_only, star, seed, prefix)
    eccentricity_modifier = ECCENTRICITY_MODIFIERS[arrangement]
    initial_bodies = bodies_left
    center_offset = (
        star_point.own_orbit.average_distance_from_system_center if star_point.own_orbit else 0.0
    )

    reference = generate_reference_orbit_radius(star, seed, f"{prefix}_bdy{bodies_left}_loc")
    orbits: List[StarOrbit] = []
    proto_position = generate_proto_gas_giant_position(arrangement, star, seed, prefix)
    if proto_position is not None:
        zone = find_system_zone(system_zones, proto_position + center_offset)
        if zone is not None and zone.zone_type != ZoneType.FORBIDDEN_ZONE:
            reference = proto_position
            orbits.append(
                StarOrbit(proto_position, proto_position + center_offset, zone.zone_type, True)
            )
            bodies_left -= 2 if arrangement == GasGiantArrangement.EPISTELLAR else 1

    if reference > 0:
        orbits.extend(
            generate_orbits(system_zones, reference, center_offset, seed, f"{prefix}_orbt_loc")
        )
    orbits.sort(key=lambda o: o.distance)

    if disk_only:
        zone = find_system_zone(system_zones, reference + center_offset)
        if reference > 0 and zone is not None and zone.zone_type != ZoneType.FORBIDDEN_ZONE:
            disk = CelestialDisk(star.name, 0, ProtoplanetaryDisk(), stub=True)
            point = add_orbital_point(points, disk, star_point.id)
            plans[point.id] = BodyPlan(star_point.id, -1, -1, None, disk_only=True)
            planned[point.id] = PlannedOrbit(reference, zone.zone_type, eccentricity_modifier)

    if not orbits or initial_bodies == 0:
        logger.debug(f"No body to place around {star.name}")
        return
    spawn_chances = int(initial_bodies / len(orbits) * 100)

    gas_giant_indexes = [i for i, o in enumerate(orbits) if o.proto_giant]
    populated_index = 0
    for index, orbit in enumerate(orbits):
        if orbit.proto_giant:
            composition = CelestialBodyComposition.GASEOUS
        else:
            rng = SeededDiceRoller(seed, f"{prefix}_bdy{bodies_left}_orbit{index}_gen")
            if bodies_left <= 0 or not should_spawn(rng, spawn_chances):
                continue
            composition = generate_body_type(
                rng, galaxy, orbit.zone, allow_gaseous=can_form_gas_giant(arrangement, orbit.zone)
            )
            if composition is None:
                continue
            if composition == CelestialBodyComposition.GASEOUS and should_skip_gaseous_body(
                orbit, index, orbits, gas_giant_indexes
            ):
                continue
            bodies_left -= 1
            if composition == CelestialBodyComposition.GASEOUS:
                gas_giant_indexes.append(index)
                if orbit.zone in (ZoneType.INNER_ZONE, ZoneType.BIO_ZONE):
                    bodies_left -= 1

        stub = make_stub(composition, arrangement)
        point = add_orbital_point(points, stub, star_point.id)
        plans[point.id] = BodyPlan(
            star_point.id,
            index,
            populated_index,
            composition,
            arrangement,
            proto_giant=orbit.proto_giant,
        )
        planned[point.id] = PlannedOrbit(orbit.distance, orbit.zone, eccentricity_modifier)
        populated_index += 1

    logger.debug(
        f"{star.name}: {populated_index} of {len(orbits)} orbits populated, "
        f"gas giants {arrangement.value if arrangement else 'absent'}"
    )


def make_stub(
    composition: CelestialBodyComposition, arrangement: Optional[GasGiantArrangement]
) -> CelestialBody:
    """Placeholder body of a composition, finalized once its orbit is known."""
    if composition == CelestialBodyComposition.GASEOUS:
        details = GaseousDetails(arrangement or GasGiantArrangement.CONVENTIONAL)
    elif composition == CelestialBodyComposition.ICY:
        details = IcyDetails(CelestialBodyWorldType.ICE)
    else:
        details = TelluricDetails(composition, CelestialBodyWorldType.ROCK)
    return CelestialBody("", 0, details, CelestialBodySize.PUNY, stub=True)


def find_system_zone(zones: List[StarZone], distance: float) -> Optional[StarZone]:
    """The system zone a distance from the center falls in, both bounds included."""
    return next((z for z in zones if z.start <= distance <= z.end), None)


def generate_number_of_bodies(star: Star, seed: str, prefix: str) -> Tuple[int, bool]:
    """Number of major bodies around a star, and whether it only has a disk.

    Rolls 2d8 on a table of empty, disk only, small, standard and large
    systems. Young, metal poor, very light or very heavy stars have fewer
    bodies.

    Returns:
        The number of major bodies and True for a disk only system
    """
    rng = SeededDiceRoller(seed, f"{prefix}_nbr_bdy")
    modifier = NUMBER_OF_BODIES_POPULATION_MODIFIERS[star.population]
    age_in_gyr = star.age / 1000
    if age_in_gyr < 0.1:
        modifier += int(-15.0 + age_in_gyr * 150.0)
    if star.mass < 0.08:
        modifier -= 5
    elif star.mass > 4.0:
        modifier += int(-star.mass * 0.2)

    results = [
        0,
        0 if rng.roll(1, 8) == 1 else 1,
        rng.roll(1, 4, 2),
        rng.roll(1, 4, 5),
        rng.roll(1, 4, 10),
    ]
    index = rng.get_result_index(
        RollToProcess.prepared_roll(
            [(result, weight) for result, weight in zip(results, (2, 2, 4, 7, 2))], 2, 8, modifier
        )
    )
    if (index == 3 and results[index] == 9) or (index == 4 and results[index] == 14):
        results[index] += rng.roll(1, 4)
    return results[index], index == 1


def generate_gas_giant_arrangement(
    number_of_bodies: int, disk_only: bool, star: Star, seed: str, prefix: str
) -> Optional[GasGiantArrangement]:
    """Where the star's gas giants migrated to, None when it has none.

    Examples:
        >>> from starforge.models import StarLuminosityClass, StarSpectralType
        >>> sun = Star("Sun", 1.0, 1.0, 1.0, 4600.0, 5778, StellarEvolution.DWARF,
        ...            StarSpectralType("G", 2), StarLuminosityClass.V)
        >>> generate_gas_giant_arrangement(0, False, sun, "seed", "step") is None
        True
    """
    if number_of_bodies == 0 or disk_only:
        return None
    spectral_type = star.spectral_type
    if spectral_type.is_white_dwarf:
        type_modifiers = WHITE_DWARF_ARRANGEMENT_MODIFIERS
    else:
        type_modifiers = ARRANGEMENT_MODIFIERS_BY_LETTER.get(spectral_type.letter, (0, 0, 0, 0))
    population_modifiers = ARRANGEMENT_MODIFIERS_BY_POPULATION[star.population]
    rows = [
        (arrangement, max(weight + type_mod + population_mod, 0))
        for (arrangement, weight), type_mod, population_mod in zip(
            GAS_GIANT_ARRANGEMENT_WEIGHTS, type_modifiers, population_modifiers
        )
    ]
    return SeededDiceRoller(seed, f"{prefix}_gas_arr").get_result(RollToProcess.simple(rows))


def get_star_zone_edge(star: Star, zone_type: ZoneType, end: bool = False) -> Optional[float]:
    zone = next((z for z in star.zones if z.zone_type == zone_type), None)
    if zone is None:
        return None
    return zone.end if end else zone.start


def generate_proto_gas_giant_position(
    arrangement: Optional[GasGiantArrangement], star: Star, seed: str, prefix: str
) -> Optional[float]:
    """Distance from the star of the first gas giant to form, if any.

    Conventional giants sit just beyond the snow line, eccentric ones
    anywhere from well inside it to well beyond it, and epistellar ones
    just outside the star's corona.
    """
    rng = SeededDiceRoller(seed, f"{prefix}_gas_pos")
    if arrangement == GasGiantArrangement.CONVENTIONAL:
        snow_line = get_star_zone_edge(star, ZoneType.OUTER_ZONE)
        if snow_line is None:
            return None
        return rng.roll(2, 6, -2) * 0.05 + snow_line
    elif arrangement == GasGiantArrangement.ECCENTRIC:
        snow_line = get_star_zone_edge(star, ZoneType.OUTER_ZONE)
        if snow_line is None:
            return None
        return rng.roll(2, 6) * 0.125 * snow_line
    elif arrangement == GasGiantArrangement.EPISTELLAR:
        corona_end = get_star_zone_edge(star, ZoneType.CORONA, end=True)
        if corona_end is None:
            return None
        return rng.roll(3, 6) * 0.1 + corona_end
    return None


def generate_reference_orbit_radius(star: Star, seed: str, step: str) -> float:
    """Orbit every other orbit of the star is spaced from.

    It sits a little inside the end of the star's outermost zone.
    """
    rng = SeededDiceRoller(seed, step)
    ends = [z.end for z in star.zones if z.zone_type != ZoneType.FORBIDDEN_ZONE]
    if not ends:
        return 0.0
    return max(ends) / (rng.roll(1, 6) * 0.05 + 1.0)


def generate_orbits(
    system_zones: List[StarZone], reference: float, center_offset: float, seed: str, step: str
) -> List[StarOrbit]:
    """Orbits spaced by a random ratio inward then outward from ``reference``.

    Inner orbits are at least MIN_ORBIT_SEPARATION apart. Orbits landing in
    a forbidden zone are skipped. The walk in a direction stops on the first
    orbit outside of the inner, bio, outer and forbidden zones.
    """
    rng = SeededDiceRoller(seed, step)
    multipliers = RollToProcess.simple(ORBIT_MULTIPLIERS)
    orbits = []

    last = reference
    while True:
        next_orbit = last / rng.get_result(multipliers)
        if last - next_orbit < MIN_ORBIT_SEPARATION:
            next_orbit = last - MIN_ORBIT_SEPARATION + rng.roll(1, 301, -151) / 10000
        if next_orbit <= 0:
            break
        last = next_orbit
        if not place_orbit_if_possible(system_zones, orbits, next_orbit, center_offset):
            break

    last = reference
    while True:
        last = last * rng.get_result(multipliers)
        if not place_orbit_if_possible(system_zones, orbits, last, center_offset):
            break
    return orbits


def place_orbit_if_possible(
    system_zones: List[StarZone], orbits: List[StarOrbit], distance: float, center_offset: float
) -> bool:
    """Append an orbit if its zone can hold bodies.

    Returns:
        False once the walk should stop
    """
    zone = find_system_zone(system_zones, distance + center_offset)
    if zone is None:
        return False
    if zone.zone_type in (ZoneType.INNER_ZONE, ZoneType.BIO_ZONE, ZoneType.OUTER_ZONE):
        orbits.append(StarOrbit(distance, distance + center_offset, zone.zone_type))
        return True
    return zone.zone_type == ZoneType.FORBIDDEN_ZONE


def should_spawn(rng: SeededDiceRoller, spawn_chances: int) -> bool:
    """Roll whether an orbit gets a body.

    Chances above 100 always spawn and negative ones never do; others are
    raised to 10% plus 90% of their value.
    """
    if spawn_chances > 100:
        chances = 100
    elif spawn_chances < 0:
        chances = 0
    else:
        chances = 10 + int(spawn_chances * 0.9)
    return rng.get_result(RollToProcess.simple([(False, 100 - chances), (True, chances)]))


def generate_body_type(
    rng: SeededDiceRoller, galaxy: Galaxy, zone: ZoneType, allow_gaseous: bool = True
) -> Optional[CelestialBodyComposition]:
    """Composition of a new body, None when the settings forbid every composition."""
    settings = galaxy.settings.celestial_body
    table = OUTER_BODY_TYPE_WEIGHTS if zone == ZoneType.OUTER_ZONE else INNER_BODY_TYPE_WEIGHTS
    rows = []
    for composition, weight, flag in table:
        forbidden = getattr(settings, flag) or (
            composition == CelestialBodyComposition.GASEOUS and not allow_gaseous
        )
        rows.append((composition, 0 if forbidden else weight))
    if not any(weight for _, weight in rows):
        return None
    return rng.get_result(RollToProcess.simple(rows))


def can_form_gas_giant(arrangement: Optional[GasGiantArrangement], zone: ZoneType) -> bool:
    """Whether a gas giant may be rolled on an orbit of a zone.

    Stars without gas giants never get one, and conventional gas giants only
    form beyond the snow line.
    """
    if arrangement is None:
        return False
    return arrangement != GasGiantArrangement.CONVENTIONAL or zone == ZoneType.OUTER_ZONE


def should_skip_gaseous_body(
    orbit: StarOrbit, index: int, orbits: List[StarOrbit], gas_giant_indexes: List[int]
) -> bool:
    """Whether a gas giant rolled on an orbit can't stay there.

    It is skipped when gas giants already surround the orbit or one is
    closer than 0.5 AU.
    """
    inward = any(i < index for i in gas_giant_indexes)
    outward = any(i > index for i in gas_giant_indexes)
    too_close = any(abs(orbits[i].distance - orbit.distance) < 0.5 for i in gas_giant_indexes)
    return (inward and outward) or too_close


def calculate_blackbody_temperature(luminosity: float, distance: float) -> int:
    """Blackbody temperature in Kelvin of a body ``distance`` AU from a star.

    Raises:
        InvariantViolation: If the distance isn't positive

    Examples:
        >>> calculate_blackbody_temperature(1.0, 1.0)
        278
    """
    if distance <= 0:
        raise InvariantViolation(f"Cannot compute a temperature at {distance} AU")
    return round(BLACKBODY_TEMPERATURE_FACTOR * luminosity**0.25 / math.sqrt(distance))


def calculate_mass(density: float, radius: float) -> float:
    """Mass in Earth masses of a sphere of ``density`` g/cm³ and ``radius`` Earth radii.

    Examples:
        >>> round(calculate_mass(5.513, 1.0), 2)
        1.0
    """
    volume = (4.0 / 3.0) * math.pi * (radius * EARTH_RADIUS_CM) ** 3
    return density * volume / EARTH_MASS_G


def downsize(size: CelestialBodySize) -> CelestialBodySize:
    """The next smaller size, Puny staying Puny."""
    index = SIZES_LARGEST_FIRST.index(size)
    return SIZES_LARGEST_FIRST[min(index + 1, len(SIZES_LARGEST_FIRST) - 1)]


def roll_density(rng: SeededDiceRoller, min_density: float, max_density: float) -> float:
    low, high = sorted((int(min_density * 1000), int(max_density * 1000)))
    return rng.roll(1, high - low + 1, low - 1) / 1000


def generate_telluric_parameters(
    rng: SeededDiceRoller,
    min_density: float,
    max_density: float,
    size: CelestialBodySize,
    blackbody_temperature: int,
) -> Tuple[float, CelestialBodySize, float, float]:
    """Roll density, radius and mass of a solid body until its mass is plausible.

    Every hundred rejected rolls, the body is downsized by one size.

    Returns:
        Density, final size, radius and mass

    Raises:
        InvariantViolation: If no plausible body came out of MAX_TELLURIC_TRIES rolls
    """
    for tries in range(1, MAX_TELLURIC_TRIES + 1):
        density = max(roll_density(rng, min_density, max_density), 1.0)
        low, high = SIZE_CONSTRAINTS[size]
        constraint = rng.gen_range(low, high)
        radius = constraint * math.sqrt(blackbody_temperature / (density / EARTH_DENSITY))
        mass = calculate_mass(density, radius)
        if mass < MAX_TELLURIC_MASS:
            return density, size, radius, mass
        if tries % 100 == 0:
            size = downsize(size)
    raise InvariantViolation(
        f"No plausible {size.value} body at {blackbody_temperature} K "
        f"with densities {min_density}-{max_density}"
    )


def get_world_type(
    size: CelestialBodySize,
    composition: CelestialBodyComposition,
    blackbody_temperature: int,
    primary_star_mass: float,
) -> CelestialBodyWorldType:
    """Surface type of a solid world from its size and temperature."""
    icy = composition == CelestialBodyComposition.ICY
    t = blackbody_temperature
    if size in (CelestialBodySize.PUNY, CelestialBodySize.TINY):
        if t <= 140:
            return CelestialBodyWorldType.ICE if icy else CelestialBodyWorldType.DIRTY_SNOWBALL
        return CelestialBodyWorldType.ROCK
    if size == CelestialBodySize.SMALL:
        if t <= 80:
            return CelestialBodyWorldType.HADEAN
        if t <= 140:
            return CelestialBodyWorldType.ICE if icy else CelestialBodyWorldType.DIRTY_SNOWBALL
        return CelestialBodyWorldType.ROCK
    if size == CelestialBodySize.STANDARD and t <= 80:
        return CelestialBodyWorldType.HADEAN
    if 151 < t <= 230 and primary_star_mass < 0.65:
        return CelestialBodyWorldType.AMMONIA
    if t <= 240:
        return CelestialBodyWorldType.ICE if icy else CelestialBodyWorldType.DIRTY_SNOWBALL
    if t <= 320:
        if icy and size == CelestialBodySize.STANDARD:
            return CelestialBodyWorldType.OCEAN
        return CelestialBodyWorldType.TERRESTRIAL
    if t <= 500:
        return CelestialBodyWorldType.GREENHOUSE
    return CelestialBodyWorldType.CHTHONIAN


def interpolate_density(mass: float) -> float:
    """Density of a gas giant of ``mass`` Earth masses from MASS_TO_DENSITY_DATASET.

    Examples:
        >>> interpolate_density(300.0)
        1.32
    """
    if mass >= MASS_TO_DENSITY_DATASET[0][0]:
        return MASS_TO_DENSITY_DATASET[0][1]
    for (high_mass, high_density), (low_mass, low_density) in zip(
        MASS_TO_DENSITY_DATASET, MASS_TO_DENSITY_DATASET[1:]
    ):
        if low_mass <= mass <= high_mass:
            if high_mass == low_mass:
                return low_density
            fraction = (mass - low_mass) / (high_mass - low_mass)
            return low_density + fraction * (high_density - low_density)
    return MASS_TO_DENSITY_DATASET[-1][1]


def lookup_size_table(table, roll: int):
    return next(outcome for limit, outcome in table if limit is None or roll <= limit)


class BodyFinalizer:
    """Turns the stubs of a system into final bodies once their orbits are committed."""

    def __init__(
        self,
        plans: Dict[int, BodyPlan],
        rings: Dict[int, PlannedOrbit],
        coord: SpaceCoordinates,
        system_index: int,
        seed: str,
        system_zones: List[StarZone],
    ):
        self.system_zones = system_zones
        self.plans = plans
        self.rings = rings
        self.coord = coord
        self.system_index = system_index
        self.seed = seed

    def finalize(self, point: OrbitalPoint, points: List[OrbitalPoint]):
        """Final object of a stub point.

        Raises:
            InvariantViolation: If the point was never planned
        """
        plan = self.plans.get(point.id)
        if plan is None:
            raise InvariantViolation(f"Orbital point #{point.id} has a stub but no body plan")
        star = find_point(points, plan.star_point_id).object
        if plan.disk_only:
            return self.finalize_disk(point, star)
        if plan.composition == CelestialBodyComposition.GASEOUS:
            return self.finalize_gas_giant(point, points, plan, star)
        return self.finalize_solid_body(point, points, plan, star)

    def finalize_disk(self, point: OrbitalPoint, star: Star) -> CelestialDisk:
        """A star's lone disk: protoplanetary around young stars, a debris ring otherwise."""
        if star.age < 100:
            details = ProtoplanetaryDisk()
        elif point.own_orbit.zone == ZoneType.OUTER_ZONE:
            details = RingDisk(CelestialBodyComposition.ICY)
        else:
            details = RingDisk(CelestialBodyComposition.ROCKY)
        return CelestialDisk(f"{star.name} disk", point.id, details, orbit=point.own_orbit)

    def get_size_modifier(
        self,
        point: OrbitalPoint,
        points: List[OrbitalPoint],
        plan: BodyPlan,
        star: Star,
        rng: SeededDiceRoller,
    ) -> int:
        """Size roll modifier of a solid body.

        Bodies close to a forbidden zone, next to a gas giant, next to a
        change of zone or around small stars grow smaller.
        """
        distance = point.own_orbit.average_distance_from_system_center
        modifier = 0

        if any(
            zone.zone_type == ZoneType.FORBIDDEN_ZONE
            and min(abs(zone.start - distance), abs(zone.end - distance)) < 0.5
            for zone in self.system_zones
        ):
            modifier -= 120

        siblings = [
            (find_point(points, point_id), other)
            for point_id, other in self.plans.items()
            if other.star_point_id == plan.star_point_id and not other.disk_only
        ]
        giants = [
            other.orbit_index
            for _, other in siblings
            if other.composition == CelestialBodyComposition.GASEOUS
        ]
        if any(0 < i - plan.orbit_index <= 2 for i in giants):
            modifier -= 120
        if any(0 < plan.orbit_index - i <= 2 for i in giants):
            modifier -= 60
        if any(
            abs(other.orbit_index - plan.orbit_index) == 1
            and other_point.own_orbit.zone != point.own_orbit.zone
            for other_point, other in siblings
        ):
            modifier -= 60

        letter = star.spectral_type.letter
        if letter in ("A", "B", "O", "WR"):
            if rng.roll(1, 50) != 1:
                modifier -= int(star.mass * 5)
        elif letter == "F":
            modifier += 10
        elif letter == "K":
            modifier -= 10
        elif letter == "M":
            modifier -= 20
        elif letter in ("L", "T", "Y"):
            modifier -= 50
        return modifier

    def finalize_solid_body(
        self, point: OrbitalPoint, points: List[OrbitalPoint], plan: BodyPlan, star: Star
    ):
        """Final rocky, metallic or icy body, or the belt a low size roll gives."""
        rng = SeededDiceRoller(
            self.seed,
            f"sys_{self.coord}_{self.system_index}_str_{plan.star_point_id}"
            f"_orbit{plan.orbit_index}_bdy{point.id}",
        )
        name = get_body_name(star.name, plan.populated_index)
        roll = rng.roll(1, 400, self.get_size_modifier(point, points, plan, star, rng))

        if plan.composition == CelestialBodyComposition.ROCKY:
            outcome = lookup_size_table(ROCKY_SIZE_TABLE, roll)
        elif plan.composition == CelestialBodyComposition.METALLIC:
            outcome = lookup_size_table(METALLIC_SIZE_TABLE, roll)
        elif point.own_orbit.zone == ZoneType.OUTER_ZONE and roll >= ICE_GIANT_MIN_ROLL:
            outcome = lookup_size_table(ICE_GIANT_SIZE_TABLE, roll)
        else:
            outcome = lookup_size_table(ICY_SIZE_TABLE, roll)

        if isinstance(outcome, (BeltDisk, ShellDisk)):
            return CelestialDisk(name, point.id, outcome, orbit=point.own_orbit)

        min_density, max_density, size = outcome
        temperature = calculate_blackbody_temperature(
            star.luminosity, point.own_orbit.average_distance
        )
        density, size, radius, mass = generate_telluric_parameters(
            rng, min_density, max_density, size, temperature
        )
        primary_star_mass = max(p.object.mass for p in points if isinstance(p.object, Star))
        world_type = get_world_type(size, plan.composition, temperature, primary_star_mass)
        if plan.composition == CelestialBodyComposition.ICY:
            details = IcyDetails(world_type)
        else:
            details = TelluricDetails(plan.composition, world_type)
        return CelestialBody(
            name=name,
            orbital_point_id=point.id,
            details=details,
            size=size,
            mass=round(mass, 4),
            radius=round(radius, 4),
            density=density,
            gravity=round(density / EARTH_DENSITY * radius, 4),
            blackbody_temperature=temperature,
            orbit=point.own_orbit,
        )

    def finalize_gas_giant(
        self, point: OrbitalPoint, points: List[OrbitalPoint], plan: BodyPlan, star: Star
    ):
        """Final gas giant, or the gas belt a very low roll gives.

        Gas giants with enough moonlets get a ring, added as a stub orbiting
        them and planned in ``self.rings``.
        """
        prefix = f"sys_{self.coord}_{self.system_index}_str_{plan.star_point_id}_gas_bdy{point.id}"
        rng = SeededDiceRoller(self.seed, prefix)
        name = get_body_name(star.name, plan.populated_index)

        modifier = 100 if plan.proto_giant else 0
        letter = star.spectral_type.letter
        if letter in ("WR", "O", "B", "A"):
            if rng.roll(1, 50) != 1:
                modifier -= int(star.mass * 10)
        elif letter == "F":
            modifier += 20
        elif letter == "K":
            modifier -= 20
        elif letter == "M":
            modifier -= 40
        elif letter in ("L", "T", "Y"):
            modifier -= 100
        roll = rng.roll(1, 400, modifier)

        if not plan.proto_giant and roll <= 6:
            return CelestialDisk(
                name, point.id, BeltDisk(CelestialBodyComposition.GASEOUS), orbit=point.own_orbit
            )
        elif roll <= 106:
            mass, size = rng.roll(1, 1600 - 199, 199) / 100, CelestialBodySize.LARGE
        elif roll <= 326:
            mass, size = rng.roll(1, 16200 - 1599, 1599) / 100, CelestialBodySize.GIANT
        elif roll <= 386:
            mass, size = rng.roll(1, 200000 - 16199, 16199) / 100, CelestialBodySize.SUPERGIANT
        elif roll <= 396:
            mass, size = rng.roll(1, 413100 - 199999, 199999) / 100, CelestialBodySize.HYPERGIANT
        else:
            mass, size = rng.roll(1, 800000 - 413139, 413139) / 100, CelestialBodySize.HYPERGIANT

        density = round(interpolate_density(mass) + rng.roll(1, 61, -31) / 100, 4)
        radius = (mass / (density / EARTH_DENSITY)) ** (1 / 3)
        distance = point.own_orbit.average_distance
        temperature = calculate_blackbody_temperature(star.luminosity, distance)
        body = CelestialBody(
            name=name,
            orbital_point_id=point.id,
            details=GaseousDetails(plan.arrangement or GasGiantArrangement.CONVENTIONAL),
            size=size,
            mass=mass,
            radius=round(radius, 4),
            density=density,
            gravity=round(density / EARTH_DENSITY * radius, 4),
            blackbody_temperature=temperature,
            orbit=point.own_orbit,
        )
        self.add_ring(point, points, body, f"{prefix}_moons")
        return body

    def add_ring(
        self, point: OrbitalPoint, points: List[OrbitalPoint], body: CelestialBody, step: str
    ):
        """Add a ring stub around a gas giant with enough moonlets."""
        rng = SeededDiceRoller(self.seed, step)
        distance = point.own_orbit.average_distance
        if distance < 0.1:
            modifier = -10
        elif distance < 0.5:
            modifier = -8
        elif distance < 0.75:
            modifier = -6
        elif distance < 1.5:
            modifier = -3
        else:
            modifier = 0
        moonlets = rng.roll(2, 6, modifier)
        cold = body.blackbody_temperature < 241
        icy_weight = 12 if cold else (1 if body.blackbody_temperature < 300 else 0)
        details = rng.get_result(
            RollToProcess.simple(
                [(IcyRing(), icy_weight), (TelluricRing(), 5 if cold else 12), (TelluricRing(), 1)]
            )
        )
        if moonlets < MIN_MOONLETS_FOR_RING:
            return
        ring = add_orbital_point(points, CelestialRing(0, details, stub=True), point.id)
        self.rings[ring.id] = PlannedOrbit(
            body.radius * EARTH_RADIUS_IN_AU * RING_DISTANCE_IN_PLANET_RADII,
            point.own_orbit.zone,
            eccentricity=0.0,
        )


def finalize_ring(point: OrbitalPoint, points: List[OrbitalPoint]) -> CelestialRing:
    """Final ring of a ring stub, keeping its details."""
    return CelestialRing(point.id, point.object.details, orbit=point.own_orbit)
