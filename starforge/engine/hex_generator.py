"""Hex generation: how many systems a hex holds, and the systems themselves."""

import logging
from typing import Dict, List, Tuple

from ..models import GalacticHex, GalacticMapDivision, GalacticRegion, Galaxy, SpaceCoordinates
from ..utils import InvariantViolation, SeededDiceRoller
from .stellar_neighborhood import generate_stellar_neighborhood
from .system_generator import generate_system

logger = logging.getLogger(__name__)

# Region -> (die size, highest successful roll) for a system to appear
SYSTEM_DENSITY_BY_REGION: Dict[GalacticRegion, Tuple[int, int]] = {
    GalacticRegion.VOID: (50, 1),
    GalacticRegion.AURA: (20, 1),
    GalacticRegion.HALO: (10, 1),
    GalacticRegion.EXILE: (10, 1),
    GalacticRegion.STREAM: (5, 1),
    GalacticRegion.ASSOCIATION: (5, 1),
    GalacticRegion.ELLIPSE: (2, 1),
    GalacticRegion.DISK: (2, 1),
    GalacticRegion.MULTIPLE: (2, 1),
    GalacticRegion.ARM: (4, 4),
    GalacticRegion.OPEN_CLUSTER: (4, 4),
    GalacticRegion.BAR: (20, 20),
    GalacticRegion.BULGE: (100, 100),
    GalacticRegion.GLOBULAR_CLUSTER: (100, 100),
    GalacticRegion.CORE: (500, 500),
    GalacticRegion.NUCLEUS: (500, 500),
}

# Brown dwarfs are rolled like stars but only count for a fifth
BROWN_DWARF_DIVIDER = 5


def get_number_of_systems_to_generate(
    galaxy: Galaxy, index: SpaceCoordinates, divisions: List[GalacticMapDivision]
) -> int:
    """Roll how many star systems a hex holds.

    The enclosing sub-sector's region gives a die and a success threshold.
    The die is rolled once per hex, or once per parsec of the hex, and every
    successful roll adds its value. Brown dwarfs are rolled the same way and
    added for a fifth of their total.

    Args:
        galaxy: Galaxy the hex is in
        index: Index of the hex
        divisions: Every division enclosing the hex, level 0 first

    Returns:
        The number of systems, at most 1 with ``sector.max_one_system_per_hex``

    Raises:
        InvariantViolation: If no level 1 division is among ``divisions``
    """
    sector = galaxy.settings.sector
    sub_sector = next((d for d in divisions if d.level == 1), None)
    if sub_sector is None:
        raise InvariantViolation(f"No sub-sector encloses hex {index}")
    die, success = SYSTEM_DENSITY_BY_REGION[sub_sector.region]

    if sector.density_by_hex_instead_of_parsec:
        turns = 1
    else:
        x, y, z = sector.hex_size
        turns = x * y * z

    systems = _roll_successes(galaxy.seed, f"hex_{index}_nbr_sys", turns, die, success)
    brown_dwarfs = _roll_successes(galaxy.seed, f"hex_{index}_nbr_brwn", turns, die, success)
    number = systems + brown_dwarfs // BROWN_DWARF_DIVIDER
    if sector.max_one_system_per_hex:
        number = min(number, 1)
    return number


def _roll_successes(seed: str, step: str, turns: int, die: int, success: int) -> int:
    rng = SeededDiceRoller(seed, step)
    total = 0
    for _ in range(turns):
        roll = rng.roll(1, die)
        if roll <= success:
            total += roll
    return total


def generate_hex(
    galaxy: Galaxy,
    index: SpaceCoordinates,
    first_vertex: SpaceCoordinates,
    last_vertex: SpaceCoordinates,
    divisions: List[GalacticMapDivision],
) -> GalacticHex:
    """Generate a hex, its stellar neighborhood and every system in it.

    Systems sit at the hex's first vertex.
    """
    neighborhood = generate_stellar_neighborhood(galaxy, divisions)
    hex_ = GalacticHex(index, first_vertex, last_vertex, neighborhood)
    number = get_number_of_systems_to_generate(galaxy, index, divisions)
    for system_index in range(number):
        hex_.contents.append(generate_system(galaxy, hex_, first_vertex, system_index, divisions))
    logger.debug(f"Generated {hex_} in galaxy #{galaxy.index}")
    return hex_
