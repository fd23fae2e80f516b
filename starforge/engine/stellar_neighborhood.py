"""Stellar neighborhood generation: the age of the stars around a coordinate."""

import logging
from typing import Iterable, List

from ..models import (
    Ancient,
    GalacticMapDivision,
    GalacticRegion,
    Galaxy,
    Mature,
    Old,
    StellarNeighborhood,
    Young,
)
from ..utils import InvariantViolation, RollToProcess, SeededDiceRoller

logger = logging.getLogger(__name__)

# Modifier each distinct enclosing region adds to the neighborhood age roll
REGION_AGE_MODIFIERS = {
    GalacticRegion.GLOBULAR_CLUSTER: 5,
    GalacticRegion.HALO: 5,
    GalacticRegion.AURA: 5,
    GalacticRegion.VOID: 5,
    GalacticRegion.STREAM: 3,
    GalacticRegion.CORE: 2,
    GalacticRegion.BULGE: 2,
    GalacticRegion.DISK: 1,
    GalacticRegion.ELLIPSE: 1,
    GalacticRegion.NUCLEUS: -1,
    GalacticRegion.BAR: -2,
    GalacticRegion.ARM: -2,
    GalacticRegion.ASSOCIATION: -3,
    GalacticRegion.OPEN_CLUSTER: -5,
    GalacticRegion.MULTIPLE: 0,
    GalacticRegion.EXILE: 0,
}


def get_region_modifier(regions: Iterable[GalacticRegion]) -> int:
    """Sum of the age modifiers of the distinct regions given.

    Examples:
        >>> get_region_modifier([GalacticRegion.HALO, GalacticRegion.BAR, GalacticRegion.HALO])
        3
    """
    return sum(REGION_AGE_MODIFIERS[region] for region in set(regions))


def generate_stellar_neighborhood(
    galaxy: Galaxy, divisions: List[GalacticMapDivision]
) -> StellarNeighborhood:
    """Generate the stellar neighborhood of a coordinate from its enclosing divisions.

    Old regions (halos, voids) push the 1d8 roll toward old neighborhoods,
    star forming ones (arms, clusters) toward young ones. The roll is keyed on
    the enclosing level 1 division (the sub-sector), so a whole sub-sector
    shares the same neighborhood.

    Args:
        galaxy: Galaxy the coordinate is in
        divisions: Enclosing divisions of every level

    Returns:
        The generated StellarNeighborhood

    Raises:
        InvariantViolation: If no level 1 division is among ``divisions``
    """
    sub_sector = next((div for div in divisions if div.level == 1), None)
    if sub_sector is None:
        raise InvariantViolation("No sub-sector among the enclosing divisions")
    modifier = get_region_modifier(div.region for div in divisions)

    rng = SeededDiceRoller(galaxy.seed, f"ste_nei_{sub_sector.index}_age")
    age_class = rng.get_result(
        RollToProcess.prepared_roll(
            [(Young, 1), (Mature, 6), (Old, 4), (Ancient, 1)], 1, 8, modifier
        )
    )

    universe_age = galaxy.neighborhood.universe.age * 1000
    max_age = max(int(universe_age) - 200, 1)
    if age_class is Young:
        years = 0
        roll = 0
        turn = 0
        divide_by = 1
        # A 10 adds another roll, a 1 makes the neighborhood ten times younger
        while roll in (1, 10) or turn < 1:
            roll = rng.roll(1, 10)
            if turn == 0 or roll == 10:
                years += roll
            if roll == 1:
                divide_by *= 10
            turn += 1
        age = Young(max(1, min(years * 100 // divide_by, max_age)))
    elif age_class is Mature:
        age = Mature()
    elif age_class is Old:
        roll = 0
        turn = 0
        divide_by = 1
        while roll == 10 or turn < 1:
            roll = rng.roll(1, 10)
            divide_by += roll
            turn += 1
        age = Old(max(1, min(max_age - 200, int(universe_age) // divide_by)))
    elif age_class is Ancient:
        age = Ancient(max(1, min(max_age - 200, max_age - rng.roll(1, 10, -1) * 1000)))
    else:
        raise TypeError(f"Unknown stellar neighborhood age: {age_class!r}")

    neighborhood = StellarNeighborhood(age)
    logger.debug(f"Generated {neighborhood} for sub-sector {sub_sector.index}")
    return neighborhood
