"""Galactic neighborhood generation: how many galaxies surround ours."""

import logging

from ..models import (
    ClusterDensity,
    GalacticNeighborhood,
    GenerationSettings,
    GroupDensity,
    StelliferousEra,
    Universe,
    VoidDensity,
)
from ..utils import SeededDiceRoller
from ..utils.constants import OUR_NEIGHBORHOOD_MAJOR_GALAXIES, OUR_NEIGHBORHOOD_MINOR_GALAXIES

logger = logging.getLogger(__name__)

LATE_ERAS = (StelliferousEra.LATE_STELLIFEROUS, StelliferousEra.END_STELLIFEROUS)


def generate_neighborhood(universe: Universe, settings: GenerationSettings) -> GalacticNeighborhood:
    """Generate the galactic neighborhood of a universe.

    A fixed neighborhood from the settings wins, then ``galaxy.use_ours``
    (the Local Group: 2 major and 36 minor galaxies). Otherwise three times
    out of four the neighborhood is a group, which becomes a void when it
    rolls no major galaxy; the rest of the time it is a cluster. Late eras
    have fewer galaxies left.

    Args:
        universe: Universe the neighborhood belongs to
        settings: Generation settings

    Returns:
        The generated GalacticNeighborhood
    """
    galaxy_settings = settings.galaxy
    if galaxy_settings.fixed_neighborhood is not None:
        density = galaxy_settings.fixed_neighborhood.to_density()
    elif galaxy_settings.use_ours:
        density = GroupDensity(OUR_NEIGHBORHOOD_MAJOR_GALAXIES, OUR_NEIGHBORHOOD_MINOR_GALAXIES)
    else:
        rng = SeededDiceRoller(settings.seed, "gal_den")
        if rng.roll(1, 4) != 4:
            density = _roll_group_or_void(rng, universe.era)
        else:
            density = _roll_cluster(rng, universe.era)

    neighborhood = GalacticNeighborhood(universe, density)
    logger.info(f"Generated {neighborhood}")
    return neighborhood


def _roll_group_or_void(rng: SeededDiceRoller, era: StelliferousEra):
    galaxies = rng.roll(1, 6, -1)
    if galaxies == 0:
        major = rng.roll(1, 2) if era in LATE_ERAS else rng.roll(1, 4, -1)
        if era == StelliferousEra.END_STELLIFEROUS:
            minor = 0
        elif era == StelliferousEra.LATE_STELLIFEROUS:
            minor = rng.roll(1, 5)
        else:
            minor = rng.roll(1, 16, 4)
        return VoidDensity(major, minor)

    if era == StelliferousEra.END_STELLIFEROUS:
        return GroupDensity(rng.roll(1, 2), 0)
    elif era == StelliferousEra.LATE_STELLIFEROUS:
        return GroupDensity(rng.roll(1, 3), rng.roll(1, 22, 3))
    return GroupDensity(galaxies, rng.roll(1, 70, 9))


def _roll_cluster(rng: SeededDiceRoller, era: StelliferousEra) -> ClusterDensity:
    galaxies = 0
    dominant = 0
    roll = 0
    turn = 0
    # A 10 rolls again, a 1 is a dominant galaxy
    while roll == 10 or turn < 2:
        roll = rng.roll(1, 10)
        if roll == 1:
            dominant += 1
        else:
            galaxies += roll
        turn += 1

    if era == StelliferousEra.END_STELLIFEROUS:
        return ClusterDensity(1, rng.roll(1, 2), 0)
    elif era == StelliferousEra.LATE_STELLIFEROUS:
        return ClusterDensity(max(1, dominant), max(1, galaxies // 2), rng.roll(1, 200))
    return ClusterDensity(dominant, galaxies, rng.roll(1, 950, 50))
