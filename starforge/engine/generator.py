"""Entry point of a generation run."""

import logging

from ..models import GeneratedUniverse, GenerationSettings, count_galaxies
from .galaxy_generator import generate_galaxy
from .neighborhood_generator import generate_neighborhood
from .universe_generator import generate_universe

logger = logging.getLogger(__name__)


class Generator:
    """Builds a universe, its galactic neighborhood and every galaxy in it.

    Divisions, hexes and star systems are not generated here: they appear
    on demand when a galaxy is queried with ``get_divisions_for_coord`` or
    ``get_hex``.
    """

    @staticmethod
    def generate(settings: GenerationSettings) -> GeneratedUniverse:
        """Run a generation.

        Args:
            settings: Generation settings, seed included

        Returns:
            The GeneratedUniverse; the same settings always give an equal one
        """
        universe = generate_universe(settings)
        neighborhood = generate_neighborhood(universe, settings)
        galaxies = [
            generate_galaxy(neighborhood, index, settings)
            for index in range(count_galaxies(neighborhood.density))
        ]
        logger.info(f"Generated {len(galaxies)} galaxies with seed '{settings.seed}'")
        return GeneratedUniverse(universe, neighborhood, galaxies)
