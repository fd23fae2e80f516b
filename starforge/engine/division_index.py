"""Spatial division index of a galaxy.

The map is cut into a ladder of ten division levels. Level 0 is the hex,
whose size is given in parsecs; every higher level groups the cells of the
level below it. A coordinate is looked up by converting it to absolute
coordinates (counted from the galaxy's first parsec) and dividing it by each
level's size in turn. Divisions and hexes are generated the first time they
are looked up and cached on the galaxy, keyed by level and index.
"""

import logging
from typing import List

from ..models import (
    GalacticHex,
    GalacticMapDivision,
    GalacticMapDivisionLevel,
    Galaxy,
    GenerationSettings,
    SpaceCoordinates,
)
from ..utils import ConfigurationError, InvariantViolation
from ..utils.constants import NUMBER_OF_DIVISION_LEVELS, TOP_LEVEL_PARENT_SUBDIVISIONS
from .hex_generator import generate_hex
from .region_generator import generate_region

logger = logging.getLogger(__name__)

DIVISION_NAME = "GalaxyDivision"

# Parent grid of the coarsest level
TOP_LEVEL_PARENT = GalacticMapDivisionLevel(
    NUMBER_OF_DIVISION_LEVELS,
    TOP_LEVEL_PARENT_SUBDIVISIONS,
    TOP_LEVEL_PARENT_SUBDIVISIONS,
    TOP_LEVEL_PARENT_SUBDIVISIONS,
)


def generate_division_levels(settings: GenerationSettings) -> List[GalacticMapDivisionLevel]:
    """Build the ten division levels from the sector settings.

    With ``sector.flat_map``, every level above 0 has a single z subdivision.

    Args:
        settings: Generation settings

    Returns:
        Division levels 0 to 9, in order

    Examples:
        >>> generate_division_levels(GenerationSettings())[1]
        GalacticMapDivisionLevel(level=1, x_subdivisions=10, y_subdivisions=10, z_subdivisions=1)
    """
    sector = settings.sector
    levels = []
    for level in range(NUMBER_OF_DIVISION_LEVELS):
        x, y, z = sector.level_size(level)
        if level > 0 and sector.flat_map:
            z = 1
        levels.append(GalacticMapDivisionLevel(level, x, y, z))
    return levels


def _level_size(galaxy: Galaxy, level: int) -> SpaceCoordinates:
    division_level = galaxy.get_division_level(level)
    if division_level is None:
        raise InvariantViolation(f"Galaxy #{galaxy.index} has no division level {level}")
    return division_level.as_coord()


def _parent_level(galaxy: Galaxy, level: int) -> GalacticMapDivisionLevel:
    return galaxy.get_division_level(level + 1) or TOP_LEVEL_PARENT


def _check_coord(galaxy: Galaxy, coord: SpaceCoordinates):
    if not galaxy.are_coord_valid(coord):
        raise ConfigurationError(
            f"Coordinates {coord} are outside galaxy #{galaxy.index}, which spans "
            f"{galaxy.get_galactic_start()} to {galaxy.get_galactic_end()}"
        )


def get_division_size(galaxy: Galaxy, level: int) -> SpaceCoordinates:
    """Size in parsecs of a division at ``level``: the product of the sizes of levels 0 to ``level``."""
    size = SpaceCoordinates(1, 1, 1)
    for lvl in range(level + 1):
        size = size * _level_size(galaxy, lvl)
    return size


def get_divisions_for_coord(galaxy: Galaxy, coord: SpaceCoordinates) -> List[GalacticMapDivision]:
    """Return the divisions of every level (0 to 9) enclosing a coordinate.

    Divisions not generated yet are generated and cached on the galaxy.

    Args:
        galaxy: Galaxy to look into
        coord: Coordinates relative to the galactic center

    Returns:
        Ten divisions, from level 0 to level 9

    Raises:
        ConfigurationError: If the coordinates are outside the galaxy
    """
    _check_coord(galaxy, coord)
    start = galaxy.get_galactic_start()
    index = coord.abs(start)
    result = []
    for level in range(NUMBER_OF_DIVISION_LEVELS):
        index = index / _level_size(galaxy, level)
        division = galaxy.divisions.get((level, index))
        if division is None:
            division = generate_division(galaxy, level, index)
            galaxy.divisions[(level, index)] = division
        result.append(division)
    return result


def get_division_at_level(galaxy: Galaxy, coord: SpaceCoordinates, level: int) -> GalacticMapDivision:
    """Return the division enclosing a coordinate at a given level.

    Args:
        galaxy: Galaxy to look into
        coord: Coordinates relative to the galactic center
        level: Division level, from 1 to 9

    Returns:
        The enclosing GalacticMapDivision

    Raises:
        ConfigurationError: If the level is not in 1..9 or the coordinates
            are outside the galaxy
    """
    if not 0 < level < NUMBER_OF_DIVISION_LEVELS:
        raise ConfigurationError(
            f"Invalid division level: {level} (must be between 1 and {NUMBER_OF_DIVISION_LEVELS - 1})"
        )
    return get_divisions_for_coord(galaxy, coord)[level]


def generate_division(galaxy: Galaxy, level: int, index: SpaceCoordinates) -> GalacticMapDivision:
    """Generate the division at ``level`` with the given global index.

    Its x/y/z are its position inside the grid of its parent level.

    Raises:
        InvariantViolation: If the index is negative, so outside any parent grid
    """
    parent = _parent_level(galaxy, level)
    if index.x < 0 or index.y < 0 or index.z < 0:
        raise InvariantViolation(f"Division index {index} at level {level} is negative")
    x = index.x % parent.x_subdivisions
    y = index.y % parent.y_subdivisions
    z = index.z % parent.z_subdivisions

    size = get_division_size(galaxy, level)
    first_vertex = (index * size).rel(galaxy.get_galactic_start())
    last_vertex = first_vertex + size - SpaceCoordinates(1, 1, 1)
    region = generate_region(galaxy, level, index, first_vertex, last_vertex)

    division = GalacticMapDivision(DIVISION_NAME, region, level, index, x, y, z)
    logger.debug(f"Generated division {division} in galaxy #{galaxy.index}")
    return division


def get_hex(galaxy: Galaxy, coord: SpaceCoordinates) -> GalacticHex:
    """Return the hex enclosing a coordinate, generating it on first lookup.

    Args:
        galaxy: Galaxy to look into
        coord: Coordinates relative to the galactic center

    Returns:
        The enclosing GalacticHex, with its star systems

    Raises:
        ConfigurationError: If the coordinates are outside the galaxy
    """
    _check_coord(galaxy, coord)
    start = galaxy.get_galactic_start()
    hex_size = _level_size(galaxy, 0)
    index = coord.abs(start) / hex_size
    hex_ = galaxy.hexes.get(index)
    if hex_ is None:
        first_vertex = (index * hex_size).rel(start)
        last_vertex = first_vertex + hex_size - SpaceCoordinates(1, 1, 1)
        divisions = get_divisions_for_coord(galaxy, coord)
        hex_ = generate_hex(galaxy, index, first_vertex, last_vertex, divisions)
        galaxy.hexes[index] = hex_
    return hex_
