"""Galactic neighborhood data model."""

from dataclasses import dataclass
from typing import Union

from .universe import Universe


@dataclass(frozen=True)
class VoidDensity:
    """A cosmic void: few or no major galaxies."""

    galaxies: int
    minor: int

    def __str__(self) -> str:
        return f"Void with {self.galaxies} major and {self.minor} minor galaxies"


@dataclass(frozen=True)
class GroupDensity:
    """A galactic group, like the Local Group."""

    galaxies: int
    minor: int

    def __str__(self) -> str:
        return f"Group with {self.galaxies} major and {self.minor} minor galaxies"


@dataclass(frozen=True)
class ClusterDensity:
    """A galactic cluster, with dominant galaxies at its center."""

    dominant: int
    galaxies: int
    minor: int

    def __str__(self) -> str:
        return (
            f"Cluster with {self.dominant} dominant, {self.galaxies} major "
            f"and {self.minor} minor galaxies"
        )


GalacticNeighborhoodDensity = Union[VoidDensity, GroupDensity, ClusterDensity]


def count_galaxies(density: GalacticNeighborhoodDensity) -> int:
    """Total number of galaxies in a neighborhood density.

    Args:
        density: Neighborhood density

    Returns:
        Sum of the dominant, major and minor galaxy counts
    """
    if isinstance(density, ClusterDensity):
        return density.dominant + density.galaxies + density.minor
    elif isinstance(density, (VoidDensity, GroupDensity)):
        return density.galaxies + density.minor
    raise TypeError(f"Unknown neighborhood density: {density!r}")


def count_dominant_galaxies(density: GalacticNeighborhoodDensity) -> int:
    """Number of dominant galaxies (only clusters have some)."""
    if isinstance(density, ClusterDensity):
        return density.dominant
    elif isinstance(density, (VoidDensity, GroupDensity)):
        return 0
    raise TypeError(f"Unknown neighborhood density: {density!r}")


def count_major_galaxies(density: GalacticNeighborhoodDensity) -> int:
    """Number of dominant plus major galaxies."""
    return count_dominant_galaxies(density) + density.galaxies


@dataclass
class GalacticNeighborhood:
    """The neighborhood a galaxy lives in."""

    universe: Universe
    density: GalacticNeighborhoodDensity

    def __str__(self) -> str:
        return f"Galactic neighborhood: {self.density}"
