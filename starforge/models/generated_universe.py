"""The aggregate returned by a generation run."""

from dataclasses import dataclass, field
from typing import List

from ..utils.errors import ConfigurationError
from .galaxy import Galaxy
from .neighborhood import GalacticNeighborhood
from .universe import Universe


@dataclass
class GeneratedUniverse:
    """A universe, its galactic neighborhood and the galaxies generated in it."""

    universe: Universe
    galactic_neighborhood: GalacticNeighborhood
    galaxies: List[Galaxy] = field(default_factory=list)

    def galaxy(self, index: int) -> Galaxy:
        """Return the galaxy at ``index`` in the neighborhood.

        Raises:
            ConfigurationError: If no galaxy has this index
        """
        for galaxy in self.galaxies:
            if galaxy.index == index:
                return galaxy
        raise ConfigurationError(
            f"No galaxy #{index} in this neighborhood ({len(self.galaxies)} generated)"
        )

    def __str__(self) -> str:
        return f"{self.universe}\n{self.galactic_neighborhood}, {len(self.galaxies)} galaxies"
