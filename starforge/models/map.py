"""Galactic map data model: division levels, divisions and hexes."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from .coordinates import SpaceCoordinates
from .stellar_neighborhood import StellarNeighborhood
from .system import StarSystem


class GalacticRegion(Enum):
    """Kind of region a map division covers."""

    MULTIPLE = "Multiple"  # More than one region in the division
    CORE = "Core"
    NUCLEUS = "Nucleus"
    BULGE = "Bulge"
    BAR = "Bar"
    ARM = "Arm"
    DISK = "Disk"
    ELLIPSE = "Ellipse"
    HALO = "Halo"
    AURA = "Aura"
    VOID = "Void"
    GLOBULAR_CLUSTER = "GlobularCluster"
    OPEN_CLUSTER = "OpenCluster"
    ASSOCIATION = "Association"
    STREAM = "Stream"
    EXILE = "Exile"


@dataclass(frozen=True)
class GalacticMapDivisionLevel:
    """One rung of the division ladder.

    Level 0 counts are the size of a hex in parsecs; higher level counts are
    the number of lower level cells grouped on each axis.
    """

    level: int
    x_subdivisions: int
    y_subdivisions: int
    z_subdivisions: int

    def __post_init__(self):
        """Validate the level after initialization."""
        for axis in ("x", "y", "z"):
            value = getattr(self, f"{axis}_subdivisions")
            if value < 1:
                raise ValueError(
                    f"Invalid {axis}_subdivisions at level {self.level}: {value} (must be >= 1)"
                )

    def as_coord(self) -> SpaceCoordinates:
        return SpaceCoordinates(self.x_subdivisions, self.y_subdivisions, self.z_subdivisions)

    def __str__(self) -> str:
        return (
            f"Level {self.level}: {self.x_subdivisions}x{self.y_subdivisions}"
            f"x{self.z_subdivisions}"
        )


@dataclass
class GalacticMapDivision:
    """A named region of the map at a given level."""

    name: str
    region: GalacticRegion
    level: int
    index: SpaceCoordinates  # Cell index counted from the galaxy's starting point
    x: int  # Cell index inside the parent level's grid
    y: int
    z: int

    def __str__(self) -> str:
        return (
            f"{self.name} - level {self.level} division {self.index} "
            f"[{self.x}, {self.y}, {self.z}] - {self.region.value}"
        )


@dataclass
class GalacticHex:
    """The finest unit of the galactic map, holding zero or more star systems.

    Both vertices are inclusive coordinates relative to the galactic center.
    """

    index: SpaceCoordinates
    first_vertex: SpaceCoordinates
    last_vertex: SpaceCoordinates
    neighborhood: StellarNeighborhood
    contents: List[StarSystem] = field(default_factory=list)

    def __post_init__(self):
        """Validate hex corners after initialization."""
        if not (
            self.first_vertex.x <= self.last_vertex.x
            and self.first_vertex.y <= self.last_vertex.y
            and self.first_vertex.z <= self.last_vertex.z
        ):
            raise ValueError(
                f"Invalid hex vertices: {self.first_vertex} must not exceed {self.last_vertex}"
            )

    def contains(self, coord: SpaceCoordinates) -> bool:
        return (
            self.first_vertex.x <= coord.x <= self.last_vertex.x
            and self.first_vertex.y <= coord.y <= self.last_vertex.y
            and self.first_vertex.z <= coord.z <= self.last_vertex.z
        )

    def __str__(self) -> str:
        return (
            f"Hex {self.index} from {self.first_vertex} to {self.last_vertex}, "
            f"{self.neighborhood}, {len(self.contents)} system(s)"
        )
