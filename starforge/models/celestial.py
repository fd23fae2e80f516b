"""Celestial bodies, disks and rings occupying orbital points.

Each kind carries a ``details`` payload that is one of a closed set of
variants. Instances are first created as stubs (``stub=True``, no orbit) and
replaced by final instances once the system's orbits are committed.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .orbit import Orbit


class CelestialBodySize(Enum):
    """Size class of a celestial body, largest first."""

    HYPERGIANT = "Hypergiant"
    SUPERGIANT = "Supergiant"
    GIANT = "Giant"
    LARGE = "Large"
    STANDARD = "Standard"
    SMALL = "Small"
    TINY = "Tiny"
    PUNY = "Puny"


class CelestialBodyComposition(Enum):
    """Main material a body or a belt is made of."""

    METALLIC = "Metallic"
    ROCKY = "Rocky"
    ICY = "Icy"
    GASEOUS = "Gaseous"


class CelestialBodyWorldType(Enum):
    """Surface classification of solid worlds."""

    ROCK = "Rock"
    DIRTY_SNOWBALL = "DirtySnowball"
    ICE = "Ice"
    HADEAN = "Hadean"
    AMMONIA = "Ammonia"
    TERRESTRIAL = "Terrestrial"
    OCEAN = "Ocean"
    GREENHOUSE = "Greenhouse"
    CHTHONIAN = "Chthonian"


class GasGiantArrangement(Enum):
    """Where a gas giant ended up after its migration."""

    CONVENTIONAL = "Conventional"  # Beyond the snow line
    ECCENTRIC = "Eccentric"  # On an eccentric orbit crossing the snow line
    EPISTELLAR = "Epistellar"  # Migrated close to its star


# ========== Body details ==========


@dataclass(frozen=True)
class TelluricDetails:
    """A rocky or metallic world."""

    composition: CelestialBodyComposition
    world_type: CelestialBodyWorldType

    def __str__(self) -> str:
        return f"{self.composition.value} {self.world_type.value} world"


@dataclass(frozen=True)
class GaseousDetails:
    """A gas giant."""

    arrangement: GasGiantArrangement

    def __str__(self) -> str:
        return f"{self.arrangement.value} gas giant"


@dataclass(frozen=True)
class IcyDetails:
    """An icy world or ice giant."""

    world_type: CelestialBodyWorldType

    def __str__(self) -> str:
        return f"Icy {self.world_type.value} world"


CelestialBodyDetails = Union[TelluricDetails, GaseousDetails, IcyDetails]


@dataclass
class CelestialBody:
    """A planet, dwarf planet or moon.

    Mass is in Earth masses, radius in Earth radii, density in g/cm³, gravity
    in g and temperature in Kelvin.
    """

    name: str
    orbital_point_id: int
    details: CelestialBodyDetails
    size: CelestialBodySize
    mass: float = 0.0
    radius: float = 0.0
    density: float = 0.0
    gravity: float = 0.0
    blackbody_temperature: int = 0
    orbit: Optional[Orbit] = None
    stub: bool = False

    def __post_init__(self):
        """Validate body data after initialization."""
        if not self.stub and self.orbit is None:
            raise ValueError(f"Body {self.name} is not a stub but has no orbit")
        if self.mass < 0 or self.radius < 0:
            raise ValueError(f"Invalid size for {self.name}: mass and radius must be >= 0")

    def __str__(self) -> str:
        state = " (stub)" if self.stub else ""
        return (
            f"{self.name}, {self.size.value} {self.details}, {self.mass:.3f} M⊕, "
            f"{self.radius:.3f} R⊕, {self.blackbody_temperature} K{state}"
        )


# ========== Disk details ==========


@dataclass(frozen=True)
class ProtoplanetaryDisk:
    """Gas and dust around a young star, still forming planets."""

    def __str__(self) -> str:
        return "Protoplanetary disk"


@dataclass(frozen=True)
class RingDisk:
    """A thin debris ring around a star."""

    composition: CelestialBodyComposition

    def __str__(self) -> str:
        return f"{self.composition.value} debris ring"


@dataclass(frozen=True)
class BeltDisk:
    """An asteroid or comet belt."""

    composition: CelestialBodyComposition

    def __str__(self) -> str:
        return f"{self.composition.value} belt"


@dataclass(frozen=True)
class ShellDisk:
    """A spherical cloud of icy bodies at the edge of a system."""

    def __str__(self) -> str:
        return "Shell of comets"


CelestialDiskType = Union[ProtoplanetaryDisk, RingDisk, BeltDisk, ShellDisk]


@dataclass
class CelestialDisk:
    """A disk, belt or shell of small bodies orbiting a star."""

    name: str
    orbital_point_id: int
    details: CelestialDiskType
    orbit: Optional[Orbit] = None
    stub: bool = False

    def __post_init__(self):
        """Validate disk data after initialization."""
        if not self.stub and self.orbit is None:
            raise ValueError(f"Disk {self.name} is not a stub but has no orbit")

    def __str__(self) -> str:
        state = " (stub)" if self.stub else ""
        return f"{self.name}, {self.details}{state}"


# ========== Ring details ==========


@dataclass(frozen=True)
class TelluricRing:
    """A ring of rock and dust."""

    def __str__(self) -> str:
        return "Telluric ring"


@dataclass(frozen=True)
class GaseousRing:
    """A tenuous ring of gas."""

    def __str__(self) -> str:
        return "Gaseous ring"


@dataclass(frozen=True)
class IcyRing:
    """A ring of ice particles."""

    def __str__(self) -> str:
        return "Icy ring"


CelestialRingDetails = Union[TelluricRing, GaseousRing, IcyRing]


@dataclass
class CelestialRing:
    """A ring system orbiting a planet."""

    orbital_point_id: int
    details: CelestialRingDetails
    orbit: Optional[Orbit] = None
    stub: bool = False

    def __post_init__(self):
        """Validate ring data after initialization."""
        if not self.stub and self.orbit is None:
            raise ValueError(f"Ring #{self.orbital_point_id} is not a stub but has no orbit")

    def __str__(self) -> str:
        state = " (stub)" if self.stub else ""
        return f"{self.details}{state}"


# ========== Spacecraft ==========


class SpacecraftKind(Enum):
    STATION = "Station"
    SHIP = "Ship"


@dataclass
class Spacecraft:
    """An artificial object placed in a system."""

    name: str
    kind: SpacecraftKind
    orbital_point_id: int
    orbit: Optional[Orbit] = None

    def __str__(self) -> str:
        return f"{self.kind.value} {self.name}"
