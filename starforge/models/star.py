"""Star data model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .orbit import Orbit, ZoneType


class StellarEvolution(Enum):
    """Stellar population, from the first generation of stars to the last ones."""

    PALEODWARF = "Paleodwarf"  # Population III, metal-free
    SUBDWARF = "Subdwarf"  # Population II, metal-poor
    DWARF = "Dwarf"  # Early Population I, like the Sun
    SUPERDWARF = "Superdwarf"  # Late Population I, metal-rich
    HYPERDWARF = "Hyperdwarf"  # Population 0, from a universe nearing its end


class StarLuminosityClass(Enum):
    """Yerkes luminosity class, plus remnant classes."""

    O = "0"  # Hypergiant  # noqa: E741
    IA = "Ia"
    IB = "Ib"
    II = "II"
    III = "III"
    IV = "IV"
    V = "V"
    VI = "VI"
    VII = "VII"  # White dwarf
    Y = "Y"  # Brown dwarf
    XNS = "XNS"  # Neutron star
    XBH = "XBH"  # Black hole


WHITE_DWARF_SPECTRAL_LETTERS = ("DA", "DB", "DC", "DO", "DQ", "DX", "DZ")
REMNANT_SPECTRAL_LETTERS = ("XNS", "XBH")


@dataclass(frozen=True)
class StarSpectralType:
    """Spectral type: a letter ("G", "DA", "XBH"...) and, for main letters, a 0-9 subtype."""

    letter: str
    subtype: Optional[int] = None

    def __post_init__(self):
        """Validate the spectral type after initialization."""
        if self.subtype is not None and not (0 <= self.subtype <= 9):
            raise ValueError(f"Invalid spectral subtype: {self.subtype} (must be 0-9)")

    @property
    def is_white_dwarf(self) -> bool:
        return self.letter in WHITE_DWARF_SPECTRAL_LETTERS

    def __str__(self) -> str:
        return self.letter if self.subtype is None else f"{self.letter}{self.subtype}"


@dataclass
class StarZone:
    """A range of distances around a star, in AU."""

    start: float
    end: float
    zone_type: ZoneType

    def contains(self, distance: float) -> bool:
        return self.start <= distance < self.end

    def __str__(self) -> str:
        return f"{self.zone_type.value} from {self.start:.3f} to {self.end:.3f} AU"


@dataclass
class Star:
    """A star, brown dwarf or stellar remnant.

    Mass, luminosity and radius are in solar units, age in million years and
    temperature in Kelvin.
    """

    name: str
    mass: float
    luminosity: float
    radius: float
    age: float
    temperature: int
    population: StellarEvolution
    spectral_type: StarSpectralType
    luminosity_class: StarLuminosityClass
    orbital_point_id: int = 0
    orbit: Optional[Orbit] = None
    zones: List[StarZone] = field(default_factory=list)

    def __post_init__(self):
        """Validate star data after initialization."""
        if self.mass <= 0:
            raise ValueError(f"Invalid star mass: {self.mass} (must be > 0)")
        if self.luminosity < 0:
            raise ValueError(f"Invalid star luminosity: {self.luminosity} (must be >= 0)")
        if self.radius <= 0:
            raise ValueError(f"Invalid star radius: {self.radius} (must be > 0)")

    def __str__(self) -> str:
        return (
            f"{self.name}, {self.spectral_type}{self.luminosity_class.value} "
            f"{self.population.value} star of {self.mass:.3f} M☉, {self.luminosity:.4f} L☉, "
            f"{self.radius:.3f} R☉, {self.temperature} K, {self.age:.0f} million years"
        )
