"""Galaxy data model.

A galaxy holds its descriptive fields plus the lazily grown spatial index:
the ten division levels, and the divisions and hexes generated so far. The
lookups that grow the index live in ``starforge.engine.division_index``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Union

from .coordinates import SpaceCoordinates
from .map import GalacticHex, GalacticMapDivision, GalacticMapDivisionLevel
from .neighborhood import GalacticNeighborhood

if TYPE_CHECKING:
    from .settings import GenerationSettings


# ========== Categories ==========


@dataclass(frozen=True)
class Intergalactic:
    """Stars and gas drifting between galaxies. Sizes in parsecs."""

    length: int
    width: int
    height: int

    def __str__(self) -> str:
        return f"Intergalactic ({self.length}x{self.width}x{self.height} pc)"


@dataclass(frozen=True)
class Irregular:
    """A galaxy with no regular shape. Sizes in parsecs."""

    length: int
    width: int
    height: int

    def __str__(self) -> str:
        return f"Irregular ({self.length}x{self.width}x{self.height} pc)"


@dataclass(frozen=True)
class Intracluster:
    """Stars and gas drifting between galaxies of a cluster. Sizes in parsecs."""

    length: int
    width: int
    height: int

    def __str__(self) -> str:
        return f"Intracluster ({self.length}x{self.width}x{self.height} pc)"


@dataclass(frozen=True)
class Spiral:
    """A disk galaxy with spiral arms."""

    radius: int
    thickness: int

    def __str__(self) -> str:
        return f"Spiral (radius {self.radius} pc, thickness {self.thickness} pc)"


@dataclass(frozen=True)
class Lenticular:
    """A disk galaxy without spiral arms."""

    radius: int
    thickness: int

    def __str__(self) -> str:
        return f"Lenticular (radius {self.radius} pc, thickness {self.thickness} pc)"


@dataclass(frozen=True)
class Elliptical:
    """An ellipsoidal galaxy of old stars."""

    radius: int

    def __str__(self) -> str:
        return f"Elliptical (radius {self.radius} pc)"


@dataclass(frozen=True)
class DominantElliptical:
    """A giant elliptical at the heart of a cluster."""

    radius: int

    def __str__(self) -> str:
        return f"Dominant Elliptical (radius {self.radius} pc)"


GalaxyCategory = Union[
    Intergalactic, Irregular, Intracluster, Spiral, Lenticular, Elliptical, DominantElliptical
]
BOX_CATEGORIES = (Intergalactic, Irregular, Intracluster)
DISK_CATEGORIES = (Spiral, Lenticular)
ELLIPTICAL_CATEGORIES = (Elliptical, DominantElliptical)


class GalaxySubCategory(Enum):
    """More precise classification of a galaxy inside its category."""

    DWARF_AMORPHOUS = "DwarfAmorphous"
    AMORPHOUS = "Amorphous"
    DWARF_SPIRAL = "DwarfSpiral"
    FLAT_SPIRAL = "FlatSpiral"
    BARRED_SPIRAL = "BarredSpiral"
    CLASSIC_SPIRAL = "ClassicSpiral"
    DWARF_LENTICULAR = "DwarfLenticular"
    COMMON_LENTICULAR = "CommonLenticular"
    GIANT_LENTICULAR = "GiantLenticular"
    DWARF_ELLIPTICAL = "DwarfElliptical"
    COMMON_ELLIPTICAL = "CommonElliptical"
    GIANT_ELLIPTICAL = "GiantElliptical"

    @property
    def is_dwarf(self) -> bool:
        return self in DWARF_SUB_CATEGORIES

    @property
    def is_giant(self) -> bool:
        return self in (GalaxySubCategory.GIANT_LENTICULAR, GalaxySubCategory.GIANT_ELLIPTICAL)


DWARF_SUB_CATEGORIES = (
    GalaxySubCategory.DWARF_AMORPHOUS,
    GalaxySubCategory.DWARF_SPIRAL,
    GalaxySubCategory.DWARF_LENTICULAR,
    GalaxySubCategory.DWARF_ELLIPTICAL,
)


# ========== Special traits ==========


class GalaxySpecialTraitKind(Enum):
    """Peculiarities a galaxy may have."""

    NO_PECULIARITY = "NoPeculiarity"
    ACTIVE_NUCLEUS = "ActiveNucleus"
    DOUBLE_NUCLEI = "DoubleNuclei"
    COMPACT = "Compact"  # Denser than usual, percentage of usual density
    EXPANSIVE = "Expansive"  # Sparser than usual, percentage of usual density
    EXTENDED_HALO = "ExtendedHalo"
    METAL_POOR = "MetalPoor"
    DUSTY = "Dusty"
    GAS_POOR = "GasPoor"
    GAS_RICH = "GasRich"
    STARBURST = "Starburst"
    DEAD = "Dead"
    DORMANT = "Dormant"
    SATELLITES = "Satellites"
    INTERACTING = "Interacting"
    TAIL = "Tail"
    YOUNGER = "Younger"
    OLDER = "Older"
    SUB_SIZE = "SubSize"  # Percentage of usual mass
    SUPER_SIZE = "SuperSize"  # Percentage of usual mass


class SatelliteAbundance(Enum):
    """How many satellite galaxies orbit a galaxy compared to usual."""

    MUCH_MORE = "MuchMore"
    MORE = "More"
    LESS = "Less"
    MUCH_LESS = "MuchLess"
    NONE = "None"
    SPECIAL = "Special"


PERCENTAGE_TRAITS = (
    GalaxySpecialTraitKind.COMPACT,
    GalaxySpecialTraitKind.EXPANSIVE,
    GalaxySpecialTraitKind.SUB_SIZE,
    GalaxySpecialTraitKind.SUPER_SIZE,
)


@dataclass(frozen=True)
class GalaxySpecialTrait:
    """A special trait, with its percentage or satellite payload when it has one."""

    kind: GalaxySpecialTraitKind
    percentage: Optional[int] = None
    satellites: Optional[SatelliteAbundance] = None

    def __post_init__(self):
        """Validate that the payload matches the kind."""
        if self.kind in PERCENTAGE_TRAITS and self.percentage is None:
            raise ValueError(f"Trait {self.kind.value} needs a percentage")
        if self.kind == GalaxySpecialTraitKind.SATELLITES and self.satellites is None:
            raise ValueError("Trait Satellites needs a satellite abundance")

    def __str__(self) -> str:
        if self.percentage is not None:
            return f"{self.kind.value} ({self.percentage}%)"
        if self.satellites is not None:
            return f"{self.kind.value} ({self.satellites.value})"
        return self.kind.value


NO_SPECIAL_TRAIT = GalaxySpecialTrait(GalaxySpecialTraitKind.NO_PECULIARITY)


# ========== Geometry ==========


def _box_start(n: int) -> int:
    return 1 - n // 2 if n % 2 == 0 else -(n // 2)


def get_galactic_start(category: GalaxyCategory) -> SpaceCoordinates:
    """First parsec of the galactic map, relative to the center.

    Args:
        category: Galaxy category carrying the galaxy's size

    Returns:
        Lowest coordinates inside the galaxy

    Examples:
        >>> get_galactic_start(Irregular(5, 4, 1))
        SpaceCoordinates(x=-2, y=-1, z=0)
    """
    if isinstance(category, BOX_CATEGORIES):
        return SpaceCoordinates(
            _box_start(category.length), _box_start(category.width), _box_start(category.height)
        )
    elif isinstance(category, DISK_CATEGORIES):
        edge = 1 - category.radius
        return SpaceCoordinates(edge, edge, _box_start(category.thickness))
    elif isinstance(category, ELLIPTICAL_CATEGORIES):
        edge = 1 - category.radius
        return SpaceCoordinates(edge, edge, edge)
    raise TypeError(f"Unknown galaxy category: {category!r}")


def get_galactic_end(category: GalaxyCategory) -> SpaceCoordinates:
    """Last parsec of the galactic map, relative to the center."""
    if isinstance(category, BOX_CATEGORIES):
        return SpaceCoordinates(category.length // 2, category.width // 2, category.height // 2)
    elif isinstance(category, DISK_CATEGORIES):
        return SpaceCoordinates(category.radius, category.radius, category.thickness // 2)
    elif isinstance(category, ELLIPTICAL_CATEGORIES):
        return SpaceCoordinates(category.radius, category.radius, category.radius)
    raise TypeError(f"Unknown galaxy category: {category!r}")


def get_galaxy_size(category: GalaxyCategory) -> SpaceCoordinates:
    """Size of the galactic map on each axis, in parsecs."""
    if isinstance(category, BOX_CATEGORIES):
        return SpaceCoordinates(category.length, category.width, category.height)
    elif isinstance(category, DISK_CATEGORIES):
        return SpaceCoordinates(category.radius * 2, category.radius * 2, category.thickness)
    elif isinstance(category, ELLIPTICAL_CATEGORIES):
        diameter = category.radius * 2
        return SpaceCoordinates(diameter, diameter, diameter)
    raise TypeError(f"Unknown galaxy category: {category!r}")


# ========== Galaxy ==========


DivisionKey = Tuple[int, SpaceCoordinates]  # (level, index)


@dataclass
class Galaxy:
    """A galaxy of the neighborhood.

    ``divisions`` and ``hexes`` start empty and grow as coordinates are
    looked up; they are never exhaustively precomputed.
    """

    settings: "GenerationSettings"
    neighborhood: GalacticNeighborhood
    index: int  # Position of the galaxy in its neighborhood
    name: str
    age: float  # Billion years
    is_dominant: bool
    is_major: bool
    category: GalaxyCategory
    sub_category: GalaxySubCategory
    special_traits: List[GalaxySpecialTrait]
    division_levels: List[GalacticMapDivisionLevel] = field(default_factory=list)
    divisions: Dict[DivisionKey, GalacticMapDivision] = field(default_factory=dict)
    hexes: Dict[SpaceCoordinates, GalacticHex] = field(default_factory=dict)

    def __post_init__(self):
        """Validate galaxy data after initialization."""
        if self.index < 0:
            raise ValueError(f"Invalid galaxy index: {self.index} (must be >= 0)")
        if self.age < 0:
            raise ValueError(f"Invalid galaxy age: {self.age} (must be >= 0)")

    @property
    def seed(self) -> str:
        return self.settings.seed

    def has_trait(self, kind: GalaxySpecialTraitKind) -> bool:
        return any(t.kind == kind for t in self.special_traits)

    def get_galactic_start(self) -> SpaceCoordinates:
        return get_galactic_start(self.category)

    def get_galactic_end(self) -> SpaceCoordinates:
        return get_galactic_end(self.category)

    def get_galactic_center(self) -> SpaceCoordinates:
        return SpaceCoordinates(0, 0, 0)

    def get_galaxy_size(self) -> SpaceCoordinates:
        return get_galaxy_size(self.category)

    def are_coord_valid(self, coord: SpaceCoordinates) -> bool:
        """True if ``coord`` lies inside the galaxy bounds (inclusive)."""
        start = self.get_galactic_start()
        end = self.get_galactic_end()
        return (
            start.x <= coord.x <= end.x
            and start.y <= coord.y <= end.y
            and start.z <= coord.z <= end.z
        )

    def get_division_level(self, level: int) -> Optional[GalacticMapDivisionLevel]:
        return next((lvl for lvl in self.division_levels if lvl.level == level), None)

    def __str__(self) -> str:
        if self.is_dominant:
            size = "dominant "
        elif self.is_major:
            size = "major "
        else:
            size = "minor "
        traits = ", ".join(str(t) for t in self.special_traits)
        return (
            f'{self.index:04} - "{self.name}" - {size}{self.category}, of sub-type '
            f"{self.sub_category.value}, aged {self.age} billion years, "
            f"with the following special traits: {traits}"
        )
