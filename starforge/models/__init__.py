"""Data models for starforge."""

from .celestial import (
    BeltDisk,
    CelestialBody,
    CelestialBodyComposition,
    CelestialBodySize,
    CelestialBodyWorldType,
    CelestialDisk,
    CelestialRing,
    GaseousDetails,
    GaseousRing,
    GasGiantArrangement,
    IcyDetails,
    IcyRing,
    ProtoplanetaryDisk,
    RingDisk,
    ShellDisk,
    Spacecraft,
    SpacecraftKind,
    TelluricDetails,
    TelluricRing,
)
from .coordinates import SpaceCoordinates
from .galaxy import (
    DominantElliptical,
    Elliptical,
    Galaxy,
    GalaxyCategory,
    GalaxySpecialTrait,
    GalaxySpecialTraitKind,
    GalaxySubCategory,
    Intergalactic,
    Intracluster,
    Irregular,
    Lenticular,
    SatelliteAbundance,
    Spiral,
)
from .generated_universe import GeneratedUniverse
from .map import GalacticHex, GalacticMapDivision, GalacticMapDivisionLevel, GalacticRegion
from .neighborhood import (
    ClusterDensity,
    GalacticNeighborhood,
    GalacticNeighborhoodDensity,
    GroupDensity,
    VoidDensity,
    count_galaxies,
)
from .orbit import Orbit, ZoneType
from .orbital_point import AstronomicalObject, EmptyPoint, OrbitalPoint
from .settings import (
    CelestialBodySettings,
    GalaxySettings,
    GenerationSettings,
    NeighborhoodDensitySettings,
    SectorSettings,
    StarSettings,
    SystemSettings,
    UniverseSettings,
    load_settings,
)
from .star import Star, StarLuminosityClass, StarSpectralType, StarZone, StellarEvolution
from .stellar_neighborhood import Ancient, Mature, Old, StellarNeighborhood, Young
from .system import StarSystem
from .universe import StelliferousEra, Universe

__all__ = [
    "SpaceCoordinates",
    "StelliferousEra",
    "Universe",
    "VoidDensity",
    "GroupDensity",
    "ClusterDensity",
    "GalacticNeighborhoodDensity",
    "GalacticNeighborhood",
    "count_galaxies",
    "Intergalactic",
    "Irregular",
    "Intracluster",
    "Spiral",
    "Lenticular",
    "Elliptical",
    "DominantElliptical",
    "GalaxyCategory",
    "GalaxySubCategory",
    "GalaxySpecialTraitKind",
    "GalaxySpecialTrait",
    "SatelliteAbundance",
    "Galaxy",
    "GalacticRegion",
    "GalacticMapDivisionLevel",
    "GalacticMapDivision",
    "GalacticHex",
    "Young",
    "Mature",
    "Old",
    "Ancient",
    "StellarNeighborhood",
    "ZoneType",
    "Orbit",
    "StellarEvolution",
    "StarLuminosityClass",
    "StarSpectralType",
    "StarZone",
    "Star",
    "CelestialBodySize",
    "CelestialBodyComposition",
    "CelestialBodyWorldType",
    "GasGiantArrangement",
    "TelluricDetails",
    "GaseousDetails",
    "IcyDetails",
    "CelestialBody",
    "ProtoplanetaryDisk",
    "RingDisk",
    "BeltDisk",
    "ShellDisk",
    "CelestialDisk",
    "TelluricRing",
    "GaseousRing",
    "IcyRing",
    "CelestialRing",
    "SpacecraftKind",
    "Spacecraft",
    "EmptyPoint",
    "AstronomicalObject",
    "OrbitalPoint",
    "StarSystem",
    "GeneratedUniverse",
    "UniverseSettings",
    "NeighborhoodDensitySettings",
    "GalaxySettings",
    "SectorSettings",
    "SystemSettings",
    "StarSettings",
    "CelestialBodySettings",
    "GenerationSettings",
    "load_settings",
]
