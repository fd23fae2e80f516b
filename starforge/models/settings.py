"""Generation settings.

Every scope is a pydantic model whose fields all carry an explicit default,
so ``GenerationSettings()`` is a complete, documented configuration and a
settings file only needs to list what it changes.
"""

import json
from pathlib import Path
from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ..utils.constants import DEFAULT_SEED
from ..utils.errors import ConfigurationError
from .galaxy import GalaxySpecialTraitKind, GalaxySubCategory
from .neighborhood import ClusterDensity, GalacticNeighborhoodDensity, GroupDensity, VoidDensity
from .universe import StelliferousEra

Size3 = Tuple[int, int, int]


class UniverseSettings(BaseModel):
    """Settings for the universe's era and age."""

    model_config = ConfigDict(frozen=True)

    use_ours: bool = Field(default=False, description="Use our own universe (13.8 billion years)")
    fixed_era: Optional[StelliferousEra] = Field(default=None, description="Era to use")
    era_before: Optional[StelliferousEra] = Field(
        default=None, description="Only pick eras before this one"
    )
    era_after: Optional[StelliferousEra] = Field(
        default=None, description="Only pick eras after this one"
    )
    fixed_age: Optional[float] = Field(default=None, gt=0, description="Age in billion years")
    age_before: Optional[float] = Field(
        default=None, gt=0, description="Maximum age in billion years"
    )
    age_after: Optional[float] = Field(
        default=None, gt=0, description="Minimum age in billion years"
    )


class NeighborhoodDensitySettings(BaseModel):
    """A fixed galactic neighborhood density."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["void", "group", "cluster"]
    dominant: int = Field(default=0, ge=0, description="Dominant galaxies (clusters only)")
    galaxies: int = Field(ge=0, description="Major galaxies")
    minor: int = Field(ge=0, description="Minor galaxies")

    @model_validator(mode="after")
    def check_dominant(self) -> "NeighborhoodDensitySettings":
        """Only clusters have dominant galaxies."""
        if self.kind != "cluster" and self.dominant:
            raise ValueError("Only a cluster can have dominant galaxies")
        return self

    def to_density(self) -> GalacticNeighborhoodDensity:
        if self.kind == "void":
            return VoidDensity(self.galaxies, self.minor)
        elif self.kind == "group":
            return GroupDensity(self.galaxies, self.minor)
        return ClusterDensity(self.dominant, self.galaxies, self.minor)


class GalaxySettings(BaseModel):
    """Settings for galaxy generation."""

    model_config = ConfigDict(frozen=True)

    use_ours: bool = Field(default=False, description="Use the Local Group's known galaxies")
    fixed_neighborhood: Optional[NeighborhoodDensitySettings] = Field(
        default=None, description="Neighborhood density to use"
    )
    fixed_sub_category: Optional[GalaxySubCategory] = Field(
        default=None, description="Sub-category every galaxy gets"
    )
    fixed_special_traits: Optional[List[GalaxySpecialTraitKind]] = Field(
        default=None, description="Traits every galaxy gets instead of random ones"
    )
    forbidden_special_traits: List[GalaxySpecialTraitKind] = Field(
        default_factory=list, description="Traits never picked at random"
    )
    fixed_age: Optional[float] = Field(default=None, gt=0, description="Age in billion years")


class SectorSettings(BaseModel):
    """Settings for the galactic map's division ladder."""

    model_config = ConfigDict(frozen=True)

    hex_size: Size3 = Field(default=(1, 1, 1), description="Size of a hex in parsecs")
    level_1_size: Size3 = Field(default=(10, 10, 10), description="Hexes per level 1 division")
    level_2_size: Size3 = Field(default=(4, 4, 4))
    level_3_size: Size3 = Field(default=(10, 10, 10))
    level_4_size: Size3 = Field(default=(10, 10, 10))
    level_5_size: Size3 = Field(default=(10, 10, 10))
    level_6_size: Size3 = Field(default=(10, 10, 10))
    level_7_size: Size3 = Field(default=(10, 10, 10))
    level_8_size: Size3 = Field(default=(10, 10, 10))
    level_9_size: Size3 = Field(default=(10, 10, 10))
    flat_map: bool = Field(default=True, description="Single z cell above level 0")
    density_by_hex_instead_of_parsec: bool = Field(
        default=True, description="Roll the number of systems once per hex, not per parsec"
    )
    max_one_system_per_hex: bool = Field(default=True)

    @field_validator(
        "hex_size",
        "level_1_size",
        "level_2_size",
        "level_3_size",
        "level_4_size",
        "level_5_size",
        "level_6_size",
        "level_7_size",
        "level_8_size",
        "level_9_size",
    )
    @classmethod
    def positive_size(cls, v: Size3) -> Size3:
        """Every axis needs at least one subdivision."""
        if any(axis < 1 for axis in v):
            raise ValueError(f"Sizes must be >= 1 on every axis, got {v}")
        return v

    def level_size(self, level: int) -> Size3:
        """Configured size for a level, level 0 being the hex size."""
        if level == 0:
            return self.hex_size
        return getattr(self, f"level_{level}_size")


class SystemSettings(BaseModel):
    """Settings for star system generation."""

    model_config = ConfigDict(frozen=True)

    use_ours: bool = Field(default=False, description="Name systems Sol")
    only_interesting: bool = Field(
        default=False, description="Retry until a system holds a terrestrial or ocean world"
    )
    max_generation_tries: int = Field(default=200, ge=1)


class StarSettings(BaseModel):
    """Settings for star generation. ``*_gen_chance`` fields are integer weights."""

    model_config = ConfigDict(frozen=True)

    use_ours: bool = Field(default=False, description="Every star is the Sun")
    fixed_age: Optional[float] = Field(default=None, gt=0, description="Age in billion years")
    fixed_mass: Optional[float] = Field(default=None, gt=0, description="Mass in solar masses")
    brown_dwarf_gen_chance: int = Field(default=150, ge=0)
    red_dwarf_one_gen_chance: int = Field(default=250, ge=0)
    red_dwarf_two_gen_chance: int = Field(default=450, ge=0)
    red_dwarf_three_gen_chance: int = Field(default=700, ge=0)
    red_dwarf_four_gen_chance: int = Field(default=850, ge=0)
    red_dwarf_five_gen_chance: int = Field(default=350, ge=0)
    orange_dwarf_gen_chance: int = Field(default=300, ge=0)
    yellow_dwarf_gen_chance: int = Field(default=180, ge=0)
    white_star_gen_chance: int = Field(default=50, ge=0)
    blue_star_one_gen_chance: int = Field(default=15, ge=0)
    blue_star_two_gen_chance: int = Field(default=5, ge=0)
    blue_star_three_gen_chance: int = Field(default=1, ge=0)
    violet_star_one_gen_chance: int = Field(default=1, ge=0)
    violet_star_two_gen_chance: int = Field(default=0, ge=0)
    violet_star_three_gen_chance: int = Field(default=0, ge=0)


class CelestialBodySettings(BaseModel):
    """Per-composition toggles for body generation."""

    model_config = ConfigDict(frozen=True)

    do_not_generate_gaseous: bool = False
    do_not_generate_icy: bool = False
    do_not_generate_rocky: bool = False
    do_not_generate_metallic: bool = False


class GenerationSettings(BaseModel):
    """All settings of a generation run."""

    model_config = ConfigDict(frozen=True)

    seed: str = Field(default=DEFAULT_SEED, min_length=1, description="Generation seed")
    universe: UniverseSettings = Field(default_factory=UniverseSettings)
    galaxy: GalaxySettings = Field(default_factory=GalaxySettings)
    sector: SectorSettings = Field(default_factory=SectorSettings)
    system: SystemSettings = Field(default_factory=SystemSettings)
    star: StarSettings = Field(default_factory=StarSettings)
    celestial_body: CelestialBodySettings = Field(default_factory=CelestialBodySettings)


def load_settings(filepath: str, seed: Optional[str] = None) -> GenerationSettings:
    """Load settings from a JSON file.

    Args:
        filepath: Path to a JSON document with any subset of the settings
        seed: Optional seed overriding the file's one

    Returns:
        Validated GenerationSettings

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If the document is not valid JSON or not valid settings
    """
    path = Path(filepath)
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Settings file {path} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must hold a JSON object")
    if seed is not None:
        data["seed"] = seed
    try:
        return GenerationSettings.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings in {path}: {e}") from e
