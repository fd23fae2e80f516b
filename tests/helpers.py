"""Builders for settings, galaxies and stars shared by the tests."""

from starforge.engine.division_index import generate_division_levels
from starforge.models import (
    GalacticNeighborhood,
    Galaxy,
    GalaxySpecialTrait,
    GalaxySpecialTraitKind,
    GalaxySubCategory,
    GenerationSettings,
    GroupDensity,
    Irregular,
    Star,
    StarLuminosityClass,
    StarSpectralType,
    StellarEvolution,
    StelliferousEra,
    Universe,
)


def make_settings(seed: str = "test", **overrides) -> GenerationSettings:
    """Settings with a single-galaxy neighborhood, to keep generation quick."""
    data = {
        "seed": seed,
        "galaxy": {"fixed_neighborhood": {"kind": "group", "galaxies": 1, "minor": 0}},
    }
    data.update(overrides)
    return GenerationSettings.model_validate(data)


def make_galaxy(settings: GenerationSettings, category=None, sub_category=None) -> Galaxy:
    """A major galaxy of a middle-aged universe, built without rolling anything."""
    universe = Universe(StelliferousEra.MIDDLE_STELLIFEROUS, 13.8)
    neighborhood = GalacticNeighborhood(universe, GroupDensity(1, 0))
    return Galaxy(
        settings=settings,
        neighborhood=neighborhood,
        index=0,
        name="Test Galaxy",
        age=13.5,
        is_dominant=False,
        is_major=True,
        category=category or Irregular(100, 100, 10),
        sub_category=sub_category or GalaxySubCategory.AMORPHOUS,
        special_traits=[GalaxySpecialTrait(GalaxySpecialTraitKind.NO_PECULIARITY)],
        division_levels=generate_division_levels(settings),
    )


def make_star(name: str = "Star", mass: float = 1.0, luminosity: float = 1.0, radius: float = 1.0) -> Star:
    """A main sequence star with the given physical values."""
    return Star(
        name=name,
        mass=mass,
        luminosity=luminosity,
        radius=radius,
        age=4600.0,
        temperature=5778,
        population=StellarEvolution.DWARF,
        spectral_type=StarSpectralType("G", 2),
        luminosity_class=StarLuminosityClass.V,
    )
