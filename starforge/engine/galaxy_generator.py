"""Galaxy generation: category, sub-category, size, age and special traits.

Every draw is keyed on the galaxy's index in its neighborhood (``gal_{index}_*``),
so sibling galaxies differ while each one stays reproducible on its own.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..models import (
    ClusterDensity,
    DominantElliptical,
    Elliptical,
    GalacticNeighborhood,
    Galaxy,
    GalaxyCategory,
    GalaxySpecialTrait,
    GalaxySpecialTraitKind,
    GalaxySubCategory,
    GenerationSettings,
    GroupDensity,
    Intergalactic,
    Intracluster,
    Irregular,
    Lenticular,
    SatelliteAbundance,
    Spiral,
    StelliferousEra,
    VoidDensity,
)
from ..models.galaxy import BOX_CATEGORIES, NO_SPECIAL_TRAIT
from ..models.neighborhood import count_dominant_galaxies, count_major_galaxies
from ..utils import RollToProcess, SeededDiceRoller, WeightedResult
from ..utils.constants import (
    OUR_GALAXY_AGE,
    OUR_GALAXY_NAME,
    OUR_GALAXY_RADIUS,
    OUR_GALAXY_THICKNESS,
)
from .division_index import generate_division_levels

logger = logging.getLogger(__name__)

DEFAULT_GALAXY_NAME = "Galaxy"

Kind = GalaxySpecialTraitKind
Sub = GalaxySubCategory


@dataclass(frozen=True)
class KnownGalaxy:
    """A galaxy of our Local Group, used when ``galaxy.use_ours`` is set."""

    name: str
    is_major: bool
    age: Optional[float]  # None rolls the age like any other galaxy
    category: GalaxyCategory
    sub_category: GalaxySubCategory
    special_traits: Tuple[GalaxySpecialTrait, ...] = (NO_SPECIAL_TRAIT,)


LOCAL_GROUP_GALAXIES = (
    KnownGalaxy(
        OUR_GALAXY_NAME,
        True,
        OUR_GALAXY_AGE,
        Spiral(OUR_GALAXY_RADIUS, OUR_GALAXY_THICKNESS),
        Sub.BARRED_SPIRAL,
    ),
    KnownGalaxy(
        "Andromeda",
        True,
        None,
        Spiral(33_700, 340),
        Sub.CLASSIC_SPIRAL,
        (
            GalaxySpecialTrait(Kind.DOUBLE_NUCLEI),
            GalaxySpecialTrait(Kind.SATELLITES, satellites=SatelliteAbundance.MORE),
        ),
    ),
    KnownGalaxy(
        "Large Magellanic Cloud",
        False,
        None,
        Irregular(9_860, 9_860, 600),
        Sub.DWARF_SPIRAL,
        (GalaxySpecialTrait(Kind.STARBURST),),
    ),
    KnownGalaxy(
        "Small Magellanic Cloud",
        False,
        None,
        Irregular(5_780, 5_780, 400),
        Sub.DWARF_AMORPHOUS,
        (GalaxySpecialTrait(Kind.GAS_RICH), GalaxySpecialTrait(Kind.METAL_POOR)),
    ),
)

# Pairs of trait groups a galaxy cannot have at the same time
OPPOSITE_TRAITS = (
    ((Kind.COMPACT,), (Kind.EXPANSIVE,)),
    ((Kind.GAS_POOR,), (Kind.GAS_RICH,)),
    ((Kind.YOUNGER,), (Kind.OLDER,)),
    ((Kind.SUB_SIZE,), (Kind.SUPER_SIZE,)),
    ((Kind.STARBURST,), (Kind.DEAD, Kind.DORMANT)),
)


def generate_galaxy(
    neighborhood: GalacticNeighborhood, index: int, settings: GenerationSettings
) -> Galaxy:
    """Generate the galaxy at ``index`` in its neighborhood.

    Dominant galaxies come first in a cluster, then major galaxies, then
    minor ones. With ``galaxy.use_ours``, the first indexes are the known
    galaxies of the Local Group.

    Args:
        neighborhood: Neighborhood the galaxy belongs to
        index: Position of the galaxy in the neighborhood
        settings: Generation settings

    Returns:
        The generated Galaxy, with its division ladder and empty caches
    """
    seed = settings.seed
    if settings.galaxy.use_ours and index < len(LOCAL_GROUP_GALAXIES):
        model = LOCAL_GROUP_GALAXIES[index]
        name = model.name
        is_dominant = False
        is_major = model.is_major
        age = model.age if model.age is not None else generate_age(neighborhood, index, settings)
        category = model.category
        sub_category = model.sub_category
        special_traits = list(model.special_traits)
    else:
        name = DEFAULT_GALAXY_NAME
        is_dominant = is_galaxy_dominant(neighborhood, index)
        is_major = is_galaxy_major(neighborhood, index)
        age = generate_age(neighborhood, index, settings)
        category_kind = generate_category_kind(neighborhood, index, age, is_dominant, is_major, seed)
        sub_category = generate_sub_category(category_kind, index, age, is_major, settings)
        category = get_category_with_size(category_kind, sub_category, index, seed)
        special_traits = generate_special_traits(
            neighborhood, category, sub_category, index, settings
        )

    galaxy = Galaxy(
        settings=settings,
        neighborhood=neighborhood,
        index=index,
        name=name,
        age=age,
        is_dominant=is_dominant,
        is_major=is_major,
        category=category,
        sub_category=sub_category,
        special_traits=special_traits,
        division_levels=generate_division_levels(settings),
    )
    logger.info(f"Generated galaxy {galaxy}")
    return galaxy


def is_galaxy_dominant(neighborhood: GalacticNeighborhood, index: int) -> bool:
    """Only the first galaxies of a cluster can be dominant."""
    return index < count_dominant_galaxies(neighborhood.density)


def is_galaxy_major(neighborhood: GalacticNeighborhood, index: int) -> bool:
    """Dominant galaxies count as major ones."""
    return index < count_major_galaxies(neighborhood.density)


def generate_age(neighborhood: GalacticNeighborhood, index: int, settings: GenerationSettings) -> float:
    """Age of a galaxy in billion years, rounded to the hundredth.

    Galaxies formed a few hundred million years after the big bang. A fixed
    age from the settings is used unless it exceeds the universe's age.
    """
    universe = neighborhood.universe
    fixed_age = settings.galaxy.fixed_age
    if fixed_age is not None and fixed_age <= universe.age:
        age = fixed_age
    else:
        if fixed_age is not None:
            logger.warning(
                f"Fixed galaxy age {fixed_age} exceeds the universe's age {universe.age}, "
                f"rolling galaxy #{index}'s age instead"
            )
        rng = SeededDiceRoller(settings.seed, f"gal_{index}_age")
        if universe.era == StelliferousEra.ANCIENT_STELLIFEROUS:
            age = universe.age - rng.roll(1, 16, 19) / 100
        else:
            age = universe.age - rng.roll(1, 36, 24) / 100
    return max(round(age * 100) / 100, 0.01)


def generate_category_kind(
    neighborhood: GalacticNeighborhood,
    index: int,
    age: float,
    is_dominant: bool,
    is_major: bool,
    seed: str,
) -> type:
    """Pick the category class of a galaxy; sizes are rolled afterwards."""
    density = neighborhood.density
    if isinstance(density, ClusterDensity) and is_dominant:
        return DominantElliptical

    rng = SeededDiceRoller(seed, f"gal_{index}_cat")
    if isinstance(density, VoidDensity):
        if is_major:
            rows = [
                (Intergalactic, 1),
                (Irregular, 13 if age < 1.0 else 4 if age < 5.0 else 1),
                (Spiral, 8 if age < 50.0 else 3),
                (Lenticular, 4 if age < 50.0 else 7),
                (Elliptical, 1 if age < 50.0 else 4 if age < 750.0 else 12),
            ]
        else:
            rows = [(Intergalactic, 1), (Irregular, 6)]
    elif isinstance(density, GroupDensity):
        if is_major:
            rows = [
                (Intergalactic, 3 if age < 5.0 else 1),
                (Irregular, 13 if age < 1.0 else 5 if age < 5.0 else 2),
                (Spiral, 9 if age < 50.0 else 3),
                (Lenticular, 5 if age < 50.0 else 8),
                (Elliptical, 1 if age < 5.0 else 3 if age < 50.0 else 9 if age < 750.0 else 12),
            ]
        else:
            rows = [(Intergalactic, 1), (Irregular, 11)]
    elif isinstance(density, ClusterDensity):
        if is_major:
            rows = [
                (Intracluster, 2),
                (Irregular, 20 if age < 1.0 else 5 if age < 5.0 else 2),
                (Spiral, 4 if age < 50.0 else 2),
                (Lenticular, 5 if age < 5.0 else 11),
                (Elliptical, 1 if age < 5.0 else 4 if age < 50.0 else 10 if age < 750.0 else 18),
            ]
        else:
            rows = [(Intracluster, 1), (Irregular, 6)]
    else:
        raise TypeError(f"Unknown neighborhood density: {density!r}")
    return rng.get_result(RollToProcess.simple(rows))


def generate_sub_category(
    category_kind: type, index: int, age: float, is_major: bool, settings: GenerationSettings
) -> GalaxySubCategory:
    """Pick the sub-category of a galaxy from its category class."""
    if settings.galaxy.fixed_sub_category is not None:
        return settings.galaxy.fixed_sub_category

    rng = SeededDiceRoller(settings.seed, f"gal_{index}_sbc")
    if category_kind in BOX_CATEGORIES:
        if is_major:
            return Sub.AMORPHOUS
        rows = [
            (Sub.DWARF_AMORPHOUS, 10 if age < 5.0 else 4),
            (Sub.DWARF_SPIRAL, 1 if age < 5.0 else 4 if age < 50.0 else 2),
            (Sub.DWARF_LENTICULAR, 1 if age < 5.0 else 2 if age < 50.0 else 4),
            (Sub.DWARF_ELLIPTICAL, 1 if age < 5.0 else 2 if age < 50.0 else 6),
        ]
    elif category_kind is Spiral:
        if not is_major:
            return Sub.DWARF_SPIRAL
        rows = [
            (Sub.FLAT_SPIRAL, 2),
            (Sub.BARRED_SPIRAL, 7 if 5.0 < age < 50.0 else 3),
            (Sub.CLASSIC_SPIRAL, 3),
        ]
    elif category_kind is Lenticular:
        if not is_major:
            return Sub.DWARF_LENTICULAR
        rows = [(Sub.COMMON_LENTICULAR, 7), (Sub.GIANT_LENTICULAR, 3 if age < 500.0 else 10)]
    elif category_kind is Elliptical:
        if not is_major:
            return Sub.DWARF_ELLIPTICAL
        rows = [(Sub.COMMON_ELLIPTICAL, 5), (Sub.GIANT_ELLIPTICAL, 3 if age < 500.0 else 8)]
    elif category_kind is DominantElliptical:
        rows = [
            (Sub.COMMON_ELLIPTICAL, 6 if age < 50.0 else 3),
            (Sub.GIANT_ELLIPTICAL, 3 if age < 50.0 else 8 if age < 500.0 else 12),
        ]
    else:
        raise TypeError(f"Unknown galaxy category: {category_kind!r}")
    return rng.get_result(RollToProcess.simple(rows))


def get_category_with_size(
    category_kind: type, sub_category: GalaxySubCategory, index: int, seed: str
) -> GalaxyCategory:
    """Roll the size of a galaxy, in parsecs, from its sub-category.

    Dwarf sub-categories keep a box category when the galaxy has one; a
    sub-category that implies a shape gives that shape.
    """
    rng = SeededDiceRoller(seed, f"gal_{index}_cws")
    box = category_kind if category_kind in BOX_CATEGORIES else Intracluster

    if sub_category == Sub.DWARF_AMORPHOUS:
        return box(rng.roll(1, 390, 9) * 10, rng.roll(1, 390, 9) * 10, rng.roll(1, 2925, 74))
    elif sub_category == Sub.AMORPHOUS:
        return box(
            rng.roll(1, 1125, 124) * 10, rng.roll(1, 1125, 124) * 10, rng.roll(1, 900, 99) * 10
        )
    elif sub_category in (Sub.DWARF_SPIRAL, Sub.DWARF_LENTICULAR):
        radius = rng.roll(1, 475, 24) * 10
        flattening = 3 if sub_category == Sub.DWARF_SPIRAL else 6
        thickness = max(radius * rng.roll(1, flattening) // 100, 10)
        if category_kind in BOX_CATEGORIES:
            return category_kind(radius * 2, radius * 2, thickness)
        disk = Spiral if sub_category == Sub.DWARF_SPIRAL else Lenticular
        return disk(radius, thickness)
    elif sub_category in (Sub.FLAT_SPIRAL, Sub.BARRED_SPIRAL, Sub.CLASSIC_SPIRAL):
        radius = rng.roll(5, 4) * 1000
        return Spiral(radius, max(radius // 100, 10))
    elif sub_category == Sub.COMMON_LENTICULAR:
        radius = rng.roll(5, 6) * 1000
        return Lenticular(radius, max(radius * rng.roll(2, 6) // 100, 10))
    elif sub_category == Sub.GIANT_LENTICULAR:
        radius = rng.roll(1, 31, 29) * 1000
        return Lenticular(radius, max(radius * rng.roll(3, 6) // 100, 10))
    elif sub_category == Sub.DWARF_ELLIPTICAL:
        radius = rng.roll(1, 500) * 10
        if category_kind is Intracluster:
            return Intracluster(radius * 2, radius * 2, max(radius * (rng.roll(10, 4) // 20), 5))
        elif category_kind in BOX_CATEGORIES:
            return category_kind(radius * 2, radius * 2, max(radius * (rng.roll(10, 3) // 10), 5))
        return Elliptical(radius)
    elif sub_category == Sub.COMMON_ELLIPTICAL:
        if category_kind is DominantElliptical:
            return DominantElliptical(rng.roll(5, 31, 45) * 1000)
        return Elliptical(rng.roll(10, 20) * 100)
    elif sub_category == Sub.GIANT_ELLIPTICAL:
        if category_kind is DominantElliptical:
            return DominantElliptical(rng.roll(5, 61, 195) * 1000)
        return Elliptical(rng.roll(5, 61, 195) * 100)
    raise TypeError(f"Unknown galaxy sub-category: {sub_category!r}")


# ========== Special traits ==========


def generate_special_traits(
    neighborhood: GalacticNeighborhood,
    category: GalaxyCategory,
    sub_category: GalaxySubCategory,
    index: int,
    settings: GenerationSettings,
) -> List[GalaxySpecialTrait]:
    """Pick the special traits of a galaxy.

    Fixed traits from the settings replace the random ones. Otherwise the
    galaxy gets the traits its universe's era imposes, then a random number
    of traits drawn from a weighted list that depends on its category. A
    galaxy with no trait gets NoPeculiarity.
    """
    seed = settings.seed
    all_traits = get_full_list_of_traits(neighborhood, category, sub_category, index, seed)

    fixed_kinds = settings.galaxy.fixed_special_traits
    if fixed_kinds is not None:
        by_kind = {row.result.kind: row.result for row in all_traits}
        special_traits = [by_kind[kind] for kind in fixed_kinds]
    else:
        possible_traits = remove_forbidden_traits(category, sub_category, settings, all_traits)
        special_traits = add_age_related_traits(neighborhood, [], index, seed)
        special_traits = add_random_traits(
            get_number_of_random_traits(index, seed), possible_traits, special_traits, index, seed
        )
    return clean_special_traits(special_traits)


def get_full_list_of_traits(
    neighborhood: GalacticNeighborhood,
    category: GalaxyCategory,
    sub_category: GalaxySubCategory,
    index: int,
    seed: str,
) -> List[WeightedResult]:
    """Every trait a galaxy might get, weighted by how common it is for this galaxy.

    Payloads (densities, sizes, satellites) are rolled here, in list order.
    """
    rng = SeededDiceRoller(seed, f"gal_{index}_gsp")
    is_dwarf = sub_category.is_dwarf
    is_dominant = isinstance(category, DominantElliptical)
    is_elliptical = isinstance(category, Elliptical)
    is_disk = isinstance(category, (Spiral, Lenticular))
    in_cluster = isinstance(neighborhood.density, ClusterDensity)
    in_group = isinstance(neighborhood.density, GroupDensity)

    compact = rng.get_result(RollToProcess.simple([(200, 1), (150, 3), (120, 6)]))
    expansive = rng.get_result(RollToProcess.simple([(20, 1), (50, 3), (75, 6)]))
    satellites = rng.get_result(
        RollToProcess.simple(
            [
                (SatelliteAbundance.MUCH_MORE, 1),
                (SatelliteAbundance.MORE, 3),
                (SatelliteAbundance.LESS, 3),
                (SatelliteAbundance.MUCH_LESS, 2),
                (SatelliteAbundance.NONE, 1),
                (SatelliteAbundance.SPECIAL, 1),
            ]
        )
    )
    sub_size = rng.get_result(RollToProcess.simple([(20, 1), (30, 1), (50, 1), (75, 1)]))
    super_size = rng.get_result(RollToProcess.simple([(150, 1), (200, 1), (300, 1), (500, 1)]))

    if isinstance(category, Spiral) and sub_category != Sub.DWARF_SPIRAL:
        satellites_weight = 10
    elif is_elliptical and sub_category != Sub.GIANT_ELLIPTICAL:
        satellites_weight = 8
    elif is_dominant:
        satellites_weight = 10
    else:
        satellites_weight = 23

    if sub_category == Sub.AMORPHOUS:
        starburst_weight = 20
    elif isinstance(category, Spiral) or is_dwarf:
        starburst_weight = 5
    else:
        starburst_weight = 2

    if isinstance(category, Irregular):
        gas_rich_weight = 20
    elif is_dwarf:
        gas_rich_weight = 10
    else:
        gas_rich_weight = 2 if is_dominant else 5

    if is_dominant:
        interacting_weight = 7
    elif is_dwarf or sub_category.is_giant or isinstance(category, Irregular):
        interacting_weight = 10
    else:
        interacting_weight = 5

    if isinstance(category, Lenticular):
        gas_poor_weight = 10
    elif is_elliptical:
        gas_poor_weight = 15
    else:
        gas_poor_weight = 3 if is_dominant else 5

    rows = [
        (GalaxySpecialTrait(Kind.NO_PECULIARITY), 1 if is_dominant else 4),
        (GalaxySpecialTrait(Kind.ACTIVE_NUCLEUS), 10 if is_elliptical or is_dominant else 5),
        (GalaxySpecialTrait(Kind.DOUBLE_NUCLEI), 1),
        (
            GalaxySpecialTrait(Kind.COMPACT, percentage=compact),
            20 if is_dwarf else 3 if is_dominant else 5,
        ),
        (GalaxySpecialTrait(Kind.DUSTY), 2 if is_dwarf else 20 if is_disk else 5),
        (
            GalaxySpecialTrait(Kind.EXPANSIVE, percentage=expansive),
            2 if is_dwarf else 7 if is_dominant else 5,
        ),
        (GalaxySpecialTrait(Kind.EXTENDED_HALO), 10 if in_cluster or is_disk else 5),
        (GalaxySpecialTrait(Kind.GAS_POOR), gas_poor_weight),
        (GalaxySpecialTrait(Kind.GAS_RICH), gas_rich_weight),
        (GalaxySpecialTrait(Kind.INTERACTING), interacting_weight),
        (GalaxySpecialTrait(Kind.METAL_POOR), 20 if is_dwarf else 3 if is_dominant else 5),
        (
            GalaxySpecialTrait(Kind.OLDER),
            20 if isinstance(category, BOX_CATEGORIES) or is_dwarf else 10,
        ),
        (GalaxySpecialTrait(Kind.SATELLITES, satellites=satellites), satellites_weight),
        (GalaxySpecialTrait(Kind.STARBURST), starburst_weight),
        (GalaxySpecialTrait(Kind.SUB_SIZE, percentage=sub_size), 10 if is_dwarf else 5),
        (
            GalaxySpecialTrait(Kind.SUPER_SIZE, percentage=super_size),
            25
            if is_dominant
            else 2
            if sub_category in (Sub.DWARF_AMORPHOUS, Sub.AMORPHOUS)
            else 5,
        ),
        (GalaxySpecialTrait(Kind.YOUNGER), 2),
        (GalaxySpecialTrait(Kind.DEAD), 1),
        # Lost too much gas while interacting with other galaxies to form new stars
        (GalaxySpecialTrait(Kind.DORMANT), 3 if in_cluster else 2 if in_group else 1),
        (GalaxySpecialTrait(Kind.TAIL), 3 if is_dwarf else 1),
    ]
    return [WeightedResult(result, weight) for result, weight in rows]


def remove_forbidden_traits(
    category: GalaxyCategory,
    sub_category: GalaxySubCategory,
    settings: GenerationSettings,
    all_traits: Sequence[WeightedResult],
) -> List[WeightedResult]:
    """Drop the traits the settings forbid and those that make no sense for this galaxy."""
    forbidden = set(settings.galaxy.forbidden_special_traits)
    if sub_category.is_dwarf:
        forbidden |= {Kind.ACTIVE_NUCLEUS, Kind.DOUBLE_NUCLEI, Kind.EXTENDED_HALO, Kind.SATELLITES}
    elif sub_category.is_giant or isinstance(category, DominantElliptical):
        forbidden.add(Kind.SUB_SIZE)
    elif isinstance(category, Elliptical):
        forbidden.add(Kind.GAS_RICH)
    elif isinstance(category, Lenticular):
        forbidden |= {Kind.GAS_RICH, Kind.METAL_POOR}
    elif sub_category == Sub.AMORPHOUS:
        forbidden |= {Kind.ACTIVE_NUCLEUS, Kind.EXTENDED_HALO, Kind.GAS_POOR, Kind.METAL_POOR}
    return [row for row in all_traits if row.result.kind not in forbidden]


def add_age_related_traits(
    neighborhood: GalacticNeighborhood,
    list_to_fill: List[GalaxySpecialTrait],
    index: int,
    seed: str,
) -> List[GalaxySpecialTrait]:
    """Add the traits the universe's era imposes: young galaxies early, old and dead ones late."""
    rng = SeededDiceRoller(seed, f"gal_{index}_spa")
    universe = neighborhood.universe
    if universe.era in (StelliferousEra.ANCIENT_STELLIFEROUS, StelliferousEra.EARLY_STELLIFEROUS):
        if universe.age < 1.5 or rng.roll(1, 3) == 1:
            list_to_fill.append(GalaxySpecialTrait(Kind.YOUNGER))
    elif universe.era in (StelliferousEra.LATE_STELLIFEROUS, StelliferousEra.END_STELLIFEROUS):
        if universe.age > 1500.0 or rng.roll(1, 3) == 1:
            list_to_fill.append(GalaxySpecialTrait(Kind.OLDER))
        if universe.age > 50000.0:
            list_to_fill.append(GalaxySpecialTrait(Kind.DEAD))
    return list_to_fill


def get_number_of_random_traits(index: int, seed: str) -> int:
    """Roll how many random traits a galaxy gets; a 50 rolls again."""
    rng = SeededDiceRoller(seed, f"gal_{index}_srt")
    number = 0
    roll = 0
    turn = 0
    while roll == 50 or turn < 1:
        roll = rng.roll(1, 50)
        if roll >= 10:
            number += 1
        turn += 1
    return number


def add_random_traits(
    to_add: int,
    possible_traits: Sequence[WeightedResult],
    list_to_fill: List[GalaxySpecialTrait],
    index: int,
    seed: str,
) -> List[GalaxySpecialTrait]:
    """Draw ``to_add`` distinct traits, each one replacing its opposites.

    Stops early when no possible trait is left.
    """
    rng = SeededDiceRoller(seed, f"gal_{index}_art")
    remaining = list(possible_traits)
    added = 0
    while added < to_add and sum(row.weight for row in remaining) > 0:
        picked_index = rng.get_result_index(RollToProcess(remaining))
        picked = remaining.pop(picked_index).result
        if any(t.kind == picked.kind for t in list_to_fill):
            continue
        remove_opposite_traits(picked, list_to_fill)
        list_to_fill.append(picked)
        added += 1
    return list_to_fill


def get_opposite_kinds(kind: GalaxySpecialTraitKind) -> Tuple[GalaxySpecialTraitKind, ...]:
    """Trait kinds incompatible with ``kind``."""
    for left, right in OPPOSITE_TRAITS:
        if kind in left:
            return right
        if kind in right:
            return left
    return ()


def remove_opposite_traits(trait: GalaxySpecialTrait, list_to_fill: List[GalaxySpecialTrait]):
    """Remove from ``list_to_fill``, in place, every trait opposite to ``trait``."""
    opposites = get_opposite_kinds(trait.kind)
    list_to_fill[:] = [t for t in list_to_fill if t.kind not in opposites]


def clean_special_traits(special_traits: List[GalaxySpecialTrait]) -> List[GalaxySpecialTrait]:
    """NoPeculiarity when there is no trait, and only then."""
    if not special_traits:
        return [NO_SPECIAL_TRAIT]
    if len(special_traits) > 1:
        return [t for t in special_traits if t.kind != Kind.NO_PECULIARITY]
    return special_traits
