"""Star generation: population, mass, age and the physical values they lead to.

Main sequence values come from simple mass laws. Older stars are interpolated
from a small dataset of temperatures and luminosities sampled along the life
of stars of eight reference masses, and mixed with their main sequence values
while they are young. Stars past the end of their life become white dwarfs,
neutron stars or black holes.
"""

import logging
import math
from typing import List, Tuple

from ..models import (
    GalacticHex,
    GalacticMapDivision,
    GalacticRegion,
    Galaxy,
    GalaxySpecialTraitKind,
    Intergalactic,
    SpaceCoordinates,
    Star,
    StarLuminosityClass,
    StarSpectralType,
    StelliferousEra,
    StellarEvolution,
)
from ..utils import RollToProcess, SeededDiceRoller
from ..utils.constants import (
    BLUE_GIANT_MIN_MASS,
    BLUE_GIANT_POP_DWARF_MAX_MASS,
    BLUE_GIANT_POP_HYPERDWARF_MAX_MASS,
    BLUE_GIANT_POP_PALEODWARF_MAX_MASS,
    BLUE_GIANT_POP_SUBDWARF_MAX_MASS,
    BLUE_GIANT_POP_SUPERDWARF_MAX_MASS,
    BROWN_DWARF_MIN_MASS,
    CHANDRASEKHAR_LIMIT,
    ORANGE_DWARF_MIN_MASS,
    RED_DWARF_POP_DWARF_MIN_MASS,
    RED_DWARF_POP_HYPERDWARF_MIN_MASS,
    RED_DWARF_POP_PALEODWARF_MIN_MASS,
    RED_DWARF_POP_SUBDWARF_MIN_MASS,
    STEFAN_BOLTZMANN_SCALED,
    SUN_AGE,
    SUN_MASS,
    TOLMAN_OPPENHEIMER_VOLKOFF_LIMIT,
    WHITE_DWARF_MIN_MASS,
    WHITE_GIANT_MIN_MASS,
    YELLOW_DWARF_MIN_MASS,
)
from ..utils.naming import get_star_name

logger = logging.getLogger(__name__)

MAX_TEMPERATURE = 2**32 - 1

# Calibration factors bringing Stefan-Boltzmann results closer to known stars
TEMPERATURE_CALIBRATION = 0.94304315
LUMINOSITY_CALIBRATION = 1.2643679
RADIUS_CALIBRATION = 0.88937

GRAVITATIONAL_CONSTANT = 6.674e-11
SPEED_OF_LIGHT = 299_792_458.0
SUN_RADIUS_KM = 696_340.0

# (temperature, log10 luminosity) along the life of a star, one row per
# reference mass (0.4, 0.5, 1, 2, 5, 15, 60 and 500 solar masses). Columns go
# birth, mid main sequence, subgiant start, mid subgiant, giant start, mid
# giant and end of the giant phase.
STAR_LIFECYCLE_DATASET: Tuple[Tuple[Tuple[float, float], ...], ...] = (
    ((3375, -2.05), (4300, -0.8), (4100, -0.2), (3950, 0.7), (3800, 1.2), (3650, 1.75), (3200, 0.5)),
    ((4200, -1.3), (4300, -0.8), (4100, -0.2), (3950, 0.7), (3800, 1.2), (3650, 1.75), (3300, 2.3)),
    (
        (5400, -0.1455),
        (5805, 0.0126543),
        (5500, 0.6),
        (5200, 0.75),
        (4300, 0.75),
        (3900, 1.25),
        (3500, 2.6),
    ),
    ((8450, 0.8), (7800, 1.4), (6700, 1.4), (7500, 1.5), (5100, 1.7), (4500, 2.0), (3950, 2.9)),
    ((17000, 2.75), (16000, 3.1), (13800, 3.1), (8000, 3.2), (3600, 3.5), (8600, 3.8), (5500, 3.9)),
    ((31000, 4.4), (25000, 4.6), (27000, 4.7), (17000, 4.75), (12000, 4.8), (6000, 4.6), (3600, 4.8)),
    ((43520, 5.75), (17000, 5.95), (6000, 6.0), (19000, 6.1), (46000, 6.0), (27000, 5.9), (62000, 5.4)),
    ((53000, 6.7), (22000, 6.9), (7000, 6.8), (24000, 7.0), (48000, 6.9), (30000, 6.8), (70000, 6.2)),
)

# Descending temperatures and their spectral class as a number: tens are the
# letter (0 WR, 1 O ... 9 T, 10 Y), units the subtype
TEMPERATURE_TO_SPECTRAL_TYPE = (
    (MAX_TEMPERATURE, 0),
    (1_500_000, 0),
    (500_000, 1),
    (380_000, 2),
    (170_000, 3),
    (117_000, 4),
    (54_000, 12),
    (45_000, 13),
    (43_300, 14),
    (40_600, 15),
    (39_500, 16),
    (37_100, 17),
    (35_100, 18),
    (33_300, 19),
    (29_200, 20),
    (23_000, 21),
    (21_000, 22),
    (17_600, 23),
    (15_200, 25),
    (14_300, 26),
    (13_500, 27),
    (12_300, 28),
    (11_400, 29),
    (9_600, 30),
    (9_330, 31),
    (9_040, 32),
    (8_750, 33),
    (8_480, 34),
    (8_310, 35),
    (7_920, 37),
    (7_350, 40),
    (7_050, 42),
    (6_850, 43),
    (6_700, 45),
    (6_550, 46),
    (6_400, 47),
    (6_300, 48),
    (6_050, 50),
    (5_930, 51),
    (5_800, 52),
    (5_660, 55),
    (5_440, 58),
    (5_240, 60),
    (5_110, 61),
    (4_960, 62),
    (4_800, 63),
    (4_600, 64),
    (4_400, 65),
    (4_000, 67),
    (3_750, 70),
    (3_700, 71),
    (3_600, 72),
    (3_500, 73),
    (3_400, 74),
    (3_200, 75),
    (3_100, 76),
    (2_900, 77),
    (2_700, 78),
    (2_600, 80),
    (2_200, 83),
    (1_500, 88),
    (1_400, 92),
    (1_000, 96),
    (800, 98),
    (370, 100),
    (350, 101),
    (320, 102),
    (250, 104),
    (0, 109),
)

SPECTRAL_LETTERS = ("WR", "O", "B", "A", "F", "G", "K", "M", "L", "T")
BROWN_DWARF_LETTERS = ("L", "T", "Y")

WHITE_DWARF_SPECTRAL_WEIGHTS = (
    ("DA", 688),
    ("DB", 150),
    ("DC", 90),
    ("DX", 50),
    ("DQ", 15),
    ("DZ", 6),
    ("DO", 1),
)

ERA_POPULATION_MODIFIERS = {
    StelliferousEra.ANCIENT_STELLIFEROUS: -10,
    StelliferousEra.EARLY_STELLIFEROUS: -5,
    StelliferousEra.MIDDLE_STELLIFEROUS: 0,
    StelliferousEra.LATE_STELLIFEROUS: 2,
    StelliferousEra.END_STELLIFEROUS: 5,
}

TRAIT_POPULATION_MODIFIERS = {
    GalaxySpecialTraitKind.METAL_POOR: -5,
    GalaxySpecialTraitKind.YOUNGER: -2,
    GalaxySpecialTraitKind.SUB_SIZE: -1,
    GalaxySpecialTraitKind.DUSTY: 1,
    GalaxySpecialTraitKind.SUPER_SIZE: 1,
    GalaxySpecialTraitKind.STARBURST: 2,
}

REGION_POPULATION_MODIFIERS = {
    GalacticRegion.NUCLEUS: 2,
    GalacticRegion.CORE: 1,
    GalacticRegion.BAR: 1,
    GalacticRegion.ARM: 1,
    GalacticRegion.DISK: -1,
    GalacticRegion.ELLIPSE: -2,
    GalacticRegion.HALO: -5,
    GalacticRegion.VOID: -5,
    GalacticRegion.STREAM: -5,
    GalacticRegion.AURA: -10,
}

MAX_MASS_BY_POPULATION = {
    StellarEvolution.HYPERDWARF: BLUE_GIANT_POP_HYPERDWARF_MAX_MASS,
    StellarEvolution.SUPERDWARF: BLUE_GIANT_POP_SUPERDWARF_MAX_MASS,
    StellarEvolution.SUBDWARF: BLUE_GIANT_POP_SUBDWARF_MAX_MASS,
    StellarEvolution.PALEODWARF: BLUE_GIANT_POP_PALEODWARF_MAX_MASS,
}

LIFESPAN_FACTORS = {
    StellarEvolution.HYPERDWARF: 0.5,
    StellarEvolution.SUPERDWARF: 2.0,
    StellarEvolution.DWARF: 1.0,
    StellarEvolution.SUBDWARF: 0.5,
    StellarEvolution.PALEODWARF: 0.1,
}

RADIUS_FACTORS = {
    StellarEvolution.HYPERDWARF: 1.5,
    StellarEvolution.SUPERDWARF: 1.25,
    StellarEvolution.DWARF: 1.0,
    StellarEvolution.SUBDWARF: 0.75,
    StellarEvolution.PALEODWARF: 0.5,
}

LUMINOSITY_FACTORS = {
    StellarEvolution.HYPERDWARF: 0.5,
    StellarEvolution.SUPERDWARF: 0.75,
    StellarEvolution.DWARF: 1.0,
    StellarEvolution.SUBDWARF: 1.25,
    StellarEvolution.PALEODWARF: 1.5,
}

MAX_STAR_MASS_BEFORE_LOSS = 150.0


def generate_stellar_evolution(
    galaxy: Galaxy,
    hex_: GalacticHex,
    coord: SpaceCoordinates,
    system_index: int,
    star_index: int,
    sub_sector: GalacticMapDivision,
    divisions: List[GalacticMapDivision],
    attempt: int = 0,
) -> StellarEvolution:
    """Roll the population a star belongs to.

    Four small rolls keyed on the sub-sector, the hex, the star and the
    system add up with modifiers from the universe's era, the galaxy's
    size, category and traits, and the regions enclosing the system. Low
    totals give metal-poor early populations, high ones the metal-rich
    populations of an old universe.

    Args:
        galaxy: Galaxy the star is in
        hex_: Hex the system is in
        coord: Coordinates of the system
        system_index: Index of the system in its hex
        star_index: Index of the star in its system
        sub_sector: Level 1 division enclosing the system
        divisions: Every division enclosing the system
        attempt: System generation attempt

    Returns:
        The star's StellarEvolution
    """
    seed = f"{attempt}{galaxy.seed}"
    sub_sector_rng = SeededDiceRoller(seed, f"sys_{sub_sector.index}_ste_evo")
    hex_rng = SeededDiceRoller(seed, f"sys_{hex_.index}_ste_evo")
    star_rng = SeededDiceRoller(seed, f"sys_{star_index}_ste_evo")
    system_rng = SeededDiceRoller(seed, f"sys_{coord}_{system_index}_ste_evo")

    modifier = ERA_POPULATION_MODIFIERS[galaxy.neighborhood.universe.era]
    if galaxy.is_dominant:
        modifier += 2
    elif not galaxy.is_major:
        modifier -= 2
    if isinstance(galaxy.category, Intergalactic):
        modifier -= 10
    if galaxy.sub_category.is_dwarf:
        modifier -= 2
    elif galaxy.sub_category.is_giant:
        modifier += 1
    modifier += sum(TRAIT_POPULATION_MODIFIERS.get(t.kind, 0) for t in galaxy.special_traits)
    modifier += sum(REGION_POPULATION_MODIFIERS.get(r, 0) for r in {d.region for d in divisions})

    roll = (
        sub_sector_rng.roll(1, 4, -1)
        + hex_rng.roll(1, 3, -1)
        + star_rng.roll(1, 3, -1)
        + system_rng.roll(1, 4, -1)
        + modifier
    )
    if roll < -10:
        return StellarEvolution.PALEODWARF
    elif roll < 3:
        return StellarEvolution.SUBDWARF
    elif roll < 10:
        return StellarEvolution.DWARF
    elif roll < 20:
        return StellarEvolution.SUPERDWARF
    return StellarEvolution.HYPERDWARF


def generate_star(
    galaxy: Galaxy,
    hex_: GalacticHex,
    coord: SpaceCoordinates,
    system_index: int,
    star_index: int,
    system_name: str,
    population: StellarEvolution,
    attempt: int = 0,
) -> Star:
    """Generate a star of a system.

    Algorithm:
    1. Age from the settings, the stellar neighborhood or a roll; mass from
       the settings or the weighted mass ranges, very massive stars losing
       mass with age
    2. Main sequence luminosity, radius and temperature from the mass, and
       the length of the main sequence, subgiant and giant phases
    3. A star past its giant phase becomes a remnant; any other star gets its
       values interpolated from STAR_LIFECYCLE_DATASET and mixed with its
       main sequence ones
    4. Radius and luminosity are scaled by population

    Args:
        galaxy: Galaxy the star is in
        hex_: Hex the system is in
        coord: Coordinates of the system
        system_index: Index of the system in its hex
        star_index: Index of the star in its system
        system_name: Name of the system
        population: The star's StellarEvolution
        attempt: System generation attempt

    Returns:
        The generated Star, not placed in any orbit yet
    """
    settings = galaxy.settings.star
    seed = f"{attempt}{galaxy.seed}"
    step = f"star_{coord}_{system_index}_{star_index}"

    if settings.use_ours:
        age = SUN_AGE
    elif settings.fixed_age is not None:
        age = settings.fixed_age * 1000
    else:
        age = generate_age(galaxy, hex_, SeededDiceRoller(seed, f"{step}_age"))

    if settings.use_ours:
        mass = SUN_MASS
    elif settings.fixed_mass is not None:
        mass = settings.fixed_mass
    else:
        mass = generate_mass(galaxy, SeededDiceRoller(seed, f"{step}_mass"))
        mass = simulate_mass_loss_over_the_years(mass, age)

    ms_luminosity = calculate_main_sequence_luminosity(mass)
    ms_radius = round(mass**0.8, 3)
    ms_temperature = calculate_temperature_using_luminosity(ms_luminosity, ms_radius)

    main_lifespan = calculate_lifespan(mass, ms_luminosity) * LIFESPAN_FACTORS[population]
    subgiant_lifespan = main_lifespan * 0.15 if mass > RED_DWARF_POP_PALEODWARF_MIN_MASS else 0.0
    giant_lifespan = main_lifespan * 0.0917 if mass > RED_DWARF_POP_PALEODWARF_MIN_MASS else 0.0
    full_lifespan = main_lifespan + subgiant_lifespan + giant_lifespan
    age_range = get_age_range(age, main_lifespan, subgiant_lifespan, giant_lifespan)

    mass = min(mass, MAX_MASS_BY_POPULATION.get(population, mass))

    if age_range > 6:
        mass = calculate_remnant_mass(mass)
        if mass < CHANDRASEKHAR_LIMIT:
            radius = 0.0084 * mass ** (-1 / 3)
            initial_luminosity = 10**-2.15 * mass**3.95
            initial_temperature = calculate_temperature_using_luminosity(initial_luminosity, radius)
            temperature = int(initial_temperature * (age / 1000) ** (-1.3 / 4))
            luminosity = calculate_luminosity_using_temperature(temperature, radius)
            wd_rng = SeededDiceRoller(seed, f"{step}_wd_st")
            spectral_type = StarSpectralType(
                wd_rng.get_result(RollToProcess.simple(WHITE_DWARF_SPECTRAL_WEIGHTS))
            )
            luminosity_class = StarLuminosityClass.VII
        elif mass < TOLMAN_OPPENHEIMER_VOLKOFF_LIMIT:
            radius = calculate_compact_remnant_radius(mass)
            temperature = calculate_neutron_star_temperature(age, full_lifespan)
            luminosity = calculate_luminosity_using_temperature(temperature, radius)
            spectral_type = StarSpectralType("XNS")
            luminosity_class = StarLuminosityClass.XNS
        else:
            radius = calculate_compact_remnant_radius(mass)
            temperature = 0
            luminosity = 0.0
            spectral_type = StarSpectralType("XBH")
            luminosity_class = StarLuminosityClass.XBH
    else:
        if mass < RED_DWARF_POP_PALEODWARF_MIN_MASS:
            interpolated_temperature = ms_temperature
            interpolated_luminosity = ms_luminosity
            interpolated_radius = ms_radius
        else:
            mass_range = get_mass_range(mass)
            interpolated_temperature, log_luminosity = interpolate_lifecycle(age_range, mass_range)
            interpolated_luminosity = 10**log_luminosity
            interpolated_radius = calculate_radius_using_luminosity_and_temperature(
                interpolated_luminosity, interpolated_temperature
            )

        radius = mix_values(ms_radius, interpolated_radius, age, main_lifespan)
        luminosity = mix_values(ms_luminosity, interpolated_luminosity, age, main_lifespan)
        temperature = int(mix_values(ms_temperature, interpolated_temperature, age, main_lifespan))
        spectral_type = calculate_spectral_type(temperature)
        luminosity_class = calculate_luminosity_class(
            luminosity, spectral_type, age, main_lifespan, subgiant_lifespan
        )

    star = Star(
        name=get_star_name(system_name, star_index, settings.use_ours),
        mass=mass,
        luminosity=max(luminosity * LUMINOSITY_FACTORS[population], 0.0),
        radius=radius * RADIUS_FACTORS[population],
        age=age,
        temperature=max(temperature, 0),
        population=population,
        spectral_type=spectral_type,
        luminosity_class=luminosity_class,
    )
    logger.debug(f"Generated star {star}")
    return star


def generate_age(galaxy: Galaxy, hex_: GalacticHex, rng: SeededDiceRoller) -> float:
    """Age of a star in million years.

    Stars of a young, old or ancient neighborhood take its age. Stars of an
    early universe are as old as it allows; others roll between 1 and 10
    billion years. The result stays between 1 million years and the
    universe's age minus 40 million years.
    """
    universe = galaxy.neighborhood.universe
    universe_age = universe.age * 1000
    neighborhood_age = hex_.neighborhood.age_in_myr()
    if neighborhood_age is not None:
        age = float(neighborhood_age)
    elif universe.era in (StelliferousEra.ANCIENT_STELLIFEROUS, StelliferousEra.EARLY_STELLIFEROUS):
        age = min(universe_age - 300, universe_age - rng.roll(1, 9000))
    else:
        age = float(rng.roll(1, 9000, 999))
    return max(min(age, universe_age - 40), 1.0)


def get_mass_table(galaxy: Galaxy) -> RollToProcess:
    """Weighted mass ranges, in solar masses, from the star settings."""
    s = galaxy.settings.star
    return RollToProcess.simple(
        [
            ((BROWN_DWARF_MIN_MASS, RED_DWARF_POP_HYPERDWARF_MIN_MASS - 0.001), s.brown_dwarf_gen_chance),
            (
                (RED_DWARF_POP_HYPERDWARF_MIN_MASS, RED_DWARF_POP_DWARF_MIN_MASS - 0.001),
                s.red_dwarf_one_gen_chance,
            ),
            (
                (RED_DWARF_POP_DWARF_MIN_MASS, RED_DWARF_POP_SUBDWARF_MIN_MASS - 0.001),
                s.red_dwarf_two_gen_chance,
            ),
            ((RED_DWARF_POP_SUBDWARF_MIN_MASS, 0.25), s.red_dwarf_three_gen_chance),
            ((0.251, RED_DWARF_POP_PALEODWARF_MIN_MASS - 0.001), s.red_dwarf_four_gen_chance),
            (
                (RED_DWARF_POP_PALEODWARF_MIN_MASS, ORANGE_DWARF_MIN_MASS - 0.001),
                s.red_dwarf_five_gen_chance,
            ),
            ((ORANGE_DWARF_MIN_MASS, YELLOW_DWARF_MIN_MASS - 0.001), s.orange_dwarf_gen_chance),
            ((YELLOW_DWARF_MIN_MASS, WHITE_DWARF_MIN_MASS - 0.001), s.yellow_dwarf_gen_chance),
            ((WHITE_DWARF_MIN_MASS, WHITE_GIANT_MIN_MASS - 0.001), s.white_star_gen_chance),
            ((WHITE_GIANT_MIN_MASS, BLUE_GIANT_MIN_MASS - 0.001), s.blue_star_one_gen_chance),
            ((BLUE_GIANT_MIN_MASS, 20.0), s.blue_star_two_gen_chance),
            ((20.001, BLUE_GIANT_POP_HYPERDWARF_MAX_MASS), s.blue_star_three_gen_chance),
            (
                (BLUE_GIANT_POP_HYPERDWARF_MAX_MASS + 0.001, BLUE_GIANT_POP_DWARF_MAX_MASS),
                s.violet_star_one_gen_chance,
            ),
            (
                (BLUE_GIANT_POP_DWARF_MAX_MASS + 0.001, BLUE_GIANT_POP_SUBDWARF_MAX_MASS),
                s.violet_star_two_gen_chance,
            ),
            (
                (BLUE_GIANT_POP_SUBDWARF_MAX_MASS + 0.001, BLUE_GIANT_POP_PALEODWARF_MAX_MASS),
                s.violet_star_three_gen_chance,
            ),
        ]
    )


def generate_mass(galaxy: Galaxy, rng: SeededDiceRoller) -> float:
    """Pick a mass range with the star settings' weights, then a mass inside it.

    Raises:
        ConfigurationError: If every ``*_gen_chance`` weight is 0
    """
    low, high = rng.get_result(get_mass_table(galaxy))
    return rng.gen_range(low, high)


def simulate_mass_loss_over_the_years(mass: float, age: float) -> float:
    """Stars above 150 solar masses blow off one solar mass per million years, down to 150."""
    if mass > MAX_STAR_MASS_BEFORE_LOSS:
        return max(MAX_STAR_MASS_BEFORE_LOSS, mass - age)
    return mass


def calculate_main_sequence_luminosity(mass: float) -> float:
    """Luminosity of a main sequence star of the given mass, in solar luminosities.

    Examples:
        >>> calculate_main_sequence_luminosity(1.1)
        1.1
    """
    if mass <= 0.27:
        return 0.0002 + mass**3
    elif mass <= 0.45:
        return 0.8 * mass**3
    elif mass <= 0.6:
        return 0.66 * mass**3
    elif mass <= 0.8:
        return 0.56 * mass**3
    elif mass <= 0.9:
        return mass**3 - 0.25
    elif mass <= 1.0:
        return mass - 0.36
    elif mass <= 1.05:
        return mass - 0.18
    elif mass <= 1.1:
        return mass
    elif mass <= 1.2:
        return mass**3
    elif mass <= 1.4:
        return mass**3.9
    elif mass <= 2.0:
        return mass**4
    elif mass <= 55.0:
        return 1.4 * mass**3.5
    return 32000.0 * mass


def calculate_temperature_using_luminosity(luminosity: float, radius: float) -> float:
    """Surface temperature in Kelvin from luminosity and radius in solar units."""
    area = 4 * math.pi * radius**2
    return (luminosity / (area * STEFAN_BOLTZMANN_SCALED)) ** 0.25 * TEMPERATURE_CALIBRATION


def calculate_luminosity_using_temperature(temperature: float, radius: float) -> float:
    """Luminosity in solar luminosities from temperature in Kelvin and radius in solar radii."""
    area = 4 * math.pi * radius**2
    return STEFAN_BOLTZMANN_SCALED * area * temperature**4 * LUMINOSITY_CALIBRATION


def calculate_radius_using_luminosity_and_temperature(luminosity: float, temperature: float) -> float:
    """Radius in solar radii from luminosity and temperature."""
    if temperature <= 0:
        return 0.0
    return (
        math.sqrt(luminosity / (4 * math.pi * STEFAN_BOLTZMANN_SCALED * temperature**4))
        * RADIUS_CALIBRATION
    )


def calculate_lifespan(mass: float, luminosity: float) -> float:
    """Main sequence lifespan in million years."""
    return 1e4 * mass / luminosity


def get_age_range(
    age: float, main_lifespan: float, subgiant_lifespan: float, giant_lifespan: float
) -> float:
    """Column of STAR_LIFECYCLE_DATASET matching a star's age.

    Columns come in pairs per phase, so each phase spans two units. Anything
    past the giant phase gives 7.
    """
    to_subgiant = main_lifespan + subgiant_lifespan
    to_giant = to_subgiant + giant_lifespan
    if age <= main_lifespan:
        return age / main_lifespan * 2
    elif age <= to_subgiant:
        return 2 + (age - main_lifespan) / to_subgiant * 2
    elif age <= to_giant:
        return 4 + (age - to_subgiant) / to_giant * 2
    return 7.0


def get_mass_range(mass: float) -> float:
    """Row of STAR_LIFECYCLE_DATASET matching a star's mass, capped to the last row.

    Examples:
        >>> get_mass_range(1.5)
        2.5
    """
    if mass < 0.4:
        return 0.0
    elif mass <= 0.5:
        return mass / 0.5
    elif mass <= 1.0:
        return 1 + (mass - 0.5) / 0.5
    elif mass <= 2.0:
        return 2 + (mass - 1.0)
    elif mass <= 5.0:
        return 3 + (mass - 2.0) / 3.0
    elif mass <= 15.0:
        return 4 + (mass - 5.0) / 10.0
    elif mass <= 60.0:
        return 5 + (mass - 15.0) / 45.0
    elif mass <= 500.0:
        return 6 + (mass - 60.0) / 440.0
    return 7.0


def interpolate(x0_y0: float, x1_y0: float, x0_y1: float, x1_y1: float, x: float, y: float) -> float:
    """Bilinear interpolation between four cells, using the fractional parts of x and y."""
    xf = x - int(x)
    yf = y - int(y)
    i1 = x0_y0 * (1 - yf) + x0_y1 * yf
    i2 = x1_y0 * (1 - yf) + x1_y1 * yf
    return i1 * (1 - xf) + i2 * xf


def interpolate_lifecycle(age_range: float, mass_range: float) -> Tuple[float, float]:
    """Temperature and log10 luminosity interpolated from STAR_LIFECYCLE_DATASET."""
    x = int(age_range)
    x1 = x + 1 if age_range != x else x
    y = int(mass_range)
    y1 = y + 1 if mass_range != y else y
    cells = (
        STAR_LIFECYCLE_DATASET[y][x],
        STAR_LIFECYCLE_DATASET[y][x1],
        STAR_LIFECYCLE_DATASET[y1][x],
        STAR_LIFECYCLE_DATASET[y1][x1],
    )
    temperature = interpolate(*(c[0] for c in cells), age_range, mass_range)
    log_luminosity = interpolate(*(c[1] for c in cells), age_range, mass_range)
    return temperature, log_luminosity


def mix_values(main_sequence: float, interpolated: float, age: float, main_lifespan: float) -> float:
    """Blend main sequence and interpolated values, the latter taking over with age."""
    weight = 0.3 + age / main_lifespan
    if weight >= 1:
        return interpolated
    return main_sequence * weight + interpolated * (1 - weight)


def calculate_spectral_type(temperature: int) -> StarSpectralType:
    """Spectral type interpolated between the two nearest rows of TEMPERATURE_TO_SPECTRAL_TYPE.

    Examples:
        >>> str(calculate_spectral_type(5800))
        'G2'
        >>> str(calculate_spectral_type(7200))
        'F1'
    """
    temperature = min(max(temperature, 0), MAX_TEMPERATURE - 1)
    lower_temp, lower_class = next(
        row for row in TEMPERATURE_TO_SPECTRAL_TYPE if row[0] <= temperature
    )
    upper_temp, upper_class = next(
        row for row in reversed(TEMPERATURE_TO_SPECTRAL_TYPE) if row[0] > temperature
    )
    class_number = int(
        lower_class
        + (temperature - lower_temp) * (upper_class - lower_class) / (upper_temp - lower_temp)
    )
    tens = class_number // 10
    letter = SPECTRAL_LETTERS[tens] if tens < len(SPECTRAL_LETTERS) else "Y"
    return StarSpectralType(letter, class_number % 10)


def calculate_luminosity_class(
    luminosity: float,
    spectral_type: StarSpectralType,
    age: float,
    main_lifespan: float,
    subgiant_lifespan: float,
) -> StarLuminosityClass:
    """Luminosity class from the star's type and its phase of life.

    Giants are split by luminosity between III and 0.
    """
    if spectral_type.letter in BROWN_DWARF_LETTERS:
        return StarLuminosityClass.Y
    elif spectral_type.is_white_dwarf:
        return StarLuminosityClass.VII
    elif spectral_type.letter == "XNS":
        return StarLuminosityClass.XNS
    elif spectral_type.letter == "XBH":
        return StarLuminosityClass.XBH

    if age <= main_lifespan:
        return StarLuminosityClass.V
    elif age <= main_lifespan + subgiant_lifespan:
        return StarLuminosityClass.IV
    elif luminosity <= 100:
        return StarLuminosityClass.III
    elif luminosity <= 1000:
        return StarLuminosityClass.II
    elif luminosity <= 31333.3:
        return StarLuminosityClass.IB
    elif luminosity <= 75000:
        return StarLuminosityClass.IA
    return StarLuminosityClass.O


def calculate_remnant_mass(mass: float) -> float:
    """Mass of the remnant left by a star of the given initial mass."""
    if mass < 2.7:
        return 0.096 * mass + 0.429
    return 0.137 * mass + 0.318


def calculate_compact_remnant_radius(mass: float) -> float:
    """Radius of a neutron star or black hole, in solar radii."""
    return 2 * GRAVITATIONAL_CONSTANT * mass / SPEED_OF_LIGHT * 2 / SUN_RADIUS_KM


def calculate_neutron_star_temperature(age: float, full_lifespan: float) -> int:
    """Rough surface temperature of a neutron star, 0 once it has cooled down.

    Args:
        age: Age of the star in million years
        full_lifespan: Life of the star before it collapsed, in million years
    """
    neutron_star_age = max(age - full_lifespan, 0.001) * 1_000_000
    cooling_years = 1 / (0.02 * (neutron_star_age / 10) ** 1.5)
    cooling_seconds = 3.15e7 * cooling_years
    temperature = 1_000_000 * math.log(cooling_seconds / 1e6) / (neutron_star_age / 10)
    return max(int(temperature), 0)
