"""Generation constants shared across modules."""

# Our universe
OUR_UNIVERSE_AGE = 13.8  # Billion years

# Stelliferous era boundaries, in billion years since the big bang
ANCIENT_STELLIFEROUS_START = 0.4
EARLY_STELLIFEROUS_START = 0.5
MIDDLE_STELLIFEROUS_START = 5.0
LATE_STELLIFEROUS_START = 50.0
END_STELLIFEROUS_START = 2000.0
END_STELLIFEROUS_END = 100000.0

# Our galactic neighborhood (the Local Group)
OUR_NEIGHBORHOOD_MAJOR_GALAXIES = 2
OUR_NEIGHBORHOOD_MINOR_GALAXIES = 36

# Our galaxy
OUR_GALAXY_NAME = "Milky Way"
OUR_GALAXY_AGE = 13.61  # Billion years
OUR_GALAXY_RADIUS = 26_800  # Parsecs
OUR_GALAXY_THICKNESS = 300  # Parsecs, thin disk

# Default generation seed
DEFAULT_SEED = "default"

# Division ladder
NUMBER_OF_DIVISION_LEVELS = 10  # Levels 0 (hex) to 9
TOP_LEVEL_PARENT_SUBDIVISIONS = 255  # Sentinel grid size above level 9

# Star masses, in solar masses
BROWN_DWARF_MIN_MASS = 0.015
RED_DWARF_POP_HYPERDWARF_MIN_MASS = 1.0 / 25.0
RED_DWARF_POP_DWARF_MIN_MASS = 0.07
RED_DWARF_POP_SUBDWARF_MIN_MASS = 0.125
RED_DWARF_POP_PALEODWARF_MIN_MASS = 0.4
ORANGE_DWARF_MIN_MASS = 0.5
YELLOW_DWARF_MIN_MASS = 1.0
WHITE_DWARF_MIN_MASS = 2.0
WHITE_GIANT_MIN_MASS = 4.0
BLUE_GIANT_MIN_MASS = 8.0
BLUE_GIANT_POP_HYPERDWARF_MAX_MASS = 25.0
BLUE_GIANT_POP_SUPERDWARF_MAX_MASS = 50.0
BLUE_GIANT_POP_DWARF_MAX_MASS = 100.0
BLUE_GIANT_POP_SUBDWARF_MAX_MASS = 200.0
BLUE_GIANT_POP_PALEODWARF_MAX_MASS = 500.0
CHANDRASEKHAR_LIMIT = 1.4
TOLMAN_OPPENHEIMER_VOLKOFF_LIMIT = 3.2

# Our sun
SUN_MASS = 1.0
SUN_LUMINOSITY = 1.0
SUN_RADIUS = 1.0
SUN_AGE = 4600.0  # Million years
SUN_TEMPERATURE = 5778  # Kelvin

# Physics
# Scaled Stefan-Boltzmann constant for solar units (radius in solar radii,
# luminosity in solar luminosities)
STEFAN_BOLTZMANN_SCALED = 5.670367e-17
DAYS_IN_A_YEAR = 365.256
SOLAR_RADIUS_IN_AU = 0.00465047
EARTH_RADIUS_CM = 6.371e8
EARTH_MASS_G = 5.972e27
EARTH_MASSES_IN_SOLAR_MASS = 332_946.0

# Orbits
MIN_ORBIT_SEPARATION = 0.15  # AU between two inner orbits
MAX_ECCENTRICITY = 0.8

# Bodies
EARTH_DENSITY = 5.513  # g/cm³
EARTH_RADIUS_IN_AU = 4.26352e-5
BLACKBODY_TEMPERATURE_FACTOR = 278.0  # Kelvin at 1 AU from the Sun
