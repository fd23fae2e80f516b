"""Utility functions and constants for starforge."""

from .constants import DEFAULT_SEED, NUMBER_OF_DIVISION_LEVELS, OUR_UNIVERSE_AGE
from .conversion import (
    earth_masses_to_solar_masses,
    get_difference_percentage,
    get_difference_percentage_str,
    solar_radii_to_astronomical_units,
)
from .errors import ConfigurationError, InvariantViolation, StarforgeError
from .naming import get_body_name, get_star_name, number_to_lowercase_letter, pick_system_name
from .rng import PreparedRoll, RollMethod, RollToProcess, SeededDiceRoller, WeightedResult

__all__ = [
    "DEFAULT_SEED",
    "NUMBER_OF_DIVISION_LEVELS",
    "OUR_UNIVERSE_AGE",
    "earth_masses_to_solar_masses",
    "get_difference_percentage",
    "get_difference_percentage_str",
    "solar_radii_to_astronomical_units",
    "StarforgeError",
    "ConfigurationError",
    "InvariantViolation",
    "PreparedRoll",
    "RollMethod",
    "RollToProcess",
    "SeededDiceRoller",
    "WeightedResult",
    "get_body_name",
    "get_star_name",
    "number_to_lowercase_letter",
    "pick_system_name",
]
