"""Deterministic names for star systems, stars and their bodies."""

from .rng import SeededDiceRoller

OUR_SYSTEM_NAME = "Sol"
OUR_STAR_NAME = "Sun"

# Names drawn for generated systems
SYSTEM_NAMES = (
    "Achernar",
    "Acrux",
    "Adhara",
    "Albireo",
    "Alcor",
    "Aldebaran",
    "Alderamin",
    "Algol",
    "Alhena",
    "Alioth",
    "Alkaid",
    "Alnair",
    "Alnilam",
    "Alnitak",
    "Alphard",
    "Alpheratz",
    "Altair",
    "Ankaa",
    "Antares",
    "Arcturus",
    "Atria",
    "Avior",
    "Bellatrix",
    "Betelgeuse",
    "Canopus",
    "Capella",
    "Caph",
    "Castor",
    "Deneb",
    "Denebola",
    "Diphda",
    "Dubhe",
    "Elnath",
    "Eltanin",
    "Enif",
    "Fomalhaut",
    "Gacrux",
    "Gienah",
    "Hadar",
    "Hamal",
    "Izar",
    "Kochab",
    "Lesath",
    "Markab",
    "Menkar",
    "Merak",
    "Miaplacidus",
    "Mimosa",
    "Mintaka",
    "Mirach",
    "Mirfak",
    "Mizar",
    "Naos",
    "Nunki",
    "Peacock",
    "Phecda",
    "Polaris",
    "Pollux",
    "Procyon",
    "Rasalhague",
    "Regulus",
    "Rigel",
    "Sabik",
    "Sadr",
    "Saiph",
    "Scheat",
    "Schedar",
    "Shaula",
    "Sirius",
    "Spica",
    "Suhail",
    "Thuban",
    "Unukalhai",
    "Vega",
    "Wezen",
    "Zubenelgenubi",
)


def pick_system_name(rng: SeededDiceRoller) -> str:
    """Pick a system name from SYSTEM_NAMES."""
    return SYSTEM_NAMES[rng.gen_usize() % len(SYSTEM_NAMES)]


def number_to_lowercase_letter(number: int) -> str:
    """Letter used to tell bodies of a star apart, 0 being "a".

    Numbers past "z" wrap around with a repeat count suffix.

    Examples:
        >>> number_to_lowercase_letter(1)
        'b'
        >>> number_to_lowercase_letter(27)
        'b2'
    """
    letter = chr(ord("a") + number % 26)
    repeat = number // 26
    return letter if repeat == 0 else f"{letter}{repeat + 1}"


def get_star_name(system_name: str, star_index: int, use_ours: bool = False) -> str:
    """Name of the ``star_index``-th star of a system.

    Examples:
        >>> get_star_name("Vega", 0)
        'Vega 1'
    """
    if use_ours:
        return OUR_STAR_NAME
    return f"{system_name} {star_index + 1}"


def get_body_name(star_name: str, populated_orbit_index: int) -> str:
    """Name of a body from its star and its rank among the star's populated orbits.

    Examples:
        >>> get_body_name("Vega 1", 1)
        'Vega 1 b'
    """
    return f"{star_name} {number_to_lowercase_letter(populated_orbit_index)}"
