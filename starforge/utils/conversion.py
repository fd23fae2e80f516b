"""Numeric helpers and unit conversions."""

from .constants import EARTH_MASSES_IN_SOLAR_MASS, SOLAR_RADIUS_IN_AU


def solar_radii_to_astronomical_units(radius: float) -> float:
    """Convert a length in solar radii to astronomical units."""
    return radius * SOLAR_RADIUS_IN_AU


def earth_masses_to_solar_masses(mass: float) -> float:
    """Convert a mass in Earth masses to solar masses."""
    return mass / EARTH_MASSES_IN_SOLAR_MASS


def get_difference_percentage(number: float, compare_to: float) -> float:
    """Relative difference of ``number`` compared to ``compare_to``.

    The branches for mixed signs are kept as they have always behaved, so
    existing outputs stay stable. They are not a model of a consistent
    formula: see DESIGN.md before generalizing them.

    Args:
        number: Value to compare
        compare_to: Reference value

    Returns:
        Difference as a ratio (0.5 is +50%)

    Examples:
        >>> get_difference_percentage(150.0, 100.0)
        0.5
        >>> get_difference_percentage(50.0, 100.0)
        -0.5
    """
    if compare_to <= 0.0 and number >= 0.0:
        return (number - compare_to) / abs(compare_to)
    elif compare_to <= 0.0 and compare_to <= number:
        return (abs(number) - abs(compare_to)) / compare_to
    elif compare_to >= 0.0 and number <= 0.0:
        return (number - compare_to) / compare_to
    elif compare_to >= 0.0 and number >= 0.0:
        return (number - compare_to) / compare_to
    elif compare_to <= 0.0 and compare_to >= number:
        return (abs(number) - abs(compare_to)) / compare_to
    elif compare_to <= number:
        return (number - compare_to) / number
    return -((compare_to - number) / compare_to)


def get_difference_percentage_str(number: float, compare_to: float) -> str:
    """Format get_difference_percentage as a signed percentage string.

    Examples:
        >>> get_difference_percentage_str(150.0, 100.0)
        '+50.0%'
    """
    result = get_difference_percentage(number, compare_to)
    sign = "+" if result >= 0.0 else ""
    return f"{sign}{round(result * 100.0 * 100.0) / 100.0}%"
