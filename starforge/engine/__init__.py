"""Generation engine components."""

from .division_index import get_division_at_level, get_divisions_for_coord, get_hex
from .generator import Generator
from .orbital_graph import (
    add_orbital_point,
    commit_orbits,
    sort_orbital_points_by_average_distance,
    validate_orbital_graph,
)

__all__ = [
    "Generator",
    "get_divisions_for_coord",
    "get_division_at_level",
    "get_hex",
    "add_orbital_point",
    "commit_orbits",
    "sort_orbital_points_by_average_distance",
    "validate_orbital_graph",
]
