"""Star system data model."""

from dataclasses import dataclass, field
from typing import List

from ..utils.errors import InvariantViolation
from .orbital_point import OrbitalPoint
from .star import Star


@dataclass
class StarSystem:
    """A star system and the flat list of its orbital points.

    ``all_objects`` is the arena every id in the system refers to.
    """

    name: str
    center_id: int  # Point at the system's center of gravity
    main_star_id: int  # Point of the most massive star
    all_objects: List[OrbitalPoint] = field(default_factory=list)

    def get_point(self, point_id: int) -> OrbitalPoint:
        """Return the orbital point with the given id.

        Raises:
            InvariantViolation: If no point has this id
        """
        for point in self.all_objects:
            if point.id == point_id:
                return point
        raise InvariantViolation(f"System {self.name} has no orbital point #{point_id}")

    def stars(self) -> List[Star]:
        return [p.object for p in self.all_objects if isinstance(p.object, Star)]

    @property
    def main_star(self) -> Star:
        star = self.get_point(self.main_star_id).object
        if not isinstance(star, Star):
            raise InvariantViolation(f"Point #{self.main_star_id} of {self.name} is not a star")
        return star

    def __str__(self) -> str:
        return (
            f"{self.name} system: {len(self.stars())} star(s), "
            f"{len(self.all_objects)} orbital point(s)"
        )
