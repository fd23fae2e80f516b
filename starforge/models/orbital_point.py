"""Orbital point data model: the addressable slots of a system's orbital graph."""

from dataclasses import dataclass, field
from typing import List, Optional, Union

from .celestial import CelestialBody, CelestialDisk, CelestialRing, Spacecraft
from .orbit import Orbit
from .star import Star


@dataclass(frozen=True)
class EmptyPoint:
    """Nothing occupies the point, e.g. the barycentre of a binary pair."""

    def __str__(self) -> str:
        return "Void"


AstronomicalObject = Union[EmptyPoint, Star, CelestialBody, CelestialDisk, CelestialRing, Spacecraft]


@dataclass
class OrbitalPoint:
    """A slot in a system's orbital graph, occupied by exactly one object.

    Primary and satellites are referenced by id into the system's flat list
    of points, never by direct links.
    """

    id: int
    object: AstronomicalObject
    primary_id: Optional[int] = None
    own_orbit: Optional[Orbit] = None
    satellite_ids: List[int] = field(default_factory=list)

    def __post_init__(self):
        """Validate orbital point data after initialization."""
        if self.id < 0:
            raise ValueError(f"Invalid orbital point id: {self.id} (must be >= 0)")
        if self.primary_id == self.id:
            raise ValueError(f"Orbital point #{self.id} cannot orbit itself")

    @property
    def distance(self) -> Optional[float]:
        """Average distance from the primary in AU, once the orbit is committed."""
        return self.own_orbit.average_distance if self.own_orbit else None

    @property
    def eccentricity(self) -> Optional[float]:
        return self.own_orbit.eccentricity if self.own_orbit else None

    @property
    def is_committed(self) -> bool:
        return self.own_orbit is not None

    def __str__(self) -> str:
        orbit = f", {self.own_orbit}" if self.own_orbit else ""
        return f"#{self.id} {describe_object_kind(self.object)}: {self.object}{orbit}"


def describe_object_kind(obj: AstronomicalObject) -> str:
    """Short name of an object's variant, used for summaries and serialization tags.

    Raises:
        TypeError: If ``obj`` is not an AstronomicalObject variant
    """
    if isinstance(obj, EmptyPoint):
        return "void"
    elif isinstance(obj, Star):
        return "star"
    elif isinstance(obj, CelestialBody):
        return "body"
    elif isinstance(obj, CelestialDisk):
        return "disk"
    elif isinstance(obj, CelestialRing):
        return "ring"
    elif isinstance(obj, Spacecraft):
        return "spacecraft"
    raise TypeError(f"Unknown astronomical object: {obj!r}")
