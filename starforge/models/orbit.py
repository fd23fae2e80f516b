"""Orbit data model."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class ZoneType(Enum):
    """Orbital zones around a star."""

    CORONA = "Corona"  # Inside the star's corona, nothing can orbit there
    INNER_LIMIT = "InnerLimit"  # Too close to the star for anything to form
    INNER_ZONE = "InnerZone"
    BIO_ZONE = "BioZone"  # Where liquid water may exist on a planet's surface
    OUTER_ZONE = "OuterZone"
    FORBIDDEN_ZONE = "ForbiddenZone"  # Disrupted by a companion star


@dataclass
class Orbit:
    """The path an orbital point follows around its primary body.

    Distances are in astronomical units, the period in days.
    """

    primary_body_id: int
    zone: ZoneType
    average_distance: float
    min_separation: float
    max_separation: float
    average_distance_from_system_center: float
    eccentricity: float = 0.0
    inclination: float = 0.0  # Degrees
    orbital_period: float = 0.0
    satellite_ids: List[int] = field(default_factory=list)

    def __post_init__(self):
        """Validate orbit data after initialization."""
        if self.average_distance < 0:
            raise ValueError(f"Invalid average distance: {self.average_distance} (must be >= 0)")
        if not (0.0 <= self.eccentricity < 1.0):
            raise ValueError(f"Invalid eccentricity: {self.eccentricity} (must be in [0, 1))")

    def __str__(self) -> str:
        return (
            f"orbit around #{self.primary_body_id} at {self.average_distance:.3f} AU "
            f"(e={self.eccentricity:.2f}, {self.orbital_period:.1f} days, {self.zone.value})"
        )
