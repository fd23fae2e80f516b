"""Region classification of galactic map divisions.

Each galaxy category has a shape model: concentric bands measured from the
galactic center, normalized by the galaxy's size. A division samples its eight
corners and its center against the model; a division lying in a single band
gets that band's region, any other one is ``Multiple``. Small divisions of a
disk, an arm or a halo may then turn out to be a star cluster or a stream.
"""

import logging
import math
from typing import Tuple

from ..models import (
    DominantElliptical,
    Elliptical,
    GalacticRegion,
    Galaxy,
    GalaxySubCategory,
    Intergalactic,
    Intracluster,
    Irregular,
    Lenticular,
    SpaceCoordinates,
    Spiral,
)
from ..utils import RollToProcess, SeededDiceRoller

logger = logging.getLogger(__name__)

# Planar radius bands of disk galaxies, as a fraction of the galaxy's radius
DISK_NUCLEUS_RADIUS = 0.02
DISK_CORE_RADIUS = 0.06
DISK_BULGE_RADIUS = 0.15
DISK_BAR_LENGTH = 0.35
DISK_BAR_WIDTH = 0.05
DISK_HALO_RADIUS = 0.9
AURA_RADIUS = 1.2

# Spiral arms
SPIRAL_ARM_COUNT = 2
SPIRAL_ARM_PITCH = math.radians(12.0)
SPIRAL_ARM_WIDTH = 0.35  # Fraction of the angular gap between two arms

# Radius bands of ellipticals, as a fraction of the galaxy's radius
ELLIPTICAL_NUCLEUS_RADIUS = 0.03
ELLIPTICAL_CORE_RADIUS = 0.1
ELLIPTICAL_ELLIPSE_RADIUS = 0.75

# Bands of shapeless galaxies, as a fraction of the galaxy's half size
IRREGULAR_ASSOCIATION_RADIUS = 0.3
IRREGULAR_DISK_RADIUS = 0.8
DIFFUSE_STREAM_RADIUS = 0.6

# Divisions up to this size (largest axis, parsecs) may be star clusters
MAX_CLUSTER_SIZE = 100


def get_region_at(galaxy: Galaxy, x: float, y: float, z: float) -> GalacticRegion:
    """Region of the galaxy's shape model at a point relative to the galactic center.

    Args:
        galaxy: Galaxy whose category and sub-category define the shape
        x, y, z: Point coordinates in parsecs, relative to the center

    Returns:
        The GalacticRegion the point falls in
    """
    category = galaxy.category
    if isinstance(category, (Spiral, Lenticular)):
        return _disk_region(galaxy, category.radius, x, y)
    elif isinstance(category, (Elliptical, DominantElliptical)):
        return _elliptical_region(category.radius, x, y, z)
    elif isinstance(category, Irregular):
        distance = _box_distance((category.length, category.width, category.height), x, y, z)
        if distance < IRREGULAR_ASSOCIATION_RADIUS:
            return GalacticRegion.ASSOCIATION
        elif distance < IRREGULAR_DISK_RADIUS:
            return GalacticRegion.DISK
        elif distance <= 1.0:
            return GalacticRegion.STREAM
        return GalacticRegion.VOID
    elif isinstance(category, (Intergalactic, Intracluster)):
        distance = _box_distance((category.length, category.width, category.height), x, y, z)
        return GalacticRegion.STREAM if distance < DIFFUSE_STREAM_RADIUS else GalacticRegion.VOID
    raise TypeError(f"Unknown galaxy category: {category!r}")


def _disk_region(galaxy: Galaxy, radius: int, x: float, y: float) -> GalacticRegion:
    rho = math.hypot(x, y) / max(radius, 1)
    if rho > AURA_RADIUS:
        return GalacticRegion.VOID
    elif rho > 1.0:
        return GalacticRegion.AURA
    elif rho > DISK_HALO_RADIUS:
        return GalacticRegion.HALO
    elif rho < DISK_NUCLEUS_RADIUS:
        return GalacticRegion.NUCLEUS
    elif rho < DISK_CORE_RADIUS:
        return GalacticRegion.CORE
    elif rho < DISK_BULGE_RADIUS:
        return GalacticRegion.BULGE

    if galaxy.sub_category == GalaxySubCategory.BARRED_SPIRAL:
        if rho < DISK_BAR_LENGTH and abs(y) / max(radius, 1) < DISK_BAR_WIDTH:
            return GalacticRegion.BAR
    if isinstance(galaxy.category, Spiral) and _is_in_arm(x, y, rho):
        return GalacticRegion.ARM
    return GalacticRegion.DISK


def _is_in_arm(x: float, y: float, rho: float) -> bool:
    # Logarithmic spirals: theta = ln(rho) / tan(pitch) + k * 2pi / arms
    theta = math.atan2(y, x)
    phase = (theta - math.log(rho) / math.tan(SPIRAL_ARM_PITCH)) * SPIRAL_ARM_COUNT / (2 * math.pi)
    return phase % 1.0 < SPIRAL_ARM_WIDTH


def _elliptical_region(radius: int, x: float, y: float, z: float) -> GalacticRegion:
    rho = math.sqrt(x * x + y * y + z * z) / max(radius, 1)
    if rho < ELLIPTICAL_NUCLEUS_RADIUS:
        return GalacticRegion.NUCLEUS
    elif rho < ELLIPTICAL_CORE_RADIUS:
        return GalacticRegion.CORE
    elif rho < ELLIPTICAL_ELLIPSE_RADIUS:
        return GalacticRegion.ELLIPSE
    elif rho <= 1.0:
        return GalacticRegion.HALO
    elif rho <= AURA_RADIUS:
        return GalacticRegion.AURA
    return GalacticRegion.VOID


def _box_distance(size: Tuple[int, int, int], x: float, y: float, z: float) -> float:
    """Ellipsoidal distance from the center, 1.0 on the ellipsoid inscribed in the box."""
    return math.sqrt(sum((v / max(s / 2, 0.5)) ** 2 for v, s in zip((x, y, z), size)))


def generate_region(
    galaxy: Galaxy,
    level: int,
    index: SpaceCoordinates,
    first_vertex: SpaceCoordinates,
    last_vertex: SpaceCoordinates,
) -> GalacticRegion:
    """Region of a new division spanning ``first_vertex`` to ``last_vertex`` (inclusive).

    Args:
        galaxy: Galaxy the division belongs to
        level: Division level
        index: Division index, used to key the cluster roll
        first_vertex: Lowest corner, relative to the galactic center
        last_vertex: Highest corner, relative to the galactic center

    Returns:
        The division's GalacticRegion
    """
    samples = [
        (x, y, z)
        for x in (first_vertex.x, last_vertex.x)
        for y in (first_vertex.y, last_vertex.y)
        for z in (first_vertex.z, last_vertex.z)
    ]
    samples.append(
        (
            (first_vertex.x + last_vertex.x) / 2,
            (first_vertex.y + last_vertex.y) / 2,
            (first_vertex.z + last_vertex.z) / 2,
        )
    )
    regions = {get_region_at(galaxy, *point) for point in samples}
    if len(regions) != 1:
        return GalacticRegion.MULTIPLE

    region = regions.pop()
    size = last_vertex - first_vertex
    if max(size.x, size.y, size.z) + 1 > MAX_CLUSTER_SIZE:
        return region

    rng = SeededDiceRoller(galaxy.seed, f"div_{level}_{index}_reg")
    if region in (GalacticRegion.DISK, GalacticRegion.ARM):
        return rng.get_result(
            RollToProcess.simple(
                [(region, 94), (GalacticRegion.OPEN_CLUSTER, 4), (GalacticRegion.ASSOCIATION, 2)]
            )
        )
    elif region == GalacticRegion.HALO:
        return rng.get_result(
            RollToProcess.simple(
                [(region, 95), (GalacticRegion.GLOBULAR_CLUSTER, 3), (GalacticRegion.STREAM, 2)]
            )
        )
    return region
