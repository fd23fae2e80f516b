"""Integer 3D coordinates in parsecs."""

from dataclasses import dataclass


def _truncated_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


@dataclass(frozen=True, order=True)
class SpaceCoordinates:
    """Coordinates of a point in a galactic map, in parsecs.

    Relative coordinates are measured from the galactic center. Absolute
    coordinates are measured from the galaxy's first parsec (its starting
    point), so they are never negative inside the galaxy.
    """

    x: int
    y: int
    z: int

    def abs(self, starting_point: "SpaceCoordinates") -> "SpaceCoordinates":
        """Return these coordinates counted from ``starting_point``."""
        return self - starting_point

    def rel(self, starting_point: "SpaceCoordinates") -> "SpaceCoordinates":
        """Inverse of abs: return coordinates relative to the galactic center."""
        return self + starting_point

    def __add__(self, other: "SpaceCoordinates") -> "SpaceCoordinates":
        return SpaceCoordinates(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "SpaceCoordinates") -> "SpaceCoordinates":
        return SpaceCoordinates(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: "SpaceCoordinates") -> "SpaceCoordinates":
        return SpaceCoordinates(self.x * other.x, self.y * other.y, self.z * other.z)

    def __truediv__(self, other: "SpaceCoordinates") -> "SpaceCoordinates":
        # Callers never divide by a coordinate with a zero component
        return SpaceCoordinates(
            _truncated_div(self.x, other.x),
            _truncated_div(self.y, other.y),
            _truncated_div(self.z, other.z),
        )

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.x, self.y, self.z)

    def __str__(self) -> str:
        return f"(x: {self.x}, y: {self.y}, z: {self.z})"
