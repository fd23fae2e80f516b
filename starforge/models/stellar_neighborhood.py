"""Stellar neighborhood data model."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Young:
    """Mostly young stars, about ``years`` million years old."""

    years: int

    def __str__(self) -> str:
        return f"Young ({self.years} million years)"


@dataclass(frozen=True)
class Mature:
    """Stars of all ages, like the Sun's neighborhood."""

    def __str__(self) -> str:
        return "Mature"


@dataclass(frozen=True)
class Old:
    """Mostly old stars, about ``years`` million years old."""

    years: int

    def __str__(self) -> str:
        return f"Old ({self.years} million years)"


@dataclass(frozen=True)
class Ancient:
    """Mostly ancient stars, about ``years`` million years old."""

    years: int

    def __str__(self) -> str:
        return f"Ancient ({self.years} million years)"


StellarNeighborhoodAge = Union[Young, Mature, Old, Ancient]


@dataclass
class StellarNeighborhood:
    """Local volume of space around a coordinate, classified by the age of its stars."""

    age: StellarNeighborhoodAge

    def age_in_myr(self):
        """Age payload in million years, or None for a mature neighborhood."""
        if isinstance(self.age, (Young, Old, Ancient)):
            return self.age.years
        elif isinstance(self.age, Mature):
            return None
        raise TypeError(f"Unknown stellar neighborhood age: {self.age!r}")

    def __str__(self) -> str:
        return f"{self.age} stellar neighborhood"
