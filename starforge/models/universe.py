"""Universe data model."""

from dataclasses import dataclass
from enum import Enum

from ..utils.constants import (
    ANCIENT_STELLIFEROUS_START,
    EARLY_STELLIFEROUS_START,
    END_STELLIFEROUS_END,
    END_STELLIFEROUS_START,
    LATE_STELLIFEROUS_START,
    MIDDLE_STELLIFEROUS_START,
)


class StelliferousEra(Enum):
    """The five spans of the stelliferous era, the age of the universe where stars form."""

    ANCIENT_STELLIFEROUS = "AncientStelliferous"
    EARLY_STELLIFEROUS = "EarlyStelliferous"
    MIDDLE_STELLIFEROUS = "MiddleStelliferous"
    LATE_STELLIFEROUS = "LateStelliferous"
    END_STELLIFEROUS = "EndStelliferous"

    @property
    def min_age(self) -> float:
        """Start of the era, in billion years."""
        return ERA_BOUNDARIES[self][0]

    @property
    def max_age(self) -> float:
        """End of the era, in billion years."""
        return ERA_BOUNDARIES[self][1]

    def contains(self, age: float) -> bool:
        """True if ``age`` (billion years) falls within this era."""
        return self.min_age <= age < self.max_age

    @classmethod
    def from_age(cls, age: float) -> "StelliferousEra":
        """Return the era an age belongs to.

        Ages before the first era belong to it, ages after the last one to the
        last era.
        """
        for era in cls:
            if age < era.max_age:
                return era
        return cls.END_STELLIFEROUS


ERA_BOUNDARIES = {
    StelliferousEra.ANCIENT_STELLIFEROUS: (ANCIENT_STELLIFEROUS_START, EARLY_STELLIFEROUS_START),
    StelliferousEra.EARLY_STELLIFEROUS: (EARLY_STELLIFEROUS_START, MIDDLE_STELLIFEROUS_START),
    StelliferousEra.MIDDLE_STELLIFEROUS: (MIDDLE_STELLIFEROUS_START, LATE_STELLIFEROUS_START),
    StelliferousEra.LATE_STELLIFEROUS: (LATE_STELLIFEROUS_START, END_STELLIFEROUS_START),
    StelliferousEra.END_STELLIFEROUS: (END_STELLIFEROUS_START, END_STELLIFEROUS_END),
}


@dataclass
class Universe:
    """The universe everything else is generated in."""

    era: StelliferousEra
    age: float  # Billion years since the big bang

    def __post_init__(self):
        """Validate universe data after initialization."""
        if self.age <= 0:
            raise ValueError(f"Invalid universe age: {self.age} (must be > 0)")

    def __str__(self) -> str:
        return f"Universe: {self.age} billion years old, {self.era.value} era"
