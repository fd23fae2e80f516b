"""Seeded dice roller for deterministic generation.

Every draw in the generators goes through a ``SeededDiceRoller`` built from
the generation seed and a *step* label describing where in the structure the
draw happens (``"gal_0_cat"``, ``"hex_(x: 1, y: 2, z: 0)_nbr_sys"``...). The
same seed and step always give the same stream of numbers, whatever else has
been generated before, which is what allows any region to be regenerated on
its own.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, Sequence, TypeVar

from .errors import ConfigurationError

T = TypeVar("T")


@dataclass(frozen=True)
class PreparedRoll:
    """A dice roll description: ``dice`` dice of ``die_type`` sides plus ``modifier``."""

    dice: int
    die_type: int
    modifier: int = 0

    def __str__(self) -> str:
        sign = "+" if self.modifier >= 0 else "-"
        return f"{self.dice}d{self.die_type}{sign}{abs(self.modifier)}"


class RollMethod(Enum):
    """How a weighted table is resolved."""

    SIMPLE_ROLL = "simple_roll"  # Draw proportional to weights
    PREPARED_ROLL = "prepared_roll"  # Roll dice and compare with cumulative weights


@dataclass(frozen=True)
class WeightedResult(Generic[T]):
    """One row of a weighted table."""

    result: T
    weight: int


@dataclass(frozen=True)
class RollToProcess(Generic[T]):
    """A weighted table plus the method used to pick a row from it.

    When ``method`` is ``RollMethod.PREPARED_ROLL``, ``prepared`` holds the
    dice to roll.
    """

    possible_results: Sequence[WeightedResult[T]]
    method: RollMethod = RollMethod.SIMPLE_ROLL
    prepared: Optional[PreparedRoll] = None

    @classmethod
    def simple(cls, rows) -> "RollToProcess":
        """Build a table resolved by a simple weighted draw.

        Args:
            rows: Iterable of ``(result, weight)`` pairs

        Returns:
            RollToProcess using RollMethod.SIMPLE_ROLL
        """
        return cls([WeightedResult(result, weight) for result, weight in rows])

    @classmethod
    def prepared_roll(cls, rows, dice: int, die_type: int, modifier: int = 0) -> "RollToProcess":
        """Build a table resolved by rolling dice against cumulative weights.

        Args:
            rows: Iterable of ``(result, weight)`` pairs, in threshold order
            dice: Number of dice to roll
            die_type: Number of sides of each die
            modifier: Value added to the dice total

        Returns:
            RollToProcess using RollMethod.PREPARED_ROLL
        """
        return cls(
            [WeightedResult(result, weight) for result, weight in rows],
            RollMethod.PREPARED_ROLL,
            PreparedRoll(dice, die_type, modifier),
        )

    @property
    def total_weight(self) -> int:
        return sum(row.weight for row in self.possible_results)


class SeededDiceRoller:
    """Deterministic random source keyed by a seed and a step label.

    Wraps Python's random.Random. String seeding hashes the whole string with
    SHA-512, so streams do not depend on PYTHONHASHSEED or on the interpreter
    run.
    """

    def __init__(self, seed: str, step: str):
        """Initialize the roller.

        Args:
            seed: Generation seed
            step: Label of the structural context of the draws
        """
        self.seed = seed
        self.step = step
        self.rng = random.Random(f"{seed}{step}")

    def roll(self, dice: int, die_type: int, modifier: int = 0) -> int:
        """Roll ``dice`` dice of ``die_type`` sides and add ``modifier``.

        Args:
            dice: Number of dice (0 gives just the modifier)
            die_type: Sides per die, at least 1
            modifier: Signed value added to the total

        Returns:
            The dice total plus the modifier

        Raises:
            ConfigurationError: If die_type is lower than 1 or dice is negative

        Examples:
            >>> SeededDiceRoller("seed", "step").roll(1, 1, 2)
            3
        """
        if die_type < 1:
            raise ConfigurationError(f"Cannot roll a die with {die_type} sides")
        if dice < 0:
            raise ConfigurationError(f"Cannot roll {dice} dice")
        return sum(self.rng.randint(1, die_type) for _ in range(dice)) + modifier

    def roll_prepared(self, prepared: PreparedRoll) -> int:
        """Roll a PreparedRoll."""
        return self.roll(prepared.dice, prepared.die_type, prepared.modifier)

    def get_result(self, table: RollToProcess[T]) -> T:
        """Pick one result from a weighted table.

        With RollMethod.SIMPLE_ROLL, each row is picked with probability
        weight / total weight. With RollMethod.PREPARED_ROLL, the dice total is
        compared with the cumulative weights: the first row whose cumulative
        weight reaches the total is picked, totals below 1 pick the first row
        and totals beyond the sum of weights pick the last one.

        Args:
            table: Weighted table to resolve

        Returns:
            The picked row's result

        Raises:
            ConfigurationError: If the table is empty, has negative weights or
                its weights sum to zero
        """
        index = self.get_result_index(table)
        return table.possible_results[index].result

    def get_result_index(self, table: RollToProcess[Any]) -> int:
        """Same as get_result, but returns the index of the picked row."""
        rows = table.possible_results
        if any(row.weight < 0 for row in rows):
            raise ConfigurationError("Weighted table contains a negative weight")
        total = table.total_weight
        if not rows or total <= 0:
            raise ConfigurationError("Weighted table has a total weight of zero")

        if table.method == RollMethod.SIMPLE_ROLL:
            target = self.rng.randint(1, total)
        else:
            if table.prepared is None:
                raise ConfigurationError("Prepared roll table without dice to roll")
            target = self.roll_prepared(table.prepared)

        cumulative = 0
        for index, row in enumerate(rows):
            cumulative += row.weight
            if row.weight > 0 and target <= cumulative:
                return index
        # Totals above the table's range land on the last row with a weight
        return max(i for i, row in enumerate(rows) if row.weight > 0)

    def gen_bool(self) -> bool:
        """Return True or False with equal chances."""
        return self.rng.random() < 0.5

    def gen_f64(self) -> float:
        """Return a float in [0.0, 1.0)."""
        return self.rng.random()

    def gen_usize(self) -> int:
        """Return a non-negative 32 bit integer."""
        return self.rng.getrandbits(32)

    def gen_u8(self) -> int:
        """Return an integer in [0, 255]."""
        return self.rng.getrandbits(8)

    def gen_range(self, low: float, high: float) -> float:
        """Return a float in [low, high)."""
        if high <= low:
            return low
        return low + (high - low) * self.rng.random()
