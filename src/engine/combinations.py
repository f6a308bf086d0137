"""
Farkle - Scoring Combinations

The closed set of shapes a group of dice can be banked as. Every variant is
an immutable dataclass validated on construction, so the rest of the engine
can assume the fields are consistent with a real set of dice.

Scoring Rules:
    - Single 1: 100 points each
    - Single 5: 50 points each
    - Multiple of 1s: 1,000 points per die beyond two
    - Multiple of X (2-6): X × 100 points per die beyond two
    - Straight (1-2-3-4-5-6): 1,500 / 1,000 / 500 when completed on
      roll 1 / 2 / 3
    - Three pairs: 1,000 points
"""

from dataclasses import dataclass, replace
from typing import Union

from src.engine.base import (
    FACES,
    MAX_STRAIGHT_ROLL,
    NUM_DICE,
    SCORING_SINGLES,
    InvariantViolation,
)


SINGLE_POINTS = {1: 100, 5: 50}
MULTIPLE_ONES_POINTS = 1000
STRAIGHT_POINTS = {1: 1500, 2: 1000, 3: 500}
PAIRS_POINTS = 1000


@dataclass(frozen=True)
class Single:
    """
    One or more scoring singles of the same face.

    Attributes:
        face: Die face, always 1 or 5
        count: Number of dice of that face credited
    """
    face: int
    count: int

    def __post_init__(self) -> None:
        if self.face not in SCORING_SINGLES:
            raise InvariantViolation(f"{self.face} is not a valid single die configuration")
        if not 0 <= self.count <= NUM_DICE:
            raise InvariantViolation(f"Single count {self.count} out of range")

    def score(self) -> int:
        return SINGLE_POINTS[self.face] * self.count

    def involved_dice(self) -> list[int]:
        return [self.face] * self.count

    def extended(self, amount: int) -> "Single":
        return replace(self, count=self.count + amount)

    def is_straight_roll(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.count} {self.face}s"


@dataclass(frozen=True)
class Multiple:
    """
    Three or more dice of the same face.

    Attributes:
        face: Die face (1-6)
        quantity: Dice beyond the first two; a three of a kind has quantity 1
    """
    face: int
    quantity: int

    def __post_init__(self) -> None:
        if self.face not in FACES:
            raise InvariantViolation(f"{self.face} is not a valid die face")
        if not 0 <= self.quantity <= NUM_DICE - 2:
            raise InvariantViolation(f"Multiple quantity {self.quantity} out of range")

    @property
    def dice_count(self) -> int:
        return self.quantity + 2

    def score(self) -> int:
        # Ones are worth ten times the generic rate
        if self.face == 1:
            return MULTIPLE_ONES_POINTS * self.quantity
        return self.face * 100 * self.quantity

    def involved_dice(self) -> list[int]:
        return [self.face] * self.dice_count

    def extended(self, amount: int) -> "Multiple":
        return replace(self, quantity=self.quantity + amount)

    def is_straight_roll(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"combo of {self.dice_count} {self.face}s"


@dataclass(frozen=True)
class Straight:
    """
    A full 1-6 straight.

    Attributes:
        roll: Roll stage (1-3) the straight was completed on
    """
    roll: int
    face = None

    def __post_init__(self) -> None:
        if self.roll not in STRAIGHT_POINTS:
            raise InvariantViolation(
                f"Straight roll {self.roll} must be between 1 and {MAX_STRAIGHT_ROLL}"
            )

    def score(self) -> int:
        return STRAIGHT_POINTS[self.roll]

    def involved_dice(self) -> list[int]:
        return list(FACES)

    def extended(self, amount: int) -> "Straight":
        raise InvariantViolation("A straight cannot be extended")

    def is_straight_roll(self) -> bool:
        return True

    def __str__(self) -> str:
        return "straight"


@dataclass(frozen=True)
class Pairs:
    """
    Three distinct faces, each rolled exactly twice.

    Attributes:
        faces: The three paired faces
    """
    faces: frozenset[int]
    face = None

    def __post_init__(self) -> None:
        if len(self.faces) != 3 or not self.faces <= set(FACES):
            raise InvariantViolation(f"Pairs need three distinct faces, got {sorted(self.faces)}")

    def score(self) -> int:
        return PAIRS_POINTS

    def involved_dice(self) -> list[int]:
        return [face for face in sorted(self.faces) for _ in range(2)]

    def extended(self, amount: int) -> "Pairs":
        raise InvariantViolation("Pairs cannot be extended")

    def is_straight_roll(self) -> bool:
        return False

    def __str__(self) -> str:
        return "pairs"


Combination = Union[Single, Multiple, Straight, Pairs]
