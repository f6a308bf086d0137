"""
Farkle - Dice Multiset

A bag of dice tracked as face -> count, with the total count memoized.
Faces with a count of zero are never stored, so two sets holding the same
dice always compare equal.
"""

from typing import Iterator, Sequence

from src.engine.base import NUM_DICE, SCORING_SINGLES, FaceSource, random_face
from src.engine.combinations import Multiple, Single
from src.engine.validators import validate_dice_values


class DiceSet:
    """
    Multiset of die faces.

    Mutated in place by the add/remove methods; ``union`` returns a new set
    and leaves both operands untouched.
    """

    def __init__(self) -> None:
        # die face frequency
        self._freq: dict[int, int] = {}
        # total number of dice, memoized
        self._total = 0

    @classmethod
    def from_values(cls, values: Sequence[int]) -> "DiceSet":
        """
        Create a DiceSet from a sequence of faces.

        Args:
            values: Die faces (1-6), any order

        Returns:
            DiceSet holding exactly those dice

        Raises:
            ValueError: If a face is outside 1-6
        """
        dice_set = cls()
        for face in validate_dice_values(values):
            dice_set.add(face)
        return dice_set

    @classmethod
    def rand(cls, count: int = NUM_DICE, source: FaceSource = random_face) -> "DiceSet":
        """
        Roll ``count`` dice.

        Args:
            count: Number of dice to roll (default: 6)
            source: Callable producing one face per call

        Returns:
            DiceSet with the rolled faces
        """
        return cls.from_values([source() for _ in range(count)])

    def add_amount(self, face: int, amount: int) -> None:
        if amount <= 0:
            return
        self._freq[face] = self._freq.get(face, 0) + amount
        self._total += amount

    def add(self, face: int) -> None:
        self.add_amount(face, 1)

    def remove_amount(self, face: int, amount: int) -> None:
        """Remove up to ``amount`` dice of ``face``; never goes below zero."""
        freq = self._freq.pop(face, None)
        if freq is None:
            return

        removed = min(amount, freq)
        self._total -= removed

        if freq - removed > 0:
            self._freq[face] = freq - removed

    def remove_all(self, face: int) -> None:
        freq = self._freq.pop(face, 0)
        self._total -= freq

    def union(self, other: "DiceSet") -> "DiceSet":
        """Combine two sets face by face into a new set."""
        combined = DiceSet()
        for source in (self, other):
            for face, freq in source._freq.items():
                combined.add_amount(face, freq)
        return combined

    def is_straight(self) -> bool:
        # six dice and every face occurs exactly once
        return self._total == NUM_DICE and len(self._freq) == NUM_DICE

    def is_pairs(self) -> frozenset[int] | None:
        """
        Check for the three-pairs shape.

        Returns:
            The three faces rolled exactly twice, or None when there are not
            exactly three of them
        """
        pairs = frozenset(face for face, freq in self._freq.items() if freq == 2)
        if len(pairs) == 3:
            return pairs
        return None

    def find_multiples(self) -> list[Multiple]:
        """Every face with three or more dice, as a Multiple."""
        return [
            Multiple(face=face, quantity=freq - 2)
            for face, freq in sorted(self._freq.items())
            if freq >= 3
        ]

    def find_singles(self) -> list[Single]:
        """
        Every scoring single face present, with its full count.

        The count is the most the player may take; they can choose fewer.
        """
        return [
            Single(face=face, count=self._freq[face])
            for face in SCORING_SINGLES
            if face in self._freq
        ]

    def get_die_count(self, face: int) -> int | None:
        return self._freq.get(face)

    def has_die_value(self, face: int) -> bool:
        return face in self._freq

    def faces(self) -> Iterator[int]:
        """Distinct faces present."""
        return iter(sorted(self._freq))

    def dice_values(self) -> list[int]:
        values: list[int] = []
        for face, freq in self._freq.items():
            values.extend([face] * freq)
        return values

    def is_empty(self) -> bool:
        return not self._freq

    def size(self) -> int:
        return self._total

    def __len__(self) -> int:
        return self._total

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DiceSet):
            return NotImplemented
        return self._freq == other._freq

    def __repr__(self) -> str:
        return f"DiceSet({dict(sorted(self._freq.items()))})"

    def __str__(self) -> str:
        return "".join(f"[{face}]" for face in self.dice_values())
