"""
Farkle - Dice Actions

An action pairs the dice a player sets aside with what those dice do to
their hand: start a new combination, extend a held one, or stop rolling
and bank everything proposed for the roll.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Sequence

from src.engine.combinations import Combination, Single
from src.engine.validators import validate_single_count


class ActionKind(Enum):
    """Effect an action has on the hand."""
    KEEP_NEW = auto()  # start a new combination
    ADD_TO = auto()    # extend a combination already held
    STAY = auto()      # stop rolling, banking the carried combinations


@dataclass(frozen=True)
class DiceAction:
    """
    A proposed move for the current roll.

    Attributes:
        dice: Faces of the rolled dice this action takes out of play
        kind: What the action does to the hand
        combos: For KEEP_NEW the combination formed; for ADD_TO the held
            combination being extended (the extension is one step per die
            in ``dice``); for STAY the combinations as they will stand once
            folded into the hand
    """
    dice: tuple[int, ...]
    kind: ActionKind
    combos: tuple[Combination, ...]

    @classmethod
    def keep_new(
        cls,
        combo: Combination,
        dice: Sequence[int] | None = None
    ) -> "DiceAction":
        if dice is None:
            dice = combo.involved_dice()
        return cls(dice=tuple(dice), kind=ActionKind.KEEP_NEW, combos=(combo,))

    @classmethod
    def add_to(cls, combo: Combination, dice: Sequence[int]) -> "DiceAction":
        return cls(dice=tuple(dice), kind=ActionKind.ADD_TO, combos=(combo,))

    @classmethod
    def stay(cls, combos: Sequence[Combination], dice: Sequence[int]) -> "DiceAction":
        return cls(dice=tuple(dice), kind=ActionKind.STAY, combos=tuple(combos))

    @property
    def combination(self) -> Combination:
        return self.combos[0]

    @property
    def points(self) -> int:
        """Points this action adds to the held combinations."""
        if self.kind is ActionKind.KEEP_NEW:
            return self.combination.score()
        if self.kind is ActionKind.ADD_TO:
            combo = self.combination
            if combo.is_straight_roll():
                return combo.score()
            return combo.extended(len(self.dice)).score() - combo.score()
        return sum(combo.score() for combo in self.combos)

    def guaranteed_score(self) -> int | None:
        """Score of a straight formed by this action, if any."""
        if self.kind is ActionKind.STAY:
            return None
        if self.combination.is_straight_roll():
            return self.combination.score()
        return None

    @property
    def max_single_count(self) -> int | None:
        """How many dice a single action may take, or None for other actions."""
        if self.kind is ActionKind.STAY or not isinstance(self.combination, Single):
            return None
        return len(self.dice)

    def with_single_count(self, count: int) -> "DiceAction":
        """
        Take only ``count`` of the dice a single action offers.

        Args:
            count: Number of dice to take (1..max_single_count)

        Returns:
            Equivalent action consuming ``count`` dice

        Raises:
            ValueError: If this is not a single action or count is out of range
        """
        max_count = self.max_single_count
        if max_count is None:
            raise ValueError(f"Cannot choose a count for '{self}'.")
        validate_single_count(count, max_count)

        combo = self.combination
        dice = (combo.face,) * count
        if self.kind is ActionKind.KEEP_NEW:
            return replace(self, dice=dice, combos=(replace(combo, count=count),))
        return replace(self, dice=dice)

    def __str__(self) -> str:
        dice_str = "".join(f"[{die}]" for die in self.dice)
        if self.kind is ActionKind.KEEP_NEW:
            effect = f"form {self.combination}"
        elif self.kind is ActionKind.ADD_TO:
            effect = f"add to {self.combination}"
        else:
            effect = "stay with " + ",".join(str(combo) for combo in self.combos)
        return f"save {dice_str} to {effect}"
