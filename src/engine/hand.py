"""
Farkle - Hand

The per-turn accumulator. A Hand proposes every legal action for a roll
and applies the one the player picks. Held combinations live in a list
whose indices never change during a turn; two face -> index maps let
singles and multiples be found again when a later roll extends them.
"""

import logging

from src.engine.actions import ActionKind, DiceAction
from src.engine.base import MAX_STRAIGHT_ROLL, NUM_DICE, InvariantViolation
from src.engine.combinations import Combination, Multiple, Pairs, Single, Straight
from src.engine.dice_set import DiceSet

logger = logging.getLogger(__name__)


class Hand:
    """
    Combinations and scores for the player whose turn it is.

    A fresh Hand is created at the start of every turn.
    """

    def __init__(self) -> None:
        # dice set aside toward a straight, not part of any combination
        self._saved_dice = DiceSet()
        # how many rolls contributed to the set-aside dice
        self._set_aside_rolls = 0
        # the combinations currently held; list index is the combo id
        self._combos: list[Combination] = []
        # face -> combo id for Single combinations
        self._singles: dict[int, int] = {}
        # face -> combo id for Multiple combinations
        self._multiples: dict[int, int] = {}
        # points folded in when the dice pool was exhausted
        self._cumulative_score = 0
        # points from straights, kept even on a bust
        self._guaranteed_score = 0

    @property
    def combos(self) -> tuple[Combination, ...]:
        return tuple(self._combos)

    def cumulative_score(self) -> int:
        return self._cumulative_score

    def guaranteed_score(self) -> int:
        return self._guaranteed_score

    def saved_dice(self) -> DiceSet:
        """Dice set aside toward a straight."""
        return self._saved_dice

    def determine_actions(self, dice: DiceSet) -> list[DiceAction]:
        """
        Determine every action the player can take with a roll.

        Proposals come in a fixed order: pairs, straight, extensions of held
        multiples, new multiples, singles, and finally a STAY action banking
        the best non-overlapping choice among them.

        Args:
            dice: The dice just rolled

        Returns:
            Proposed actions; an empty list means the roll is a bust
        """
        actions: list[DiceAction] = []

        # three pairs use the whole roll
        pairs = dice.is_pairs()
        if pairs is not None:
            actions.append(DiceAction.keep_new(Pairs(pairs), dice.dice_values()))

        # the roll may finish a straight with the dice already set aside
        straight = self._straight_action(dice)
        if straight is not None:
            actions.append(straight)

        # dice that extend a multiple we already hold
        for face, idx in sorted(self._multiples.items()):
            count = dice.get_die_count(face)
            if count:
                actions.append(DiceAction.add_to(self._combos[idx], [face] * count))

        # multiples within the roll alone
        for combo in dice.find_multiples():
            if combo.face in self._multiples:
                continue
            actions.append(DiceAction.keep_new(combo))

        # scoring singles, added to a held single of the same face when there is one
        for combo in dice.find_singles():
            idx = self._singles.get(combo.face)
            if idx is None:
                actions.append(DiceAction.keep_new(combo))
            else:
                actions.append(DiceAction.add_to(self._combos[idx], combo.involved_dice()))

        if actions:
            actions.append(self._stay_action(actions))

        logger.debug("Roll %s offers %d actions", dice, len(actions))
        return actions

    def _straight_action(self, dice: DiceSet) -> DiceAction | None:
        if not dice.union(self._saved_dice).is_straight():
            return None

        if self._saved_dice.is_empty():
            return DiceAction.keep_new(Straight(roll=1), dice.dice_values())

        roll = self._set_aside_rolls + 1
        if roll > MAX_STRAIGHT_ROLL:
            return None
        return DiceAction.add_to(Straight(roll=roll), dice.dice_values())

    def _stay_action(self, actions: list[DiceAction]) -> DiceAction:
        """
        Build the STAY action for a roll.

        Proposals touching the same face overlap, so per face only the one
        adding the most points is kept. Pairs and straights use the whole
        roll and win only when worth more than the per-face picks combined.
        """
        # three 1s are offered both as a multiple and as singles; banking both
        # would score the same dice twice, so the STAY never aggregates them
        by_face: dict[int, DiceAction] = {}
        whole_roll: list[DiceAction] = []
        for action in actions:
            face = action.combination.face
            if face is None:
                whole_roll.append(action)
            elif face not in by_face or action.points > by_face[face].points:
                by_face[face] = action

        chosen = [by_face[face] for face in sorted(by_face)]
        best_whole = max(whole_roll, key=lambda action: action.points, default=None)
        if best_whole is not None and best_whole.points > sum(action.points for action in chosen):
            chosen = [best_whole]

        combos: list[Combination] = []
        dice: list[int] = []
        for action in chosen:
            combo = action.combination
            if action.kind is ActionKind.ADD_TO and not combo.is_straight_roll():
                combo = combo.extended(len(action.dice))
            combos.append(combo)
            dice.extend(action.dice)

        return DiceAction.stay(combos, dice)

    def straight_candidates(self, dice: DiceSet) -> list[int]:
        """
        Faces of a roll that can be set aside toward a straight.

        Only faces missing from the set-aside dice qualify, one die each.
        Nothing qualifies when the roll already completes a straight, when
        dice from this pool went into combinations (set-aside and rolled dice
        no longer add up to a full pool), or when the straight could no
        longer be finished by the third roll.

        Args:
            dice: The dice just rolled

        Returns:
            Sorted faces, or an empty list
        """
        if self._set_aside_rolls >= MAX_STRAIGHT_ROLL - 1:
            return []
        if self._saved_dice.size() + dice.size() != NUM_DICE:
            return []
        if dice.union(self._saved_dice).is_straight():
            return []
        return [face for face in dice.faces() if not self._saved_dice.has_die_value(face)]

    def set_aside(self, faces: list[int]) -> None:
        """
        Set dice aside toward a straight.

        Args:
            faces: Distinct faces not already set aside

        Raises:
            InvariantViolation: If the faces could not have been proposed by
                ``straight_candidates``
        """
        if self._set_aside_rolls >= MAX_STRAIGHT_ROLL - 1:
            raise InvariantViolation("No more rolls can contribute to a straight")
        if not faces or len(set(faces)) != len(faces):
            raise InvariantViolation(f"Cannot set aside {faces}")
        for face in faces:
            if self._saved_dice.has_die_value(face):
                raise InvariantViolation(f"{face} is already set aside")

        for face in faces:
            self._saved_dice.add(face)
        self._set_aside_rolls += 1
        logger.debug("Set aside %s toward a straight (%s)", faces, self._saved_dice)

    def _index_for(self, combo: Combination) -> dict[int, int] | None:
        if isinstance(combo, Single):
            return self._singles
        if isinstance(combo, Multiple):
            return self._multiples
        return None

    def _insert(self, combo: Combination) -> None:
        index = self._index_for(combo)
        if index is not None:
            if combo.face in index:
                raise InvariantViolation(f"Already holding {self._combos[index[combo.face]]}")
            index[combo.face] = len(self._combos)
        self._combos.append(combo)

    def _extend(self, combo: Combination, amount: int) -> None:
        index = self._index_for(combo)
        if index is None or combo.face not in index:
            raise InvariantViolation(f"No held combination to add to for {combo}")
        idx = index[combo.face]
        self._combos[idx] = self._combos[idx].extended(amount)

    def _upsert(self, combo: Combination) -> None:
        index = self._index_for(combo)
        if index is not None and combo.face in index:
            self._combos[index[combo.face]] = combo
        else:
            self._insert(combo)

    def _complete_straight(self, combo: Combination) -> None:
        self._combos.append(combo)
        self._saved_dice = DiceSet()
        self._set_aside_rolls = 0

    def perform_action(self, action: DiceAction) -> bool:
        """
        Apply a chosen action to the hand.

        Args:
            action: An action returned by ``determine_actions``, possibly
                narrowed with ``with_single_count``

        Returns:
            True if the player keeps rolling, False if the turn ends
        """
        guaranteed = action.guaranteed_score()
        if guaranteed is not None:
            self._guaranteed_score += guaranteed

        logger.debug("Performing: %s", action)

        if action.kind is ActionKind.KEEP_NEW:
            if action.combination.is_straight_roll():
                self._complete_straight(action.combination)
            else:
                self._insert(action.combination)
            return True

        if action.kind is ActionKind.ADD_TO:
            if action.combination.is_straight_roll():
                self._complete_straight(action.combination)
            else:
                self._extend(action.combination, len(action.dice))
            return True

        for combo in action.combos:
            self._upsert(combo)
        return False

    def score_combos(self) -> int:
        """Score of the combinations currently held."""
        return sum(combo.score() for combo in self._combos)

    def accumulate_score(self) -> None:
        """Fold the held combinations into the cumulative score and start over."""
        combo_score = self.score_combos()
        self._cumulative_score += combo_score
        self._combos.clear()
        self._singles.clear()
        self._multiples.clear()
        self._saved_dice = DiceSet()
        self._set_aside_rolls = 0
        logger.debug("Accumulated %d points (cumulative %d)", combo_score, self._cumulative_score)

    def turn_score(self, busted: bool) -> int:
        """
        Points the turn is worth once it is over.

        Points already accumulated always count. After a bust the held
        combinations are lost except straights; otherwise held combinations
        only count once accumulated, so call ``accumulate_score`` first.
        """
        if busted:
            held_straights = sum(
                combo.score() for combo in self._combos if combo.is_straight_roll()
            )
            return self._cumulative_score + held_straights
        return self._cumulative_score

    def __str__(self) -> str:
        lines = [
            f"Cumulative score: {self._cumulative_score} ({self._guaranteed_score} guaranteed)",
            f"Saved combos: {self.score_combos()} points",
        ]
        lines.extend(str(combo) for combo in self._combos)
        return "\n".join(lines)
