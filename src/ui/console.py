"""
Farkle - Console Turn

Line-oriented play of a single turn: roll, show the proposed actions,
read the player's choice and apply it to the hand until the player stops
or busts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Union

from src.engine.actions import DiceAction
from src.engine.base import NUM_DICE, FaceSource, random_face
from src.engine.dice_set import DiceSet
from src.engine.hand import Hand

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


@dataclass(frozen=True)
class SetAside:
    """Menu entry for setting dice aside toward a straight."""

    faces: tuple[int, ...]

    def __str__(self) -> str:
        dice_str = "".join(f"[{face}]" for face in self.faces)
        return f"set aside {dice_str} toward a straight"


Choice = Union[DiceAction, SetAside]


@dataclass(frozen=True)
class TurnOutcome:
    """How a turn ended.

    Attributes:
        player: Whose turn it was
        points: Points to add to the player's total
        busted: Whether the turn ended on a roll with no scoring action
        rolls: Number of rolls taken
    """

    player: str
    points: int
    busted: bool
    rolls: int


def read_number(input_fn: InputFn, prompt: str) -> int:
    """Read a non-negative integer.

    Raises:
        ValueError: If the line is not a non-negative integer
    """
    line = input_fn(prompt).strip()
    try:
        number = int(line)
    except ValueError as exc:
        raise ValueError(f"{line!r} is not a number.") from exc
    if number < 0:
        raise ValueError(f"{number} is not a valid index.")
    return number


def select_action(
    actions: list[DiceAction],
    straight_faces: list[int],
    input_fn: InputFn,
    output_fn: OutputFn,
) -> Choice:
    """Show a numbered menu and return the player's choice.

    Re-prompts until a valid index is entered. For singles with more than
    one die available the player also chooses how many to take.
    """
    options: list[Choice] = list(actions)
    if straight_faces:
        options.append(SetAside(tuple(straight_faces)))

    while True:
        for idx, option in enumerate(options):
            output_fn(f"{idx}: {option}")

        try:
            selected_index = read_number(input_fn, "Select action to take: ")
        except ValueError:
            output_fn("You must select an action")
            continue

        if selected_index >= len(options):
            output_fn(f"{selected_index} is not a valid index")
            continue
        break

    selected = options[selected_index]
    if not isinstance(selected, DiceAction):
        return selected

    max_count = selected.max_single_count
    if max_count is None or max_count == 1:
        return selected

    while True:
        try:
            count = read_number(input_fn, f"Select amount you want to take (max {max_count}): ")
            return selected.with_single_count(count)
        except ValueError as exc:
            output_fn(str(exc))


def play_turn(
    player: str,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    source: FaceSource = random_face,
) -> TurnOutcome:
    """Play one turn for ``player``.

    Args:
        player: Name shown in the log
        input_fn: Reads one line given a prompt
        output_fn: Writes one line
        source: Produces die faces for each roll

    Returns:
        TurnOutcome with the points the turn is worth
    """
    hand = Hand()
    roll_num = 1
    roll_count = NUM_DICE

    while True:
        rolled_dice = DiceSet.rand(roll_count, source)
        output_fn(f"Roll {roll_num}:")
        output_fn(str(rolled_dice))

        actions = hand.determine_actions(rolled_dice)
        if not actions:
            output_fn("Nothing scored. You lost all your unbanked points")
            points = hand.turn_score(busted=True)
            logger.info("%s busted on roll %d, keeping %d", player, roll_num, points)
            return TurnOutcome(player=player, points=points, busted=True, rolls=roll_num)

        output_fn("Possible actions:")
        choice = select_action(
            actions, hand.straight_candidates(rolled_dice), input_fn, output_fn
        )

        if isinstance(choice, SetAside):
            hand.set_aside(list(choice.faces))
            roll_count -= len(choice.faces)
            output_fn(f"You selected: {choice}")
        else:
            output_fn(f"You selected: {choice}")
            roll_count -= len(choice.dice)

            keep_going = hand.perform_action(choice)
            output_fn(f"Your hand:\n{hand}")
            if not keep_going:
                hand.accumulate_score()
                points = hand.turn_score(busted=False)
                output_fn("You stopped")
                logger.info("%s stopped on roll %d with %d", player, roll_num, points)
                return TurnOutcome(player=player, points=points, busted=False, rolls=roll_num)

        # out of dice: bank what we hold and roll all six again
        if roll_count == 0:
            hand.accumulate_score()
            roll_count = NUM_DICE

        roll_num += 1
