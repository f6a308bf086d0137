"""
Farkle Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice multisets, scoring combinations, action proposals and
the per-turn hand state machine.
"""

from src.engine.actions import ActionKind, DiceAction
from src.engine.base import (
    NUM_DICE,
    InvariantViolation,
    random_face,
    seeded_face_source,
)
from src.engine.combinations import Combination, Multiple, Pairs, Single, Straight
from src.engine.dice_set import DiceSet
from src.engine.hand import Hand
from src.engine.score_ledger import ScoreLedger

__all__ = [
    # Constants
    "NUM_DICE",
    # Data Classes
    "DiceSet",
    "DiceAction",
    # Combinations
    "Combination",
    "Single",
    "Multiple",
    "Straight",
    "Pairs",
    # Enums
    "ActionKind",
    # Errors
    "InvariantViolation",
    # State
    "Hand",
    "ScoreLedger",
    # Dice sources
    "random_face",
    "seeded_face_source",
]
