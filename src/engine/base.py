"""
Farkle - Game Engine Base Definitions

This module defines the constants, error types and face sources
shared by the rest of the engine. Dice faces are plain ints in 1..6.
"""

import random
from typing import Callable


# Number of dice in a fresh roll pool
NUM_DICE = 6

# Valid die faces
FACES = (1, 2, 3, 4, 5, 6)

# Faces that score on their own
SCORING_SINGLES = (1, 5)

# Highest roll stage a straight can be completed on
MAX_STRAIGHT_ROLL = 3

# Produces one die face in 1..6
FaceSource = Callable[[], int]


class InvariantViolation(AssertionError):
    """
    Raised when the engine reaches a state its own rules forbid.

    These are contract violations (for example an ADD_TO action for a
    combination the hand does not hold) rather than user errors, and
    are never caught inside the engine.
    """


def random_face() -> int:
    """Roll a single fair D6."""
    return random.randint(1, 6)


def seeded_face_source(seed: int | None) -> FaceSource:
    """
    Build a face source backed by its own generator.

    Args:
        seed: Seed for the generator (None = system entropy)

    Returns:
        Callable producing faces in 1..6
    """
    rng = random.Random(seed)
    return lambda: rng.randint(1, 6)
