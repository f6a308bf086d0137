"""
Farkle - Input Validation Utilities

Provides validation functions for values coming from outside the engine.
All validators either return validated data or raise descriptive
ValueError exceptions.
"""

from typing import Iterable, Sequence

from src.engine.base import FACES


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 0,
    max_count: int | None = None
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice faces to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if value not in FACES:
            raise ValueError(
                f"Die value at index {i} is {value}, must be between {FACES[0]} and {FACES[-1]}."
            )

    return values_tuple


def validate_single_count(count: int, max_count: int) -> int:
    """
    Validate how many dice of a scoring single the player takes.

    Args:
        count: Requested number of dice
        max_count: Number of dice of that face available

    Returns:
        Validated count

    Raises:
        ValueError: If count is not within 1..max_count
    """
    if not isinstance(count, int):
        raise ValueError(f"Count must be an integer, got {type(count).__name__}.")

    if count < 1:
        raise ValueError("You must take at least one die.")

    if count > max_count:
        raise ValueError(f"{count} is too many, at most {max_count} available.")

    return count


def validate_player_names(names: Iterable[str]) -> tuple[str, ...]:
    """
    Validate the list of player names.

    Args:
        names: Player names in turn order

    Returns:
        Stripped names as a tuple

    Raises:
        ValueError: If the list is empty, a name is blank or duplicated
    """
    cleaned = tuple(name.strip() for name in names)

    if not cleaned:
        raise ValueError("At least one player is required.")

    for name in cleaned:
        if not name:
            raise ValueError("Player names cannot be blank.")

    if len(set(cleaned)) != len(cleaned):
        raise ValueError(f"Player names must be unique, got {list(cleaned)}.")

    return cleaned


def validate_target_score(score: int) -> int:
    """
    Validate target score for a match.

    Args:
        score: Target score to validate

    Returns:
        Validated score

    Raises:
        ValueError: If score is invalid
    """
    if not isinstance(score, int):
        raise ValueError(f"Target score must be an integer, got {type(score).__name__}.")

    if score <= 0:
        raise ValueError(f"Target score must be positive, got {score}.")

    return score
