"""
Farkle - Score Ledger

Match-level running totals keyed by player name.
"""

import logging
from typing import Iterable

from src.engine.validators import validate_player_names, validate_target_score

logger = logging.getLogger(__name__)


class ScoreLedger:
    """
    Cumulative score per player and the threshold they play to.

    Written once at the end of every turn, read for the win check.
    """

    def __init__(self, players: Iterable[str], target_score: int) -> None:
        names = validate_player_names(players)
        self._target_score = validate_target_score(target_score)
        # insertion order is turn order
        self._scores: dict[str, int] = {name: 0 for name in names}

    @property
    def target_score(self) -> int:
        return self._target_score

    @property
    def players(self) -> tuple[str, ...]:
        return tuple(self._scores)

    @property
    def scores(self) -> dict[str, int]:
        return dict(self._scores)

    def score_of(self, player: str) -> int:
        return self._scores[player]

    def update_player_score(self, player: str, points: int) -> int:
        """
        Add a turn's points to a player's total.

        Args:
            player: Name of a player in the ledger
            points: Points earned this turn

        Returns:
            The player's new total

        Raises:
            KeyError: If the player is not part of the match
        """
        if player not in self._scores:
            raise KeyError(f"Unknown player {player!r}")
        self._scores[player] += points
        logger.debug("%s +%d -> %d", player, points, self._scores[player])
        return self._scores[player]

    def has_winner(self) -> str | None:
        """First player, in turn order, at or above the target."""
        for player, score in self._scores.items():
            if score >= self._target_score:
                return player
        return None
