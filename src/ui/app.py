"""Farkle - Console Application Entrypoint."""

from __future__ import annotations

import itertools
import logging

from src.config.settings import Settings, configure_logging, get_settings
from src.engine.base import FaceSource, seeded_face_source
from src.engine.score_ledger import ScoreLedger
from src.ui.console import InputFn, OutputFn, play_turn

logger = logging.getLogger(__name__)


def play_match(
    settings: Settings,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    source: FaceSource | None = None,
) -> str:
    """Cycle through the players until one reaches the target score.

    Returns:
        Name of the winner
    """
    ledger = ScoreLedger(settings.players, settings.target_score)
    if source is None:
        source = seeded_face_source(settings.seed)

    players = itertools.cycle(ledger.players)
    winner = ledger.has_winner()
    while winner is None:
        player = next(players)
        output_fn(f"{player}'s turn:")

        outcome = play_turn(player, input_fn=input_fn, output_fn=output_fn, source=source)
        total = ledger.update_player_score(player, outcome.points)
        output_fn(f"{player} scored {outcome.points} ({total} total)")
        winner = ledger.has_winner()

    logger.info("%s wins with %d", winner, ledger.score_of(winner))
    output_fn(f"{winner} wins!")
    return winner


def main() -> None:
    """Application entrypoint."""
    settings = get_settings()
    configure_logging(settings)
    logger.info(
        "Starting match for %s to %d", ", ".join(settings.players), settings.target_score
    )
    play_match(settings)


if __name__ == "__main__":
    main()
