"""Terminal entry point: play against the computer or watch it play itself."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from collections.abc import Callable
from typing import TextIO

from chesslite.config import GameSettings
from chesslite.core.enums import Color
from chesslite.core.move import Move
from chesslite.engine.selector import Difficulty
from chesslite.game.interfaces import GameEndReason
from chesslite.game.player import AIPlayer
from chesslite.game.session import GameSession

_LOGGER = logging.getLogger(__name__)

_QUIT_WORDS = frozenset({"quit", "resign", "exit"})


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chesslite",
        description="Simplified chess against a computer opponent.",
    )
    parser.add_argument(
        "--difficulty",
        type=Difficulty.parse,
        default=Difficulty.MEDIUM,
        help="easy, medium or hard (default: medium)",
    )
    parser.add_argument(
        "--self-play",
        action="store_true",
        help="let the computer play both sides",
    )
    parser.add_argument(
        "--max-plies",
        type=int,
        default=200,
        help="stop self-play after this many plies (default: 200)",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def _describe_end(session: GameSession) -> str:
    if session.end_reason == GameEndReason.NO_LEGAL_MOVES:
        return f"{session.no_moves_for} has no legal moves. Game over."
    if session.end_reason == GameEndReason.RESIGNED:
        return f"{session.side_to_move} resigned. Game over."
    return "Game stopped."


def run_self_play(
    difficulty: Difficulty,
    max_plies: int,
    rng: random.Random,
    out: TextIO,
) -> GameSession:
    """Computer against computer until no moves remain or *max_plies* is hit."""
    session = GameSession(
        players={
            Color.WHITE: AIPlayer(Color.WHITE, difficulty, rng, name="White"),
            Color.BLACK: AIPlayer(Color.BLACK, difficulty, rng, name="Black"),
        }
    )
    session.start()

    plies = 0
    while session.is_active and plies < max_plies:
        mover = session.side_to_move
        move = session.play_computer_move()
        if move is None:
            break
        plies += 1
        print(f"{plies}. {mover}: {move}", file=out)

    print(session.board.render(), file=out)
    if session.is_active:
        print(f"Stopped after {plies} plies.", file=out)
    else:
        print(_describe_end(session), file=out)
    return session


def run_interactive(
    difficulty: Difficulty,
    rng: random.Random,
    read_line: Callable[[str], str],
    out: TextIO,
) -> GameSession:
    """Human (white) against the computer (black) on the terminal."""
    session = GameSession(GameSettings.vs_computer(difficulty, think_delay_ms=0), rng=rng)
    session.start()

    while session.is_active:
        if not session.current_player.is_human:
            move = session.play_computer_move()
            if move is not None:
                print(f"Computer plays {move}", file=out)
            continue

        print(session.board.render(), file=out)
        try:
            text = read_line(f"{session.side_to_move} to move (e.g. e2e4, 'quit'): ")
        except EOFError:
            session.resign()
            break

        text = text.strip().lower()
        if text in _QUIT_WORDS:
            session.resign()
            break
        try:
            move = Move.parse(text)
        except ValueError as exc:
            print(exc, file=out)
            continue
        if not session.submit_move(move):
            print(f"Illegal move: {move}", file=out)

    print(_describe_end(session), file=out)
    return session


def main(argv: list[str] | None = None) -> int:
    """Launch the terminal game."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    rng = random.Random(args.seed)
    _LOGGER.debug("Difficulty %s, seed %s", args.difficulty, args.seed)

    if args.self_play:
        run_self_play(args.difficulty, args.max_plies, rng, sys.stdout)
    else:
        run_interactive(args.difficulty, rng, input, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
