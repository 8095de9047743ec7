from __future__ import annotations

import argparse
import sys
from typing import Sequence

from loguru import logger

from .agents.registry import available, create
from .engine.config import config
from .engine.dice import Dice
from .engine.game import Game
from .exceptions import EndOfInputError, UnknownAgentError
from .logging_setup import configure_logging
from .tournament import run_tournament


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play the Royal Game of Ur, repeatedly")
    parser.add_argument(
        "--games",
        type=int,
        default=config.NUM_GAMES,
        help="Number of simulated games between the two scripted agents",
    )
    parser.add_argument(
        "--first",
        type=str,
        default="farthest",
        choices=sorted(available()),
        help="Agent that moves first in simulated games",
    )
    parser.add_argument(
        "--second",
        type=str,
        default="closest",
        choices=sorted(available()),
        help="Agent that moves second (also the interactive opponent)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=config.SEED,
        help="Optional RNG seed to make the simulation reproducible",
    )
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument(
        "--interactive",
        type=str,
        default=None,
        metavar="NAME",
        help="Play one game as NAME against the second agent before simulating",
    )
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    return parser


def play_interactive(name: str, opponent: str) -> int:
    human = create("human", name=name)
    game = Game((human, create(opponent)), dice=Dice())
    winner = game.play()
    print(f"{game.agents[winner].name} wins after {game.rolls} rolls.")
    return winner


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    print("Hello, world! Welcome to the Royal Game of Ur.")

    if args.interactive:
        try:
            play_interactive(args.interactive, args.second)
        except EndOfInputError as e:
            logger.error(f"Interactive game aborted: {e}")
            return 1

    try:
        summary = run_tournament(
            args.first,
            args.second,
            games=args.games,
            seed=args.seed,
            workers=args.workers,
        )
    except (UnknownAgentError, ValueError) as e:
        logger.error(str(e))
        return 2
    print(f"First player won {summary.first_wins} / {summary.games}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
