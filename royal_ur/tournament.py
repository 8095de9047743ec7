from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from .agents.registry import create
from .engine.config import config
from .engine.dice import Dice
from .engine.game import Game


@dataclass
class GameResult:
    index: int
    winner: Optional[int]
    rolls: int


@dataclass
class TournamentSummary:
    first: str
    second: str
    games: int = 0
    first_wins: int = 0
    second_wins: int = 0
    stalled: int = 0
    total_rolls: int = 0

    @property
    def first_win_rate(self) -> float:
        decided = self.first_wins + self.second_wins
        return self.first_wins / decided if decided else 0.0

    @property
    def mean_rolls(self) -> float:
        return self.total_rolls / self.games if self.games else 0.0

    def record(self, result: GameResult) -> None:
        self.games += 1
        self.total_rolls += result.rolls
        if result.winner is None:
            self.stalled += 1
        elif result.winner == 0:
            self.first_wins += 1
        else:
            self.second_wins += 1


def play_game(
    first: str, second: str, dice: Dice, game_index: int, max_rolls: int
) -> GameResult:
    game = Game((create(first), create(second)), dice=dice)
    winner = game.play(max_rolls=max_rolls)
    return GameResult(index=game_index, winner=winner, rolls=game.rolls)


def run_tournament(
    first: str,
    second: str,
    games: int = config.NUM_GAMES,
    seed: Optional[int] = config.SEED,
    workers: int = 1,
    max_rolls: int = config.MAX_ROLLS,
) -> TournamentSummary:
    """Play ``games`` independent games between two registered agents.

    Every game gets its own dice spawned from ``seed``, so results do not
    depend on ``workers``.
    """
    if games < 0:
        raise ValueError("games must be non-negative")
    if workers < 1:
        raise ValueError("workers must be at least 1")

    summary = TournamentSummary(first=first, second=second)
    dice = Dice.spawn(games, seed)
    logger.info(f"Playing {games} games: {first} (first) vs {second} (second)")

    if workers == 1:
        results = (
            play_game(first, second, d, i, max_rolls) for i, d in enumerate(dice)
        )
        for result in results:
            summary.record(result)
    else:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(play_game, first, second, d, i, max_rolls)
                for i, d in enumerate(dice)
            ]
            for future in futures:
                summary.record(future.result())

    logger.info(
        f"{first} won {summary.first_wins} / {summary.games} "
        f"({summary.first_win_rate:.1%}), mean {summary.mean_rolls:.1f} rolls"
    )
    if summary.stalled:
        logger.warning(f"{summary.stalled} games hit the {max_rolls}-roll bound")
    return summary
