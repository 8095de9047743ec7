from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from loguru import logger

if TYPE_CHECKING:  # avoid runtime imports to prevent circular deps
    from ..agents.base import Agent

from ..exceptions import IllegalMoveError
from .board import render
from .config import config
from .dice import Dice, Randomizer
from .rules import check_sides, legal_moves, resolve_move
from .side import Side
from .types import GameState, RollOutcome

_ACTIVE = (GameState.PLAYER1_ACTIVE, GameState.PLAYER2_ACTIVE)


@dataclass(slots=True)
class Game:
    """Turn sequencer for one game between two agents.

    Seat 0 moves first unless ``starting_seat`` says otherwise. The game owns
    both sides; agents only ever see frozen views of them.
    """

    agents: tuple["Agent", "Agent"]
    dice: Randomizer = field(default_factory=Dice)
    starting_seat: int = 0
    sides: list[Side] = field(init=False)
    state: GameState = field(init=False)
    winner: Optional[int] = field(default=None, init=False)
    rolls: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.starting_seat not in (0, 1):
            raise ValueError("starting_seat must be 0 or 1")
        self.agents = tuple(self.agents)
        self.sides = [Side(), Side()]
        self.state = _ACTIVE[self.starting_seat]

    @property
    def current_seat(self) -> int:
        if self.state is GameState.GAME_OVER:
            raise RuntimeError("game is over")
        return _ACTIVE.index(self.state)

    @property
    def is_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    def _pass_turn(self, seat: int) -> None:
        self.state = _ACTIVE[1 - seat]

    def _check_finished(self) -> None:
        check_sides(*self.sides)
        for seat, side in enumerate(self.sides):
            if side.is_complete():
                self.state = GameState.GAME_OVER
                self.winner = seat
                return

    def play_roll(self) -> RollOutcome:
        """Roll once for the active seat and let its agent move."""
        seat = self.current_seat
        agent = self.agents[seat]
        me, other = self.sides[seat], self.sides[1 - seat]

        if config.VERBOSE:
            logger.debug("\n" + render(self.sides[0], self.sides[1]))

        steps = self.dice.roll()
        self.rolls += 1
        logger.debug(f"{agent.name} rolls a {steps}.")

        # Don't bother asking the agent for a move if the roll was a zero.
        if steps == 0:
            self._pass_turn(seat)
            return RollOutcome(seat=seat, steps=steps, options=frozenset())

        options = legal_moves(me, other, steps)
        if not options:
            logger.debug("No legal moves.")
            self._pass_turn(seat)
            return RollOutcome(seat=seat, steps=steps, options=options)

        choice = agent.choose_move(me.view(), other.view(), steps, options)
        logger.debug(f"{agent.name} chooses {choice}.")

        # Submitting an invalid move (or passing) forfeits the roll.
        legal = isinstance(choice, int) and not isinstance(choice, bool)
        if not legal or choice not in options:
            error = IllegalMoveError(
                f"{agent.name} chose {choice!r}, options {sorted(options)}"
            )
            logger.debug(f"Oh no! An invalid move... {error!r}")
            self._pass_turn(seat)
            return RollOutcome(
                seat=seat, steps=steps, options=options, choice=choice, forfeited=True
            )

        result = resolve_move(me, other, choice, steps)
        if result.captured:
            logger.debug(f"{agent.name} captures at {result.end}.")
        if result.finished:
            logger.debug(f"{agent.name} bears off a tile ({me.finished}/{config.TILES}).")

        self._check_finished()
        if not self.is_over and not result.extra_turn:
            self._pass_turn(seat)
        return RollOutcome(
            seat=seat, steps=steps, options=options, choice=choice, result=result
        )

    def play(self, max_rolls: Optional[int] = None) -> Optional[int]:
        """Play until someone wins and return the winning seat.

        With ``max_rolls`` set, stop after that many rolls and return None if
        the game has not finished.
        """
        while not self.is_over:
            if max_rolls is not None and self.rolls >= max_rolls:
                logger.warning(f"Game stalled after {self.rolls} rolls.")
                return None
            self.play_roll()
        logger.debug(
            f"Ended after {self.rolls} rolls; {self.agents[self.winner].name} wins."
        )
        return self.winner


def play_one_game(
    first: "Agent",
    second: "Agent",
    dice: Optional[Randomizer] = None,
    starting_seat: int = 0,
) -> int:
    """Play one full game and return the winning seat (0 for ``first``)."""
    game = Game((first, second), dice=dice or Dice(), starting_seat=starting_seat)
    return game.play()
