from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GameState(Enum):
    PLAYER1_ACTIVE = "player1_active"
    PLAYER2_ACTIVE = "player2_active"
    GAME_OVER = "game_over"


@dataclass(slots=True, frozen=True)
class MoveResult:
    start: int
    end: int
    extra_turn: bool
    captured: bool = False
    finished: bool = False


@dataclass(slots=True)
class RollOutcome:
    """What happened during a single roll of the turn sequencer."""

    seat: int
    steps: int
    options: frozenset[int]
    choice: Optional[int] = None
    result: Optional[MoveResult] = None
    forfeited: bool = False

    @property
    def skipped(self) -> bool:
        return self.result is None

    @property
    def extra_turn(self) -> bool:
        return self.result is not None and self.result.extra_turn
