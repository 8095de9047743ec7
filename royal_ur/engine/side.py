from __future__ import annotations

from dataclasses import dataclass, field

from ..exceptions import InvariantViolation
from .config import config


@dataclass(slots=True, frozen=True)
class SideView:
    """Read-only snapshot of a side, handed to agents and renderers."""

    remaining: int
    occupied: frozenset[int]
    finished: int

    def has_tile_at(self, position: int) -> bool:
        if position == config.PILE:
            return self.remaining > 0
        return position in self.occupied

    def is_complete(self) -> bool:
        return self.remaining == 0 and not self.occupied


@dataclass(slots=True)
class Side:
    """One player's tiles: the pile, the path squares held, and the finished count.

    Positions are player-relative: 0 is the pile, 1..14 the path, 15 the exit.
    Only 1..14 are ever stored in ``occupied``; the pile and exit are counters.
    """

    remaining: int = config.TILES
    occupied: set[int] = field(default_factory=set)
    finished: int = 0

    def has_tile_at(self, position: int) -> bool:
        if position == config.PILE:
            return self.remaining > 0
        return position in self.occupied

    def is_complete(self) -> bool:
        return self.remaining == 0 and not self.occupied

    def take_from(self, position: int) -> None:
        if position == config.PILE:
            self.remaining -= 1
        else:
            self.occupied.discard(position)

    def place_at(self, position: int) -> None:
        if position >= config.FINISH:
            self.finished += 1
        else:
            self.occupied.add(position)

    def send_home(self, position: int) -> None:
        self.occupied.discard(position)
        self.remaining += 1

    def view(self) -> SideView:
        return SideView(self.remaining, frozenset(self.occupied), self.finished)

    def copy(self) -> "Side":
        return Side(self.remaining, set(self.occupied), self.finished)

    def check_invariants(self) -> None:
        if not 0 <= self.remaining <= config.TILES:
            raise InvariantViolation(f"remaining out of range: {self.remaining}")
        stray = [p for p in self.occupied if not 1 <= p < config.FINISH]
        if stray:
            raise InvariantViolation(f"occupied holds off-path positions: {sorted(stray)}")
        total = self.remaining + len(self.occupied) + self.finished
        if total != config.TILES:
            raise InvariantViolation(
                f"tile count {total} != {config.TILES} "
                f"(remaining={self.remaining}, occupied={sorted(self.occupied)}, "
                f"finished={self.finished})"
            )

    @classmethod
    def from_positions(cls, remaining: int, occupied=()) -> "Side":
        """Build a side from a pile size and path squares; the rest are finished."""
        held = set(occupied)
        return cls(remaining, held, config.TILES - remaining - len(held))

    def __str__(self) -> str:
        return (
            f"Side(remaining={self.remaining}, occupied={sorted(self.occupied)}, "
            f"finished={self.finished})"
        )
