"""Rules engine: legal starts, move application, captures and rosette bonuses.

Moves are characterised by their start position alone, since the roll fixes
the distance. A set of legal moves is therefore a set of start positions in
[0, 14]; 15 is never a start.
"""

from __future__ import annotations

from ..exceptions import InvalidStepsError, InvariantViolation
from .config import config
from .side import Side, SideView
from .types import MoveResult


def _check_steps(steps: int) -> None:
    if not 0 <= steps <= config.MAX_STEPS:
        raise InvalidStepsError(f"steps must be in [0, {config.MAX_STEPS}], got {steps}")


def legal_moves(me: Side | SideView, other: Side | SideView, steps: int) -> frozenset[int]:
    """Return every start position the mover may advance by ``steps``.

    A start is legal iff the mover has a tile there, the destination does not
    run past the exit, does not land on the mover's own tile, and is not the
    central rosette while the opponent holds it.
    """
    _check_steps(steps)
    if steps == 0:
        return frozenset()

    options = set()
    for start in range(config.FINISH):
        if not me.has_tile_at(start):
            continue
        end = start + steps
        if end > config.FINISH:
            continue
        if end < config.FINISH and end in me.occupied:
            continue
        if end == config.CENTRAL_ROSETTE and end in other.occupied:
            continue
        options.add(start)
    return frozenset(options)


def resolve_move(me: Side, other: Side, start: int, steps: int) -> MoveResult:
    """Apply a move and describe it.

    Pre: ``start`` is in ``legal_moves(me, other, steps)``. This is not the
    place for validation; the turn sequencer only submits legal starts.
    """
    end = start + steps

    # Pick up the tile from the start of the move and put it down at the end.
    me.take_from(start)
    me.place_at(end)

    # Landing on an opponent in the shared lane sends them back to the pile.
    # The central rosette is excluded by legal_moves, so no capture happens there.
    captured = config.in_shared_lane(end) and end in other.occupied
    if captured:
        other.send_home(end)

    return MoveResult(
        start=start,
        end=end,
        extra_turn=config.is_rosette(end),
        captured=captured,
        finished=end == config.FINISH,
    )


def apply_move(me: Side, other: Side, start: int, steps: int) -> bool:
    """Apply a move and return whether the mover goes again."""
    return resolve_move(me, other, start, steps).extra_turn


def check_sides(first: Side, second: Side) -> None:
    """Raise InvariantViolation unless both sides are individually and jointly valid."""
    first.check_invariants()
    second.check_invariants()
    clash = {
        p for p in first.occupied & second.occupied if config.in_shared_lane(p)
    }
    if clash:
        raise InvariantViolation(f"both sides occupy shared squares {sorted(clash)}")
