from __future__ import annotations

from typing import AbstractSet, Optional, Protocol

from ..engine.side import SideView


class Agent(Protocol):
    """Move-selection policy consumed by the turn sequencer.

    ``choose_move`` returns a start position from ``options`` or ``None`` to
    pass. Anything outside ``options`` forfeits the roll.
    """

    name: str

    def choose_move(
        self,
        me: SideView,
        other: SideView,
        steps: int,
        options: AbstractSet[int],
    ) -> Optional[int]:
        ...
