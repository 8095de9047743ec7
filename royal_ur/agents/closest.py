from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, ClassVar, Optional

from ..engine.side import SideView


@dataclass(slots=True)
class ClosestAgent:
    """Advances the tile closest to the exit (highest legal start)."""

    key: ClassVar[str] = "closest"
    name: str = "Closest"

    def choose_move(
        self,
        me: SideView,
        other: SideView,
        steps: int,
        options: AbstractSet[int],
    ) -> Optional[int]:
        return max(options, default=None)
