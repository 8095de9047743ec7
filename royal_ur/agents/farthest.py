from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, ClassVar, Optional

from ..engine.side import SideView


@dataclass(slots=True)
class FarthestAgent:
    """Advances the tile farthest from the exit (lowest legal start)."""

    key: ClassVar[str] = "farthest"
    name: str = "Farthest"

    def choose_move(
        self,
        me: SideView,
        other: SideView,
        steps: int,
        options: AbstractSet[int],
    ) -> Optional[int]:
        return min(options, default=None)
