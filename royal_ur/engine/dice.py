from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import numpy as np

from .config import config


class Randomizer(Protocol):
    def roll(self) -> int:
        ...


@dataclass(slots=True)
class Dice:
    """Four binary tetrahedra: each roll is Binomial(4, 0.5) in [0, 4].

    Unseeded dice draw their seed from OS entropy, so runs differ unless a
    seed (or a numpy SeedSequence) is supplied.
    """

    seed: int | np.random.SeedSequence | None = None
    rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.rng = np.random.default_rng(self.seed)

    def roll(self) -> int:
        return int(self.rng.binomial(config.DICE_COUNT, 0.5))

    @classmethod
    def spawn(cls, count: int, seed: int | None = None) -> list["Dice"]:
        """Independent dice for ``count`` games, all derived from one root seed."""
        children = np.random.SeedSequence(seed).spawn(count)
        return [cls(child) for child in children]
