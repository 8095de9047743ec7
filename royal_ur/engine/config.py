import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


@dataclass(slots=True)
class Config:
    # --- Constants ---
    TILES: int = 7  # tiles per player
    PATH_LENGTH: int = 16  # 0=pile, 1-14=path, 15=finished
    PILE: int = 0
    DICE_COUNT: int = 4  # tetrahedra, each worth 0 or 1
    ROSETTES: tuple[int, ...] = (4, 8, 14)
    CENTRAL_ROSETTE: int = 8
    SHARED_LANE_START: int = 5
    SHARED_LANE_END: int = 12

    # --- Runtime knobs ---
    NUM_GAMES: int = int(os.getenv("NUM_GAMES", 10_000))
    SEED: int | None = int(os.environ["SEED"]) if os.getenv("SEED") else None
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    VERBOSE: bool = bool(int(os.getenv("VERBOSE", 0)))
    MAX_ROLLS: int = int(os.getenv("MAX_ROLLS", 10_000))

    # Derived (populated in __post_init__ due to slots)
    FINISH: int = 0
    MAX_STEPS: int = 0

    def __post_init__(self):
        self.FINISH = self.PATH_LENGTH - 1
        self.MAX_STEPS = self.DICE_COUNT

        if self.NUM_GAMES < 0:
            raise ValueError("NUM_GAMES must be non-negative")
        if self.MAX_ROLLS < 1:
            raise ValueError("MAX_ROLLS must be positive")

    def in_shared_lane(self, position: int) -> bool:
        return self.SHARED_LANE_START <= position <= self.SHARED_LANE_END

    def is_rosette(self, position: int) -> bool:
        return position in self.ROSETTES


config = Config()
