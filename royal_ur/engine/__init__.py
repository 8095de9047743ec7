from .board import render
from .config import config
from .dice import Dice, Randomizer
from .game import Game, play_one_game
from .rules import apply_move, check_sides, legal_moves, resolve_move
from .side import Side, SideView
from .types import GameState, MoveResult, RollOutcome

__all__ = [
    "config",
    "Dice",
    "Randomizer",
    "Side",
    "SideView",
    "legal_moves",
    "apply_move",
    "resolve_move",
    "check_sides",
    "Game",
    "GameState",
    "MoveResult",
    "RollOutcome",
    "play_one_game",
    "render",
]
