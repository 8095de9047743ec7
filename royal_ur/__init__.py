"""
Royal Game of Ur
A compact rules engine, turn sequencer and agents for the two-player race game.
"""

from royal_ur.agents import ClosestAgent, FarthestAgent, InteractiveAgent
from royal_ur.engine import (
    Dice,
    Game,
    GameState,
    Side,
    apply_move,
    config,
    legal_moves,
    play_one_game,
    render,
)
from royal_ur.tournament import TournamentSummary, run_tournament

__all__ = [
    "Game",
    "GameState",
    "Side",
    "Dice",
    "legal_moves",
    "apply_move",
    "play_one_game",
    "render",
    "config",
    "FarthestAgent",
    "ClosestAgent",
    "InteractiveAgent",
    "run_tournament",
    "TournamentSummary",
]
