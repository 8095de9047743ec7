"""Move-selection agents for scripted or interactive play."""

from .base import Agent
from .closest import ClosestAgent
from .farthest import FarthestAgent
from .interactive import InteractiveAgent, parse_choice
from .registry import AGENT_REGISTRY, available, create

__all__ = [
    "Agent",
    "FarthestAgent",
    "ClosestAgent",
    "InteractiveAgent",
    "parse_choice",
    "AGENT_REGISTRY",
    "available",
    "create",
]
