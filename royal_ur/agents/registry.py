from __future__ import annotations

from typing import Dict, Type

from ..exceptions import UnknownAgentError
from .base import Agent
from .closest import ClosestAgent
from .farthest import FarthestAgent
from .interactive import InteractiveAgent

AGENT_REGISTRY: Dict[str, Type[Agent]] = {
    FarthestAgent.key: FarthestAgent,
    ClosestAgent.key: ClosestAgent,
    InteractiveAgent.key: InteractiveAgent,
}


def create(agent_name: str, **kwargs) -> Agent:
    cls = AGENT_REGISTRY.get(agent_name.lower())
    if cls is None:
        raise UnknownAgentError(
            f"Unknown agent '{agent_name}'. Available: {sorted(AGENT_REGISTRY)}"
        )
    return cls(**kwargs)


def available(ignore_human: bool = True) -> Dict[str, Type[Agent]]:
    if ignore_human:
        return {
            name: cls
            for name, cls in AGENT_REGISTRY.items()
            if name != InteractiveAgent.key
        }
    return dict(AGENT_REGISTRY)
