"""Agentes do conselho."""
from projects.board.agents.base import Agent
from projects.board.agents.registry import AgentRegistry, build_agents, model_for

__all__ = [
    "Agent",
    "AgentRegistry",
    "build_agents",
    "model_for",
]
