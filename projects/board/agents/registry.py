"""Registro dos cinco agentes do conselho."""
from typing import Mapping

from projects.board.agents.base import Agent
from projects.board.config import BoardSettings
from projects.board.llm.client import LLMClient
from projects.board.prompts import get_system_prompt
from projects.board.roles import Role


AgentRegistry = Mapping[Role, Agent]


def model_for(role: Role, settings: BoardSettings) -> str:
    """Nome do modelo configurado para o papel."""
    return getattr(settings, f"model_{role.value}")


def build_agents(client: LLMClient, settings: BoardSettings) -> dict[Role, Agent]:
    """Cria um agente por papel a partir das configurações.

    Args:
        client: Client LLM compartilhado entre todos os agentes
        settings: Configurações com os modelos por papel

    Returns:
        Dict com exatamente um Agent por Role
    """
    return {
        role: Agent(
            role=role,
            model=model_for(role, settings),
            system_prompt=get_system_prompt(role),
            client=client,
        )
        for role in Role
    }
