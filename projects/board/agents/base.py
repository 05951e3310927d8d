"""Agente de um papel do conselho.

Um agente é a ligação imutável entre papel, modelo, system prompt e o
client LLM compartilhado. Não guarda estado entre execuções.
"""
from dataclasses import dataclass
import time

from projects.board.llm.client import LLMClient
from projects.board.observability.metrics import board_agent_duration
from projects.board.roles import Role
from shared.infrastructure.tracing.decorators import log_span


@dataclass(frozen=True)
class Agent:
    """Agente especialista ou moderador.

    Attributes:
        role: Papel no conselho
        model: Nome do modelo no endpoint de chat
        system_prompt: Persona e instruções do papel
        client: Client LLM compartilhado (somente leitura)
    """
    role: Role
    model: str
    system_prompt: str
    client: LLMClient

    @log_span("agent_run", log_args=False, log_result=True)
    async def run(self, idea: str) -> str:
        """Envia a ideia (ou prompt composto) e retorna a resposta do modelo.

        Erros do client são propagados sem alteração.
        """
        start = time.monotonic()
        try:
            return await self.client.chat(self.model, self.system_prompt, idea)
        finally:
            board_agent_duration.labels(role=self.role.value).observe(
                time.monotonic() - start
            )
