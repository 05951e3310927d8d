"""Orchestrator do conselho.

Executa os quatro especialistas (em sequência por padrão), resume as
respostas para o moderador e agrega tudo em uma Analysis.

A execução sequencial é a configuração padrão porque os modelos
costumam dividir o mesmo backend (Ollama em CPU); `parallel_experts`
liga a execução simultânea quando o backend aguenta.
"""
import asyncio
import time
from typing import Optional

from projects.board.agents.base import Agent
from projects.board.agents.registry import AgentRegistry, build_agents
from projects.board.config import BoardSettings
from projects.board.llm.client import LLMClient
from projects.board.models import Analysis
from projects.board.observability.metrics import (
    board_analyses_total,
    board_analysis_duration,
    board_expert_failures_total,
)
from projects.board.orchestrator.prompts import EXPERT_PLACEHOLDERS, build_moderator_prompt
from projects.board.roles import Role, EXPERT_ROLES
from shared.core.exceptions import (
    AgentsNotInitializedException,
    AnalysisFailedException,
    ModeratorUnavailableException,
)
from shared.core.logging import get_logger
from shared.infrastructure.tracing.decorators import log_span

logger = get_logger("orchestrator")


class Orchestrator:
    """Coordena os agentes do conselho para uma ideia.

    Attributes:
        agents: Registro papel -> agente (None = não inicializado)
        timeout: Prazo total da sequência em segundos
        parallel_experts: Executa especialistas simultaneamente
        excerpt_chars: Caracteres de cada especialista enviados ao moderador
    """

    def __init__(
        self,
        agents: Optional[AgentRegistry],
        timeout: float = 900,
        parallel_experts: bool = False,
        excerpt_chars: int = 200,
    ):
        self.agents = agents
        self.timeout = timeout
        self.parallel_experts = parallel_experts
        self.excerpt_chars = excerpt_chars

    @classmethod
    def from_settings(cls, client: LLMClient, settings: BoardSettings) -> "Orchestrator":
        """Cria o orchestrator com os cinco agentes configurados."""
        return cls(
            agents=build_agents(client, settings),
            timeout=settings.orchestrator_timeout,
            parallel_experts=settings.parallel_experts,
            excerpt_chars=settings.expert_excerpt_chars,
        )

    @log_span("board_analysis", log_args=True, log_result=False)
    async def run_analysis(self, idea: str, user_id: int) -> Analysis:
        """Executa o conselho completo para a ideia.

        Falhas de especialistas viram placeholders; só a falha do
        moderador (ou o estouro do prazo total) encerra a análise.

        Args:
            idea: Texto livre da ideia de negócio
            user_id: ID do usuário no Telegram

        Returns:
            Analysis sem id/created_at (preenchidos ao persistir)

        Raises:
            AgentsNotInitializedException: registro vazio ou ausente
            ModeratorUnavailableException: papel de moderador não registrado
            AnalysisFailedException: moderador falhou ou prazo estourou
        """
        if not self.agents:
            raise AgentsNotInitializedException()

        moderator = self.agents.get(Role.MODERATOR)
        if moderator is None:
            raise ModeratorUnavailableException()

        start = time.monotonic()
        try:
            analysis = await asyncio.wait_for(
                self._run_board(idea, user_id, moderator),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            board_analyses_total.labels(status="timeout").inc()
            logger.error("Prazo da analise estourado", timeout=self.timeout, user_id=user_id)
            raise AnalysisFailedException(f"timeout after {self.timeout} seconds")
        except AnalysisFailedException:
            board_analyses_total.labels(status="error").inc()
            raise

        board_analyses_total.labels(status="success").inc()
        board_analysis_duration.observe(time.monotonic() - start)
        return analysis

    async def _run_board(self, idea: str, user_id: int, moderator: Agent) -> Analysis:
        expert_texts = await self._run_experts(idea)

        moderator_prompt = build_moderator_prompt(
            idea, expert_texts, max_chars=self.excerpt_chars
        )

        try:
            verdict = await moderator.run(moderator_prompt)
        except Exception as e:
            logger.error("Falha do moderador", error=str(e), error_type=type(e).__name__)
            raise AnalysisFailedException(f"moderator run error: {e}") from e

        return Analysis(
            user_id=user_id,
            idea_text=idea,
            strategist=expert_texts[Role.STRATEGIST],
            financier=expert_texts[Role.FINANCIER],
            auditor=expert_texts[Role.AUDITOR],
            analyst=expert_texts[Role.ANALYST],
            moderator=verdict,
        )

    async def _run_experts(self, idea: str) -> dict[Role, str]:
        if self.parallel_experts:
            texts = await asyncio.gather(
                *(self._run_expert(role, idea) for role in EXPERT_ROLES)
            )
            return dict(zip(EXPERT_ROLES, texts))

        results = {}
        for role in EXPERT_ROLES:
            results[role] = await self._run_expert(role, idea)
        return results

    async def _run_expert(self, role: Role, idea: str) -> str:
        """Executa um especialista; qualquer erro vira placeholder."""
        agent = self.agents.get(role)
        if agent is None:
            logger.warning("Especialista ausente no registro", role=role.value)
            board_expert_failures_total.labels(role=role.value).inc()
            return EXPERT_PLACEHOLDERS[role]

        try:
            return await agent.run(idea)
        except Exception as e:
            logger.warning(
                "Falha do especialista, usando placeholder",
                role=role.value,
                error=str(e),
                error_type=type(e).__name__,
            )
            board_expert_failures_total.labels(role=role.value).inc()
            return EXPERT_PLACEHOLDERS[role]
