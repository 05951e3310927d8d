"""
Client de chat completions compatível com OpenAI (Ollama /v1).

Cada chamada envia duas mensagens (system + user) com temperatura e
limite de tokens fixos. Sem retry: o erro do transporte é propagado.
"""

from langchain.chat_models import init_chat_model
from langchain_core.messages import HumanMessage, SystemMessage

from projects.board.config import BoardSettings
from shared.core.exceptions import EmptyLLMResponseError
from shared.core.logging import get_logger

logger = get_logger(__name__)

# ChatOpenAI exige api_key; o Ollama ignora o header quando nao ha token
_NO_AUTH_PLACEHOLDER = "ollama"


class LLMClient:
    """Client compartilhado por todos os agentes.

    Mantém um chat model LangChain por nome de modelo, criado sob demanda.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        temperature: float = 0.1,
        max_tokens: int = 500,
        timeout: int = 1200,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._models = {}

    def get_model(self, model: str):
        """Retorna (e cacheia) o chat model para o nome informado."""
        if model not in self._models:
            self._models[model] = init_chat_model(
                model,
                model_provider="openai",
                base_url=self.base_url,
                api_key=self.api_key or _NO_AUTH_PLACEHOLDER,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._models[model]

    async def chat(self, model: str, system_prompt: str, user_prompt: str) -> str:
        """Envia system + user prompt e retorna o texto da resposta.

        Raises:
            EmptyLLMResponseError: se a resposta não tiver conteúdo
            Exception: erros do transporte/provider sem modificação
        """
        llm = self.get_model(model)
        response = await llm.ainvoke([
            SystemMessage(content=system_prompt),
            HumanMessage(content=user_prompt),
        ])

        content = _extract_text(response.content)
        if not content.strip():
            raise EmptyLLMResponseError(model)

        logger.debug(
            "LLM respondeu",
            model=model,
            prompt_chars=len(user_prompt),
            response_chars=len(content),
        )
        return content


def _extract_text(content) -> str:
    """Normaliza content de AIMessage (str ou lista de blocos) para texto."""
    if content is None:
        return ""
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def create_llm_client(settings: BoardSettings) -> LLMClient:
    """Cria o client a partir das configurações do bot."""
    return LLMClient(
        base_url=settings.ollama_base_url,
        api_key=settings.ollama_api_token,
        temperature=settings.llm_temperature,
        max_tokens=settings.llm_max_tokens,
        timeout=settings.llm_timeout,
    )
