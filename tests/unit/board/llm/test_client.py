"""
Testes do client LLM compartilhado pelos agentes.

Testa:
  - get_model: parametros fixos (temperatura, max_tokens, sem retry)
  - Cache de um chat model por nome de modelo
  - api_key placeholder quando nao ha token
  - chat: envia system + user e retorna o texto
  - Resposta vazia levanta EmptyLLMResponseError
  - Erros do provider sao propagados
"""

import pytest
from unittest.mock import patch, MagicMock, AsyncMock

from langchain_core.messages import HumanMessage, SystemMessage

from projects.board.config import BoardSettings
from projects.board.llm.client import LLMClient, create_llm_client
from shared.core.exceptions import EmptyLLMResponseError


def _make_llm(content="resposta"):
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=MagicMock(content=content))
    return llm


class TestGetModel:
    """Testes de criacao do chat model."""

    def test_init_chat_model_receives_fixed_params(self):
        """Modelo criado com provider openai, base_url e parametros fixos."""
        client = LLMClient(
            base_url="http://ollama:11434/v1/",
            api_key="tok",
            temperature=0.1,
            max_tokens=500,
            timeout=1200,
        )
        with patch("projects.board.llm.client.init_chat_model") as mock_init:
            client.get_model("llama3:8b")

        mock_init.assert_called_once_with(
            "llama3:8b",
            model_provider="openai",
            base_url="http://ollama:11434/v1",
            api_key="tok",
            temperature=0.1,
            max_tokens=500,
            timeout=1200,
            max_retries=0,
        )

    def test_placeholder_api_key_without_token(self):
        """Sem token, usa placeholder aceito pelo Ollama."""
        client = LLMClient(base_url="http://localhost:11434/v1")
        with patch("projects.board.llm.client.init_chat_model") as mock_init:
            client.get_model("mistral:7b")

        assert mock_init.call_args.kwargs["api_key"] == "ollama"

    def test_model_is_cached_per_name(self):
        """Mesmo nome reutiliza o chat model; nomes diferentes criam outro."""
        client = LLMClient(base_url="http://localhost:11434/v1")
        with patch("projects.board.llm.client.init_chat_model") as mock_init:
            mock_init.side_effect = lambda *a, **kw: MagicMock()
            first = client.get_model("llama3:8b")
            second = client.get_model("llama3:8b")
            other = client.get_model("gemma2:9b")

        assert first is second
        assert other is not first
        assert mock_init.call_count == 2


class TestChat:
    """Testes de chat()."""

    @pytest.mark.asyncio
    async def test_chat_sends_system_and_user_messages(self):
        """chat envia exatamente duas mensagens e retorna o conteudo."""
        llm = _make_llm("Analise estrategica")
        client = LLMClient(base_url="http://localhost:11434/v1")

        with patch("projects.board.llm.client.init_chat_model", return_value=llm):
            result = await client.chat("llama3:8b", "voce e estrategista", "app de cafe")

        assert result == "Analise estrategica"
        messages = llm.ainvoke.call_args.args[0]
        assert len(messages) == 2
        assert isinstance(messages[0], SystemMessage)
        assert messages[0].content == "voce e estrategista"
        assert isinstance(messages[1], HumanMessage)
        assert messages[1].content == "app de cafe"

    @pytest.mark.asyncio
    async def test_chat_joins_text_blocks(self):
        """Conteudo em blocos e concatenado."""
        llm = _make_llm([{"type": "text", "text": "parte 1 "}, {"type": "text", "text": "parte 2"}])
        client = LLMClient(base_url="http://localhost:11434/v1")

        with patch("projects.board.llm.client.init_chat_model", return_value=llm):
            result = await client.chat("m", "s", "u")

        assert result == "parte 1 parte 2"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   \n", None, []])
    async def test_empty_response_raises(self, content):
        """Resposta sem texto levanta EmptyLLMResponseError."""
        llm = _make_llm(content)
        client = LLMClient(base_url="http://localhost:11434/v1")

        with patch("projects.board.llm.client.init_chat_model", return_value=llm):
            with pytest.raises(EmptyLLMResponseError):
                await client.chat("qwen2.5:7b", "s", "u")

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self):
        """Erro do provider nao e engolido nem re-tentado."""
        llm = MagicMock()
        llm.ainvoke = AsyncMock(side_effect=ConnectionError("refused"))
        client = LLMClient(base_url="http://localhost:11434/v1")

        with patch("projects.board.llm.client.init_chat_model", return_value=llm):
            with pytest.raises(ConnectionError, match="refused"):
                await client.chat("m", "s", "u")

        assert llm.ainvoke.await_count == 1


def test_create_llm_client_from_settings():
    """create_llm_client copia os valores das configuracoes."""
    settings = BoardSettings(
        _env_file=None,
        ollama_base_url="http://gpu:11434/v1",
        ollama_api_token="secret",
        llm_temperature=0.3,
        llm_max_tokens=800,
        llm_timeout=60,
    )

    client = create_llm_client(settings)

    assert client.base_url == "http://gpu:11434/v1"
    assert client.api_key == "secret"
    assert client.temperature == 0.3
    assert client.max_tokens == 800
    assert client.timeout == 60
