"""
Configurações do Board AI Bot.

Os nomes das variáveis de ambiente não usam prefixo
(TELEGRAM_BOT_TOKEN, DB_URL, OLLAMA_BASE_URL, MODEL_STRATEGIST, ...).
"""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings

from shared.core.exceptions import ConfigurationException


class BoardSettings(BaseSettings):
    """Configurações do bot e do conselho de agentes."""

    # Obrigatórias
    telegram_bot_token: str = Field(
        default="",
        description="Token do bot no Telegram (obrigatório)"
    )
    db_url: str = Field(
        default="",
        description="URL de conexão com o PostgreSQL (obrigatório)"
    )

    # LLM (endpoint compatível com OpenAI, ex: Ollama /v1)
    ollama_base_url: str = Field(
        default="http://localhost:11434/v1",
        description="Base URL do endpoint de chat completions"
    )
    ollama_api_token: str = Field(
        default="",
        description="Bearer token do endpoint (opcional)"
    )
    llm_temperature: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Temperatura fixa para todos os agentes"
    )
    llm_max_tokens: int = Field(
        default=500,
        ge=50,
        le=8192,
        description="Máximo de tokens por resposta de agente"
    )
    llm_timeout: int = Field(
        default=1200,
        ge=10,
        description="Timeout HTTP por chamada ao LLM em segundos (modelos em CPU são lentos)"
    )

    # Modelos por papel
    model_strategist: str = Field(default="llama3:8b", description="Modelo do estrategista")
    model_financier: str = Field(default="gemma2:9b", description="Modelo do financista")
    model_auditor: str = Field(default="mistral:7b", description="Modelo do auditor")
    model_analyst: str = Field(default="qwen2.5:7b", description="Modelo do analista de mercado")
    model_moderator: str = Field(default="llama3.1:8b", description="Modelo do moderador")

    # Orchestrator
    orchestrator_timeout: int = Field(
        default=900,
        ge=30,
        description="Prazo total da sequência de agentes em segundos"
    )
    parallel_experts: bool = Field(
        default=False,
        description="Executa os quatro especialistas em paralelo (requer backend com folga)"
    )
    expert_excerpt_chars: int = Field(
        default=200,
        ge=20,
        le=4000,
        description="Caracteres de cada especialista repassados ao moderador"
    )

    # Bot
    analysis_timeout: int = Field(
        default=1200,
        ge=30,
        description="Prazo da task de análise em background em segundos"
    )
    telegram_api_url: str = Field(
        default="https://api.telegram.org",
        description="Base URL da Bot API"
    )
    telegram_poll_timeout: int = Field(
        default=50,
        ge=0,
        le=600,
        description="Timeout do long polling (getUpdates) em segundos"
    )
    report_single_message_limit: int = Field(
        default=4000,
        ge=100,
        le=4096,
        description="Relatórios menores que isso substituem a mensagem de espera"
    )
    report_chunk_size: int = Field(
        default=3900,
        ge=100,
        le=4096,
        description="Tamanho máximo de cada parte de um relatório longo"
    )
    history_page_size: int = Field(
        default=5,
        ge=1,
        le=50,
        description="Quantidade de análises exibidas no histórico"
    )
    history_idea_preview_chars: int = Field(
        default=80,
        ge=10,
        le=500,
        description="Caracteres da ideia exibidos por item do histórico"
    )
    history_per_user: bool = Field(
        default=False,
        description="Se True, o histórico mostra apenas análises do próprio usuário"
    )
    last_analysis_max_entries: int = Field(
        default=1000,
        ge=1,
        description="Usuários mantidos no cache de última análise (LRU)"
    )
    shutdown_grace_seconds: float = Field(
        default=2.0,
        ge=0.0,
        le=60.0,
        description="Espera por análises em andamento antes de cancelá-las no shutdown"
    )

    # Infra
    db_create_schema: bool = Field(
        default=True,
        description="Cria a tabela analyses no startup se não existir"
    )
    metrics_port: int = Field(
        default=0,
        ge=0,
        le=65535,
        description="Porta do endpoint Prometheus (0 desabilita)"
    )

    class Config:
        env_file = ".env"
        extra = "ignore"

    def require(self) -> "BoardSettings":
        """Valida valores obrigatórios.

        Raises:
            ConfigurationException: se TELEGRAM_BOT_TOKEN ou DB_URL estiverem vazios
        """
        missing = []
        if not self.telegram_bot_token.strip():
            missing.append("TELEGRAM_BOT_TOKEN")
        if not self.db_url.strip():
            missing.append("DB_URL")
        if missing:
            raise ConfigurationException(missing)
        return self


@lru_cache()
def get_board_settings() -> BoardSettings:
    """
    Retorna instância cacheada das configurações do bot.
    """
    return BoardSettings()
