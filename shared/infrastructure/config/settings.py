"""
Configurações gerais da aplicação Board AI.
Carrega variáveis de ambiente e define configurações compartilhadas.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Configurações da aplicação carregadas do ambiente."""

    # Aplicação
    app_name: str = "BoardAI"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = Field(
        default="INFO",
        description="Nível de log (DEBUG, INFO, WARNING, ERROR)"
    )
    environment: str = "development"

    # Database (a URL fica em BoardSettings.db_url)
    database_pool_size: int = 5
    database_max_overflow: int = 10
    database_pool_recycle: int = 300  # Reciclar conexões a cada 5 minutos
    database_pool_timeout: int = 30  # Timeout para obter conexão do pool

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """
    Retorna instância cacheada das configurações.
    Use esta função para obter as configurações em qualquer lugar da aplicação.
    """
    return Settings()
