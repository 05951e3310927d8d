"""
Atalho para as configurações gerais da aplicação.
Implementação em shared.infrastructure.config.settings.
"""
from shared.infrastructure.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
