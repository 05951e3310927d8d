"""
Exceções customizadas do Board AI.
"""

from typing import Any, Optional


class BoardServiceException(Exception):
    """Exceção base para erros do bot."""

    def __init__(
        self,
        message: str,
        details: Optional[dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationException(BoardServiceException):
    """Configuração obrigatória ausente ou inválida. Fatal no startup."""

    def __init__(self, missing: list[str], message: Optional[str] = None):
        super().__init__(
            message=message or f"Configuração obrigatória ausente: {', '.join(missing)}",
            details={"missing": missing}
        )


class AgentsNotInitializedException(ConfigurationException):
    """Registro de agentes não foi construído."""

    def __init__(self):
        super().__init__(["agents"], message="Agentes não inicializados")


class ModeratorUnavailableException(BoardServiceException):
    """Papel de moderador ausente no registro de agentes."""

    def __init__(self):
        super().__init__(
            message="Agente moderador não inicializado",
            details={"role": "moderator"}
        )


class AnalysisFailedException(BoardServiceException):
    """A análise não pôde ser concluída (falha do moderador ou timeout geral)."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Falha ao executar análise: {reason}",
            details={"reason": reason}
        )


class EmptyLLMResponseError(BoardServiceException):
    """O endpoint de chat retornou resposta sem conteúdo."""

    def __init__(self, model: str):
        super().__init__(
            message=f"Resposta vazia do LLM (modelo {model})",
            details={"model": model}
        )


class StorageException(BoardServiceException):
    """Erro ao ler ou gravar análises no banco."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            message=f"Erro de persistência em '{operation}': {error}",
            details={"operation": operation, "error": error}
        )


class TelegramAPIError(BoardServiceException):
    """A Bot API do Telegram respondeu com ok=false ou status HTTP de erro."""

    def __init__(self, method: str, description: str, error_code: Optional[int] = None):
        super().__init__(
            message=f"Telegram API '{method}' falhou: {description}",
            details={"method": method, "error_code": error_code}
        )
        self.method = method
        self.description = description
        self.error_code = error_code
